"""Fixed-size byte chunks holding packed little-endian column values."""

from __future__ import annotations

import struct

from .anytype import AnyValue, from_data_type
from .types import DataType, primitive_for

CHUNK_SIZE = 1024 * 1024


def to_chunked_index(index: int, chunk_capacity: int) -> tuple[int, int]:
    """Split a flat row index into (chunk index, index inside that chunk)."""
    return divmod(index, chunk_capacity)


class Chunk:
    """A buffer of ``CHUNK_SIZE`` bytes storing values of one element size."""

    __slots__ = ("element_size", "length", "buffer")

    def __init__(self, element_size: int):
        if element_size <= 0:
            raise ValueError("element size must be positive")
        self.element_size = element_size
        self.length = 0
        self.buffer = bytearray(CHUNK_SIZE)

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        return f"Chunk(element_size={self.element_size}, length={self.length})"

    @property
    def capacity(self) -> int:
        """How many values fit in the chunk."""
        return CHUNK_SIZE // self.element_size

    def is_full(self) -> bool:
        return self.length == self.capacity

    def _span(self, index: int) -> tuple[int, int]:
        start = index * self.element_size
        end = start + self.element_size
        if index < 0 or end > CHUNK_SIZE:
            raise IndexError(f"index {index} outside chunk")
        return start, end

    def get(self, index: int) -> bytes:
        """Bytes of the value at ``index``."""
        start, end = self._span(index)
        return bytes(self.buffer[start:end])

    def raw_get(self, index: int) -> bytes:
        """Bytes of the value at ``index``, read straight from the buffer."""
        start, end = self._span(index)
        return bytes(self.buffer[start:end])

    def get_four_bytes(self, index: int) -> bytes:
        """The value at ``index`` zero-padded to four bytes."""
        if self.element_size > 4:
            raise ValueError("element wider than four bytes")
        return self.get(index).ljust(4, b"\x00")

    def set(self, index: int, value: bytes) -> None:
        """Overwrite the value at ``index``."""
        if len(value) != self.element_size:
            raise ValueError(
                f"value has {len(value)} bytes, element size is {self.element_size}"
            )
        start, end = self._span(index)
        self.buffer[start:end] = value

    def push(self, value: bytes) -> int:
        """Append a value and return the index it was stored at."""
        if self.is_full():
            raise OverflowError("tried to push to full chunk")
        self.set(self.length, value)
        self.length += 1
        return self.length - 1

    def copy_from_vec(self, data: bytes) -> None:
        """Replace the chunk contents with packed ``data``."""
        size = len(data)
        if size > CHUNK_SIZE:
            raise ValueError(f"{size} bytes do not fit in a chunk")
        self.buffer[:size] = data
        self.length = size // self.element_size

    def get_any(self, index: int, data_type: DataType) -> AnyValue:
        """Decode the value at ``index`` as ``data_type``."""
        primitive = primitive_for(data_type)
        fmt = "<" + primitive.fmt
        raw = self.get(index)
        if len(raw) != struct.calcsize(fmt):
            raise ValueError(
                f"element size {len(raw)} does not match {data_type!r}"
            )
        (value,) = struct.unpack(fmt, raw)
        return from_data_type(data_type, value)
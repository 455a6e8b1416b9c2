"""A typed column: a chunked array together with its storage type."""

from __future__ import annotations

import struct
from typing import Sequence

from .anytype import AnyKind, AnyValue
from .chunk import Chunk
from .chunked_array import ChunkedArray
from .types import DataType, Field, primitive_for

_PACK_FORMATS = {
    AnyKind.BOOLEAN: "?",
    AnyKind.UINT8: "B",
    AnyKind.UINT16: "H",
    AnyKind.UINT32: "I",
    AnyKind.UINT64: "Q",
    AnyKind.INT8: "b",
    AnyKind.INT16: "h",
    AnyKind.INT32: "i",
    AnyKind.INT64: "q",
    AnyKind.FLOAT32: "f",
    AnyKind.FLOAT64: "d",
    AnyKind.DATE32: "i",
    AnyKind.DATE64: "q",
    AnyKind.TIME32: "i",
    AnyKind.TIME64: "q",
    AnyKind.DURATION: "q",
    AnyKind.TIMESTAMP: "q",
    AnyKind.INTERVAL_DAY_TIME: "q",
    AnyKind.INTERVAL_YEAR_MONTH: "i",
}


def _pack(item: AnyValue) -> bytes | None:
    """Little-endian bytes of a value; ``None`` for null."""
    if item.kind is AnyKind.NULL:
        return None
    return struct.pack("<" + _PACK_FORMATS[item.kind], item.value)


class Series:
    """A named column of one primitive type."""

    def __init__(self, array: ChunkedArray):
        self.array = array

    @classmethod
    def new_from_name(cls, data_type: DataType, name: str, line_cnt: int) -> Series:
        """Empty series sized for ``line_cnt`` rows of ``data_type``."""
        return cls(ChunkedArray.new_from_name(primitive_for(data_type), name, line_cnt))

    @classmethod
    def from_raw(cls, field: Field, chunks: list[Chunk]) -> Series:
        return cls(ChunkedArray.from_raw(field, chunks))

    def into_raw(self) -> tuple[Field, list[Chunk]]:
        return self.array.into_raw()

    def __repr__(self) -> str:
        return f"Series(name={self.name!r}, dtype={self.dtype!r}, len={len(self)})"

    @property
    def name(self) -> str:
        return self.array.name

    def rename(self, name: str) -> None:
        self.array.rename(name)

    @property
    def dtype(self) -> DataType:
        return self.array.dtype

    @property
    def chunks(self) -> list[Chunk]:
        """The chunks backing this series."""
        return self.array.chunks

    def n_chunks(self) -> int:
        return self.array.chunks_num()

    def __len__(self) -> int:
        return len(self.array)

    def take_iter_unchecked(self, src_chunks: Sequence[Chunk], indices: Sequence[int]) -> None:
        """Fill this series with the source values at ``indices``."""
        self.array.take_unchecked(src_chunks, indices)

    def rawget(self, index: int) -> AnyValue:
        """A single value; slow, meant for inspection."""
        return self.array.rawget(index)

    def get(self, index: int) -> AnyValue:
        return self.array.get(index)

    def push_item(self, item: AnyValue, row_id: int) -> None:
        """Append ``item`` as row ``row_id``; null values are rejected."""
        self.array.push(_pack(item), row_id)
"""A typed column stored as a list of fixed-size chunks."""

from __future__ import annotations

from typing import Sequence

from .anytype import AnyValue
from .chunk import CHUNK_SIZE, Chunk, to_chunked_index
from .types import DataType, Field, PrimitiveType, primitive_for


class ChunkedArray:
    """A column of one primitive type split over chunks."""

    def __init__(self, primitive: PrimitiveType, field: Field, chunks: list[Chunk]):
        self.primitive = primitive
        self.field = field
        self.chunks = list(chunks)

    @classmethod
    def new_from_name(cls, primitive: PrimitiveType, name: str, line_cnt: int) -> ChunkedArray:
        """Empty array with enough chunks allocated for ``line_cnt`` rows."""
        field = Field(name, primitive.data_type, True)
        element_size = primitive.element_size
        chunk_num = line_cnt * element_size // CHUNK_SIZE + 1
        return cls(primitive, field, [Chunk(element_size) for _ in range(chunk_num)])

    @classmethod
    def from_raw(cls, field: Field, chunks: list[Chunk]) -> ChunkedArray:
        return cls(primitive_for(field.data_type), field, chunks)

    def into_raw(self) -> tuple[Field, list[Chunk]]:
        return self.field, self.chunks

    def chunks_num(self) -> int:
        return len(self.chunks)

    def __len__(self) -> int:
        return sum(len(chunk) for chunk in self.chunks)

    @property
    def dtype(self) -> DataType:
        return self.field.data_type

    @property
    def name(self) -> str:
        return self.field.name

    def rename(self, name: str) -> None:
        self.field.rename(name)

    @property
    def chunk_capacity(self) -> int:
        """Values per chunk for this array's type."""
        return CHUNK_SIZE // (self.primitive.bit_width // 8)

    def push_value(self, item: bytes, row_id: int) -> None:
        """Append the packed value for row ``row_id``; rows must come in order."""
        if len(item) != self.primitive.bit_width // 8:
            raise ValueError("Item size does not match array size")
        chunk_id, chunk_index = to_chunked_index(row_id, self.chunk_capacity)
        try:
            chunk = self.chunks[chunk_id]
        except IndexError:
            raise IndexError(f"row {row_id} beyond allocated chunks") from None
        if chunk.push(item) != chunk_index:
            raise ValueError("Chunk index does not match")

    def push(self, item: bytes | None, row_id: int) -> None:
        """Append a value; null values are not supported."""
        if item is None:
            raise ValueError("Item is None")
        self.push_value(item, row_id)

    def take_unchecked(self, src_chunks: Sequence[Chunk], indices: Sequence[int]) -> None:
        """Fill this array with the source values at ``indices``, in order."""
        capacity = self.chunk_capacity
        element_size = self.primitive.element_size
        if any(src.element_size != element_size for src in src_chunks):
            raise ValueError("source element size does not match")
        total = len(indices)
        full_chunks = total // capacity
        for new_chunk_idx, chunk in enumerate(self.chunks):
            chunk.length = capacity if new_chunk_idx < full_chunks else total % capacity
            start = new_chunk_idx * capacity
            for offset, src_id in enumerate(indices[start:start + chunk.length]):
                src_chunk_idx, src_idx = to_chunked_index(src_id, capacity)
                src = src_chunks[src_chunk_idx]
                src_start = src_idx * element_size
                dst_start = offset * element_size
                chunk.buffer[dst_start:dst_start + element_size] = src.buffer[
                    src_start:src_start + element_size
                ]

    def rawget(self, index: int) -> AnyValue:
        """Decode a single value; slow, meant for inspection."""
        chunk_idx, idx = to_chunked_index(index, self.chunk_capacity)
        return self.chunks[chunk_idx].get_any(idx, self.primitive.data_type)

    def get(self, index: int) -> AnyValue:
        """Decode a single value."""
        return self.rawget(index)

    def get_four_bytes(self, index: int) -> bytes:
        chunk_idx, idx = to_chunked_index(index, self.chunk_capacity)
        return self.chunks[chunk_idx].get_four_bytes(idx)
"""Grouping rows by key columns and aggregating values per group."""

from __future__ import annotations

import struct
from enum import Enum
from functools import reduce
from typing import TYPE_CHECKING, Callable, Iterator, Sequence

from .anytype import is_numeric
from .chunk import CHUNK_SIZE, Chunk, to_chunked_index
from .errors import NotFound
from .helpers import datatype_size
from .series import Series
from .types import DataType, Field, primitive_for

if TYPE_CHECKING:
    from .frame import DataFrame

GroupTuples = tuple[list[int], list[int], list[int]]

_KEY_WIDTH = 4
_FLOAT64_CAPACITY = CHUNK_SIZE // 8


class AggType(Enum):
    """Aggregations a benchmark query can ask for."""

    SUM = "Sum"
    MIN = "Min"
    MAX = "Max"
    MEAN = "Mean"


def _decoder(data_type: DataType) -> Callable[[bytes], float]:
    if data_type == DataType.INT32:
        # Read as unsigned, as the stored bits are reinterpreted without sign.
        return lambda raw: float(int.from_bytes(raw, "little"))
    if data_type == DataType.FLOAT64:
        return lambda raw: struct.unpack("<d", raw)[0]
    raise NotImplementedError(f"aggregating {data_type!r} not implemented")


def _group_values(
    data_type: DataType,
    src_chunks: Sequence[Chunk],
    indices: Sequence[int],
    groups: Sequence[int],
) -> Iterator[list[float]]:
    decode = _decoder(data_type)
    capacity = CHUNK_SIZE // datatype_size(data_type)
    ends = [*indices[1:], len(groups)]
    for start, end in zip(indices, ends):
        values = []
        for row in groups[start:end]:
            chunk_idx, idx = to_chunked_index(row, capacity)
            values.append(decode(src_chunks[chunk_idx].raw_get(idx)))
        yield values


def _to_float64_chunks(values: list[float]) -> list[Chunk]:
    _, chunks = Series.new_from_name(DataType.FLOAT64, "agg", len(values)).into_raw()
    for idx, chunk in enumerate(chunks):
        part = values[idx * _FLOAT64_CAPACITY:(idx + 1) * _FLOAT64_CAPACITY]
        chunk.copy_from_vec(struct.pack(f"<{len(part)}d", *part))
    return chunks


def _minimum(values: list[float]) -> float:
    if not values:
        raise ValueError("cannot take the minimum of an empty group")
    return reduce(lambda current, value: current if current < value else value, values)


def agg_min(
    data_type: DataType,
    src_chunks: Sequence[Chunk],
    indices: Sequence[int],
    groups: Sequence[int],
) -> list[Chunk]:
    """Float64 chunks with the minimum of each group."""
    mins = [_minimum(v) for v in _group_values(data_type, src_chunks, indices, groups)]
    return _to_float64_chunks(mins)


def agg_sum(
    data_type: DataType,
    src_chunks: Sequence[Chunk],
    indices: Sequence[int],
    groups: Sequence[int],
) -> list[Chunk]:
    """Float64 chunks with the sum of each group."""
    sums = [sum(v, 0.0) for v in _group_values(data_type, src_chunks, indices, groups)]
    return _to_float64_chunks(sums)


def _four_byte_values(chunk: Chunk) -> list[bytes]:
    view = memoryview(chunk.buffer)
    size = len(chunk) * _KEY_WIDTH
    return [view[o:o + _KEY_WIDTH].tobytes() for o in range(0, size, _KEY_WIDTH)]


def group_tuples(
    data_types: Sequence[DataType], arrays: Sequence[Sequence[Chunk]]
) -> GroupTuples:
    """Group rows by their key values.

    Returns the first row of each group, the offset of each group in the third
    list, and the rows of all groups laid end to end.
    """
    for data_type in data_types:
        if datatype_size(data_type) != _KEY_WIDTH:
            raise NotImplementedError("not implemented!")
    if not arrays:
        raise ValueError("no key columns given")

    capacity = CHUNK_SIZE // _KEY_WIDTH
    table: dict[tuple[bytes, ...], list[int]] = {}
    for chunk_idx, chunks in enumerate(zip(*arrays)):
        columns = [_four_byte_values(chunk) for chunk in chunks]
        for row, key in enumerate(zip(*columns), start=chunk_idx * capacity):
            table.setdefault(key, []).append(row)

    keyv: list[int] = []
    indv: list[int] = []
    groupv: list[int] = []
    for rows in table.values():
        keyv.append(rows[0])
        indv.append(len(groupv))
        groupv.extend(rows)
    return keyv, indv, groupv


class GroupBy:
    """The groups of a data frame for a set of key columns."""

    def __init__(self, df: DataFrame, by: Sequence[str], groups: GroupTuples):
        self.df = df
        self.by = list(by)
        self._groups = groups
        self.selection: str | None = None

    def select(self, name: str) -> None:
        """Choose the column to aggregate."""
        self.selection = name

    @property
    def groups(self) -> GroupTuples:
        return self._groups

    def keys(self) -> list[Series]:
        """The key columns, one row per group."""
        drop_names = [name for name in self.df.columns() if name not in self.by]
        frame = self.df.take_iter_unchecked(self._groups[0], drop_names)
        return list(frame.get_columns())

    def _aggregate(self, name: str, aggregate) -> Series:
        column = self.df.column(name)
        if column is None:
            raise NotFound()
        if not is_numeric(primitive_for(column.dtype)):
            raise NotImplementedError(f"aggregating {column.dtype!r} not implemented")
        _, indices, groups = self._groups
        chunks = aggregate(column.dtype, column.chunks, indices, groups)
        return Series.from_raw(Field(f"{name}_sum", DataType.FLOAT64, True), chunks)

    def sum_series(self, name: str) -> Series:
        """Per-group sums of the named column, named ``<name>_sum``."""
        return self._aggregate(name, agg_sum)

    def min_series(self, name: str) -> Series:
        """Per-group minimums of the named column, also named ``<name>_sum``."""
        return self._aggregate(name, agg_min)
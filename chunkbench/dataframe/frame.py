"""A data frame made of named series, with row take and grouping."""

from __future__ import annotations

from typing import Iterable, Sequence

from .anytype import AnyValue, is_integer
from .chunk import Chunk
from .errors import NoData, NotFound
from .groupby import GroupBy, group_tuples
from .series import Series
from .types import DataType, Field, primitive_for


def take_unchecked(
    data_type: DataType, src_chunks: Sequence[Chunk], indices: Sequence[int]
) -> list[Chunk]:
    """New chunks holding the source values at ``indices``, in that order."""
    series = Series.new_from_name(data_type, "tmp", len(indices))
    series.take_iter_unchecked(src_chunks, indices)
    _, chunks = series.into_raw()
    return chunks


class DataFrame:
    """An ordered collection of series."""

    def __init__(self, columns: Iterable[Series] = ()):
        self._columns: list[Series] = list(columns)

    def __repr__(self) -> str:
        return f"DataFrame(columns={self.columns()!r})"

    def _name_to_idx(self, name: str) -> int:
        idx = self.find_idx_by_name(name)
        if idx is None:
            raise NotFound()
        return idx

    def get_columns(self) -> list[Series]:
        """The series of this frame."""
        return self._columns

    def columns(self) -> list[str]:
        """Column names, in order."""
        return [series.name for series in self._columns]

    def n_chunks(self) -> int:
        """Number of chunks of the first column."""
        if not self._columns:
            raise NoData()
        return self._columns[0].n_chunks()

    def width(self) -> int:
        return len(self._columns)

    def drop_in_place(self, name: str) -> Series:
        """Remove the named column and return it."""
        return self._columns.pop(self._name_to_idx(name))

    def select_idx(self, idx: int) -> Series | None:
        """The column at ``idx``, or ``None`` when out of range."""
        if 0 <= idx < len(self._columns):
            return self._columns[idx]
        return None

    def f_select_idx(self, idx: int) -> Series:
        series = self.select_idx(idx)
        if series is None:
            raise IndexError("out of bounds")
        return series

    def find_idx_by_name(self, name: str) -> int | None:
        """Index of the first column with this name."""
        return next(
            (idx for idx, series in enumerate(self._columns) if series.name == name),
            None,
        )

    def column(self, name: str) -> Series | None:
        """The named column, or ``None``."""
        idx = self.find_idx_by_name(name)
        return None if idx is None else self._columns[idx]

    def f_column(self, name: str) -> Series:
        series = self.column(name)
        if series is None:
            raise KeyError(f"name {name} does not exist on dataframe")
        return series

    def get(self, idx: int) -> list[AnyValue]:
        """The values of row ``idx`` across all columns."""
        return [series.get(idx) for series in self._columns]

    def take_iter_unchecked(
        self, indices: Sequence[int], drop_names: Iterable[str] = ()
    ) -> DataFrame:
        """A new frame of the rows at ``indices``, leaving out ``drop_names``."""
        dropped = set(drop_names)
        results = []
        for series in self._columns:
            if series.name in dropped:
                continue
            chunks = take_unchecked(series.dtype, series.chunks, indices)
            results.append(Series.from_raw(Field(series.name, series.dtype, True), chunks))
        return DataFrame(results)

    def groupby(self, by: Iterable[str]) -> GroupBy:
        """Group the rows by the values of the named integer columns."""
        names = list(by)
        if not names:
            raise ValueError("no grouping columns given")
        key_columns = []
        for name in names:
            series = self.column(name)
            if series is None:
                raise NotFound()
            key_columns.append(series)
        if not is_integer(primitive_for(key_columns[0].dtype)):
            raise NotImplementedError(
                f"grouping by {key_columns[0].dtype!r} not implemented"
            )
        groups = group_tuples(
            [series.dtype for series in key_columns],
            [series.chunks for series in key_columns],
        )
        return GroupBy(self, names, groups)
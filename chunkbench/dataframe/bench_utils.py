"""Loading benchmark frames from CSV and reporting their rows and timings."""

from __future__ import annotations

import csv
import struct
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Sequence, TextIO

from .anytype import AnyKind, AnyValue
from .csv_input import read_series
from .errors import DataTypeMismatch
from .frame import DataFrame
from .series import Series
from .types import DataType, Field


class DSize(Enum):
    """Size class of a benchmark data set."""

    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    HUGE = "Huge"

    def __str__(self) -> str:
        return self.value


def read_csv_from_file(
    path: str | Path, types: Sequence[DataType], line_cnt: int
) -> DataFrame:
    """Load every column of a CSV file with a header row into a data frame."""
    with open(path, newline="") as handle:
        headers = next(csv.reader(handle), [])
    if len(headers) != len(types):
        raise DataTypeMismatch()
    with ThreadPoolExecutor(max_workers=max(1, len(types))) as pool:
        jobs = [
            pool.submit(read_series, path, data_type, series_id, line_cnt)
            for series_id, data_type in enumerate(types)
        ]
        chunk_lists = [job.result() for job in jobs]
    series = [
        Series.from_raw(Field(name, data_type, True), chunks)
        for name, data_type, chunks in zip(headers, types, chunk_lists)
    ]
    return DataFrame(series)


def _positional(text: str) -> str:
    rendered = format(Decimal(text), "f")
    if "." in rendered:
        rendered = rendered.rstrip("0").rstrip(".")
    return rendered


def _display_float(value: float, single: bool) -> str:
    if value != value:
        return "NaN"
    if value in (float("inf"), float("-inf")):
        return "inf" if value > 0 else "-inf"
    if not single:
        return _positional(repr(value))
    packed = struct.pack("<f", value)
    for precision in range(1, 10):
        text = f"{value:.{precision}g}"
        if struct.pack("<f", float(text)) == packed:
            return _positional(text)
    return _positional(repr(value))


_LABELS = {
    AnyKind.BOOLEAN: "bool",
    AnyKind.UINT8: "u8",
    AnyKind.UINT16: "u16",
    AnyKind.UINT32: "u32",
    AnyKind.UINT64: "u64",
    AnyKind.INT8: "i8",
    AnyKind.INT16: "i16",
    AnyKind.INT32: "i32",
    AnyKind.INT64: "i64",
    AnyKind.FLOAT32: "f32",
    AnyKind.FLOAT64: "f64",
}


def _format_value(value: AnyValue) -> str:
    label = _LABELS.get(value.kind)
    if label is None:
        return "other"
    if value.kind is AnyKind.BOOLEAN:
        text = "true" if value.value else "false"
    elif value.kind in (AnyKind.FLOAT32, AnyKind.FLOAT64):
        text = _display_float(value.value, value.kind is AnyKind.FLOAT32)
    else:
        text = str(value.value)
    return f"{label}: {text} "


def format_rows(df: DataFrame, rows: int = 5) -> list[str]:
    """One line per leading row, each value labelled with its type."""
    return ["".join(_format_value(v) for v in df.get(idx)) for idx in range(rows)]


def print_time(time: int, accum_time: int, out: TextIO, dataset_size: DSize) -> None:
    """Record a query time in ``out`` and echo it on standard output."""
    out.write(f"query {dataset_size.value}, {time}ms, accum: {accum_time} ms\n")
    print(f"query: {time} ms, accum: {accum_time} ms")
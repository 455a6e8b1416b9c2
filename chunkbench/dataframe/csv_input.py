"""Loading a single CSV column into chunks."""

from __future__ import annotations

import csv
from pathlib import Path

from .anytype import from_data_type
from .chunk import Chunk
from .series import Series
from .types import DataType


def read_series(
    path: str | Path, data_type: DataType, series_id: int, line_count: int
) -> list[Chunk]:
    """Parse column ``series_id`` of a CSV file with a header row into chunks."""
    with open(path, newline="") as handle:
        reader = csv.reader(handle)
        headers = next(reader, [])
        if series_id < 0 or series_id >= len(headers):
            raise IndexError("Series id is out of bound")
        series = Series.new_from_name(data_type, headers[series_id], line_count)
        for line_id, record in enumerate(reader):
            series.push_item(from_data_type(data_type, record[series_id]), line_id)
    _, chunks = series.into_raw()
    return chunks
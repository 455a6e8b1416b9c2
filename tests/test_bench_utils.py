import io

import pytest

from chunkbench.dataframe.bench_utils import (
    DSize,
    format_rows,
    print_time,
    read_csv_from_file,
)
from chunkbench.dataframe.errors import DataTypeMismatch
from chunkbench.dataframe.types import DataType


@pytest.fixture
def csv_path(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("id1,v1\n3,1.5\n7,2.25\n3,-4.5\n")
    return path


def test_read_csv_columns(csv_path):
    df = read_csv_from_file(csv_path, [DataType.UINT32, DataType.FLOAT64], 3)
    assert df.columns() == ["id1", "v1"]
    assert [len(s) for s in df.get_columns()] == [3, 3]


def test_read_csv_values(csv_path):
    df = read_csv_from_file(csv_path, [DataType.UINT32, DataType.FLOAT64], 3)
    row = df.get(1)
    assert row[0].value == 7
    assert row[1].value == 2.25


def test_read_csv_type_count_mismatch(csv_path):
    with pytest.raises(DataTypeMismatch):
        read_csv_from_file(csv_path, [DataType.UINT32], 3)


def test_format_rows(csv_path):
    df = read_csv_from_file(csv_path, [DataType.UINT32, DataType.FLOAT64], 3)
    assert format_rows(df, 3) == [
        "u32: 3 f64: 1.5 ",
        "u32: 7 f64: 2.25 ",
        "u32: 3 f64: -4.5 ",
    ]


def test_format_rows_count(csv_path):
    df = read_csv_from_file(csv_path, [DataType.UINT32, DataType.FLOAT64], 3)
    assert len(format_rows(df, 2)) == 2


def test_format_whole_float(tmp_path):
    path = tmp_path / "f.csv"
    path.write_text("v\n2.0\n")
    df = read_csv_from_file(path, [DataType.FLOAT64], 1)
    assert format_rows(df, 1) == ["f64: 2 "]


def test_print_time(capsys):
    out = io.StringIO()
    print_time(12, 30, out, DSize.SMALL)
    assert out.getvalue() == "query Small, 12ms, accum: 30 ms\n"
    assert capsys.readouterr().out == "query: 12 ms, accum: 30 ms\n"


def test_print_time_names_huge_dataset(capsys):
    out = io.StringIO()
    print_time(1, 2, out, DSize.HUGE)
    assert out.getvalue() == "query Huge, 1ms, accum: 2 ms\n"
    assert capsys.readouterr().out == "query: 1 ms, accum: 2 ms\n"
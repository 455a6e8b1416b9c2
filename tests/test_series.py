import pytest

from chunkbench.dataframe.anytype import AnyKind, AnyValue, from_data_type
from chunkbench.dataframe.series import Series
from chunkbench.dataframe.types import DataType, Field, TimeUnit


def _filled(data_type, values, name="col"):
    series = Series.new_from_name(data_type, name, len(values))
    for row, value in enumerate(values):
        series.push_item(from_data_type(data_type, value), row)
    return series


def test_new_series_is_empty():
    series = Series.new_from_name(DataType.INT32, "v1", 10)
    assert series.name == "v1"
    assert series.dtype == DataType.INT32
    assert len(series) == 0
    assert series.n_chunks() == 1


@pytest.mark.parametrize(
    "data_type, values",
    [
        (DataType.BOOLEAN, [True, False, True]),
        (DataType.UINT8, [0, 255, 7]),
        (DataType.INT16, [-3, 300, 0]),
        (DataType.INT32, [1, -2, 3]),
        (DataType.UINT64, [0, 2**64 - 1, 5]),
        (DataType.FLOAT32, [1.5, -0.25, 0.0]),
        (DataType.FLOAT64, [3.25, -1.0, 1e10]),
        (DataType.date32(), [0, 19000, -1]),
        (DataType.duration(TimeUnit.SECOND), [10, -10, 0]),
        (DataType.time64(TimeUnit.NANOSECOND), [1, 2, 3]),
    ],
)
def test_push_and_get_round_trip(data_type, values):
    series = _filled(data_type, values)
    assert len(series) == len(values)
    for row, value in enumerate(values):
        assert series.get(row) == from_data_type(data_type, value)
        assert series.rawget(row) == series.get(row)


def test_get_returns_unit_for_timestamp():
    series = _filled(DataType.timestamp(TimeUnit.MILLISECOND), [42])
    value = series.get(0)
    assert value.kind is AnyKind.TIMESTAMP
    assert value.value == 42
    assert value.unit is TimeUnit.MILLISECOND


def test_timestamp_with_timezone_is_supported():
    series = Series.new_from_name(DataType.timestamp(TimeUnit.SECOND, "+07:30"), "ts", 1)
    series.push_item(AnyValue(AnyKind.TIMESTAMP, 9, TimeUnit.SECOND), 0)
    assert series.get(0).value == 9


def test_push_null_raises():
    series = Series.new_from_name(DataType.INT32, "v", 1)
    with pytest.raises(ValueError):
        series.push_item(AnyValue(), 0)


def test_push_wrong_width_raises():
    series = Series.new_from_name(DataType.INT32, "v", 1)
    with pytest.raises(ValueError):
        series.push_item(AnyValue(AnyKind.INT64, 1), 0)


def test_unsupported_type_raises():
    with pytest.raises(NotImplementedError):
        Series.new_from_name(DataType.UTF8, "s", 1)


def test_rename_changes_name():
    series = Series.new_from_name(DataType.FLOAT64, "v3", 1)
    series.rename("v3_sum")
    assert series.name == "v3_sum"
    field, _ = series.into_raw()
    assert field.name == "v3_sum"


def test_into_raw_from_raw_round_trip():
    series = _filled(DataType.INT64, [5, 6, 7], name="id")
    field, chunks = series.into_raw()
    rebuilt = Series.from_raw(field, chunks)
    assert rebuilt.name == "id"
    assert rebuilt.dtype == DataType.INT64
    assert [rebuilt.get(i).value for i in range(3)] == [5, 6, 7]


def test_take_iter_unchecked_reorders():
    source = _filled(DataType.INT32, [10, 20, 30, 40])
    indices = [3, 0, 2]
    taken = Series.new_from_name(DataType.INT32, "tmp", len(indices))
    taken.take_iter_unchecked(source.chunks, indices)
    assert len(taken) == len(indices)
    assert [taken.get(i) for i in range(3)] == [source.get(i) for i in indices]
import pytest

from chunkbench.dataframe.anytype import from_data_type
from chunkbench.dataframe.errors import NotFound
from chunkbench.dataframe.frame import DataFrame
from chunkbench.dataframe.groupby import (
    AggType,
    agg_min,
    agg_sum,
    group_tuples,
)
from chunkbench.dataframe.series import Series
from chunkbench.dataframe.types import DataType, Field

ID1 = [1, 2, 1, 3, 2]
ID2 = [10, 10, 10, 20, 30]
V1 = [5, 6, 7, 8, 9]
V3 = [0.5, 1.5, 2.5, 3.5, 4.5]


def make_series(name, dtype, values):
    series = Series.new_from_name(dtype, name, len(values))
    for row, value in enumerate(values):
        series.push_item(from_data_type(dtype, value), row)
    return series


def values_of(series):
    return [series.get(i).value for i in range(len(series))]


def as_float_series(chunks):
    return Series.from_raw(Field("r", DataType.FLOAT64, True), chunks)


def members(groups):
    keyv, indv, groupv = groups
    ends = indv[1:] + [len(groupv)]
    return [groupv[start:end] for start, end in zip(indv, ends)]


@pytest.fixture
def df():
    return DataFrame(
        [
            make_series("id1", DataType.UINT32, ID1),
            make_series("id2", DataType.UINT32, ID2),
            make_series("v1", DataType.INT32, V1),
            make_series("v3", DataType.FLOAT64, V3),
        ]
    )


def test_group_tuples_single_key():
    col = make_series("k", DataType.UINT32, ID1)
    groups = group_tuples([DataType.UINT32], [col.chunks])
    keyv, indv, groupv = groups
    assert sorted(groupv) == list(range(len(ID1)))
    parts = members(groups)
    assert [part[0] for part in parts] == keyv
    for part in parts:
        assert len({ID1[row] for row in part}) == 1
    assert len({ID1[part[0]] for part in parts}) == len(parts)


def test_group_tuples_two_keys():
    a = make_series("a", DataType.UINT32, ID1)
    b = make_series("b", DataType.UINT32, ID2)
    groups = group_tuples([DataType.UINT32, DataType.UINT32], [a.chunks, b.chunks])
    parts = members(groups)
    pairs = list(zip(ID1, ID2))
    assert len(parts) == len(set(pairs))
    for part in parts:
        assert len({pairs[row] for row in part}) == 1


def test_group_tuples_rejects_wide_keys():
    col = make_series("k", DataType.INT64, [1, 2])
    with pytest.raises(NotImplementedError):
        group_tuples([DataType.INT64], [col.chunks])


def test_agg_sum_single_row_groups():
    src = make_series("v", DataType.INT32, V1)
    chunks = agg_sum(DataType.INT32, src.chunks, [0, 1, 2], [4, 0, 2])
    assert values_of(as_float_series(chunks)) == [float(V1[4]), float(V1[0]), float(V1[2])]


def test_agg_sum_float_group():
    src = make_series("v", DataType.FLOAT64, [1.5, 2.5, 4.0])
    chunks = agg_sum(DataType.FLOAT64, src.chunks, [0, 2], [0, 1, 2])
    assert values_of(as_float_series(chunks)) == [4.0, 4.0]


def test_agg_sum_reads_int32_unsigned():
    src = make_series("v", DataType.INT32, [-1])
    chunks = agg_sum(DataType.INT32, src.chunks, [0], [0])
    assert values_of(as_float_series(chunks)) == [float(2**32 - 1)]


def test_agg_min_whole_column():
    src = make_series("v", DataType.FLOAT64, V3[::-1])
    chunks = agg_min(DataType.FLOAT64, src.chunks, [0], list(range(len(V3))))
    assert values_of(as_float_series(chunks)) == [min(V3)]


def test_agg_min_empty_group_raises():
    src = make_series("v", DataType.INT32, V1)
    with pytest.raises(ValueError):
        agg_min(DataType.INT32, src.chunks, [0, 0], [1])


def test_agg_unsupported_type_raises():
    src = make_series("v", DataType.INT64, [1, 2])
    with pytest.raises(NotImplementedError):
        agg_sum(DataType.INT64, src.chunks, [0], [0, 1])


def test_keys_one_row_per_group(df):
    grouped = df.groupby(["id1"])
    keyv = grouped.groups[0]
    keys = grouped.keys()
    assert [s.name for s in keys] == ["id1"]
    assert values_of(keys[0]) == [ID1[row] for row in keyv]


def test_sum_series(df):
    grouped = df.groupby(["id1"])
    result = grouped.sum_series("v1")
    assert result.name == "v1_sum"
    assert result.dtype == DataType.FLOAT64
    sums = values_of(result)
    assert len(sums) == len(grouped.groups[0])
    assert sum(sums) == float(sum(V1))
    by_key = dict(zip((ID1[r] for r in grouped.groups[0]), sums))
    assert by_key[1] == 12.0


def test_min_series_keeps_source_name(df):
    grouped = df.groupby(["id1", "id2"])
    result = grouped.min_series("v3")
    assert result.name == "v3_sum"
    # V3 increases with row, so each group's minimum is its first row.
    assert values_of(result) == [V3[row] for row in grouped.groups[0]]


def test_aggregate_missing_column(df):
    grouped = df.groupby(["id1"])
    with pytest.raises(NotFound):
        grouped.sum_series("nope")
    with pytest.raises(NotFound):
        grouped.min_series("nope")


def test_select_sets_selection(df):
    grouped = df.groupby(["id1"])
    grouped.select("v1")
    assert grouped.selection == "v1"


def test_agg_type_lookup_by_name():
    names = ["Sum", "Min", "Max", "Mean"]
    assert [AggType(name) for name in names] == list(AggType)
    with pytest.raises(ValueError):
        AggType("Median")
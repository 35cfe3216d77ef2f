import pyarrow as pa
import pytest

from framepyground.core import Indexer
from framepyground.errors import GroupNotFound, LengthMismatch
from framepyground.frame import DataFrame, GroupBy, Series

TEST_DATA = DataFrame.from_dict(
    {
        "city": ["New York", "New York", "Los Angeles", "Los Angeles", "New York"],
        "shop": ["Shop A", "Shop B", "Shop A", "Shop A2", "Shop B"],
        "n_employees": [10, 15, 8, 12, 20],
    }
)


@pytest.fixture
def series():
    return Series([1, 2, 3, 4, 5], index=[10, 20, 30, 40, 50])


def test_get_group():
    s = Series([1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
    sg = GroupBy(s, [1, 1, 1, 2, 2, 2])
    assert len(sg.groups()) == 2

    s1 = sg.get_group(1)
    assert s1.to_pylist() == [1.0, 2.0, 3.0]
    assert s1.index == Indexer([0, 1, 2])

    s2 = sg.get_group(2)
    assert s2.to_pylist() == [4.0, 5.0, 6.0]
    assert s2.index == Indexer([3, 4, 5])


def test_get_group_keeps_row_order():
    s = Series(["a", "b", "c", "d"])
    sg = s.groupby(["y", "x", "y", "y"])
    assert sg.get_group("y").to_pylist() == ["a", "c", "d"]
    assert sg.get_group("y").index.labels == (0, 2, 3)


def test_get_group_not_found(series):
    sg = series.groupby([1, 1, 1, 2, 2])
    with pytest.raises(GroupNotFound):
        sg.get_group(3)


def test_length_mismatch(series):
    with pytest.raises(LengthMismatch):
        series.groupby([1, 2])
    with pytest.raises(LengthMismatch):
        TEST_DATA.groupby(["a"])


@pytest.mark.parametrize(
    "keys",
    [
        [3, 1, 2, 1, 3],
        ["b", "a", "b", "c", "a"],
        pa.array([2.5, 0.5, 2.5, 2.5, 0.5]),
    ],
)
def test_groups_sorted_and_partition_rows(series, keys):
    sg = series.groupby(keys)
    groups = sg.groups()
    key_values = keys.to_pylist() if isinstance(keys, pa.Array) else keys
    assert groups == sorted(set(key_values))
    assert sum(len(sg.get_group(g)) for g in groups) == len(series)


def test_sum_integer_grouper(series):
    res = series.groupby([1, 1, 1, 2, 2]).sum()
    assert res.to_pylist() == [6, 9]
    assert res.index == Indexer([1, 2])


def test_sum_str_grouper(series):
    res = series.groupby(["A", "A", "A", "B", "B"]).sum()
    assert res.to_pylist() == [6, 9]
    assert res.index == Indexer(["A", "B"])


def test_mean_integer_grouper(series):
    res = series.groupby([1, 1, 1, 2, 2]).mean()
    assert res.to_pylist() == pytest.approx([2.0, 4.5])
    assert res.index == Indexer([1, 2])


def test_series_key_grouper(series):
    keys = Series([2, 1, 2, 1, 2])
    res = series.groupby(keys).count()
    assert res.index == Indexer([1, 2])
    assert res.to_pylist() == [2, 3]


@pytest.mark.parametrize(
    "method,expected",
    [
        ("count", [3, 2]),
        ("min", [1, 4]),
        ("max", [3, 5]),
        ("var", [2 / 3, 0.25]),
        ("unbiased_var", [1.0, 0.5]),
        ("std", [(2 / 3) ** 0.5, 0.5]),
        ("unbiased_std", [1.0, 0.5**0.5]),
    ],
)
def test_series_aggregations(series, method, expected):
    res = getattr(series.groupby([1, 1, 1, 2, 2]), method)()
    assert res.index.labels == (1, 2)
    assert res.to_pylist() == pytest.approx(expected)


def test_apply_called_once_per_group_in_sorted_order(series):
    seen = []

    def record(group):
        seen.append(group.to_pylist())
        return len(group)

    res = series.groupby(["b", "a", "b", "c", "a"]).apply(record)
    assert seen == [[2, 5], [1, 3], [4]]
    assert res.index.labels == ("a", "b", "c")
    assert res.to_pylist() == [2, 2, 1]


def test_dataframe_get_group():
    grouped = TEST_DATA.groupby(TEST_DATA.get("city"))
    assert grouped.groups() == ["Los Angeles", "New York"]
    ny = grouped.get_group("New York")
    assert isinstance(ny, DataFrame)
    assert ny.index.labels == (0, 1, 4)
    assert ny.get("shop").to_pylist() == ["Shop A", "Shop B", "Shop B"]


def test_dataframe_sum():
    res = TEST_DATA.groupby(TEST_DATA.get("city")).sum()
    assert isinstance(res, DataFrame)
    assert res.index.labels == ("Los Angeles", "New York")
    assert res.columns.labels == ("n_employees",)
    assert res.get("n_employees").to_pylist() == [20, 45]


def test_dataframe_aggregations_multiple_columns():
    df = DataFrame.from_dict(
        {"a": [1, 2, 3, 4, 5], "b": [1.0, 2.0, 3.0, 4.0, 5.0], "name": list("vwxyz")}
    )
    res = df.groupby([1, 1, 1, 2, 2]).mean()
    assert res.columns.labels == ("a", "b")
    assert res.get("a").to_pylist() == pytest.approx([2.0, 4.5])
    assert res.get("b").to_pylist() == pytest.approx([2.0, 4.5])


def test_dataframe_apply_scalar():
    res = TEST_DATA.groupby(TEST_DATA.get("city")).apply(len)
    assert isinstance(res, Series)
    assert res.to_pylist() == [2, 3]


def test_empty_groupby():
    s = Series(pa.array([], type=pa.int64()))
    sg = s.groupby([])
    assert sg.groups() == []
    assert len(sg.sum()) == 0


def test_str(series):
    assert str(series.groupby([1, 1, 1, 2, 2])) == "GroupBy(groups=2, rows=5)"


def test_null_keys_sorted_last():
    s = Series([1, 2, 3, 4])
    sg = s.groupby(pa.array([2, None, 1, 2]))
    assert sg.groups() == [1, 2, None]
    assert sg.get_group(None).to_pylist() == [2]

    res = sg.sum()
    assert res.index.labels == (1, 2, None)
    assert res.to_pylist() == [3, 5, 2]


def test_grouped_frame_ignores_later_inserts():
    df = DataFrame.from_dict({"key": ["a", "b", "a"], "x": [1, 2, 3]})
    grouped = df.groupby(df.get("key"))
    df.insert([10, 20, 30], "y")

    res = grouped.sum()
    assert res.columns.labels == ("x",)
    assert res.get("x").to_pylist() == [4, 2]
    assert df.columns.labels == ("key", "x", "y")

import pyarrow as pa
import pytest

from framepyground.core import Indexer
from framepyground.errors import (
    ColumnsDiffer,
    IndexDiffer,
    LengthMismatch,
    OutOfBounds,
    UnknownLabel,
)
from framepyground.frame import Series


@pytest.fixture
def series():
    return Series([1.0, 2.0, 3.0, 4.0, 5.0], index=[10, 20, 30, 40, 50])


def test_creation_default_index():
    s = Series([1.0, 2.0, 3.0])
    assert s.to_pylist() == [1.0, 2.0, 3.0]
    assert s.index.labels == (0, 1, 2)
    assert len(s) == 3
    assert len(s.index) == 3


def test_creation_with_index():
    s = Series(pa.array([1, 2, 3]), index=[5, 6, 7], name="x")
    assert s.index.labels == (5, 6, 7)
    assert s.name == "x"
    assert s.dtype == "int64"
    assert s.is_numeric


def test_creation_copies_indexer():
    idx = Indexer(["a", "b"])
    s = Series([1, 2], index=idx)
    idx.push("c")
    assert s.index.labels == ("a", "b")


def test_creation_length_mismatch():
    with pytest.raises(LengthMismatch):
        Series([1, 2, 3], index=[1, 2])


def test_get_by_label(series):
    assert series.get_by_label(30) == 3.0
    with pytest.raises(UnknownLabel):
        series.get_by_label(35)


def test_get_by_label_duplicate_returns_first():
    s = Series(["x", "y", "z"], index=["a", "b", "a"])
    assert s.get_by_label("a") == "x"


def test_get_by_index(series):
    assert series.get_by_index(0) == 1.0
    assert series.get_by_index(4) == 5.0
    with pytest.raises(OutOfBounds):
        series.get_by_index(5)


def test_reindex(series):
    res = series.reindex([20, 30, 50])
    assert res.to_pylist() == [2.0, 3.0, 5.0]
    assert res.index.labels == (20, 30, 50)


def test_reindex_by_index(series):
    res = series.reindex_by_index([0, 2, 4])
    assert res.to_pylist() == [1.0, 3.0, 5.0]
    assert res.index.labels == (10, 30, 50)


def test_reindex_by_index_repeated_positions(series):
    res = series.iloc([4, 4, 0])
    assert res.to_pylist() == [5.0, 5.0, 1.0]
    assert res.index.labels == (50, 50, 10)


def test_reindex_by_index_out_of_bounds(series):
    with pytest.raises(OutOfBounds):
        series.reindex_by_index([0, 5])


def test_blocs(series):
    res = series.blocs([True, False, False, True, True])
    assert res.to_pylist() == [1.0, 4.0, 5.0]
    assert res.index.labels == (10, 40, 50)


def test_blocs_arrow_mask(series):
    res = series.blocs(pa.array([False, True, False, False, False]))
    assert res.to_pylist() == [2.0]


def test_blocs_length_mismatch(series):
    with pytest.raises(LengthMismatch):
        series.blocs([True, False])


def test_append(series):
    other = Series([11.0, 12.0], index=[110, 120])
    res = series.append(other)
    assert res.to_pylist() == [1.0, 2.0, 3.0, 4.0, 5.0, 11.0, 12.0]
    assert res.index.labels == (10, 20, 30, 40, 50, 110, 120)
    assert len(series) == 5


def test_append_different_types(series):
    other = Series(["x", "y"], index=[110, 120])
    with pytest.raises(ColumnsDiffer):
        series.append(other)


def test_apply(series):
    assert series.apply(len) == 5


def test_aggregations_int():
    s = Series([1, 2, 3, 4, 5], index=[10, 20, 30, 40, 50])
    assert s.sum() == 15
    assert s.min() == 1
    assert s.max() == 5
    assert s.count() == 5
    assert s.mean() == pytest.approx(3.0)
    assert s.var() == pytest.approx(2.0)
    assert s.unbiased_var() == pytest.approx(2.5)
    assert s.std() == pytest.approx(1.414214)
    assert s.unbiased_std() == pytest.approx(1.581139)

    assert Series([2, 2, 2, 3, 3]).mean() == pytest.approx(2.4)

    s = Series([11, 12, 11, 14, 12])
    assert s.var() == pytest.approx(1.2)
    assert s.unbiased_var() == pytest.approx(1.5)
    assert s.std() == pytest.approx(1.0954451150103321)
    assert s.unbiased_std() == pytest.approx(1.2247448713915889)


def test_aggregations_float():
    s = Series([1.0, 2.0, 3.0, 4.0, 5.0])
    assert s.sum() == pytest.approx(15.0)
    assert s.min() == 1.0
    assert s.max() == 5.0
    assert s.count() == 5
    assert s.mean() == pytest.approx(3.0)
    assert s.var() == pytest.approx(2.0)
    assert s.unbiased_var() == pytest.approx(2.5)


@pytest.mark.parametrize(
    "values",
    [list(range(1, 11)), [float(v) for v in range(1, 11)]],
)
def test_describe(values):
    d = Series(values).describe()
    assert d.index.labels == ("count", "mean", "std", "min", "max")
    assert d.dtype == "double"
    assert d.to_pylist() == pytest.approx([10.0, 5.5, 2.8722813232690143, 1.0, 10.0])


def test_value_counts():
    s = Series([1, 1, 3, 4, 1, 1, 2, 3, None])
    counts = s.value_counts()
    assert counts.index.labels == (1, 2, 3, 4)
    assert counts.to_pylist() == [4, 1, 2, 1]


def test_ops_int_broadcast():
    s = Series([1, 2, 3], index=[10, 20, 30])
    assert (s + 3).to_pylist() == [4, 5, 6]
    assert (s * 2).to_pylist() == [2, 4, 6]
    assert (s - 3).to_pylist() == [-2, -1, 0]
    assert (s / 2).to_pylist() == [0, 1, 1]
    assert (s % 2).to_pylist() == [1, 0, 1]
    assert (s + 3).index.labels == (10, 20, 30)
    assert (3 + s).to_pylist() == [4, 5, 6]
    assert (2 * s).to_pylist() == [2, 4, 6]


def test_ops_float_broadcast():
    s = Series([1.0, 2.0, 3.0], index=[10, 20, 30])
    assert (s + 3.0).to_pylist() == [4.0, 5.0, 6.0]
    assert (s * 2.0).to_pylist() == [2.0, 4.0, 6.0]
    assert (s - 3.0).to_pylist() == [-2.0, -1.0, 0.0]
    assert (s / 2.0).to_pylist() == [0.5, 1.0, 1.5]
    assert (s % 2.0).to_pylist() == [1.0, 0.0, 1.0]


def test_ops_int_elementwise():
    s = Series([1, 2, 3], index=[10, 20, 30])
    r = Series([1, 3, 2], index=[10, 20, 30])
    assert (s + r).to_pylist() == [2, 5, 5]
    assert (s * r).to_pylist() == [1, 6, 6]
    assert (s - r).to_pylist() == [0, -1, 1]
    assert (s / r).to_pylist() == [1, 0, 1]
    assert (s % r).to_pylist() == [0, 2, 1]


def test_ops_float_elementwise():
    s = Series([1.0, 2.0, 3.0], index=[10, 20, 30])
    r = Series([1.0, 3.0, 2.0], index=[10, 20, 30])
    assert (s / r).to_pylist() == pytest.approx([1.0, 0.6666666666666666, 1.5])
    assert (s % r).to_pylist() == pytest.approx([0.0, 2.0, 1.0])


def test_ops_negative_remainder_keeps_dividend_sign():
    s = Series([-7, 7])
    assert (s % 3).to_pylist() == [-1, 1]


def test_ops_int_division_truncates_toward_zero():
    s = Series([-7, 7])
    assert (s / 2).to_pylist() == [-3, 3]


def test_ops_index_differ():
    s = Series([1, 2, 3], index=[10, 20, 30])
    r = Series([1, 2, 3], index=[30, 20, 10])
    with pytest.raises(IndexDiffer):
        s + r


def test_equality():
    assert Series([1, 2], index=["a", "b"]) == Series([1, 2], index=["a", "b"])
    assert Series([1, 2], index=["a", "b"]) != Series([1, 2], index=["b", "a"])
    assert Series([1, 2]) != Series([1.0, 2.0])
    assert Series([1, 2]) != Series([2, 1])


def test_repr():
    s = Series([1, 2], index=["a", "b"], name="x")
    assert repr(s) == "Series(name='x', dtype=int64, index=['a', 'b'], values=[1, 2])"

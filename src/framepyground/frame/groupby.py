"""Group rows by key and compute per group results.

Frequently when analysing data is necessary
to compute statistics for groups of rows
sharing the same key, instead of the whole data.

For example, given the following data::

    city, shop, n_employees
    New York, Shop A, 10
    New York, Shop B, 15
    Los Angeles, Shop C, 8
    Los Angeles, Shop D, 12
    New York, Shop E, 20

We could group by city and compute the sum of the employees
to get::

    city, total_employees
    Los Angeles, 20
    New York, 45

A :class:`GroupBy` is created from a Series or DataFrame and a key for each
of its rows. The rows are partitioned by :class:`framepyground.core.HashGrouper`,
and each group can then be extracted with :meth:`GroupBy.get_group` or reduced
to a single result with :meth:`GroupBy.apply` and the aggregation methods.

Groups are always enumerated in ascending order of their keys,
so results are deterministic regardless of the order rows were found in.

>>> from framepyground.frame import Series
>>> employees = Series([10, 15, 8, 12, 20])
>>> grouped = employees.groupby(["New York", "New York", "Los Angeles", "Los Angeles", "New York"])
>>> total = grouped.sum()
>>> list(total.index), total.to_pylist()
(['Los Angeles', 'New York'], [20, 45])
"""

from typing import Any, Callable, Hashable

import pyarrow as pa

from ..core import HashGrouper, Indexer
from ..core.aggregate import (
    Aggregation,
    CountAggregation,
    MaxAggregation,
    MeanAggregation,
    MinAggregation,
    StdAggregation,
    SumAggregation,
    VarianceAggregation,
)
from ..errors import GroupNotFound, IndexDiffer, LengthMismatch
from .dataframe import DataFrame
from .series import Series


class GroupBy:
    """Rows of a Series or DataFrame grouped by key.

    The GroupBy holds the grouped data and the positions of the rows
    in each group. A DataFrame is held through a copy of it, so inserting
    columns in the source frame later on does not change the groups.
    The rows are gathered only when a group is requested.

    Null keys form a group of their own, sorted after every other key.
    """

    def __init__(self, data: Series | DataFrame, keys: Any) -> None:
        """
        :param data: The Series or DataFrame to group.
        :param keys: The key of each row of data, as a sequence,
                     a :class:`pyarrow.Array` or a :class:`Series`.
        """
        keys = _keys_list(keys)
        if len(keys) != len(data):
            raise LengthMismatch(
                f"Got {len(keys)} keys to group {len(data)} rows"
            )
        if isinstance(data, DataFrame):
            data = data.copy()
        self.data = data
        self.grouper = HashGrouper.groupby(keys)

    def __len__(self) -> int:
        return len(self.grouper)

    def groups(self) -> list[Hashable]:
        """The distinct keys, in ascending order with the null key last."""
        return sorted(self.grouper.keys(), key=_null_last)

    def get_group(self, key: Hashable) -> Series | DataFrame:
        """The rows of a group, in the same order they had in the data."""
        positions = self.grouper.get(key)
        if positions is None:
            raise GroupNotFound(f"Group not found: {key!r}")
        return self.data.reindex_by_index(positions)

    def apply(self, func: Callable[[Series | DataFrame], Any]) -> Series | DataFrame:
        """Invoke ``func`` on each group and collect the results.

        ``func`` is called once for each group, in ascending key order.
        When it returns single values, the result is a :class:`Series`
        indexed by the group keys. When it returns a :class:`Series`, like
        the aggregations of a DataFrame do, the result is a :class:`DataFrame`
        with a row for each group and a column for each label of the returned Series.

        >>> from framepyground.frame import Series
        >>> s = Series([1, 2, 3, 4, 5])
        >>> s.groupby(["b", "a", "b", "a", "b"]).apply(len).to_pylist()
        [2, 3]
        """
        groups = self.groups()
        results = [func(self.get_group(key)) for key in groups]
        if results and all(isinstance(r, Series) for r in results):
            return _rows_to_frame(results, groups)
        return Series(pa.array(results), index=groups)

    def aggregate(self, aggregation: Aggregation) -> Series | DataFrame:
        """Reduce each group with the given aggregation.

        Grouped DataFrames reduce each one of their numeric columns.
        """
        return self.apply(lambda group: group.aggregate(aggregation))

    def sum(self) -> Series | DataFrame:
        return self.aggregate(SumAggregation())

    def count(self) -> Series | DataFrame:
        return self.aggregate(CountAggregation())

    def mean(self) -> Series | DataFrame:
        return self.aggregate(MeanAggregation())

    def var(self) -> Series | DataFrame:
        return self.aggregate(VarianceAggregation(ddof=0))

    def unbiased_var(self) -> Series | DataFrame:
        return self.aggregate(VarianceAggregation(ddof=1))

    def std(self) -> Series | DataFrame:
        return self.aggregate(StdAggregation(ddof=0))

    def unbiased_std(self) -> Series | DataFrame:
        return self.aggregate(StdAggregation(ddof=1))

    def min(self) -> Series | DataFrame:
        return self.aggregate(MinAggregation())

    def max(self) -> Series | DataFrame:
        return self.aggregate(MaxAggregation())

    def __str__(self) -> str:
        return f"GroupBy(groups={len(self.grouper)}, rows={len(self.data)})"


def _null_last(key: Hashable) -> tuple[bool, Hashable]:
    return (key is None, key)


def _keys_list(keys: Any) -> list[Hashable]:
    if isinstance(keys, Series):
        return keys.to_pylist()
    if isinstance(keys, (pa.Array, pa.ChunkedArray)):
        return keys.to_pylist()
    return list(keys)


def _rows_to_frame(rows: list[Series], groups: list[Hashable]) -> DataFrame:
    columns = rows[0].index
    for row in rows[1:]:
        if not row.index.equals(columns):
            raise IndexDiffer("All the groups must produce results with the same labels")
    values = [
        pa.array([row.get_by_index(position) for row in rows])
        for position in range(len(columns))
    ]
    return DataFrame(values, index=Indexer(groups), columns=columns)

"""The Series object, a single labeled column."""

import math
from typing import Any, Callable, Hashable, Iterable, Sequence

import pyarrow as pa
import pyarrow.compute as pc

from ..core import Cow, Indexer, arrays
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
from ..errors import ColumnsDiffer, IndexDiffer, LengthMismatch, OutOfBounds

DESCRIBE_LABELS = ("count", "mean", "std", "min", "max")


class Series:
    """A column of values where each value is identified by a label.

    The values are stored in a :class:`pyarrow.Array`,
    while their labels are tracked by an :class:`framepyground.core.Indexer`.
    When no labels are provided, the position of each value is used as its label.

    >>> s = Series([1.5, 2.5, 3.5], index=["a", "b", "c"])
    >>> s.get_by_label("b")
    2.5
    >>> s.reindex(["c", "a"]).to_pylist()
    [3.5, 1.5]
    """

    def __init__(
        self,
        values: Any,
        index: Indexer | Iterable[Hashable] | None = None,
        name: Hashable | None = None,
    ) -> None:
        """
        :param values: The values, a :class:`pyarrow.Array` or any sequence
                       of Python values that pyarrow can convert.
        :param index: The label of each value.
        :param name: An optional label for the series itself.
        """
        values = arrays.as_array(values)
        if index is None:
            index = Indexer.range(len(values))
        elif isinstance(index, Indexer):
            index = index.copy()
        else:
            index = Indexer(index)

        if len(index) != len(values):
            raise LengthMismatch(
                f"Series has {len(values)} values but {len(index)} labels"
            )

        self.values = values
        self.name = name
        self._index = Cow.owned(index)

    @classmethod
    def _from_cow(
        cls, values: pa.Array, index: Cow, name: Hashable | None = None
    ) -> "Series":
        # Internal constructor, trusts the caller about lengths.
        series = cls.__new__(cls)
        series.values = values
        series.name = name
        series._index = index
        return series

    @property
    def index(self) -> Indexer:
        return self._index.value

    @property
    def dtype(self) -> str:
        return arrays.dtype(self.values)

    @property
    def is_numeric(self) -> bool:
        return arrays.is_numeric(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def to_pylist(self) -> list:
        return self.values.to_pylist()

    def to_arrow(self) -> pa.Array:
        return self.values

    # Indexing

    def get_by_label(self, label: Hashable) -> Any:
        """Value for the given label.

        If the label is duplicated, the value of its first occurrence is returned.
        """
        return self.values[self.index.get_loc(label)].as_py()

    def get_by_index(self, position: int) -> Any:
        """Value at the given position."""
        if position < 0 or position >= len(self):
            raise OutOfBounds(
                f"Position {position} out of bounds for length {len(self)}"
            )
        return self.values[position].as_py()

    def reindex(self, labels: Iterable[Hashable]) -> "Series":
        """Select the values with the given labels, in the given order."""
        return self.reindex_by_index(self.index.get_locs(labels))

    loc = reindex

    def reindex_by_index(self, positions: Sequence[int]) -> "Series":
        """Select the values at the given positions, in the given order."""
        positions = list(positions)
        # Indexer.reindex checks the boundaries.
        new_index = self.index.reindex(positions)
        new_values = arrays.gather_unchecked(self.values, positions)
        return self._from_cow(new_values, Cow.owned(new_index), self.name)

    iloc = reindex_by_index

    def blocs(self, mask: Sequence[bool] | pa.Array) -> "Series":
        """Select the values where the mask is ``True``."""
        return self.reindex_by_index(_mask_positions(mask, len(self)))

    # Reshape

    def append(self, other: "Series") -> "Series":
        """New Series with the values of this one followed by those of other."""
        if self.values.type != other.values.type:
            raise ColumnsDiffer(
                f"Cannot append {other.values.type} values to a {self.values.type} series"
            )
        new_values = arrays.concat([self.values, other.values])
        new_index = self.index.append(other.index)
        return self._from_cow(new_values, Cow.owned(new_index), self.name)

    # Computations

    def apply(self, func: Callable[[pa.Array], Any]) -> Any:
        """Invoke ``func`` with the values of the series and return its result."""
        return func(self.values)

    def groupby(self, keys: Any) -> "GroupBy":
        """Group the values by the given keys, one for each value."""
        from .groupby import GroupBy

        return GroupBy(self, keys)

    def aggregate(self, aggregation: Aggregation) -> Any:
        return self.apply(aggregation.compute)

    def sum(self) -> Any:
        return self.aggregate(SumAggregation())

    def count(self) -> int:
        return self.aggregate(CountAggregation())

    def mean(self) -> float:
        return self.aggregate(MeanAggregation())

    def var(self) -> float:
        """Population variance."""
        return self.aggregate(VarianceAggregation(ddof=0))

    def unbiased_var(self) -> float:
        return self.aggregate(VarianceAggregation(ddof=1))

    def std(self) -> float:
        """Population standard deviation."""
        return self.aggregate(StdAggregation(ddof=0))

    def unbiased_std(self) -> float:
        return self.aggregate(StdAggregation(ddof=1))

    def min(self) -> Any:
        return self.aggregate(MinAggregation())

    def max(self) -> Any:
        return self.aggregate(MaxAggregation())

    def describe(self) -> "Series":
        """Summary statistics of the values.

        >>> Series([2, 4, 4, 4, 5, 5, 7, 9]).describe().to_pylist()
        [8.0, 5.0, 2.0, 2.0, 9.0]
        """
        stats = [self.count(), self.mean(), self.std(), self.min(), self.max()]
        return Series(
            pa.array([_as_float(v) for v in stats], type=pa.float64()),
            index=DESCRIBE_LABELS,
            name=self.name,
        )

    def value_counts(self) -> "Series":
        """Count how many times each value appears.

        The result is indexed by the distinct values in ascending order.
        Nulls are not counted.

        >>> counts = Series([1, 1, 3, 4, 1, 1, 2, 3]).value_counts()
        >>> counts.index.labels, counts.to_pylist()
        ((1, 2, 3, 4), [4, 1, 2, 1])
        """
        counts: dict[Hashable, int] = {}
        for value in self.values.to_pylist():
            if value is not None:
                counts[value] = counts.get(value, 0) + 1
        distinct = sorted(counts)
        return Series(
            pa.array([counts[v] for v in distinct], type=pa.int64()),
            index=distinct,
            name=self.name,
        )

    # Arithmetic

    def _binary_op(self, other: Any, func: Callable[[Any, Any], pa.Array]) -> "Series":
        if isinstance(other, Series):
            if not self.index.equals(other.index):
                raise IndexDiffer("Series must have the same index")
            other = other.values
        return self._from_cow(func(self.values, other), self._index.share(), self.name)

    def __add__(self, other: Any) -> "Series":
        return self._binary_op(other, pc.add)

    def __sub__(self, other: Any) -> "Series":
        return self._binary_op(other, pc.subtract)

    def __mul__(self, other: Any) -> "Series":
        return self._binary_op(other, pc.multiply)

    def __truediv__(self, other: Any) -> "Series":
        """Divide the values, integer division truncates toward zero."""
        return self._binary_op(other, pc.divide)

    def __mod__(self, other: Any) -> "Series":
        """Remainder of the division, with the same sign of the dividend."""
        return self._binary_op(other, _remainder)

    __radd__ = __add__
    __rmul__ = __mul__

    # Equality

    def equals(self, other: "Series") -> bool:
        """Series are equal when they have the same labels and values."""
        return self.index.equals(other.index) and arrays.equals(
            self.values, other.values
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Series):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"Series(name={self.name!r}, dtype={self.dtype}, "
            f"index={list(self.index)!r}, values={self.to_pylist()!r})"
        )


def _remainder(dividend: pa.Array, divisor: Any) -> pa.Array:
    # pyarrow.compute has no modulo kernel: a - trunc(a / b) * b
    quotient = pc.divide(dividend, divisor)
    if pa.types.is_floating(quotient.type):
        quotient = pc.trunc(quotient)
    return pc.subtract(dividend, pc.multiply(quotient, divisor))


def _mask_positions(mask: Sequence[bool] | pa.Array, length: int) -> list[int]:
    if isinstance(mask, (pa.Array, pa.ChunkedArray)):
        mask = mask.to_pylist()
    if len(mask) != length:
        raise LengthMismatch(f"Mask has {len(mask)} values for {length} rows")
    return [position for position, flag in enumerate(mask) if flag]


def _as_float(value: Any) -> float:
    if value is None:
        return math.nan
    return float(value)

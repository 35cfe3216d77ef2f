"""Reducers that compute statistics of a column.

Frequently when analysing data is necessary
to compute statistics like the min, max, average, etc...
of the values of a column.

Each statistic is provided by an :class:`Aggregation`,
which reduces a :class:`pyarrow.Array` to a single Python value.
The actual math is performed by the kernels of :mod:`pyarrow.compute`,
the aggregations only dispatch to the right kernel
and convert its result back to a Python value:

>>> import pyarrow as pa
>>> values = pa.array([1, 2, 3, 4, 5])
>>> SumAggregation().compute(values)
15
>>> VarianceAggregation(ddof=1).compute(values)
2.5

Series and GroupBy objects expose the aggregations as methods,
like ``series.sum()`` or ``groupby.mean()``, so it is usually not
necessary to use them directly.
"""

import abc
from typing import Any

import pyarrow as pa
import pyarrow.compute as pc

__all__ = (
    "Aggregation",
    "SumAggregation",
    "CountAggregation",
    "MeanAggregation",
    "MinAggregation",
    "MaxAggregation",
    "VarianceAggregation",
    "StdAggregation",
)


class Aggregation(abc.ABC):
    """Base class for aggregations.

    Every aggregation is expected to implement
    a method that reduces all the values of an array
    to a single value.
    """

    def __str__(self) -> str:
        return f"{self.__class__.__name__}()"

    __repr__ = __str__

    @abc.abstractmethod
    def compute(self, values: pa.Array) -> Any: ...


class SimpleAggregation(Aggregation):
    """Provide a base implementation for aggregations backed by a single kernel.

    The kernel returns a :class:`pyarrow.Scalar`,
    which is converted to the equivalent Python value.
    """

    @abc.abstractmethod
    def _aggregate(self, data: pa.Array) -> pa.Scalar: ...

    def compute(self, values: pa.Array) -> Any:
        return self._aggregate(values).as_py()


class SumAggregation(SimpleAggregation):
    """Compute the sum of the values."""

    def _aggregate(self, data: pa.Array) -> pa.Scalar:
        return pc.sum(data)


class CountAggregation(SimpleAggregation):
    """Count the values that are not null."""

    def _aggregate(self, data: pa.Array) -> pa.Scalar:
        return pc.count(data)


class MeanAggregation(SimpleAggregation):
    """Compute the arithmetic mean of the values.

    The mean of integers is a float.
    """

    def _aggregate(self, data: pa.Array) -> pa.Scalar:
        return pc.mean(data)


class MinAggregation(SimpleAggregation):
    """Compute the min of the values."""

    def _aggregate(self, data: pa.Array) -> pa.Scalar:
        return pc.min(data)


class MaxAggregation(SimpleAggregation):
    """Compute the max of the values."""

    def _aggregate(self, data: pa.Array) -> pa.Scalar:
        return pc.max(data)


class VarianceAggregation(SimpleAggregation):
    """Compute the variance of the values.

    With ``ddof=0`` it computes the population variance,
    the mean of the squared deviations from the mean.
    With ``ddof=1`` the sum of the squared deviations is divided by ``n - 1``
    instead, which gives the unbiased (Bessel corrected) variance.
    """

    def __init__(self, ddof: int = 0) -> None:
        """
        :param ddof: Delta degrees of freedom, the divisor is ``n - ddof``.
        """
        self.ddof = ddof

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(ddof={self.ddof})"

    __repr__ = __str__

    def _aggregate(self, data: pa.Array) -> pa.Scalar:
        return pc.variance(data, ddof=self.ddof)


class StdAggregation(VarianceAggregation):
    """Compute the standard deviation, the square root of the variance."""

    def _aggregate(self, data: pa.Array) -> pa.Scalar:
        return pc.stddev(data, ddof=self.ddof)

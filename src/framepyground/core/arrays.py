"""The column storage contract.

The engine doesn't store values by itself, every column of a frame
is an Apache Arrow array (:class:`pyarrow.Array`). Arrow arrays are
immutable, typed and know how to gather values at given positions,
which is all the engine needs from them.

This module collects the few operations the engine performs on arrays,
so that the rest of the code never has to care about how
Arrow represents them:

>>> arr = as_array([10, 20, 30])
>>> kind_of(arr), is_numeric(arr)
(<ColumnKind.INTEGER: 'integer'>, True)
>>> gather_unchecked(arr, [2, 0, 2]).to_pylist()
[30, 10, 30]
"""

import enum
from typing import Any, Iterable, Sequence

import pyarrow as pa


class ColumnKind(enum.Enum):
    """The closed set of column kinds known by the engine.

    Arrow has many more types, but the engine only cares about
    the broad family of a column, primarily to know if
    it can be used in numeric aggregations.
    """

    INTEGER = "integer"
    FLOATING = "floating"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    TEXT = "text"
    TEMPORAL = "temporal"
    OTHER = "other"


NUMERIC_KINDS = frozenset({ColumnKind.INTEGER, ColumnKind.FLOATING, ColumnKind.DECIMAL})


def as_array(values: Any, type: pa.DataType | None = None) -> pa.Array:
    """Convert the provided values to a :class:`pyarrow.Array`.

    Arrays are returned as they are, chunked arrays
    are combined in a single array and any other
    sequence of python values is converted by Arrow.
    """
    if isinstance(values, pa.ChunkedArray):
        values = values.combine_chunks()
    if isinstance(values, pa.Array):
        if type is not None and values.type != type:
            values = values.cast(type)
        return values
    if not isinstance(values, (list, tuple)):
        values = list(values)
    return pa.array(values, type=type)


def kind_of(array: pa.Array) -> ColumnKind:
    """Detect the :class:`ColumnKind` of an array."""
    t = array.type
    if pa.types.is_integer(t):
        return ColumnKind.INTEGER
    elif pa.types.is_floating(t):
        return ColumnKind.FLOATING
    elif pa.types.is_decimal(t):
        return ColumnKind.DECIMAL
    elif pa.types.is_boolean(t):
        return ColumnKind.BOOLEAN
    elif pa.types.is_string(t) or pa.types.is_large_string(t):
        return ColumnKind.TEXT
    elif pa.types.is_temporal(t):
        return ColumnKind.TEMPORAL
    return ColumnKind.OTHER


def is_numeric(array: pa.Array) -> bool:
    return kind_of(array) in NUMERIC_KINDS


def dtype(array: pa.Array) -> str:
    """Name of the Arrow type of the array, like ``"int64"``."""
    return str(array.type)


def gather_unchecked(array: pa.Array, positions: Sequence[int]) -> pa.Array:
    """Take the values at the given positions.

    Positions can be repeated and in any order.
    The caller is in charge of guaranteeing that all positions
    are within the array, the engine always checks them
    through :meth:`framepyground.core.Indexer.reindex` first.
    """
    return array.take(pa.array(positions, type=pa.int64()))


def concat(arrays: Iterable[pa.Array]) -> pa.Array:
    """Concatenate arrays of the same type into a new one."""
    return pa.concat_arrays(list(arrays))


def equals(left: pa.Array, right: pa.Array) -> bool:
    """Arrays are equal when they have the same type and values."""
    return left.equals(right)

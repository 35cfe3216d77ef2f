"""Combine frames by rows, by columns or by matching labels.

Append
======

:func:`append` stacks the rows of two frames with the same columns::

    +---+---+        +---+---+        +---+---+
    |   | X |        |   | X |        |   | X |
    +---+---+        +---+---+        +---+---+
    | a | 1 |   +    | c | 3 |   =    | a | 1 |
    | b | 2 |        +---+---+        | b | 2 |
    +---+---+                         | c | 3 |
                                      +---+---+

Concat
======

:func:`concat` puts side by side the columns of two frames with the same index::

    +---+---+        +---+---+        +---+---+---+
    |   | X |        |   | Y |        |   | X | Y |
    +---+---+        +---+---+        +---+---+---+
    | a | 1 |   +    | a | 5 |   =    | a | 1 | 5 |
    | b | 2 |        | b | 6 |        | b | 2 | 6 |
    +---+---+        +---+---+        +---+---+---+

Inner Join
==========

:func:`join_inner` pairs the rows of two frames that have the same label,
see :mod:`framepyground.core.join` for how rows are matched.

>>> from framepyground.frame import DataFrame
>>> left = DataFrame([["Alice", "Bob", "Charlie"]], index=[1, 2, 3], columns=["name"])
>>> right = DataFrame([[25, 30]], index=[3, 2], columns=["age"])
>>> joined = left.join_inner(right)
>>> list(joined.index), joined.get("name").to_pylist(), joined.get("age").to_pylist()
([2, 3], ['Bob', 'Charlie'], [30, 25])
"""

from typing import TYPE_CHECKING, Hashable

from ..core import Cow, HashJoin, Indexer, arrays
from ..errors import ColumnsDiffer, IndexDiffer

if TYPE_CHECKING:
    from .dataframe import DataFrame


def append(left: "DataFrame", right: "DataFrame") -> "DataFrame":
    """Build a new frame with the rows of left followed by the rows of right.

    Both frames must have the same column labels in the same order
    and each column must have the same type on both sides.
    """
    if not left.columns.equals(right.columns):
        raise ColumnsDiffer(
            f"Columns must be identical, got {list(left.columns)!r} and {list(right.columns)!r}"
        )
    for label, lvalue, rvalue in zip(left.columns, left.values, right.values):
        if lvalue.type != rvalue.type:
            raise ColumnsDiffer(
                f"Column {label!r} is {lvalue.type} on the left and {rvalue.type} on the right"
            )

    new_index = left.index.append(right.index)
    new_values = [
        arrays.concat([lvalue, rvalue])
        for lvalue, rvalue in zip(left.values, right.values)
    ]
    return left._from_cow(
        Cow.owned(new_values), Cow.owned(new_index), left._columns.share()
    )


def concat(left: "DataFrame", right: "DataFrame") -> "DataFrame":
    """Build a new frame with the columns of left followed by the columns of right.

    Both frames must have the same row labels in the same order,
    so the arrays can be taken as they are.
    """
    if not left.index.equals(right.index):
        raise IndexDiffer("Index must be identical to concatenate columns")

    new_columns = left.columns.append(right.columns)
    new_values = list(left.values) + list(right.values)
    return left._from_cow(
        Cow.owned(new_values), left._index.share(), Cow.owned(new_columns)
    )


def join_inner(
    left: "DataFrame", right: "DataFrame", rsuffix: str | None = None
) -> "DataFrame":
    """Join two frames keeping only the rows whose label exists on both sides.

    The resulting rows follow the order of the left frame, when a label
    is repeated every left row is paired with every right row with that label.
    The columns of the left frame come first, followed by those of the right frame.

    Column labels are not deduplicated, so if both frames have a column
    with the same label the result will have it twice.
    Provide ``rsuffix`` to rename the colliding string labels of the right frame.

    :param left: The left frame, which drives the order of the rows.
    :param right: The right frame.
    :param rsuffix: Suffix appended to right column labels that already exist on the left.
    """
    labels, left_positions, right_positions = HashJoin.inner(left.index, right.index)

    # Positions come from the frames own index, so they are always in bounds.
    new_values = [
        arrays.gather_unchecked(value, left_positions) for value in left.values
    ] + [arrays.gather_unchecked(value, right_positions) for value in right.values]
    new_columns = left.columns.append(
        Indexer(_suffixed(label, left.columns, rsuffix) for label in right.columns)
    )
    return left._from_cow(
        Cow.owned(new_values), Cow.owned(Indexer(labels)), Cow.owned(new_columns)
    )


def _suffixed(label: Hashable, existing: Indexer, rsuffix: str | None) -> Hashable:
    if rsuffix is not None and isinstance(label, str) and label in existing:
        return label + rsuffix
    return label

"""Matching of labels for join operations.

The join engine only deals with labels: given the labels of the rows
of two frames, it finds which rows of the left frame match which rows
of the right frame. Frames then use the resulting positions
to gather their data and build the joined frame.

Inner Join
==========

Provided by :meth:`HashJoin.inner`, the join is performed with a hash join
algorithm: a hash table is built from the labels of the right side
and then probed with each label of the left side.

Supposing we have two frames indexed by ``id``::

    left:
    +----+--------+
    | id | name   |
    +----+--------+
    | 1  | Alice  |
    | 2  | Bob    |
    | 3  | Charlie|
    +----+--------+

    right:
    +----+-----+
    | id | age |
    +----+-----+
    | 3  | 25  |
    | 2  | 30  |
    | 3  | 26  |
    +----+-----+

We would perform the following steps:

1. Build the hash table of the right labels, each label
   points to all the positions where it appears::

    {3: [0, 2], 2: [1]}

2. Go through the left labels in order, and for each one
   look up the positions in the hash table. Each left row is
   paired with every matching right row, so when a label appears
   multiple times on both sides, all the combinations are emitted::

    id=1 (left 0) -> no match
    id=2 (left 1) -> right 1
    id=3 (left 2) -> right 0, right 2

3. The pairs are returned as the labels of the joined rows
   and the positions to gather on each side::

    labels:          [2, 3, 3]
    left_positions:  [1, 2, 2]
    right_positions: [1, 0, 2]

Gathering the rows at those positions and putting
the columns side by side leads to::

    +----+--------+-----+
    | id | name   | age |
    +----+--------+-----+
    | 2  | Bob    | 30  |
    | 3  | Charlie| 25  |
    | 3  | Charlie| 26  |
    +----+--------+-----+

>>> HashJoin.inner([1, 2, 3], [3, 2, 3])
([2, 3, 3], [1, 2, 2], [1, 0, 2])
"""

import logging
from typing import Hashable, Sequence

logger = logging.getLogger(__name__)


class HashJoin:
    """Hash based join of two sequences of labels."""

    @staticmethod
    def inner(
        left_labels: Sequence[Hashable], right_labels: Sequence[Hashable]
    ) -> tuple[list[Hashable], list[int], list[int]]:
        """Pair the positions of equal labels on the two sides.

        The pairs are emitted following the order of the left labels,
        and for each left label following the order of the right matches.

        :param left_labels: The labels of the left side.
        :param right_labels: The labels of the right side.
        :returns: ``(labels, left_positions, right_positions)`` where the ``i``
                  element of each list describes the ``i`` joined row.
        """
        # Build side, from the right labels.
        right_table: dict[Hashable, list[int]] = {}
        for position, label in enumerate(right_labels):
            right_table.setdefault(label, []).append(position)

        # Probe side, from the left labels.
        labels: list[Hashable] = []
        left_positions: list[int] = []
        right_positions: list[int] = []
        for left_position, label in enumerate(left_labels):
            matches = right_table.get(label)
            if not matches:
                continue
            for right_position in matches:
                labels.append(label)
                left_positions.append(left_position)
                right_positions.append(right_position)

        logger.debug(
            "Inner join of %d and %d labels matched %d rows",
            len(left_labels),
            len(right_labels),
            len(labels),
        )
        return labels, left_positions, right_positions

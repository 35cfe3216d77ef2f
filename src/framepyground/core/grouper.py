"""Partition rows in groups by key.

Given a sequence of keys, one for each row of some data,
the grouper finds which rows share the same key::

    keys:    ["NY", "LA", "NY", "NY", "LA"]

    groups:  {"NY": [0, 2, 3], "LA": [1, 4]}

Rows are assigned to groups with a single pass over the keys,
using a hash table (a Python ``dict``) to find the group
of each key. Within each group the positions are kept in the
order the rows were found, so a group preserves the
original order of its rows.

Every row ends up in exactly one group, so the groups
are a partition of all the rows positions.

>>> grouper = HashGrouper.groupby(["NY", "LA", "NY", "NY", "LA"])
>>> grouper.get("NY")
[0, 2, 3]
>>> grouper.keys()
['NY', 'LA']
"""

import logging
from typing import Hashable, Iterable

logger = logging.getLogger(__name__)


class HashGrouper:
    """Map each distinct key to the positions where it appears."""

    def __init__(self, groups: dict[Hashable, list[int]]) -> None:
        """
        :param groups: The ``{key: [positions]}`` mapping.
                       Use :meth:`groupby` to build it from keys.
        """
        self.groups = groups

    @classmethod
    def groupby(cls, keys: Iterable[Hashable]) -> "HashGrouper":
        """Build the groups for the given keys.

        The key at index ``i`` is the key of the row at position ``i``.
        """
        groups: dict[Hashable, list[int]] = {}
        for position, key in enumerate(keys):
            groups.setdefault(key, []).append(position)
        logger.debug("Grouped rows in %d groups", len(groups))
        return cls(groups)

    def get(self, key: Hashable) -> list[int] | None:
        """Positions of the rows in the group, ``None`` if there is no such group."""
        return self.groups.get(key)

    def keys(self) -> list[Hashable]:
        """The distinct keys, in the order they were first found."""
        return list(self.groups.keys())

    def __contains__(self, key: Hashable) -> bool:
        return key in self.groups

    def __len__(self) -> int:
        return len(self.groups)

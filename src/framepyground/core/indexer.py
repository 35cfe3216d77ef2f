"""Labels of rows and columns.

Frames identify their rows and columns both by position
(the first row, the second column, ...) and by label
(the row ``"Alice"``, the column ``"age"``).

The :class:`Indexer` is in charge of translating between the two.
It stores the labels in order, so that the label of a position
is just ``labels[position]``, and a mapping from each label to
the positions where it appears, so that going from a label to its
position doesn't require scanning all labels::

    labels:   ["a", "b", "a", "c"]
    mapping:  {"a": [0, 2], "b": [1], "c": [3]}

Labels are not required to be unique. When a label appears
more than once, looking it up returns the **first** position
where it appears, while :meth:`Indexer.get_all_locs` provides
all of them.

>>> idx = Indexer(["a", "b", "a", "c"])
>>> idx.get_locs(["c", "a"])
[3, 0]
>>> idx.get_all_locs("a")
[0, 2]
>>> idx.reindex([3, 3, 1]).labels
('c', 'c', 'b')
"""

from typing import Any, Hashable, Iterable, Iterator, Sequence

from ..errors import OutOfBounds, UnknownLabel


class Indexer:
    """Ordered sequence of labels with a lookup from label to positions."""

    __slots__ = ("_labels", "_locs")
    __hash__ = None  # mutable through push()

    def __init__(self, labels: Iterable[Hashable] = ()) -> None:
        """
        :param labels: The labels in order, the first one will be at position 0.
        """
        self._labels: list[Hashable] = []
        self._locs: dict[Hashable, list[int]] = {}
        for label in labels:
            self.push(label)

    @classmethod
    def range(cls, length: int) -> "Indexer":
        """Indexer whose labels are the positions themselves."""
        return cls(range(length))

    @property
    def labels(self) -> tuple:
        return tuple(self._labels)

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._labels)

    def __contains__(self, label: Any) -> bool:
        return label in self._locs

    def __getitem__(self, position: int) -> Hashable:
        return self._labels[position]

    def get_loc(self, label: Hashable) -> int:
        """Position of a label.

        When the label appears multiple times,
        the first position is returned.
        """
        try:
            return self._locs[label][0]
        except KeyError:
            raise UnknownLabel(f"Label not found: {label!r}") from None

    def get_locs(self, labels: Iterable[Hashable]) -> list[int]:
        """Positions of multiple labels, in the same order as the labels."""
        return [self.get_loc(label) for label in labels]

    def get_all_locs(self, label: Hashable) -> list[int]:
        """All the positions where a label appears, in ascending order."""
        try:
            return list(self._locs[label])
        except KeyError:
            raise UnknownLabel(f"Label not found: {label!r}") from None

    def reindex(self, positions: Sequence[int]) -> "Indexer":
        """Build a new Indexer with the labels at the given positions.

        Positions can be repeated or in any order,
        the resulting labels will follow the order of the positions.
        """
        length = len(self._labels)
        for position in positions:
            if position < 0 or position >= length:
                raise OutOfBounds(
                    f"Position {position} out of bounds for length {length}"
                )
        return self.__class__(self._labels[position] for position in positions)

    def append(self, other: "Indexer") -> "Indexer":
        """Build a new Indexer with the labels of both, this one first."""
        return self.__class__(self._labels + other._labels)

    def push(self, label: Hashable) -> None:
        """Add a label at the end, modifying the Indexer in place."""
        self._locs.setdefault(label, []).append(len(self._labels))
        self._labels.append(label)

    def copy(self) -> "Indexer":
        new = self.__class__.__new__(self.__class__)
        new._labels = list(self._labels)
        new._locs = {label: list(locs) for label, locs in self._locs.items()}
        return new

    def equals(self, other: "Indexer") -> bool:
        """Indexers are equal when their labels are equal and in the same order."""
        return self._labels == other._labels

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Indexer):
            return NotImplemented
        return self.equals(other)

    def __repr__(self) -> str:
        return f"Indexer({self._labels!r})"

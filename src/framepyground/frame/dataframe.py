"""The Dataframe object itself."""

from typing import Any, Hashable, Iterable, Iterator, Mapping, Sequence

import pyarrow as pa

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
from ..errors import LengthMismatch
from . import reshape
from .series import DESCRIBE_LABELS, Series, _mask_positions


class DataFrame:
    """Data structure that handles data in labeled rows and columns.

    Each column is stored as a :class:`pyarrow.Array`, all columns
    have the same length and share the same row labels (the ``index``).
    Columns are identified by their own labels (the ``columns``).

    Selecting rows, by label with :meth:`reindex` or by position with
    :meth:`reindex_by_index`, gathers the values of every column.
    Selecting columns, with :meth:`gets` or :meth:`igets`, never
    touches the values, the arrays are taken as they are.

    Frames derived from another frame share with it any part
    that didn't change (the row labels, the column labels or the list
    of arrays). Shared parts are copied only when one of the frames
    modifies them, for example through :meth:`insert`, so a frame
    never sees the changes made to another frame.

    >>> df = DataFrame([[1, 2, 3], [4.0, 5.0, 6.0]], index=["a", "b", "c"], columns=["X", "Y"])
    >>> df.shape
    (3, 2)
    >>> df.reindex(["c", "a"]).get("Y").to_pylist()
    [6.0, 4.0]
    """

    def __init__(
        self,
        values: Iterable[Any],
        index: Indexer | Iterable[Hashable] | None = None,
        columns: Indexer | Iterable[Hashable] | None = None,
    ) -> None:
        """
        :param values: The data of each column, as :class:`pyarrow.Array`
                       or sequences of Python values.
        :param index: The labels of the rows, defaults to their positions.
        :param columns: The labels of the columns, defaults to their positions.
        """
        values = [arrays.as_array(v) for v in values]
        columns = _as_indexer(columns, len(values))
        if len(columns) != len(values):
            raise LengthMismatch(
                f"Got {len(values)} columns of values but {len(columns)} column labels"
            )

        index = _as_indexer(index, len(values[0]) if values else 0)
        for label, value in zip(columns, values):
            if len(value) != len(index):
                raise LengthMismatch(
                    f"Column {label!r} has {len(value)} values but index has {len(index)} labels"
                )

        self._values = Cow.owned(values)
        self._index = Cow.owned(index)
        self._columns = Cow.owned(columns)

    @classmethod
    def from_dict(
        cls,
        data: Mapping[Hashable, Any],
        index: Indexer | Iterable[Hashable] | None = None,
    ) -> "DataFrame":
        """Create a frame from a ``{column_label: values}`` mapping.

        >>> DataFrame.from_dict({"a": [1, 2], "b": ["x", "y"]}).dtypes()
        ['int64', 'string']
        """
        return cls(list(data.values()), index=index, columns=list(data.keys()))

    @classmethod
    def from_arrow(
        cls,
        table: pa.Table | pa.RecordBatch,
        index: Indexer | Iterable[Hashable] | None = None,
    ) -> "DataFrame":
        """Create a frame from a :class:`pyarrow.Table` or :class:`pyarrow.RecordBatch`.

        The column names of the table become the column labels.
        """
        return cls(table.columns, index=index, columns=table.column_names)

    @classmethod
    def _from_cow(cls, values: Cow, index: Cow, columns: Cow) -> "DataFrame":
        # Internal constructor, trusts the caller about the shape.
        frame = cls.__new__(cls)
        frame._values = values
        frame._index = index
        frame._columns = columns
        return frame

    def copy(self) -> "DataFrame":
        """A new frame sharing all its data with this one until either is modified."""
        return self._from_cow(
            self._values.share(), self._index.share(), self._columns.share()
        )

    def to_arrow(self) -> pa.Table:
        """Convert the frame to a :class:`pyarrow.Table`.

        Column labels are converted to strings, the index is not included.
        """
        return pa.Table.from_arrays(
            list(self._values.value), names=[str(c) for c in self.columns]
        )

    @property
    def index(self) -> Indexer:
        return self._index.value

    @property
    def columns(self) -> Indexer:
        return self._columns.value

    @property
    def values(self) -> tuple[pa.Array, ...]:
        return tuple(self._values.value)

    @property
    def shape(self) -> tuple[int, int]:
        return len(self.index), len(self.columns)

    def __len__(self) -> int:
        return len(self.index)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.columns)

    def items(self) -> Iterator[tuple[Hashable, Series]]:
        """Iterate over ``(label, Series)`` for each column."""
        for position, label in enumerate(self.columns):
            yield label, self.iget(position)

    def dtypes(self) -> list[str]:
        return [arrays.dtype(v) for v in self._values.value]

    def is_numeric(self) -> list[bool]:
        return [arrays.is_numeric(v) for v in self._values.value]

    # Rows indexing

    def reindex(self, labels: Iterable[Hashable]) -> "DataFrame":
        """Select the rows with the given labels, in the given order."""
        return self.reindex_by_index(self.index.get_locs(labels))

    loc = reindex

    def reindex_by_index(self, positions: Sequence[int]) -> "DataFrame":
        """Select the rows at the given positions, in the given order.

        Every column is gathered at the positions,
        while the column labels are shared with this frame.
        """
        positions = list(positions)
        # Indexer.reindex checks the boundaries,
        # so gathering afterwards is always safe.
        new_index = self.index.reindex(positions)
        new_values = [
            arrays.gather_unchecked(value, positions) for value in self._values.value
        ]
        return self._from_cow(
            Cow.owned(new_values), Cow.owned(new_index), self._columns.share()
        )

    iloc = reindex_by_index

    def blocs(self, mask: Sequence[bool] | pa.Array) -> "DataFrame":
        """Select the rows where the mask is ``True``."""
        return self.reindex_by_index(_mask_positions(mask, len(self)))

    # Columns indexing

    def gets(self, labels: Iterable[Hashable]) -> "DataFrame":
        """Select the columns with the given labels, in the given order."""
        return self.igets(self.columns.get_locs(labels))

    def igets(self, positions: Sequence[int]) -> "DataFrame":
        """Select the columns at the given positions, in the given order.

        The arrays of the columns are taken as they are,
        and the row labels are shared with this frame.
        """
        positions = list(positions)
        new_columns = self.columns.reindex(positions)
        current = self._values.value
        new_values = [current[position] for position in positions]
        return self._from_cow(
            Cow.owned(new_values), self._index.share(), Cow.owned(new_columns)
        )

    def get(self, label: Hashable) -> Series:
        """The column with the given label as a :class:`Series`."""
        return self.iget(self.columns.get_loc(label))

    def iget(self, position: int) -> Series:
        """The column at the given position as a :class:`Series`."""
        label = self.columns.reindex([position])[0]
        return Series._from_cow(
            self._values.value[position], self._index.share(), name=label
        )

    def numeric_subset(self) -> "DataFrame":
        """Select only the columns with numeric values."""
        return self.igets([pos for pos, flag in enumerate(self.is_numeric()) if flag])

    # Modification

    def insert(self, values: Any, label: Hashable) -> None:
        """Add a column at the end of the frame.

        Only this frame is modified, any other frame sharing
        data with it will keep seeing the previous columns.

        >>> df = DataFrame([[1, 2]], columns=["X"])
        >>> view = df.igets([0])
        >>> df.insert([3, 4], "Y")
        >>> list(df.columns), list(view.columns)
        (['X', 'Y'], ['X'])
        """
        values = arrays.as_array(values)
        if len(values) != len(self):
            raise LengthMismatch(
                f"Column {label!r} has {len(values)} values but index has {len(self)} labels"
            )
        # Labels go in an Indexer, so they must be hashable.
        hash(label)
        self._values.to_mut().append(values)
        self._columns.to_mut().push(label)

    # Grouping and reshaping

    def groupby(self, keys: Any) -> "GroupBy":
        """Group the rows by the given keys, one for each row."""
        from .groupby import GroupBy

        return GroupBy(self, keys)

    def join_inner(self, other: "DataFrame", rsuffix: str | None = None) -> "DataFrame":
        """Join with another frame on the row labels.

        See :func:`framepyground.frame.reshape.join_inner`.
        """
        return reshape.join_inner(self, other, rsuffix=rsuffix)

    def append(self, other: "DataFrame") -> "DataFrame":
        """Add the rows of other after the rows of this frame.

        See :func:`framepyground.frame.reshape.append`.
        """
        return reshape.append(self, other)

    def concat(self, other: "DataFrame") -> "DataFrame":
        """Add the columns of other after the columns of this frame.

        See :func:`framepyground.frame.reshape.concat`.
        """
        return reshape.concat(self, other)

    # Aggregation

    def aggregate(self, aggregation: Aggregation) -> Series:
        """Reduce each numeric column to a single value.

        The result is a :class:`Series` indexed by the column labels.
        """
        numeric = self.numeric_subset()
        results = [aggregation.compute(value) for value in numeric._values.value]
        return Series(pa.array(results), index=numeric.columns)

    def sum(self) -> Series:
        return self.aggregate(SumAggregation())

    def count(self) -> Series:
        return self.aggregate(CountAggregation())

    def mean(self) -> Series:
        return self.aggregate(MeanAggregation())

    def var(self) -> Series:
        return self.aggregate(VarianceAggregation(ddof=0))

    def unbiased_var(self) -> Series:
        return self.aggregate(VarianceAggregation(ddof=1))

    def std(self) -> Series:
        return self.aggregate(StdAggregation(ddof=0))

    def unbiased_std(self) -> Series:
        return self.aggregate(StdAggregation(ddof=1))

    def min(self) -> Series:
        return self.aggregate(MinAggregation())

    def max(self) -> Series:
        return self.aggregate(MaxAggregation())

    def describe(self) -> "DataFrame":
        """Summary statistics of each numeric column.

        Rows are ``count``, ``mean``, ``std``, ``min`` and ``max``.
        """
        numeric = self.numeric_subset()
        return self.__class__(
            [series.describe().values for _, series in numeric.items()],
            index=DESCRIBE_LABELS,
            columns=numeric.columns,
        )

    # Equality

    def equals(self, other: "DataFrame") -> bool:
        """Frames are equal when their labels and values are equal and in the same order."""
        mine, theirs = self._values.value, other._values.value
        return (
            self.index.equals(other.index)
            and self.columns.equals(other.columns)
            and len(mine) == len(theirs)
            and all(arrays.equals(a, b) for a, b in zip(mine, theirs))
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataFrame):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"DataFrame(index={list(self.index)!r}, columns={list(self.columns)!r}, "
            f"dtypes={self.dtypes()!r})"
        )


def _as_indexer(labels: Indexer | Iterable[Hashable] | None, length: int) -> Indexer:
    if labels is None:
        return Indexer.range(length)
    elif isinstance(labels, Indexer):
        return labels.copy()
    return Indexer(labels)

"""Errors raised by the FramePyground engine.

All the errors share :class:`FrameError` as their base class,
so that callers can catch any failure of the engine at once.

Each error also inherits from the builtin exception that better
describes it. Looking up a missing label is a :class:`KeyError`,
a position beyond the end of an index is an :class:`IndexError`
and shapes that do not agree are a :class:`ValueError`.
This way code that already deals with Python containers keeps working:

>>> from framepyground.core import Indexer
>>> try:
...     Indexer(["a", "b"]).get_loc("z")
... except KeyError as err:
...     print(type(err).__name__)
UnknownLabel
"""


class FrameError(Exception):
    """Base class for all the errors raised by the engine."""

    pass


class LengthMismatch(FrameError, ValueError):
    """Values, index or columns have a different number of elements."""

    pass


class UnknownLabel(FrameError, KeyError):
    """A label was not found in an :class:`framepyground.core.Indexer`."""

    def __str__(self) -> str:
        # KeyError would otherwise quote the whole message.
        return Exception.__str__(self)


class OutOfBounds(FrameError, IndexError):
    """A position exceeds the length of the sequence it refers to."""

    pass


class ColumnsDiffer(FrameError, ValueError):
    """Appending rows requires both sides to have the same columns."""

    pass


class IndexDiffer(FrameError, ValueError):
    """Concatenating columns requires both sides to have the same index."""

    pass


class GroupNotFound(FrameError, KeyError):
    """The requested group key does not exist in the grouping."""

    def __str__(self) -> str:
        return Exception.__str__(self)

"""Copy-on-write holders for data shared between frames.

Slicing a DataFrame by columns doesn't need to touch its rows,
and slicing it by rows doesn't need to touch its column labels.
Instead of copying the parts that didn't change, the new frame
can share them with the frame it was derived from.

Sharing is only safe as far as nobody modifies the shared data,
so the data is wrapped in a :class:`Cow` holder that can be in two states:

* **owned**: the holder is the only one referencing the value,
  so it can be modified in place.
* **shared**: the value is referenced by more than one holder,
  before modifying it a private copy has to be made.

When a holder is shared through :meth:`Cow.share`, both the original
holder and the new one become shared views. The first of them
that needs to modify the value will make its own copy and become
owned, while the other one keeps seeing the original value::

    frame A  --(owned)-->  [X, Y]

    B = A.igets([0, 1])

    frame A  --(shared)-->  [X, Y]  <--(shared)--  frame B

    B.insert(Z)

    frame A  --(shared)-->  [X, Y]
    frame B  --(owned)-->   [X, Y, Z]

>>> data = Cow.owned([1, 2])
>>> view = data.share()
>>> view.to_mut().append(3)
>>> data.value, view.value
([1, 2], [1, 2, 3])
"""

import copy
import logging
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Cow(Generic[T]):
    """Hold a value that is either owned or shared with other holders."""

    __slots__ = ("_value", "_shared")

    def __init__(self, value: T, shared: bool = False) -> None:
        """
        :param value: The data being held. To be copied it must provide
                      a ``copy()`` method or support :func:`copy.copy`.
        :param shared: If the value is already referenced by other holders.
        """
        self._value = value
        self._shared = shared

    @classmethod
    def owned(cls, value: T) -> "Cow[T]":
        """Wrap a value that nobody else references."""
        return cls(value, shared=False)

    @property
    def value(self) -> T:
        """Read-only access to the held value.

        The returned value must never be modified,
        use :meth:`to_mut` to get a modifiable one.
        """
        return self._value

    @property
    def is_shared(self) -> bool:
        return self._shared

    def share(self) -> "Cow[T]":
        """Create a new holder referencing the same value.

        Both this holder and the returned one are flagged as shared,
        so whoever modifies the value first will make a copy of it.
        """
        self._shared = True
        return self.__class__(self._value, shared=True)

    def to_mut(self) -> T:
        """Get the value for modification.

        If the value is shared, a private copy is made
        and this holder becomes its owner. The other holders
        keep referencing the original value.
        """
        if self._shared:
            logger.debug("Materializing shared %s", type(self._value).__name__)
            self._value = _copy_value(self._value)
            self._shared = False
        return self._value

    def __repr__(self) -> str:
        state = "shared" if self._shared else "owned"
        return f"Cow({state}, {self._value!r})"


def _copy_value(value: Any) -> Any:
    copier = getattr(value, "copy", None)
    if callable(copier):
        return copier()
    return copy.copy(value)

"""The FramePyground core engine.

The core is in charge of the bookkeeping that frames need
to work on labeled data, without dealing with the data itself:

* :class:`Indexer` translates labels to positions and back.
* :class:`HashGrouper` partitions positions by key for group by operations.
* :class:`HashJoin` pairs the positions of matching labels for joins.
* :class:`Cow` allows frames to share data until one of them modifies it.

All of them work with labels and positions only, the values of the columns
are stored in Apache Arrow arrays and are only touched when a frame
gathers them at the positions computed by the core:

>>> from framepyground.core import Indexer, HashJoin
>>> left, right = Indexer(["a", "b", "c"]), Indexer(["c", "a"])
>>> labels, left_positions, right_positions = HashJoin.inner(left, right)
>>> labels, left_positions, right_positions
(['a', 'c'], [0, 2], [1, 0])
"""

from . import aggregate, arrays
from .cow import Cow
from .grouper import HashGrouper
from .indexer import Indexer
from .join import HashJoin

__all__ = (
    "aggregate",
    "arrays",
    "Cow",
    "HashGrouper",
    "Indexer",
    "HashJoin",
)

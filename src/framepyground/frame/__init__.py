"""Labeled frames built on top of the framepyground core.

A frame library is a tool designed to handle and manipulate structured data,
typically in the form of tables (i.e., rows and columns).
It allows users to select rows and columns, apply transformations,
and analyze the data.

FramePyground provides two kinds of frames:

* :class:`Series`, a single column of values where each value has a label.
* :class:`DataFrame`, multiple columns sharing the same row labels,
  where each column has its own label too.

Both of them allow to select data by label or by position,
group it with :class:`GroupBy` to compute per group statistics,
and combine it with other frames through the functions in
:mod:`framepyground.frame.reshape`.

>>> from framepyground.frame import DataFrame
>>> df = DataFrame.from_dict({"city": ["NY", "LA", "NY"], "n": [10, 8, 20]})
>>> totals = df.gets(["n"]).groupby(df.get("city")).sum()
>>> list(totals.index), totals.get("n").to_pylist()
(['LA', 'NY'], [8, 30])
"""

from . import reshape
from .dataframe import DataFrame
from .groupby import GroupBy
from .series import Series

__all__ = ("DataFrame", "GroupBy", "Series", "reshape")

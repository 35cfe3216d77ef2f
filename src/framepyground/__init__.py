"""FramePyground

An in-memory engine for labeled tabular data,
built for learning and teaching purposes.

Data is organized in frames: ordered collections of equally long
columns, where both rows and columns are identified by labels.
Frames can be sliced by label or by position, extended with new
columns, grouped to compute per group aggregations and joined together.

The platform is constituted by multiple components, each isolated within its own
package and each self documented in literate programming style.

The primary components are:

* The Core, in charge of the bookkeeping of labels, groups and joins.
* The Frame API, which provides the Series and DataFrame objects
  on top of the core, storing values in Apache Arrow arrays.

For the user guide and code documentation of each component, refer to the
component itself.
"""

from . import core, errors, frame
from .frame import DataFrame, GroupBy, Series

__all__ = ("core", "errors", "frame", "DataFrame", "GroupBy", "Series")

"""
Cursors and eager helpers that make up a query pipeline

- Lazy cursors: SequenceCursor, FilterCursor, ProjectCursor, DistinctCursor
- Construction-time helpers: skip_range, take_range
- Eager helpers: sort_items, group_items, union/intersect/except/concat

Example:
    ```python
    from linqstream.operators import FilterCursor, SequenceCursor

    data = [1, 2, 3, 4]
    end = SequenceCursor(data, len(data))
    cursor = FilterCursor(SequenceCursor(data), end, lambda x: x % 2 == 0)
    cursor.current()  # 2
    ```
"""

from linqstream.operators.base import Cursor
from linqstream.operators.distinct import DistinctCursor
from linqstream.operators.filter import FilterCursor
from linqstream.operators.groupby import group_items
from linqstream.operators.limit import advance_by, skip_range, take_range
from linqstream.operators.orderby import ReverseCompare, SortKey, sort_items
from linqstream.operators.project import ProjectCursor
from linqstream.operators.scan import SequenceCursor
from linqstream.operators.setops import concat_items, except_items, intersect_items, union_items

__all__ = [
    "Cursor",
    "DistinctCursor",
    "FilterCursor",
    "ProjectCursor",
    "ReverseCompare",
    "SequenceCursor",
    "SortKey",
    "advance_by",
    "concat_items",
    "except_items",
    "group_items",
    "intersect_items",
    "skip_range",
    "sort_items",
    "take_range",
    "union_items",
]

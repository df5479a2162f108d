"""
Set operation helpers - implement union(), intersect(), except_() and concat()

Uses hash sets for membership:
1. Build Phase: materialize the right side into a set (intersect/except)
2. Probe Phase: scan the left side, testing membership
3. Output: a fresh list with duplicates removed, first occurrence wins

Note: these helpers materialize their result; the right side of
intersect/except is held in memory as a set.
"""

from collections.abc import Iterable
from itertools import chain
from typing import Any, List


def union_items(left: Iterable[Any], right: Iterable[Any]) -> List[Any]:
    """Elements of left then right, each distinct value once"""
    return _unique(chain(left, right))


def intersect_items(left: Iterable[Any], right: Iterable[Any]) -> List[Any]:
    """Distinct elements of left that also occur in right"""
    right_set = set(right)
    return _unique(item for item in left if item in right_set)


def except_items(left: Iterable[Any], right: Iterable[Any]) -> List[Any]:
    """Distinct elements of left that do not occur in right"""
    right_set = set(right)
    return _unique(item for item in left if item not in right_set)


def concat_items(left: Iterable[Any], right: Iterable[Any]) -> List[Any]:
    """Elements of left followed by elements of right, duplicates kept"""
    return list(chain(left, right))


def _unique(items: Iterable[Any]) -> List[Any]:
    seen = set()
    result = []

    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)

    return result

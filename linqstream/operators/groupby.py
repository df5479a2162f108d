"""
Grouping helper - implements group_by()

Hash-based grouping:
1. Scan all input elements once
2. Append each element to the bucket of its key
3. Return buckets ordered by key ascending
"""

from collections.abc import Iterable
from typing import Any, Callable, Dict, List, Optional, Tuple

from linqstream.operators.orderby import null_last


def group_items(
    items: Iterable[Any],
    key_selector: Callable[[Any], Any],
    element_selector: Optional[Callable[[Any], Any]] = None,
) -> List[Tuple[Any, List[Any]]]:
    """
    Bucket elements by key

    Args:
        items: Elements to group
        key_selector: Computes the (hashable) group key of an element
        element_selector: Optional transform applied to each member

    Returns:
        List of (key, members) pairs sorted by key, None keys last.
        Members keep the order they were encountered in.
    """
    # Hash map: group_key -> members
    groups: Dict[Any, List[Any]] = {}

    for item in items:
        key = key_selector(item)
        member = element_selector(item) if element_selector is not None else item

        if key not in groups:
            groups[key] = []
        groups[key].append(member)

    return sorted(groups.items(), key=lambda pair: null_last(pair[0]))

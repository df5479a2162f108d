"""
Sorting helpers - implement order_by() and the then_by() family

Sorts materialized elements by a list of sort keys with ASC/DESC
directions in a single stable pass.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Literal

from linqstream.operators.base import describe_callable


@dataclass(frozen=True)
class SortKey:
    """
    One level of a multi-key sort

    Examples:
        SortKey(len), SortKey(lambda p: p.age, "DESC")
    """

    selector: Callable[[Any], Any]
    direction: Literal["ASC", "DESC"] = "ASC"

    def __repr__(self) -> str:
        return f"{describe_callable(self.selector)} {self.direction}"


def sort_items(items: List[Any], sort_keys: List[SortKey]) -> List[Any]:
    """
    Return a new list sorted by sort_keys in priority order

    The first key dominates and each later key only breaks ties left by
    the keys before it. The sort is stable, so elements equal under
    every key keep their input order.

    Args:
        items: Elements to sort (not modified)
        sort_keys: Keys in priority order

    Returns:
        Sorted copy of items
    """
    return sorted(items, key=lambda item: composite_key(item, sort_keys))


def composite_key(item: Any, sort_keys: List[SortKey]) -> tuple:
    """
    Generate the tuple sort key of an element

    Args:
        item: Element to key
        sort_keys: Keys in priority order

    Returns:
        Tuple with one (null_flag, value) part per sort key
    """
    key_parts = []

    for sort_key in sort_keys:
        key_parts.append(null_last(sort_key.selector(item), sort_key.direction == "DESC"))

    return tuple(key_parts)


def null_last(value: Any, descending: bool = False) -> tuple:
    """
    Wrap a key so None sorts after every other value

    Args:
        value: Raw key value
        descending: Reverse the comparison of non-None values

    Returns:
        (flag, value) pair usable inside a sort key
    """
    if value is None:
        return (1, None)

    if descending:
        return (0, ReverseCompare(value))

    return (0, value)


class ReverseCompare:
    """
    Wrapper class to reverse comparison order

    Used for DESC keys so that a single ascending sort can mix ASC and
    DESC levels.
    """

    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value

    def __lt__(self, other):
        if isinstance(other, ReverseCompare):
            return self.value > other.value
        return self.value > other

    def __gt__(self, other):
        if isinstance(other, ReverseCompare):
            return self.value < other.value
        return self.value < other

    def __le__(self, other):
        if isinstance(other, ReverseCompare):
            return self.value >= other.value
        return self.value >= other

    def __ge__(self, other):
        if isinstance(other, ReverseCompare):
            return self.value <= other.value
        return self.value <= other

    def __eq__(self, other):
        if isinstance(other, ReverseCompare):
            return self.value == other.value
        return self.value == other

    __hash__ = None

    def __repr__(self):
        return f"ReverseCompare({self.value!r})"

"""
Ordered query - result of order_by() / order_by_descending()

Adds then_by() refinement on top of a sorted, owned buffer.
"""

from collections.abc import Iterable
from typing import Any, Callable, List

from linqstream.core.query import Query, T
from linqstream.operators.orderby import SortKey, sort_items
from linqstream.operators.scan import SequenceCursor


class OrderedQuery(Query[T]):
    """
    Query over a buffer sorted by one or more keys

    Keys apply in the order they were given: order_by() sets the primary
    key and each then_by() / then_by_descending() only breaks the ties
    left by the keys before it, so

        query(people).order_by(lambda p: p.city).then_by(lambda p: p.age)

    sorts by city, and by age within each city. All sorting is stable:
    elements equal under every key keep their original relative order.

    then_by() returns a new OrderedQuery and leaves this one untouched.
    """

    def __init__(self, buffer: List[T], sort_keys: List[SortKey]):
        """
        Initialize ordered query

        Args:
            buffer: Already-sorted elements (owned by this query)
            sort_keys: Keys buffer is sorted by, in priority order
        """
        super().__init__(SequenceCursor(buffer, 0), SequenceCursor(buffer, len(buffer)), buffer=buffer)
        self.sort_keys = sort_keys

    @classmethod
    def sorted_from(cls, items: Iterable[T], sort_keys: List[SortKey]) -> "OrderedQuery[T]":
        """Materialize items and sort them by sort_keys"""
        return cls(sort_items(list(items), sort_keys), list(sort_keys))

    def then_by(self, key_selector: Callable[[T], Any]) -> "OrderedQuery[T]":
        """Break remaining ties by key_selector, ascending"""
        return self._refine(SortKey(key_selector, "ASC"))

    def then_by_descending(self, key_selector: Callable[[T], Any]) -> "OrderedQuery[T]":
        """Break remaining ties by key_selector, descending"""
        return self._refine(SortKey(key_selector, "DESC"))

    def _refine(self, sort_key: SortKey) -> "OrderedQuery[T]":
        # The buffer is already ordered by the existing keys, so a stable
        # sort on the extended key reorders only within tied runs.
        return OrderedQuery.sorted_from(self._buffer, self.sort_keys + [sort_key])

    def __repr__(self) -> str:
        keys = ", ".join(repr(k) for k in self.sort_keys)
        return f"OrderedQuery({keys}; {len(self._buffer)} items)"

"""
Main Query API - user-facing interface for linqstream

This is the primary entry point for users. It provides a fluent API
for filtering, projecting, ordering, grouping and reducing in-memory
collections.

Example:
    >>> from linqstream import query
    >>> words = ["apple", "banana", "cherry", "date", "fig"]
    >>> query(words).where(lambda w: len(w) > 4).select(str.upper).to_list()
    ['APPLE', 'BANANA', 'CHERRY']
"""

from collections.abc import Iterable, Sequence
from functools import reduce
from typing import Any, Callable, Dict, Generic, Iterator, List, Literal, Optional, Tuple, TypeVar
import warnings

from linqstream.core.errors import (
    DuplicateKeyWarning,
    EmptySequenceError,
    KeyCollisionError,
    MultipleElementsError,
    OutOfRangeError,
)
from linqstream.operators.base import Cursor
from linqstream.operators.distinct import DistinctCursor
from linqstream.operators.filter import FilterCursor
from linqstream.operators.groupby import group_items
from linqstream.operators.limit import advance_by, skip_range, take_range
from linqstream.operators.orderby import SortKey, null_last
from linqstream.operators.project import ProjectCursor
from linqstream.operators.scan import SequenceCursor
from linqstream.operators.setops import concat_items, except_items, intersect_items, union_items
from linqstream.utils.aggregates import create_aggregator

T = TypeVar("T")

KeyCollisionPolicy = Literal["first", "last", "warn", "error"]

_COLLISION_POLICIES = ("first", "last", "warn", "error")

_missing = object()


class Query(Generic[T]):
    """
    Composable view over a sequence

    A Query is a (begin, end) cursor pair plus, for queries produced by
    an eager operator, the buffer those cursors point into:

    - Borrowed: built over a caller's sequence. The query owns nothing;
      the caller must keep the sequence alive and unmodified.
    - Owning: built over a list the query materialized itself. Derived
      queries keep a reference to the same buffer.

    Lazy operators (where, select, distinct, skip, take) wrap the current
    cursors and return a new Query without reading any element beyond
    what skip/take need to position themselves. Eager operators
    (order_by, reverse, group_by, union, ...) read everything into a new
    buffer. Terminal operators consume the query.

    A Query can be iterated any number of times; each pass starts from a
    fresh clone of the begin cursor.
    """

    def __init__(self, begin: Cursor, end: Cursor, buffer: Optional[List[T]] = None):
        """
        Initialize query over a cursor pair

        Args:
            begin: Cursor at the first element
            end: Cursor one past the last element
            buffer: List the cursors point into, when this query owns it
        """
        self._begin = begin
        self._end = end
        self._buffer = buffer

    @classmethod
    def borrow(cls, collection: Sequence) -> "Query":
        """Build a query that ranges over collection without copying it"""
        return Query(SequenceCursor(collection, 0), SequenceCursor(collection, len(collection)))

    @classmethod
    def owning(cls, buffer: List[Any]) -> "Query":
        """Build a query that owns buffer"""
        return Query(SequenceCursor(buffer, 0), SequenceCursor(buffer, len(buffer)), buffer=buffer)

    @property
    def is_owning(self) -> bool:
        """True if this query (or the query it derives from) owns its data"""
        return self._buffer is not None

    def begin(self) -> Cursor:
        """Return a fresh cursor at the first element"""
        return self._begin.clone()

    def end(self) -> Cursor:
        """Return a cursor at the end position"""
        return self._end.clone()

    def __iter__(self) -> Iterator[T]:
        """
        Yield elements lazily

        Yields:
            Elements in sequence order
        """
        cursor = self._begin.clone()
        while not cursor.at_end(self._end):
            yield cursor.current()
            cursor.advance()

    # --------- lazy operators ----------

    def where(self, predicate: Callable[[T], bool]) -> "Query[T]":
        """Keep only elements for which predicate returns True"""
        return Query(
            FilterCursor(self._begin.clone(), self._end, predicate),
            FilterCursor(self._end.clone(), self._end, predicate),
            self._buffer,
        )

    def select(self, transform: Callable[[T], Any]) -> "Query":
        """Map every element through transform"""
        return Query(
            ProjectCursor(self._begin.clone(), transform),
            ProjectCursor(self._end.clone(), transform),
            self._buffer,
        )

    def distinct(self) -> "Query[T]":
        """
        Drop repeated elements, keeping each value's first occurrence

        Elements must be hashable.
        """
        seen: Dict[Any, int] = {}
        return Query(
            DistinctCursor(self._begin.clone(), self._end, seen),
            DistinctCursor(self._end.clone(), self._end, seen),
            self._buffer,
        )

    def skip(self, count: int) -> "Query[T]":
        """
        Drop the first count elements

        The new start position is found now, by a single forward walk.

        Raises:
            ValueError: If count is negative
        """
        begin, end = skip_range(self._begin, self._end, count)
        return Query(begin, end, self._buffer)

    def take(self, count: int) -> "Query[T]":
        """
        Keep at most the first count elements

        The new end position is found now, by a single forward walk.

        Raises:
            ValueError: If count is negative
        """
        begin, end = take_range(self._begin, self._end, count)
        return Query(begin, end, self._buffer)

    # --------- eager operators ----------

    def order_by(self, key_selector: Callable[[T], Any]) -> "OrderedQuery[T]":
        """Sort ascending by key_selector into a new owned buffer"""
        from linqstream.core.ordered import OrderedQuery

        return OrderedQuery.sorted_from(self, [SortKey(key_selector, "ASC")])

    def order_by_descending(self, key_selector: Callable[[T], Any]) -> "OrderedQuery[T]":
        """Sort descending by key_selector into a new owned buffer"""
        from linqstream.core.ordered import OrderedQuery

        return OrderedQuery.sorted_from(self, [SortKey(key_selector, "DESC")])

    def reverse(self) -> "Query[T]":
        """Copy elements into a new owned buffer in reverse order"""
        buffer = list(self)
        buffer.reverse()
        return Query.owning(buffer)

    def group_by(
        self,
        key_selector: Callable[[T], Any],
        element_selector: Optional[Callable[[T], Any]] = None,
    ) -> "Query[Grouping]":
        """
        Partition elements by key

        Args:
            key_selector: Computes the (hashable) key of an element
            element_selector: Optional transform applied to each member

        Returns:
            Owning query of Grouping objects, ascending by key (None
            keys last). Members keep their encounter order.
        """
        from linqstream.core.grouping import Grouping

        groups = [Grouping(key, members) for key, members in group_items(self, key_selector, element_selector)]
        return Query.owning(groups)

    def union(self, other: Iterable[T]) -> "Query[T]":
        """Distinct elements of this query followed by those of other"""
        return Query.owning(union_items(self, query(other)))

    def intersect(self, other: Iterable[T]) -> "Query[T]":
        """Distinct elements of this query that also occur in other"""
        return Query.owning(intersect_items(self, query(other)))

    def except_(self, other: Iterable[T]) -> "Query[T]":
        """Distinct elements of this query that do not occur in other"""
        return Query.owning(except_items(self, query(other)))

    def concat(self, other: Iterable[T]) -> "Query[T]":
        """Elements of this query followed by those of other, duplicates kept"""
        return Query.owning(concat_items(self, query(other)))

    # --------- conversion ----------

    def to_list(self) -> List[T]:
        """
        Materialize all results into a list

        Example:
            >>> query([1, 2, 3, 4, 5]).where(lambda x: x > 2).to_list()
            [3, 4, 5]
        """
        return list(self)

    def to_array(self) -> Tuple[T, ...]:
        """Materialize all results into a tuple"""
        return tuple(self)

    def to_counted_array(self) -> Tuple[Optional[Tuple[T, ...]], int]:
        """
        Materialize results together with their count

        Returns:
            (items, count), or (None, 0) when there are no results
        """
        items = tuple(self)
        if not items:
            return None, 0
        return items, len(items)

    def to_dict(
        self,
        key_selector: Callable[[T], Any],
        value_selector: Optional[Callable[[T], Any]] = None,
        on_duplicate: KeyCollisionPolicy = "first",
    ) -> Dict[Any, Any]:
        """
        Build a mapping whose iteration order is ascending by key

        Args:
            key_selector: Computes the key of an element
            value_selector: Computes the value (default: the element)
            on_duplicate: What to do when a key repeats
                - "first": keep the first value silently
                - "last": keep the last value
                - "warn": keep the first value, emit DuplicateKeyWarning
                - "error": raise KeyCollisionError

        Example:
            >>> query(["bb", "a", "ccc"]).to_dict(len)
            {1: 'a', 2: 'bb', 3: 'ccc'}
        """
        mapping = self._build_mapping(key_selector, value_selector, on_duplicate)
        return dict(sorted(mapping.items(), key=lambda pair: null_last(pair[0])))

    def to_unordered_dict(
        self,
        key_selector: Callable[[T], Any],
        value_selector: Optional[Callable[[T], Any]] = None,
        on_duplicate: KeyCollisionPolicy = "first",
    ) -> Dict[Any, Any]:
        """Same as to_dict() without sorting keys; no iteration order is promised"""
        return self._build_mapping(key_selector, value_selector, on_duplicate)

    def _build_mapping(
        self,
        key_selector: Callable[[T], Any],
        value_selector: Optional[Callable[[T], Any]],
        on_duplicate: KeyCollisionPolicy,
    ) -> Dict[Any, Any]:
        if on_duplicate not in _COLLISION_POLICIES:
            raise ValueError(
                f"Unknown key collision policy: {on_duplicate!r}. "
                f"Expected one of: {', '.join(_COLLISION_POLICIES)}"
            )

        mapping: Dict[Any, Any] = {}

        for item in self:
            key = key_selector(item)
            value = value_selector(item) if value_selector is not None else item

            if key not in mapping or on_duplicate == "last":
                mapping[key] = value
            elif on_duplicate == "error":
                raise KeyCollisionError(key)
            elif on_duplicate == "warn":
                warnings.warn(f"Dropping element with duplicate key {key!r}", DuplicateKeyWarning)

        return mapping

    def to_dataframe(self, columns: Optional[List[str]] = None):
        """
        Materialize results into a pandas DataFrame

        Raises:
            ImportError: If pandas is not installed
        """
        from linqstream.core.pandas_export import to_dataframe

        return to_dataframe(self, columns)

    # --------- quantifiers ----------

    def any(self, predicate: Optional[Callable[[T], bool]] = None) -> bool:
        """True if there is at least one element (matching predicate)"""
        if predicate is None:
            return not self._begin.at_end(self._end)
        return any(predicate(item) for item in self)

    def all(self, predicate: Callable[[T], bool]) -> bool:
        """True if every element matches predicate (vacuously True when empty)"""
        return all(predicate(item) for item in self)

    # --------- element operators ----------

    def first(self, predicate: Optional[Callable[[T], bool]] = None) -> T:
        """
        Return the first (matching) element

        Raises:
            EmptySequenceError: If there is no such element
        """
        result = self._filtered(predicate).first_or_default(default=_missing)
        if result is _missing:
            raise EmptySequenceError()
        return result

    def first_or_default(self, predicate: Optional[Callable[[T], bool]] = None, default: Any = None) -> Any:
        """Return the first (matching) element, or default"""
        for item in self._filtered(predicate):
            return item
        return default

    def last(self, predicate: Optional[Callable[[T], bool]] = None) -> T:
        """
        Return the last (matching) element

        Scans the whole sequence.

        Raises:
            EmptySequenceError: If there is no such element
        """
        result = self._filtered(predicate).last_or_default(default=_missing)
        if result is _missing:
            raise EmptySequenceError()
        return result

    def last_or_default(self, predicate: Optional[Callable[[T], bool]] = None, default: Any = None) -> Any:
        """Return the last (matching) element, or default"""
        result = default
        for item in self._filtered(predicate):
            result = item
        return result

    def single(self, predicate: Optional[Callable[[T], bool]] = None) -> T:
        """
        Return the only (matching) element

        Raises:
            EmptySequenceError: If there is no such element
            MultipleElementsError: If there is more than one
        """
        result = self.single_or_default(predicate, default=_missing)
        if result is _missing:
            raise EmptySequenceError()
        return result

    def single_or_default(self, predicate: Optional[Callable[[T], bool]] = None, default: Any = None) -> Any:
        """
        Return the only (matching) element, or default if there is none

        Raises:
            MultipleElementsError: If there is more than one
        """
        result = default
        found = False

        for item in self._filtered(predicate):
            if found:
                raise MultipleElementsError()
            result = item
            found = True

        return result

    def element_at(self, index: int) -> T:
        """
        Return the element at position index (linear scan)

        Raises:
            OutOfRangeError: If index is negative or past the end
        """
        result = self.element_at_or_default(index, default=_missing)
        if result is _missing:
            raise OutOfRangeError(f"Index {index} is out of range")
        return result

    def element_at_or_default(self, index: int, default: Any = None) -> Any:
        """Return the element at position index, or default if there is none"""
        if index < 0:
            return default

        cursor, steps = advance_by(self._begin, self._end, index)
        if steps < index or cursor.at_end(self._end):
            return default
        return cursor.current()

    # --------- reductions ----------

    def count(self, predicate: Optional[Callable[[T], bool]] = None) -> int:
        """Number of (matching) elements; scans the sequence"""
        return self._filtered(predicate)._reduce("COUNT")

    def sum(self, selector: Optional[Callable[[T], Any]] = None) -> Any:
        """Sum of elements (or of selector results); 0 when empty"""
        return self._selected(selector)._reduce("SUM")

    def min(self, selector: Optional[Callable[[T], Any]] = None) -> Any:
        """
        Smallest element (or selector result)

        Raises:
            EmptySequenceError: If the sequence is empty
        """
        return self._selected(selector)._reduce("MIN")

    def max(self, selector: Optional[Callable[[T], Any]] = None) -> Any:
        """
        Largest element (or selector result)

        Raises:
            EmptySequenceError: If the sequence is empty
        """
        return self._selected(selector)._reduce("MAX")

    def average(self, selector: Optional[Callable[[T], Any]] = None) -> float:
        """
        Arithmetic mean of elements (or selector results)

        Raises:
            EmptySequenceError: If the sequence is empty
        """
        return self._selected(selector)._reduce("AVG")

    def aggregate(self, seed: Any, func: Callable[[Any, T], Any]) -> Any:
        """
        Left fold: func(...func(func(seed, e0), e1)..., en)

        Example:
            >>> query([1, 2, 3]).aggregate(10, lambda acc, x: acc + x)
            16
        """
        return reduce(func, self, seed)

    # --------- helpers ----------

    def _filtered(self, predicate: Optional[Callable[[T], bool]]) -> "Query[T]":
        return self if predicate is None else self.where(predicate)

    def _selected(self, selector: Optional[Callable[[T], Any]]) -> "Query":
        return self if selector is None else self.select(selector)

    def _reduce(self, function: str) -> Any:
        aggregator = create_aggregator(function)
        for item in self:
            aggregator.update(item)
        return aggregator.result()

    def explain(self) -> str:
        """
        Get the cursor chain of this query

        Only the chain behind the begin cursor is described. Bounds set
        by skip() and take() are cursor positions, not cursors, so
        query(x).take(2).explain() reads the same as query(x).explain().

        Returns:
            Human-readable description, outermost cursor first

        Example:
            >>> print(query([3, 1, 2]).where(lambda x: x > 1).explain())
            Filter(<lambda>)
              Sequence(list, 3 items)
        """
        return "\n".join(self._begin.explain())

    def __repr__(self) -> str:
        kind = "owning" if self.is_owning else "borrowed"
        return f"{self.__class__.__name__}({kind}, {self._begin!r})"


# Convenience function for top-level API
def query(collection: Iterable[T]) -> Query[T]:
    """
    Create a query over a collection

    This is the main entry point for the linqstream API.

    Sequences (list, tuple, str, range, ...) are borrowed: the query
    reads them in place and they must stay alive and unmodified while
    the query is used. Any other iterable (set, dict, generator, ...)
    is copied once into a list owned by the query, so it can be
    iterated repeatedly. A Query is returned unchanged.

    Args:
        collection: Elements to query

    Returns:
        Query object

    Example:
        >>> from linqstream import query
        >>> query([1, 2, 3, 4, 5]).where(lambda x: x % 2 == 0).to_list()
        [2, 4]
    """
    if isinstance(collection, Query):
        return collection
    if isinstance(collection, Sequence):
        return Query.borrow(collection)
    if not isinstance(collection, Iterable):
        raise TypeError(f"Cannot query a {type(collection).__name__}: object is not iterable")
    return Query.owning(list(collection))

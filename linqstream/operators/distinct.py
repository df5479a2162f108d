"""
Distinct cursor - implements distinct()

Skips elements that already occurred earlier in the range, keeping the
first occurrence of every value in its original order.
"""

from typing import Any, Dict, Hashable, Optional

from linqstream.operators.base import Cursor


class DistinctCursor(Cursor):
    """
    Distinct cursor - yields each value at its first occurrence only

    All cursors cloned from one distinct() call share a single history
    mapping each value to the ordinal (number of child steps from the
    start of the range) where it first appeared. A cursor rests on a
    value only when its own ordinal is that first ordinal. Because the
    history is keyed by position rather than "seen or not", a clone
    that re-walks the range, or a snapshot taken by skip()/take(),
    sees exactly the same elements as the cursor that recorded them.

    Elements must be hashable.
    """

    def __init__(self, child: Cursor, end: Cursor, seen: Optional[Dict[Hashable, int]] = None):
        """
        Initialize distinct cursor

        Args:
            child: Cursor to pull positions from
            end: End position of the child range
            seen: Shared first-occurrence history (a new one when omitted)
        """
        super().__init__(child)
        self.end = end
        self.seen = seen if seen is not None else {}
        self.ordinal = 0
        self._skip_repeats()

    def current(self) -> Any:
        return self.child.current()

    def advance(self) -> None:
        self.child.advance()
        self.ordinal += 1
        self._skip_repeats()

    def _skip_repeats(self) -> None:
        while not self.child.at_end(self.end):
            first = self.seen.setdefault(self.child.current(), self.ordinal)
            if first == self.ordinal:
                return
            self.child.advance()
            self.ordinal += 1

    def __repr__(self) -> str:
        return "Distinct()"

"""
Filter cursor - implements where()

Skips positions whose element does not satisfy a predicate.
"""

from typing import Any, Callable

from linqstream.operators.base import Cursor, describe_callable


class FilterCursor(Cursor):
    """
    Filter cursor - only rests on matching elements

    The cursor is either positioned on an element for which the
    predicate holds, or it is at its end. Construction and every
    advance() step forward until one of those is true, so current()
    never has to test the predicate again.
    """

    def __init__(self, child: Cursor, end: Cursor, predicate: Callable[[Any], bool]):
        """
        Initialize filter cursor

        Args:
            child: Cursor to pull positions from
            end: End position of the child range
            predicate: Returns True for elements to keep
        """
        super().__init__(child)
        self.end = end
        self.predicate = predicate
        self._skip_rejected()

    def current(self) -> Any:
        return self.child.current()

    def advance(self) -> None:
        self.child.advance()
        self._skip_rejected()

    def _skip_rejected(self) -> None:
        while not self.child.at_end(self.end) and not self.predicate(self.child.current()):
            self.child.advance()

    def __repr__(self) -> str:
        return f"Filter({describe_callable(self.predicate)})"

"""
Base cursor class for lazy query pipelines

A cursor is a position in a sequence. Adapter cursors wrap a child
cursor and change what is read (projection) or which positions are
visited (filtering, deduplication), so a chain of adapters is pulled
one element at a time without building intermediate collections.
"""

import copy
from typing import Any, List, Optional


class Cursor:
    """
    Base class for all cursors

    Cursors form a chain where:
    - Leaf cursors (e.g., SequenceCursor) index into real data
    - Adapter cursors (e.g., FilterCursor) wrap a child cursor
    - A Query holds a (begin, end) pair of the outermost cursor type

    Every cursor supports:
    - current(): read the element at this position
    - advance(): move to the next position
    - at_end(end): positional equality against a companion end cursor
    - clone(): an independent copy at the same position
    """

    def __init__(self, child: Optional["Cursor"] = None):
        """
        Initialize cursor

        Args:
            child: Cursor this adapter wraps (None for leaf cursors)
        """
        self.child = child

    def current(self) -> Any:
        """
        Return the element at this position

        Must not be called once the cursor has reached its end.
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement current()")

    def advance(self) -> None:
        """Move to the next position"""
        raise NotImplementedError(f"{self.__class__.__name__} must implement advance()")

    def at_end(self, end: "Cursor") -> bool:
        """Check whether this cursor has reached the given end position"""
        return self == end

    def clone(self) -> "Cursor":
        """
        Copy this cursor without disturbing the original

        The copy is shallow: predicates, transforms and any shared
        bookkeeping (the dedupe history) are referenced, not duplicated.
        Only the position-carrying child chain is cloned.
        """
        twin = copy.copy(self)
        if self.child is not None:
            twin.child = self.child.clone()
        return twin

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor) or type(other) is not type(self):
            return NotImplemented
        return self.child == other.child

    __hash__ = None

    def explain(self, indent: int = 0) -> List[str]:
        """Describe this cursor and its children, one line per level"""
        lines = [" " * indent + repr(self)]
        if self.child is not None:
            lines.extend(self.child.explain(indent + 2))
        return lines

    def __repr__(self) -> str:
        """String representation for debugging"""
        return f"{self.__class__.__name__}()"


def describe_callable(fn: Any) -> str:
    """Short name for a predicate or selector, used in explain output"""
    return getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None) or repr(fn)

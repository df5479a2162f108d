"""
Sequence cursor - positions over a Python sequence

This is the leaf cursor (has no child). Every query bottoms out in a
pair of these, either borrowed from a caller's collection or pointing
into a buffer the query owns.
"""

from collections.abc import Sequence
from typing import Any

from linqstream.core.errors import OutOfRangeError
from linqstream.operators.base import Cursor


class SequenceCursor(Cursor):
    """
    Index-based cursor over an indexable sequence

    Two cursors are equal when they index the same sequence object at
    the same position.
    """

    def __init__(self, data: Sequence, index: int = 0):
        """
        Initialize sequence cursor

        Args:
            data: Sequence to index into (never copied)
            index: Starting position
        """
        super().__init__(child=None)
        self.data = data
        self.index = index

    def current(self) -> Any:
        if self.index >= len(self.data):
            raise OutOfRangeError(
                f"Cursor at position {self.index} is past the end of a sequence "
                f"of {len(self.data)} elements"
            )
        return self.data[self.index]

    def advance(self) -> None:
        self.index += 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SequenceCursor):
            return NotImplemented
        return self.data is other.data and self.index == other.index

    __hash__ = None

    def __repr__(self) -> str:
        return f"Sequence({type(self.data).__name__}, {len(self.data)} items)"

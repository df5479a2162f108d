"""
Project cursor - implements select()

Applies a transform to each element as it is read.
"""

from typing import Any, Callable

from linqstream.operators.base import Cursor, describe_callable


class ProjectCursor(Cursor):
    """
    Project cursor - lazily maps elements through a transform

    The transform runs on every current() call and its result is a new
    value; nothing is cached. Advancing simply moves the child, since a
    projection never skips positions.
    """

    def __init__(self, child: Cursor, transform: Callable[[Any], Any]):
        super().__init__(child)
        self.transform = transform

    def current(self) -> Any:
        return self.transform(self.child.current())

    def advance(self) -> None:
        self.child.advance()

    def __repr__(self) -> str:
        return f"Project({describe_callable(self.transform)})"

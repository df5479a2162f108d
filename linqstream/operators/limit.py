"""
Skip/take helpers - implement skip() and take()

Unlike the adapter cursors these do their work once, when the query is
built: they walk a cloned cursor forward and hand back a new position.
The resulting range is then as cheap to iterate as the original.
"""

from typing import Tuple

from linqstream.operators.base import Cursor


def advance_by(begin: Cursor, end: Cursor, count: int) -> Tuple[Cursor, int]:
    """
    Walk a clone of begin forward by at most count positions

    Args:
        begin: Cursor to start from (left untouched)
        end: End of the range; walking stops here
        count: Maximum number of steps

    Returns:
        (cursor, steps) where steps may be less than count if the
        range ran out first

    Raises:
        ValueError: If count is negative
    """
    if count < 0:
        raise ValueError(f"Count must be >= 0, got {count}")

    cursor = begin.clone()
    steps = 0
    while steps < count and not cursor.at_end(end):
        cursor.advance()
        steps += 1
    return cursor, steps


def skip_range(begin: Cursor, end: Cursor, count: int) -> Tuple[Cursor, Cursor]:
    """Return the (begin, end) pair with the first count positions dropped"""
    new_begin, _ = advance_by(begin, end, count)
    return new_begin, end


def take_range(begin: Cursor, end: Cursor, count: int) -> Tuple[Cursor, Cursor]:
    """Return the (begin, end) pair bounded to the first count positions"""
    new_end, _ = advance_by(begin, end, count)
    return begin.clone(), new_end

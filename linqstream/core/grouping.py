"""
Grouping - one key of a group_by() result and its members
"""

from typing import Any, List

from linqstream.core.query import Query, T
from linqstream.operators.scan import SequenceCursor


class Grouping(Query[T]):
    """
    Keyed sub-sequence produced by group_by()

    A Grouping is itself a Query over its members, so every operator is
    available on it:

        for group in query(words).group_by(len):
            print(group.key, group.select(str.upper).to_list())
    """

    def __init__(self, key: Any, members: List[T]):
        """
        Initialize grouping

        Args:
            key: Value shared by all members
            members: Members in encounter order (owned by this grouping)
        """
        super().__init__(SequenceCursor(members, 0), SequenceCursor(members, len(members)), buffer=members)
        self.key = key

    def __repr__(self) -> str:
        return f"Grouping(key={self.key!r}, {len(self._buffer)} members)"

"""
Exceptions and warnings raised by query operators

Every failure surfaces at the terminal operator that detected it; no
operator retries or returns a partial result alongside an error.
"""


class QueryError(Exception):
    """Base class for errors raised by query operators"""

    pass


class EmptySequenceError(QueryError, ValueError):
    """Raised when an operator needs at least one element and found none"""

    def __init__(self, message: str = "Sequence contains no elements"):
        super().__init__(message)


class MultipleElementsError(QueryError, ValueError):
    """Raised when single() finds more than one matching element"""

    def __init__(self, message: str = "Sequence contains more than one element"):
        super().__init__(message)


class OutOfRangeError(QueryError, IndexError):
    """Raised when a position lies outside the sequence"""

    pass


class KeyCollisionError(QueryError, KeyError):
    """Raised by to_dict() when two elements produce the same key"""

    def __init__(self, key):
        super().__init__(f"Duplicate key: {key!r}")
        self.key = key

    def __str__(self) -> str:
        return self.args[0]


class DuplicateKeyWarning(UserWarning):
    """Emitted by to_dict(on_duplicate="warn") for every dropped element"""

    pass

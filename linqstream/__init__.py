"""
linqstream - composable, lazy queries over in-memory collections

This package provides a fluent query interface for any Python collection:
filtering, projection, ordering, grouping, set operations and reductions,
evaluated lazily where possible and eagerly where the operation needs
to see every element.
"""

__version__ = "0.1.0"

# Main API
from linqstream.core.errors import (
    DuplicateKeyWarning,
    EmptySequenceError,
    KeyCollisionError,
    MultipleElementsError,
    OutOfRangeError,
    QueryError,
)
from linqstream.core.grouping import Grouping
from linqstream.core.ordered import OrderedQuery
from linqstream.core.query import Query, query
from linqstream.operators.orderby import SortKey

__all__ = [
    "__version__",
    "query",
    "Query",
    "OrderedQuery",
    "Grouping",
    "SortKey",
    "QueryError",
    "EmptySequenceError",
    "MultipleElementsError",
    "OutOfRangeError",
    "KeyCollisionError",
    "DuplicateKeyWarning",
]

"""
Pandas export - turns query results into a DataFrame

Falls back gracefully if pandas is not available: importing this module
always works, calling to_dataframe() without pandas raises ImportError.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, List, Optional

try:
    import pandas as pd

    PANDAS_AVAILABLE = True
except ImportError:
    PANDAS_AVAILABLE = False
    pd = None


def to_dataframe(items: Iterable[Any], columns: Optional[List[str]] = None) -> "pd.DataFrame":
    """
    Materialize elements into a pandas DataFrame

    Dict and dataclass elements become one column per field; scalar
    elements become a single column.

    Args:
        items: Elements to export
        columns: Optional column names / order

    Returns:
        DataFrame with one row per element

    Raises:
        ImportError: If pandas is not installed
    """
    if not PANDAS_AVAILABLE:
        raise ImportError(
            "DataFrame export requires pandas library. "
            "Install `linqstream[pandas]`"
        )

    return pd.DataFrame(list(items), columns=columns)

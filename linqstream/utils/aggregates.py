"""
Aggregation function implementations

Provides COUNT, SUM, AVG, MIN, MAX reductions for query terminals.
Each aggregator maintains state and can be updated incrementally.
Unlike SQL aggregates nothing is skipped: every element counts, and a
reduction that has no answer for an empty sequence raises.
"""

from typing import Any, Optional

from linqstream.core.errors import EmptySequenceError


class Aggregator:
    """Base class for aggregators"""

    def update(self, value: Any) -> None:
        """Update aggregator with a new value"""
        raise NotImplementedError

    def result(self) -> Any:
        """Get final aggregated result"""
        raise NotImplementedError


class CountAggregator(Aggregator):
    """COUNT aggregator - counts every element"""

    def __init__(self):
        self.count = 0

    def update(self, value: Any) -> None:
        self.count += 1

    def result(self) -> int:
        return self.count


class SumAggregator(Aggregator):
    """
    SUM aggregator - adds elements left to right

    The first element seeds the total, so any type supporting + works
    (numbers, strings, lists). An empty sum is 0.
    """

    def __init__(self):
        self.total: Optional[Any] = None
        self.seen = False

    def update(self, value: Any) -> None:
        if not self.seen:
            self.total = value
            self.seen = True
        else:
            self.total = self.total + value

    def result(self) -> Any:
        """Return sum, or 0 if there were no values"""
        if not self.seen:
            return 0
        return self.total


class AvgAggregator(Aggregator):
    """AVG aggregator - arithmetic mean of numeric elements"""

    def __init__(self):
        self.sum = 0
        self.count = 0

    def update(self, value: Any) -> None:
        self.sum += value
        self.count += 1

    def result(self) -> float:
        """Return average; raises EmptySequenceError if there were no values"""
        if self.count == 0:
            raise EmptySequenceError()
        return self.sum / self.count


class MinAggregator(Aggregator):
    """MIN aggregator - finds minimum value"""

    def __init__(self):
        self.min: Optional[Any] = None
        self.seen = False

    def update(self, value: Any) -> None:
        if not self.seen or value < self.min:
            self.min = value
            self.seen = True

    def result(self) -> Any:
        """Return minimum value; raises EmptySequenceError if there were no values"""
        if not self.seen:
            raise EmptySequenceError()
        return self.min


class MaxAggregator(Aggregator):
    """MAX aggregator - finds maximum value"""

    def __init__(self):
        self.max: Optional[Any] = None
        self.seen = False

    def update(self, value: Any) -> None:
        if not self.seen or value > self.max:
            self.max = value
            self.seen = True

    def result(self) -> Any:
        """Return maximum value; raises EmptySequenceError if there were no values"""
        if not self.seen:
            raise EmptySequenceError()
        return self.max


def create_aggregator(function: str) -> Aggregator:
    """
    Factory function to create appropriate aggregator

    Args:
        function: Aggregate function name (COUNT, SUM, AVG, MIN, MAX)

    Returns:
        Aggregator instance

    Raises:
        ValueError: If function is not recognized
    """
    function = function.upper()

    if function == "COUNT":
        return CountAggregator()
    elif function == "SUM":
        return SumAggregator()
    elif function == "AVG":
        return AvgAggregator()
    elif function == "MIN":
        return MinAggregator()
    elif function == "MAX":
        return MaxAggregator()
    else:
        raise ValueError(f"Unknown aggregate function: {function}")

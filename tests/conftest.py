"""
Pytest configuration and shared fixtures
"""

from dataclasses import dataclass

import pytest


@dataclass(frozen=True)
class Person:
    id: int
    name: str
    city: str
    age: int


@pytest.fixture
def numbers():
    """Small list of integers"""
    return [1, 2, 3, 4, 5]


@pytest.fixture
def words():
    """Sample words"""
    return ["apple", "banana", "cherry", "date", "fig"]


@pytest.fixture
def people():
    """Sample people for keyed operations"""
    return [
        Person(1, "Alice", "NYC", 30),
        Person(2, "Bob", "LA", 25),
        Person(3, "Charlie", "SF", 35),
        Person(4, "Diana", "NYC", 28),
        Person(5, "Eve", "LA", 25),
    ]


@pytest.fixture
def sales_data():
    """Sample sales rows"""
    return [
        {"city": "NYC", "product": "Widget", "amount": 100},
        {"city": "NYC", "product": "Gadget", "amount": 200},
        {"city": "LA", "product": "Widget", "amount": 150},
        {"city": "LA", "product": "Gadget", "amount": 250},
        {"city": "NYC", "product": "Widget", "amount": 120},
    ]

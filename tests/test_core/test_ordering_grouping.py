"""
Tests for OrderedQuery and Grouping
"""

import pytest

from linqstream import Grouping, OrderedQuery, query


class TestOrderBy:
    """Test primary sorts"""

    def test_order_by(self, numbers):
        """Test ascending result is non-decreasing"""
        result = query([5, 3, 4, 1, 2]).order_by(lambda x: x).to_list()

        assert result == numbers

    def test_order_by_descending(self):
        """Test descending result is non-increasing"""
        result = query([5, 3, 4, 1, 2]).order_by_descending(lambda x: x).to_list()

        assert result == [5, 4, 3, 2, 1]

    def test_order_by_key(self, words):
        """Test sorting by a derived key"""
        result = query(words).order_by(len).to_list()

        assert [len(w) for w in result] == sorted(len(w) for w in words)

    def test_returns_owning_ordered_query(self, numbers):
        """Test the result type and ownership"""
        ordered = query(numbers).order_by(lambda x: -x)

        assert isinstance(ordered, OrderedQuery)
        assert ordered.is_owning

    def test_chaining_after_sort(self, people):
        """Test lazy operators apply to the sorted buffer"""
        names = query(people).order_by(lambda p: p.age).select(lambda p: p.name).take(3).to_list()

        assert names == ["Bob", "Eve", "Diana"]


class TestThenBy:
    """Test secondary sort refinement"""

    def test_then_by_breaks_ties(self, people):
        """Test the primary key dominates and then_by orders within ties"""
        result = query(people).order_by(lambda p: p.city).then_by(lambda p: p.age).to_list()

        assert [p.name for p in result] == ["Bob", "Eve", "Diana", "Alice", "Charlie"]

    def test_then_by_descending(self, people):
        """Test descending tie-breaker"""
        result = query(people).order_by(lambda p: p.city).then_by_descending(lambda p: p.age).to_list()

        assert [p.name for p in result] == ["Bob", "Eve", "Alice", "Diana", "Charlie"]

    def test_three_levels(self, people):
        """Test each later key only breaks remaining ties"""
        result = (
            query(people)
            .order_by(lambda p: p.age)
            .then_by(lambda p: p.city)
            .then_by_descending(lambda p: p.name)
            .to_list()
        )

        assert [p.name for p in result] == ["Eve", "Bob", "Diana", "Alice", "Charlie"]

    def test_then_by_does_not_mutate(self, people):
        """Test refinement returns a new query and keeps the original order"""
        by_city = query(people).order_by(lambda p: p.city)
        before = by_city.to_list()

        refined = by_city.then_by_descending(lambda p: p.age)

        assert refined is not by_city
        assert by_city.to_list() == before

    def test_stable_without_then_by(self, people):
        """Test equal keys keep their input order"""
        result = query(people).order_by(lambda p: p.age).to_list()

        assert [p.name for p in result[:2]] == ["Bob", "Eve"]

    def test_sort_keys_recorded(self, people):
        """Test the ordered query reports its keys"""
        ordered = query(people).order_by(lambda p: p.city).then_by_descending(lambda p: p.age)

        assert [k.direction for k in ordered.sort_keys] == ["ASC", "DESC"]


class TestGroupBy:
    """Test grouping"""

    def test_groups_by_key_ascending(self, sales_data):
        """Test groups are ordered by key"""
        groups = query(sales_data).group_by(lambda r: r["city"]).to_list()

        assert [g.key for g in groups] == ["LA", "NYC"]
        assert all(isinstance(g, Grouping) for g in groups)

    def test_group_is_query(self, sales_data):
        """Test operators work on a group's members"""
        groups = query(sales_data).group_by(lambda r: r["city"])
        nyc = groups.single(lambda g: g.key == "NYC")

        assert nyc.count() == 3
        assert nyc.sum(lambda r: r["amount"]) == 420
        assert nyc.select(lambda r: r["amount"]).to_list() == [100, 200, 120]

    def test_group_aggregates(self, sales_data):
        """Test per-group reductions, SQL GROUP BY style"""
        totals = (
            query(sales_data)
            .group_by(lambda r: (r["city"], r["product"]))
            .to_dict(lambda g: g.key, lambda g: g.sum(lambda r: r["amount"]))
        )

        assert totals == {
            ("LA", "Gadget"): 250,
            ("LA", "Widget"): 150,
            ("NYC", "Gadget"): 200,
            ("NYC", "Widget"): 220,
        }

    def test_element_selector(self, words):
        """Test members can be projected while grouping"""
        groups = query(words).group_by(len, str.upper)

        assert groups.select(lambda g: (g.key, g.to_list())).to_list() == [
            (3, ["FIG"]),
            (4, ["DATE"]),
            (5, ["APPLE"]),
            (6, ["BANANA", "CHERRY"]),
        ]

    def test_none_key_group_last(self):
        """Test the None group comes after every other key"""
        groups = query(["a", "bb", "c"]).group_by(lambda s: None if len(s) == 1 else len(s))

        assert groups.select(lambda g: (g.key, g.to_list())).to_list() == [
            (2, ["bb"]),
            (None, ["a", "c"]),
        ]

    def test_group_by_empty(self):
        """Test grouping an empty query"""
        assert query([]).group_by(lambda x: x).count() == 0

    def test_grouping_repr(self):
        """Test grouping representation"""
        group = Grouping("k", [1, 2])
        assert repr(group) == "Grouping(key='k', 2 members)"
        assert group.is_owning


class TestSetOperators:
    """Test union/intersect/except_/concat on queries"""

    def test_union(self):
        """Test union contains both sides without duplicates"""
        a, b = [1, 2, 2, 3], [3, 4, 4]
        result = query(a).union(query(b)).to_list()

        assert result == [1, 2, 3, 4]
        assert set(result) >= set(a) | set(b)

    def test_intersect(self):
        """Test intersect is a subset of both sides"""
        a, b = [5, 1, 3, 1, 4], [4, 1, 9]
        result = query(a).intersect(b).to_list()

        assert result == [1, 4]
        assert set(result) <= set(a) & set(b)

    def test_except(self):
        """Test except removes elements of the other side"""
        a, b = [1, 2, 3, 2, 5], [2]
        result = query(a).except_(b).to_list()

        assert result == [1, 3, 5]
        assert set(result) <= set(a) - set(b)

    def test_no_duplicates(self):
        """Test every set operator yields distinct elements"""
        a, b = [1, 1, 2, 3, 3], [3, 3, 4, 1]

        for result in (query(a).union(b), query(a).intersect(b), query(a).except_(b)):
            items = result.to_list()
            assert len(items) == len(set(items))

    def test_concat(self):
        """Test concat keeps everything in order"""
        assert query([1, 2]).concat([2, 3]).to_list() == [1, 2, 2, 3]

    def test_other_side_lazy_query(self, numbers):
        """Test the other side can be a lazy chain"""
        evens = query(numbers).where(lambda x: x % 2 == 0)

        assert query(numbers).except_(evens).to_list() == [1, 3, 5]
        assert query(numbers).union(evens).is_owning

    def test_unhashable_elements(self):
        """Test hashing errors propagate"""
        with pytest.raises(TypeError):
            query([[1], [2]]).union([[3]])

"""Tests for assertive.comparators module."""

import math
from collections import OrderedDict
from datetime import date, datetime
from decimal import Decimal

import pytest

from assertive.comparators import deep_equal, identical, same_members, shallow_equal


class TestDeepEqual:
    @pytest.mark.parametrize(
        "left, right",
        [
            (1, 1),
            (1, 1.0),
            (Decimal("2"), 2),
            ("a", "a"),
            (None, None),
            (math.nan, math.nan),
            ([1, [2, {"a": (3,)}]], [1, [2, {"a": (3,)}]]),
            ({"a": 1, "b": 2}, {"b": 2, "a": 1}),
            (date(2024, 1, 1), date(2024, 1, 1)),
            ({1, 2}, {2, 1}),
        ],
    )
    def test_equal(self, left, right):
        assert deep_equal(left, right)
        assert deep_equal(right, left)

    @pytest.mark.parametrize(
        "left, right",
        [
            (True, 1),
            (False, 0),
            (1, "1"),
            ([1, 2], (1, 2)),
            ([1, 2], [1, 2, 3]),
            ({"a": 1}, {"a": 1, "b": None}),
            ({"a": [1]}, {"a": [2]}),
            ({"a": 1}, OrderedDict(a=1)),
            (None, 0),
            (date(2024, 1, 1), datetime(2024, 1, 1)),
        ],
    )
    def test_not_equal(self, left, right):
        assert not deep_equal(left, right)
        assert not deep_equal(right, left)

    def test_same_object(self):
        items = [object()]

        assert deep_equal(items, items)


class TestIdentical:
    def test_primitives(self):
        assert identical("a", "a")
        assert identical(1, 1.0)
        assert not identical(True, 1)
        assert not identical("1", 1)

    def test_containers_compare_by_identity(self):
        inner = [1]

        assert identical(inner, inner)
        assert not identical([1], [1])


class TestShallowEqual:
    def test_flat_mappings(self):
        assert shallow_equal({"a": 1, "b": "x"}, {"b": "x", "a": 1})
        assert not shallow_equal({"a": 1}, {"a": 1, "b": 2})
        assert not shallow_equal({"a": 1}, {"b": 1})

    def test_nested_values_must_be_the_same_object(self):
        inner = {"c": 1}

        assert shallow_equal({"a": inner}, {"a": inner})
        assert not shallow_equal({"a": {"c": 1}}, {"a": {"c": 1}})

    def test_sequences(self):
        assert shallow_equal([1, "a"], (1, "a"))
        assert not shallow_equal([1, [2]], [1, [2]])

    def test_dates(self):
        assert shallow_equal(date(2024, 5, 1), date(2024, 5, 1))
        assert not shallow_equal(date(2024, 5, 1), date(2024, 5, 2))

    def test_scalars(self):
        assert shallow_equal(math.nan, math.nan)
        assert shallow_equal(None, None)
        assert not shallow_equal(object(), object())


class TestSameMembers:
    def test_order_does_not_matter(self):
        assert same_members([1, 2, 3], (3, 1, 2))
        assert same_members([], [])

    def test_repeated_elements_are_counted(self):
        assert same_members([1, 1, 2], [2, 1, 1])
        assert not same_members([1, 1, 2], [1, 2, 2])
        assert not same_members([1], [1, 1])
        assert not same_members([1, 1], [1])

    def test_elements_compare_by_deep_equality(self):
        assert same_members([{"a": [1]}, ("k", 2)], [("k", 2.0), {"a": [1]}])
        assert not same_members([True], [1])

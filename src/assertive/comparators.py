"""Equality primitives used by the checks."""

import math
from collections.abc import Iterable, Mapping
from datetime import date
from numbers import Number
from typing import Any


_PRIMITIVES = (type(None), bool, int, float, complex, str, bytes)


def _is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def _both_nan(left: Any, right: Any) -> bool:
    return (
        isinstance(left, float)
        and isinstance(right, float)
        and math.isnan(left)
        and math.isnan(right)
    )


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def deep_equal(left: Any, right: Any) -> bool:
    """Check deep strict equality of two values.

    Containers are compared recursively and must have the same type. Numbers
    compare by value regardless of their type (``1 == 1.0``) but booleans only
    equal booleans. Two ``NaN`` floats are considered equal.
    """
    if left is right:
        return True

    if _is_number(left) and _is_number(right):
        return _both_nan(left, right) or bool(left == right)

    if type(left) is not type(right):
        return False

    if isinstance(left, Mapping):
        if left.keys() != right.keys():
            return False
        return all(deep_equal(left[key], right[key]) for key in left)

    if _is_array(left):
        return len(left) == len(right) and all(deep_equal(a, b) for a, b in zip(left, right))

    return bool(left == right)


def identical(left: Any, right: Any) -> bool:
    """Check strict identity: same object, or equal primitives of one kind."""
    if left is right:
        return True
    if isinstance(left, bool) or isinstance(right, bool):
        return False
    if _is_number(left) and _is_number(right):
        return bool(left == right)
    return type(left) is type(right) and isinstance(left, _PRIMITIVES) and left == right


def shallow_equal(left: Any, right: Any) -> bool:
    """Check shallow equality of two values.

    Dates compare by their point in time. Two mappings (or two lists/tuples)
    are shallow equal when they have the same size and their values are
    :func:`identical` key by key (index by index). Anything else must be
    :func:`identical`, with two ``NaN`` floats considered equal.
    """
    if isinstance(left, date) and isinstance(right, date):
        return type(left) is type(right) and left == right

    if isinstance(left, Mapping) and isinstance(right, Mapping):
        return len(left) == len(right) and all(
            key in right and identical(value, right[key]) for key, value in left.items()
        )

    if _is_array(left) and _is_array(right):
        return len(left) == len(right) and all(identical(a, b) for a, b in zip(left, right))

    return identical(left, right) or _both_nan(left, right)


def same_members(actual: Iterable[Any], expected: Iterable[Any]) -> bool:
    """Check both collections hold deep equal elements, in any order.

    Elements are matched one to one, so repeated elements must appear the
    same number of times on both sides.
    """
    remaining = list(expected)
    for value in actual:
        match = next((i for i, candidate in enumerate(remaining) if deep_equal(value, candidate)), None)
        if match is None:
            return False
        remaining.pop(match)
    return not remaining

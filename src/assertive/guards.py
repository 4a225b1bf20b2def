"""Runtime predicates describing the shape of a value."""

import inspect
from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from numbers import Real
from typing import Any


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_number(value: Any) -> bool:
    """``True`` for real numbers (including ``Decimal``) except booleans.

    Complex numbers are left to the generic assertion, since they have no
    ordering.
    """
    return isinstance(value, (Real, Decimal)) and not isinstance(value, bool)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_date(value: Any) -> bool:
    """``True`` for ``date`` and ``datetime`` instances."""
    return isinstance(value, date)


def is_array(value: Any) -> bool:
    """``True`` for lists and tuples."""
    return isinstance(value, (list, tuple))


def is_awaitable(value: Any) -> bool:
    """``True`` for coroutines, futures, tasks and objects defining ``__await__``."""
    return inspect.isawaitable(value)


def is_any_function(value: Any) -> bool:
    return callable(value)


def is_error(value: Any) -> bool:
    """``True`` for exception instances (not exception classes)."""
    return isinstance(value, BaseException)


def is_struct(value: Any) -> bool:
    """``True`` for plain structured objects, i.e. mappings."""
    return isinstance(value, Mapping)


def type_name_of(value: Any) -> str:
    """Name the data type of ``value`` the way ``to_be_of_type`` understands it."""
    if value is None:
        return "none"
    if is_boolean(value):
        return "boolean"
    if is_number(value):
        return "number"
    if is_string(value):
        return "string"
    if isinstance(value, (bytes, bytearray)):
        return "bytes"
    if is_array(value):
        return "array"
    if is_struct(value):
        return "mapping"
    if is_any_function(value):
        return "function"
    return "object"

"""Assertion classes, one per kind of value."""

from assertive.assertions._base import Assertion, DataType
from assertive.assertions.awaitable import AwaitableAssertion
from assertive.assertions.boolean import BooleanAssertion
from assertive.assertions.date import DateAssertion
from assertive.assertions.error import ErrorAssertion
from assertive.assertions.function import FunctionAssertion
from assertive.assertions.mapping import MappingAssertion
from assertive.assertions.number import NumberAssertion
from assertive.assertions.sequence import SequenceAssertion
from assertive.assertions.string import StringAssertion

__all__ = [
    "Assertion",
    "DataType",
    "AwaitableAssertion",
    "BooleanAssertion",
    "DateAssertion",
    "ErrorAssertion",
    "FunctionAssertion",
    "MappingAssertion",
    "NumberAssertion",
    "SequenceAssertion",
    "StringAssertion",
]

"""Assertions for mappings (plain structured objects)."""

from collections.abc import Hashable, Mapping
from typing import Any, TypeVar

from assertive.assertions._base import Assertion
from assertive.comparators import deep_equal, same_members
from assertive.errors import AssertionFailedError
from assertive.messages import prettify


K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def _joined(values: Any) -> str:
    return ", ".join(prettify(value) for value in values)


def _sort_key(value: Any) -> tuple[str, str]:
    return type(value).__name__, repr(value)


class MappingAssertion(Assertion[Mapping[K, V]]):
    """Assertions for dictionaries and other mappings.

    Key checks use ``in``; value and entry checks use deep equality.

    Parameters
    ----------
    actual : Mapping[K, V]
        The mapping under test.

    Examples
    --------
    >>> expect({"name": "Alice", "age": 30}).to_contain_key("name")
    >>> expect({"a": 1, "b": 2}).to_contain_entry(("a", 1)).to_have_values(1, 2)
    """

    def __init__(self, actual: Mapping[K, V]):
        super().__init__(actual)

    def _has_entry(self, entry: tuple[K, V]) -> bool:
        key, value = entry
        return key in self._actual and deep_equal(self._actual[key], value)

    def _has_value(self, value: V) -> bool:
        return any(deep_equal(actual, value) for actual in self._actual.values())

    def to_be_empty(self) -> "MappingAssertion[K, V]":
        return self.execute(
            assert_when=len(self._actual) == 0,
            error=AssertionFailedError("Expected the value to be an empty mapping", actual=self._actual, expected={}),
            inverted_error=AssertionFailedError("Expected the value NOT to be an empty mapping", actual=self._actual),
        )

    def to_contain_key(self, key: K) -> "MappingAssertion[K, V]":
        return self.execute(
            assert_when=key in self._actual,
            error=AssertionFailedError(
                f"Expected the mapping to contain the provided key <{prettify(key)}>", actual=self._actual
            ),
            inverted_error=AssertionFailedError(
                f"Expected the mapping NOT to contain the provided key <{prettify(key)}>", actual=self._actual
            ),
        )

    def to_contain_all_keys(self, *keys: K) -> "MappingAssertion[K, V]":
        return self.execute(
            assert_when=all(key in self._actual for key in keys),
            error=AssertionFailedError(
                f"Expected the mapping to contain all the provided keys <{_joined(keys)}>",
                actual=list(self._actual.keys()),
                expected=list(keys),
            ),
            inverted_error=AssertionFailedError(
                f"Expected the mapping NOT to contain all the provided keys <{_joined(keys)}>",
                actual=list(self._actual.keys()),
            ),
        )

    def to_contain_any_keys(self, *keys: K) -> "MappingAssertion[K, V]":
        return self.execute(
            assert_when=any(key in self._actual for key in keys),
            error=AssertionFailedError(
                f"Expected the mapping to contain at least one of the provided keys <{_joined(keys)}>",
                actual=list(self._actual.keys()),
                expected=list(keys),
            ),
            inverted_error=AssertionFailedError(
                f"Expected the mapping NOT to contain any of the provided keys <{_joined(keys)}>",
                actual=list(self._actual.keys()),
            ),
        )

    def to_have_keys(self, *keys: K) -> "MappingAssertion[K, V]":
        """Check the mapping has exactly ``keys``, in any order."""
        actual_keys = sorted(self._actual.keys(), key=_sort_key)
        expected_keys = sorted(keys, key=_sort_key)
        return self.execute(
            assert_when=len(self._actual) == len(keys) and set(self._actual.keys()) == set(keys),
            error=AssertionFailedError(
                f"Expected the mapping to have exactly the keys <{_joined(expected_keys)}>",
                actual=actual_keys,
                expected=expected_keys,
            ),
            inverted_error=AssertionFailedError(
                f"Expected the mapping NOT to have the keys <{_joined(expected_keys)}>", actual=actual_keys
            ),
        )

    def to_contain_value(self, value: V) -> "MappingAssertion[K, V]":
        return self.execute(
            assert_when=self._has_value(value),
            error=AssertionFailedError(
                f"Expected the mapping to contain the provided value <{prettify(value)}>", actual=self._actual
            ),
            inverted_error=AssertionFailedError(
                f"Expected the mapping NOT to contain the provided value <{prettify(value)}>", actual=self._actual
            ),
        )

    def to_contain_all_values(self, *values: V) -> "MappingAssertion[K, V]":
        return self.execute(
            assert_when=all(self._has_value(value) for value in values),
            error=AssertionFailedError(
                f"Expected the mapping to contain all the provided values <{_joined(values)}>",
                actual=list(self._actual.values()),
                expected=list(values),
            ),
            inverted_error=AssertionFailedError(
                f"Expected the mapping NOT to contain all the provided values <{_joined(values)}>",
                actual=list(self._actual.values()),
            ),
        )

    def to_contain_any_values(self, *values: V) -> "MappingAssertion[K, V]":
        return self.execute(
            assert_when=any(self._has_value(value) for value in values),
            error=AssertionFailedError(
                f"Expected the mapping to contain at least one of the provided values <{_joined(values)}>",
                actual=list(self._actual.values()),
                expected=list(values),
            ),
            inverted_error=AssertionFailedError(
                f"Expected the mapping NOT to contain any of the provided values <{_joined(values)}>",
                actual=list(self._actual.values()),
            ),
        )

    def to_have_values(self, *values: V) -> "MappingAssertion[K, V]":
        """Check the mapping has exactly ``values``, in any order."""
        return self.execute(
            assert_when=same_members(self._actual.values(), values),
            error=AssertionFailedError(
                f"Expected the mapping to have exactly the values <{_joined(values)}>",
                actual=list(self._actual.values()),
                expected=list(values),
            ),
            inverted_error=AssertionFailedError(
                f"Expected the mapping NOT to have the values <{_joined(values)}>",
                actual=list(self._actual.values()),
            ),
        )

    def to_contain_entry(self, entry: tuple[K, V]) -> "MappingAssertion[K, V]":
        """Check the mapping holds ``entry``, a ``(key, value)`` pair."""
        return self.execute(
            assert_when=self._has_entry(entry),
            error=AssertionFailedError(
                f"Expected the mapping to contain the provided entry <{prettify(entry)}>", actual=self._actual
            ),
            inverted_error=AssertionFailedError(
                f"Expected the mapping NOT to contain the provided entry <{prettify(entry)}>", actual=self._actual
            ),
        )

    def to_contain_all_entries(self, *entries: tuple[K, V]) -> "MappingAssertion[K, V]":
        return self.execute(
            assert_when=all(self._has_entry(entry) for entry in entries),
            error=AssertionFailedError(
                f"Expected the mapping to contain all the provided entries <{_joined(entries)}>",
                actual=list(self._actual.items()),
                expected=list(entries),
            ),
            inverted_error=AssertionFailedError(
                f"Expected the mapping NOT to contain all the provided entries <{_joined(entries)}>",
                actual=list(self._actual.items()),
            ),
        )

    def to_contain_any_entries(self, *entries: tuple[K, V]) -> "MappingAssertion[K, V]":
        return self.execute(
            assert_when=any(self._has_entry(entry) for entry in entries),
            error=AssertionFailedError(
                f"Expected the mapping to contain at least one of the provided entries <{_joined(entries)}>",
                actual=list(self._actual.items()),
                expected=list(entries),
            ),
            inverted_error=AssertionFailedError(
                f"Expected the mapping NOT to contain any of the provided entries <{_joined(entries)}>",
                actual=list(self._actual.items()),
            ),
        )

    def to_have_entries(self, *entries: tuple[K, V]) -> "MappingAssertion[K, V]":
        """Check the mapping has exactly ``entries`` and nothing else."""
        return self.execute(
            assert_when=same_members(self._actual.items(), (tuple(entry) for entry in entries)),
            error=AssertionFailedError(
                f"Expected the mapping to have exactly the entries <{_joined(entries)}>",
                actual=list(self._actual.items()),
                expected=list(entries),
            ),
            inverted_error=AssertionFailedError(
                f"Expected the mapping NOT to have the entries <{_joined(entries)}>",
                actual=list(self._actual.items()),
            ),
        )

    def to_partially_match(self, other: Mapping[K, Any]) -> "MappingAssertion[K, V]":
        """Check every entry of ``other`` is in the mapping.

        Examples
        --------
        >>> expect({"a": 1, "b": 2}).to_partially_match({"a": 1})
        """
        return self.execute(
            assert_when=all(self._has_entry(entry) for entry in other.items()),
            error=AssertionFailedError(
                f"Expected the mapping to be a partial match of <{prettify(other)}>",
                actual=self._actual,
                expected=other,
            ),
            inverted_error=AssertionFailedError(
                f"Expected the mapping NOT to be a partial match of <{prettify(other)}>", actual=self._actual
            ),
        )

"""Assertions for list-like values."""

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, TypeVar

from assertive.assertions._base import Assertion, NarrowedT
from assertive.comparators import deep_equal, same_members
from assertive.errors import AssertionFailedError, UnsupportedOperationError
from assertive.messages import prettify

if TYPE_CHECKING:
    from assertive.factories import TypeFactory


T = TypeVar("T")


def _pretty_values(values: Sequence[Any]) -> str:
    return "[" + ", ".join(prettify(value) for value in values) + "]"


class SequenceAssertion(Assertion[Sequence[T]]):
    """Assertions for lists and tuples.

    Provides predicate, membership and size checks, plus :meth:`extracting`
    to narrow a single element into its own assertion.

    Parameters
    ----------
    actual : Sequence[T]
        The list or tuple under test.

    Examples
    --------
    >>> expect([1, 2, 3]).to_have_size(3).to_contain_all(1, 3)
    >>> expect(["foo", 2, True]).extracting(1, TypeFactories.NUMBER).to_be_positive()
    """

    def __init__(self, actual: Sequence[T]):
        super().__init__(actual)

    def to_match_all(self, matcher: Callable[[T], bool]) -> "SequenceAssertion[T]":
        """Check every element satisfies ``matcher``."""
        return self.execute(
            assert_when=all(matcher(value) for value in self._actual),
            error=AssertionFailedError(
                "Expected all values of the sequence to return true on the matcher predicate",
                actual=self._actual,
            ),
            inverted_error=AssertionFailedError(
                "Expected not every value of the sequence to return true on the matcher predicate",
                actual=self._actual,
            ),
        )

    def to_match_any(self, matcher: Callable[[T], bool]) -> "SequenceAssertion[T]":
        """Check at least one element satisfies ``matcher``."""
        return self.execute(
            assert_when=any(matcher(value) for value in self._actual),
            error=AssertionFailedError(
                "Expected any value of the sequence to return true on the matcher predicate",
                actual=self._actual,
            ),
            inverted_error=AssertionFailedError(
                "Expected no value of the sequence to return true on the matcher predicate",
                actual=self._actual,
            ),
        )

    def to_satisfy_all(self, consumer: Callable[[T], Any]) -> "SequenceAssertion[T]":
        """Check ``consumer`` raises no assertion error for any element.

        The first assertion error raised by ``consumer`` becomes the failure.
        Any other exception propagates untouched.

        Examples
        --------
        >>> expect([apple, pear]).to_satisfy_all(lambda fruit: expect(fruit).to_be_instance_of(Fruit))
        """
        first_error: AssertionFailedError | None = None
        for value in self._actual:
            try:
                consumer(value)
            except AssertionFailedError as error:
                first_error = error
                break
            except AssertionError as error:
                first_error = AssertionFailedError(str(error) or "Assertion failed", actual=value)
                break

        return self.execute(
            assert_when=first_error is None,
            error=first_error or AssertionFailedError("Expected all values to satisfy the given assertion"),
            inverted_error=AssertionFailedError(
                "Expected not all values of the sequence to satisfy the given assertion", actual=self._actual
            ),
        )

    def to_satisfy_any(self, consumer: Callable[[T], Any]) -> "SequenceAssertion[T]":
        """Check ``consumer`` raises no assertion error for at least one element."""

        def satisfies(value: T) -> bool:
            try:
                consumer(value)
            except AssertionError:
                return False
            return True

        return self.execute(
            assert_when=any(satisfies(value) for value in self._actual),
            error=AssertionFailedError(
                "Expected any value of the sequence to satisfy the given assertion", actual=self._actual
            ),
            inverted_error=AssertionFailedError(
                "Expected no value of the sequence to satisfy the given assertion", actual=self._actual
            ),
        )

    def to_be_empty(self) -> "SequenceAssertion[T]":
        return self.execute(
            assert_when=len(self._actual) == 0,
            error=AssertionFailedError("Expected sequence to be empty", actual=self._actual),
            inverted_error=AssertionFailedError("Expected sequence NOT to be empty", actual=self._actual),
        )

    def to_have_size(self, size: int) -> "SequenceAssertion[T]":
        length = len(self._actual)
        return self.execute(
            assert_when=length == size,
            error=AssertionFailedError(
                f"Expected sequence to contain {size} elements, but it has {length}",
                actual=length,
                expected=size,
            ),
            inverted_error=AssertionFailedError(
                f"Expected sequence NOT to contain {size} elements, but it does", actual=length
            ),
        )

    def to_have_same_members(self, expected: Sequence[T]) -> "SequenceAssertion[T]":
        """Check both sequences hold the same elements, in any order.

        Elements compare by deep equality and are matched one to one, so
        ``[1, 1, 2]`` and ``[1, 2, 2]`` do not have the same members.
        """
        return self.execute(
            assert_when=same_members(self._actual, expected),
            error=AssertionFailedError(
                f"Expected sequence to have the same members as: {_pretty_values(expected)}",
                actual=self._actual,
                expected=expected,
            ),
            inverted_error=AssertionFailedError(
                f"Expected sequence NOT to have the same members as: {_pretty_values(expected)}",
                actual=self._actual,
            ),
        )

    def to_contain_all(self, *values: T) -> "SequenceAssertion[T]":
        return self.execute(
            assert_when=all(value in self._actual for value in values),
            error=AssertionFailedError(
                f"Expected sequence to contain the following values: {_pretty_values(values)}",
                actual=self._actual,
            ),
            inverted_error=AssertionFailedError(
                f"Expected sequence NOT to contain the following values, but it does: {_pretty_values(values)}",
                actual=self._actual,
            ),
        )

    def to_contain_any(self, *values: T) -> "SequenceAssertion[T]":
        return self.execute(
            assert_when=any(value in self._actual for value in values),
            error=AssertionFailedError(
                f"Expected sequence to contain at least one of the following values: {_pretty_values(values)}",
                actual=self._actual,
            ),
            inverted_error=AssertionFailedError(
                f"Expected sequence NOT to contain one of the following values, but it does: "
                f"{_pretty_values(values)}",
                actual=self._actual,
            ),
        )

    def to_contain_at(self, index: int, value: T) -> "SequenceAssertion[T]":
        """Check the element at ``index`` is deep equal to ``value``."""
        in_bounds = -len(self._actual) <= index < len(self._actual)
        actual = self._actual[index] if in_bounds else None
        return self.execute(
            assert_when=in_bounds and deep_equal(actual, value),
            error=AssertionFailedError(
                f"Expected value at index {index} of the sequence to be <{prettify(value)}>",
                actual=actual,
                expected=value,
            ),
            inverted_error=AssertionFailedError(
                f"Expected value at index {index} of the sequence NOT to be <{prettify(value)}>", actual=actual
            ),
        )

    def extracting(self, index: int, type_factory: "TypeFactory[Any, NarrowedT]") -> NarrowedT:
        """Narrow the element at ``index`` into the assertion of ``type_factory``.

        The index is checked against the sequence bounds before the element is
        checked against the factory predicate.

        Parameters
        ----------
        index : int
            Position of the element. Negative indexes count from the end.
        type_factory : TypeFactory
            Factory used to check the element type and build its assertion.

        Returns
        -------
        Assertion
            The assertion built by ``type_factory`` for the element.

        Raises
        ------
        UnsupportedOperationError
            If the assertion is negated.
        AssertionFailedError
            If ``index`` is out of bounds, or the element does not satisfy
            the factory predicate.
        """
        if self._negated:
            raise UnsupportedOperationError("The `.not_` modifier is not allowed on `.extracting(..)` method")

        length = len(self._actual)
        if not -length <= index < length:
            raise AssertionFailedError(
                f"Out of bounds! Cannot extract index {index} from a sequence of {length} elements",
                actual=self._actual,
                details={"index": index, "length": length},
            )

        return Assertion(self._actual[index]).as_type(type_factory)

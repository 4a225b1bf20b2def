"""Assertions for boolean values."""

from assertive.assertions._base import Assertion
from assertive.errors import AssertionFailedError


class BooleanAssertion(Assertion[bool]):
    """Assertions for boolean values.

    Examples
    --------
    >>> expect(is_valid).to_be_true()
    >>> expect(is_valid).not_.to_be_false()
    """

    def __init__(self, actual: bool):
        super().__init__(actual)

    def to_be_true(self) -> "BooleanAssertion":
        return self.execute(
            assert_when=self._actual is True,
            error=AssertionFailedError("Expected <False> to be true", actual=self._actual),
            inverted_error=AssertionFailedError("Expected <True> NOT to be true", actual=self._actual),
        )

    def to_be_false(self) -> "BooleanAssertion":
        return self.execute(
            assert_when=self._actual is False,
            error=AssertionFailedError("Expected <True> to be false", actual=self._actual),
            inverted_error=AssertionFailedError("Expected <False> NOT to be false", actual=self._actual),
        )

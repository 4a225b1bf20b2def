"""Assertions for exception instances."""

import re
from typing import TypeVar

from assertive.assertions._base import Assertion
from assertive.errors import AssertionFailedError


E = TypeVar("E", bound=BaseException)


def error_message(error: BaseException) -> str:
    """The message of an exception, i.e. ``str(error)``."""
    return str(error)


class ErrorAssertion(Assertion[E]):
    """Assertions for exception instances.

    The message of an exception is ``str(error)`` and its name is the name of
    its class.

    Examples
    --------
    >>> expect(ValueError("404: Not found")).to_have_message_starting_with("404")
    >>> expect(KeyError("id")).to_have_name("KeyError")
    """

    def __init__(self, actual: E):
        super().__init__(actual)

    @property
    def message(self) -> str:
        return error_message(self._actual)

    def to_have_message(self, message: str) -> "ErrorAssertion[E]":
        return self.execute(
            assert_when=self.message == message,
            error=AssertionFailedError(
                f"Expected error to have the message: {message}", actual=self.message, expected=message
            ),
            inverted_error=AssertionFailedError(
                f"Expected error NOT to have the message: {message}", actual=self.message
            ),
        )

    def to_have_message_starting_with(self, fragment: str) -> "ErrorAssertion[E]":
        return self.execute(
            assert_when=self.message.startswith(fragment),
            error=AssertionFailedError(
                f"Expected error to have a message starting with: {fragment}", actual=self.message
            ),
            inverted_error=AssertionFailedError(
                f"Expected error NOT to have a message starting with: {fragment}", actual=self.message
            ),
        )

    def to_have_message_containing(self, fragment: str) -> "ErrorAssertion[E]":
        return self.execute(
            assert_when=fragment in self.message,
            error=AssertionFailedError(
                f"Expected error to have a message containing: {fragment}", actual=self.message
            ),
            inverted_error=AssertionFailedError(
                f"Expected error NOT to have a message containing: {fragment}", actual=self.message
            ),
        )

    def to_have_message_ending_with(self, fragment: str) -> "ErrorAssertion[E]":
        return self.execute(
            assert_when=self.message.endswith(fragment),
            error=AssertionFailedError(
                f"Expected error to have a message ending with: {fragment}", actual=self.message
            ),
            inverted_error=AssertionFailedError(
                f"Expected error NOT to have a message ending with: {fragment}", actual=self.message
            ),
        )

    def to_have_message_matching(self, pattern: str | re.Pattern[str]) -> "ErrorAssertion[E]":
        """Check the message matches ``pattern`` anywhere (``re.search``)."""
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
        return self.execute(
            assert_when=regex.search(self.message) is not None,
            error=AssertionFailedError(
                f"Expected the error message to match the regex <{regex.pattern}>", actual=self.message
            ),
            inverted_error=AssertionFailedError(
                f"Expected the error message NOT to match the regex <{regex.pattern}>", actual=self.message
            ),
        )

    def to_have_name(self, name: str) -> "ErrorAssertion[E]":
        actual_name = type(self._actual).__name__
        return self.execute(
            assert_when=actual_name == name,
            error=AssertionFailedError(
                f"Expected the error name to be <{name}>", actual=actual_name, expected=name
            ),
            inverted_error=AssertionFailedError(f"Expected the error name NOT to be <{name}>", actual=actual_name),
        )

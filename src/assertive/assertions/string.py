"""Assertions for string values."""

import re

from assertive.assertions._base import Assertion
from assertive.errors import AssertionFailedError


class StringAssertion(Assertion[str]):
    """Assertions for string values.

    Examples
    --------
    >>> expect("/api/users").to_start_with("/api/").to_contain("users")
    >>> expect("  ").to_be_blank().not_.to_be_empty()
    """

    def __init__(self, actual: str):
        super().__init__(actual)

    def to_be_empty(self) -> "StringAssertion":
        return self.execute(
            assert_when=self._actual == "",
            error=AssertionFailedError(f"Expected <{self._actual}> to be empty", actual=self._actual),
            inverted_error=AssertionFailedError("Expected the value NOT to be empty", actual=self._actual),
        )

    def to_be_blank(self) -> "StringAssertion":
        """Check the string is empty or only whitespace."""
        return self.execute(
            assert_when=self._actual.strip() == "",
            error=AssertionFailedError(f"Expected <{self._actual}> to be blank", actual=self._actual),
            inverted_error=AssertionFailedError("Expected the value NOT to be blank", actual=self._actual),
        )

    def to_be_equal_ignoring_case(self, text: str) -> "StringAssertion":
        return self.execute(
            assert_when=self._actual.casefold() == text.casefold(),
            error=AssertionFailedError(
                "Expected both strings to be equal ignoring case", actual=self._actual, expected=text
            ),
            inverted_error=AssertionFailedError(
                "Expected both strings NOT to be equal ignoring case", actual=self._actual
            ),
        )

    def to_contain(self, text: str) -> "StringAssertion":
        return self.execute(
            assert_when=text in self._actual,
            error=AssertionFailedError(
                f"Expected <{self._actual}> to contain <{text}>", actual=self._actual, expected=text
            ),
            inverted_error=AssertionFailedError(
                f"Expected <{self._actual}> NOT to contain <{text}>", actual=self._actual
            ),
        )

    def to_contain_ignoring_case(self, text: str) -> "StringAssertion":
        return self.execute(
            assert_when=text.casefold() in self._actual.casefold(),
            error=AssertionFailedError(
                f"Expected <{self._actual}> to contain <{text}> (ignoring case)",
                actual=self._actual,
                expected=text,
            ),
            inverted_error=AssertionFailedError(
                f"Expected <{self._actual}> NOT to contain <{text}> (ignoring case)", actual=self._actual
            ),
        )

    def to_start_with(self, text: str) -> "StringAssertion":
        return self.execute(
            assert_when=self._actual.startswith(text),
            error=AssertionFailedError(
                f"Expected <{self._actual}> to start with <{text}>", actual=self._actual, expected=text
            ),
            inverted_error=AssertionFailedError(
                f"Expected <{self._actual}> NOT to start with <{text}>", actual=self._actual, expected=text
            ),
        )

    def to_end_with(self, text: str) -> "StringAssertion":
        return self.execute(
            assert_when=self._actual.endswith(text),
            error=AssertionFailedError(
                f"Expected <{self._actual}> to end with <{text}>", actual=self._actual, expected=text
            ),
            inverted_error=AssertionFailedError(
                f"Expected <{self._actual}> NOT to end with <{text}>", actual=self._actual, expected=text
            ),
        )

    def to_match_regex(self, pattern: str | re.Pattern[str]) -> "StringAssertion":
        """Check the string matches ``pattern`` anywhere (``re.search``)."""
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
        return self.execute(
            assert_when=regex.search(self._actual) is not None,
            error=AssertionFailedError(
                f"Expected <{self._actual}> to match the regular expression <{regex.pattern}>",
                actual=self._actual,
            ),
            inverted_error=AssertionFailedError(
                f"Expected <{self._actual}> NOT to match the regular expression <{regex.pattern}>",
                actual=self._actual,
            ),
        )

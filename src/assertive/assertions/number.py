"""Assertions for numeric values."""

import math

from assertive.assertions._base import Assertion
from assertive.errors import AssertionFailedError


Numeric = int | float


class NumberAssertion(Assertion[Numeric]):
    """Assertions for numeric values.

    Provides sign, parity, range and comparison checks for integers and
    floats.

    Parameters
    ----------
    actual : int | float
        The number under test.

    Examples
    --------
    >>> expect(10).to_be_positive().to_be_even()
    >>> expect(10).to_be_between(0, 10, high_inclusive=True)
    >>> expect(0.1 + 0.2).to_be_close_to(0.3, 1e-9)
    """

    def __init__(self, actual: Numeric):
        super().__init__(actual)

    def _fail(self, message: str, expected: object = None) -> AssertionFailedError:
        return AssertionFailedError(message, actual=self._actual, expected=expected)

    def to_be_zero(self) -> "NumberAssertion":
        return self.execute(
            assert_when=self._actual == 0,
            error=self._fail(f"Expected <{self._actual}> to be zero"),
            inverted_error=self._fail("Expected the value NOT to be zero"),
        )

    def to_be_positive(self) -> "NumberAssertion":
        """Check the number is greater than zero."""
        return self.execute(
            assert_when=self._actual > 0,
            error=self._fail(f"Expected <{self._actual}> to be positive"),
            inverted_error=self._fail("Expected the value NOT to be positive"),
        )

    def to_be_negative(self) -> "NumberAssertion":
        """Check the number is less than zero."""
        return self.execute(
            assert_when=self._actual < 0,
            error=self._fail(f"Expected <{self._actual}> to be negative"),
            inverted_error=self._fail("Expected the value NOT to be negative"),
        )

    def to_be_finite(self) -> "NumberAssertion":
        return self.execute(
            assert_when=math.isfinite(self._actual),
            error=self._fail(f"Expected <{self._actual}> to be finite"),
            inverted_error=self._fail("Expected the value NOT to be finite"),
        )

    def to_be_nan(self) -> "NumberAssertion":
        return self.execute(
            assert_when=math.isnan(self._actual),
            error=self._fail(f"Expected <{self._actual}> to be NaN"),
            inverted_error=self._fail("Expected the value NOT to be NaN"),
        )

    def to_be_even(self) -> "NumberAssertion":
        return self.execute(
            assert_when=self._actual % 2 == 0,
            error=self._fail(f"Expected <{self._actual}> to be even"),
            inverted_error=self._fail("Expected the value NOT to be even"),
        )

    def to_be_odd(self) -> "NumberAssertion":
        return self.execute(
            assert_when=self._actual % 2 == 1,
            error=self._fail(f"Expected <{self._actual}> to be odd"),
            inverted_error=self._fail("Expected the value NOT to be odd"),
        )

    def to_be_divisible_by(self, divisor: Numeric) -> "NumberAssertion":
        """Check the number is a multiple of ``divisor``."""
        return self.execute(
            assert_when=divisor != 0 and self._actual % divisor == 0,
            error=self._fail(f"Expected <{self._actual}> to be divisible by <{divisor}>", expected=divisor),
            inverted_error=self._fail(f"Expected <{self._actual}> NOT to be divisible by <{divisor}>"),
        )

    def to_be_between(
        self,
        low: Numeric,
        high: Numeric,
        *,
        inclusive: bool = False,
        low_inclusive: bool = False,
        high_inclusive: bool = False,
    ) -> "NumberAssertion":
        """Check the number lies between ``low`` and ``high``.

        Both bounds are exclusive by default. ``inclusive`` makes both of
        them inclusive; ``low_inclusive`` and ``high_inclusive`` pick one.

        Parameters
        ----------
        low : int | float
            Lower bound of the range.
        high : int | float
            Upper bound of the range.
        inclusive : bool
            Include both bounds.
        low_inclusive : bool
            Include the lower bound.
        high_inclusive : bool
            Include the upper bound.
        """
        include_low = inclusive or low_inclusive
        include_high = inclusive or high_inclusive
        above = self._actual >= low if include_low else self._actual > low
        below = self._actual <= high if include_high else self._actual < high
        interval = f"{'[' if include_low else '('}{low}, {high}{']' if include_high else ')'}"

        return self.execute(
            assert_when=above and below,
            error=self._fail(f"Expected <{self._actual}> to be between {interval}", expected=(low, high)),
            inverted_error=self._fail(f"Expected <{self._actual}> NOT to be between {interval}"),
        )

    def to_be_close_to(self, expected: Numeric, offset: Numeric) -> "NumberAssertion":
        """Check the number is within ``offset`` of ``expected``."""
        return self.execute(
            assert_when=abs(self._actual - expected) <= offset,
            error=self._fail(
                f"Expected <{self._actual}> to be close to <{expected}> with offset <{offset}>",
                expected=expected,
            ),
            inverted_error=self._fail(
                f"Expected <{self._actual}> NOT to be close to <{expected}> with offset <{offset}>"
            ),
        )

    def to_be_greater_than(self, expected: Numeric) -> "NumberAssertion":
        return self.execute(
            assert_when=self._actual > expected,
            error=self._fail(f"Expected <{self._actual}> to be greater than <{expected}>", expected=expected),
            inverted_error=self._fail(f"Expected <{self._actual}> NOT to be greater than <{expected}>"),
        )

    def to_be_greater_than_or_equal(self, expected: Numeric) -> "NumberAssertion":
        return self.execute(
            assert_when=self._actual >= expected,
            error=self._fail(
                f"Expected <{self._actual}> to be greater than or equal to <{expected}>", expected=expected
            ),
            inverted_error=self._fail(
                f"Expected <{self._actual}> NOT to be greater than or equal to <{expected}>"
            ),
        )

    def to_be_less_than(self, expected: Numeric) -> "NumberAssertion":
        return self.execute(
            assert_when=self._actual < expected,
            error=self._fail(f"Expected <{self._actual}> to be less than <{expected}>", expected=expected),
            inverted_error=self._fail(f"Expected <{self._actual}> NOT to be less than <{expected}>"),
        )

    def to_be_less_than_or_equal(self, expected: Numeric) -> "NumberAssertion":
        return self.execute(
            assert_when=self._actual <= expected,
            error=self._fail(
                f"Expected <{self._actual}> to be less than or equal to <{expected}>", expected=expected
            ),
            inverted_error=self._fail(f"Expected <{self._actual}> NOT to be less than or equal to <{expected}>"),
        )

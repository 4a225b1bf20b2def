"""Assertions for dates and datetimes."""

from datetime import date
from typing import Literal

from assertive.assertions._base import Assertion
from assertive.errors import AssertionFailedError
from assertive.messages import prettify


DayOfWeek = Literal["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
Month = Literal[
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
]

DAYS_OF_WEEK: tuple[str, ...] = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
MONTHS: tuple[str, ...] = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)


def day_of_week_as_number(day: DayOfWeek | int) -> int:
    """Monday is ``0`` and Sunday is ``6``, like ``date.weekday()``."""
    if isinstance(day, str):
        if day.lower() not in DAYS_OF_WEEK:
            raise ValueError(f"Unknown day of week {day!r}, expected one of: {', '.join(DAYS_OF_WEEK)}")
        return DAYS_OF_WEEK.index(day.lower())
    return day


def month_as_number(month: Month | int) -> int:
    """January is ``1`` and December is ``12``, like ``date.month``."""
    if isinstance(month, str):
        if month.lower() not in MONTHS:
            raise ValueError(f"Unknown month {month!r}, expected one of: {', '.join(MONTHS)}")
        return MONTHS.index(month.lower()) + 1
    return month


class DateAssertion(Assertion[date]):
    """Assertions for ``date`` and ``datetime`` values.

    Examples
    --------
    >>> expect(date(2024, 1, 1)).to_be_day_of_week("monday")
    >>> expect(deadline).to_be_after(today).to_match_date_parts(month="december")
    """

    def __init__(self, actual: date):
        super().__init__(actual)

    def to_be_day_of_week(self, day_of_week: DayOfWeek | int) -> "DateAssertion":
        """Check the date falls on ``day_of_week`` (name, or ``0`` for Monday)."""
        expected = day_of_week_as_number(day_of_week)
        return self.execute(
            assert_when=self._actual.weekday() == expected,
            error=AssertionFailedError(
                f"Expected <{self._actual}> to be a <{day_of_week}>",
                actual=self._actual.weekday(),
                expected=expected,
            ),
            inverted_error=AssertionFailedError(
                f"Expected <{self._actual}> NOT to be a <{day_of_week}>", actual=self._actual.weekday()
            ),
        )

    def to_match_date_parts(
        self,
        *,
        year: int | None = None,
        month: Month | int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        microsecond: int | None = None,
    ) -> "DateAssertion":
        """Check the date has every given part.

        Parts left as ``None`` are not checked. Time parts of a plain
        ``date`` are read as zero.
        """
        expected = {
            "year": year,
            "month": month_as_number(month) if month is not None else None,
            "day": day,
            "hour": hour,
            "minute": minute,
            "second": second,
            "microsecond": microsecond,
        }
        expected = {part: value for part, value in expected.items() if value is not None}
        actual = {part: getattr(self._actual, part, 0) for part in expected}

        return self.execute(
            assert_when=actual == expected,
            error=AssertionFailedError(
                f"Expected <{self._actual}> to match the date parts <{prettify(expected)}>",
                actual=actual,
                expected=expected,
            ),
            inverted_error=AssertionFailedError(
                f"Expected <{self._actual}> NOT to match the date parts <{prettify(expected)}>", actual=actual
            ),
        )

    def to_be_before(self, other: date) -> "DateAssertion":
        return self.execute(
            assert_when=self._actual < other,
            error=AssertionFailedError(
                f"Expected <{self._actual}> to be before <{other}>", actual=self._actual, expected=other
            ),
            inverted_error=AssertionFailedError(
                f"Expected <{self._actual}> NOT to be before <{other}>", actual=self._actual
            ),
        )

    def to_be_before_or_equal(self, other: date) -> "DateAssertion":
        return self.execute(
            assert_when=self._actual <= other,
            error=AssertionFailedError(
                f"Expected <{self._actual}> to be before or equal to <{other}>", actual=self._actual, expected=other
            ),
            inverted_error=AssertionFailedError(
                f"Expected <{self._actual}> NOT to be before or equal to <{other}>", actual=self._actual
            ),
        )

    def to_be_after(self, other: date) -> "DateAssertion":
        return self.execute(
            assert_when=self._actual > other,
            error=AssertionFailedError(
                f"Expected <{self._actual}> to be after <{other}>", actual=self._actual, expected=other
            ),
            inverted_error=AssertionFailedError(
                f"Expected <{self._actual}> NOT to be after <{other}>", actual=self._actual
            ),
        )

    def to_be_after_or_equal(self, other: date) -> "DateAssertion":
        return self.execute(
            assert_when=self._actual >= other,
            error=AssertionFailedError(
                f"Expected <{self._actual}> to be after or equal to <{other}>", actual=self._actual, expected=other
            ),
            inverted_error=AssertionFailedError(
                f"Expected <{self._actual}> NOT to be after or equal to <{other}>", actual=self._actual
            ),
        )

"""Tests for BooleanAssertion and NumberAssertion."""

import math

import pytest

from assertive import AssertionFailedError, expect


class TestBooleanAssertion:
    def test_to_be_true(self):
        expect(True).to_be_true()
        expect(False).not_.to_be_true()
        with pytest.raises(AssertionFailedError, match="Expected <False> to be true"):
            expect(False).to_be_true()

    def test_to_be_false(self):
        expect(False).to_be_false()
        expect(True).not_.to_be_false()
        with pytest.raises(AssertionFailedError, match="Expected <False> NOT to be false"):
            expect(False).not_.to_be_false()


class TestSign:
    def test_zero(self):
        expect(0).to_be_zero()
        expect(-0.0).to_be_zero()
        expect(0.1).not_.to_be_zero()

    def test_positive(self):
        expect(3).to_be_positive()
        with pytest.raises(AssertionFailedError, match="Expected <0> to be positive"):
            expect(0).to_be_positive()

    def test_negative(self):
        expect(-0.5).to_be_negative()
        expect(0).not_.to_be_negative()
        with pytest.raises(AssertionFailedError, match="NOT to be negative"):
            expect(-1).not_.to_be_negative()


class TestSpecialValues:
    def test_finite(self):
        expect(1e308).to_be_finite()
        expect(math.inf).not_.to_be_finite()
        expect(math.nan).not_.to_be_finite()

    def test_nan(self):
        expect(math.nan).to_be_nan()
        with pytest.raises(AssertionFailedError, match="to be NaN"):
            expect(1.0).to_be_nan()


class TestParity:
    def test_even_and_odd(self):
        expect(4).to_be_even().not_.to_be_odd()
        expect(-3).to_be_odd().not_.to_be_even()

    def test_float_parity(self):
        expect(2.0).to_be_even()
        expect(2.5).not_.to_be_even().not_.to_be_odd()

    def test_divisible_by(self):
        expect(12).to_be_divisible_by(4)
        expect(12).not_.to_be_divisible_by(5)
        with pytest.raises(AssertionFailedError, match="<12> to be divisible by <5>"):
            expect(12).to_be_divisible_by(5)

    def test_divisible_by_zero_never_holds(self):
        expect(0).not_.to_be_divisible_by(0)


class TestToBeBetween:
    def test_exclusive_by_default(self):
        expect(5).to_be_between(0, 10)
        expect(0).not_.to_be_between(0, 10)
        expect(10).not_.to_be_between(0, 10)

    def test_inclusive(self):
        expect(0).to_be_between(0, 10, inclusive=True)
        expect(10).to_be_between(0, 10, inclusive=True)

    def test_single_inclusive_bound(self):
        expect(0).to_be_between(0, 10, low_inclusive=True)
        expect(10).not_.to_be_between(0, 10, low_inclusive=True)
        expect(10).to_be_between(0, 10, high_inclusive=True)
        expect(0).not_.to_be_between(0, 10, high_inclusive=True)

    def test_message_shows_interval(self):
        with pytest.raises(AssertionFailedError, match=r"<11> to be between \[0, 10\)"):
            expect(11).to_be_between(0, 10, low_inclusive=True)


class TestComparisons:
    def test_close_to(self):
        expect(0.1 + 0.2).to_be_close_to(0.3, 1e-9)
        expect(10).to_be_close_to(12, 2)
        expect(10).not_.to_be_close_to(13, 2)

    def test_greater(self):
        expect(2).to_be_greater_than(1)
        expect(2).not_.to_be_greater_than(2)
        expect(2).to_be_greater_than_or_equal(2)
        with pytest.raises(AssertionFailedError, match="<1> to be greater than or equal to <2>") as exc_info:
            expect(1).to_be_greater_than_or_equal(2)

        assert exc_info.value.expected == 2

    def test_less(self):
        expect(1).to_be_less_than(2)
        expect(2).not_.to_be_less_than(2)
        expect(2).to_be_less_than_or_equal(2)
        with pytest.raises(AssertionFailedError, match="NOT to be less than or equal to <3>"):
            expect(2).not_.to_be_less_than_or_equal(3)

    def test_chaining(self):
        expect(7).to_be_positive().to_be_odd().to_be_between(5, 10).not_.to_be_divisible_by(2)

"""Tests for StringAssertion."""

import re

import pytest

from assertive import AssertionFailedError, expect


class TestEmptiness:
    def test_empty(self):
        expect("").to_be_empty()
        expect(" ").not_.to_be_empty()
        with pytest.raises(AssertionFailedError, match="<a> to be empty"):
            expect("a").to_be_empty()

    def test_blank(self):
        expect("").to_be_blank()
        expect(" \t\n").to_be_blank()
        expect(" a ").not_.to_be_blank()


class TestContent:
    def test_equal_ignoring_case(self):
        expect("Hello").to_be_equal_ignoring_case("hELLO")
        expect("straße").to_be_equal_ignoring_case("STRASSE")
        expect("Hello").not_.to_be_equal_ignoring_case("Help")

    def test_contain(self):
        expect("/api/users").to_contain("users")
        expect("/api/users").not_.to_contain("Users")
        with pytest.raises(AssertionFailedError, match="</api/users> to contain <posts>") as exc_info:
            expect("/api/users").to_contain("posts")

        assert exc_info.value.expected == "posts"

    def test_contain_ignoring_case(self):
        expect("/api/users").to_contain_ignoring_case("USERS")
        with pytest.raises(AssertionFailedError, match="ignoring case"):
            expect("/api/users").not_.to_contain_ignoring_case("API")

    def test_start_and_end(self):
        expect("report.csv").to_start_with("report").to_end_with(".csv")
        expect("report.csv").not_.to_start_with(".csv").not_.to_end_with("report")
        with pytest.raises(AssertionFailedError, match="NOT to end with <.csv>"):
            expect("report.csv").not_.to_end_with(".csv")


class TestToMatchRegex:
    def test_searches_anywhere(self):
        expect("order-1234-x").to_match_regex(r"\d{4}")

    def test_compiled_pattern(self):
        expect("ABC").to_match_regex(re.compile("abc", re.IGNORECASE))

    def test_failure(self):
        with pytest.raises(AssertionFailedError, match="to match the regular expression"):
            expect("abc").to_match_regex(r"^\d+$")

        expect("abc").not_.to_match_regex(r"^\d+$")

"""Tests for FunctionAssertion and ErrorAssertion."""

import pytest

from assertive import (
    Assertion,
    AssertionFailedError,
    ErrorAssertion,
    StringAssertion,
    TypeFactories,
    expect,
)


class NotFoundError(LookupError):
    pass


def raise_not_found():
    raise NotFoundError("404: user 7 not found")


def return_value():
    return 42


class TestErrorAssertion:
    """Tests for checks over exception instances."""

    def test_message_checks(self):
        (
            expect(ValueError("404: Not found"))
            .to_have_message("404: Not found")
            .to_have_message_starting_with("404")
            .to_have_message_containing("Not")
            .to_have_message_ending_with("found")
            .to_have_message_matching(r"^\d{3}:")
        )

    def test_message_is_str_of_error(self):
        assert expect(KeyError("id")).message == "'id'"
        assert expect(ValueError()).message == ""

    def test_message_failure(self):
        with pytest.raises(AssertionFailedError, match="to have the message: other") as exc_info:
            expect(ValueError("boom")).to_have_message("other")

        assert exc_info.value.actual == "boom"

    def test_negated_message_checks(self):
        error = ValueError("boom")

        expect(error).not_.to_have_message("bam").not_.to_have_message_containing("x")
        with pytest.raises(AssertionFailedError, match="NOT to have a message starting with"):
            expect(error).not_.to_have_message_starting_with("bo")

    def test_to_have_name(self):
        expect(NotFoundError()).to_have_name("NotFoundError").not_.to_have_name("LookupError")
        with pytest.raises(AssertionFailedError, match="error name to be <KeyError>"):
            expect(ValueError()).to_have_name("KeyError")


class TestToThrow:
    def test_throws(self):
        expect(raise_not_found).to_throw()
        expect(return_value).not_.to_throw()

    def test_does_not_throw(self):
        with pytest.raises(AssertionFailedError, match="Expected the function to throw when called"):
            expect(return_value).to_throw()

    def test_negated_reports_captured_error(self):
        with pytest.raises(AssertionFailedError, match="NOT to throw when called") as exc_info:
            expect(raise_not_found).not_.to_throw()

        assert isinstance(exc_info.value.actual, NotFoundError)

    def test_throws_specific_error(self):
        expect(raise_not_found).to_throw(NotFoundError("404: user 7 not found"))
        expect(raise_not_found).not_.to_throw(NotFoundError("other"))
        expect(raise_not_found).not_.to_throw(LookupError("404: user 7 not found"))
        expect(return_value).not_.to_throw(ValueError())

    def test_throws_specific_error_failure(self):
        with pytest.raises(AssertionFailedError, match="Expected the function to throw - ValueError"):
            expect(raise_not_found).to_throw(ValueError("x"))

    def test_calls_the_function_each_check(self):
        calls = []

        def record():
            calls.append(1)
            raise RuntimeError("again")

        expect(record).to_throw().to_throw()

        assert len(calls) == 2

    def test_base_exceptions_are_not_captured(self):
        def interrupt():
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            expect(interrupt).to_throw()


class TestToThrowError:
    def test_returns_error_assertion(self):
        narrowed = expect(raise_not_found).to_throw_error(LookupError)

        assert isinstance(narrowed, ErrorAssertion)
        assert isinstance(narrowed.value, NotFoundError)
        narrowed.to_have_message_containing("user 7")

    def test_defaults_to_exception(self):
        expect(raise_not_found).to_throw_error().to_have_name("NotFoundError")

    def test_wrong_error_type(self):
        with pytest.raises(AssertionFailedError, match="error instance of <KeyError>"):
            expect(raise_not_found).to_throw_error(KeyError)

    def test_negated_wrong_error_type(self):
        narrowed = expect(raise_not_found).not_.to_throw_error(KeyError)

        assert narrowed.negated is False
        narrowed.to_have_name("NotFoundError")

    def test_negated_matching_error_type(self):
        with pytest.raises(AssertionFailedError, match="NOT to throw an error instance of <LookupError>"):
            expect(raise_not_found).not_.to_throw_error(LookupError)

    def test_no_throw_fails_even_when_negated(self):
        with pytest.raises(AssertionFailedError, match="to throw when called"):
            expect(return_value).to_throw_error()
        with pytest.raises(AssertionFailedError, match="to throw when called"):
            expect(return_value).not_.to_throw_error(KeyError)


class TestToThrowValue:
    def test_generic_assertion(self):
        thrown = expect(raise_not_found).to_throw_value()

        assert type(thrown) is Assertion
        thrown.to_be_instance_of(NotFoundError)

    def test_with_factory(self):
        narrowed = expect(raise_not_found).to_throw_value(TypeFactories.error(NotFoundError))

        assert isinstance(narrowed, ErrorAssertion)

    def test_factory_mismatch(self):
        with pytest.raises(AssertionFailedError, match='throw a value of type "string"'):
            expect(raise_not_found).to_throw_value(TypeFactories.STRING)

    def test_negated_factory_mismatch_returns_generic_assertion(self):
        thrown = expect(raise_not_found).not_.to_throw_value(TypeFactories.STRING)

        assert type(thrown) is Assertion
        assert not isinstance(thrown, StringAssertion)

    def test_negated_factory_match(self):
        with pytest.raises(AssertionFailedError, match='NOT to throw a value of type "Exception"'):
            expect(raise_not_found).not_.to_throw_value(TypeFactories.ERROR)

    def test_no_throw(self):
        with pytest.raises(AssertionFailedError, match="to throw a value"):
            expect(return_value).to_throw_value()

    def test_negated_without_factory_fails(self):
        with pytest.raises(AssertionFailedError, match="NOT to throw a value"):
            expect(raise_not_found).not_.to_throw_value()

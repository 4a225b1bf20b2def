"""Assertions for callables."""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, overload

from assertive.assertions._base import Assertion, NarrowedT
from assertive.assertions.error import ErrorAssertion
from assertive.errors import AssertionFailedError
from assertive.messages import prettify

if TYPE_CHECKING:
    from assertive.factories import TypeFactory


AnyFunction = Callable[[], Any]
E = TypeVar("E", bound=BaseException)

# Marks that calling the function raised nothing.
_NO_THROW: Any = object()


def _same_error(captured: Any, expected: BaseException) -> bool:
    return type(captured) is type(expected) and captured.args == expected.args


class FunctionAssertion(Assertion[AnyFunction]):
    """Assertions for callables.

    Every check calls the function once, with no arguments, and captures the
    exception it raises. Only subclasses of ``Exception`` are captured.

    Examples
    --------
    >>> expect(lambda: int("x")).to_throw_error(ValueError).to_have_message_containing("invalid")
    >>> expect(lambda: 42).not_.to_throw()
    """

    def __init__(self, actual: AnyFunction):
        super().__init__(actual)

    def _capture_error(self) -> Any:
        try:
            self._actual()
        except Exception as error:
            return error
        return _NO_THROW

    def to_throw(self, error: BaseException | None = None) -> "FunctionAssertion":
        """Check the function raises when called.

        Parameters
        ----------
        error : BaseException or None
            If given, the raised exception must have the same type and the
            same ``args`` as ``error``.
        """
        captured = self._capture_error()

        if error is not None:
            return self.execute(
                assert_when=captured is not _NO_THROW and _same_error(captured, error),
                error=AssertionFailedError(
                    f"Expected the function to throw - {prettify(error)}",
                    actual=None if captured is _NO_THROW else captured,
                    expected=error,
                ),
                inverted_error=AssertionFailedError(
                    f"Expected the function NOT to throw - {prettify(error)}", actual=captured
                ),
            )

        return self.execute(
            assert_when=captured is not _NO_THROW,
            error=AssertionFailedError("Expected the function to throw when called"),
            inverted_error=AssertionFailedError(
                "Expected the function NOT to throw when called", actual=captured
            ),
        )

    @overload
    def to_throw_error(self) -> ErrorAssertion[Exception]: ...

    @overload
    def to_throw_error(self, error_type: type[E]) -> ErrorAssertion[E]: ...

    def to_throw_error(self, error_type: type[BaseException] = Exception) -> ErrorAssertion[Any]:
        """Check the function raises an instance of ``error_type``.

        Parameters
        ----------
        error_type : type[BaseException]
            Expected exception class. Defaults to ``Exception``.

        Returns
        -------
        ErrorAssertion
            An assertion over the raised exception.

        Raises
        ------
        AssertionFailedError
            If the function does not raise, even when negated, since there
            would be no exception to assert over.
        """
        captured = self._capture_error()

        if captured is _NO_THROW:
            raise AssertionFailedError("Expected the function to throw when called")

        self.execute(
            assert_when=isinstance(captured, error_type),
            error=AssertionFailedError(
                f"Expected the function to throw an error instance of <{error_type.__name__}>", actual=captured
            ),
            inverted_error=AssertionFailedError(
                f"Expected the function NOT to throw an error instance of <{error_type.__name__}>", actual=captured
            ),
        )

        return ErrorAssertion(captured)

    def to_throw_value(self, type_factory: "TypeFactory[Any, NarrowedT] | None" = None) -> Any:
        """Check the function raises, and assert over what it raised.

        Parameters
        ----------
        type_factory : TypeFactory or None
            If given, the raised exception must satisfy its predicate and the
            returned assertion is built by it. Otherwise a generic
            :class:`Assertion` is returned.

        Returns
        -------
        Assertion
            The factory's assertion, or a generic one, over the raised exception.
        """
        captured = self._capture_error()

        if captured is _NO_THROW:
            raise AssertionFailedError("Expected the function to throw a value")

        if type_factory is None:
            self.execute(
                assert_when=True,
                error=AssertionFailedError("Expected the function to throw a value", actual=captured),
                inverted_error=AssertionFailedError("Expected the function NOT to throw a value", actual=captured),
            )
            return Assertion(captured)

        is_type_match = bool(type_factory.predicate(captured))
        self.execute(
            assert_when=is_type_match,
            error=AssertionFailedError(
                f'Expected the function to throw a value of type "{type_factory.type_name}"', actual=captured
            ),
            inverted_error=AssertionFailedError(
                f'Expected the function NOT to throw a value of type "{type_factory.type_name}"', actual=captured
            ),
        )

        return type_factory.factory(captured) if is_type_match else Assertion(captured)

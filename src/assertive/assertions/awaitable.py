"""Assertions for awaitables (coroutines, futures and tasks).

Every check here is a coroutine. It must be awaited for the check to run at
all: an un-awaited check never fails, and nothing can detect that. A
coroutine subject can only be awaited once, so use one ``expect`` per check
when asserting over a coroutine; futures and tasks can be checked repeatedly.

Example::

    value = await expect(fetch_user()).to_be_resolved()
    error = await expect(fail_later()).to_be_rejected()
    await asyncio.wait_for(expect(slow()).to_be_resolved(), timeout=1)
"""

from collections.abc import Awaitable
from typing import Any, TypeVar

from assertive.assertions._base import Assertion
from assertive.comparators import deep_equal
from assertive.errors import AssertionFailedError
from assertive.messages import prettify


T = TypeVar("T")


class AwaitableAssertion(Assertion[Awaitable[T]]):
    """Assertions for awaitables.

    A subject is *resolved* when awaiting it returns a value and *rejected*
    when awaiting it raises an ``Exception``.
    """

    def __init__(self, actual: Awaitable[T]):
        super().__init__(actual)

    async def _settle(self) -> tuple[Any, Exception | None]:
        try:
            return await self._actual, None
        except Exception as error:
            return None, error

    async def to_be_resolved(self) -> Any:
        """Check the awaitable resolves.

        Returns
        -------
        Any
            The resolved value, or the raised exception when negated.
        """
        value, error = await self._settle()

        if error is None:
            if self._negated:
                raise AssertionFailedError("Expected awaitable NOT to be resolved", actual=value)
            return value

        if self._negated:
            return error
        raise AssertionFailedError(
            f"Expected awaitable to be resolved, but it was rejected with <{prettify(error)}> instead",
            actual=error,
        )

    async def to_be_resolved_with(self, expected: T) -> Any:
        """Check the awaitable resolves to a value deep equal to ``expected``.

        When negated, the awaitable must still resolve, to anything else.

        Returns
        -------
        Any
            The resolved value.
        """
        value, error = await self._settle()

        if error is not None:
            message = (
                f"Expected awaitable to be resolved with anything but <{prettify(expected)}>, "
                f"but it was rejected with <{prettify(error)}> instead"
                if self._negated
                else f"Expected awaitable to be resolved with <{prettify(expected)}>, "
                f"but it was rejected with <{prettify(error)}> instead"
            )
            raise AssertionFailedError(message, actual=error, expected=None if self._negated else expected)

        self.execute(
            assert_when=deep_equal(value, expected),
            error=AssertionFailedError(
                f"Expected awaitable to be resolved with <{prettify(expected)}>, but got <{prettify(value)}> instead",
                actual=value,
                expected=expected,
            ),
            inverted_error=AssertionFailedError(
                f"Expected awaitable NOT to be resolved with <{prettify(value)}>", actual=value
            ),
        )
        return value

    async def to_be_rejected(self) -> Any:
        """Check the awaitable raises.

        Returns
        -------
        Any
            The raised exception, or the resolved value when negated.
        """
        value, error = await self._settle()

        if error is None:
            if self._negated:
                return value
            raise AssertionFailedError(
                f"Expected awaitable to be rejected, but it was resolved with <{prettify(value)}> instead",
                actual=value,
            )

        if self._negated:
            raise AssertionFailedError("Expected awaitable NOT to be rejected", actual=error)
        return error

    async def to_be_rejected_with(self, expected: BaseException) -> Any:
        """Check the awaitable raises an exception like ``expected``.

        The raised exception must have the same type and ``args``. When
        negated, the awaitable must still raise, something else.

        Returns
        -------
        Any
            The raised exception.
        """
        value, error = await self._settle()

        if error is None:
            message = (
                f"Expected awaitable to be rejected with anything but <{prettify(expected)}>, "
                f"but it was resolved with <{prettify(value)}> instead"
                if self._negated
                else f"Expected awaitable to be rejected with <{prettify(expected)}>, "
                f"but it was resolved with <{prettify(value)}> instead"
            )
            raise AssertionFailedError(message, actual=value, expected=None if self._negated else expected)

        self.execute(
            assert_when=type(error) is type(expected) and error.args == expected.args,
            error=AssertionFailedError(
                f"Expected awaitable to be rejected with <{prettify(expected)}>, but got <{prettify(error)}> instead",
                actual=error,
                expected=expected,
            ),
            inverted_error=AssertionFailedError(
                f"Expected awaitable NOT to be rejected with <{prettify(error)}>", actual=error
            ),
        )
        return error

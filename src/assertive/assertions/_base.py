"""Base assertion class, negation protocol and type narrowing."""

import copy
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, Literal, TypeVar

from assertive.comparators import deep_equal, shallow_equal
from assertive.errors import AssertionFailedError, UnsupportedOperationError
from assertive.guards import type_name_of
from assertive.messages import prettify

if TYPE_CHECKING:
    from assertive.factories import TypeFactory


T = TypeVar("T")
S = TypeVar("S")
AssertionT = TypeVar("AssertionT", bound="Assertion[Any]")
NarrowedT = TypeVar("NarrowedT", bound="Assertion[Any]")

DataType = Literal[
    "array",
    "boolean",
    "bytes",
    "function",
    "mapping",
    "none",
    "number",
    "object",
    "string",
]


class Assertion(Generic[T]):
    """Base class for all assertions.

    Holds the value under test and the negation flag. Every check method
    computes a raw verdict and hands it to :meth:`execute`, which applies the
    ``not_`` inversion, so checks never implement their negated form twice.

    Parameters
    ----------
    actual : T
        The value under test.

    Examples
    --------
    >>> Assertion(3).to_be_equal(3)
    >>> Assertion(3).not_.to_be_equal(4)
    """

    def __init__(self, actual: T):
        self._actual = actual
        self._negated = False

    def __repr__(self) -> str:
        flag = ", negated" if self._negated else ""
        return f"{type(self).__name__}({prettify(self._actual)}{flag})"

    @property
    def value(self) -> T:
        """The value under test."""
        return self._actual

    @property
    def negated(self) -> bool:
        """Whether the next check is inverted."""
        return self._negated

    @property
    def not_(self: AssertionT) -> AssertionT:
        """A copy of this assertion whose next check is inverted.

        The negation is consumed by a single check. It does not accumulate:
        ``.not_.not_`` is the same as ``.not_``.
        """
        return self._with_negation(True)

    def _with_negation(self: AssertionT, negated: bool) -> AssertionT:
        view = copy.copy(self)
        view._negated = negated
        return view

    def execute(
        self: AssertionT,
        assert_when: bool,
        error: AssertionFailedError,
        inverted_error: AssertionFailedError,
    ) -> AssertionT:
        """Apply a check verdict, taking ``not_`` into account.

        Parameters
        ----------
        assert_when : bool
            The raw (non-negated) verdict of the check.
        error : AssertionFailedError
            Raised when the verdict is ``False`` and the assertion is not negated.
        inverted_error : AssertionFailedError
            Raised when the verdict is ``True`` and the assertion is negated.

        Returns
        -------
        Assertion
            An assertion over the same value whose negation flag is ``False``.

        Raises
        ------
        AssertionFailedError
            If the (possibly inverted) check does not hold.
        """
        if not assert_when and not self._negated:
            raise error

        if assert_when and self._negated:
            raise inverted_error

        return self._with_negation(False) if self._negated else self

    def as_type(self, type_factory: "TypeFactory[S, NarrowedT]") -> NarrowedT:
        """Narrow this assertion to a more specific one.

        Checks ``type_factory.predicate`` against the value and, if it holds,
        builds the factory's assertion for the same value.

        Parameters
        ----------
        type_factory : TypeFactory
            The predicate, assertion constructor and type name to narrow to.

        Returns
        -------
        Assertion
            The assertion built by ``type_factory``.

        Raises
        ------
        UnsupportedOperationError
            If the assertion is negated, whatever the predicate says.
        AssertionFailedError
            If the value does not satisfy the factory predicate.
        """
        if self._negated:
            raise UnsupportedOperationError("The `.not_` modifier is not allowed on `.as_type(..)` method")

        if type_factory.predicate(self._actual):
            return type_factory.factory(self._actual)

        raise AssertionFailedError(
            f'Expected <{prettify(self._actual)}> to be of type "{type_factory.type_name}"',
            actual=self._actual,
            expected=type_factory.type_name,
        )

    def to_match(self: AssertionT, matcher: Callable[[T], bool]) -> AssertionT:
        """Check the value satisfies ``matcher``."""
        return self.execute(
            assert_when=bool(matcher(self._actual)),
            error=AssertionFailedError("Expected matcher predicate to return true", actual=self._actual),
            inverted_error=AssertionFailedError(
                "Expected matcher predicate NOT to return true", actual=self._actual
            ),
        )

    def to_exist(self: AssertionT) -> AssertionT:
        """Check the value is not ``None``."""
        return self.execute(
            assert_when=self._actual is not None,
            error=AssertionFailedError(
                f"Expected value to exist, but it was <{prettify(self._actual)}>", actual=self._actual
            ),
            inverted_error=AssertionFailedError(
                f"Expected value to NOT exist, but it was <{prettify(self._actual)}>", actual=self._actual
            ),
        )

    def to_be_none(self: AssertionT) -> AssertionT:
        return self.execute(
            assert_when=self._actual is None,
            error=AssertionFailedError(f"Expected <{prettify(self._actual)}> to be None", actual=self._actual),
            inverted_error=AssertionFailedError("Expected the value NOT to be None", actual=self._actual),
        )

    def to_be_truthy(self: AssertionT) -> AssertionT:
        return self.execute(
            assert_when=bool(self._actual),
            error=AssertionFailedError(
                f"Expected <{prettify(self._actual)}> to be a truthy value", actual=self._actual
            ),
            inverted_error=AssertionFailedError(
                f"Expected <{prettify(self._actual)}> NOT to be a truthy value", actual=self._actual
            ),
        )

    def to_be_falsy(self: AssertionT) -> AssertionT:
        return self.execute(
            assert_when=not self._actual,
            error=AssertionFailedError(
                f"Expected <{prettify(self._actual)}> to be a falsy value", actual=self._actual
            ),
            inverted_error=AssertionFailedError(
                f"Expected <{prettify(self._actual)}> NOT to be a falsy value", actual=self._actual
            ),
        )

    def to_be_instance_of(self: AssertionT, expected: type) -> AssertionT:
        """Check the value is an instance of ``expected``."""
        return self.execute(
            assert_when=isinstance(self._actual, expected),
            error=AssertionFailedError(
                f"Expected value to be an instance of <{expected.__name__}>", actual=self._actual
            ),
            inverted_error=AssertionFailedError(
                f"Expected value NOT to be an instance of <{expected.__name__}>", actual=self._actual
            ),
        )

    def to_be_equal(self: AssertionT, expected: T) -> AssertionT:
        """Check the value is deep equal to ``expected``.

        Examples
        --------
        >>> expect(3 + 2).to_be_equal(5)
        >>> expect({"a": {"b": 1}}).to_be_equal({"a": {"b": 1}})
        """
        return self.execute(
            assert_when=deep_equal(self._actual, expected),
            error=AssertionFailedError(
                "Expected both values to be deep equal", actual=self._actual, expected=expected
            ),
            inverted_error=AssertionFailedError(
                "Expected both values to NOT be deep equal", actual=self._actual
            ),
        )

    def to_be_similar(self: AssertionT, expected: T) -> AssertionT:
        """Check the value is shallow equal to ``expected``.

        Examples
        --------
        >>> expect({"a": 1}).to_be_similar({"a": 1})
        >>> expect({"a": {"b": 1}}).not_.to_be_similar({"a": {"b": 1}})
        """
        return self.execute(
            assert_when=shallow_equal(self._actual, expected),
            error=AssertionFailedError(
                "Expected both values to be similar", actual=self._actual, expected=expected
            ),
            inverted_error=AssertionFailedError("Expected both values to NOT be similar", actual=self._actual),
        )

    def to_be_same(self: AssertionT, expected: T) -> AssertionT:
        """Check the value is the very same object as ``expected``."""
        return self.execute(
            assert_when=self._actual is expected,
            error=AssertionFailedError(
                "Expected both values to be the same", actual=self._actual, expected=expected
            ),
            inverted_error=AssertionFailedError("Expected both values to NOT be the same", actual=self._actual),
        )

    def to_be_of_type(self: AssertionT, expected: DataType) -> AssertionT:
        """Check the data type of the value.

        ``"object"`` matches anything that is not one of the other data types.
        """
        actual_type = type_name_of(self._actual)
        return self.execute(
            assert_when=actual_type == expected,
            error=AssertionFailedError(
                f"Expected <{prettify(self._actual)}> to be of type <{expected}>",
                actual=actual_type,
                expected=expected,
            ),
            inverted_error=AssertionFailedError(
                f"Expected <{prettify(self._actual)}> NOT to be of type <{expected}>", actual=actual_type
            ),
        )

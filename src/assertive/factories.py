"""Type factories: a runtime predicate paired with the assertion it unlocks."""

from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass
from datetime import date
from typing import Any, Generic, TypeVar

from assertive import guards
from assertive.assertions import (
    Assertion,
    AwaitableAssertion,
    BooleanAssertion,
    DateAssertion,
    ErrorAssertion,
    FunctionAssertion,
    MappingAssertion,
    NumberAssertion,
    SequenceAssertion,
    StringAssertion,
)


S = TypeVar("S")
A = TypeVar("A", bound=Assertion[Any])
E = TypeVar("E", bound=BaseException)


@dataclass(frozen=True)
class TypeFactory(Generic[S, A]):
    """Used to narrow a value into a specific assertion type.

    Attributes
    ----------
    factory : Callable[[S], A]
        Builds the assertion for a value that satisfies ``predicate``.
    predicate : Callable[[Any], bool]
        Runtime type check for the value.
    type_name : str
        Name of the type, used in failure messages.

    Examples
    --------
    >>> UUIDFactory = TypeFactory(UUIDAssertion, lambda value: isinstance(value, UUID), "UUID")
    >>> expect(identifier).as_type(UUIDFactory).to_be_version(4)
    """

    factory: Callable[[S], A]
    predicate: Callable[[Any], bool]
    type_name: str


class TypeFactories:
    """Predefined :class:`TypeFactory` instances and factory builders.

    The built-in factories double as the ladder ``expect`` walks to pick the
    assertion for a value (see :data:`BUILTIN_LADDER`).
    """

    BOOLEAN: TypeFactory[bool, BooleanAssertion] = TypeFactory(BooleanAssertion, guards.is_boolean, "boolean")
    NUMBER: TypeFactory[int | float, NumberAssertion] = TypeFactory(NumberAssertion, guards.is_number, "number")
    STRING: TypeFactory[str, StringAssertion] = TypeFactory(StringAssertion, guards.is_string, "string")
    DATE: TypeFactory[date, DateAssertion] = TypeFactory(DateAssertion, guards.is_date, "date")
    AWAITABLE: TypeFactory[Awaitable[Any], AwaitableAssertion[Any]] = TypeFactory(
        AwaitableAssertion, guards.is_awaitable, "awaitable"
    )
    FUNCTION: TypeFactory[Callable[[], Any], FunctionAssertion] = TypeFactory(
        FunctionAssertion, guards.is_any_function, "function"
    )
    ERROR: TypeFactory[BaseException, ErrorAssertion[BaseException]] = TypeFactory(
        ErrorAssertion, guards.is_error, "Exception"
    )

    @staticmethod
    def array(inner: TypeFactory[Any, Any] | None = None) -> TypeFactory[Sequence[Any], SequenceAssertion[Any]]:
        """Build a list/tuple factory, optionally requiring every element to satisfy ``inner``.

        Examples
        --------
        >>> TypeFactories.array()  # any list or tuple
        >>> TypeFactories.array(TypeFactories.STRING)  # a sequence of strings
        """
        if inner is None:
            return TypeFactory(SequenceAssertion, guards.is_array, "array")

        def predicate(value: Any) -> bool:
            return guards.is_array(value) and all(inner.predicate(item) for item in value)

        return TypeFactory(SequenceAssertion, predicate, f"array[{inner.type_name}]")

    @staticmethod
    def error(error_type: type[E]) -> TypeFactory[E, ErrorAssertion[E]]:
        """Build a factory for instances of a specific exception class."""
        return TypeFactory(ErrorAssertion, lambda value: isinstance(value, error_type), error_type.__name__)

    @staticmethod
    def instance_of(cls: type[S]) -> TypeFactory[S, Assertion[S]]:
        """Build a factory for instances of ``cls`` with a generic assertion."""
        return TypeFactory(Assertion, lambda value: isinstance(value, cls), cls.__name__)

    @staticmethod
    def mapping() -> TypeFactory[Mapping[Any, Any], MappingAssertion[Any, Any]]:
        """Build a factory for plain structured objects (mappings)."""
        return TypeFactory(MappingAssertion, guards.is_struct, "mapping")


BUILTIN_LADDER: tuple[TypeFactory[Any, Any], ...] = (
    TypeFactories.BOOLEAN,
    TypeFactories.NUMBER,
    TypeFactories.STRING,
    TypeFactories.DATE,
    TypeFactories.array(),
    TypeFactories.AWAITABLE,
    TypeFactories.FUNCTION,
    TypeFactories.ERROR,
    TypeFactories.mapping(),
)

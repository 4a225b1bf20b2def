"""The ``expect`` entry point: picks the assertion type for a value."""

import logging
from collections.abc import Awaitable, Callable, Mapping
from datetime import date
from typing import Any, TypeVar, overload

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
from assertive.config import get_settings
from assertive.factories import BUILTIN_LADDER
from assertive.plugins import Plugin, PluginRegistry, get_default_registry


logger = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")
E = TypeVar("E", bound=BaseException)


def _first_match(plugins: tuple[Plugin, ...], value: Any) -> Plugin | None:
    return next((plugin for plugin in plugins if plugin.predicate(value)), None)


class Expect:
    """Builds the most specific assertion available for a value.

    The first rule that matches wins:

    1. ``top`` plugins, in registration order;
    2. built-in types: boolean, number, string, date, list/tuple, awaitable,
       callable, exception, mapping;
    3. ``bottom`` plugins, in registration order;
    4. the generic :class:`Assertion`.

    Dispatch never fails: any value gets at least the generic assertion.

    Parameters
    ----------
    registry : PluginRegistry or None
        Registry consulted for plugins. Defaults to the process-wide one;
        pass a dedicated registry to isolate plugins (e.g. between tests).

    Notes
    -----
    The overloads only know the built-in assertions. Values claimed by a
    plugin are typed as ``Assertion[Any]``; narrow them with ``cast`` if
    needed. The runtime result is always the plugin's assertion.
    """

    def __init__(self, registry: PluginRegistry | None = None) -> None:
        self._registry = registry

    @property
    def registry(self) -> PluginRegistry:
        return self._registry if self._registry is not None else get_default_registry()

    @overload
    def __call__(self, actual: bool) -> BooleanAssertion: ...

    @overload
    def __call__(self, actual: int | float) -> NumberAssertion: ...

    @overload
    def __call__(self, actual: str) -> StringAssertion: ...

    @overload
    def __call__(self, actual: date) -> DateAssertion: ...

    @overload
    def __call__(self, actual: list[T] | tuple[T, ...]) -> SequenceAssertion[T]: ...

    @overload
    def __call__(self, actual: Awaitable[T]) -> AwaitableAssertion[T]: ...

    @overload
    def __call__(self, actual: Callable[[], Any]) -> FunctionAssertion: ...

    @overload
    def __call__(self, actual: E) -> ErrorAssertion[E]: ...

    @overload
    def __call__(self, actual: Mapping[K, V]) -> MappingAssertion[K, V]: ...

    @overload
    def __call__(self, actual: T) -> Assertion[T]: ...

    def __call__(self, actual: Any) -> Assertion[Any]:
        registry = self.registry
        if self._registry is None and get_settings().autoload_plugins:
            registry.load_entry_points(get_settings().plugin_entry_point_group)

        plugin = _first_match(registry.top(), actual)
        if plugin is not None:
            logger.debug("expect(%s): top plugin %s", type(actual).__name__, plugin.name)
            return plugin.assertion(actual)

        for type_factory in BUILTIN_LADDER:
            if type_factory.predicate(actual):
                logger.debug("expect(%s): built-in %s", type(actual).__name__, type_factory.type_name)
                return type_factory.factory(actual)

        plugin = _first_match(registry.bottom(), actual)
        if plugin is not None:
            logger.debug("expect(%s): bottom plugin %s", type(actual).__name__, plugin.name)
            return plugin.assertion(actual)

        logger.debug("expect(%s): generic assertion", type(actual).__name__)
        return Assertion(actual)


expect = Expect()
assert_that = expect

"""Assertive - fluent, type-aware assertions for Python."""

from .assertions import (
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
from .config import AssertiveSettings, get_settings
from .dispatch import Expect, assert_that, expect
from .errors import AssertionFailedError, FailureReport, UnsupportedOperationError
from .factories import TypeFactories, TypeFactory
from .plugins import (
    InsertAt,
    Plugin,
    PluginRegistry,
    get_default_registry,
    load_entry_point_plugins,
    use_plugin,
)
from .version import __version__


__all__ = [
    # Entry point
    "expect",
    "assert_that",
    "Expect",
    # Plugins
    "Plugin",
    "InsertAt",
    "PluginRegistry",
    "use_plugin",
    "get_default_registry",
    "load_entry_point_plugins",
    # Narrowing
    "TypeFactory",
    "TypeFactories",
    # Errors
    "AssertionFailedError",
    "UnsupportedOperationError",
    "FailureReport",
    # Config
    "AssertiveSettings",
    "get_settings",
    # Assertions
    "Assertion",
    "AwaitableAssertion",
    "BooleanAssertion",
    "DateAssertion",
    "ErrorAssertion",
    "FunctionAssertion",
    "MappingAssertion",
    "NumberAssertion",
    "SequenceAssertion",
    "StringAssertion",
]

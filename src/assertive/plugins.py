"""Plugin system for extending ``expect`` with new assertion types.

A plugin pairs a runtime predicate with the assertion to build when it
matches, and says where it is tried relative to the built-in types:

- ``top``: before every built-in type;
- ``bottom``: after every built-in type, right before the generic fallback.

Registries are append-only. Plugins are meant to be registered once, when
the process (or test suite) starts, before any assertion runs.
"""

import logging
import threading
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from importlib.metadata import entry_points
from typing import Any

from assertive.assertions import Assertion
from assertive.config import get_settings


logger = logging.getLogger(__name__)


class InsertAt(Enum):
    """Where a plugin is tried relative to the built-in types."""

    TOP = "top"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Plugin:
    """An extension of ``expect`` for a new kind of value.

    Attributes
    ----------
    assertion : Callable[[Any], Assertion]
        Builds the assertion for a matching value, usually an
        :class:`Assertion` subclass.
    predicate : Callable[[Any], bool]
        Tells whether a value should get this plugin's assertion. Must not
        have side effects.
    insert_at : InsertAt
        ``InsertAt.TOP`` or ``InsertAt.BOTTOM``; ``"top"`` and ``"bottom"``
        are accepted too.

    Examples
    --------
    >>> UUIDPlugin = Plugin(UUIDAssertion, lambda value: isinstance(value, UUID), "top")
    >>> use_plugin(UUIDPlugin)
    """

    assertion: Callable[[Any], Assertion[Any]]
    predicate: Callable[[Any], bool]
    insert_at: InsertAt = InsertAt.TOP

    def __post_init__(self) -> None:
        if isinstance(self.insert_at, str):
            object.__setattr__(self, "insert_at", InsertAt(self.insert_at))
        elif not isinstance(self.insert_at, InsertAt):
            raise ValueError(f"Invalid insert_at value: {self.insert_at!r}")

    @property
    def name(self) -> str:
        return getattr(self.assertion, "__name__", repr(self.assertion))


class PluginRegistry:
    """Ordered, append-only collection of plugins.

    Registration order is the order plugins are tried in, within each
    position. Registering the same plugin twice keeps both entries; the first
    one always wins. There is no way to remove a plugin.
    """

    def __init__(self, plugins: Iterable[Plugin] = ()) -> None:
        self._plugins: tuple[Plugin, ...] = ()
        self._lock = threading.Lock()
        self._entry_points_loaded = False
        self.register(plugins)

    def __len__(self) -> int:
        return len(self._plugins)

    def __iter__(self) -> Iterator[Plugin]:
        return iter(self._plugins)

    def __repr__(self) -> str:
        return f"PluginRegistry({[plugin.name for plugin in self._plugins]!r})"

    def register(self, plugins: Plugin | Iterable[Plugin]) -> None:
        """Append one plugin or an iterable of plugins.

        Raises
        ------
        TypeError
            If anything other than a :class:`Plugin` is given.
        """
        batch = (plugins,) if isinstance(plugins, Plugin) else tuple(plugins)
        for plugin in batch:
            if not isinstance(plugin, Plugin):
                raise TypeError(f"Expected a Plugin, got {type(plugin).__name__}")

        with self._lock:
            for plugin in batch:
                if plugin in self._plugins:
                    logger.warning("Plugin %s is already registered; the first registration wins", plugin.name)
                logger.debug("Registering plugin %s at %s", plugin.name, plugin.insert_at.value)
            self._plugins = self._plugins + batch

    def plugins(self) -> tuple[Plugin, ...]:
        """Snapshot of every plugin, in registration order."""
        return self._plugins

    def top(self) -> tuple[Plugin, ...]:
        return tuple(plugin for plugin in self._plugins if plugin.insert_at is InsertAt.TOP)

    def bottom(self) -> tuple[Plugin, ...]:
        return tuple(plugin for plugin in self._plugins if plugin.insert_at is InsertAt.BOTTOM)

    def load_entry_points(self, group: str) -> int:
        """Register the plugins advertised under the entry point ``group``.

        Each entry point must resolve to a :class:`Plugin` or an iterable of
        them. Every entry point is loaded before anything is registered, so a
        failing one leaves the registry untouched. Loading succeeds at most
        once per registry; later calls return ``0``. After a failure the next
        call tries again.

        Returns
        -------
        int
            Number of plugins registered.

        Raises
        ------
        TypeError
            If an entry point resolves to something other than plugins.
        Exception
            Whatever importing an entry point raises.
        """
        with self._lock:
            if self._entry_points_loaded:
                return 0
            self._entry_points_loaded = True

        try:
            found: list[Plugin] = []
            for entry_point in entry_points(group=group):
                loaded = entry_point.load()
                found.extend((loaded,) if isinstance(loaded, Plugin) else loaded)
                logger.info("Found plugins in entry point %s (%s)", entry_point.name, entry_point.value)
            self.register(found)
        except Exception:
            with self._lock:
                self._entry_points_loaded = False
            raise

        return len(found)


_default_registry = PluginRegistry()


def get_default_registry() -> PluginRegistry:
    """Get the process-wide plugin registry used by ``expect``."""
    return _default_registry


def use_plugin(plugins: Plugin | Iterable[Plugin]) -> None:
    """Extend ``expect`` with one or more plugins.

    Example:
        use_plugin(UUIDPlugin)
        use_plugin([SpyPlugin, SpyCallPlugin])
    """
    _default_registry.register(plugins)


def load_entry_point_plugins(registry: PluginRegistry | None = None, group: str | None = None) -> int:
    """Register plugins installed by other packages through entry points.

    Args:
        registry: Registry to load into. Defaults to the process-wide one.
        group: Entry point group. Defaults to ``AssertiveSettings.plugin_entry_point_group``.

    Returns:
        Number of plugins registered.
    """
    target = registry if registry is not None else _default_registry
    return target.load_entry_points(group or get_settings().plugin_entry_point_group)

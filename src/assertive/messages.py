"""Rendering of values inside failure messages."""

import re
from typing import Any

from rich.pretty import pretty_repr

from assertive.config import get_settings

# Keeps rich from expanding containers over several lines.
_SINGLE_LINE_WIDTH = 10_000
_LINE_BREAK = re.compile(r"\s*\n\s*")


def truncate(text: str, max_length: int) -> str:
    """Cut ``text`` to ``max_length`` characters, marking the cut with ``...``."""
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def prettify(value: Any, max_length: int | None = None) -> str:
    """Render ``value`` on a single line for use in a failure message.

    Containers are cut after ``max_length`` items and strings after
    ``max_length`` characters while rendering, so large values stay cheap to
    describe. Line breaks left by rich or by a custom ``__repr__`` are
    collapsed into single spaces.

    Parameters
    ----------
    value : Any
        The value to render.
    max_length : int or None
        Maximum length of the result. Defaults to
        ``AssertiveSettings.max_repr_length``.

    Returns
    -------
    str
        The rendered value, truncated with ``...`` if it is too long.
    """
    if max_length is None:
        max_length = get_settings().max_repr_length

    rendered = pretty_repr(
        value,
        max_width=_SINGLE_LINE_WIDTH,
        max_length=max_length,
        max_string=max_length,
        max_depth=max_length,
    )
    return truncate(_LINE_BREAK.sub(" ", rendered).strip(), max_length)

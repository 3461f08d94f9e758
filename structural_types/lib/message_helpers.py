"""
Helper functions for rendering schema error messages.
"""

from typing import Any

from ..context import get_path_separator


def join_path(path: tuple[Any, ...]) -> str:
    """Join path segments with the active separator."""
    return get_path_separator().join(str(segment) for segment in path)


def path_prefix(path: tuple[Any, ...]) -> str:
    """Return the joined path followed by a space, or "" at the root."""
    return f"{join_path(path)} " if path else ""


def render_expected(expected: list[Any]) -> str:
    """Render a typeMismatch expected list, e.g. " string" or " one of a, b"."""
    joined = ", ".join(str(item) for item in expected)
    return f" one of {joined}" if len(expected) > 1 else f" {joined}"

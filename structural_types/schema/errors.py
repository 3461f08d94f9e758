"""
SchemaError and default message formatting.
"""

from __future__ import annotations

from ..lib.message_helpers import path_prefix, render_expected
from .types import (
    BadInput,
    Custom,
    PatternMismatch,
    RangeOverflow,
    RangeUnderflow,
    SchemaErrorContext,
    StepMismatch,
    TooLong,
    TooShort,
    TypeMismatch,
    ValueMissing,
)


def format_message(context: SchemaErrorContext) -> str:
    """Derive the default human-readable message for an error context."""
    match context:
        case RangeOverflow(expected=expected, actual=actual, path=path):
            return f"{path_prefix(path)}must be less than or equal to {expected}, but got {actual}"
        case RangeUnderflow(expected=expected, actual=actual, path=path):
            return f"{path_prefix(path)}must be greater than or equal to {expected}, but got {actual}"
        case StepMismatch(expected=expected, actual=actual, path=path):
            return f"{path_prefix(path)}must be a multiple of {expected}, but got {actual}"
        case ValueMissing(actual=actual, path=path):
            return f"{path_prefix(path)}must be present, but got {actual}"
        case TooShort(expected=expected, actual=actual, path=path):
            return f"{path_prefix(path)}must be at least {expected} characters long, but got {actual}"
        case TooLong(expected=expected, actual=actual, path=path):
            return f"{path_prefix(path)}must be at most {expected} characters long, but got {actual}"
        case TypeMismatch(expected=expected, actual=actual, path=path):
            return f"{path_prefix(path)}must be{render_expected(expected)} but got {actual}"
        case BadInput(expected=expected, actual=actual, path=path):
            return f"{path_prefix(path)}must be {expected} but got {actual}"
        case PatternMismatch(expected=expected, actual=actual, path=path):
            return f"{path_prefix(path)}must match the pattern {expected} but got {actual}"
        case Custom(message=message):
            return message

    raise TypeError(f"Unknown schema error context: {type(context).__name__}")


class SchemaError(Exception):
    """
    A validation failure located by path.

    The message is derived from the context when the error is created, so
    it reflects the path separator active at that moment.
    """

    def __init__(self, context: SchemaErrorContext):
        self.context = context
        super().__init__(format_message(context))

    @property
    def message(self) -> str:
        return str(self)

    @property
    def path(self) -> tuple:
        return self.context.path

    def __repr__(self) -> str:
        return f"SchemaError({self.context!r})"

"""
Type definitions for structural_types schemas.

Provides the UNDEFINED sentinel, runtime classifications, and the closed set
of error contexts a schema can fail with.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal, Union


class Undefined(Enum):
    """
    Sentinel for an absent value.

    ObjectSchema reads missing fields as UNDEFINED, which lets
    UndefinedSchema / OptionalSchema tell "missing" apart from None.
    """

    UNDEFINED = "undefined"

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __str__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False


UNDEFINED = Undefined.UNDEFINED

# Type aliases
Path = tuple[Any, ...]

Classification = Literal[
    "string", "number", "bigint", "boolean", "undefined", "function", "object", "symbol"
]


def _is_number(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, (bool, Enum))


def _is_bigint(x: Any) -> bool:
    return isinstance(x, int) and not isinstance(x, (bool, Enum))


def _is_symbol(x: Any) -> bool:
    return isinstance(x, Enum) and x is not UNDEFINED


def _is_object(x: Any) -> bool:
    if x is None or x is UNDEFINED or callable(x):
        return False
    return not isinstance(x, (str, int, float, Enum))


CLASSIFIERS: dict[str, Callable[[Any], bool]] = {
    "string": lambda x: isinstance(x, str),
    "number": _is_number,
    "bigint": _is_bigint,
    "boolean": lambda x: isinstance(x, bool),
    "undefined": lambda x: x is UNDEFINED,
    "function": callable,
    "object": _is_object,
    "symbol": _is_symbol,
}


# =============================================================================
# Error contexts
# =============================================================================


@dataclass(frozen=True, slots=True)
class RangeOverflow:
    """Numeric value exceeds a maximum."""

    expected: int | float
    actual: int | float
    path: Path
    type: Literal["rangeOverflow"] = field(default="rangeOverflow", init=False)


@dataclass(frozen=True, slots=True)
class RangeUnderflow:
    """Numeric value is below a minimum."""

    expected: int | float
    actual: int | float
    path: Path
    type: Literal["rangeUnderflow"] = field(default="rangeUnderflow", init=False)


@dataclass(frozen=True, slots=True)
class StepMismatch:
    """Value is not a multiple of a step."""

    expected: int | float
    actual: int | float
    path: Path
    type: Literal["stepMismatch"] = field(default="stepMismatch", init=False)


@dataclass(frozen=True, slots=True)
class ValueMissing:
    """Required value is absent, empty, or NaN."""

    expected: Any
    actual: Any
    path: Path
    type: Literal["valueMissing"] = field(default="valueMissing", init=False)


@dataclass(frozen=True, slots=True)
class TooShort:
    """Length or size is below a lower bound."""

    expected: int
    actual: int
    path: Path
    type: Literal["tooShort"] = field(default="tooShort", init=False)


@dataclass(frozen=True, slots=True)
class TooLong:
    """Length or size is above an upper bound."""

    expected: int
    actual: int
    path: Path
    type: Literal["tooLong"] = field(default="tooLong", init=False)


@dataclass(frozen=True, slots=True)
class TypeMismatch:
    """Runtime classification mismatch; expected lists acceptable kinds."""

    expected: list[Any]
    actual: Any
    path: Path
    type: Literal["typeMismatch"] = field(default="typeMismatch", init=False)


@dataclass(frozen=True, slots=True)
class BadInput:
    """Generic shape or equality mismatch."""

    expected: Any
    actual: Any
    path: Path
    type: Literal["badInput"] = field(default="badInput", init=False)


@dataclass(frozen=True, slots=True)
class PatternMismatch:
    """String failed a regular-expression test."""

    expected: str
    actual: str
    path: Path
    type: Literal["patternMismatch"] = field(default="patternMismatch", init=False)


@dataclass(frozen=True, slots=True)
class Custom:
    """Author-supplied message; bypasses templated formatting."""

    message: str
    path: Path
    type: Literal["custom"] = field(default="custom", init=False)


SchemaErrorContext = Union[
    RangeOverflow,
    RangeUnderflow,
    StepMismatch,
    ValueMissing,
    TooShort,
    TooLong,
    TypeMismatch,
    BadInput,
    PatternMismatch,
    Custom,
]

"""
Primitive schemas: classification checks, literals, strings and numbers.

Specialised primitives wrap a classification check and apply a small set
of extra checks after it, in a fixed order. The first failing check wins.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, TypeVar

from ..result import Err, Ok, Result
from .core import Schema
from .errors import SchemaError
from .options import BigIntOptions, LengthOptions, NumberOptions
from .types import (
    CLASSIFIERS,
    BadInput,
    Classification,
    Path,
    PatternMismatch,
    RangeOverflow,
    RangeUnderflow,
    StepMismatch,
    TooLong,
    TooShort,
    TypeMismatch,
    ValueMissing,
)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class TypeofSchema(Schema[Any]):
    """
    Validate the runtime classification of a value.

    Usage:
        TypeofSchema("string")
        TypeofSchema("function")
    """

    classification: Classification

    def __post_init__(self) -> None:
        if self.classification not in CLASSIFIERS:
            raise ValueError(f"Unknown classification: {self.classification!r}")

    def parse_result(self, data: Any, path: Path = ()) -> Result[Any, SchemaError]:
        if not CLASSIFIERS[self.classification](data):
            return Err(SchemaError(TypeMismatch([self.classification], data, path)))
        return Ok(data)


@dataclass(frozen=True, slots=True)
class LiteralSchema(Schema[T]):
    """
    Validate strict equality to a constant.

    Equality is strict: the value must have the literal's exact type, so
    LiteralSchema(1) rejects True and 1.0.
    """

    literal: T

    def parse_result(self, data: Any, path: Path = ()) -> Result[T, SchemaError]:
        if data is self.literal or (
            type(data) is type(self.literal) and data == self.literal
        ):
            return Ok(data)
        return Err(SchemaError(BadInput(self.literal, data, path)))


_STRING = TypeofSchema("string")
_NUMBER = TypeofSchema("number")
_BIGINT = TypeofSchema("bigint")


@dataclass(frozen=True, slots=True)
class StringSchema(Schema[str]):
    """
    Validate a string.

    Check order: classification, required (non-empty), min_length,
    max_length.
    """

    required: bool = False
    min_length: int | None = None
    max_length: int | None = None

    def __post_init__(self) -> None:
        LengthOptions(
            required=self.required,
            min_length=self.min_length,
            max_length=self.max_length,
        )

    def parse_result(self, data: Any, path: Path = ()) -> Result[str, SchemaError]:
        return _STRING.parse_result(data, path).chain(lambda s: self._check(s, path))

    def _check(self, value: str, path: Path) -> Result[str, SchemaError]:
        if self.required and len(value) == 0:
            return Err(SchemaError(ValueMissing("NonEmptyString", value, path)))
        if self.min_length is not None and len(value) < self.min_length:
            return Err(SchemaError(TooShort(self.min_length, len(value), path)))
        if self.max_length is not None and len(value) > self.max_length:
            return Err(SchemaError(TooLong(self.max_length, len(value), path)))
        return Ok(value)


@dataclass(frozen=True, slots=True)
class StringPatternSchema(Schema[str]):
    """
    Validate a string, then test it against a regular expression.

    The pattern is searched (not anchored); use ^...$ for a full match.

    Usage:
        StringPatternSchema(r"^[a-z]+$")
        StringPatternSchema(re.compile(r"\\d{3}"), min_length=3)
    """

    pattern: str | re.Pattern[str]
    required: bool = False
    min_length: int | None = None
    max_length: int | None = None
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)
    _string: StringSchema = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_regex", re.compile(self.pattern))
        object.__setattr__(
            self,
            "_string",
            StringSchema(
                required=self.required,
                min_length=self.min_length,
                max_length=self.max_length,
            ),
        )

    def parse_result(self, data: Any, path: Path = ()) -> Result[str, SchemaError]:
        return self._string.parse_result(data, path).chain(lambda s: self._test(s, path))

    def _test(self, value: str, path: Path) -> Result[str, SchemaError]:
        if self._regex.search(value) is None:
            return Err(SchemaError(PatternMismatch(_render_pattern(self._regex), value, path)))
        return Ok(value)


_FLAG_LETTERS = (
    (re.ASCII, "a"),
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
    (re.VERBOSE, "x"),
)


def _render_pattern(regex: re.Pattern[str]) -> str:
    """Render a pattern as /source/flags, e.g. /abc/i."""
    flags = "".join(letter for flag, letter in _FLAG_LETTERS if regex.flags & flag)
    return f"/{regex.pattern}/{flags}"


@dataclass(frozen=True, slots=True)
class NumberSchema(Schema[float]):
    """
    Validate a number (int or float, never bool).

    Check order: classification, required (not NaN), integer, finite, min,
    max, step.
    """

    required: bool = False
    integer: bool = False
    finite: bool = False
    min: int | float | None = None
    max: int | float | None = None
    step: int | float | None = None

    def __post_init__(self) -> None:
        NumberOptions(
            required=self.required,
            integer=self.integer,
            finite=self.finite,
            min=self.min,
            max=self.max,
            step=self.step,
        )

    def parse_result(self, data: Any, path: Path = ()) -> Result[float, SchemaError]:
        return _NUMBER.parse_result(data, path).chain(lambda n: self._check(n, path))

    def _check(self, value: int | float, path: Path) -> Result[float, SchemaError]:
        if self.required and isinstance(value, float) and math.isnan(value):
            return Err(SchemaError(ValueMissing("number", value, path)))
        if self.integer and not _is_integral(value):
            return Err(SchemaError(BadInput("integer", value, path)))
        if self.finite and isinstance(value, float) and not math.isfinite(value):
            return Err(SchemaError(BadInput("finite", value, path)))
        if self.min is not None and value < self.min:
            return Err(SchemaError(RangeUnderflow(self.min, value, path)))
        if self.max is not None and value > self.max:
            return Err(SchemaError(RangeOverflow(self.max, value, path)))
        if self.step is not None and not _is_multiple(value, self.step):
            return Err(SchemaError(StepMismatch(self.step, value, path)))
        return Ok(value)


def _is_integral(value: int | float) -> bool:
    return isinstance(value, int) or (math.isfinite(value) and value.is_integer())


def _is_multiple(value: int | float, step: int | float) -> bool:
    # Exact arithmetic: ints may be too large to convert to float.
    if isinstance(value, float) and not math.isfinite(value):
        return False
    return Fraction(value) % Fraction(step) == 0


@dataclass(frozen=True, slots=True)
class BigIntSchema(Schema[int]):
    """
    Validate an arbitrary-precision integer.

    Check order: classification, min, max, step.
    """

    min: int | None = None
    max: int | None = None
    step: int | None = None

    def __post_init__(self) -> None:
        BigIntOptions(min=self.min, max=self.max, step=self.step)

    def parse_result(self, data: Any, path: Path = ()) -> Result[int, SchemaError]:
        return _BIGINT.parse_result(data, path).chain(lambda n: self._check(n, path))

    def _check(self, value: int, path: Path) -> Result[int, SchemaError]:
        if self.min is not None and value < self.min:
            return Err(SchemaError(RangeUnderflow(self.min, value, path)))
        if self.max is not None and value > self.max:
            return Err(SchemaError(RangeOverflow(self.max, value, path)))
        if self.step is not None and value % self.step != 0:
            return Err(SchemaError(StepMismatch(self.step, value, path)))
        return Ok(value)


def BooleanSchema() -> TypeofSchema:
    """Validate a bool."""
    return TypeofSchema("boolean")


def UndefinedSchema() -> TypeofSchema:
    """Validate the UNDEFINED sentinel (an absent value)."""
    return TypeofSchema("undefined")


def NullSchema() -> LiteralSchema[None]:
    """Validate None."""
    return LiteralSchema(None)

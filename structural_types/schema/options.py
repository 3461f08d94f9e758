"""
Construction-time option models for schemas.

Options are checked with Pydantic when a schema is built, so a bad
configuration fails once at definition time rather than on every parse.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, FiniteFloat, NonNegativeInt, model_validator


class _Options(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)


class LengthOptions(_Options):
    """Length/size bounds shared by strings, arrays, maps and sets."""

    required: bool = False
    min_length: Optional[NonNegativeInt] = None
    max_length: Optional[NonNegativeInt] = None

    @model_validator(mode="after")
    def _check_bounds(self) -> LengthOptions:
        if (
            self.min_length is not None
            and self.max_length is not None
            and self.min_length > self.max_length
        ):
            raise ValueError(
                f"min_length ({self.min_length}) exceeds max_length ({self.max_length})"
            )
        return self


class NumberOptions(_Options):
    """Options for NumberSchema."""

    required: bool = False
    integer: bool = False
    finite: bool = False
    min: Optional[Union[int, float]] = None
    max: Optional[Union[int, float]] = None
    step: Optional[Union[int, FiniteFloat]] = None

    @model_validator(mode="after")
    def _check_range(self) -> NumberOptions:
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"min ({self.min}) exceeds max ({self.max})")
        if self.step is not None and self.step == 0:
            raise ValueError("step must be non-zero")
        return self


class BigIntOptions(_Options):
    """Options for BigIntSchema."""

    min: Optional[int] = None
    max: Optional[int] = None
    step: Optional[int] = None

    @model_validator(mode="after")
    def _check_range(self) -> BigIntOptions:
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"min ({self.min}) exceeds max ({self.max})")
        if self.step is not None and self.step == 0:
            raise ValueError("step must be non-zero")
        return self

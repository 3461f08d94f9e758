"""
Result type for structural_types.

Provides a two-variant Result (Ok/Err) with monadic combinators. Every
schema returns one of these; nothing here knows about schemas.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


class UnwrapError(ValueError):
    """Raised when unwrapping the wrong variant of a Result."""


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def values(self) -> Iterator[T]:
        return iter(self)

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Any:
        raise UnwrapError("Cannot unwrap_err an Ok result")

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, fn: Callable[[Any], T]) -> T:
        return self.value

    def expect(self, message: str) -> T:
        return self.value

    def expect_err(self, message: str) -> Any:
        raise UnwrapError(message)

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[Any], Any]) -> Ok[T]:
        return self

    def chain(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Apply fn, which itself returns a Result, to the held value."""
        return fn(self.value)

    def chain_err(self, fn: Callable[[Any], Any]) -> Ok[T]:
        return self

    flat_map = chain
    flat_map_err = chain_err

    def flatten(self) -> Result[Any, Any]:
        """
        Collapse one level of nesting.

        Only this package's own Ok/Err count as nested results, so a plain
        value that merely looks like a result is left alone.
        """
        if isinstance(self.value, (Ok, Err)):
            return self.value
        return self

    def flatten_err(self) -> Ok[T]:
        return self

    def includes(self, value: Any) -> bool:
        return self.value == value

    def includes_err(self, error: Any) -> bool:
        return False

    def find(self, predicate: Callable[[T], bool]) -> T | None:
        return self.value if predicate(self.value) else None

    def find_err(self, predicate: Callable[[Any], bool]) -> None:
        return None


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    error: E

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def values(self) -> Iterator[Any]:
        return iter(self)

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        raise UnwrapError("Cannot unwrap an Err result")

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, fn: Callable[[E], T]) -> T:
        return fn(self.error)

    def expect(self, message: str) -> Any:
        raise UnwrapError(message)

    def expect_err(self, message: str) -> E:
        return self.error

    def map(self, fn: Callable[[Any], Any]) -> Err[E]:
        return self

    def map_err(self, fn: Callable[[E], F]) -> Err[F]:
        return Err(fn(self.error))

    def chain(self, fn: Callable[[Any], Any]) -> Err[E]:
        return self

    def chain_err(self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Apply fn, which itself returns a Result, to the held error."""
        return fn(self.error)

    flat_map = chain
    flat_map_err = chain_err

    def flatten(self) -> Err[E]:
        return self

    def flatten_err(self) -> Result[Any, Any]:
        if isinstance(self.error, (Ok, Err)):
            return self.error
        return self

    def includes(self, value: Any) -> bool:
        return False

    def includes_err(self, error: Any) -> bool:
        return self.error == error

    def find(self, predicate: Callable[[Any], bool]) -> None:
        return None

    def find_err(self, predicate: Callable[[E], bool]) -> E | None:
        return self.error if predicate(self.error) else None


Result = Union[Ok[T], Err[E]]

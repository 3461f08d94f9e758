"""
Modifier schemas: wrap one inner schema to add behavior.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from ..result import Err, Ok, Result
from .core import Schema
from .errors import SchemaError
from .types import Custom, Path, TypeMismatch

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class RefinementSchema(Schema[T]):
    """
    Narrow an inner schema's output with a predicate.

    Usage:
        RefinementSchema(NumberSchema(), lambda n: n > 0, "Positive")
    """

    schema: Schema[Any]
    predicate: Callable[[Any], bool]
    label: str

    def parse_result(self, data: Any, path: Path = ()) -> Result[T, SchemaError]:
        return self.schema.parse_result(data, path).chain(lambda ok: self._refine(ok, path))

    def _refine(self, value: Any, path: Path) -> Result[T, SchemaError]:
        if not self.predicate(value):
            return Err(SchemaError(TypeMismatch([self.label], value, path)))
        return Ok(value)


@dataclass(frozen=True, slots=True)
class TransformSchema(Schema[U]):
    """
    Validate with an inner schema, then map the value into a new Result.

    The function receives (value, path) and its Result is returned as-is.

    Usage:
        def to_int(s, path):
            return Ok(int(s)) if s.isdigit() else Err(SchemaError(BadInput("digits", s, path)))

        TransformSchema(StringSchema(), to_int)
    """

    schema: Schema[Any]
    fn: Callable[[Any, Path], Result[U, SchemaError]]

    def parse_result(self, data: Any, path: Path = ()) -> Result[U, SchemaError]:
        return self.schema.parse_result(data, path).chain(lambda ok: self.fn(ok, path))


@dataclass(frozen=True, slots=True)
class LazySchema(Schema[T]):
    """
    Defer building a schema until parse time.

    The factory runs on every call, which lets a schema refer to itself:

        node = ObjectSchema({
            "value": NumberSchema(),
            "children": ArraySchema(LazySchema(lambda: node)),
        })
    """

    factory: Callable[[], Schema[T]]

    def parse_result(self, data: Any, path: Path = ()) -> Result[T, SchemaError]:
        return self.factory().parse_result(data, path)


@dataclass(frozen=True, slots=True)
class CustomErrorSchema(Schema[T]):
    """Replace any failure of the inner schema with a custom message."""

    schema: Schema[T]
    message: str | Callable[[SchemaError], str]

    def parse_result(self, data: Any, path: Path = ()) -> Result[T, SchemaError]:
        return self.schema.parse_result(data, path).map_err(
            lambda err: SchemaError(Custom(self._render(err), path))
        )

    def _render(self, error: SchemaError) -> str:
        if callable(self.message):
            return self.message(error)
        return self.message


@dataclass(frozen=True, slots=True)
class InstanceOfSchema(Schema[T]):
    """
    Validate that value is an instance of a class.

    Works with abstract base classes, e.g. InstanceOfSchema(Mapping).
    """

    cls: type[T]

    def parse_result(self, data: Any, path: Path = ()) -> Result[T, SchemaError]:
        if not isinstance(data, self.cls):
            return Err(SchemaError(TypeMismatch([self.cls.__name__], data, path)))
        return Ok(data)


_AWAITABLE: InstanceOfSchema[Awaitable[Any]] = InstanceOfSchema(Awaitable)


@dataclass(frozen=True, slots=True)
class AwaitableSchema(Schema[Awaitable[T]]):
    """
    Validate an awaitable and, lazily, the value it produces.

    Only the awaitable itself is checked synchronously. The Ok value is a
    new coroutine that awaits the original and runs the inner schema's
    parse() on the result, so a bad resolved value surfaces as a raised
    SchemaError when awaited rather than as an Err.
    """

    schema: Schema[T]

    def parse_result(self, data: Any, path: Path = ()) -> Result[Awaitable[T], SchemaError]:
        return _AWAITABLE.parse_result(data, path).map(self._resolve)

    async def _resolve(self, awaitable: Awaitable[Any]) -> T:
        return self.schema.parse(await awaitable)

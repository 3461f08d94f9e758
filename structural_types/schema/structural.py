"""
Structural schemas built from other schemas.

Every container validates its children in a fixed order, extends the path
by one segment per level, and stops at the first failure.
"""

from __future__ import annotations

from collections.abc import Mapping
from collections.abc import Set as AbstractSet
from dataclasses import dataclass
from typing import Any, TypeVar

from ..result import Err, Ok, Result
from .core import Schema
from .errors import SchemaError
from .modifiers import InstanceOfSchema
from .options import LengthOptions
from .primitives import NullSchema, TypeofSchema, UndefinedSchema
from .types import UNDEFINED, Custom, Path, TooLong, TooShort, TypeMismatch

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

_OBJECT = TypeofSchema("object")
_MAPPING: InstanceOfSchema[Mapping[Any, Any]] = InstanceOfSchema(Mapping)
_SET: InstanceOfSchema[AbstractSet[Any]] = InstanceOfSchema(AbstractSet)


def _type_mismatch(expected: str, data: Any, path: Path) -> Err[SchemaError]:
    return Err(SchemaError(TypeMismatch([expected], data, path)))


def _check_size(
    size: int, min_length: int | None, max_length: int | None, path: Path
) -> Err[SchemaError] | None:
    if min_length is not None and size < min_length:
        return Err(SchemaError(TooShort(min_length, size, path)))
    if max_length is not None and size > max_length:
        return Err(SchemaError(TooLong(max_length, size, path)))
    return None


def _read_field(data: Any, key: str) -> Any:
    if isinstance(data, Mapping):
        return data.get(key, UNDEFINED)
    return getattr(data, key, UNDEFINED)


@dataclass(frozen=True, slots=True)
class ObjectSchema(Schema[T]):
    """
    Validate an object with fixed named fields.

    Mappings are read by key, other objects by attribute. Missing fields
    read as UNDEFINED. The input itself is returned, undeclared fields
    included.

    Usage:
        ObjectSchema({"name": StringSchema(), "age": NumberSchema().optional()})
    """

    fields: Mapping[str, Schema[Any]]

    def parse_result(self, data: Any, path: Path = ()) -> Result[T, SchemaError]:
        checked = _OBJECT.parse_result(data, path)
        if checked.is_err():
            return checked

        for key, schema in self.fields.items():
            result = schema.parse_result(_read_field(data, key), (*path, key))
            if result.is_err():
                return result

        return Ok(data)


@dataclass(frozen=True, slots=True)
class ArraySchema(Schema[list[T]]):
    """Validate a homogeneous list (or tuple) of any length."""

    schema: Schema[T]
    min_length: int | None = None
    max_length: int | None = None

    def __post_init__(self) -> None:
        LengthOptions(min_length=self.min_length, max_length=self.max_length)

    def parse_result(self, data: Any, path: Path = ()) -> Result[list[T], SchemaError]:
        if not isinstance(data, (list, tuple)):
            return _type_mismatch("array", data, path)

        size_error = _check_size(len(data), self.min_length, self.max_length, path)
        if size_error is not None:
            return size_error

        for i, item in enumerate(data):
            result = self.schema.parse_result(item, (*path, i))
            if result.is_err():
                return result

        return Ok(data)


@dataclass(frozen=True, slots=True)
class TupleSchema(Schema[tuple]):
    """
    Validate a fixed-arity list (or tuple), position by position.

    Arity is checked before any element: too few items is tooShort, too
    many is tooLong.
    """

    schemas: tuple[Schema[Any], ...]

    def parse_result(self, data: Any, path: Path = ()) -> Result[tuple, SchemaError]:
        if not isinstance(data, (list, tuple)):
            return _type_mismatch("array", data, path)

        arity = len(self.schemas)
        if len(data) < arity:
            return Err(SchemaError(TooShort(arity, len(data), path)))
        if len(data) > arity:
            return Err(SchemaError(TooLong(arity, len(data), path)))

        for i, (schema, item) in enumerate(zip(self.schemas, data)):
            result = schema.parse_result(item, (*path, i))
            if result.is_err():
                return result

        return Ok(data)


@dataclass(frozen=True, slots=True)
class RecordSchema(Schema[dict[K, V]]):
    """
    Validate a homogeneous mapping: every key and every value.

    For each entry the key is checked before the value; both are reported
    at path + (key,).
    """

    key_schema: Schema[K]
    value_schema: Schema[V]

    def parse_result(self, data: Any, path: Path = ()) -> Result[dict[K, V], SchemaError]:
        if not isinstance(data, Mapping):
            return _type_mismatch("object", data, path)
        return _check_entries(data, self.key_schema, self.value_schema, path)


def _check_entries(
    data: Mapping[Any, Any], key_schema: Schema[Any], value_schema: Schema[Any], path: Path
) -> Result[Any, SchemaError]:
    for key, value in data.items():
        entry_path = (*path, key)
        key_result = key_schema.parse_result(key, entry_path)
        if key_result.is_err():
            return key_result
        value_result = value_schema.parse_result(value, entry_path)
        if value_result.is_err():
            return value_result
    return Ok(data)


@dataclass(frozen=True, slots=True)
class MapSchema(Schema[Mapping[K, V]]):
    """Validate a Mapping instance with optional size bounds."""

    key_schema: Schema[K]
    value_schema: Schema[V]
    min_length: int | None = None
    max_length: int | None = None

    def __post_init__(self) -> None:
        LengthOptions(min_length=self.min_length, max_length=self.max_length)

    def parse_result(self, data: Any, path: Path = ()) -> Result[Mapping[K, V], SchemaError]:
        return _MAPPING.parse_result(data, path).chain(lambda ok: self._check(ok, path))

    def _check(self, data: Mapping[Any, Any], path: Path) -> Result[Mapping[K, V], SchemaError]:
        size_error = _check_size(len(data), self.min_length, self.max_length, path)
        if size_error is not None:
            return size_error
        return _check_entries(data, self.key_schema, self.value_schema, path)


@dataclass(frozen=True, slots=True)
class SetSchema(Schema[AbstractSet[T]]):
    """Validate a set/frozenset with optional size bounds; items are located by value."""

    schema: Schema[T]
    min_length: int | None = None
    max_length: int | None = None

    def __post_init__(self) -> None:
        LengthOptions(min_length=self.min_length, max_length=self.max_length)

    def parse_result(self, data: Any, path: Path = ()) -> Result[AbstractSet[T], SchemaError]:
        return _SET.parse_result(data, path).chain(lambda ok: self._check(ok, path))

    def _check(self, data: AbstractSet[Any], path: Path) -> Result[AbstractSet[T], SchemaError]:
        size_error = _check_size(len(data), self.min_length, self.max_length, path)
        if size_error is not None:
            return size_error

        for item in data:
            result = self.schema.parse_result(item, (*path, item))
            if result.is_err():
                return result

        return Ok(data)


@dataclass(frozen=True, slots=True)
class UnionSchema(Schema[Any]):
    """
    Accept the first alternative that validates.

    When every alternative fails, the error is a typeMismatch whose
    expected list gathers (in order, without duplicates) what each
    non-custom alternative expected.
    """

    schemas: tuple[Schema[Any], ...]

    def parse_result(self, data: Any, path: Path = ()) -> Result[Any, SchemaError]:
        expected: list[Any] = []

        for schema in self.schemas:
            result = schema.parse_result(data, path)
            if result.is_ok():
                return result

            context = result.unwrap_err().context
            if isinstance(context, Custom):
                continue
            tokens = context.expected if isinstance(context, TypeMismatch) else [context.expected]
            for token in tokens:
                if not _has_token(expected, token):
                    expected.append(token)

        return Err(SchemaError(TypeMismatch(expected, data, path)))


@dataclass(frozen=True, slots=True)
class IntersectionSchema(Schema[Any]):
    """
    Require every member to accept the same value.

    The first failure is returned untouched; on success the original input
    is returned (nothing is merged or copied).
    """

    schemas: tuple[Schema[Any], ...]

    def parse_result(self, data: Any, path: Path = ()) -> Result[Any, SchemaError]:
        for schema in self.schemas:
            result = schema.parse_result(data, path)
            if result.is_err():
                return result

        return Ok(data)


def _has_token(expected: list[Any], token: Any) -> bool:
    # 1, True and 1.0 are distinct tokens, as LiteralSchema treats them.
    return any(
        seen is token or (type(seen) is type(token) and seen == token) for seen in expected
    )


def OptionalSchema(schema: Schema[T]) -> UnionSchema:
    """
    Allow UNDEFINED (e.g. a missing object field), validate if present.

    Usage:
        ObjectSchema({"email": OptionalSchema(StringSchema())})
    """
    return UnionSchema((schema, UndefinedSchema()))


def NullableSchema(schema: Schema[T]) -> UnionSchema:
    """Allow None, validate otherwise."""
    return UnionSchema((schema, NullSchema()))

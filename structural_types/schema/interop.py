"""
Type derivation and Pydantic interop for structural_types schemas.

Provides schema_type() and to_pydantic() functions.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from collections.abc import Set as AbstractSet
from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import ConfigDict, create_model

from .core import Schema
from .modifiers import (
    AwaitableSchema,
    CustomErrorSchema,
    InstanceOfSchema,
    LazySchema,
    RefinementSchema,
    TransformSchema,
)
from .primitives import (
    BigIntSchema,
    LiteralSchema,
    NumberSchema,
    StringPatternSchema,
    StringSchema,
    TypeofSchema,
)
from .structural import (
    ArraySchema,
    IntersectionSchema,
    MapSchema,
    ObjectSchema,
    RecordSchema,
    SetSchema,
    TupleSchema,
    UnionSchema,
)
from .types import Undefined

logger = logging.getLogger(__name__)

_CLASSIFICATION_TYPES: dict[str, Any] = {
    "string": str,
    "number": Union[int, float],
    "bigint": int,
    "boolean": bool,
    "undefined": Undefined,
    "function": Callable[..., Any],
    "object": object,
    "symbol": Enum,
}


def schema_type(schema: Schema[Any]) -> Any:
    """
    Derive the Python type a schema validates to.

    Usage:
        schema_type(ArraySchema(StringSchema()))       # list[str]
        schema_type(StringSchema() | NullSchema())     # Optional[str]

    Transform and lazy schemas cannot be inspected without running them,
    so they derive to Any. An intersection derives to its first member.
    """
    match schema:
        case StringSchema() | StringPatternSchema():
            return str
        case NumberSchema():
            return Union[int, float]
        case BigIntSchema():
            return int
        case TypeofSchema(classification=c):
            return _CLASSIFICATION_TYPES[c]
        case LiteralSchema(literal=None):
            return type(None)
        case LiteralSchema(literal=lit):
            return Literal[lit]
        case ObjectSchema():
            return dict[str, Any]
        case ArraySchema(schema=items):
            return list[schema_type(items)]  # type: ignore[misc]
        case TupleSchema(schemas=members):
            if not members:
                return tuple[()]
            return tuple[tuple(schema_type(m) for m in members)]  # type: ignore[misc]
        case RecordSchema(key_schema=k, value_schema=v):
            return dict[schema_type(k), schema_type(v)]  # type: ignore[misc]
        case MapSchema(key_schema=k, value_schema=v):
            return Mapping[schema_type(k), schema_type(v)]  # type: ignore[misc]
        case SetSchema(schema=items):
            return AbstractSet[schema_type(items)]  # type: ignore[misc]
        case UnionSchema(schemas=members):
            return Union[tuple(schema_type(m) for m in members)]
        case IntersectionSchema(schemas=members) if members:
            return schema_type(members[0])
        case RefinementSchema(schema=inner) | CustomErrorSchema(schema=inner):
            return schema_type(inner)
        case AwaitableSchema(schema=inner):
            return Awaitable[schema_type(inner)]  # type: ignore[misc]
        case InstanceOfSchema(cls=cls):
            return cls
        case TransformSchema() | LazySchema():
            return Any

    return Any


def to_pydantic(name: str, schema: ObjectSchema[Any]) -> type:
    """
    Compile an object schema to a Pydantic model.

    Args:
        name: Name of the generated model class
        schema: ObjectSchema whose fields become model fields

    Returns:
        A Pydantic BaseModel subclass

    Usage:
        User = to_pydantic("User", ObjectSchema({
            "name": StringSchema(),
            "email": StringSchema().optional(),
        }))
        user = User(name="Alice")
    """
    if not isinstance(schema, ObjectSchema):
        raise TypeError("Schema must be an ObjectSchema")

    fields: dict[str, Any] = {}

    for key, field_schema in schema.fields.items():
        fields[key] = _extract_pydantic_field(f"{name}_{key}", field_schema)

    logger.debug("Compiled schema to pydantic model %s with fields %s", name, list(fields))
    return create_model(
        name,
        __config__=ConfigDict(arbitrary_types_allowed=True),
        **fields,
    )


def _extract_pydantic_field(name: str, schema: Schema[Any]) -> tuple[Any, Any]:
    """Extract Pydantic field type and default from a schema."""
    match schema:
        case ObjectSchema():
            return (to_pydantic(name, schema), ...)
        case UnionSchema(schemas=members) if any(_accepts_absent(m) for m in members):
            present = [m for m in members if not _accepts_absent(m)]
            if not present:
                return (Optional[Any], None)
            inner = Union[tuple(schema_type(m) for m in present)]
            return (Optional[inner], None)

    return (schema_type(schema), ...)


def _accepts_absent(schema: Schema[Any]) -> bool:
    match schema:
        case TypeofSchema(classification="undefined") | LiteralSchema(literal=None):
            return True
    return False

"""
Shorthand coercion into schemas.
"""

from __future__ import annotations

from typing import Any

from .core import Schema
from .modifiers import InstanceOfSchema
from .primitives import BooleanSchema, NullSchema, NumberSchema, StringSchema
from .structural import ArraySchema, ObjectSchema, TupleSchema

_TYPE_SHORTHANDS: dict[type, Any] = {
    str: StringSchema,
    float: NumberSchema,
    int: lambda: NumberSchema(integer=True),
    bool: BooleanSchema,
}


def to_schema(v: Any) -> Schema[Any]:
    """
    Coerce a shorthand value to a schema.

    Conversion rules:
        Schema -> pass through
        str / float / int / bool -> primitive schema (int means integer number)
        None -> NullSchema
        other type -> InstanceOfSchema
        dict -> ObjectSchema with recursive conversion
        list -> ArraySchema with item schema from list[0]
        tuple -> TupleSchema with positional conversion
    """
    if isinstance(v, Schema):
        return v

    if v is None:
        return NullSchema()

    if isinstance(v, type):
        factory = _TYPE_SHORTHANDS.get(v)
        if factory is not None:
            return factory()
        return InstanceOfSchema(v)

    if isinstance(v, dict):
        return ObjectSchema({k: to_schema(val) for k, val in v.items()})

    if isinstance(v, list):
        if len(v) != 1:
            raise ValueError("List shorthand needs exactly one item schema, e.g. [str]")
        return ArraySchema(to_schema(v[0]))

    if isinstance(v, tuple):
        return TupleSchema(tuple(to_schema(item) for item in v))

    raise TypeError(f"Cannot convert {type(v).__name__} to schema")

"""
Structural Types Schema - composable validators whose shape is the type.

Usage:
    from structural_types.schema import ObjectSchema, StringSchema, NumberSchema

    person = ObjectSchema({
        "name": StringSchema(min_length=3),
        "age": NumberSchema(integer=True, min=0).optional(),
    })

    person.parse({"name": "Ann"})           # returns the input unchanged
    person.parse_result({"name": "Al"})     # Err(SchemaError(...))
"""

from .coerce import to_schema
from .core import Schema
from .errors import SchemaError, format_message
from .interop import schema_type, to_pydantic
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
    BooleanSchema,
    LiteralSchema,
    NullSchema,
    NumberSchema,
    StringPatternSchema,
    StringSchema,
    TypeofSchema,
    UndefinedSchema,
)
from .structural import (
    ArraySchema,
    IntersectionSchema,
    MapSchema,
    NullableSchema,
    ObjectSchema,
    OptionalSchema,
    RecordSchema,
    SetSchema,
    TupleSchema,
    UnionSchema,
)
from .types import (
    UNDEFINED,
    BadInput,
    Custom,
    Path,
    PatternMismatch,
    RangeOverflow,
    RangeUnderflow,
    SchemaErrorContext,
    StepMismatch,
    TooLong,
    TooShort,
    TypeMismatch,
    Undefined,
    ValueMissing,
)

__all__ = [
    # Contract
    "Schema",
    "SchemaError",
    "format_message",
    # Primitives
    "TypeofSchema",
    "LiteralSchema",
    "StringSchema",
    "StringPatternSchema",
    "NumberSchema",
    "BigIntSchema",
    "BooleanSchema",
    "UndefinedSchema",
    "NullSchema",
    # Structural
    "ObjectSchema",
    "ArraySchema",
    "TupleSchema",
    "RecordSchema",
    "MapSchema",
    "SetSchema",
    "UnionSchema",
    "IntersectionSchema",
    "OptionalSchema",
    "NullableSchema",
    # Modifiers
    "RefinementSchema",
    "TransformSchema",
    "LazySchema",
    "CustomErrorSchema",
    "InstanceOfSchema",
    "AwaitableSchema",
    # Error contexts
    "SchemaErrorContext",
    "RangeOverflow",
    "RangeUnderflow",
    "StepMismatch",
    "ValueMissing",
    "TooShort",
    "TooLong",
    "TypeMismatch",
    "BadInput",
    "PatternMismatch",
    "Custom",
    # Sentinels and aliases
    "UNDEFINED",
    "Undefined",
    "Path",
    # Helpers
    "to_schema",
    "schema_type",
    "to_pydantic",
]

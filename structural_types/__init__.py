from .context import schema_context
from .result import Err, Ok, Result, UnwrapError
from .schema import (
    UNDEFINED,
    ArraySchema,
    AwaitableSchema,
    BigIntSchema,
    BooleanSchema,
    CustomErrorSchema,
    InstanceOfSchema,
    IntersectionSchema,
    LazySchema,
    LiteralSchema,
    MapSchema,
    NullableSchema,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    OptionalSchema,
    RecordSchema,
    RefinementSchema,
    Schema,
    SchemaError,
    SetSchema,
    StringPatternSchema,
    StringSchema,
    TransformSchema,
    TupleSchema,
    TypeofSchema,
    UndefinedSchema,
    UnionSchema,
    schema_type,
    to_pydantic,
    to_schema,
)

__all__ = [
    "Ok",
    "Err",
    "Result",
    "UnwrapError",
    "schema_context",
    "Schema",
    "SchemaError",
    "UNDEFINED",
    "TypeofSchema",
    "LiteralSchema",
    "StringSchema",
    "StringPatternSchema",
    "NumberSchema",
    "BigIntSchema",
    "BooleanSchema",
    "UndefinedSchema",
    "NullSchema",
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
    "RefinementSchema",
    "TransformSchema",
    "LazySchema",
    "CustomErrorSchema",
    "InstanceOfSchema",
    "AwaitableSchema",
    "to_schema",
    "schema_type",
    "to_pydantic",
]

"""
Core schema contract for structural_types.

Every schema implements parse_result(); parse() is a thin throwing wrapper
over it for the outermost call site.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from ..result import Result
from .errors import SchemaError
from .types import Path

if TYPE_CHECKING:
    from .modifiers import CustomErrorSchema, RefinementSchema, TransformSchema
    from .structural import IntersectionSchema, UnionSchema

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


class Schema(ABC, Generic[T]):
    """
    Immutable validator node.

    Schemas hold no per-call state: build a tree once and reuse it for any
    number of inputs, from any number of threads.
    """

    __slots__ = ()

    @abstractmethod
    def parse_result(self, data: Any, path: Path = ()) -> Result[T, SchemaError]:
        """
        Validate data located at path.

        Returns:
            Ok(value) if validation passes
            Err(SchemaError) located at path (plus any child segments)
        """

    def __call__(self, data: Any, path: Path = ()) -> Result[T, SchemaError]:
        return self.parse_result(data, path)

    def parse(self, data: Any) -> T:
        """
        Validate data and return the value.

        Raises:
            SchemaError: the first failure found
        """
        result = self.parse_result(data)
        if result.is_err():
            error = result.unwrap_err()
            logger.debug("Rejected input at %r: %s", error.path, error)
            raise error
        return result.unwrap()

    def __or__(self, other: Any) -> UnionSchema:
        """
        Alternation: first schema that accepts wins.

        Usage:
            StringSchema() | NumberSchema()
        """
        from .coerce import to_schema
        from .structural import UnionSchema

        return UnionSchema((*_members(self, UnionSchema), *_members(to_schema(other), UnionSchema)))

    def __ror__(self, other: Any) -> UnionSchema:
        """Support `str | NumberSchema()` where the shorthand comes first."""
        from .coerce import to_schema

        return to_schema(other) | self

    def __and__(self, other: Any) -> IntersectionSchema:
        """
        Conjunction: every schema must accept the same value.

        Usage:
            ObjectSchema({"a": str}) & ObjectSchema({"b": int})
        """
        from .coerce import to_schema
        from .structural import IntersectionSchema

        return IntersectionSchema(
            (*_members(self, IntersectionSchema), *_members(to_schema(other), IntersectionSchema))
        )

    def __rand__(self, other: Any) -> IntersectionSchema:
        from .coerce import to_schema

        return to_schema(other) & self

    def optional(self) -> UnionSchema:
        """Also accept UNDEFINED (e.g. a missing object field)."""
        from .structural import OptionalSchema

        return OptionalSchema(self)

    def nullable(self) -> UnionSchema:
        """Also accept None."""
        from .structural import NullableSchema

        return NullableSchema(self)

    def refine(self, predicate: Callable[[T], bool], label: str) -> RefinementSchema:
        from .modifiers import RefinementSchema

        return RefinementSchema(self, predicate, label)

    def transform(self, fn: Callable[[T, Path], Result[U, SchemaError]]) -> TransformSchema:
        from .modifiers import TransformSchema

        return TransformSchema(self, fn)

    def with_message(self, message: str | Callable[[SchemaError], str]) -> CustomErrorSchema:
        """Return a schema that reports failures with a custom message."""
        from .modifiers import CustomErrorSchema

        return CustomErrorSchema(self, message)


def _members(schema: Schema, kind: type) -> tuple[Schema, ...]:
    """Splice nested unions/intersections of the same kind."""
    if type(schema) is kind:
        return tuple(schema.schemas)
    return (schema,)

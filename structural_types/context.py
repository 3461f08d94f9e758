"""
Context manager for validation configuration (e.g., path separator).
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Context variable for the separator used when rendering paths in messages
_path_separator: ContextVar[str] = ContextVar("path_separator", default=".")


def get_path_separator() -> str:
    """Return the separator currently used to join error paths."""
    return _path_separator.get()


@contextmanager
def schema_context(*, path_separator: str = "."):
    """
    Context manager for validation configuration.

    Args:
        path_separator: String placed between path segments in default
                        error messages. Does not change SchemaError.path.

    Example:
        from structural_types import ObjectSchema, NumberSchema, schema_context

        schema = ObjectSchema({"person": ObjectSchema({"age": NumberSchema()})})

        schema.parse({"person": {"age": "x"}})
        # SchemaError: person.age must be number but got x

        with schema_context(path_separator="/"):
            schema.parse({"person": {"age": "x"}})
        # SchemaError: person/age must be number but got x
    """
    token = _path_separator.set(path_separator)
    try:
        yield
    finally:
        _path_separator.reset(token)

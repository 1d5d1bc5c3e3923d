"""Exceptions raised while building and validating GraphQL documents.

All of them are deterministic input problems: they are raised before any
text is produced and never during token production.
"""

from typing import Any

from .names import NameKind


def format_path(path: tuple[str, ...]) -> str:
    """Render a node path like ``user.friends.name``."""
    return ".".join(path) if path else "<root>"


class QueryBuildError(Exception):
    """Base class for query builder errors."""


class ArgumentTypeNotSupportedError(QueryBuildError, TypeError):
    """The value handed to ``argument_any`` has no matching argument type."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"Argument value {value!r} of type {type(value).__name__} is not supported"
        )


class InvalidOperationTypeError(QueryBuildError):
    """The operation type is not one of query, mutation or subscription."""

    def __init__(self, operation_type: Any):
        self.operation_type = operation_type
        super().__init__(
            f"{operation_type!r} is an invalid operation type in GraphQL. "
            "A valid type is one of 'query', 'mutation', 'subscription'"
        )


class InvalidNameError(QueryBuildError):
    """A name does not match /[_A-Za-z][_0-9A-Za-z]*/."""

    def __init__(self, kind: NameKind, name: Any, path: tuple[str, ...] = ()):
        self.kind = kind
        self.name = name
        self.path = path
        super().__init__(
            f"{name!r} is an invalid {kind.value} in GraphQL at {format_path(path)}. "
            "A valid name matches /[_A-Za-z][_0-9A-Za-z]*/"
        )


class MissingFieldError(QueryBuildError):
    """A field slot holds None instead of a Field."""

    def __init__(self, path: tuple[str, ...] = ()):
        self.path = path
        super().__init__(f"Missing field under {format_path(path)}: None is not a Field")


class CyclicFieldError(QueryBuildError):
    """A field contains itself somewhere among its subfields."""

    def __init__(self, field_name: str, path: tuple[str, ...] = ()):
        self.field_name = field_name
        self.path = path
        super().__init__(
            f"Field {field_name!r} at {format_path(path)} is its own ancestor"
        )

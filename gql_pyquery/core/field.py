"""Fields: the recursive selection tree of a GraphQL operation."""

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

from .argument import Argument
from .errors import CyclicFieldError, InvalidNameError, MissingFieldError
from .names import NameKind, is_valid_enum_value, is_valid_name
from .tokens import join_tokens
from .values import iter_enum_values, iter_nested_arguments

logger = logging.getLogger(__name__)


def _reject(kind: NameKind, name, path: tuple[str, ...]) -> InvalidNameError:
    logger.debug("Rejected %s %r at %s", kind.value, name, ".".join(path))
    return InvalidNameError(kind, name, path)


def validate_argument(argument: Argument, path: tuple[str, ...] = ()):
    """Check an argument's name, its enum values and any nested arguments."""
    arg_path = path + (str(argument.name),)
    if not is_valid_name(argument.name):
        raise _reject(NameKind.ARGUMENT, argument.name, arg_path)
    for enum_value in iter_enum_values(argument.value):
        if not is_valid_enum_value(enum_value):
            raise _reject(NameKind.ENUM_VALUE, enum_value, arg_path)
    for nested in iter_nested_arguments(argument.value):
        validate_argument(nested, arg_path)


@dataclass(eq=False)
class Field:
    """A GraphQL field selection.

    Fields are built freely and validated once, right before rendering.
    Every mutator returns the field itself so calls can be chained:

        make_field("user").add_arguments(argument_int("id", 1)).add_fields(
            *make_fields("id", "name")
        )
    """
    name: str
    alias: Optional[str] = None
    arguments: list[Argument] = field(default_factory=list)
    fields: list[Optional["Field"]] = field(default_factory=list)

    def set_alias(self, alias: str) -> "Field":
        self.alias = alias
        return self

    def set_arguments(self, *arguments: Argument) -> "Field":
        """Replace all arguments."""
        self.arguments = list(arguments)
        return self

    def add_arguments(self, *arguments: Argument) -> "Field":
        self.arguments.extend(arguments)
        return self

    def set_fields(self, *fields: Optional["Field"]) -> "Field":
        """Replace all subfields."""
        self.fields = list(fields)
        return self

    def add_fields(self, *fields: Optional["Field"]) -> "Field":
        self.fields.extend(fields)
        return self

    def validate(self, path: tuple[str, ...] = (), _ancestors: frozenset[int] = frozenset()):
        """Validate this field and its whole subtree.

        Stops at the first problem found.

        Raises:
            InvalidNameError: A field name, alias, argument name or enum value is invalid
            MissingFieldError: A subfield is None
            CyclicFieldError: A field appears among its own subfields
        """
        path = path + (self.alias or str(self.name),)
        if not is_valid_name(self.name):
            raise _reject(NameKind.FIELD, self.name, path)
        if self.alias and not is_valid_name(self.alias):
            raise _reject(NameKind.ALIAS, self.alias, path)

        for argument in self.arguments:
            validate_argument(argument, path)

        ancestors = _ancestors | {id(self)}
        for subfield in self.fields:
            if subfield is None:
                raise MissingFieldError(path)
            if id(subfield) in ancestors:
                raise CyclicFieldError(subfield.name, path)
            subfield.validate(path, ancestors)

    def tokens(self) -> Iterator[str]:
        if self.alias:
            yield self.alias
            yield ":"
        yield self.name
        if self.arguments:
            yield "("
            yield from join_tokens(self.arguments)
            yield ")"
        if self.fields:
            yield "{"
            yield from join_tokens(self.fields)
            yield "}"


def make_field(name: str) -> Field:
    """Create a field with no arguments or subfields."""
    return Field(name=name)


def make_fields(*names: str) -> list[Field]:
    """Create one leaf field per name."""
    return [Field(name=name) for name in names]

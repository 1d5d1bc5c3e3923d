"""Arguments: name/value pairs attached to fields or nested input objects.

Example usage:
    from gql_pyquery.core.argument import argument_custom_type, argument_int

    arg = argument_custom_type("filter", argument_int("first", 10))
    # renders as filter:{first:10}
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterator

from .errors import ArgumentTypeNotSupportedError
from .values import (
    ArgumentValue,
    BlockStringValue,
    BoolListValue,
    BoolValue,
    EnumListValue,
    EnumValue,
    IntListValue,
    IntValue,
    ObjectListValue,
    ObjectValue,
    QuotedStringValue,
    StringListValue,
    StringValue,
    TimeValue,
    VALUE_TYPES,
    iter_value_tokens,
)


@dataclass(frozen=True)
class Argument:
    """A single ``name:value`` argument."""
    name: str
    value: ArgumentValue

    def __post_init__(self):
        if not isinstance(self.value, VALUE_TYPES):
            raise TypeError(
                f"Argument {self.name!r} expects an argument value, got {type(self.value).__name__}"
            )

    def tokens(self) -> Iterator[str]:
        yield self.name
        yield ":"
        yield from iter_value_tokens(self.value)


def argument_bool(name: str, value: bool) -> Argument:
    return Argument(name, BoolValue(value))


def argument_int(name: str, value: int) -> Argument:
    return Argument(name, IntValue(value))


def argument_string(name: str, value: str) -> Argument:
    return Argument(name, StringValue(value))


def argument_quoted_string(name: str, value: str) -> Argument:
    return Argument(name, QuotedStringValue(value))


def argument_block_string(name: str, value: str) -> Argument:
    return Argument(name, BlockStringValue(value))


def argument_enum(name: str, value: str) -> Argument:
    return Argument(name, EnumValue(value))


def argument_time(name: str, value: datetime) -> Argument:
    return Argument(name, TimeValue(value))


def argument_bool_list(name: str, *values: bool) -> Argument:
    return Argument(name, BoolListValue(values))


def argument_int_list(name: str, *values: int) -> Argument:
    return Argument(name, IntListValue(values))


def argument_string_list(name: str, *values: str) -> Argument:
    return Argument(name, StringListValue(values))


def argument_enum_list(name: str, *values: str) -> Argument:
    return Argument(name, EnumListValue(values))


def argument_custom_type(name: str, *arguments: Argument) -> Argument:
    """Build an input-object argument, which may nest further objects."""
    return Argument(name, ObjectValue(arguments))


def argument_object_list(name: str, *objects: Iterable[Argument]) -> Argument:
    """Build a list of input objects, one iterable of arguments per object."""
    return Argument(name, ObjectListValue(tuple(tuple(o) for o in objects)))


def _all_of(values: tuple, kind: type) -> bool:
    if kind is int:
        return all(isinstance(v, int) and not isinstance(v, bool) for v in values)
    return all(isinstance(v, kind) for v in values)


def argument_any(name: str, value: Any) -> Argument:
    """Build an argument by dispatching on the runtime type of ``value``.

    Supports bool, int, str, datetime and homogeneous lists or tuples of
    bool, int or str. An empty list renders as ``[]`` and becomes a string
    list. Anything else raises ArgumentTypeNotSupportedError.

    Args:
        name: The argument name
        value: A supported Python value

    Returns:
        The matching Argument
    """
    if isinstance(value, bool):
        return argument_bool(name, value)
    if isinstance(value, int):
        return argument_int(name, value)
    if isinstance(value, str):
        return argument_string(name, value)
    if isinstance(value, datetime):
        return argument_time(name, value)
    if isinstance(value, (list, tuple)):
        values = tuple(value)
        if not values:
            return argument_string_list(name)
        if _all_of(values, bool):
            return argument_bool_list(name, *values)
        if _all_of(values, int):
            return argument_int_list(name, *values)
        if _all_of(values, str):
            return argument_string_list(name, *values)
    raise ArgumentTypeNotSupportedError(value)

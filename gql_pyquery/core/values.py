"""Argument values: the closed set of GraphQL literals we can render.

Each variant is a small frozen dataclass holding its payload. Rendering is
done in one place, ``iter_value_tokens``, which matches over the whole set.
Payload types are checked at construction so rendering cannot fail.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Iterator, Union, get_args

if TYPE_CHECKING:
    from .argument import Argument


def _check(value, expected: type, variant: str):
    # bool is a subclass of int, never accept it as one
    if expected is int and isinstance(value, bool) or not isinstance(value, expected):
        raise TypeError(f"{variant} expects {expected.__name__}, got {type(value).__name__}")


def _check_items(values, expected: type, variant: str) -> tuple:
    values = tuple(values)
    for v in values:
        _check(v, expected, variant)
    return values


def _check_arguments(arguments, variant: str) -> tuple:
    from .argument import Argument
    return _check_items(arguments, Argument, variant)


# =============================================================================
# Scalars
# =============================================================================


@dataclass(frozen=True)
class BoolValue:
    value: bool

    def __post_init__(self):
        _check(self.value, bool, "BoolValue")


@dataclass(frozen=True)
class IntValue:
    value: int

    def __post_init__(self):
        _check(self.value, int, "IntValue")


@dataclass(frozen=True)
class StringValue:
    """Plain string, wrapped in double quotes without escaping."""
    value: str

    def __post_init__(self):
        _check(self.value, str, "StringValue")


@dataclass(frozen=True)
class QuotedStringValue:
    """String that renders as an escaped quoted literal inside the query.

    Meant for JSON request bodies, where the outer quotes get escaped and the
    inner ``\\"`` pair decodes to a literal quote.
    """
    value: str

    def __post_init__(self):
        _check(self.value, str, "QuotedStringValue")


@dataclass(frozen=True)
class BlockStringValue:
    """Multi-line string rendered inside triple quotes."""
    value: str

    def __post_init__(self):
        _check(self.value, str, "BlockStringValue")


@dataclass(frozen=True)
class EnumValue:
    value: str

    def __post_init__(self):
        _check(self.value, str, "EnumValue")


@dataclass(frozen=True)
class TimeValue:
    value: datetime

    def __post_init__(self):
        _check(self.value, datetime, "TimeValue")


# =============================================================================
# Lists
# =============================================================================


@dataclass(frozen=True)
class BoolListValue:
    values: tuple[bool, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "values", _check_items(self.values, bool, "BoolListValue"))


@dataclass(frozen=True)
class IntListValue:
    values: tuple[int, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "values", _check_items(self.values, int, "IntListValue"))


@dataclass(frozen=True)
class StringListValue:
    values: tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "values", _check_items(self.values, str, "StringListValue"))


@dataclass(frozen=True)
class EnumListValue:
    values: tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "values", _check_items(self.values, str, "EnumListValue"))


# =============================================================================
# Recursive values
# =============================================================================


@dataclass(frozen=True)
class ObjectValue:
    """An input object: ``{a:1,b:true}``."""
    arguments: tuple["Argument", ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "arguments", _check_arguments(self.arguments, "ObjectValue"))


@dataclass(frozen=True)
class ObjectListValue:
    """A list of input objects: ``[{a:1},{a:2}]``."""
    objects: tuple[tuple["Argument", ...], ...] = ()

    def __post_init__(self):
        object.__setattr__(
            self, "objects", tuple(_check_arguments(o, "ObjectListValue") for o in self.objects)
        )


ArgumentValue = Union[
    BoolValue,
    IntValue,
    StringValue,
    QuotedStringValue,
    BlockStringValue,
    EnumValue,
    TimeValue,
    BoolListValue,
    IntListValue,
    StringListValue,
    EnumListValue,
    ObjectValue,
    ObjectListValue,
]

VALUE_TYPES = get_args(ArgumentValue)


# =============================================================================
# Rendering
# =============================================================================


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def format_time(value: datetime) -> str:
    """Format a datetime as RFC 3339 with second precision.

    Naive datetimes are treated as UTC. A zero offset renders as ``Z``.
    """
    offset = value.utcoffset() or timedelta(0)
    text = value.replace(tzinfo=None).isoformat(timespec="seconds")
    if offset == timedelta(0):
        return text + "Z"
    sign = "+" if offset > timedelta(0) else "-"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def _list_tokens(items: tuple, fmt) -> Iterator[str]:
    yield "["
    for i, item in enumerate(items):
        if i:
            yield ","
        yield fmt(item)
    yield "]"


def _object_tokens(arguments: tuple["Argument", ...]) -> Iterator[str]:
    yield "{"
    for i, argument in enumerate(arguments):
        if i:
            yield ","
        yield from argument.tokens()
    yield "}"


def _quote(text: str) -> str:
    return f'"{text}"'


def iter_value_tokens(value: ArgumentValue) -> Iterator[str]:
    """Yield the GraphQL text of an argument value."""
    match value:
        case BoolValue(v):
            yield format_bool(v)
        case IntValue(v):
            yield str(v)
        case StringValue(v):
            yield _quote(v)
        case QuotedStringValue(v):
            yield f'"\\\\"{v}\\\\""'
        case BlockStringValue(v):
            yield f'"""{v}"""'
        case EnumValue(v):
            yield v
        case TimeValue(v):
            yield _quote(format_time(v))
        case BoolListValue(vs):
            yield from _list_tokens(vs, format_bool)
        case IntListValue(vs):
            yield from _list_tokens(vs, str)
        case StringListValue(vs):
            yield from _list_tokens(vs, _quote)
        case EnumListValue(vs):
            yield from _list_tokens(vs, str)
        case ObjectValue(arguments):
            yield from _object_tokens(arguments)
        case ObjectListValue(objects):
            yield "["
            for i, arguments in enumerate(objects):
                if i:
                    yield ","
                yield from _object_tokens(arguments)
            yield "]"
        case _:
            raise TypeError(f"Not an argument value: {value!r}")


def iter_enum_values(value: ArgumentValue) -> Iterator[str]:
    """Yield every enum identifier held directly by ``value``."""
    match value:
        case EnumValue(v):
            yield v
        case EnumListValue(vs):
            yield from vs


def iter_nested_arguments(value: ArgumentValue) -> Iterator["Argument"]:
    """Yield the arguments nested one level inside an object value."""
    match value:
        case ObjectValue(arguments):
            yield from arguments
        case ObjectListValue(objects):
            for arguments in objects:
                yield from arguments

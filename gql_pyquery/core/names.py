"""GraphQL name grammar and operation types."""

import re
from enum import Enum

# http://spec.graphql.org/October2021/#Name
NAME_PATTERN = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")

# Names that are lexically valid but reserved as enum values
RESERVED_ENUM_VALUES = frozenset({"true", "false", "null"})


class NameKind(Enum):
    """Which kind of name failed validation."""
    OPERATION = "operation name"
    FIELD = "field name"
    ALIAS = "alias name"
    ARGUMENT = "argument name"
    ENUM_VALUE = "enum value"


class OperationType(str, Enum):
    """GraphQL operation types."""
    QUERY = "query"
    MUTATION = "mutation"
    SUBSCRIPTION = "subscription"

    @classmethod
    def coerce(cls, value: "OperationType | str | None") -> "OperationType | None":
        """Return the matching member, or None if ``value`` is not a known type."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.lower())
        except ValueError:
            return None


def is_valid_name(name: str | None) -> bool:
    """Check a name against the GraphQL name grammar."""
    return isinstance(name, str) and NAME_PATTERN.match(name) is not None


def is_valid_enum_value(value: str | None) -> bool:
    """Enum values are names, except true, false and null."""
    return is_valid_name(value) and value not in RESERVED_ENUM_VALUES

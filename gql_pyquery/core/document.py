"""Declarative query documents.

A query can be described as JSON and loaded into a Query:

    {
      "operation": "query",
      "name": "Users",
      "fields": [
        {
          "name": "users",
          "arguments": [
            {"name": "first", "value": 10},
            {"name": "order", "value": "ASC", "kind": "enum"},
            {"name": "filter", "fields": [{"name": "active", "value": true}]}
          ],
          "fields": [{"name": "id"}, {"name": "name"}]
        }
      ]
    }

Argument values with ``kind: "auto"`` go through ``argument_any``. The
other kinds select a specific value type. ``fields`` describes a nested
input object and ``items`` a list of input objects.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field as PydanticField, model_validator

from .argument import (
    Argument,
    argument_any,
    argument_block_string,
    argument_custom_type,
    argument_enum,
    argument_enum_list,
    argument_object_list,
    argument_quoted_string,
    argument_time,
)
from .field import Field
from .names import OperationType
from .query import Query

ArgumentKind = Literal["auto", "enum", "enum_list", "quoted", "block", "time"]


def _parse_time(value: str) -> datetime:
    """Parse an ISO 8601 timestamp, accepting a trailing Z."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class ArgumentSpec(BaseModel):
    """Description of a single argument."""

    name: str
    value: Any = None
    kind: ArgumentKind = "auto"
    fields: list["ArgumentSpec"] | None = None
    items: list[list["ArgumentSpec"]] | None = None

    @model_validator(mode="after")
    def _check_shape(self) -> "ArgumentSpec":
        if self.fields is not None and self.items is not None:
            raise ValueError(f"argument {self.name!r}: give either 'fields' or 'items', not both")
        if (self.fields is not None or self.items is not None) and (
            self.value is not None or self.kind != "auto"
        ):
            raise ValueError(
                f"argument {self.name!r}: 'fields' and 'items' cannot be combined with 'value' or 'kind'"
            )
        if self.kind == "enum_list" and not (
            isinstance(self.value, list) and all(isinstance(v, str) for v in self.value)
        ):
            raise ValueError(f"argument {self.name!r}: kind 'enum_list' needs a list of strings")
        if self.kind in ("enum", "quoted", "block", "time") and not isinstance(self.value, str):
            raise ValueError(f"argument {self.name!r}: kind {self.kind!r} needs a string value")
        if self.kind == "time":
            try:
                _parse_time(self.value)
            except ValueError as e:
                raise ValueError(f"argument {self.name!r}: {e}") from e
        return self

    def to_argument(self) -> Argument:
        """Convert to an Argument.

        Raises:
            ArgumentTypeNotSupportedError: An ``auto`` value has no matching type
        """
        if self.fields is not None:
            return argument_custom_type(self.name, *(f.to_argument() for f in self.fields))
        if self.items is not None:
            return argument_object_list(
                self.name, *([a.to_argument() for a in item] for item in self.items)
            )
        if self.kind == "enum":
            return argument_enum(self.name, self.value)
        if self.kind == "enum_list":
            return argument_enum_list(self.name, *self.value)
        if self.kind == "quoted":
            return argument_quoted_string(self.name, self.value)
        if self.kind == "block":
            return argument_block_string(self.name, self.value)
        if self.kind == "time":
            return argument_time(self.name, _parse_time(self.value))
        return argument_any(self.name, self.value)


class FieldSpec(BaseModel):
    """Description of a field and its subtree."""

    name: str
    alias: str | None = None
    arguments: list[ArgumentSpec] = PydanticField(default_factory=list)
    fields: list["FieldSpec"] = PydanticField(default_factory=list)

    def to_field(self) -> Field:
        return Field(
            name=self.name,
            alias=self.alias,
            arguments=[a.to_argument() for a in self.arguments],
            fields=[f.to_field() for f in self.fields],
        )


class QueryDocument(BaseModel):
    """Description of a whole operation."""

    operation: str = OperationType.QUERY.value
    name: str | None = None
    fields: list[FieldSpec] = PydanticField(default_factory=list)

    def to_query(self) -> Query:
        """Build the Query. Names are checked later, when it is rendered."""
        return Query(
            operation_type=self.operation,
            name=self.name,
            fields=[f.to_field() for f in self.fields],
        )


ArgumentSpec.model_rebuild()
FieldSpec.model_rebuild()


def load_document(path: str | Path) -> QueryDocument:
    """Read and validate a JSON query document.

    Raises:
        pydantic.ValidationError: The file does not describe a valid document
    """
    return QueryDocument.model_validate_json(Path(path).read_text())

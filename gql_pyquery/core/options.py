"""Functional-option constructors for queries and fields.

An alternative to the fluent setters when a whole query is written as one
expression:

    query = new_query(
        OperationType.QUERY,
        of_name("Users"),
        of_field(
            "users",
            of_arguments(argument_int("first", 10)),
            of_fields("id", "name"),
        ),
    )
"""

from typing import Callable

from .argument import Argument
from .field import Field, make_fields
from .names import OperationType
from .query import Query

QueryOption = Callable[[Query], None]
FieldOption = Callable[[Field], None]


def new_query(operation_type: OperationType | str, *options: QueryOption) -> Query:
    """Create a query and apply each option in order."""
    query = Query(operation_type=operation_type)
    for option in options:
        option(query)
    return query


def new_field(name: str, *options: FieldOption) -> Field:
    """Create a field and apply each option in order."""
    f = Field(name=name)
    for option in options:
        option(f)
    return f


def of_name(name: str) -> QueryOption:
    def apply(query: Query):
        query.set_name(name)
    return apply


def of_field(name: str, *options: FieldOption) -> QueryOption:
    """Append a top-level field built from ``options``."""
    def apply(query: Query):
        query.add_fields(new_field(name, *options))
    return apply


def of_alias(alias: str) -> FieldOption:
    def apply(f: Field):
        f.set_alias(alias)
    return apply


def of_arguments(*arguments: Argument) -> FieldOption:
    def apply(f: Field):
        f.add_arguments(*arguments)
    return apply


def of_fields(*names: str) -> FieldOption:
    """Append one leaf subfield per name."""
    def apply(f: Field):
        f.add_fields(*make_fields(*names))
    return apply


def of_subfield(name: str, *options: FieldOption) -> FieldOption:
    """Append a nested subfield built from ``options``."""
    def apply(f: Field):
        f.add_fields(new_field(name, *options))
    return apply

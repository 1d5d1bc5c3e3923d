"""Core modules for building GraphQL documents."""

from .argument import (
    Argument,
    argument_any,
    argument_block_string,
    argument_bool,
    argument_bool_list,
    argument_custom_type,
    argument_enum,
    argument_enum_list,
    argument_int,
    argument_int_list,
    argument_object_list,
    argument_quoted_string,
    argument_string,
    argument_string_list,
    argument_time,
)
from .document import ArgumentSpec, FieldSpec, QueryDocument, load_document
from .errors import (
    ArgumentTypeNotSupportedError,
    CyclicFieldError,
    InvalidNameError,
    InvalidOperationTypeError,
    MissingFieldError,
    QueryBuildError,
)
from .field import Field, make_field, make_fields
from .names import NameKind, OperationType, is_valid_name
from .options import (
    new_field,
    new_query,
    of_alias,
    of_arguments,
    of_field,
    of_fields,
    of_name,
    of_subfield,
)
from .query import Query, make_query
from .tokens import TokenSource, TokenStream, join_tokens, string_from_tokens
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
)

__all__ = [
    # Values
    "ArgumentValue",
    "BoolValue",
    "IntValue",
    "StringValue",
    "QuotedStringValue",
    "BlockStringValue",
    "EnumValue",
    "TimeValue",
    "BoolListValue",
    "IntListValue",
    "StringListValue",
    "EnumListValue",
    "ObjectValue",
    "ObjectListValue",
    # Arguments
    "Argument",
    "argument_any",
    "argument_bool",
    "argument_int",
    "argument_string",
    "argument_quoted_string",
    "argument_block_string",
    "argument_enum",
    "argument_time",
    "argument_bool_list",
    "argument_int_list",
    "argument_string_list",
    "argument_enum_list",
    "argument_custom_type",
    "argument_object_list",
    # Fields and queries
    "Field",
    "make_field",
    "make_fields",
    "Query",
    "make_query",
    "NameKind",
    "OperationType",
    "is_valid_name",
    # Functional options
    "new_query",
    "new_field",
    "of_name",
    "of_field",
    "of_alias",
    "of_arguments",
    "of_fields",
    "of_subfield",
    # Tokens
    "TokenSource",
    "TokenStream",
    "join_tokens",
    "string_from_tokens",
    # Documents
    "ArgumentSpec",
    "FieldSpec",
    "QueryDocument",
    "load_document",
    # Errors
    "QueryBuildError",
    "ArgumentTypeNotSupportedError",
    "InvalidOperationTypeError",
    "InvalidNameError",
    "MissingFieldError",
    "CyclicFieldError",
]

"""Query: the root of a GraphQL operation.

Builds the document text from a tree of fields once the whole tree has
passed validation.

Example usage:
    from gql_pyquery.core import OperationType, argument_int, make_field, make_query

    query = make_query(OperationType.QUERY).set_name("Foo").add_fields(
        make_field("bar").add_arguments(argument_int("n", 1))
    )
    query.render()     # 'query Foo{bar(n:1),}'
    query.json_body()  # '{"query":"query Foo{bar(n:1),}"}'
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

from .errors import InvalidNameError, InvalidOperationTypeError, MissingFieldError
from .field import Field
from .names import NameKind, OperationType, is_valid_name
from .tokens import TokenStream, string_from_tokens

logger = logging.getLogger(__name__)

# Characters escaped when embedding the document in a JSON string.
# Backslashes are left alone so quoted-string values decode as intended.
_JSON_ESCAPES = str.maketrans({'"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"})


@dataclass(eq=False)
class Query:
    """A GraphQL query, mutation or subscription."""
    operation_type: OperationType | str
    name: Optional[str] = None
    fields: list[Optional[Field]] = field(default_factory=list)

    def set_name(self, name: str) -> "Query":
        self.name = name
        return self

    def set_fields(self, *fields: Optional[Field]) -> "Query":
        """Replace all top-level fields."""
        self.fields = list(fields)
        return self

    def add_fields(self, *fields: Optional[Field]) -> "Query":
        self.fields.extend(fields)
        return self

    def validate(self) -> OperationType:
        """Validate the operation and its whole field tree.

        Stops at the first problem found; nothing is rendered on failure.

        Returns:
            The resolved operation type

        Raises:
            InvalidOperationTypeError: Unknown operation type
            InvalidNameError: Bad operation, field, alias, argument or enum name
            MissingFieldError: A field slot is None
            CyclicFieldError: A field appears among its own subfields
        """
        operation_type = OperationType.coerce(self.operation_type)
        if operation_type is None:
            logger.debug("Rejected operation type %r", self.operation_type)
            raise InvalidOperationTypeError(self.operation_type)
        if self.name and not is_valid_name(self.name):
            logger.debug("Rejected operation name %r", self.name)
            raise InvalidNameError(NameKind.OPERATION, self.name)

        for f in self.fields:
            if f is None:
                raise MissingFieldError()
            f.validate()
        return operation_type

    def token_stream(self) -> TokenStream:
        """Validate, then return a fresh lazy stream of the document's tokens.

        Validation happens eagerly in this call, so errors surface before
        any stream exists. The stream cannot be replayed once consumed.
        """
        operation_type = self.validate()
        logger.debug("Rendering %s %s", operation_type.value, self.name or "<anonymous>")
        return TokenStream(self._tokens(operation_type))

    def _tokens(self, operation_type: OperationType) -> Iterator[str]:
        yield operation_type.value
        if self.name:
            yield " "
            yield self.name
        yield "{"
        for f in self.fields:
            yield from f.tokens()
            yield ","
        yield "}"

    def render(self) -> str:
        """Validate and return the full document text."""
        with self.token_stream() as stream:
            return string_from_tokens(stream)

    def json_body(self) -> str:
        """Return the document wrapped as a ``{"query": ...}`` request body."""
        return '{"query":"%s"}' % self.render().translate(_JSON_ESCAPES)


def make_query(operation_type: OperationType | str) -> Query:
    """Create an empty operation of the given type."""
    return Query(operation_type=operation_type)

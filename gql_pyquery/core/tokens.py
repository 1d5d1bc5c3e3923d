"""Lazy token production for GraphQL documents.

Every node of a query tree (values, arguments, fields, the query itself)
produces its text as a generator of small string fragments. Parents pull
their children's tokens with ``yield from``, so the whole document is
produced depth-first without ever building intermediate strings.

Example usage:
    from gql_pyquery.core.tokens import string_from_tokens

    with query.token_stream() as stream:
        for token in stream:
            sink.write(token)

    text = string_from_tokens(query.token_stream())
"""

from collections.abc import Iterable, Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class TokenSource(Protocol):
    """Protocol for anything that can lazily emit GraphQL text.

    Example:
        class Typename:
            def tokens(self) -> Iterator[str]:
                yield "__typename"
    """

    def tokens(self) -> Iterator[str]:
        """Yield the text fragments of this node in emission order."""
        ...


def join_tokens(sources: Iterable[TokenSource], separator: str = ",") -> Iterator[str]:
    """Yield the tokens of each source with ``separator`` strictly between them."""
    for i, source in enumerate(sources):
        if i:
            yield separator
        yield from source.tokens()


def string_from_tokens(tokens: Iterable[str]) -> str:
    """Drain a token iterable into a single string."""
    return "".join(tokens)


class TokenStream:
    """A finite, non-restartable stream of tokens.

    Wraps the generator chain of a validated tree. Once exhausted it stays
    exhausted; render again to get a fresh stream. Closing the stream (or
    leaving a ``with`` block) tears down every nested generator, so a
    consumer may stop reading at any point.
    """

    def __init__(self, tokens: Iterator[str]):
        self._tokens = tokens
        self._exhausted = False

    def __iter__(self) -> "TokenStream":
        return self

    def __next__(self) -> str:
        if self._exhausted:
            raise StopIteration
        try:
            return next(self._tokens)
        except StopIteration:
            self._exhausted = True
            raise

    @property
    def exhausted(self) -> bool:
        """True once the stream has been fully consumed or closed."""
        return self._exhausted

    def close(self):
        """Stop the producer and release the generator chain."""
        if not self._exhausted:
            self._exhausted = True
            close = getattr(self._tokens, "close", None)
            if close is not None:
                close()

    def __enter__(self) -> "TokenStream":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

"""Command-line interface for gql-pyquery."""

import logging
from pathlib import Path

import click
from graphql import GraphQLSyntaxError, parse
from pydantic import ValidationError

from .core.document import load_document
from .core.errors import QueryBuildError
from .core.query import Query


def _load_query(document: str) -> Query:
    """Load a query document, turning input errors into CLI errors."""
    try:
        return load_document(Path(document)).to_query()
    except ValidationError as e:
        raise click.ClickException(f"Invalid query document {document}:\n{e}") from e
    except QueryBuildError as e:
        raise click.ClickException(str(e)) from e


def check_syntax(text: str):
    """Parse rendered text with graphql-core to confirm it is well-formed."""
    try:
        parse(text)
    except GraphQLSyntaxError as e:
        raise click.ClickException(f"Rendered document is not valid GraphQL: {e.message}") from e


@click.group()
@click.version_option(package_name="gql-pyquery")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging.",
)
def main(verbose: bool):
    """Build GraphQL documents from JSON query descriptions."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument("document", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--json-body",
    "-j",
    is_flag=True,
    help='Print a {"query": ...} request body instead of the raw document.',
)
@click.option(
    "--check",
    "-c",
    is_flag=True,
    help="Parse the rendered document with graphql-core before printing it.",
)
def render(document: str, json_body: bool, check: bool):
    """Render a query document to GraphQL text.

    Examples:

        gql-pyquery render users.json

        gql-pyquery render users.json --json-body

        gql-pyquery -v render users.json --check
    """
    query = _load_query(document)
    try:
        text = query.render()
        if check:
            check_syntax(text)
        click.echo(query.json_body() if json_body else text)
    except QueryBuildError as e:
        raise click.ClickException(str(e)) from e


@main.command()
@click.argument("document", type=click.Path(exists=True, dir_okay=False))
def validate(document: str):
    """Validate a query document without printing it."""
    query = _load_query(document)
    try:
        query.validate()
    except QueryBuildError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"{document}: OK")


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""Demonstration of the GraphQL document builder.

This script shows how to:
1. Build a query with the fluent setters
2. Build the same kind of query with functional options
3. Stream tokens lazily and wrap a document as a JSON request body

Note: This demo doesn't make any API calls - it only prints documents.
"""

from datetime import datetime, timezone

from gql_pyquery.core import (
    OperationType,
    QueryBuildError,
    argument_custom_type,
    argument_enum,
    argument_int,
    argument_string,
    argument_time,
    make_field,
    make_fields,
    make_query,
    new_query,
    of_arguments,
    of_field,
    of_fields,
    of_name,
)


def main():
    print("=== GraphQL Builder Demo ===\n")

    print("1. Fluent setters")
    query = make_query(OperationType.QUERY).set_name("RecentPosts").add_fields(
        make_field("posts")
        .add_arguments(
            argument_int("first", 5),
            argument_custom_type(
                "where",
                argument_string("author", "ann"),
                argument_time("since", datetime(2024, 1, 1, tzinfo=timezone.utc)),
            ),
            argument_enum("order", "DESC"),
        )
        .add_fields(*make_fields("id", "title"))
    )
    print(f"   {query.render()}")

    print("\n2. Functional options")
    mutation = new_query(
        OperationType.MUTATION,
        of_name("Like"),
        of_field("likePost", of_arguments(argument_int("id", 42)), of_fields("likes")),
    )
    print(f"   {mutation.render()}")

    print("\n3. Lazy tokens")
    with query.token_stream() as stream:
        print(f"   first tokens: {[next(stream) for _ in range(4)]}")

    print("\n4. JSON request body")
    print(f"   {mutation.json_body()}")

    print("\n5. Validation errors")
    try:
        make_query(OperationType.QUERY).add_fields(make_field("first-name")).render()
    except QueryBuildError as e:
        print(f"   {type(e).__name__}: {e}")


if __name__ == "__main__":
    main()

"""Tests for arguments and their factories."""

from datetime import date, datetime, timezone

import pytest

from gql_pyquery.core.argument import (
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
from gql_pyquery.core.errors import ArgumentTypeNotSupportedError, QueryBuildError
from gql_pyquery.core.field import make_field
from gql_pyquery.core.query import make_query
from gql_pyquery.core.tokens import TokenSource
from gql_pyquery.core.values import IntValue

NOON = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


def render(argument: Argument) -> str:
    return "".join(argument.tokens())


class TestFactories:
    """Tests for the typed argument factories."""

    def test_bool(self):
        assert render(argument_bool("flag", True)) == "flag:true"

    def test_int(self):
        assert render(argument_int("n", 1)) == "n:1"

    def test_string(self):
        assert render(argument_string("q", "text")) == 'q:"text"'

    def test_quoted_string(self):
        assert render(argument_quoted_string("q", "x")) == r'q:"\\"x\\""'

    def test_block_string(self):
        assert render(argument_block_string("body", "a\nb")) == 'body:"""a\nb"""'

    def test_enum(self):
        assert render(argument_enum("order", "DESC")) == "order:DESC"

    def test_time(self):
        assert render(argument_time("at", NOON)) == 'at:"2024-01-15T12:00:00Z"'

    def test_lists(self):
        assert render(argument_bool_list("bs", True)) == "bs:[true]"
        assert render(argument_int_list("ns", 1, 2)) == "ns:[1,2]"
        assert render(argument_string_list("ss", "a", "b")) == 'ss:["a","b"]'
        assert render(argument_enum_list("es", "A", "B")) == "es:[A,B]"

    def test_empty_int_list(self):
        assert render(argument_int_list("xs")) == "xs:[]"

    def test_custom_type(self):
        arg = argument_custom_type("obj", argument_int("a", 1), argument_bool("b", True))
        assert render(arg) == "obj:{a:1,b:true}"

    def test_nested_custom_type(self):
        arg = argument_custom_type(
            "where",
            argument_custom_type("author", argument_string("name", "Ann")),
            argument_enum_list("status", "DRAFT", "PUBLISHED"),
        )
        assert render(arg) == 'where:{author:{name:"Ann"},status:[DRAFT,PUBLISHED]}'

    def test_object_list(self):
        arg = argument_object_list(
            "items",
            [argument_int("id", 1), argument_string("label", "a")],
            [argument_int("id", 2)],
        )
        assert render(arg) == 'items:[{id:1,label:"a"},{id:2}]'

    def test_empty_object_list(self):
        assert render(argument_object_list("items")) == "items:[]"

    def test_argument_is_token_source(self):
        assert isinstance(argument_int("n", 1), TokenSource)


class TestArgumentAny:
    """Tests for dispatching on the runtime type."""

    @pytest.mark.parametrize(
        "value, explicit",
        [
            (True, argument_bool("v", True)),
            (False, argument_bool("v", False)),
            (7, argument_int("v", 7)),
            (0, argument_int("v", 0)),
            ("text", argument_string("v", "text")),
            (NOON, argument_time("v", NOON)),
            ([True, False], argument_bool_list("v", True, False)),
            ([1, 2, 3], argument_int_list("v", 1, 2, 3)),
            ((1, 2), argument_int_list("v", 1, 2)),
            (["a", "b"], argument_string_list("v", "a", "b")),
        ],
    )
    def test_matches_explicit_factory(self, value, explicit):
        assert render(argument_any("v", value)) == render(explicit)
        assert argument_any("v", value) == explicit

    def test_bool_is_not_int(self):
        assert argument_any("v", True) == argument_bool("v", True)

    def test_empty_list(self):
        assert render(argument_any("xs", [])) == "xs:[]"

    @pytest.mark.parametrize(
        "value",
        [1.5, None, {"a": 1}, [1, "a"], [True, 1], [1.0], [[1]], date(2024, 1, 15), object()],
    )
    def test_unsupported(self, value):
        with pytest.raises(ArgumentTypeNotSupportedError) as exc_info:
            argument_any("v", value)
        assert exc_info.value.value is value

    def test_unsupported_is_query_build_error(self):
        with pytest.raises(QueryBuildError):
            argument_any("v", 1.5)


class TestArgumentValueCheck:
    """Tests that an Argument only holds a value variant."""

    @pytest.mark.parametrize("value", [1, "x", True, None, [1, 2], IntValue, NOON])
    def test_rejects_raw_payload(self, value):
        with pytest.raises(TypeError, match="expects an argument value"):
            Argument("n", value)

    def test_rejects_before_query_is_built(self):
        # The bad argument never reaches the tree, so validation cannot pass it
        with pytest.raises(TypeError):
            make_query("query").add_fields(make_field("bar").add_arguments(Argument("n", 1)))

    def test_accepted_argument_renders_after_validation(self):
        query = make_query("query").add_fields(
            make_field("bar").add_arguments(Argument("n", IntValue(1)))
        )
        query.validate()
        assert query.render() == "query{bar(n:1),}"

"""Tests for declarative query documents."""

import json

import pytest
from pydantic import ValidationError

from gql_pyquery.core.document import ArgumentSpec, QueryDocument, load_document
from gql_pyquery.core.errors import ArgumentTypeNotSupportedError, InvalidOperationTypeError


@pytest.fixture
def users_document():
    """A document using every argument form."""
    return {
        "operation": "query",
        "name": "Users",
        "fields": [
            {
                "name": "users",
                "alias": "people",
                "arguments": [
                    {"name": "first", "value": 10},
                    {"name": "order", "value": "ASC", "kind": "enum"},
                    {"name": "roles", "value": ["ADMIN", "USER"], "kind": "enum_list"},
                    {"name": "filter", "fields": [{"name": "active", "value": True}]},
                    {"name": "ids", "items": [[{"name": "id", "value": 1}], [{"name": "id", "value": 2}]]},
                    {"name": "since", "value": "2024-01-15T10:30:00Z", "kind": "time"},
                    {"name": "tags", "value": ["a", "b"]},
                ],
                "fields": [{"name": "id"}, {"name": "profile", "fields": [{"name": "bio"}]}],
            }
        ],
    }


class TestQueryDocument:
    """Tests for converting documents to queries."""

    def test_to_query(self, users_document):
        query = QueryDocument.model_validate(users_document).to_query()
        assert query.render() == (
            "query Users{people:users(first:10,order:ASC,roles:[ADMIN,USER],"
            'filter:{active:true},ids:[{id:1},{id:2}],since:"2024-01-15T10:30:00Z",'
            'tags:["a","b"]){id,profile{bio}},}'
        )

    def test_defaults(self):
        document = QueryDocument.model_validate({"fields": [{"name": "ping"}]})
        assert document.to_query().render() == "query{ping,}"

    def test_operation_is_checked_on_render(self):
        query = QueryDocument(operation="fetch").to_query()
        with pytest.raises(InvalidOperationTypeError):
            query.render()

    def test_load_document(self, tmp_path, users_document):
        path = tmp_path / "users.json"
        path.write_text(json.dumps(users_document))
        assert load_document(path).name == "Users"

    def test_load_invalid_document(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"fields": [{"alias": "missing-name"}]}))
        with pytest.raises(ValidationError):
            load_document(path)


class TestArgumentSpec:
    """Tests for argument descriptions."""

    def test_quoted_and_block(self):
        assert "".join(ArgumentSpec(name="q", value="x", kind="quoted").to_argument().tokens()) == r'q:"\\"x\\""'
        assert "".join(ArgumentSpec(name="b", value="x", kind="block").to_argument().tokens()) == 'b:"""x"""'

    def test_unsupported_auto_value(self):
        with pytest.raises(ArgumentTypeNotSupportedError):
            ArgumentSpec(name="ratio", value=1.5).to_argument()

    def test_enum_needs_string(self):
        with pytest.raises(ValidationError):
            ArgumentSpec(name="order", value=1, kind="enum")

    def test_enum_list_needs_list(self):
        with pytest.raises(ValidationError):
            ArgumentSpec(name="roles", value="ADMIN", kind="enum_list")

    def test_fields_and_items_are_exclusive(self):
        with pytest.raises(ValidationError):
            ArgumentSpec(name="x", fields=[], items=[])

    def test_unknown_kind(self):
        with pytest.raises(ValidationError):
            ArgumentSpec(name="x", value="y", kind="float")

    def test_time(self):
        argument = ArgumentSpec(name="at", value="2024-01-15T12:00:00Z", kind="time").to_argument()
        assert "".join(argument.tokens()) == 'at:"2024-01-15T12:00:00Z"'

    @pytest.mark.parametrize("value", ["not-a-time", "2024-13-01T00:00:00Z", ""])
    def test_time_must_parse(self, value):
        with pytest.raises(ValidationError, match="at"):
            ArgumentSpec(name="at", value=value, kind="time")

    @pytest.mark.parametrize("value", [["ADMIN", 1], [None], [["ADMIN"]]])
    def test_enum_list_items_must_be_strings(self, value):
        with pytest.raises(ValidationError, match="list of strings"):
            ArgumentSpec(name="roles", value=value, kind="enum_list")

    @pytest.mark.parametrize(
        "extra",
        [{"value": 1}, {"kind": "enum"}, {"value": "A", "kind": "enum"}],
    )
    def test_fields_exclude_value_and_kind(self, extra):
        with pytest.raises(ValidationError, match="cannot be combined"):
            ArgumentSpec(name="x", fields=[{"name": "a", "value": 1}], **extra)

    @pytest.mark.parametrize("extra", [{"value": [1]}, {"kind": "time"}])
    def test_items_exclude_value_and_kind(self, extra):
        with pytest.raises(ValidationError, match="cannot be combined"):
            ArgumentSpec(name="x", items=[[{"name": "a", "value": 1}]], **extra)

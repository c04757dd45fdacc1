"""Unit tests for schema well-formedness checks."""

from __future__ import annotations

import pytest

from semschema.validation.api import assert_valid_schema, validate_schema
from semschema.validation.errors import InvalidSchemaError


class TestValidSchemas:
    @pytest.mark.parametrize(
        "schema",
        [
            {"type": "string", "format": "json"},
            {"type": "string", "format": "html"},
            {"type": "string", "format": "text"},
            {"format": "json"},
            {"type": "number", "precision": 0},
            {"type": "number", "precision": 4},
            {"type": "string", "required": True},
            {"type": "string", "required": False},
            {"format": "email", "required": True},
            {"type": "object", "properties": {"name": {"type": "string"}}, "required": []},
            {"type": ["string", "null"]},
            True,
        ],
    )
    def test_accepts(self, schema):
        result = validate_schema(schema)
        assert result.valid is True
        assert result.errors is None
        assert result.message is None


class TestStructuralIssues:
    def test_unknown_format(self):
        result = validate_schema({"type": "string", "format": "bratwurst"})
        assert result.valid is False
        issue = result.errors[0]
        assert issue.message == 'Unknown format "bratwurst"'
        assert issue.keyword == "format"
        assert issue.value == "bratwurst"
        assert issue.path == "#"

    def test_unknown_format_in_nested_property(self):
        schema = {"type": "object", "properties": {"email": {"type": "string", "format": "emailx"}}}
        result = validate_schema(schema)
        assert result.errors[0].path == "#/properties/email"

    @pytest.mark.parametrize("precision", [-2, 1.5, 5, "2", True])
    def test_invalid_precision(self, precision):
        result = validate_schema({"type": "number", "precision": precision})
        assert result.valid is False
        assert result.errors[0].keyword == "precision"
        assert "precision" in result.errors[0].message

    def test_invalid_type_values(self):
        result = validate_schema({"type": ["string", "text", 3]})
        assert [issue.value for issue in result.errors] == ["text", 3]
        assert result.errors[0].message.startswith('Invalid type "text"')
        assert result.errors[1].message == "Invalid type value. Type must be a string, got number"

    def test_required_must_be_list_or_boolean(self):
        result = validate_schema({"type": "object", "properties": {"name": {"type": "string"}}, "required": "name"})
        assert result.valid is False
        assert result.errors[0].keyword == "required"

    def test_required_items_must_be_strings(self):
        result = validate_schema({"type": "object", "required": ["name", 123, True]})
        assert len(result.errors) == 2
        assert "index 1" in result.errors[0].message
        assert "index 2" in result.errors[1].message

    def test_properties_need_object_type(self):
        result = validate_schema({"type": "string", "properties": {"a": {"type": "string"}}})
        assert result.errors[0].keyword == "properties"

    def test_ui_annotations(self):
        schema = {
            "type": "object",
            "table": {"table_name": 1, "plural": "things"},
            "grid": {"sortField": 3, "sortOrder": "sideways"},
        }
        result = validate_schema(schema)
        assert [issue.keyword for issue in result.errors] == ["table", "grid", "grid"]

    def test_issues_are_collected_and_joined(self):
        schema = {
            "type": "object",
            "properties": {
                "a": {"format": "nope"},
                "b": {"type": "number", "precision": 9},
            },
            "items": {"format": "also-nope"},
        }
        result = validate_schema(schema)
        assert len(result.errors) == 3
        assert result.message == (
            'Unknown format "nope" at #/properties/a; '
            'Invalid precision value "9". Must be an integer between 0 and 4 at #/properties/b; '
            'Unknown format "also-nope" at #/items'
        )

    def test_composition_branches_are_checked(self):
        schema = {"oneOf": [{"type": "string"}, {"type": "number", "precision": 8}], "not": {"format": "x"}}
        paths = [issue.path for issue in validate_schema(schema).errors]
        assert paths == ["#/not", "#/oneOf/1"]


class TestCompileFailures:
    def test_compile_failure_is_reported(self):
        result = validate_schema({"type": "string", "minLength": -1})
        assert result.valid is False
        assert len(result.errors) == 1
        assert result.errors[0].keyword == "schema"
        assert result.errors[0].path == "#"

    def test_strict_mode_rejects_unknown_keywords(self):
        assert validate_schema({"type": "string", "widget": "x"}).valid is True
        assert validate_schema({"type": "string", "widget": "x"}, strict=True).valid is False


class TestAssertValidSchema:
    def test_raises_with_aggregated_message(self):
        with pytest.raises(InvalidSchemaError) as excinfo:
            assert_valid_schema({"type": "string", "format": "bratwurst"})
        assert str(excinfo.value) == 'Invalid schema: Unknown format "bratwurst" at #'

    def test_passes_silently(self):
        assert assert_valid_schema({"type": "string"}) is None

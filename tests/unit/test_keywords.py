"""Unit tests for the ``required`` and ``precision`` keywords."""

from __future__ import annotations

import pytest

from semschema.keywords.precision import count_decimal_places, is_valid_precision, number_to_string
from semschema.validation.api import validate_data


class TestNumberToString:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (10, "10"),
            (10.5, "10.5"),
            (100.0, "100"),
            (-2.5, "-2.5"),
            (0.0, "0"),
            (0.000001, "0.000001"),
            (1e-7, "1e-7"),
            (1.5e-7, "1.5e-7"),
            (1e20, "100000000000000000000"),
            (1e21, "1e+21"),
            (1.25e22, "1.25e+22"),
            (0.1 + 0.2, "0.30000000000000004"),
        ],
    )
    def test_matches_canonical_javascript_rendering(self, value, expected):
        assert number_to_string(value) == expected

    def test_decimal_places_use_the_canonical_string(self):
        assert count_decimal_places(10.55) == 2
        assert count_decimal_places(30) == 0
        assert count_decimal_places(0.1 + 0.2) == 17


class TestPrecisionKeyword:
    schema = {"type": "number", "precision": 2}

    @pytest.mark.parametrize("value", [10, 10.5, 10.55, -3.14, 0])
    def test_accepts_values_within_precision(self, value):
        result = validate_data(value, self.schema)
        assert result.valid is True
        assert result.errors is None

    def test_rejects_extra_decimal_places(self):
        result = validate_data(10.555, self.schema)
        assert result.valid is False
        error = result.errors[0]
        assert error.keyword == "precision"
        assert error.message == "must have at most 2 decimal places"
        assert error.params == {"precision": 2, "actual": 3}

    def test_zero_precision_rejects_fractions(self):
        assert validate_data(30, {"type": "number", "precision": 0}).valid is True
        assert validate_data(30.5, {"type": "number", "precision": 0}).valid is False

    def test_integral_float_precision_is_accepted(self):
        assert validate_data(1.25, {"type": "number", "precision": 2.0}).valid is True

    def test_out_of_range_precision_fails_data_validation(self):
        result = validate_data(1, {"type": "number", "precision": 7})
        assert result.valid is False
        assert result.errors[0].keyword == "precision"
        assert result.errors[0].message == "precision must be an integer between 0 and 4"
        assert result.errors[0].params == {"precision": 7}

    def test_non_numbers_are_ignored(self):
        assert validate_data("1.23456", {"precision": 1}).valid is True

    @pytest.mark.parametrize("value, expected", [(0, True), (4, True), (2.0, True), (5, False), (-1, False), (1.5, False), (True, False), ("2", False)])
    def test_precision_value_range(self, value, expected):
        assert is_valid_precision(value) is expected


class TestPropertyLevelRequired:
    def test_empty_string_violates_required(self):
        result = validate_data("", {"type": "string", "required": True})
        assert result.valid is False
        assert result.errors[0].keyword == "required"
        assert result.errors[0].message == "must not be empty"

    def test_null_violates_required(self):
        result = validate_data(None, {"type": ["string", "null"], "required": True})
        assert result.valid is False
        assert result.errors[0].keyword == "required"
        assert result.errors[0].message == "must not be null or undefined"

    @pytest.mark.parametrize("value", ["x", " ", "not empty"])
    def test_non_empty_string_passes(self, value):
        assert validate_data(value, {"type": "string", "required": True}).valid is True

    def test_false_is_a_no_op(self):
        assert validate_data("", {"type": "string", "required": False}).valid is True
        assert validate_data(None, {"required": False}).valid is True

    def test_applies_to_any_value_type(self):
        assert validate_data(0, {"type": "number", "required": True}).valid is True
        assert validate_data(None, {"required": True}).valid is False


class TestObjectLevelRequired:
    schema = {"type": "object", "properties": {"name": {"type": "string"}}, "required": ["name"]}

    def test_present_property_passes(self):
        assert validate_data({"name": "John"}, self.schema).valid is True

    def test_presence_only_not_emptiness(self):
        assert validate_data({"name": ""}, self.schema).valid is True

    def test_missing_property_fails(self):
        result = validate_data({}, self.schema)
        assert result.valid is False
        error = result.errors[0]
        assert error.keyword == "required"
        assert error.message == "must have required property 'name'"
        assert error.params == {"missingProperty": "name"}
        assert error.instance_path == ""
        assert error.schema_path == "#/required"

    def test_only_first_missing_property_is_reported(self):
        schema = {"type": "object", "required": ["a", "b", "c"]}
        result = validate_data({"b": 1}, schema)
        assert len(result.errors) == 1
        assert result.errors[0].params == {"missingProperty": "a"}

    def test_non_objects_are_ignored(self):
        schema = {"required": ["name"]}
        assert validate_data([], schema).valid is True
        assert validate_data(None, schema).valid is True
        assert validate_data("text", schema).valid is True

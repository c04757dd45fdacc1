"""SemSchema: JSON Schema validation with a small custom vocabulary.

* extra formats: ``json``, ``html``, ``text``, ``iri``, ``iri-reference``,
  ``idn-email``, ``idn-hostname``
* ``required`` at object level (list of names) and property level (boolean)
* ``precision``: at most 0-4 decimal places for numbers
* ``format`` without ``type`` implies a string
"""

from .forms.controls import Control, FieldDescriptor, default_values, describe_form, select_control
from .forms.fields import validate_field, validate_form_field
from .validation.api import assert_valid_schema, validate_data, validate_schema
from .validation.errors import (
    InvalidSchemaError,
    SchemaCheckResult,
    SchemaCompileError,
    SchemaIssue,
    SemSchemaError,
    ValidationIssue,
    ValidationResult,
)
from .validation.preprocess import preprocess_schema
from .validation.validator import compile_schema

__all__ = [
    "Control",
    "FieldDescriptor",
    "InvalidSchemaError",
    "SchemaCheckResult",
    "SchemaCompileError",
    "SchemaIssue",
    "SemSchemaError",
    "ValidationIssue",
    "ValidationResult",
    "assert_valid_schema",
    "compile_schema",
    "default_values",
    "describe_form",
    "preprocess_schema",
    "select_control",
    "validate_data",
    "validate_field",
    "validate_form_field",
    "validate_schema",
]

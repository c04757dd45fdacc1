"""Unit tests for the custom string formats."""

from __future__ import annotations

import pytest
from jsonschema import FormatChecker

from semschema.formats import (
    CUSTOM_FORMATS,
    KNOWN_FORMATS,
    register_formats,
    validate_html_format,
    validate_idn_email_format,
    validate_idn_hostname_format,
    validate_iri_format,
    validate_iri_reference_format,
    validate_json_format,
    validate_text_format,
)


class TestJsonFormat:
    @pytest.mark.parametrize("value", ['{"key":"value"}', "[]", "123", '"string"', "null", "true"])
    def test_accepts_any_json_document(self, value):
        assert validate_json_format(value) is True

    @pytest.mark.parametrize("value", ["{invalid}", '{"incomplete":', "", "NaN", "{'single': 1}"])
    def test_rejects_unparseable_strings(self, value):
        assert validate_json_format(value) is False


class TestHtmlFormat:
    @pytest.mark.parametrize("value", ["<p>hi</p>", "<div>World</div>", '<a href="#">Link</a>', "text <B>bold</B>"])
    def test_accepts_markup(self, value):
        assert validate_html_format(value) is True

    @pytest.mark.parametrize("value", ["plain text", "", "a < b > c", "<1>", "x <b"])
    def test_rejects_strings_without_tags(self, value):
        assert validate_html_format(value) is False

    def test_tag_may_span_lines(self):
        assert validate_html_format("<p\nclass='x'>") is True


class TestTextFormat:
    @pytest.mark.parametrize("value", ["", "single line", "multi\nline\ntext"])
    def test_accepts_every_string(self, value):
        assert validate_text_format(value) is True


class TestIriFormats:
    @pytest.mark.parametrize("value", ["https://例え.jp/パス", "mailto:user@example.com", "urn:isbn:0451450523", "a+b.c-d:rest"])
    def test_iri_requires_scheme(self, value):
        assert validate_iri_format(value) is True

    @pytest.mark.parametrize("value", ["", "example.com", "1http://x", "/relative/path"])
    def test_iri_rejects_missing_or_bad_scheme(self, value):
        assert validate_iri_format(value) is False

    @pytest.mark.parametrize("value", ["/path/to", "#fragment", "?q=1", "../up", "https://example.com/ü"])
    def test_iri_reference_accepts_relative_references(self, value):
        assert validate_iri_reference_format(value) is True

    @pytest.mark.parametrize("value", ["", "has space", "a<b", "{x}", "a|b", "back\\slash", "caret^", "tick`"])
    def test_iri_reference_rejects_forbidden_characters(self, value):
        assert validate_iri_reference_format(value) is False


class TestIdnFormats:
    @pytest.mark.parametrize("value", ["user@example.com", "ユーザー@例え.jp", "a@localhost"])
    def test_idn_email_accepts_two_parts(self, value):
        assert validate_idn_email_format(value) is True

    @pytest.mark.parametrize("value", ["", "no-at-sign", "a@@b.com", "a@b@c.com", "@example.com", "user@", "user@.com", "user@com."])
    def test_idn_email_rejects_bad_structure(self, value):
        assert validate_idn_email_format(value) is False

    @pytest.mark.parametrize("value", ["例え.jp", "example.com", "a", "a" * 63 + ".com", "xn--bcher-kva.example"])
    def test_idn_hostname_accepts_valid_labels(self, value):
        assert validate_idn_hostname_format(value) is True

    @pytest.mark.parametrize(
        "value",
        ["", ".example.com", "example.com.", "-example.com", "example.com-", "a..b", "a" * 64 + ".com", "bad-.com", "x" * 254],
    )
    def test_idn_hostname_rejects_invalid_labels(self, value):
        assert validate_idn_hostname_format(value) is False


class TestFormatRegistration:
    def test_custom_formats_are_known(self):
        assert set(CUSTOM_FORMATS) <= KNOWN_FORMATS
        assert "email" in KNOWN_FORMATS
        assert "bratwurst" not in KNOWN_FORMATS

    def test_registration_is_local_to_the_checker(self):
        checker = register_formats(FormatChecker())
        assert "html" in checker.checkers
        assert "html" not in FormatChecker().checkers

    def test_registered_formats_skip_non_strings(self):
        checker = register_formats(FormatChecker())
        assert checker.conforms(42, "json") is True
        assert checker.conforms(None, "idn-hostname") is True
        assert checker.conforms("{bad", "json") is False

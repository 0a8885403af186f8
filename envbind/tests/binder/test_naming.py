"""
Tests for Field Name Conversion

Tests hyphenated flag names and upper-snake environment keys.
"""

import pytest

from envbind.binder.naming import hyphenate, screaming_snake, to_delimited


class TestHyphenate:
    """Tests for kebab-case conversion."""

    @pytest.mark.parametrize("name,expected", [
        ("MaxRetries", "max-retries"),
        ("max_retries", "max-retries"),
        ("Server", "server"),
        ("UID", "uid"),
        ("HTTPServer", "http-server"),
        ("ReadTimeout", "read-timeout"),
        ("F1", "f-1"),
        ("cert_file", "cert-file"),
    ])
    def test_field_names(self, name, expected):
        """Should split words on case changes, digits and underscores."""
        assert hyphenate(name) == expected

    def test_trailing_hyphen_kept(self):
        """Prefixes keep their trailing hyphen."""
        assert hyphenate("server-") == "server-"

    def test_idempotent_on_prefixes(self):
        """Already-hyphenated prefixes are unchanged."""
        assert hyphenate("server-tls-") == "server-tls-"

    def test_empty(self):
        assert hyphenate("") == ""

    def test_strips_surrounding_space(self):
        assert hyphenate("  MaxRetries ") == "max-retries"


class TestScreamingSnake:
    """Tests for upper-snake conversion."""

    def test_from_flag_name(self):
        """Hyphens become underscores and letters upper case."""
        assert screaming_snake("server-max-retries") == "SERVER_MAX_RETRIES"

    def test_from_field_name(self):
        assert screaming_snake("MaxRetries") == "MAX_RETRIES"

    def test_consistent_with_hyphenate(self):
        """Both conversions split words identically."""
        for name in ("MaxRetries", "HTTPServer", "read_timeout", "F1"):
            assert screaming_snake(hyphenate(name)) == screaming_snake(name)


class TestToDelimited:
    """Tests for the shared splitter."""

    def test_custom_delimiter(self):
        assert to_delimited("MaxRetries", ".") == "max.retries"

    def test_dots_replaced(self):
        assert to_delimited("server.port", "-") == "server-port"

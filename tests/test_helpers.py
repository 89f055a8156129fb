"""Tests for sports_trivia.utils.helpers module."""

import pytest
from datetime import date

from sports_trivia.utils.helpers import (
    normalize_name,
    parse_date,
    parse_float,
    parse_int,
    safe_int,
    safe_float,
    first_initial,
    format_stat,
)


class TestNormalizeName:
    """Tests for normalize_name function."""

    def test_basic_name(self):
        """Test basic name normalization."""
        assert normalize_name("Aaron Judge") == "Aaron Judge"

    def test_accented_characters(self):
        """Test removal of accented characters."""
        assert normalize_name("José Ramírez") == "Jose Ramirez"
        assert normalize_name("Ronald Acuña Jr.") == "Ronald Acuna Jr."

    def test_empty_name(self):
        """Test empty string handling."""
        assert normalize_name("") == ""
        assert normalize_name(None) == ""

    def test_extra_whitespace(self):
        """Test whitespace normalization."""
        assert normalize_name("  Aaron   Judge  ") == "Aaron Judge"


class TestParseDate:
    """Tests for parse_date function."""

    def test_standard_formats(self):
        """Test standard date formats."""
        assert parse_date("12/25/2024") == date(2024, 12, 25)
        assert parse_date("2024-12-25") == date(2024, 12, 25)
        assert parse_date("December 25, 2024") == date(2024, 12, 25)

    def test_short_year(self):
        """Test two-digit year format."""
        result = parse_date("12/25/24")
        assert result is not None
        assert result.month == 12
        assert result.day == 25

    def test_invalid_date(self):
        """Test invalid date handling."""
        assert parse_date("not a date") is None
        assert parse_date("") is None
        assert parse_date(None) is None


class TestParseNumbers:
    """Tests for parse_int and parse_float functions."""

    def test_parse_int(self):
        """Test integer parsing with truncation."""
        assert parse_int("42") == 42
        assert parse_int(" 42 ") == 42
        assert parse_int("42.9") == 42
        assert parse_int("-3.5") == -3

    def test_parse_int_invalid(self):
        """Test invalid integer text."""
        assert parse_int("abc") is None
        assert parse_int("") is None
        assert parse_int("nan") is None
        assert parse_int("inf") is None

    def test_parse_float(self):
        """Test float parsing."""
        assert parse_float("0.850") == pytest.approx(0.85)
        assert parse_float(".305") == pytest.approx(0.305)
        assert parse_float("abc") is None
        assert parse_float("nan") is None

    def test_parse_float_infinite(self):
        """Test that infinite values are rejected."""
        assert parse_float("inf") is None
        assert parse_float("-Infinity") is None
        assert parse_float("1e400") is None


class TestSafeInt:
    """Tests for safe_int function."""

    def test_valid_integers(self):
        """Test valid integer conversion."""
        assert safe_int(42) == 42
        assert safe_int("42") == 42
        assert safe_int(42.9) == 42

    def test_invalid_values(self):
        """Test invalid value handling."""
        assert safe_int(None) == 0
        assert safe_int("") == 0
        assert safe_int("invalid") == 0

    def test_custom_default(self):
        """Test custom default value."""
        assert safe_int(None, -1) == -1
        assert safe_int("invalid", 99) == 99


class TestSafeFloat:
    """Tests for safe_float function."""

    def test_valid_floats(self):
        """Test valid float conversion."""
        assert safe_float(3.14) == 3.14
        assert safe_float("3.14") == 3.14
        assert safe_float(42) == 42.0

    def test_rate_strings(self):
        """Test API-style rate strings."""
        assert safe_float(".305") == pytest.approx(0.305)
        assert safe_float("50%") == 50.0

    def test_invalid_values(self):
        """Test invalid value handling."""
        assert safe_float(None) == 0.0
        assert safe_float("") == 0.0
        assert safe_float("-.--") == 0.0


class TestFirstInitial:
    """Tests for first_initial function."""

    def test_first_name_initial(self):
        """Test initial of the first name."""
        assert first_initial("Aaron Judge") == "A"
        assert first_initial("bobby Witt Jr.") == "B"

    def test_empty(self):
        """Test empty names."""
        assert first_initial("") == ""
        assert first_initial("   ") == ""


class TestFormatStat:
    """Tests for format_stat function."""

    def test_fixed_decimals(self):
        """Test rate stats with fixed decimals."""
        assert format_stat(0.85, 3) == "0.850"
        assert format_stat(1.1449, 3) == "1.145"

    def test_plain_values(self):
        """Test counting stats."""
        assert format_stat(52) == "52"
        assert format_stat(12.0) == "12"
        assert format_stat(29.6) == "29.6"
        assert format_stat(None) == ""

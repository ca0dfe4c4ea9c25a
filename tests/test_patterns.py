"""Tests for display pattern rendering."""

import pytest

from numfmt.errors import InvalidNumberError
from numfmt.patterns import NumberPattern, parse_pattern, render


def test_parse_pattern():
    """Test parsing of the supported pattern pieces."""
    assert parse_pattern("0,0") == NumberPattern(
        grouped=True, decimals=0, optional_decimals=0, abbreviated=False, percent=False
    )
    assert parse_pattern("0,0.00a") == NumberPattern(
        grouped=True, decimals=2, optional_decimals=0, abbreviated=True, percent=False
    )
    pattern = parse_pattern("0.0[00]%")
    assert not pattern.grouped
    assert pattern.places == 3
    assert pattern.percent


@pytest.mark.parametrize("pattern", ["", "0.", "#,##0", "0,0.[]", "0,0.00b", "0a,0"])
def test_parse_pattern_rejects_unknown(pattern):
    """Test that unsupported patterns raise ValueError."""
    with pytest.raises(ValueError):
        parse_pattern(pattern)


@pytest.mark.parametrize(
    "pattern, value, expected",
    [
        ("0,0", "1234567.5", "1,234,568"),
        ("0", "1234567.4", "1234567"),
        ("0,0.00", "1234.565", "1,234.57"),
        ("0,0.00", "-0.004", "0.00"),
        ("0,0.[0000]", "1.50000", "1.5"),
        ("0,0.[0000]", "2.00001", "2"),
        ("0.0[00]", "3", "3.0"),
        ("0,0.00a", "999", "999.00"),
        ("0,0.00a", "1000", "1.00k"),
        ("0,0.00a", "-2500000", "-2.50m"),
        ("0,0.00a", "7000000000", "7.00b"),
        ("0,0.[00]a", "999999999.999", "1b"),
        ("0,0.00a", "5000000000000000", "5,000.00t"),
        ("0,0.[00]%", "0.5", "50%"),
        ("0,0.00%", "0.123", "12.30%"),
    ],
)
def test_render(pattern, value, expected):
    """Test rendering values with patterns."""
    assert render(pattern, value) == expected


def test_render_invalid_value():
    """Test that a malformed value raises."""
    with pytest.raises(InvalidNumberError):
        render("0,0", "1,000")

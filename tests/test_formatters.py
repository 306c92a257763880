import pytest

from stock_bot.frontend.formatters import (
    format_field,
    format_indian_currency,
    format_number,
    format_percentage,
    format_ratio,
)


@pytest.mark.parametrize("value, expected", [
    (1234.56, "₹1,234.56"),
    (123456.78, "₹1.23 L"),
    (12345678.9, "₹1.23 Cr"),
    (14076543210000, "₹1,407,654.32 Cr"),
    (None, "N/A"),
])
def test_format_indian_currency(value, expected):
    assert format_indian_currency(value) == expected


def test_unscaled_currency_for_share_prices():
    assert format_indian_currency(131250.0, scale=False) == "₹131,250.00"


def test_format_percentage_passes_through_preformatted_strings():
    assert format_percentage(2.5) == "+2.50%"
    assert format_percentage(2.5, show_sign=False) == "2.50%"
    assert format_percentage(-1.5) == "-1.50%"
    assert format_percentage("+5.10%") == "+5.10%"


def test_format_number_and_ratio():
    assert format_number(1234567) == "1,234,567"
    assert format_number(1234567.0, decimals=0) == "1,234,567"
    assert format_ratio(29.4) == "29.40x"
    assert format_ratio(None) == "N/A"


@pytest.mark.parametrize("field, value, expected", [
    ("price", 3890.5, "₹3,890.50"),
    ("day_high", 150000.0, "₹150,000.00"),
    ("day_low", 3855.25, "₹3,855.25"),
    ("market_cap", 123456789, "₹12.35 Cr"),
    ("pe_ratio", 28.456, "28.46x"),
    ("volume", 1834021.0, "1,834,021"),
    ("change_percent", 7.85, "+7.85%"),
    ("symbol", "TCS", "TCS"),
    ("company_name", None, "N/A"),
    ("eps", 12.5, "12.5"),
])
def test_format_field_picks_by_name(field, value, expected):
    assert format_field(field, value) == expected

"""
Formatters for Stock Market Data

Format picked from the field name:
- price-like fields  → ₹ with Indian grouping
- market cap         → ₹ scaled to Cr / L
- change / percent   → signed percentage
- ratios             → 'x' suffix
- volume             → whole number with commas

Missing values always render as "N/A".
"""

from typing import Any, Callable, Optional, Union


Number = Union[int, float]


def format_indian_currency(value: Optional[Number], scale: bool = True) -> str:
    """
    Format number as Indian currency with ₹ symbol and optional Cr/L notation

    Examples:
        1234.56 → ₹1,234.56
        123456.78 → ₹1.23 L          (scale=True)
        12345678.90 → ₹1.23 Cr       (scale=True)
        123456.78 → ₹123,456.78      (scale=False)
    """
    if value is None:
        return "N/A"

    try:
        value = float(value)
    except (ValueError, TypeError):
        return str(value)

    if scale and abs(value) >= 10_000_000:  # 1 crore = 10 million
        return f"₹{value / 10_000_000:,.2f} Cr"
    elif scale and abs(value) >= 100_000:  # 1 lakh = 100k
        return f"₹{value / 100_000:,.2f} L"
    return f"₹{value:,.2f}"


def format_percentage(value: Optional[Number], show_sign: bool = True) -> str:
    """
    Format percentage with optional +/- sign

    Strings the API already formatted ("+2.35%") are passed through.
    """
    if value is None:
        return "N/A"

    try:
        value = float(value)
    except (ValueError, TypeError):
        return str(value)

    if show_sign:
        return f"{value:+.2f}%"
    return f"{value:.2f}%"


def format_number(value: Optional[Number], decimals: int = 2) -> str:
    """
    Format number with commas and configurable decimal places

    Examples:
        1234567 → 1,234,567
        1234567.0 → 1,234,567 (decimals=0)
        1234.5 → 1,234.50
    """
    if value is None:
        return "N/A"

    try:
        if isinstance(value, int) and not isinstance(value, bool):
            return f"{value:,}"
        value = float(value)
        return f"{value:,.{decimals}f}"
    except (ValueError, TypeError):
        return str(value)


def format_ratio(value: Optional[Number]) -> str:
    """
    Format ratio with 'x' suffix

    Examples:
        15.34 → 15.34x
    """
    if value is None:
        return "N/A"

    try:
        return f"{float(value):.2f}x"
    except (ValueError, TypeError):
        return str(value)


def format_text(value: Any) -> str:
    """Fallback formatter for text/unknown types"""
    if value is None:
        return "N/A"
    return str(value)


def get_formatter(field_name: str) -> Callable[[Any], str]:
    """
    Select formatter from the field name; unknown fields render as text

    Returns: Formatter function
    """
    field_lower = field_name.lower()

    if 'cap' in field_lower:
        return format_indian_currency
    elif any(x in field_lower for x in ['price', 'high', 'low']):
        return lambda v: format_indian_currency(v, scale=False)
    elif any(x in field_lower for x in ['change', 'percent']):
        return format_percentage
    elif 'ratio' in field_lower or field_lower == 'pe':
        return format_ratio
    elif 'volume' in field_lower:
        return lambda v: format_number(v, decimals=0)
    return format_text


def format_field(field_name: str, value: Any) -> str:
    """
    Main entry point for rendering one value

    Usage:
        format_field('price', 3245.5)            → "₹3,245.50"
        format_field('market_cap', 1123456789)   → "₹112.35 Cr"
        format_field('pe_ratio', 28.45)          → "28.45x"
        format_field('change_percent', 4.2)      → "+4.20%"
        format_field('volume', 1234567.0)        → "1,234,567"
    """
    return get_formatter(field_name)(value)

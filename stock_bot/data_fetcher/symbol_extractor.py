"""
Ticker extraction from free text

Best-effort only: the first run of one to four letters is taken as the
symbol. There is no lookup against a master list, so "what is TCS stock"
yields WHAT. Callers that need certainty must confirm the symbol elsewhere.
"""

import re
from typing import Optional


SYMBOL_PATTERN = re.compile(r'[A-Za-z]{1,4}')


def match_symbol(text: str) -> Optional[str]:
    """
    First ticker-like token, exactly as the user typed it

    Examples:
        "tcs stock"          → "tcs"
        "reliance share"     → "reli"
        "42"                 → None
    """
    if not text:
        return None
    match = SYMBOL_PATTERN.search(text)
    if not match:
        return None
    return match.group(0)


def extract_symbol(text: str) -> Optional[str]:
    """
    Pull a ticker-like token out of user text, ready for the quotes API

    Examples:
        "tcs stock"          → "TCS"
        "123 stock"          → "STOC"

    Args:
        text: Raw user input

    Returns:
        Uppercased token, or None if the text has no letters
    """
    token = match_symbol(text)
    return token.upper() if token else None

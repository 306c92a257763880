"""
Console Display Components

One renderer per outcome the router can produce. Everything user-facing
goes to stdout through print(); diagnostics go through logging instead.
"""

from typing import List

import pandas as pd

from ..models import GainerEntry, Result, StockQuote
from .formatters import format_field


BANNER = "💬 {name} Stock Bot (India) - Ask me about NSE/BSE stocks"
PROMPT = "You: "

GAINERS_HEADER = "Here are the top gainers on the NSE:"
GAINERS_UNAVAILABLE = "Sorry, I couldn't retrieve the top gainers data right now."
QUOTE_HEADER = "Here’s the real-time data for {symbol}:"
QUOTE_NOT_FOUND = "Sorry, no data found for the stock symbol: {symbol}"
SYMBOL_PROMPT = "Please provide a valid stock symbol."
GOODBYE = "👋 Exiting chat..."

# (field, label) in display order
QUOTE_FIELDS = [
    ('price', 'Price'),
    ('day_high', 'Daily High'),
    ('day_low', 'Daily Low'),
    ('market_cap', 'Market Cap'),
    ('pe_ratio', 'P/E Ratio'),
    ('volume', 'Volume'),
]

GAINER_COLUMNS = {
    'symbol': 'Symbol',
    'company_name': 'Company',
    'price': 'Price (₹)',
    'change_percent': 'Change %',
}


def display_banner(provider_name: str = "gemini"):
    name = "Gemini" if provider_name == "gemini" else provider_name.title()
    print(BANNER.format(name=name))


def render_gainers_table(entries: List[GainerEntry]) -> str:
    """
    Tabulate gainers with formatted values

    Returns:
        Plain-text table, one row per entry, in API order
    """
    rows = [
        {label: format_field(field, getattr(entry, field)) for field, label in GAINER_COLUMNS.items()}
        for entry in entries
    ]
    df = pd.DataFrame(rows, columns=list(GAINER_COLUMNS.values()))
    df.index = range(1, len(df) + 1)
    return df.to_string()


def display_top_gainers(result: Result):
    """Print the gainers table, or the unavailable message; never both"""
    if result.ok and result.data:
        print(GAINERS_HEADER)
        print(render_gainers_table(result.data))
    else:
        print(GAINERS_UNAVAILABLE)


def render_quote(symbol: str, quote: StockQuote) -> str:
    lines = [QUOTE_HEADER.format(symbol=symbol)]
    for field, label in QUOTE_FIELDS:
        value = format_field(field, getattr(quote, field))
        if field == 'pe_ratio':
            value += " (Price to Earnings ratio)"
        lines.append(f"  * {label}: {value}")
    return "\n".join(lines)


def display_stock_quote(symbol: str, result: Result):
    """Print the quote block; missing data and failures share one message"""
    if result.ok and result.data is not None:
        print(render_quote(symbol, result.data))
    else:
        print(QUOTE_NOT_FOUND.format(symbol=symbol))


def display_symbol_prompt():
    print(SYMBOL_PROMPT)


def display_chat_reply(result: Result):
    # Failures were already logged by the forwarder
    if result.ok:
        print(f"Bot: {result.data}\n")


def display_goodbye():
    print(GOODBYE)

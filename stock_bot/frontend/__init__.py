"""
Console frontend: value formatting and per-outcome renderers
"""

from .display_components import (
    PROMPT,
    display_banner,
    display_chat_reply,
    display_goodbye,
    display_stock_quote,
    display_symbol_prompt,
    display_top_gainers,
)
from .formatters import format_field

__all__ = [
    'PROMPT',
    'display_banner',
    'display_chat_reply',
    'display_goodbye',
    'display_stock_quote',
    'display_symbol_prompt',
    'display_top_gainers',
    'format_field',
]

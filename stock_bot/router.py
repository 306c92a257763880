"""
Input Router - one line of user text to one action

Dispatch is plain substring matching, checked in priority order:
    exit  →  "top gainers"  →  "stock" / "share"  →  blank  →  chat
Each line is handled on its own; the only thing carried between lines is
the chat history held by the session.
"""

import logging
from enum import Enum

from .data_fetcher import MarketDataFetcher, match_symbol
from .frontend import (
    display_chat_reply,
    display_goodbye,
    display_stock_quote,
    display_symbol_prompt,
    display_top_gainers,
)
from .llm import ChatForwarder, ChatSession


logger = logging.getLogger(__name__)


class Route(Enum):
    EXIT = "exit"
    TOP_GAINERS = "top_gainers"
    STOCK_QUOTE = "stock_quote"
    EMPTY = "empty"
    CHAT = "chat"


def classify_input(text: str) -> Route:
    """
    Decide which path handles a line

    Examples:
        "EXIT"                    → Route.EXIT
        " exit"                   → Route.CHAT
        "show me top gainers"     → Route.TOP_GAINERS
        "top gainers stock list"  → Route.TOP_GAINERS
        "tcs share price"         → Route.STOCK_QUOTE
        "what is a PE ratio?"     → Route.CHAT
    """
    lowered = text.lower()

    if lowered == 'exit':
        return Route.EXIT
    if 'top gainers' in lowered:
        return Route.TOP_GAINERS
    if 'stock' in lowered or 'share' in lowered:
        return Route.STOCK_QUOTE
    if not text.strip():
        return Route.EMPTY
    return Route.CHAT


class InputRouter:
    """
    Executes the route for each line and prints the outcome

    Dependencies are passed in so tests can swap the network for stubs.
    """

    def __init__(self, fetcher: MarketDataFetcher, forwarder: ChatForwarder, session: ChatSession):
        self.fetcher = fetcher
        self.forwarder = forwarder
        self.session = session

    def handle(self, text: str) -> bool:
        """
        Handle one line of input

        Args:
            text: Line as typed (without the trailing newline)

        Returns:
            False when the user asked to exit, True otherwise
        """
        route = classify_input(text)
        logger.debug(f"Routing {text!r} → {route.value}")

        if route is Route.EXIT:
            display_goodbye()
            return False

        if route is Route.TOP_GAINERS:
            display_top_gainers(self.fetcher.fetch_top_gainers())

        elif route is Route.STOCK_QUOTE:
            token = match_symbol(text)
            if token is None:
                display_symbol_prompt()
            else:
                # Shown as typed; the API gets it uppercased
                display_stock_quote(token, self.fetcher.fetch_quote(token.upper()))

        elif route is Route.CHAT:
            display_chat_reply(self.forwarder.forward(self.session, text))

        return True

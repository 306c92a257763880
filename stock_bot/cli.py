"""
Command-line entry point

Startup:
    [1/3] load configuration and logging
    [2/3] create the quotes client and the chat provider
    [3/3] seed the chat session and start the prompt loop
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Callable, Optional

from .config import Config, mask_key
from .data_fetcher import MarketDataFetcher
from .frontend import PROMPT, display_banner, display_goodbye
from .llm import ChatForwarder, ChatSession, create_provider
from .router import InputRouter


logger = logging.getLogger("stock_bot")

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(config: Config) -> logging.Logger:
    """
    Attach a stderr console handler, plus a rotating file handler when
    LOG_DIR is set

    The file gets everything at DEBUG; the console only shows LOG_LEVEL and
    above so routine chatter stays out of the conversation.
    """
    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter(LOG_FORMAT)

    if logger.handlers:
        return logger

    if config.LOG_DIR:
        os.makedirs(config.LOG_DIR, exist_ok=True)
        file_handler = RotatingFileHandler(
            os.path.join(config.LOG_DIR, "stock_bot.log"),
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(getattr(logging, config.LOG_LEVEL, logging.WARNING))
    logger.addHandler(console_handler)

    return logger


def run_loop(router: InputRouter, read: Optional[Callable[[str], str]] = None) -> int:
    """
    Prompt, handle, repeat until exit or end of input

    Returns:
        Process exit code (always 0)
    """
    read = read or input
    while True:
        try:
            line = read(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            display_goodbye()
            return 0

        if not router.handle(line):
            return 0


def build_router(config: Config) -> InputRouter:
    fetcher = MarketDataFetcher(config)
    logger.info(f"-> Quotes client ready ({config.STOCK_API_BASE})")

    provider = create_provider(config)
    logger.info(f"-> Chat provider ready ({provider.get_provider_name()})")

    return InputRouter(fetcher, ChatForwarder(provider), ChatSession.seeded())


def main() -> int:
    try:
        config = Config.from_env()
    except ValueError as e:
        # Defaults log to the console only
        configure_logging(Config())
        logger.error(f"Invalid configuration: {e}")
        return 1
    configure_logging(config)

    logger.info("=" * 60)
    logger.info("STOCK BOT - STARTING UP")
    logger.info("=" * 60)
    logger.debug(f"STOCK_API_KEY loaded: {mask_key(config.STOCK_API_KEY)}")
    for name in config.missing_keys():
        logger.warning(f"{name} not set. Requests that need it will fail.")

    try:
        router = build_router(config)
    except (ValueError, RuntimeError) as e:
        logger.error(f"Could not start chat provider: {e}")
        return 1

    display_banner(router.forwarder.provider_name)
    return run_loop(router)


if __name__ == "__main__":
    sys.exit(main())

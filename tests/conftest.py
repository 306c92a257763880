import logging

import pytest
import requests

from stock_bot.config import Config
from stock_bot.data_fetcher import MarketDataFetcher
from stock_bot.llm import ChatForwarder, ChatProvider, ChatSession
from stock_bot.models import Result
from stock_bot.router import InputRouter


_NO_JSON = object()


class FakeResponse:
    def __init__(self, payload=_NO_JSON, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error", response=self)

    def json(self):
        if self.payload is _NO_JSON:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


class FakeHttpSession:
    """Stands in for requests.Session; replays queued responses or errors"""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def queue(self, *responses):
        self.responses.extend(responses)

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({'url': url, 'params': params, 'headers': headers, 'timeout': timeout})
        if not self.responses:
            raise AssertionError(f"unexpected GET {url}")
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


class FakeProvider(ChatProvider):
    """Scripted chat backend that records every call"""

    def __init__(self, *results, name="gemini"):
        self.results = list(results)
        self.calls = []
        self.name = name

    def send_message(self, history, message):
        self.calls.append({'history': list(history), 'message': message})
        if self.results:
            return self.results.pop(0)
        return Result.success(f"echo: {message}")

    def get_provider_name(self):
        return self.name


@pytest.fixture
def config():
    return Config(
        stock_api_key='stock-test-key',
        gemini_api_key='gemini-test-key',
        stock_api_base='https://quotes.example.test/api/v3',
        request_timeout=5.0,
        log_dir='',
    )


@pytest.fixture
def http():
    return FakeHttpSession()


@pytest.fixture
def fetcher(config, http):
    return MarketDataFetcher(config, session=http)


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def session():
    return ChatSession.seeded("seed instruction")


@pytest.fixture
def router(fetcher, provider, session):
    return InputRouter(fetcher, ChatForwarder(provider), session)


@pytest.fixture(autouse=True)
def reset_stock_bot_logger():
    yield
    logger = logging.getLogger("stock_bot")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

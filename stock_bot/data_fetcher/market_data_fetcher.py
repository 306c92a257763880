"""
Market Data Fetcher - quotes and top gainers over HTTP

Both calls are read-only GETs against the financial quotes API, keyed by
an `apikey` query parameter. Nothing is cached: every call is one request.

Failures never escape as exceptions. They are logged and returned as a
failed Result so the console loop can carry on with the next line.
"""

import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from ..config import Config
from ..models import GainerEntry, Result, StockQuote


logger = logging.getLogger(__name__)


class MarketDataFetcher:
    """
    Thin client for the two endpoints the assistant answers directly

    Endpoints:
    - GET {base}/quote/{symbol}         → [ {price, dayHigh, ...} ]
    - GET {base}/stock_market/gainers   → [ {symbol, name, price, changesPercentage}, ... ]
    """

    QUOTE_PATH = '/quote/{symbol}'
    GAINERS_PATH = '/stock_market/gainers'

    def __init__(self, config: Config, session: Optional[requests.Session] = None):
        """
        Args:
            config: Runtime configuration (base URL, API key, timeout)
            session: HTTP session to use; a new requests.Session by default
        """
        self.config = config
        self.session = session or requests.Session()
        self.headers = {
            'Accept': 'application/json',
            'User-Agent': 'stock-bot/0.1 requests',
        }

    def fetch_quote(self, symbol: str) -> Result:
        """
        Fetch the real-time quote for one symbol

        Args:
            symbol: Uppercase ticker, passed through unvalidated

        Returns:
            Result.success(StockQuote) for the first element,
            Result.success(None) when the API has no data for the symbol,
            Result.failure(reason) on any network or payload error
        """
        try:
            payload = self._get_list(self.QUOTE_PATH.format(symbol=symbol))
            if not payload:
                logger.info(f"No quote data for {symbol}")
                return Result.success(None)
            return Result.success(StockQuote.from_api(payload[0]))
        except (requests.RequestException, ValueError, ValidationError) as e:
            logger.error(f"Error fetching stock data: {e}")
            return Result.failure(str(e))

    def fetch_top_gainers(self) -> Result:
        """
        Fetch today's top gainers

        Returns:
            Result.success([GainerEntry, ...]) (possibly empty),
            Result.failure(reason) on any network or payload error
        """
        try:
            payload = self._get_list(self.GAINERS_PATH)
            entries = [GainerEntry.from_api(item) for item in payload]
            logger.info(f"Fetched {len(entries)} top gainers")
            return Result.success(entries)
        except (requests.RequestException, ValueError, ValidationError) as e:
            logger.error(f"Error fetching top gainers data: {e}")
            return Result.failure(str(e))

    def _get_list(self, path: str) -> List[Dict[str, Any]]:
        """
        GET a path and require a JSON array back

        Raises:
            requests.RequestException: transport error or non-2xx status
            ValueError: body is not JSON, or not a list of objects
        """
        url = f"{self.config.STOCK_API_BASE}{path}"
        logger.debug(f"GET {url}")
        response = self.session.get(
            url,
            params={'apikey': self.config.STOCK_API_KEY},
            headers=self.headers,
            timeout=self.config.REQUEST_TIMEOUT,
        )
        response.raise_for_status()

        try:
            payload = response.json()
        except ValueError:
            raise ValueError(f"non-JSON response from {path}")

        if isinstance(payload, dict):
            # The API reports bad keys and plan limits as {"Error Message": "..."}
            message = payload.get('Error Message') or payload.get('error') or 'unexpected object response'
            raise ValueError(str(message))
        if not isinstance(payload, list):
            raise ValueError(f"unexpected {type(payload).__name__} response from {path}")
        if not all(isinstance(item, dict) for item in payload):
            raise ValueError(f"malformed items in response from {path}")
        return payload

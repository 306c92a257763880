"""
Data Fetcher Package

HTTP access to the quotes API plus the ticker sniffing used to route
stock questions to it
"""

from .market_data_fetcher import MarketDataFetcher
from .symbol_extractor import extract_symbol, match_symbol

__all__ = ['MarketDataFetcher', 'extract_symbol', 'match_symbol']

"""
Stock Bot (India)

Command-line assistant for NSE/BSE questions: quotes and top gainers come
straight from the quotes API, everything else goes to a chat model.
"""

from .config import Config
from .router import InputRouter, Route, classify_input

__version__ = "0.1.0"

__all__ = ['Config', 'InputRouter', 'Route', 'classify_input', '__version__']

"""
Runtime configuration

All keys and tunables come from the environment (or a .env file) and are
collected once into a Config object that is handed to whoever needs it.
"""

import os
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv


DEFAULT_STOCK_API_BASE = 'https://financialmodelingprep.com/api/v3'
DEFAULT_GEMINI_MODEL = 'gemini-2.0-flash'
DEFAULT_GROQ_MODEL = 'llama-3.3-70b-versatile'
DEFAULT_REQUEST_TIMEOUT = 30.0


class Config:
    def __init__(self,
                 stock_api_key: str = '',
                 gemini_api_key: str = '',
                 groq_api_key: str = '',
                 llm_provider: str = 'gemini',
                 gemini_model: str = DEFAULT_GEMINI_MODEL,
                 groq_model: str = DEFAULT_GROQ_MODEL,
                 stock_api_base: str = DEFAULT_STOCK_API_BASE,
                 request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
                 log_dir: str = '',
                 log_level: str = 'WARNING'):
        self.STOCK_API_KEY = stock_api_key
        self.GEMINI_API_KEY = gemini_api_key
        self.GROQ_API_KEY = groq_api_key
        self.LLM_PROVIDER = llm_provider
        self.GEMINI_MODEL = gemini_model
        self.GROQ_MODEL = groq_model
        self.STOCK_API_BASE = stock_api_base.rstrip('/')
        self.REQUEST_TIMEOUT = request_timeout
        self.LOG_DIR = log_dir
        self.LOG_LEVEL = log_level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, load_env_file: bool = True) -> 'Config':
        """
        Build a Config from environment variables

        Args:
            environ: Mapping to read from (defaults to os.environ)
            load_env_file: Load a .env file into os.environ first

        Returns:
            Config instance
        """
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True))
        env = os.environ if environ is None else environ

        timeout_raw = env.get('REQUEST_TIMEOUT', '')
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_REQUEST_TIMEOUT
        except ValueError:
            raise ValueError(f"REQUEST_TIMEOUT must be a number, got {timeout_raw!r}")

        return cls(
            stock_api_key=env.get('STOCK_API_KEY', '').strip(),
            gemini_api_key=env.get('GEMINI_API_KEY', '').strip(),
            groq_api_key=env.get('GROQ_API_KEY', '').strip(),
            llm_provider=(env.get('LLM_PROVIDER') or 'gemini').strip().lower(),
            gemini_model=env.get('GEMINI_MODEL') or DEFAULT_GEMINI_MODEL,
            groq_model=env.get('GROQ_MODEL') or DEFAULT_GROQ_MODEL,
            stock_api_base=env.get('STOCK_API_BASE') or DEFAULT_STOCK_API_BASE,
            request_timeout=timeout,
            log_dir=env.get('LOG_DIR', ''),
            log_level=(env.get('LOG_LEVEL') or 'WARNING').upper(),
        )

    def missing_keys(self) -> list:
        """Names of the API keys the selected setup needs but does not have"""
        missing = []
        if not self.STOCK_API_KEY:
            missing.append('STOCK_API_KEY')
        if self.LLM_PROVIDER in ('gemini', 'hybrid') and not self.GEMINI_API_KEY:
            missing.append('GEMINI_API_KEY')
        if self.LLM_PROVIDER in ('groq', 'hybrid') and not self.GROQ_API_KEY:
            missing.append('GROQ_API_KEY')
        return missing


def mask_key(key: str) -> str:
    """Show only the last four characters of a secret"""
    if not key:
        return '<unset>'
    if len(key) <= 4:
        return '*' * len(key)
    return '*' * (len(key) - 4) + key[-4:]

"""
LLM Provider Abstraction Layer

- Provider interface so the chat backend can be swapped from config
- Gemini provider (default)
- Groq provider (OpenAI-compatible chat completions)
- Hybrid provider (Groq first, Gemini on failure)

Providers are stateless with respect to the conversation: the caller owns
the history and passes it in on every call.

Usage:
    provider = create_provider(config)
    result = provider.send_message(history, "What is a PE ratio?")
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

import google.generativeai as genai
from groq import Groq

from ..config import Config, DEFAULT_GEMINI_MODEL, DEFAULT_GROQ_MODEL
from ..models import ChatTurn, Result, turns_to_gemini


logger = logging.getLogger(__name__)


class ChatProvider(ABC):
    """
    Abstract base class for chat backends

    All providers must implement send_message()
    """

    @abstractmethod
    def send_message(self, history: List[ChatTurn], message: str) -> Result:
        """
        Send one user message after the given prior turns

        Args:
            history: Prior turns, oldest first (not modified)
            message: New user message

        Returns:
            Result.success(reply_text) or Result.failure(reason)
        """
        pass

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return provider name"""
        pass


class GeminiProvider(ChatProvider):
    """Gemini chat via google-generativeai"""

    def __init__(self, api_key: str, model_name: str = DEFAULT_GEMINI_MODEL):
        self.api_key = api_key
        self.model_name = model_name

        genai.configure(api_key=self.api_key)

        # Lazy initialization
        self.model = None

    def _ensure_model_initialized(self):
        if self.model is None:
            self.model = genai.GenerativeModel(model_name=self.model_name)

    def send_message(self, history: List[ChatTurn], message: str) -> Result:
        try:
            self._ensure_model_initialized()

            # A fresh chat per call, rebuilt from the caller's history
            chat = self.model.start_chat(history=turns_to_gemini(history))
            response = chat.send_message(message)

            # .text raises ValueError when the candidate was blocked or empty
            text = response.text
            if not text:
                return Result.failure("Empty response from Gemini")
            return Result.success(text)

        except Exception as e:
            return Result.failure(f"Gemini request failed: {e}")

    def get_provider_name(self) -> str:
        return "gemini"


class GroqProvider(ChatProvider):
    """Groq chat completions provider"""

    def __init__(self, api_key: Optional[str], model_name: str = DEFAULT_GROQ_MODEL):
        if not api_key:
            raise ValueError("GROQ_API_KEY not found in config")

        self.api_key = api_key
        self.model_name = model_name
        self.client = Groq(api_key=self.api_key)

    def send_message(self, history: List[ChatTurn], message: str) -> Result:
        messages = [turn.to_openai() for turn in history]
        messages.append({"role": "user", "content": message})

        try:
            response = self.client.chat.completions.create(
                model=self.model_name,
                messages=messages,
            )
            content = response.choices[0].message.content
            if not content:
                return Result.failure("Empty response from Groq")
            return Result.success(content)

        except Exception as e:
            return Result.failure(f"Groq request failed: {e}")

    def get_provider_name(self) -> str:
        return "groq"


class HybridProvider(ChatProvider):
    """
    Hybrid provider with automatic fallback

    Tries Groq first, falls back to Gemini on failure. Works because the
    history lives with the caller, so either backend can pick up the
    conversation.
    """

    def __init__(self, groq: Optional[ChatProvider], gemini: Optional[ChatProvider]):
        if groq is None and gemini is None:
            raise RuntimeError("Neither Groq nor Gemini available. Configure at least one provider.")
        self.groq = groq
        self.gemini = gemini

    def send_message(self, history: List[ChatTurn], message: str) -> Result:
        if self.groq is not None:
            result = self.groq.send_message(history, message)
            if result.ok:
                return result
            logger.warning(f"Groq failed, falling back to Gemini: {result.error}")

        if self.gemini is not None:
            return self.gemini.send_message(history, message)

        return Result.failure("Both Groq and Gemini failed")

    def get_provider_name(self) -> str:
        if self.groq is not None and self.gemini is not None:
            return "hybrid (groq+gemini)"
        elif self.groq is not None:
            return "groq"
        return "gemini"


def create_provider(config: Config) -> ChatProvider:
    """
    Factory function to create the chat provider named by config.LLM_PROVIDER

    Args:
        config: Runtime configuration

    Returns:
        ChatProvider instance

    Raises:
        ValueError: unknown provider type, or Groq selected without a key
    """
    provider_type = config.LLM_PROVIDER

    if provider_type == 'gemini':
        return GeminiProvider(config.GEMINI_API_KEY, config.GEMINI_MODEL)
    elif provider_type == 'groq':
        return GroqProvider(config.GROQ_API_KEY, config.GROQ_MODEL)
    elif provider_type == 'hybrid':
        groq = None
        if config.GROQ_API_KEY:
            groq = GroqProvider(config.GROQ_API_KEY, config.GROQ_MODEL)
        else:
            logger.warning("GROQ_API_KEY not set; hybrid provider will use Gemini only")
        gemini = GeminiProvider(config.GEMINI_API_KEY, config.GEMINI_MODEL)
        return HybridProvider(groq, gemini)
    else:
        raise ValueError(f"Unknown provider type: {provider_type}. Use 'gemini', 'groq', or 'hybrid'")

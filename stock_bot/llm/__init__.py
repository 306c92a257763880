"""
LLM Integration Module

Conversational fallback for anything the assistant cannot answer from the
quotes API directly
"""

from .chat_forwarder import ChatForwarder, ChatSession
from .prompts import SYSTEM_INSTRUCTION
from .providers import (
    ChatProvider,
    GeminiProvider,
    GroqProvider,
    HybridProvider,
    create_provider,
)

__all__ = [
    'ChatForwarder',
    'ChatSession',
    'SYSTEM_INSTRUCTION',
    'ChatProvider',
    'GeminiProvider',
    'GroqProvider',
    'HybridProvider',
    'create_provider',
]

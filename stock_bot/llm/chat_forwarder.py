"""
Chat Forwarder - free-text questions to the conversational model

The conversation is held here, on the caller's side, as an ordered list of
turns. The forwarder sends the prior turns with every message and records
the exchange only when the model actually answered.
"""

import logging
from typing import List, Optional

from ..models import ChatTurn, Result
from .prompts import SYSTEM_INSTRUCTION
from .providers import ChatProvider


logger = logging.getLogger(__name__)


class ChatSession:
    """
    Ordered conversation history for one process

    The first turn is always the seed instruction, sent as a user message.
    """

    def __init__(self, turns: Optional[List[ChatTurn]] = None):
        self.turns: List[ChatTurn] = list(turns or [])

    @classmethod
    def seeded(cls, instruction: str = SYSTEM_INSTRUCTION) -> 'ChatSession':
        return cls([ChatTurn(role='user', text=instruction)])

    def append_exchange(self, user_text: str, reply_text: str):
        self.turns.append(ChatTurn(role='user', text=user_text))
        self.turns.append(ChatTurn(role='model', text=reply_text))

    def __len__(self) -> int:
        return len(self.turns)


class ChatForwarder:
    """
    Sends user text to a ChatProvider within a ChatSession

    Example:
        forwarder = ChatForwarder(create_provider(config))
        session = ChatSession.seeded()
        result = forwarder.forward(session, "What does PE ratio mean?")
        if result.ok:
            print(result.data)
    """

    def __init__(self, provider: ChatProvider):
        self.provider = provider
        self.provider_name = provider.get_provider_name()

    def forward(self, session: ChatSession, text: str) -> Result:
        """
        Send text as the next user turn

        Args:
            session: Conversation to continue; extended on success only
            text: Verbatim user input

        Returns:
            Result.success(reply_text) or Result.failure(reason)
        """
        logger.info(f"[CHAT] Query via {self.provider_name} ({len(session)} prior turns)")

        # Snapshot so a provider can never mutate the session
        result = self.provider.send_message(list(session.turns), text)

        if not result.ok:
            logger.error(f"❌ Error: {result.error}")
            return result

        session.append_exchange(text, result.data)
        return result

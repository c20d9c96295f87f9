"""Caramel AI chatbot service using Gemini with Google Search grounding"""

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from langchain_core.runnables import Runnable

from social_pulse.core.config import settings
from social_pulse.schemas.chat import (
    ChatMessage,
    GroundingChunk,
    GroundingChunkWeb,
    ProcessedResponse,
)
from social_pulse.services.llm import build_chat_model, message_text

logger = logging.getLogger(__name__)


DEMO_MODE_MESSAGE = (
    "I'm currently in a demo mode as the API key is not set. "
    "I can't process your request right now."
)


class ChatSession:
    """One conversation with the model; every turn is sent with the full history"""

    def __init__(self, model: Runnable, system_instruction: str):
        self.model = model
        self.system_instruction = system_instruction
        self.messages: List[BaseMessage] = []

    async def send_message(self, message: str) -> BaseMessage:
        pending = self.messages + [HumanMessage(content=message)]
        response = await self.model.ainvoke([SystemMessage(content=self.system_instruction)] + pending)
        # History only grows once the turn succeeded
        self.messages = pending + [response]
        return response


class ChatSessionHandle:
    """Owner of the current chat session"""

    def __init__(self, factory: Callable[[], ChatSession]):
        self._factory = factory
        self._session: Optional[ChatSession] = None

    @property
    def session(self) -> Optional[ChatSession]:
        return self._session

    def create(self) -> ChatSession:
        self._session = self._factory()
        return self._session

    def get_or_create(self) -> ChatSession:
        if self._session is None:
            return self.create()
        return self._session

    def invalidate(self) -> None:
        self._session = None


def extract_sources(response: BaseMessage) -> List[GroundingChunk]:
    """
    Collect web sources from a grounded reply.

    Only chunks carrying both a URI and a title are kept.
    """
    metadata: Dict[str, Any] = getattr(response, "response_metadata", None) or {}
    grounding = metadata.get("grounding_metadata") or metadata.get("groundingMetadata") or {}
    chunks = grounding.get("grounding_chunks") or grounding.get("groundingChunks") or []

    sources = []
    for chunk in chunks:
        web = chunk.get("web") if isinstance(chunk, dict) else None
        if not isinstance(web, dict):
            continue
        uri, title = web.get("uri"), web.get("title")
        if isinstance(uri, str) and isinstance(title, str):
            sources.append(GroundingChunk(web=GroundingChunkWeb(uri=uri, title=title)))
    return sources


class ChatService:
    """
    Chatbot turn handler.

    Unlike SentimentService, errors are not turned into data: a failed turn
    invalidates the session and re-raises, so the next turn starts fresh.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[Runnable] = None,
        session_handle: Optional[ChatSessionHandle] = None,
        system_instruction: Optional[str] = None,
    ):
        self.api_key = settings.GOOGLE_API_KEY if api_key is None else api_key
        self.system_instruction = system_instruction or settings.CHAT_SYSTEM_INSTRUCTION
        self.model = model
        if self.model is None and self.api_key:
            self.model = build_chat_model(self.api_key, temperature=0.7).bind_tools(
                [{"google_search": {}}]
            )
        self.session_handle = session_handle or ChatSessionHandle(self._new_session)

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _new_session(self) -> ChatSession:
        return ChatSession(self.model, self.system_instruction)

    def reset(self) -> None:
        """Discard the current conversation"""
        self.session_handle.invalidate()

    async def respond(self, history: Sequence[ChatMessage], new_message: str) -> ProcessedResponse:
        """
        Answer a chat message.

        Args:
            history: Messages already shown to the user. The session keeps
                its own conversation, so they are not replayed.
            new_message: The user's new message

        Returns:
            Reply text and the web sources it cites

        Raises:
            Exception: Any model error, after the session was invalidated
        """
        if not self.is_configured:
            logger.warning("API Key not found. Returning mock chatbot response.")
            return ProcessedResponse(text=DEMO_MODE_MESSAGE, sources=[])

        chat = self.session_handle.get_or_create()
        try:
            response = await chat.send_message(new_message)
        except Exception as e:
            logger.exception(f"Error calling Gemini API for chatbot response: {e}")
            self.session_handle.invalidate()
            raise

        return ProcessedResponse(text=message_text(response), sources=extract_sources(response))


# Singleton instance
_chat_service_instance: Optional[ChatService] = None


def get_chat_service() -> ChatService:
    """Get or create chat service singleton instance"""
    global _chat_service_instance
    if _chat_service_instance is None:
        _chat_service_instance = ChatService()
    return _chat_service_instance

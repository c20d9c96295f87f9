# Services for business logic
from social_pulse.services.sentiment_service import SentimentService, get_sentiment_service
from social_pulse.services.chat_service import (
    ChatService,
    ChatSession,
    ChatSessionHandle,
    get_chat_service,
)

__all__ = [
    "SentimentService", "get_sentiment_service",
    "ChatService", "ChatSession", "ChatSessionHandle", "get_chat_service",
]

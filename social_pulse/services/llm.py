"""Gemini chat model construction via Langchain"""

from typing import Any, Optional

from langchain_core.messages import BaseMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from social_pulse.core.config import settings


def build_chat_model(
    api_key: str,
    temperature: Optional[float] = None,
    **kwargs: Any,
) -> ChatGoogleGenerativeAI:
    """
    Create the Gemini chat model used by the services.

    Args:
        api_key: Google API key
        temperature: Sampling temperature, defaults to GEMINI_TEMPERATURE
        **kwargs: Extra ChatGoogleGenerativeAI options (e.g. response_mime_type)
    """
    return ChatGoogleGenerativeAI(
        model=settings.GEMINI_TEXT_MODEL,
        google_api_key=api_key,
        temperature=settings.GEMINI_TEMPERATURE if temperature is None else temperature,
        max_retries=1,  # single best-effort attempt
        **kwargs,
    )


def message_text(message: BaseMessage) -> str:
    """Text of a model reply; multi-part content is joined in order."""
    content = message.content
    if isinstance(content, str):
        return content

    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type", "text") == "text" and part.get("text"):
            parts.append(part["text"])
    return "".join(parts)

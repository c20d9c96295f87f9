"""Chatbot Router - HTTP POST API for the Caramel AI assistant

The assistant keeps one conversation on the server. A failed turn resets it,
so the next message starts a new conversation.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from social_pulse.schemas.chat import ChatRequest, ProcessedResponse
from social_pulse.schemas.common import MessageResponse
from social_pulse.services.chat_service import ChatService, get_chat_service


router = APIRouter(
    prefix="/chat",
    tags=["Chatbot"],
    responses={404: {"description": "Not found"}},
)
logger = logging.getLogger("router.chat")


@router.post("", response_model=ProcessedResponse)
async def chat(
    request: ChatRequest,
    service: ChatService = Depends(get_chat_service),
):
    """
    Chat with Caramel AI about sentiment results and social media marketing.

    Replies grounded with Google Search include their web sources.
    Without an API key a fixed demo-mode reply is returned.
    """
    try:
        return await service.respond(request.history, request.message)
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Chatbot error: {str(e)}"
        )


@router.delete("/session", response_model=MessageResponse)
async def reset_session(service: ChatService = Depends(get_chat_service)):
    """
    Discard the current conversation.
    """
    service.reset()
    logger.info("Chat session reset")
    return MessageResponse(message="Chat session reset successfully")


@router.get("/debug")
async def chat_debug(service: ChatService = Depends(get_chat_service)):
    return {
        "google_api_key_present": service.is_configured,
        "session_active": service.session_handle.session is not None,
        "message_count": len(service.session_handle.session.messages) if service.session_handle.session else 0,
    }

"""Chatbot API Schemas for Request/Response"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """A message shown in the chat widget"""
    id: str
    text: str
    sender: Literal["user", "bot"]
    timestamp: float
    avatar: Optional[str] = None


class GroundingChunkWeb(BaseModel):
    uri: str
    title: str


class GroundingChunk(BaseModel):
    """Web source cited by a grounded answer"""
    web: GroundingChunkWeb


class ChatRequest(BaseModel):
    """Request schema for the chatbot endpoint"""
    history: List[ChatMessage] = Field(
        default_factory=list,
        description="Messages already shown in the widget. Not replayed; the server keeps the conversation until it is reset or a turn fails."
    )
    message: str = Field(
        ...,
        min_length=1,
        max_length=5000,
        description="User's message to the assistant",
        examples=["How can I improve engagement on negative comments?"]
    )


class ProcessedResponse(BaseModel):
    """Response schema for the chatbot endpoint"""
    text: str = Field(
        ...,
        description="Assistant's reply"
    )
    sources: List[GroundingChunk] = Field(
        default_factory=list,
        description="Web sources used to ground the reply"
    )

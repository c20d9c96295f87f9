from social_pulse.schemas.sentiment import (
    Sentiment,
    LanguageCode,
    SUPPORTED_LANGUAGES,
    AnalysisResult,
    AnalyzeRequest,
    AnalyzeTextRequest,
    AnalysisSummary,
    LanguageGroupEntry,
    AnalyzeResponse,
)
from social_pulse.schemas.chat import (
    ChatMessage,
    GroundingChunkWeb,
    GroundingChunk,
    ChatRequest,
    ProcessedResponse,
)
from social_pulse.schemas.common import MessageResponse

__all__ = [
    "Sentiment",
    "LanguageCode",
    "SUPPORTED_LANGUAGES",
    "AnalysisResult",
    "AnalyzeRequest",
    "AnalyzeTextRequest",
    "AnalysisSummary",
    "LanguageGroupEntry",
    "AnalyzeResponse",
    "ChatMessage",
    "GroundingChunkWeb",
    "GroundingChunk",
    "ChatRequest",
    "ProcessedResponse",
    "MessageResponse",
]

"""Pydantic schemas for sentiment analysis"""

from enum import Enum
from typing import Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field


class Sentiment(str, Enum):
    """Sentiment labels. NONE is a "no data yet" placeholder and is never produced by analysis."""
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"
    ERROR = "Error"
    NONE = "None"


LanguageCode = Literal["en", "fr", "de", "es", "hi", "unknown"]

SUPPORTED_LANGUAGES: Dict[str, str] = {
    "en": "English",
    "fr": "French",
    "de": "German",
    "es": "Spanish",
    "hi": "Hindi",
    "unknown": "Unknown",
}


class AnalysisResult(BaseModel):
    """Analysis of a single input text"""

    model_config = ConfigDict(populate_by_name=True)

    sentiment: Sentiment = Field(
        description="Positive, Negative, Neutral, or Error when the text could not be analyzed"
    )

    score: float = Field(
        ge=0.0,
        le=1.0,
        description="Confidence in the sentiment (0.0 to 1.0)"
    )

    emotions: List[str] = Field(
        default_factory=list,
        max_length=3,
        description="Up to 3 dominant emotions"
    )

    keywords: List[str] = Field(
        default_factory=list,
        max_length=5,
        description="Up to 5 keywords, or the error detail when sentiment is Error"
    )

    detected_language: LanguageCode = Field(
        default="unknown",
        alias="detectedLanguage",
        description="Language code of the text"
    )


class AnalyzeRequest(BaseModel):
    """Input schema for batch sentiment analysis"""

    texts: List[str] = Field(
        ...,
        min_length=1,
        description="Texts to analyze; results are returned in the same order",
        examples=[["I love this product!", "C'est terrible.", "Das ist okay."]]
    )


class AnalyzeTextRequest(BaseModel):
    """Input schema for analysis of free text, one comment per line"""

    text: str = Field(
        ...,
        min_length=1,
        description="Free text; each non-blank line is analyzed separately"
    )


class AnalysisSummary(BaseModel):
    """Aggregate view of a batch of results"""

    overall_sentiment: Sentiment = Field(
        description="Weighted overall sentiment, ignoring Error items"
    )

    overall_score: float = Field(
        ge=0.0,
        le=1.0,
        description="Absolute value of the weighted mean score"
    )

    distribution: Dict[str, int] = Field(
        default_factory=dict,
        description="Number of results per sentiment"
    )

    languages: Dict[str, str] = Field(
        default_factory=dict,
        description="Detected language codes mapped to display names"
    )


class LanguageGroupEntry(BaseModel):
    """One analyzed text inside a language group"""

    index: int = Field(ge=0, description="Position of the text in the batch")
    text: str
    result: AnalysisResult


class AnalyzeResponse(BaseModel):
    """Output schema for batch sentiment analysis"""

    results: List[AnalysisResult]
    summary: AnalysisSummary
    by_language: Dict[str, List[LanguageGroupEntry]] = Field(
        default_factory=dict,
        description="Results grouped by detected language (en, fr, de, es, hi, unknown, then others)"
    )

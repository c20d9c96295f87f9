"""
Sentiment Analysis Router

Analyzes batches of texts (comments, posts, reviews) with Gemini and returns
per-text sentiment, emotions, keywords and language, plus a batch summary.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
import logging

from social_pulse.core.config import settings
from social_pulse.schemas.sentiment import (
    SUPPORTED_LANGUAGES,
    AnalyzeRequest,
    AnalyzeResponse,
    AnalyzeTextRequest,
    LanguageGroupEntry,
)
from social_pulse.services.sentiment_service import SentimentService, get_sentiment_service
from social_pulse.utils.sentiment_summary import group_by_language, summarize
from social_pulse.utils.text_batch import split_input_text

router = APIRouter(prefix="/sentiment", tags=["Sentiment Analysis"])
logger = logging.getLogger("router.sentiment")


def _check_batch_size(texts: List[str]) -> None:
    if len(texts) > settings.MAX_BATCH_TEXTS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Too many texts. Maximum {settings.MAX_BATCH_TEXTS} texts per batch."
        )


async def _analyze(texts: List[str], service: SentimentService) -> AnalyzeResponse:
    _check_batch_size(texts)
    results = await service.analyze(texts)
    logger.info(f"Analyzed batch of {len(texts)} texts (mock={not service.is_configured})")
    by_language = {
        code: [LanguageGroupEntry(index=index, text=text, result=result) for index, text, result in entries]
        for code, entries in group_by_language(texts, results).items()
    }
    return AnalyzeResponse(results=results, summary=summarize(results), by_language=by_language)


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze_texts(
    input_data: AnalyzeRequest,
    service: SentimentService = Depends(get_sentiment_service),
):
    """
    Analyze a batch of texts

    Returns one result per text, in the same order:
    - sentiment: Positive, Negative, Neutral, or Error
    - score: confidence (0.0 to 1.0)
    - emotions: up to 3 dominant emotions
    - keywords: up to 5 keywords (error detail for Error results)
    - detectedLanguage: en, fr, de, es, hi, or unknown

    Model failures never fail the request; affected texts come back as Error results.
    """
    return await _analyze(input_data.texts, service)


@router.post("/analyze-text", response_model=AnalyzeResponse)
async def analyze_text(
    input_data: AnalyzeTextRequest,
    service: SentimentService = Depends(get_sentiment_service),
):
    """
    Analyze free text, one comment per line

    Blank lines are ignored and each remaining line is analyzed as its own text.
    """
    texts = split_input_text(input_data.text)
    if not texts:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please enter some text to analyze, one comment per line."
        )
    return await _analyze(texts, service)


@router.get("/languages")
async def get_languages():
    return {"languages": SUPPORTED_LANGUAGES}


@router.get("/debug")
async def sentiment_debug(service: SentimentService = Depends(get_sentiment_service)):
    """
    Get debug information about sentiment analysis service
    """
    return {
        "service": "Gemini Sentiment Analysis",
        "google_api_key_present": service.is_configured,
        "mode": "live" if service.is_configured else "mock",
        "model": settings.GEMINI_TEXT_MODEL,
        "max_batch_texts": settings.MAX_BATCH_TEXTS,
    }

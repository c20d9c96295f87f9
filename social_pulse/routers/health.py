from fastapi import APIRouter, Depends

from social_pulse.core.config import settings
from social_pulse.services.sentiment_service import SentimentService, get_sentiment_service

router = APIRouter(tags=["Health"])


@router.get("/")
async def service_info(service: SentimentService = Depends(get_sentiment_service)):
    """Service overview: analysis mode, Gemini model and batch limit"""
    return {
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "analysis_mode": "live" if service.is_configured else "mock",
        "model": settings.GEMINI_TEXT_MODEL,
        "max_batch_texts": settings.MAX_BATCH_TEXTS,
        "endpoints": ["/sentiment/analyze", "/sentiment/analyze-text", "/chat"],
    }


@router.get("/health")
async def health_check():
    return {"status": "healthy"}

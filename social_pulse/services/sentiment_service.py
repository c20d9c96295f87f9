"""
Batch sentiment analysis service using Gemini through Langchain.

A whole batch of texts goes to the model in a single request and the reply is
normalized into one AnalysisResult per text, in input order. The service never
raises: without an API key it returns mock results, and when the call or the
reply parsing fails it returns one Error result per text.
"""

import json
import logging
import random
from typing import List, Optional, Sequence

from langchain_core.language_models import BaseChatModel
from langchain_core.prompts import ChatPromptTemplate

from social_pulse.core.config import settings
from social_pulse.schemas.sentiment import SUPPORTED_LANGUAGES, AnalysisResult, Sentiment
from social_pulse.services.llm import build_chat_model, message_text
from social_pulse.utils.response_normalizer import batch_error_results, normalize_reply

logger = logging.getLogger(__name__)


MOCK_SENTIMENTS = [Sentiment.POSITIVE, Sentiment.NEGATIVE, Sentiment.NEUTRAL]
MOCK_EMOTIONS = [["joy", "excitement"], ["anger", "frustration"], ["calm", "indifferent"]]
MOCK_LANGUAGES = list(SUPPORTED_LANGUAGES)


ANALYSIS_PROMPT = ChatPromptTemplate.from_messages([
    (
        "human",
        """Your entire response MUST be a single, valid JSON array, with no other text, comments, or explanations, neither before, after, nor interleaved within the JSON structure.
Analyze the sentiment and detect the language of each text in the following JSON array:
{texts_json}

You MUST return ONLY this single, valid JSON array. Each element in the array must be an object corresponding to the analysis of the text at the same index in the input array. The array MUST have exactly as many elements as the input array, in the same order.
Each JSON object in the array must strictly adhere to this exact structure, with no additional fields or conversational text:
{{
  "detectedLanguage": "en" | "fr" | "de" | "es" | "hi" | "unknown",
  "sentiment": "Positive" | "Negative" | "Neutral",
  "score": float,
  "emotions": ["emotion1", "emotion2", ...],
  "keywords": ["keyword1", "keyword2", ...]
}}
Detailed field requirements:
- "detectedLanguage": Detect the language of the text. It MUST be one of "en" (English), "fr" (French), "de" (German), "es" (Spanish), "hi" (Hindi). If the language is not one of these or is unclear, return "unknown". The value must be only the language code string.
- "sentiment": Based on the detected language, determine if the sentiment is "Positive", "Negative", or "Neutral". The value must be only the sentiment string.
- "score": Must be a float between 0.0 and 1.0, representing confidence in the sentiment analysis. The value must be only the number.
- "emotions": Based on the detected language, provide a single, final array of strings, containing up to 3 dominant emotions (e.g., joy, anger, sadness, fear, surprise, love, excitement, frustration, calm, indifferent). If no specific emotions, return an empty array.
- "keywords": Based on the detected language, provide a single, final array of strings, containing up to 5 relevant keywords from the text. Exclude common stop words. If no keywords, return an empty array. Do not output multiple "keywords" fields or any processing notes.

If a specific text cannot be analyzed or results in an error, you MUST return a JSON object for that text strictly adhering to: {{"detectedLanguage": (the detected language, or "unknown" if detection failed), "sentiment": "Error", "score": 0, "emotions": [], "keywords": ["error detail if any"]}}. Never omit an element.
Ensure the entire response is exclusively this single JSON array of result objects. No extra text, comments, processing notes, or explanations are allowed."""
    )
])


class SentimentService:
    """Service for batch sentiment, emotion, keyword and language analysis"""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[BaseChatModel] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Args:
            api_key: Google API key, defaults to GOOGLE_API_KEY. Empty means mock mode.
            model: Chat model to call instead of the default Gemini model
            rng: Random source for mock results
        """
        self.api_key = settings.GOOGLE_API_KEY if api_key is None else api_key
        self.rng = rng or random.Random()
        self.model = model
        if self.model is None and self.api_key:
            self.model = build_chat_model(self.api_key, response_mime_type="application/json")

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _mock_result(self, text: str) -> AnalysisResult:
        index = self.rng.randrange(len(MOCK_SENTIMENTS))
        return AnalysisResult(
            sentiment=MOCK_SENTIMENTS[index],
            score=self.rng.random() * 0.4 + 0.6,
            emotions=list(MOCK_EMOTIONS[index]),
            keywords=["mock", text[:10], "example"],
            detected_language=self.rng.choice(MOCK_LANGUAGES),
        )

    async def analyze(self, texts: Sequence[str]) -> List[AnalysisResult]:
        """
        Analyze a batch of texts with a single model request.

        Args:
            texts: Texts to analyze

        Returns:
            One result per text, in the same order
        """
        texts = list(texts)
        if not texts:
            return []

        if not self.is_configured:
            logger.warning("API Key not found. Returning mock sentiment data for multiple texts.")
            return [self._mock_result(text) for text in texts]

        try:
            messages = ANALYSIS_PROMPT.format_messages(
                texts_json=json.dumps(texts, ensure_ascii=False)
            )
            response = await self.model.ainvoke(messages)
            return normalize_reply(message_text(response), len(texts))
        except Exception as e:
            logger.exception(f"Error in analyze (batch of {len(texts)}): {e}")
            return batch_error_results(len(texts), e)


# Singleton instance
_sentiment_service_instance: Optional[SentimentService] = None


def get_sentiment_service() -> SentimentService:
    """Get or create sentiment service singleton instance"""
    global _sentiment_service_instance
    if _sentiment_service_instance is None:
        _sentiment_service_instance = SentimentService()
    return _sentiment_service_instance

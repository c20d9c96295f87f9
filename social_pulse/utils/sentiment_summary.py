"""
Aggregate views over a batch of sentiment results.

Used by the API to return an overall verdict, a sentiment distribution, and
the detected languages alongside the per-text results.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from social_pulse.schemas.sentiment import (
    SUPPORTED_LANGUAGES,
    AnalysisResult,
    AnalysisSummary,
    Sentiment,
)

# Display order for language groups; other codes follow alphabetically
LANGUAGE_ORDER = ["en", "fr", "de", "es", "hi", "unknown"]

# Weighted mean beyond which the overall sentiment leaves Neutral
OVERALL_SENTIMENT_THRESHOLD = 0.1


def overall_sentiment(results: Sequence[AnalysisResult]) -> Tuple[Sentiment, float]:
    """
    Compute the overall sentiment of a batch.

    Positive results count as +score, negative as -score and neutral as 0.
    Error results are ignored.

    Returns:
        (sentiment, score) where score is the absolute weighted mean.
        (NONE, 0.0) for an empty batch, (ERROR, 0.0) when every result is an error.
    """
    if not results:
        return Sentiment.NONE, 0.0

    weighted = []
    for result in results:
        if result.sentiment == Sentiment.ERROR:
            continue
        if result.sentiment == Sentiment.POSITIVE:
            weighted.append(result.score)
        elif result.sentiment == Sentiment.NEGATIVE:
            weighted.append(-result.score)
        else:
            weighted.append(0.0)

    if not weighted:
        return Sentiment.ERROR, 0.0

    average = sum(weighted) / len(weighted)
    if average > OVERALL_SENTIMENT_THRESHOLD:
        sentiment = Sentiment.POSITIVE
    elif average < -OVERALL_SENTIMENT_THRESHOLD:
        sentiment = Sentiment.NEGATIVE
    else:
        sentiment = Sentiment.NEUTRAL
    return sentiment, abs(average)


def sentiment_distribution(results: Sequence[AnalysisResult]) -> Dict[str, int]:
    """Count results per sentiment, in first-seen order. The NONE placeholder is not counted."""
    counts: Dict[str, int] = {}
    for result in results:
        if result.sentiment == Sentiment.NONE:
            continue
        counts[result.sentiment.value] = counts.get(result.sentiment.value, 0) + 1
    return counts


def detected_languages(results: Sequence[AnalysisResult]) -> Dict[str, str]:
    """Map each detected language code (first-seen order) to its display name."""
    languages: Dict[str, str] = {}
    for result in results:
        code = result.detected_language
        if code and code not in languages:
            languages[code] = SUPPORTED_LANGUAGES.get(code, code)
    return languages


def _language_sort_key(code: str) -> Tuple[int, str]:
    if code in LANGUAGE_ORDER:
        return LANGUAGE_ORDER.index(code), ""
    return len(LANGUAGE_ORDER), code


def group_by_language(
    texts: Sequence[str],
    results: Sequence[AnalysisResult],
) -> Dict[str, List[Tuple[int, str, AnalysisResult]]]:
    """
    Group results by detected language.

    Args:
        texts: Original input texts, aligned with results
        results: Analysis results

    Returns:
        Ordered mapping of language code to (index, original text, result)
        entries. A result without an original text gets "N/A".
    """
    groups: Dict[str, List[Tuple[int, str, AnalysisResult]]] = {}
    for index, result in enumerate(results):
        original: Optional[str] = texts[index] if index < len(texts) else None
        code = result.detected_language or "unknown"
        groups.setdefault(code, []).append((index, original or "N/A", result))
    return {code: groups[code] for code in sorted(groups, key=_language_sort_key)}


def summarize(results: Sequence[AnalysisResult]) -> AnalysisSummary:
    sentiment, score = overall_sentiment(results)
    return AnalysisSummary(
        overall_sentiment=sentiment,
        overall_score=min(score, 1.0),
        distribution=sentiment_distribution(results),
        languages=detected_languages(results),
    )

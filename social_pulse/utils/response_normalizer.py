"""
Normalization of Gemini sentiment replies.

The model is asked for a bare JSON array but replies are loosely typed: they may
be wrapped in a fenced code block, carry wrong types, or miss fields entirely.
Everything here converts such a reply into a list of strict AnalysisResult
objects aligned with the input batch.

Only two situations are failures (raised as MalformedReplyError): a reply that
is not strict JSON, and a reply whose top level is not an array. Every
per-element problem is repaired with a field default instead.
"""

import json
import logging
import math
import re
from typing import Any, Callable, Dict, List, NamedTuple

from social_pulse.schemas.sentiment import AnalysisResult, Sentiment

logger = logging.getLogger(__name__)

# Matches ```json ... ``` or ``` ... ```
FENCE_PATTERN = re.compile(r"^```(\w*)?\s*\n?(.*?)\n?\s*```$", re.DOTALL)

# Languages the model may report; anything else becomes "unknown"
ANALYZABLE_LANGUAGES = ("en", "fr", "de", "es", "hi")

MAX_EMOTIONS = 3
MAX_KEYWORDS = 5

JSON_ERROR_DETAIL = "API JSON error"
PROCESSING_ERROR_DETAIL = "processing error"
PARSING_ERROR_DETAIL = "parsing error"
MISSING_RESULT_DETAIL = "missing result"


class MalformedReplyError(ValueError):
    """The model reply cannot be turned into a result batch"""


class InvalidJSONReplyError(MalformedReplyError):
    """The reply (after fence stripping) is not strict JSON"""


class UnexpectedReplyShapeError(MalformedReplyError):
    """The reply parsed, but its top level is not an array"""


def strip_code_fence(text: str) -> str:
    """Remove a surrounding fenced code block (with optional language tag) and trim."""
    stripped = text.strip()
    match = FENCE_PATTERN.match(stripped)
    if match and match.group(2):
        return match.group(2).strip()
    return stripped


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def parse_json_from_text(text: str) -> Any:
    """
    Decode a model reply as strict JSON.

    Args:
        text: Raw reply text, optionally wrapped in a fenced code block

    Returns:
        The decoded JSON value

    Raises:
        InvalidJSONReplyError: If the unwrapped text is not valid JSON
    """
    json_str = strip_code_fence(text)
    try:
        return json.loads(json_str, parse_constant=_reject_constant)
    except ValueError as e:
        logger.error(f"Failed to parse JSON string. Error: {e}")
        logger.error(f"Original text received from API: {text}")
        logger.error(f"String attempted for parsing (after potential fence stripping): {json_str}")
        raise InvalidJSONReplyError("Invalid JSON response from AI") from e


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _sentiment_label(value: Any) -> str:
    return "" if value is None else _stringify(value).lower()


_SENTIMENT_LOOKUP: Dict[str, Sentiment] = {
    "positive": Sentiment.POSITIVE,
    "negative": Sentiment.NEGATIVE,
    "neutral": Sentiment.NEUTRAL,
    "error": Sentiment.ERROR,
}


def _is_known_sentiment(value: Any) -> bool:
    return _sentiment_label(value) in _SENTIMENT_LOOKUP


def _is_analyzable_language(value: Any) -> bool:
    return isinstance(value, str) and value in ANALYZABLE_LANGUAGES


def _is_number(value: Any) -> bool:
    # bool is an int subclass but a JSON true/false is not a score
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and (isinstance(value, int) or not math.isnan(value))
    )


def _is_list(value: Any) -> bool:
    return isinstance(value, list)


def _clamp_unit(value: float) -> float:
    return float(max(0.0, min(1.0, value)))


def _string_list(limit: int) -> Callable[[List[Any]], List[str]]:
    def convert(values: List[Any]) -> List[str]:
        return [_stringify(v) for v in values[:limit]]
    return convert


class FieldRule(NamedTuple):
    """How one AnalysisResult field is read from a reply element"""
    source: str
    accepts: Callable[[Any], bool]
    convert: Callable[[Any], Any]
    default: Callable[[], Any]


FIELD_RULES: Dict[str, FieldRule] = {
    "sentiment": FieldRule(
        "sentiment", _is_known_sentiment, lambda v: _SENTIMENT_LOOKUP[_sentiment_label(v)],
        lambda: Sentiment.NEUTRAL,
    ),
    "detected_language": FieldRule(
        "detectedLanguage", _is_analyzable_language, str, lambda: "unknown",
    ),
    "score": FieldRule("score", _is_number, _clamp_unit, lambda: 0.0),
    "emotions": FieldRule("emotions", _is_list, _string_list(MAX_EMOTIONS), list),
    "keywords": FieldRule("keywords", _is_list, _string_list(MAX_KEYWORDS), list),
}


def coerce_field(name: str, item: Dict[str, Any]) -> Any:
    """Read one field from a reply element, falling back to the field default."""
    rule = FIELD_RULES[name]
    value = item.get(rule.source)
    if rule.accepts(value):
        return rule.convert(value)
    return rule.default()


def error_result(detail: str, detected_language: str = "unknown") -> AnalysisResult:
    return AnalysisResult(
        sentiment=Sentiment.ERROR,
        score=0.0,
        emotions=[],
        keywords=[detail],
        detected_language=detected_language,
    )


def coerce_result(item: Any, index: int = 0) -> AnalysisResult:
    """
    Convert one reply element to an AnalysisResult. Never raises.

    Non-object elements become Error results; object elements have every
    field coerced independently (see FIELD_RULES).
    """
    if not isinstance(item, dict):
        logger.warning(f"Item at index {index} is not an object: {item!r}. Defaulting to Error sentiment.")
        return error_result(PARSING_ERROR_DETAIL)

    if not _is_known_sentiment(item.get("sentiment")):
        logger.warning(
            f"Unexpected sentiment value for item at index {index}: {item.get('sentiment')!r}. Defaulting to Neutral."
        )

    return AnalysisResult(**{name: coerce_field(name, item) for name in FIELD_RULES})


def normalize_reply(reply_text: str, expected_count: int) -> List[AnalysisResult]:
    """
    Turn a raw model reply into exactly `expected_count` results.

    Elements are matched to inputs by position. Surplus elements are dropped
    and missing ones are filled with Error results.

    Raises:
        InvalidJSONReplyError: If the reply is not strict JSON
        UnexpectedReplyShapeError: If the top-level value is not an array
    """
    parsed = parse_json_from_text(reply_text)

    if not isinstance(parsed, list):
        logger.error(f"Parsed sentiment data is not an array: {parsed!r}")
        raise UnexpectedReplyShapeError("Invalid data structure received from AI: Expected an array.")

    if len(parsed) != expected_count:
        logger.warning(f"Expected {expected_count} results from AI, received {len(parsed)}")

    results = [coerce_result(item, index) for index, item in enumerate(parsed[:expected_count])]
    results.extend(error_result(MISSING_RESULT_DETAIL) for _ in range(expected_count - len(results)))
    return results


def batch_error_results(count: int, error: BaseException) -> List[AnalysisResult]:
    """One Error result per input, used when the whole batch failed."""
    detail = JSON_ERROR_DETAIL if isinstance(error, InvalidJSONReplyError) else PROCESSING_ERROR_DETAIL
    return [error_result(detail) for _ in range(count)]

# Utility functions
from social_pulse.utils.response_normalizer import (
    MalformedReplyError,
    InvalidJSONReplyError,
    UnexpectedReplyShapeError,
    strip_code_fence,
    parse_json_from_text,
    coerce_field,
    coerce_result,
    normalize_reply,
    error_result,
    batch_error_results,
)
from social_pulse.utils.text_batch import split_input_text
from social_pulse.utils.sentiment_summary import (
    overall_sentiment,
    sentiment_distribution,
    detected_languages,
    group_by_language,
    summarize,
)

__all__ = [
    # Reply normalization
    "MalformedReplyError",
    "InvalidJSONReplyError",
    "UnexpectedReplyShapeError",
    "strip_code_fence",
    "parse_json_from_text",
    "coerce_field",
    "coerce_result",
    "normalize_reply",
    "error_result",
    "batch_error_results",
    # Batching
    "split_input_text",
    # Summaries
    "overall_sentiment",
    "sentiment_distribution",
    "detected_languages",
    "group_by_language",
    "summarize",
]

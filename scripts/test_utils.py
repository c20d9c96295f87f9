"""
Unit tests for batch splitting and sentiment summary utilities.
"""

import unittest

from social_pulse.schemas.sentiment import AnalysisResult, AnalysisSummary, Sentiment
from social_pulse.utils.sentiment_summary import (
    detected_languages,
    group_by_language,
    overall_sentiment,
    sentiment_distribution,
    summarize,
)
from social_pulse.utils.text_batch import split_input_text


def _result(sentiment, score=0.5, language="en"):
    return AnalysisResult(sentiment=sentiment, score=score, detected_language=language)


class TestSplitInputText(unittest.TestCase):
    """Tests for free-text batching."""

    def test_one_text_per_line(self):
        self.assertEqual(split_input_text("  great service \n\nterrible app\r\n   \nok"), ["great service", "terrible app", "ok"])

    def test_blank_input(self):
        self.assertEqual(split_input_text(""), [])
        self.assertEqual(split_input_text(" \n \t\n"), [])

    def test_only_newline_separates_texts(self):
        self.assertEqual(split_input_text("one\u2028two\nthree\x0bfour"), ["one\u2028two", "three\x0bfour"])


class TestOverallSentiment(unittest.TestCase):
    """Tests for the weighted overall sentiment."""

    def test_empty_batch(self):
        self.assertEqual(overall_sentiment([]), (Sentiment.NONE, 0.0))

    def test_only_errors(self):
        results = [_result(Sentiment.ERROR, 0.0), _result(Sentiment.ERROR, 0.0)]
        self.assertEqual(overall_sentiment(results), (Sentiment.ERROR, 0.0))

    def test_weighted_positive(self):
        results = [
            _result(Sentiment.POSITIVE, 0.9),
            _result(Sentiment.NEGATIVE, 0.3),
            _result(Sentiment.NEUTRAL, 0.8),
            _result(Sentiment.ERROR, 0.0),
        ]
        sentiment, score = overall_sentiment(results)
        self.assertEqual(sentiment, Sentiment.POSITIVE)
        self.assertAlmostEqual(score, 0.2)

    def test_weighted_negative(self):
        sentiment, score = overall_sentiment([_result(Sentiment.NEGATIVE, 0.9), _result(Sentiment.POSITIVE, 0.3)])
        self.assertEqual(sentiment, Sentiment.NEGATIVE)
        self.assertAlmostEqual(score, 0.3)

    def test_threshold_is_exclusive(self):
        sentiment, _ = overall_sentiment([_result(Sentiment.POSITIVE, 0.1)])
        self.assertEqual(sentiment, Sentiment.NEUTRAL)


class TestDistributionAndLanguages(unittest.TestCase):
    """Tests for counts and language views."""

    def setUp(self):
        self.results = [
            _result(Sentiment.NEGATIVE, language="fr"),
            _result(Sentiment.POSITIVE, language="unknown"),
            _result(Sentiment.NEGATIVE, language="en"),
            _result(Sentiment.NONE, 0.0, language="fr"),
        ]

    def test_distribution_first_seen_order_without_placeholder(self):
        distribution = sentiment_distribution(self.results)
        self.assertEqual(list(distribution.items()), [("Negative", 2), ("Positive", 1)])

    def test_detected_languages(self):
        self.assertEqual(
            list(detected_languages(self.results).items()),
            [("fr", "French"), ("unknown", "Unknown"), ("en", "English")],
        )

    def test_group_by_language_order(self):
        groups = group_by_language(["un", "deux", "three"], self.results)
        self.assertEqual(list(groups), ["en", "fr", "unknown"])
        self.assertEqual([(i, text) for i, text, _ in groups["fr"]], [(0, "un"), (3, "N/A")])
        self.assertEqual(groups["en"][0][1], "three")

    def test_summarize(self):
        summary = summarize(self.results)
        self.assertIsInstance(summary, AnalysisSummary)
        self.assertEqual(summary.overall_sentiment, Sentiment.NEGATIVE)
        self.assertEqual(summary.distribution, {"Negative": 2, "Positive": 1})
        self.assertIn("fr", summary.languages)


if __name__ == "__main__":
    unittest.main()

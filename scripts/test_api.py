"""
API tests for the sentiment and chatbot endpoints.
Services are swapped for stubbed instances through dependency overrides.
"""

import random
import unittest

from fastapi.testclient import TestClient

from main import api_v1, app
from social_pulse.services.chat_service import ChatService, get_chat_service
from social_pulse.services.sentiment_service import SentimentService, get_sentiment_service


class FailingChatModel:
    async def ainvoke(self, messages):
        raise ConnectionError("Gemini unavailable")


class TestSentimentEndpoints(unittest.TestCase):
    """Tests for /sentiment endpoints."""

    def setUp(self):
        self.service = SentimentService(api_key="", rng=random.Random(3))
        api_v1.dependency_overrides[get_sentiment_service] = lambda: self.service
        self.client = TestClient(app)

    def tearDown(self):
        api_v1.dependency_overrides.clear()

    def test_health(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "healthy"})

    def test_service_info_reports_mode(self):
        data = self.client.get("/").json()
        self.assertEqual(data["analysis_mode"], "mock")
        self.assertEqual(data["max_batch_texts"], 100)
        self.assertIn("model", data)

        self.service = SentimentService(api_key="test-key", model=FailingChatModel())
        self.assertEqual(self.client.get("/").json()["analysis_mode"], "live")

    def test_analyze(self):
        response = self.client.post("/sentiment/analyze", json={"texts": ["Love it", "Hate it"]})
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(len(data["results"]), 2)
        for result in data["results"]:
            self.assertIn("detectedLanguage", result)
            self.assertIn(result["sentiment"], ["Positive", "Negative", "Neutral"])
        self.assertEqual(sum(data["summary"]["distribution"].values()), 2)

    def test_analyze_groups_by_language(self):
        texts = ["Love it", "Hate it", "Fine"]
        response = self.client.post("/sentiment/analyze", json={"texts": texts})
        data = response.json()
        order = ["en", "fr", "de", "es", "hi", "unknown"]
        codes = list(data["by_language"])
        self.assertEqual(codes, sorted(codes, key=order.index))

        entries = [entry for group in data["by_language"].values() for entry in group]
        self.assertEqual(sorted(entry["index"] for entry in entries), [0, 1, 2])
        for code, group in data["by_language"].items():
            for entry in group:
                self.assertEqual(entry["text"], texts[entry["index"]])
                self.assertEqual(entry["result"], data["results"][entry["index"]])
                self.assertEqual(entry["result"]["detectedLanguage"], code)

    def test_analyze_rejects_empty_batch(self):
        response = self.client.post("/sentiment/analyze", json={"texts": []})
        self.assertEqual(response.status_code, 422)

    def test_analyze_rejects_oversized_batch(self):
        response = self.client.post("/sentiment/analyze", json={"texts": ["x"] * 101})
        self.assertEqual(response.status_code, 400)

    def test_analyze_model_failure_returns_error_results(self):
        self.service = SentimentService(api_key="test-key", model=FailingChatModel())
        response = self.client.post("/sentiment/analyze", json={"texts": ["a", "b"]})
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual([r["sentiment"] for r in data["results"]], ["Error", "Error"])
        self.assertEqual(data["summary"]["overall_sentiment"], "Error")

    def test_analyze_text_splits_lines(self):
        response = self.client.post("/sentiment/analyze-text", json={"text": "first\n\n  second  \n"})
        self.assertEqual(response.status_code, 200)
        results = response.json()["results"]
        self.assertEqual(len(results), 2)
        self.assertEqual(results[1]["keywords"][1], "second")

    def test_analyze_text_blank(self):
        response = self.client.post("/sentiment/analyze-text", json={"text": "  \n  "})
        self.assertEqual(response.status_code, 400)

    def test_languages(self):
        response = self.client.get("/sentiment/languages")
        self.assertEqual(response.json()["languages"]["hi"], "Hindi")

    def test_debug(self):
        response = self.client.get("/sentiment/debug")
        self.assertEqual(response.json()["mode"], "mock")


class TestChatEndpoints(unittest.TestCase):
    """Tests for /chat endpoints."""

    def setUp(self):
        self.service = ChatService(api_key="")
        api_v1.dependency_overrides[get_chat_service] = lambda: self.service
        self.client = TestClient(app)

    def tearDown(self):
        api_v1.dependency_overrides.clear()

    def test_demo_mode(self):
        response = self.client.post("/chat", json={"history": [], "message": "Hello"})
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertIn("demo mode", data["text"])
        self.assertEqual(data["sources"], [])

    def test_model_failure_is_reported(self):
        self.service = ChatService(api_key="test-key", model=FailingChatModel())
        response = self.client.post("/chat", json={"message": "Hello"})
        self.assertEqual(response.status_code, 502)
        self.assertIsNone(self.service.session_handle.session)

    def test_reset_session(self):
        response = self.client.delete("/chat/session")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["message"], "Chat session reset successfully")

    def test_empty_message_rejected(self):
        response = self.client.post("/chat", json={"message": ""})
        self.assertEqual(response.status_code, 422)


if __name__ == "__main__":
    unittest.main()

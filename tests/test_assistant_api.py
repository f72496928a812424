import os
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

import httpx
from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from jobgpt.ai.factory import get_text_client  # noqa: E402
from jobgpt.ai.providers.gemini_provider import GeminiProvider  # noqa: E402
from jobgpt.ai.types import UpstreamError  # noqa: E402
from jobgpt.main import app  # noqa: E402


class FakeTextClient:
    model = "fake-model"

    def __init__(self, reply: str = "", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls = 0

    async def generate(self, prompt: str) -> str:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.reply


class AssistantApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    def _use(self, fake) -> None:
        app.dependency_overrides[get_text_client] = lambda: fake

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "healthy"})

    def test_career_path_end_to_end_with_prose_reply(self):
        self._use(FakeTextClient("Focus on fundamentals and ship projects."))
        response = self.client.post(
            "/v1/generate-career-path",
            json={"currentRole": "Junior Developer", "targetRole": "Senior Engineer", "timelineMonths": 12},
        )
        self.assertEqual(response.status_code, 200)
        frames = [item["timeframe"] for item in response.json()["milestones"]]
        self.assertEqual(frames, ["Month 1", "Month 2-6", "Month 7-12"])

    def test_career_path_rejects_non_positive_timeline(self):
        fake = FakeTextClient("unused")
        self._use(fake)
        response = self.client.post(
            "/v1/generate-career-path",
            json={"currentRole": "A", "targetRole": "B", "timelineMonths": 0},
        )
        self.assertEqual(response.status_code, 422)
        self.assertEqual(fake.calls, 0)

    def test_analyze_resume_blank_content_is_400(self):
        fake = FakeTextClient("{}")
        self._use(fake)
        response = self.client.post("/v1/analyze-resume", json={"content": "   "})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Resume content is required"})
        self.assertEqual(fake.calls, 0)

    def test_analyze_resume_returns_parsed_analysis(self):
        self._use(
            FakeTextClient(
                'Analysis: {"summary": "Ops lead", "skills": ["Kubernetes"], "suggestions": [], '
                '"experienceYears": 7, "keyStrengths": ["Calm"]}'
            )
        )
        response = self.client.post("/v1/analyze-resume", json={"content": "Ops lead, 7 years"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["skills"], ["Kubernetes"])

    def test_search_jobs_normalizes_urls(self):
        self._use(FakeTextClient('{"jobs": [{"title": "SRE", "location": "Remote", "url": "https://example.com/x"}]}'))
        response = self.client.post("/v1/search-jobs", json={"query": "SRE", "userId": "user-1"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json()["jobs"][0]["url"],
            "https://www.linkedin.com/jobs/search/?keywords=SRE&location=Remote",
        )

    def test_upstream_failure_is_500_error_payload(self):
        self._use(FakeTextClient(error=UpstreamError("Generative model request failed", details={"status": 502})))
        response = self.client.post("/v1/search-jobs", json={"query": "SRE"})
        self.assertEqual(response.status_code, 500)
        self.assertEqual(
            response.json(),
            {"error": "Generative model request failed", "details": {"status": 502}},
        )

    def test_missing_credential_skips_network_for_every_endpoint(self):
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={})

        provider = GeminiProvider(api_key=None, transport=httpx.MockTransport(handler))
        self._use(provider)
        calls = [
            ("/v1/analyze-resume", {"content": "Jane Doe, engineer"}),
            ("/v1/generate-career-path", {"currentRole": "A", "targetRole": "B", "timelineMonths": 6}),
            ("/v1/search-jobs", {"query": "Engineer"}),
        ]
        for path, body in calls:
            response = self.client.post(path, json=body)
            self.assertEqual(response.status_code, 500, path)
            self.assertEqual(response.json(), {"error": "Gemini API key not configured"})
        self.assertEqual(requests, [])

    def test_credential_resolved_from_environment_per_request(self):
        with patch.dict(os.environ, {"AI_PROVIDER": "gemini"}, clear=False):
            os.environ.pop("GEMINI_API_KEY", None)
            response = self.client.post("/v1/search-jobs", json={"query": "Engineer"})
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["error"], "Gemini API key not configured")

    def test_preflight_allows_any_origin(self):
        response = self.client.options(
            "/v1/search-jobs",
            headers={
                "Origin": "https://jobgpt.example",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "authorization, content-type, apikey, x-client-info",
            },
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.headers["access-control-allow-origin"], "*")
        allowed = response.headers["access-control-allow-headers"].lower()
        for header in ("authorization", "x-client-info", "apikey", "content-type"):
            self.assertIn(header, allowed)

    def test_error_responses_carry_cors_headers(self):
        self._use(FakeTextClient(error=UpstreamError("down")))
        response = self.client.post(
            "/v1/search-jobs",
            json={"query": "x"},
            headers={"Origin": "https://jobgpt.example"},
        )
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.headers["access-control-allow-origin"], "*")


if __name__ == "__main__":
    unittest.main()

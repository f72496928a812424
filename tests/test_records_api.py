import sys
import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from jobgpt.main import app  # noqa: E402
from jobgpt.storage.store import RecordStore, get_store  # noqa: E402


class RecordsApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.store = RecordStore(str(Path(self._tmp.name) / "jobgpt.db"))
        app.dependency_overrides[get_store] = lambda: self.store
        self.headers = {"X-User-Id": "user-123"}

    def tearDown(self):
        app.dependency_overrides.clear()
        self.store.close()
        self._tmp.cleanup()

    def test_owner_header_is_required(self):
        response = self.client.get("/v1/job-matches")
        self.assertEqual(response.status_code, 401)

    def test_save_search_result_and_update_status(self):
        listing = {
            "title": "Platform Engineer",
            "company": "Cloudy",
            "location": "Remote",
            "salary": "$120,000 - $150,000",
            "description": "Run the platform.",
            "matchScore": 82,
            "matchReasons": ["Kubernetes", "Terraform"],
            "url": "https://www.linkedin.com/jobs/search/?keywords=Platform%20Engineer&location=Remote",
        }
        created = self.client.post("/v1/job-matches", json=listing, headers=self.headers)
        self.assertEqual(created.status_code, 201)
        body = created.json()
        self.assertEqual(body["status"], "interested")
        self.assertEqual(body["job_title"], "Platform Engineer")
        self.assertEqual(body["match_reasons"], ["Kubernetes", "Terraform"])

        job_id = body["id"]
        applied = self.client.patch(
            f"/v1/job-matches/{job_id}/status",
            json={"status": "applied"},
            headers=self.headers,
        )
        self.assertEqual(applied.status_code, 200)
        self.assertEqual(applied.json()["status"], "applied")

        conflict = self.client.patch(
            f"/v1/job-matches/{job_id}/status",
            json={"status": "dismissed"},
            headers=self.headers,
        )
        self.assertEqual(conflict.status_code, 409)

        listed = self.client.get("/v1/job-matches", headers=self.headers).json()
        self.assertEqual([item["id"] for item in listed], [job_id])

    def test_loosely_typed_search_fields_are_saved(self):
        listing = {
            "title": "Data Engineer",
            "company": "Streamline",
            "matchScore": "high",
            "matchReasons": "Python",
            "url": "",
        }
        created = self.client.post("/v1/job-matches", json=listing, headers=self.headers)
        self.assertEqual(created.status_code, 201)
        body = created.json()
        self.assertIsNone(body["match_score"])
        self.assertEqual(body["match_reasons"], ["Python"])

        percent = self.client.post(
            "/v1/job-matches",
            json={"title": "Analyst", "matchScore": "91%", "matchReasons": None},
            headers=self.headers,
        ).json()
        self.assertEqual(percent["match_score"], 91.0)
        self.assertEqual(percent["match_reasons"], [])

    def test_unknown_status_is_rejected(self):
        created = self.client.post("/v1/job-matches", json={"title": "SRE"}, headers=self.headers).json()
        response = self.client.patch(
            f"/v1/job-matches/{created['id']}/status",
            json={"status": "hired"},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 422)

    def test_other_users_job_is_not_found(self):
        created = self.client.post("/v1/job-matches", json={"title": "SRE"}, headers=self.headers).json()
        response = self.client.patch(
            f"/v1/job-matches/{created['id']}/status",
            json={"status": "applied"},
            headers={"X-User-Id": "someone-else"},
        )
        self.assertEqual(response.status_code, 404)

    def test_resume_round_trip(self):
        payload = {
            "title": "Backend CV",
            "content": "Jane Doe\nPython, SQL",
            "analysis": {"summary": "Backend developer", "skills": ["Python", "SQL"]},
        }
        created = self.client.post("/v1/resumes", json=payload, headers=self.headers)
        self.assertEqual(created.status_code, 201)
        self.assertEqual(created.json()["skills_extracted"], ["Python", "SQL"])

        blank = self.client.post(
            "/v1/resumes",
            json={"title": "  ", "content": "text"},
            headers=self.headers,
        )
        self.assertEqual(blank.status_code, 400)

        listed = self.client.get("/v1/resumes", headers=self.headers).json()
        self.assertEqual(len(listed), 1)
        self.assertEqual(listed[0]["title"], "Backend CV")

    def test_career_path_save_and_list(self):
        plan = {
            "overview": "Plan",
            "skills": ["Mentoring"],
            "milestones": [{"title": "Start", "description": "Now", "timeframe": "Month 1"}],
            "resources": "Courses",
            "challenges": [],
            "successTips": [],
        }
        created = self.client.post(
            "/v1/career-paths",
            json={"currentRole": "Dev", "targetRole": "Lead", "timelineMonths": 12, "plan": plan},
            headers=self.headers,
        )
        self.assertEqual(created.status_code, 201)
        self.assertEqual(created.json()["required_skills"], ["Mentoring"])
        listed = self.client.get("/v1/career-paths", headers=self.headers).json()
        self.assertEqual(listed[0]["ai_recommendations"], plan)

    def test_profile_upsert_and_fetch(self):
        missing = self.client.get("/v1/profile", headers=self.headers)
        self.assertEqual(missing.status_code, 404)

        updated = self.client.put(
            "/v1/profile",
            json={"full_name": "Jane Doe", "linkedin_url": "https://www.linkedin.com/in/janedoe"},
            headers=self.headers,
        )
        self.assertEqual(updated.status_code, 200)
        fetched = self.client.get("/v1/profile", headers=self.headers).json()
        self.assertEqual(fetched["full_name"], "Jane Doe")
        self.assertEqual(fetched["user_id"], "user-123")


if __name__ == "__main__":
    unittest.main()

"""Integration tests for the HTTP routes.

Covers:
  GET  /health
  POST /api/stats/aggregate
  POST /api/stats/quizzes
  POST /api/subjects/resolve
  GET  /api/careers
  POST /api/careers/{career_id}/subjects
"""

import pytest
from fastapi.testclient import TestClient

from edu_insights.api.deps import get_subject_table
from edu_insights.main import app
from edu_insights.schemas.subject import StaticSubjectInfo


# ── Helpers ────────────────────────────────────────────────────────────────────


def _quiz_row(quiz_id: str, subject: str, topic: str, difficulty: str = "easy", questions: int = 10) -> dict:
    """Quiz in the upstream row shape (plural relation keys, ``name`` as title)."""
    return {
        "id": quiz_id,
        "name": f"{topic} quiz",
        "difficulty": difficulty,
        "question_count": questions,
        "time_limit": 20,
        "topics": {"name": topic, "chapters": {"subjects": {"name": subject}}},
    }


def _snapshot() -> dict:
    return {
        "quizzes": [
            _quiz_row("q1", "Mathematics", "Algebra", "easy"),
            _quiz_row("q2", "Mathematics", "Geometry", "hard"),
            _quiz_row("q3", "Physics", "Motion", "medium"),
        ],
        "attempts": [
            {"quiz_id": "q1", "score": 80, "completed": True},
            {"quiz_id": "q1", "score": 60, "completed": True},
            {"quiz_id": "q3", "score": 90, "completed": True},
            {"quiz_id": "gone", "score": 100, "completed": True},
        ],
    }


# ── Health ─────────────────────────────────────────────────────────────────────


def test_health(client: TestClient):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


def test_root(client: TestClient):
    data = client.get("/").json()
    assert data["health"] == "/health"


# ── Statistics ────────────────────────────────────────────────────────────────


class TestAggregateStats:
    def test_full_report(self, client: TestClient):
        resp = client.post("/api/stats/aggregate", json=_snapshot())
        assert resp.status_code == 200, resp.text
        data = resp.json()

        q1 = data["quiz_stats"][0]
        assert q1["id"] == "q1"
        assert q1["title"] == "Algebra quiz"
        assert q1["subject_name"] == "Mathematics"
        assert q1["attempts"] == 2
        assert q1["avg_score"] == pytest.approx(70.0)

        assert [s["name"] for s in data["subject_stats"]] == ["Mathematics", "Physics"]
        assert data["subject_stats"][0]["avg_score"] == pytest.approx(35.0)

        overview = data["overview"]
        assert overview["total_quizzes"] == 3
        assert overview["total_questions"] == 30
        assert overview["total_attempts"] == 3
        assert overview["avg_score"] == pytest.approx(230 / 3)

    def test_empty_snapshot(self, client: TestClient):
        resp = client.post("/api/stats/aggregate", json={})
        assert resp.status_code == 200
        assert resp.json()["overview"] == {
            "total_quizzes": 0,
            "total_questions": 0,
            "total_attempts": 0,
            "avg_score": 0.0,
            "completion_rate": 0.0,
        }

    def test_invalid_attempt_rejected(self, client: TestClient):
        resp = client.post(
            "/api/stats/aggregate",
            json={"quizzes": [], "attempts": [{"score": 10, "completed": True}]},
        )
        assert resp.status_code == 422

    @pytest.mark.parametrize("score", [250, -1, "nan", "inf"])
    def test_out_of_range_score_rejected(self, client: TestClient, score):
        payload = _snapshot()
        payload["attempts"].append({"quiz_id": "q1", "score": score, "completed": True})
        resp = client.post("/api/stats/aggregate", json=payload)
        assert resp.status_code == 422


class TestListQuizStats:
    def test_difficulty_filter(self, client: TestClient):
        resp = client.post("/api/stats/quizzes?difficulty=hard", json=_snapshot())
        assert resp.status_code == 200
        assert [q["id"] for q in resp.json()] == ["q2"]

    def test_search(self, client: TestClient):
        resp = client.post("/api/stats/quizzes", params={"search": "physics"}, json=_snapshot())
        assert [q["id"] for q in resp.json()] == ["q3"]

    def test_pagination(self, client: TestClient):
        resp = client.post("/api/stats/quizzes", params={"skip": 1, "limit": 1}, json=_snapshot())
        assert [q["id"] for q in resp.json()] == ["q2"]

    def test_limit_bounds(self, client: TestClient):
        resp = client.post("/api/stats/quizzes", params={"limit": 0}, json=_snapshot())
        assert resp.status_code == 422


# ── Subjects ──────────────────────────────────────────────────────────────────


class TestResolveSubjects:
    def test_resolve_with_inline_static_table(self, client: TestClient):
        payload = {
            "keys": ["biology", "unknown-key"],
            "catalog": [{"id": "1", "name": "Biology", "slug": "biology"}],
            "static_table": {"unknown-key": {"name": "X", "description": "d", "topics": ["t1"]}},
        }
        resp = client.post("/api/subjects/resolve", json=payload)
        assert resp.status_code == 200, resp.text
        first, second = resp.json()
        assert first["id"] == "1"
        assert second == {
            "id": "unknown-key",
            "name": "X",
            "description": "d",
            "slug": "unknown-key",
            "icon": None,
            "category": None,
            "topics": ["t1"],
        }

    def test_default_table_from_dependency(self, client: TestClient):
        app.dependency_overrides[get_subject_table] = lambda: {
            "chem": StaticSubjectInfo(name="Kimia", topics=["Stoichiometry"]),
        }
        resp = client.post("/api/subjects/resolve", json={"keys": ["chem"], "catalog": []})
        assert resp.json()[0]["name"] == "Kimia"
        assert resp.json()[0]["topics"] == ["Stoichiometry"]

    def test_builtin_table(self, client: TestClient):
        resp = client.post(
            "/api/subjects/resolve",
            json={"keys": ["c38580e8-c539-43e7-b717-209bcabc410c"]},
        )
        assert resp.json()[0]["name"] == "Mathematics"

    def test_keys_required(self, client: TestClient):
        resp = client.post("/api/subjects/resolve", json={"catalog": []})
        assert resp.status_code == 422


# ── Careers ───────────────────────────────────────────────────────────────────


class TestCareers:
    def test_list_all(self, client: TestClient):
        resp = client.get("/api/careers", follow_redirects=False)
        assert resp.status_code == 200
        assert {c["id"] for c in resp.json()} == {
            "software-engineer",
            "medical-doctor",
            "business-manager",
        }

    def test_search(self, client: TestClient):
        resp = client.get("/api/careers", params={"search": "manager"})
        assert [c["id"] for c in resp.json()] == ["business-manager"]

    def test_blank_search_returns_nothing(self, client: TestClient):
        resp = client.get("/api/careers", params={"search": ""})
        assert resp.json() == []

    def test_career_subjects(self, client: TestClient):
        catalog = [{"id": "db-eco", "name": "Ekonomi SPM", "slug": "d62ee9d1-cf0c-4c47-8928-4f9aa267eca5"}]
        resp = client.post("/api/careers/business-manager/subjects", json={"catalog": catalog})
        assert resp.status_code == 200, resp.text
        data = resp.json()
        assert data["title"] == "Business Manager"
        assert data["must_learn"][0]["id"] == "db-eco"
        assert data["must_learn"][1]["name"] == "Mathematics"

    def test_unknown_career(self, client: TestClient):
        resp = client.post("/api/careers/astronaut/subjects", json={"catalog": []})
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Career not found"

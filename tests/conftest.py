"""Shared pytest fixtures for edu-insights tests."""

import pytest
from fastapi.testclient import TestClient

from edu_insights.main import app
from edu_insights.schemas.stats import ChapterRef, QuizMeta, SubjectRef, TopicRef


def make_quiz(
    quiz_id: str,
    subject: str | None = "Mathematics",
    topic: str | None = "Algebra",
    difficulty: str = "easy",
    question_count: int = 10,
    time_limit: int = 15,
    title: str | None = None,
) -> QuizMeta:
    """Build a quiz with a full topic → chapter → subject chain."""
    chapter = ChapterRef(name="Chapter 1", subject=SubjectRef(name=subject) if subject else None)
    return QuizMeta(
        id=quiz_id,
        title=title or f"Quiz {quiz_id}",
        difficulty=difficulty,
        question_count=question_count,
        time_limit=time_limit,
        topic=TopicRef(name=topic, chapter=chapter),
    )


@pytest.fixture
def quizzes() -> list[QuizMeta]:
    """Three quizzes: two in Mathematics, one in Physics."""
    return [
        make_quiz("q1", subject="Mathematics", topic="Algebra", difficulty="easy"),
        make_quiz("q2", subject="Mathematics", topic="Geometry", difficulty="hard", question_count=5),
        make_quiz("q3", subject="Physics", topic="Motion", difficulty="medium", question_count=8),
    ]


@pytest.fixture(scope="function")
def client():
    """FastAPI test client; dependency overrides are reset after each test."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def quiz_factory():
    """Return the ``make_quiz`` builder for tests that need custom quizzes."""
    return make_quiz

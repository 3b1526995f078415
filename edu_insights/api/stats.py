"""Quiz statistics routes for the admin dashboard."""

from fastapi import APIRouter, Query

from edu_insights.config import settings
from edu_insights.schemas.stats import QuizStat, StatsReport, StatsRequest
from edu_insights.services.stats_aggregator import aggregate, filter_quiz_stats, paginate

router = APIRouter()


@router.post("/aggregate", response_model=StatsReport)
def aggregate_stats(payload: StatsRequest):
    """Return per-quiz, per-subject and overview statistics for a snapshot."""
    return aggregate(payload.quizzes, payload.attempts)


@router.post("/quizzes", response_model=list[QuizStat])
def list_quiz_stats(
    payload: StatsRequest,
    search: str | None = Query(None, description="Match title, subject or topic"),
    difficulty: str = Query("all", description="Exact difficulty, or 'all'"),
    skip: int = Query(0, ge=0),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
):
    """Return the filtered, paginated quiz statistics table."""
    report = aggregate(payload.quizzes, payload.attempts)
    filtered = filter_quiz_stats(report.quiz_stats, search=search, difficulty=difficulty)
    return paginate(filtered, skip=skip, limit=limit)

"""Quiz statistics aggregation for the admin dashboard.

Folds a snapshot of quiz attempts into three rollups:
  1. Per-quiz running means (completion rate, average score, attempt count)
  2. Per-subject unweighted means across the subject's quizzes
  3. A platform overview weighted by attempt count

Running means are updated once per attempt (``mean = (mean * (n-1) + x) / n``)
and never recomputed by re-scanning history.

Subject averages treat every quiz equally, including quizzes nobody has
attempted yet: those contribute 0 and pull the subject mean down. The admin
dashboard has always reported it this way, so it is kept as-is.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from edu_insights.config import settings
from edu_insights.core.relations import resolve_path
from edu_insights.schemas.stats import (
    QuizAttemptRecord,
    QuizMeta,
    QuizStat,
    StatsOverview,
    StatsReport,
    SubjectStat,
)

logger = logging.getLogger(__name__)

_SUBJECT_PATH = ("topic", "chapter", "subject", "name")
_TOPIC_PATH = ("topic", "name")


# ── helpers ───────────────────────────────────────────────────────────────────


def _running_mean(mean: float, count: int, value: float) -> float:
    """Fold *value* into a mean that already covers ``count - 1`` samples."""
    return (mean * (count - 1) + value) / count


def _as_quiz(item: Any) -> QuizMeta:
    return item if isinstance(item, QuizMeta) else QuizMeta.model_validate(item)


def _as_attempt(item: Any) -> QuizAttemptRecord:
    if isinstance(item, QuizAttemptRecord):
        return item
    return QuizAttemptRecord.model_validate(item)


# ── 1. Per-quiz stats ─────────────────────────────────────────────────────────


def init_quiz_stats(quizzes: Iterable[Any]) -> dict[str, QuizStat]:
    """Build a zeroed QuizStat per quiz, keyed by quiz id in input order."""
    unknown = settings.UNKNOWN_LABEL
    stats: dict[str, QuizStat] = {}
    for raw in quizzes:
        quiz = _as_quiz(raw)
        stats[quiz.id] = QuizStat(
            id=quiz.id,
            title=quiz.title,
            subject_name=resolve_path(quiz, _SUBJECT_PATH, unknown),
            topic_name=resolve_path(quiz, _TOPIC_PATH, unknown),
            difficulty=quiz.difficulty or "",
            question_count=quiz.question_count or 0,
            time_limit=quiz.time_limit or 0,
        )
    return stats


def apply_attempts(stats: dict[str, QuizStat], attempts: Iterable[Any]) -> int:
    """Fold each attempt into its quiz's running stats.

    An incomplete attempt adds nothing to the completed total but still
    counts in the denominator; a missing score counts as 0. Attempts for
    unknown quizzes are skipped. Returns the number skipped.
    """
    dropped = 0
    for raw in attempts:
        attempt = _as_attempt(raw)
        stat = stats.get(attempt.quiz_id)
        if stat is None:
            dropped += 1
            continue

        stat.attempts += 1
        n = stat.attempts
        stat.completion_rate = _running_mean(
            stat.completion_rate, n, 100.0 if attempt.completed else 0.0
        )
        stat.avg_score = _running_mean(stat.avg_score, n, attempt.score or 0.0)

    if dropped:
        logger.debug("Ignored %d attempt(s) referencing unknown quizzes", dropped)
    return dropped


# ── 2. Per-subject stats ──────────────────────────────────────────────────────


def build_subject_stats(quiz_stats: Iterable[QuizStat]) -> list[SubjectStat]:
    """Group quiz stats by subject name, most-attempted subject first."""
    subjects: dict[str, SubjectStat] = {}
    for quiz in quiz_stats:
        name = quiz.subject_name
        subject = subjects.get(name)
        if subject is None:
            subject = subjects[name] = SubjectStat(id=name, name=name)

        subject.quiz_count += 1
        subject.total_attempts += quiz.attempts
        subject.avg_completion_rate = _running_mean(
            subject.avg_completion_rate, subject.quiz_count, quiz.completion_rate
        )
        subject.avg_score = _running_mean(
            subject.avg_score, subject.quiz_count, quiz.avg_score
        )

    return sorted(subjects.values(), key=lambda s: s.total_attempts, reverse=True)


# ── 3. Overview ───────────────────────────────────────────────────────────────


def build_overview(quiz_stats: Sequence[QuizStat]) -> StatsOverview:
    """Attempt-weighted platform totals; rates are 0 when nothing was attempted."""
    total_attempts = sum(q.attempts for q in quiz_stats)

    avg_score = 0.0
    completion_rate = 0.0
    if total_attempts > 0:
        total_scores = sum(q.avg_score * q.attempts for q in quiz_stats)
        avg_score = total_scores / total_attempts

        total_completions = sum(q.completion_rate * q.attempts / 100 for q in quiz_stats)
        completion_rate = total_completions / total_attempts * 100

    return StatsOverview(
        total_quizzes=len(quiz_stats),
        total_questions=sum(q.question_count for q in quiz_stats),
        total_attempts=total_attempts,
        avg_score=avg_score,
        completion_rate=completion_rate,
    )


# ── Public entry point ────────────────────────────────────────────────────────


def aggregate(quizzes: Iterable[Any], attempts: Iterable[Any]) -> StatsReport:
    """Compute quiz, subject and overview statistics from one snapshot.

    Accepts ``QuizMeta`` / ``QuizAttemptRecord`` instances or plain dicts in
    the upstream row shape. Never raises on missing relations, unknown quiz
    ids or empty inputs.
    """
    stats = init_quiz_stats(quizzes)
    apply_attempts(stats, attempts)

    quiz_stats = list(stats.values())
    report = StatsReport(
        quiz_stats=quiz_stats,
        subject_stats=build_subject_stats(quiz_stats),
        overview=build_overview(quiz_stats),
    )
    logger.debug(
        "Aggregated %d quizzes / %d subjects / %d attempts",
        report.overview.total_quizzes,
        len(report.subject_stats),
        report.overview.total_attempts,
    )
    return report


# ── Listing helpers ───────────────────────────────────────────────────────────


def filter_quiz_stats(
    quiz_stats: Iterable[QuizStat],
    search: str | None = None,
    difficulty: str | None = None,
) -> list[QuizStat]:
    """Case-insensitive search over title / subject / topic plus a difficulty filter.

    An empty search and ``difficulty="all"`` (or ``None``) match everything.
    """
    needle = (search or "").lower()
    wanted = difficulty if difficulty and difficulty != "all" else None

    results: list[QuizStat] = []
    for quiz in quiz_stats:
        if needle and not (
            needle in quiz.title.lower()
            or needle in quiz.subject_name.lower()
            or needle in quiz.topic_name.lower()
        ):
            continue
        if wanted is not None and quiz.difficulty != wanted:
            continue
        results.append(quiz)
    return results


def paginate(items: Sequence[Any], skip: int = 0, limit: int | None = None) -> list[Any]:
    """Return ``items[skip:skip + limit]`` as a new list."""
    end = None if limit is None else skip + limit
    return list(items[skip:end])

"""Pydantic schemas — re‑exported for convenience."""

from edu_insights.schemas.stats import (  # noqa: F401
    ChapterRef,
    QuizAttemptRecord,
    QuizMeta,
    QuizStat,
    StatsOverview,
    StatsReport,
    StatsRequest,
    SubjectRef,
    SubjectStat,
    TopicRef,
)
from edu_insights.schemas.subject import (  # noqa: F401
    CatalogSubject,
    EnhancedSubject,
    ResolveRequest,
    StaticSubjectInfo,
)
from edu_insights.schemas.career import (  # noqa: F401
    CareerPathway,
    CareerPathwayDetail,
    CareerSubjectsRequest,
)

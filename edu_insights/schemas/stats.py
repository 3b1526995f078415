"""Quiz statistics schemas — attempt inputs, per-quiz / per-subject rollups."""

from pydantic import AliasChoices, BaseModel, Field


# ── Quiz relation chain (quiz → topic → chapter → subject) ───────────────────


class SubjectRef(BaseModel):
    name: str | None = None


class ChapterRef(BaseModel):
    name: str | None = None
    subject: SubjectRef | None = Field(
        default=None, validation_alias=AliasChoices("subject", "subjects")
    )


class TopicRef(BaseModel):
    name: str | None = None
    chapter: ChapterRef | None = Field(
        default=None, validation_alias=AliasChoices("chapter", "chapters")
    )


# ── Inputs ────────────────────────────────────────────────────────────────────


class QuizMeta(BaseModel):
    """Quiz row with its nested topic relation.

    Upstream rows use ``name`` for the title and plural relation keys
    (``topics`` → ``chapters`` → ``subjects``); both spellings are accepted.
    """

    id: str
    title: str = Field(default="", validation_alias=AliasChoices("title", "name"))
    difficulty: str | None = None
    question_count: int | None = None
    time_limit: int | None = None
    topic: TopicRef | None = Field(
        default=None, validation_alias=AliasChoices("topic", "topics")
    )


class QuizAttemptRecord(BaseModel):
    """One student attempt at a quiz. Score is a percentage (0–100)."""

    quiz_id: str
    score: float | None = Field(default=None, ge=0, le=100, allow_inf_nan=False)
    completed: bool = False


class StatsRequest(BaseModel):
    """POST /api/stats/* — snapshot of quizzes and their attempts."""

    quizzes: list[QuizMeta] = []
    attempts: list[QuizAttemptRecord] = []


# ── Outputs ───────────────────────────────────────────────────────────────────


class QuizStat(BaseModel):
    """Running statistics for one quiz."""

    id: str
    title: str
    subject_name: str
    topic_name: str
    difficulty: str = ""
    completion_rate: float = 0.0
    avg_score: float = 0.0
    attempts: int = 0
    question_count: int = 0
    time_limit: int = 0


class SubjectStat(BaseModel):
    """Per-subject aggregate over the subject's quizzes (unweighted)."""

    id: str
    name: str
    quiz_count: int = 0
    total_attempts: int = 0
    avg_completion_rate: float = 0.0
    avg_score: float = 0.0


class StatsOverview(BaseModel):
    """Platform-wide KPIs, attempt-weighted."""

    total_quizzes: int = 0
    total_questions: int = 0
    total_attempts: int = 0
    avg_score: float = 0.0
    completion_rate: float = 0.0


class StatsReport(BaseModel):
    """Full statistics payload for the admin dashboard."""

    quiz_stats: list[QuizStat] = []
    subject_stats: list[SubjectStat] = []
    overview: StatsOverview = Field(default_factory=StatsOverview)

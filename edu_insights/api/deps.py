"""FastAPI dependencies shared across routes."""

from edu_insights.data.career_guidance import CAREER_PATHWAYS, SUBJECT_MAPPING
from edu_insights.schemas.career import CareerPathway
from edu_insights.schemas.subject import StaticSubjectInfo


def get_subject_table() -> dict[str, StaticSubjectInfo]:
    """Static subject-key table used when a request does not bring its own."""
    return SUBJECT_MAPPING


def get_career_pathways() -> list[CareerPathway]:
    return CAREER_PATHWAYS

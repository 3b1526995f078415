"""Career guidance schemas."""

from pydantic import BaseModel

from edu_insights.schemas.subject import CatalogSubject, EnhancedSubject


class CareerPathway(BaseModel):
    """A career with the subject keys students must / should / can learn."""

    id: str
    title: str
    description: str
    must_learn_ids: list[str] = []
    should_learn_ids: list[str] = []
    can_learn_ids: list[str] = []


class CareerPathwayDetail(BaseModel):
    """Career pathway with every subject key resolved against the catalog."""

    id: str
    title: str
    description: str
    must_learn: list[EnhancedSubject] = []
    should_learn: list[EnhancedSubject] = []
    can_learn: list[EnhancedSubject] = []


class CareerSubjectsRequest(BaseModel):
    """POST /api/careers/{career_id}/subjects — current catalog snapshot."""

    catalog: list[CatalogSubject] = []

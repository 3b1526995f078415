"""Career guidance routes."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from edu_insights.api.deps import get_career_pathways, get_subject_table
from edu_insights.schemas.career import CareerPathway, CareerPathwayDetail, CareerSubjectsRequest
from edu_insights.schemas.subject import StaticSubjectInfo
from edu_insights.services.careers import get_career, resolve_pathway, search_careers

router = APIRouter()


@router.get("", response_model=list[CareerPathway])
def list_careers(
    search: str | None = Query(None, description="Search by career title"),
    pathways: list[CareerPathway] = Depends(get_career_pathways),
):
    """Return all careers, or only those whose title matches *search*."""
    if search is None:
        return pathways
    return search_careers(search, pathways)


@router.post("/{career_id}/subjects", response_model=CareerPathwayDetail)
def get_career_subjects(
    career_id: str,
    payload: CareerSubjectsRequest,
    pathways: list[CareerPathway] = Depends(get_career_pathways),
    subject_table: dict[str, StaticSubjectInfo] = Depends(get_subject_table),
):
    """Resolve a career's subject lists against the posted catalog."""
    pathway = get_career(career_id, pathways)
    if pathway is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Career not found")
    return resolve_pathway(pathway, payload.catalog, subject_table)

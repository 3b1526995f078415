"""Subject resolution routes."""

import logging

from fastapi import APIRouter, Depends

from edu_insights.api.deps import get_subject_table
from edu_insights.schemas.subject import EnhancedSubject, ResolveRequest, StaticSubjectInfo
from edu_insights.services.subject_matcher import resolve_all

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/resolve", response_model=list[EnhancedSubject])
def resolve_subjects(
    payload: ResolveRequest,
    subject_table: dict[str, StaticSubjectInfo] = Depends(get_subject_table),
):
    """Resolve subject keys against the posted catalog, in request order."""
    table = payload.static_table if payload.static_table is not None else subject_table
    logger.debug(
        "Resolving %d subject key(s) against %d catalog entries",
        len(payload.keys),
        len(payload.catalog),
    )
    return resolve_all(payload.keys, payload.catalog, table)

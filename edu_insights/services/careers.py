"""Career guidance lookups on top of the static career tables."""

from collections.abc import Iterable, Sequence
from typing import Any

from edu_insights.schemas.career import CareerPathway, CareerPathwayDetail
from edu_insights.services.subject_matcher import StaticTable, resolve_all


def search_careers(term: str | None, pathways: Iterable[CareerPathway]) -> list[CareerPathway]:
    """Careers whose title contains *term* (case-insensitive).

    An empty term returns nothing; the search box only lists hits once the
    student has typed something. The term is not trimmed.
    """
    needle = (term or "").lower()
    if not needle:
        return []
    return [p for p in pathways if needle in p.title.lower()]


def get_career(career_id: str, pathways: Iterable[CareerPathway]) -> CareerPathway | None:
    return next((p for p in pathways if p.id == career_id), None)


def resolve_pathway(
    pathway: CareerPathway,
    catalog: Sequence[Any],
    static_table: StaticTable | None = None,
) -> CareerPathwayDetail:
    """Resolve the must / should / can-learn subject keys of one career."""
    return CareerPathwayDetail(
        id=pathway.id,
        title=pathway.title,
        description=pathway.description,
        must_learn=resolve_all(pathway.must_learn_ids, catalog, static_table),
        should_learn=resolve_all(pathway.should_learn_ids, catalog, static_table),
        can_learn=resolve_all(pathway.can_learn_ids, catalog, static_table),
    )

"""Resolve static subject keys against the live subject catalog.

The career tables reference subjects by opaque keys fixed at build time,
while the catalog is fetched at request time and its ids / slugs drift.
Each key is resolved with an ordered cascade of predicates, checked per
catalog entry in catalog order; the first entry that satisfies any tier wins:

  1. Exact slug match
  2. Partial slug match (slug within key or key within slug)
  3. Normalised name containment, either direction
  4. Normalised category containment

There is no scoring. When nothing matches, the static table supplies the
record. Topic tags always come from the static table; the catalog has none.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from edu_insights.schemas.subject import CatalogSubject, EnhancedSubject, StaticSubjectInfo

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^a-z0-9]")

StaticTable = Mapping[str, Any]


def normalize(text: str) -> str:
    """Lowercase and drop everything outside ``[a-z0-9]``.

    'Sains Komputer' → 'sainskomputer'
    'pendidikan-al-quran' → 'pendidikanalquran'
    """
    return _NON_ALNUM.sub("", text.lower())


# ── Matching tiers ────────────────────────────────────────────────────────────


def match_exact_slug(entry: CatalogSubject, key: str) -> bool:
    return entry.slug == key


def match_partial_slug(entry: CatalogSubject, key: str) -> bool:
    if not entry.slug:
        return False
    return entry.slug in key or key in entry.slug


def match_normalized_name(entry: CatalogSubject, key: str) -> bool:
    name = normalize(entry.name)
    norm_key = normalize(key)
    return norm_key in name or name in norm_key


def match_normalized_category(entry: CatalogSubject, key: str) -> bool:
    if not entry.category:
        return False
    return normalize(key) in normalize(entry.category)


MATCHERS: tuple[Callable[[CatalogSubject, str], bool], ...] = (
    match_exact_slug,
    match_partial_slug,
    match_normalized_name,
    match_normalized_category,
)


def _matches(entry: CatalogSubject, key: str) -> bool:
    return any(matcher(entry, key) for matcher in MATCHERS)


# ── Input coercion ────────────────────────────────────────────────────────────


def _as_catalog(catalog: Iterable[Any]) -> list[CatalogSubject]:
    return [
        s if isinstance(s, CatalogSubject) else CatalogSubject.model_validate(s)
        for s in catalog
    ]


def _static_entry(static_table: StaticTable | None, key: str) -> StaticSubjectInfo | None:
    if not static_table:
        return None
    entry = static_table.get(key)
    if entry is None or isinstance(entry, StaticSubjectInfo):
        return entry
    return StaticSubjectInfo.model_validate(entry)


# ── Public API ────────────────────────────────────────────────────────────────


def find_match(key: str, catalog: Iterable[Any]) -> CatalogSubject | None:
    """Return the first catalog entry matching *key*, or ``None``."""
    for entry in _as_catalog(catalog):
        if _matches(entry, key):
            return entry
    return None


def _resolve_one(
    key: str, catalog: list[CatalogSubject], static_table: StaticTable | None
) -> EnhancedSubject:
    static = _static_entry(static_table, key)
    topics = list(static.topics) if static and static.topics else []

    matched = next((entry for entry in catalog if _matches(entry, key)), None)
    if matched is not None:
        return EnhancedSubject(
            id=matched.id,
            name=matched.name,
            description=matched.description or "",
            slug=matched.slug or "",
            icon=matched.icon,
            category=matched.category,
            topics=topics,
        )

    logger.debug("No catalog subject matched %r — using static fallback", key)
    return EnhancedSubject(
        id=key,
        name=(static.name if static else None) or key,
        description=(static.description if static else None) or "",
        slug=key,
        topics=topics,
    )


def resolve(
    key: str, catalog: Iterable[Any], static_table: StaticTable | None = None
) -> EnhancedSubject:
    """Resolve one subject key to a catalog subject or its static fallback.

    Never raises: with neither a match nor a static entry the result is a
    minimal record keyed by *key*.
    """
    return _resolve_one(key, _as_catalog(catalog), static_table)


def resolve_all(
    keys: Iterable[str], catalog: Iterable[Any], static_table: StaticTable | None = None
) -> list[EnhancedSubject]:
    """Resolve each key independently, preserving input order."""
    entries = _as_catalog(catalog)
    return [_resolve_one(key, entries, static_table) for key in keys]

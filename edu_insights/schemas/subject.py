"""Subject catalog and resolution schemas."""

from pydantic import BaseModel


class CatalogSubject(BaseModel):
    """Subject row from the live catalog."""

    id: str
    name: str
    slug: str | None = None
    category: str | None = None
    description: str | None = None
    icon: str | None = None  # emoji


class StaticSubjectInfo(BaseModel):
    """Build-time metadata for a subject key used by the career tables."""

    name: str | None = None
    description: str | None = None
    topics: list[str] = []


class EnhancedSubject(BaseModel):
    """Catalog subject (or static fallback) enriched with topic tags."""

    id: str
    name: str
    description: str = ""
    slug: str = ""
    icon: str | None = None
    category: str | None = None
    topics: list[str] = []


class ResolveRequest(BaseModel):
    """POST /api/subjects/resolve.

    ``static_table`` overrides the built-in subject mapping when given.
    """

    keys: list[str]
    catalog: list[CatalogSubject] = []
    static_table: dict[str, StaticSubjectInfo] | None = None

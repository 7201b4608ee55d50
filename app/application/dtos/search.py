"""DTOs for cross-entity search (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime

from app.domain.enums import ContentType


@dataclass(frozen=True)
class SearchHit:
    """Single public content record matched by a query (read-model).

    Built at the content-store boundary from blog, webinar, or app rows.
    """

    id: str
    type: ContentType
    title: str
    excerpt: str | None
    created_at: datetime
    # blog: publication status str; webinar: is_active bool; app: lifecycle stage str
    status_signal: str | bool | None


@dataclass(frozen=True)
class ScoredHit:
    """SearchHit plus its relevance score for one query."""

    hit: SearchHit
    relevance: int


@dataclass(frozen=True)
class SearchQuery:
    """Search request: text, included content types, and total result limit."""

    text: str
    type_filters: frozenset[ContentType] = field(
        default_factory=lambda: frozenset(ContentType)
    )
    limit: int = 10

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError("limit must be a positive integer")

    @property
    def normalized_text(self) -> str:
        return (self.text or "").strip()

    def includes(self, content_type: ContentType) -> bool:
        return content_type in self.type_filters


@dataclass(frozen=True)
class SearchStats:
    """Counts of publicly visible content per kind."""

    total_blogs: int
    total_webinars: int
    total_apps: int

    @property
    def total_content(self) -> int:
        return self.total_blogs + self.total_webinars + self.total_apps

"""Search API schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.application.dtos.search import ScoredHit, SearchStats
from app.domain.enums import ContentType


class SearchResultItemResponse(BaseModel):
    """Single ranked hit (blog, webinar, or app)."""

    id: str
    type: ContentType = Field(..., description="blog | webinar | app")
    title: str
    excerpt: str | None = None
    created_at: datetime
    status: str | bool | None = Field(
        None,
        description="Blog publication status, webinar active flag, or app lifecycle stage",
    )
    relevance: int = Field(..., ge=0)

    @classmethod
    def from_scored(cls, scored: ScoredHit) -> "SearchResultItemResponse":
        hit = scored.hit
        return cls(
            id=hit.id,
            type=hit.type,
            title=hit.title,
            excerpt=hit.excerpt,
            created_at=hit.created_at,
            status=hit.status_signal,
            relevance=scored.relevance,
        )


class SearchFilters(BaseModel):
    """Echo of the content types included in the search."""

    blogs: bool = True
    webinars: bool = True
    apps: bool = True


class SearchResponse(BaseModel):
    """Ranked search response: hits (highest relevance first), count, and echo of the request."""

    results: list[SearchResultItemResponse]
    total: int
    query: str
    filters: SearchFilters


class SuggestionsResponse(BaseModel):
    suggestions: list[str]


class SearchStatsResponse(BaseModel):
    """Counts of publicly visible content."""

    total_blogs: int
    total_webinars: int
    total_apps: int
    total_content: int

    @classmethod
    def from_stats(cls, stats: SearchStats) -> "SearchStatsResponse":
        return cls(
            total_blogs=stats.total_blogs,
            total_webinars=stats.total_webinars,
            total_apps=stats.total_apps,
            total_content=stats.total_content,
        )

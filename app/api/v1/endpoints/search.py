"""Search API: ranked search across public blogs, webinars, and apps; suggestions; stats."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.v1.dependencies import get_search_service
from app.application.dtos.search import SearchQuery
from app.application.use_cases.search import SearchService
from app.core.config import get_settings
from app.domain.enums import ContentType
from app.domain.exceptions import ValidationException
from app.schemas.search import (
    SearchFilters,
    SearchResponse,
    SearchResultItemResponse,
    SearchStatsResponse,
    SuggestionsResponse,
)

router = APIRouter()


def _resolve_limit(limit: int | None) -> int:
    settings = get_settings()
    if limit is None:
        return settings.search_default_limit
    if limit < 1 or limit > settings.search_max_limit:
        raise ValidationException(
            f"limit must be between 1 and {settings.search_max_limit}", field="limit"
        )
    return limit


@router.get("", response_model=SearchResponse)
async def search(
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    q: str = Query("", max_length=500, description="Search text (at least 2 characters)"),
    blogs: bool = Query(True, description="Include blog posts"),
    webinars: bool = Query(True, description="Include webinars"),
    apps: bool = Query(True, description="Include apps"),
    limit: int | None = Query(None, description="Maximum number of results in total"),
):
    """Search public content. Short or empty q returns an empty result list."""
    filters = SearchFilters(blogs=blogs, webinars=webinars, apps=apps)
    included = {
        ContentType.BLOG: blogs,
        ContentType.WEBINAR: webinars,
        ContentType.APP: apps,
    }
    query = SearchQuery(
        text=q,
        type_filters=frozenset(t for t, on in included.items() if on),
        limit=_resolve_limit(limit),
    )
    scored = await search_svc.search(query)
    return SearchResponse(
        results=[SearchResultItemResponse.from_scored(s) for s in scored],
        total=len(scored),
        query=q,
        filters=filters,
    )


@router.get("/suggestions", response_model=SuggestionsResponse)
async def suggestions(
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    q: str = Query("", max_length=500),
):
    """Up to five distinct public titles containing q."""
    return SuggestionsResponse(suggestions=await search_svc.suggestions(q))


@router.get("/stats", response_model=SearchStatsResponse)
async def stats(
    search_svc: Annotated[SearchService, Depends(get_search_service)],
):
    """Counts of public blogs, webinars, and apps."""
    return SearchStatsResponse.from_stats(await search_svc.stats())

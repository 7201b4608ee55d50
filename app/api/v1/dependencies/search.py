"""Search dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.use_cases.search import SearchService
from app.core.config import get_settings
from app.infrastructure.persistence.database import get_db
from app.infrastructure.persistence.repositories import ContentStoreRepository


async def get_content_store(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ContentStoreRepository:
    """Content store over blog, webinar, and app tables (read-only)."""
    return ContentStoreRepository(db)


async def get_search_service(
    content_store: Annotated[ContentStoreRepository, Depends(get_content_store)],
) -> SearchService:
    """Search use case (ranked search, suggestions, stats)."""
    settings = get_settings()
    return SearchService(
        content_store,
        fetch_timeout_seconds=settings.search_fetch_timeout_seconds,
        min_query_length=settings.search_min_query_length,
    )

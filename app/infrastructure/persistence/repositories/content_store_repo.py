"""Content store repository: public blog, webinar, and app reads for search.

Maps ORM rows to SearchHit at this boundary. SQLAlchemy errors and driver
connection errors (OSError from an unreachable server) both surface as
StoreUnavailableException. Matching is case-insensitive substring (ILIKE)
with wildcards in the query escaped.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import Select, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.search import SearchHit, SearchStats
from app.domain.enums import BlogStatus, ContentType
from app.domain.exceptions import StoreUnavailableException
from app.infrastructure.persistence.models.content import BlogPost, ResearchApp, Webinar
from app.shared.utils.datetime import ensure_utc

logger = logging.getLogger(__name__)


def _like_pattern(query: str) -> str:
    """Escape LIKE wildcards % and _ so query is literal."""
    escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def _contains(column: Any, pattern: str) -> Any:
    return column.ilike(pattern, escape="\\")


class ContentStoreRepository:
    """Read-only access to public content (IContentStore)."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    def _hits_statement(self, content_type: ContentType, pattern: str, limit: int) -> Select:
        if content_type == ContentType.BLOG:
            return (
                select(BlogPost)
                .where(
                    BlogPost.status == BlogStatus.PUBLISHED.value,
                    or_(
                        _contains(BlogPost.title, pattern),
                        _contains(BlogPost.excerpt, pattern),
                        _contains(BlogPost.content, pattern),
                    ),
                )
                .order_by(BlogPost.created_at.desc())
                .limit(limit)
            )
        if content_type == ContentType.WEBINAR:
            return (
                select(Webinar)
                .where(
                    Webinar.is_active.is_(True),
                    or_(
                        _contains(Webinar.title, pattern),
                        _contains(Webinar.description, pattern),
                    ),
                )
                .order_by(Webinar.created_at.desc())
                .limit(limit)
            )
        return (
            select(ResearchApp)
            .where(
                ResearchApp.is_active.is_(True),
                or_(
                    _contains(ResearchApp.name, pattern),
                    _contains(ResearchApp.description, pattern),
                    _contains(ResearchApp.target_audience, pattern),
                ),
            )
            .order_by(ResearchApp.created_at.desc())
            .limit(limit)
        )

    @staticmethod
    def _to_hit(content_type: ContentType, row: Any) -> SearchHit:
        created_at = ensure_utc(row.created_at)
        if content_type == ContentType.BLOG:
            return SearchHit(
                id=row.id,
                type=content_type,
                title=row.title,
                excerpt=row.excerpt,
                created_at=created_at,
                status_signal=row.status,
            )
        if content_type == ContentType.WEBINAR:
            return SearchHit(
                id=row.id,
                type=content_type,
                title=row.title,
                excerpt=row.description,
                created_at=created_at,
                status_signal=bool(row.is_active),
            )
        return SearchHit(
            id=row.id,
            type=content_type,
            title=row.name,
            excerpt=row.description,
            created_at=created_at,
            status_signal=row.status,
        )

    async def fetch_public_hits(
        self, content_type: ContentType, query_text: str, limit: int
    ) -> list[SearchHit]:
        """Newest-first public rows of content_type containing query_text (title, excerpt, body)."""
        stmt = self._hits_statement(content_type, _like_pattern(query_text), limit)
        try:
            result = await self.db.execute(stmt)
        except (SQLAlchemyError, OSError) as e:
            logger.error("Content store fetch failed for %s: %s", content_type.value, e)
            raise StoreUnavailableException(content_type.value, str(e)) from e
        return [self._to_hit(content_type, row) for row in result.scalars().all()]

    async def fetch_public_titles(
        self, content_type: ContentType, query_text: str, limit: int
    ) -> list[str]:
        """Public titles (app names for apps) containing query_text."""
        pattern = _like_pattern(query_text)
        if content_type == ContentType.BLOG:
            stmt = select(BlogPost.title).where(
                BlogPost.status == BlogStatus.PUBLISHED.value,
                _contains(BlogPost.title, pattern),
            )
        elif content_type == ContentType.WEBINAR:
            stmt = select(Webinar.title).where(
                Webinar.is_active.is_(True), _contains(Webinar.title, pattern)
            )
        else:
            stmt = select(ResearchApp.name).where(
                ResearchApp.is_active.is_(True), _contains(ResearchApp.name, pattern)
            )
        try:
            result = await self.db.execute(stmt.limit(limit))
        except (SQLAlchemyError, OSError) as e:
            logger.error("Title suggestions failed for %s: %s", content_type.value, e)
            raise StoreUnavailableException(content_type.value, str(e)) from e
        return list(result.scalars().all())

    async def count_public(self) -> SearchStats:
        """Counts of published blogs, active webinars, and active apps."""
        try:
            blogs = await self.db.scalar(
                select(func.count())
                .select_from(BlogPost)
                .where(BlogPost.status == BlogStatus.PUBLISHED.value)
            )
            webinars = await self.db.scalar(
                select(func.count()).select_from(Webinar).where(Webinar.is_active.is_(True))
            )
            apps = await self.db.scalar(
                select(func.count())
                .select_from(ResearchApp)
                .where(ResearchApp.is_active.is_(True))
            )
        except (SQLAlchemyError, OSError) as e:
            logger.error("Content stats query failed: %s", e)
            raise StoreUnavailableException(reason=str(e)) from e
        return SearchStats(
            total_blogs=blogs or 0,
            total_webinars=webinars or 0,
            total_apps=apps or 0,
        )

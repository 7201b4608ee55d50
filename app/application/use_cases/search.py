"""Cross-entity search use case: fan out per content type, rank, sort, truncate."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from app.application.dtos.search import ScoredHit, SearchHit, SearchQuery, SearchStats
from app.application.services.relevance_ranker import RelevanceRanker
from app.domain.enums import ContentType
from app.domain.exceptions import StoreUnavailableException
from app.shared.telemetry.tracing import add_span_attributes, traced
from app.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IContentStore

logger = logging.getLogger(__name__)

SUGGESTIONS_PER_TYPE = 3
MAX_SUGGESTIONS = 5


class SearchService:
    """Search across blogs, webinars, and apps (public content only)."""

    def __init__(
        self,
        content_store: "IContentStore",
        ranker: RelevanceRanker | None = None,
        *,
        clock: Callable[[], datetime] = utc_now,
        fetch_timeout_seconds: float | None = None,
        min_query_length: int = 2,
    ) -> None:
        self.content_store = content_store
        self.ranker = ranker or RelevanceRanker()
        self.clock = clock
        self.fetch_timeout_seconds = fetch_timeout_seconds
        self.min_query_length = min_query_length

    async def _fetch_hits(
        self, content_type: ContentType, text: str, limit: int
    ) -> list[SearchHit]:
        """Fetch one content type; a timeout fails the whole search."""
        try:
            return await asyncio.wait_for(
                self.content_store.fetch_public_hits(content_type, text, limit),
                timeout=self.fetch_timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.error(
                "Content store fetch timed out for %s after %s seconds",
                content_type.value,
                self.fetch_timeout_seconds,
            )
            raise StoreUnavailableException(content_type.value, "timeout") from None

    @traced("search.execute")
    async def search(self, query: SearchQuery) -> list[ScoredHit]:
        """Return hits ranked by relevance (descending), at most query.limit in total.

        Text shorter than min_query_length returns [] without touching the store.
        Equal scores keep fetch order (blog, webinar, app; newest first within a type).
        """
        text = query.normalized_text
        if len(text) < self.min_query_length:
            return []

        hits: list[SearchHit] = []
        for content_type in ContentType:
            if query.includes(content_type):
                hits.extend(await self._fetch_hits(content_type, text, query.limit))

        now = self.clock()
        scored = [
            ScoredHit(hit=hit, relevance=self.ranker.score(hit, text, now))
            for hit in hits
        ]
        # list.sort is stable, also with reverse=True
        scored.sort(key=lambda s: s.relevance, reverse=True)
        results = scored[: query.limit]
        add_span_attributes(
            **{"search.fetched": len(hits), "search.returned": len(results)}
        )
        return results

    async def suggestions(self, q: str) -> list[str]:
        """Return up to five distinct public titles containing q (three per type at most)."""
        text = (q or "").strip()
        if len(text) < self.min_query_length:
            return []
        titles: list[str] = []
        for content_type in ContentType:
            titles.extend(
                await self.content_store.fetch_public_titles(
                    content_type, text, SUGGESTIONS_PER_TYPE
                )
            )
        return list(dict.fromkeys(titles))[:MAX_SUGGESTIONS]

    async def stats(self) -> SearchStats:
        """Counts of public content per kind."""
        return await self.content_store.count_public()

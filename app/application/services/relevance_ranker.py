"""Relevance scoring for search hits (title/excerpt match, recency, status bonus)."""

from __future__ import annotations

from datetime import datetime, timedelta

from app.application.dtos.search import SearchHit
from app.domain.enums import AppStatus, BlogStatus, ContentType
from app.shared.utils.datetime import ensure_utc

TITLE_MATCH_SCORE = 10
TITLE_EXACT_BONUS = 5
EXCERPT_MATCH_SCORE = 5
RECENT_WINDOW = timedelta(days=30)
VERY_RECENT_WINDOW = timedelta(days=7)
RECENCY_BONUS = 1

_APP_STATUS_BONUS: dict[str, int] = {
    AppStatus.RELEASED.value: 3,
    AppStatus.BETA.value: 2,
}
_PUBLISHED_BLOG_BONUS = 2
_ACTIVE_WEBINAR_BONUS = 2


def _status_bonus(hit: SearchHit) -> int:
    signal = hit.status_signal
    if hit.type == ContentType.BLOG:
        return _PUBLISHED_BLOG_BONUS if signal == BlogStatus.PUBLISHED.value else 0
    if hit.type == ContentType.WEBINAR:
        # Only a real boolean True counts, not a truthy status string.
        return _ACTIVE_WEBINAR_BONUS if signal is True else 0
    if hit.type == ContentType.APP and isinstance(signal, str):
        return _APP_STATUS_BONUS.get(signal, 0)
    return 0


def _recency_bonus(created_at: datetime, now: datetime) -> int:
    age = (ensure_utc(now) or now) - (ensure_utc(created_at) or created_at)
    bonus = 0
    if age < RECENT_WINDOW:
        bonus += RECENCY_BONUS
    if age < VERY_RECENT_WINDOW:
        bonus += RECENCY_BONUS
    return bonus


class RelevanceRanker:
    """Scores a single hit against a query. Pure; no tie-breaking."""

    def score(self, hit: SearchHit, query_text: str, now: datetime) -> int:
        """Return the additive relevance score of hit for query_text at time now.

        Matching is case-insensitive substring matching on title and excerpt.
        """
        query = query_text.lower()
        title = (hit.title or "").lower()
        excerpt = (hit.excerpt or "").lower()

        score = 0
        if query in title:
            score += TITLE_MATCH_SCORE
            if title == query:
                score += TITLE_EXACT_BONUS
        if query in excerpt:
            score += EXCERPT_MATCH_SCORE
        score += _recency_bonus(hit.created_at, now)
        score += _status_bonus(hit)
        return score

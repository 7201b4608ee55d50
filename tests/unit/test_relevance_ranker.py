"""RelevanceRanker scoring rules (fixed clock)."""

from datetime import UTC, datetime, timedelta

import pytest

from app.application.dtos.search import SearchHit
from app.application.services.relevance_ranker import RelevanceRanker
from app.domain.enums import ContentType

NOW = datetime(2025, 6, 1, 12, 0, 0, tzinfo=UTC)


def _hit(
    content_type: ContentType = ContentType.BLOG,
    title: str = "Something else",
    excerpt: str | None = None,
    age: timedelta = timedelta(days=365),
    status_signal: str | bool | None = None,
) -> SearchHit:
    return SearchHit(
        id="h1",
        type=content_type,
        title=title,
        excerpt=excerpt,
        created_at=NOW - age,
        status_signal=status_signal,
    )


@pytest.fixture
def ranker() -> RelevanceRanker:
    return RelevanceRanker()


def test_recent_published_blog_with_title_match_scores_14(ranker: RelevanceRanker) -> None:
    hit = _hit(
        title="Qualitative Research Basics",
        excerpt="",
        age=timedelta(days=2),
        status_signal="published",
    )
    assert ranker.score(hit, "qualitative research", NOW) == 14


def test_beta_app_with_description_match(ranker: RelevanceRanker) -> None:
    hit = _hit(
        ContentType.APP,
        title="Tool",
        excerpt="for qualitative research",
        age=timedelta(days=2),
        status_signal="beta",
    )
    # 5 excerpt + 2 recency + 2 beta
    assert ranker.score(hit, "qualitative research", NOW) == 9


def test_exact_title_adds_bonus_case_insensitively(ranker: RelevanceRanker) -> None:
    hit = _hit(title="Survey Design")
    assert ranker.score(hit, "survey design", NOW) == 15


def test_title_and_excerpt_both_count(ranker: RelevanceRanker) -> None:
    hit = _hit(title="Coding interviews", excerpt="Coding tips")
    assert ranker.score(hit, "coding", NOW) == 15


@pytest.mark.parametrize(
    ("age", "expected"),
    [
        (timedelta(days=3), 2),
        (timedelta(days=7), 1),
        (timedelta(days=29), 1),
        (timedelta(days=30), 0),
        (timedelta(days=400), 0),
    ],
)
def test_recency_bonus_windows(ranker: RelevanceRanker, age: timedelta, expected: int) -> None:
    assert ranker.score(_hit(age=age), "zzz", NOW) == expected


@pytest.mark.parametrize(
    ("content_type", "signal", "expected"),
    [
        (ContentType.BLOG, "published", 2),
        (ContentType.BLOG, "draft", 0),
        (ContentType.WEBINAR, True, 2),
        (ContentType.WEBINAR, False, 0),
        (ContentType.WEBINAR, "published", 0),
        (ContentType.APP, "released", 3),
        (ContentType.APP, "beta", 2),
        (ContentType.APP, "development", 0),
    ],
)
def test_status_bonus(
    ranker: RelevanceRanker, content_type: ContentType, signal, expected: int
) -> None:
    hit = _hit(content_type, status_signal=signal)
    assert ranker.score(hit, "zzz", NOW) == expected


def test_naive_created_at_is_treated_as_utc(ranker: RelevanceRanker) -> None:
    hit = SearchHit(
        id="h1",
        type=ContentType.BLOG,
        title="x",
        excerpt=None,
        created_at=(NOW - timedelta(days=1)).replace(tzinfo=None),
        status_signal=None,
    )
    assert ranker.score(hit, "zzz", NOW) == 2


def test_score_is_deterministic(ranker: RelevanceRanker) -> None:
    hit = _hit(title="Mixed methods", excerpt="mixed", age=timedelta(days=1))
    scores = {ranker.score(hit, "mixed", NOW) for _ in range(5)}
    assert len(scores) == 1
    assert scores.pop() >= 0

"""SearchService unit tests with a mocked content store and fixed clock."""

import asyncio
from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from app.application.dtos.search import SearchHit, SearchQuery, SearchStats
from app.application.use_cases.search import SearchService
from app.domain.enums import ContentType
from app.domain.exceptions import StoreUnavailableException

NOW = datetime(2025, 6, 1, 12, 0, 0, tzinfo=UTC)


def _hit(hit_id: str, content_type: ContentType, title: str, excerpt: str = "", signal=None) -> SearchHit:
    return SearchHit(
        id=hit_id,
        type=content_type,
        title=title,
        excerpt=excerpt,
        created_at=NOW - timedelta(days=365),
        status_signal=signal,
    )


def _store(by_type: dict[ContentType, list[SearchHit]]) -> AsyncMock:
    store = AsyncMock()

    async def fetch(content_type, text, limit):
        return list(by_type.get(content_type, []))[:limit]

    store.fetch_public_hits.side_effect = fetch
    return store


def _service(store: AsyncMock, **kwargs) -> SearchService:
    return SearchService(store, clock=lambda: NOW, **kwargs)


@pytest.mark.parametrize("text", ["", " ", "a", " a "])
async def test_short_query_returns_empty_without_store_access(text: str) -> None:
    store = _store({})
    assert await _service(store).search(SearchQuery(text=text)) == []
    store.fetch_public_hits.assert_not_awaited()


async def test_results_sorted_by_relevance_descending() -> None:
    store = _store(
        {
            ContentType.BLOG: [_hit("b1", ContentType.BLOG, "Other", excerpt="survey")],
            ContentType.APP: [_hit("a1", ContentType.APP, "Survey", signal="released")],
        }
    )
    results = await _service(store).search(SearchQuery(text="survey"))
    assert [r.hit.id for r in results] == ["a1", "b1"]
    assert [r.relevance for r in results] == [18, 5]


async def test_equal_scores_keep_fetch_order() -> None:
    store = _store(
        {
            ContentType.BLOG: [
                _hit("b1", ContentType.BLOG, "Coding a"),
                _hit("b2", ContentType.BLOG, "Coding b"),
            ],
            ContentType.WEBINAR: [_hit("w1", ContentType.WEBINAR, "Coding c", signal=False)],
            ContentType.APP: [_hit("a1", ContentType.APP, "Coding d", signal="development")],
        }
    )
    results = await _service(store).search(SearchQuery(text="coding"))
    assert [r.hit.id for r in results] == ["b1", "b2", "w1", "a1"]
    assert {r.relevance for r in results} == {10}


async def test_truncates_to_limit_in_total() -> None:
    blogs = [_hit(f"b{i}", ContentType.BLOG, f"Theme {i}") for i in range(3)]
    apps = [_hit(f"a{i}", ContentType.APP, f"Theme {i}", signal="beta") for i in range(3)]
    store = _store({ContentType.BLOG: blogs, ContentType.APP: apps})
    results = await _service(store).search(SearchQuery(text="theme", limit=3))
    assert len(results) == 3
    assert all(r.hit.type == ContentType.APP for r in results)


async def test_type_filters_skip_excluded_fetches() -> None:
    store = _store({ContentType.WEBINAR: [_hit("w1", ContentType.WEBINAR, "Ethics", signal=True)]})
    query = SearchQuery(text="ethics", type_filters=frozenset({ContentType.WEBINAR}))
    results = await _service(store).search(query)
    assert [r.hit.id for r in results] == ["w1"]
    fetched = [c.args[0] for c in store.fetch_public_hits.await_args_list]
    assert fetched == [ContentType.WEBINAR]


async def test_query_text_is_trimmed_before_fetch() -> None:
    store = _store({})
    await _service(store).search(SearchQuery(text="  nvivo  ", limit=4))
    store.fetch_public_hits.assert_any_await(ContentType.BLOG, "nvivo", 4)


async def test_store_failure_fails_whole_search() -> None:
    store = AsyncMock()
    store.fetch_public_hits.side_effect = [
        [_hit("b1", ContentType.BLOG, "Coding")],
        StoreUnavailableException("webinar", "connection reset"),
    ]
    with pytest.raises(StoreUnavailableException):
        await _service(store).search(SearchQuery(text="coding"))


async def test_fetch_timeout_raises_store_unavailable() -> None:
    store = AsyncMock()

    async def slow(content_type, text, limit):
        await asyncio.sleep(5)
        return []

    store.fetch_public_hits.side_effect = slow
    with pytest.raises(StoreUnavailableException) as exc_info:
        await _service(store, fetch_timeout_seconds=0.05).search(SearchQuery(text="coding"))
    assert exc_info.value.error_code == "STORE_UNAVAILABLE"


def test_non_positive_limit_is_rejected() -> None:
    with pytest.raises(ValueError):
        SearchQuery(text="coding", limit=0)


async def test_suggestions_dedupe_and_cap_at_five() -> None:
    store = AsyncMock()
    store.fetch_public_titles.side_effect = [
        ["Survey Basics", "Survey Design", "Survey Tools"],
        ["Survey Design", "Survey Ethics"],
        ["Survey Builder", "Survey Lab"],
    ]
    suggestions = await _service(store).suggestions("survey")
    assert suggestions == [
        "Survey Basics",
        "Survey Design",
        "Survey Tools",
        "Survey Ethics",
        "Survey Builder",
    ]
    limits = {c.args[2] for c in store.fetch_public_titles.await_args_list}
    assert limits == {3}


async def test_suggestions_short_query_returns_empty() -> None:
    store = AsyncMock()
    assert await _service(store).suggestions("s") == []
    store.fetch_public_titles.assert_not_awaited()


async def test_stats_pass_through() -> None:
    store = AsyncMock()
    store.count_public.return_value = SearchStats(total_blogs=2, total_webinars=1, total_apps=3)
    stats = await _service(store).stats()
    assert stats.total_content == 6

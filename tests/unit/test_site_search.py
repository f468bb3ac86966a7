"""Unit tests for the SiteSearch facade."""

import asyncio

from pydantic import ValidationError
import pytest

from docs_site_search.config import Settings
from docs_site_search.domain.model import Page
from docs_site_search.exceptions import IndexNotReadyError
from docs_site_search.site_search import SiteSearch
from tests.fixtures.pages import make_page


@pytest.mark.unit
class TestLoadPages:
    def test_records_validate_into_pages(self):
        existing = make_page("/b", "B")

        pages = SiteSearch.load_pages(
            [
                {
                    "path": "/a",
                    "title": "A",
                    "content": "Body",
                    "headers": [{"title": "Intro", "level": 1, "slug": "intro", "charIndex": 0}],
                },
                existing,
            ]
        )

        assert isinstance(pages[0], Page)
        assert pages[0].headers[0].char_index == 0
        assert pages[1] is existing

    def test_malformed_record_raises(self):
        with pytest.raises(ValidationError):
            SiteSearch.load_pages([{"title": "no path"}])


@pytest.mark.unit
class TestReadiness:
    def test_indexes_before_build_raise(self):
        site_search = SiteSearch()

        assert not site_search.is_ready
        with pytest.raises(IndexNotReadyError):
            _ = site_search.indexes

    @pytest.mark.asyncio
    async def test_query_before_build_times_out(self):
        site_search = SiteSearch(Settings(ready_timeout_seconds=0.01))

        with pytest.raises(IndexNotReadyError, match="not built within"):
            await site_search.search("setup")

    @pytest.mark.asyncio
    async def test_query_waits_for_first_build(self, site_pages):
        site_search = SiteSearch()
        pending = asyncio.create_task(site_search.search("setup"))
        await asyncio.sleep(0)
        assert not pending.done()

        await site_search.rebuild(site_pages)
        results = await asyncio.wait_for(pending, timeout=1)

        assert [r.path for r in results] == ["/guide/setup", "/guide/deploy"]

    @pytest.mark.asyncio
    async def test_wait_ready_returns_current_indexes(self, site_pages):
        site_search = SiteSearch()
        built = site_search.build(site_pages)

        assert site_search.is_ready
        assert await site_search.wait_ready() is built


@pytest.mark.unit
class TestRebuild:
    @pytest.mark.asyncio
    async def test_rebuild_swaps_the_corpus(self):
        site_search = SiteSearch()
        site_search.build([make_page("/a", "Alpha", "first corpus")])
        old = site_search.indexes

        new = await site_search.rebuild([make_page("/b", "Beta", "second corpus")])

        assert site_search.indexes is new
        assert [r.path for r in await site_search.search("corpus")] == ["/b"]
        assert "/a" in old.pages_by_path

    @pytest.mark.asyncio
    async def test_search_passes_terms_and_limit(self, site_pages):
        site_search = SiteSearch()
        site_search.build(site_pages)

        assert len(await site_search.search("every", limit=1)) == 1
        results = await site_search.search("setup scripts", ["scripts"])
        assert [r.path for r in results] == ["/guide/deploy"]

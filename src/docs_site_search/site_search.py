"""Long-lived search facade over a rebuildable page corpus.

``SiteSearch`` owns the current ``SiteIndexes``. Queries issued before the
first build wait for it to finish (bounded by ``ready_timeout_seconds``).
A rebuild swaps in a complete new holder, so a query always sees one whole
build: the one current when it started.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Mapping, Sequence
import logging
from typing import Any

from docs_site_search.config import Settings, get_settings
from docs_site_search.domain.model import Page
from docs_site_search.domain.search import SearchResult
from docs_site_search.exceptions import IndexNotReadyError
from docs_site_search.observability.context import start_query_trace
from docs_site_search.search.executor import match
from docs_site_search.search.router import SiteIndexes, build_index


logger = logging.getLogger(__name__)


class SiteSearch:
    """Build-then-query entry point for a site corpus."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self._indexes: SiteIndexes | None = None
        self._ready = asyncio.Event()

    @staticmethod
    def load_pages(records: Iterable[Mapping[str, Any] | Page]) -> list[Page]:
        """Validate raw page records (camelCase or snake_case keys) into pages."""
        return [record if isinstance(record, Page) else Page.model_validate(record) for record in records]

    @property
    def is_ready(self) -> bool:
        return self._indexes is not None

    @property
    def indexes(self) -> SiteIndexes:
        if self._indexes is None:
            raise IndexNotReadyError("No index has been built yet")
        return self._indexes

    def build(self, pages: Iterable[Page]) -> SiteIndexes:
        """Build indexes synchronously and make them current."""
        indexes = build_index(pages, self.settings)
        self._indexes = indexes
        self._ready.set()
        return indexes

    async def rebuild(self, pages: Iterable[Page]) -> SiteIndexes:
        """Coroutine form of ``build``; yields once so already scheduled queries queue up first."""
        await asyncio.sleep(0)
        return self.build(pages)

    async def wait_ready(self, timeout: float | None = None) -> SiteIndexes:
        """Wait until a build has completed and return the current indexes."""
        if self._indexes is not None:
            return self._indexes
        timeout = self.settings.ready_timeout_seconds if timeout is None else timeout
        try:
            await asyncio.wait_for(self._ready.wait(), timeout)
        except asyncio.TimeoutError as exc:
            logger.warning("No index build finished within %.1fs", timeout)
            raise IndexNotReadyError(f"Search index not built within {timeout:.1f}s") from exc
        return self.indexes

    async def search(
        self,
        query_string: str,
        query_terms: Sequence[str] | None = None,
        limit: int | None = None,
    ) -> list[SearchResult]:
        """Query the current indexes, waiting for the first build if needed.

        Each call starts its own trace, so the log lines of one query share a
        ``trace_id``.
        """
        start_query_trace(query_string)
        indexes = await self.wait_ready()
        return await match(indexes, query_string, query_terms, limit)

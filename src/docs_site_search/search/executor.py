"""Run a query against every charset index and enrich the hits."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
import logging

from docs_site_search.domain.model import Page
from docs_site_search.domain.search import SearchResult
from docs_site_search.observability.metrics import SEARCH_LATENCY, track_latency
from docs_site_search.observability.tracing import create_span
from docs_site_search.search.grouping import get_parent_page_title, group_by_parent
from docs_site_search.search.locator import describe_match
from docs_site_search.search.router import SiteIndexes


logger = logging.getLogger(__name__)


def split_query_terms(query: str) -> list[str]:
    """Default query terms: the lowercased whitespace-separated words."""
    return query.lower().split()


def dedupe_by_path(pages: Sequence[Page]) -> list[Page]:
    """Keep the first occurrence of every path."""
    seen: set[str] = set()
    unique: list[Page] = []
    for page in pages:
        if page.path in seen:
            continue
        seen.add(page.path)
        unique.append(page)
    return unique


def enrich(indexes: SiteIndexes, page: Page, query: str, terms: Sequence[str]) -> SearchResult:
    heading_str, slug, content_str = describe_match(
        page,
        query,
        terms,
        snippet_length=indexes.settings.snippet_length,
    )
    return SearchResult(
        page=page,
        parent_page_title=get_parent_page_title(page, indexes.pages_by_path),
        heading_str=heading_str,
        slug=slug,
        content_str=content_str,
    )


async def match(
    indexes: SiteIndexes,
    query_string: str,
    query_terms: Sequence[str] | None = None,
    limit: int | None = None,
) -> list[SearchResult]:
    """Search all indexes and return grouped, display-ready results.

    Each index answers the same plan: title, headings and content, each
    capped at ``limit`` hits. Primary hits come first, so when a page is
    found by several indexes the primary hit is the one kept.
    """
    if not query_string or not query_string.strip():
        return []

    terms = list(query_terms) if query_terms is not None else split_query_terms(query_string)
    limit = limit if limit is not None else indexes.settings.default_limit
    plan = indexes.schema.build_query_plan(query_string, limit)
    active = indexes.active
    index_label = "+".join(index.name for index in active)

    with create_span(
        "site_search.match",
        attributes={"query.terms": len(terms), "query.limit": limit, "indexes": index_label},
    ), track_latency(SEARCH_LATENCY, indexes=index_label):
        hit_lists = await asyncio.gather(*(index.search(plan) for index in active))
        hits = dedupe_by_path([page for hit_list in hit_lists for page in hit_list])
        results = [enrich(indexes, page, query_string, terms) for page in hits]

    logger.debug("Query %r matched %d pages across %s", query_string, len(results), index_label)
    return group_by_parent(results)

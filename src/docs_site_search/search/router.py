"""Route pages to the primary and charset-specific indexes.

The default word tokenizer suits Latin scripts only, so pages flagged as
containing Cyrillic or CJK text are additionally indexed by an auxiliary
index with a tokenization profile for that script. A page can live in the
primary index and in any auxiliary index its flags select.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
import logging

from docs_site_search.config import Settings, get_settings
from docs_site_search.domain.model import Page
from docs_site_search.observability.metrics import INDEX_BUILD_LATENCY, INDEX_DOC_COUNT, track_latency
from docs_site_search.observability.tracing import create_span
from docs_site_search.search.analyzers import get_profile
from docs_site_search.search.full_text_index import FullTextIndex
from docs_site_search.search.schema import Schema, create_page_schema


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SiteIndexes:
    """Everything one corpus build produced.

    Built once by ``build_index`` and read-only afterwards; a rebuild creates
    a new holder instead of mutating this one.
    """

    primary: FullTextIndex
    cyrillic: FullTextIndex | None
    cjk: FullTextIndex | None
    pages_by_path: dict[str, Page]
    settings: Settings = field(default_factory=get_settings)

    @property
    def active(self) -> list[FullTextIndex]:
        """Indexes to query, primary first."""
        return [index for index in (self.primary, self.cyrillic, self.cjk) if index is not None]

    @property
    def schema(self) -> Schema:
        return self.primary.schema


def _build(schema: Schema, profile_name: str, pages: list[Page]) -> FullTextIndex:
    index = FullTextIndex(schema, get_profile(profile_name), name=profile_name)
    index.add(pages)
    INDEX_DOC_COUNT.labels(index=profile_name).set(len(index))
    return index


def build_index(all_pages: Iterable[Page], settings: Settings | None = None) -> SiteIndexes:
    """Build the primary and auxiliary indexes for a corpus.

    Pages with ``search: false`` frontmatter are dropped first and are absent
    from every index and from ``pages_by_path``. An auxiliary index is only
    built when at least one page carries its charset flag.
    """
    settings = settings or get_settings()
    all_pages = list(all_pages)
    pages = [page for page in all_pages if page.is_searchable]
    schema = create_page_schema(settings)

    with create_span("site_search.build_index", attributes={"pages.count": len(pages)}), track_latency(
        INDEX_BUILD_LATENCY
    ):
        primary = _build(schema, "forward", pages)

        cyrillic_pages = [page for page in pages if page.charsets.cyrillic]
        cjk_pages = [page for page in pages if page.charsets.cjk]
        cyrillic = _build(schema, "cyrillic", cyrillic_pages) if cyrillic_pages else None
        cjk = _build(schema, "cjk", cjk_pages) if cjk_pages else None

    if not cyrillic_pages:
        INDEX_DOC_COUNT.labels(index="cyrillic").set(0)
    if not cjk_pages:
        INDEX_DOC_COUNT.labels(index="cjk").set(0)

    logger.info(
        "Built search indexes: %d pages (%d opted out), %d cyrillic, %d cjk",
        len(pages),
        len(all_pages) - len(pages),
        len(cyrillic_pages),
        len(cjk_pages),
    )
    logger.debug("Index schema: %s", schema.to_dict())

    return SiteIndexes(
        primary=primary,
        cyrillic=cyrillic,
        cjk=cjk,
        pages_by_path={page.path: page for page in pages},
        settings=settings,
    )

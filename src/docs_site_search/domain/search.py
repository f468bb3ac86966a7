"""Domain models for search functionality.

These value objects carry a query plan to the full-text indexes and the
enriched results back to the caller. All are immutable (frozen=True).
"""

from pydantic import BaseModel, ConfigDict

from docs_site_search.domain.model import Page


class Match(BaseModel):
    """Location of a query term inside a page.

    A heading match has ``header_index`` set and ``char_index`` relative to
    that heading's title. A content match has ``header_index`` None and
    ``char_index`` relative to the page content.
    """

    model_config = ConfigDict(frozen=True)

    header_index: int | None = None
    char_index: int
    term_length: int

    @property
    def is_header_match(self) -> bool:
        return self.header_index is not None


class FieldQuery(BaseModel):
    """One entry of a query plan: search ``field`` for ``query``."""

    model_config = ConfigDict(frozen=True)

    field: str
    query: str
    limit: int
    boost: float = 1.0


class SearchResult(BaseModel):
    """Value object for a single, enriched search result.

    ``parent_page_title`` is None for every result of a parent group except
    the first one, so a caller renders the parent heading once per group.
    """

    model_config = ConfigDict(frozen=True)

    page: Page
    parent_page_title: str | None
    heading_str: str
    slug: str
    content_str: str | None

    @property
    def path(self) -> str:
        return self.page.path

    @property
    def title(self) -> str:
        return self.page.title

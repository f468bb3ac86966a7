"""docs-site-search: search result enrichment for static documentation sites."""

from docs_site_search.config import Settings, get_settings
from docs_site_search.domain import Charsets, FieldQuery, Header, Match, Page, SearchResult
from docs_site_search.exceptions import IndexNotReadyError, SiteSearchError, UnknownFieldError
from docs_site_search.search.executor import match
from docs_site_search.search.router import SiteIndexes, build_index
from docs_site_search.site_search import SiteSearch


__all__ = [
    "Charsets",
    "FieldQuery",
    "Header",
    "IndexNotReadyError",
    "Match",
    "Page",
    "SearchResult",
    "Settings",
    "SiteIndexes",
    "SiteSearch",
    "SiteSearchError",
    "UnknownFieldError",
    "build_index",
    "get_settings",
    "match",
]

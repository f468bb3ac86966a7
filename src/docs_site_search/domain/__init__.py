"""Domain layer - pure value objects with no infrastructure dependencies.

- Page, Header, Charsets: the indexed corpus
- Match, FieldQuery, SearchResult: query plans and enriched results
"""

from docs_site_search.domain.model import Charsets, Header, Page, lowercase_preserving_offsets
from docs_site_search.domain.search import FieldQuery, Match, SearchResult


__all__ = [
    "Charsets",
    "FieldQuery",
    "Header",
    "Match",
    "Page",
    "SearchResult",
    "lowercase_preserving_offsets",
]

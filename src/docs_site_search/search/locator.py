"""Locate where a query matched inside a page.

Each query term is looked up in the headings first and in the body text
second. The location shown to the user follows a precedence policy:

1. When every matched term hit a heading, the heading holding the whole
   query wins, otherwise the first term's heading.
2. When any term matched only in the body, the body position of the whole
   query wins, otherwise the first body match.

Exact phrase matches therefore outrank single-term matches, and headings
are preferred unless the match set is mixed.
"""

from __future__ import annotations

from collections.abc import Sequence
import logging

from docs_site_search.domain.model import Page
from docs_site_search.domain.search import Match
from docs_site_search.search.headings import find_enclosing_header, resolve_heading_path
from docs_site_search.search.snippet import DEFAULT_SNIPPET_LENGTH, extract_line_snippet


logger = logging.getLogger(__name__)


def get_header_match(page: Page, term: str) -> Match | None:
    """Return the first heading whose title contains ``term`` (case-insensitive)."""
    if not term:
        return None
    for idx, header in enumerate(page.headers):
        char_index = header.title.lower().find(term)
        if char_index != -1:
            return Match(header_index=idx, char_index=char_index, term_length=len(term))
    return None


def get_content_match(page: Page, term: str) -> Match | None:
    """Return the first position of ``term`` in the lowercased body."""
    if not term or not page.content_lowercase:
        return None
    char_index = page.content_lowercase.find(term)
    if char_index == -1:
        return None
    return Match(header_index=None, char_index=char_index, term_length=len(term))


def get_match(page: Page, query: str, terms: Sequence[str]) -> Match | None:
    """Pick the single most relevant match of a query in a page.

    ``query`` and ``terms`` are compared lowercased; unmatched and empty
    terms are ignored. Returns None when no term matched at all.
    """
    query = query.lower()
    matches = []
    for term in terms:
        term = term.lower()
        found = get_header_match(page, term) or get_content_match(page, term)
        if found is not None:
            matches.append(found)
    if not matches:
        return None

    if all(m.is_header_match for m in matches):
        return get_header_match(page, query) or matches[0]

    return get_content_match(page, query) or next(m for m in matches if not m.is_header_match)


def describe_match(
    page: Page,
    query: str,
    terms: Sequence[str],
    *,
    snippet_length: int = DEFAULT_SNIPPET_LENGTH,
) -> tuple[str, str, str | None]:
    """Return the display fields ``(heading_str, slug, content_str)`` for a hit.

    - no match: the page title, no anchor, no snippet
    - heading match: the heading breadcrumb and its anchor, no snippet
    - body match: the breadcrumb of the enclosing heading (or the title),
      its anchor when there is one, and a snippet of the matching line
    """
    match = get_match(page, query, terms)
    if match is None:
        logger.debug("No term of %r located in %s", query, page.path)
        return resolve_heading_path(page), "", None

    if match.is_header_match:
        header = page.headers[match.header_index]
        return resolve_heading_path(page, match.header_index), f"#{header.slug}", None

    header_index = find_enclosing_header(page, match.char_index)
    slug = "" if header_index is None else f"#{page.headers[header_index].slug}"
    content_str = extract_line_snippet(page.content, match.char_index, match.term_length, snippet_length)
    return resolve_heading_path(page, header_index), slug, content_str

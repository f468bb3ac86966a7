"""Heading breadcrumbs for search results."""

from __future__ import annotations

from docs_site_search.domain.model import Page


BREADCRUMB_SEPARATOR = " > "


def _find_parent_index(page: Page, header_index: int) -> int | None:
    """Return the nearest header before ``header_index`` one level up."""
    parent_level = page.headers[header_index].level - 1
    for idx in range(header_index - 1, -1, -1):
        if page.headers[idx].level == parent_level:
            return idx
    return None


def resolve_heading_path(page: Page, header_index: int | None = None) -> str:
    """Build the breadcrumb for a heading, e.g. ``"Install > Linux > Debian"``.

    Without a heading the page title is returned. Levels that have no
    ancestor before them are skipped, so malformed outlines only shorten the
    breadcrumb.
    """
    if header_index is None:
        return page.title

    chain: list[str] = []
    current: int | None = header_index
    while current is not None:
        chain.append(page.headers[current].title)
        current = _find_parent_index(page, current)
    chain.reverse()
    return BREADCRUMB_SEPARATOR.join(chain)


def find_enclosing_header(page: Page, char_index: int) -> int | None:
    """Return the last header starting before ``char_index`` in the content.

    Headers without a tracked ``char_index`` are ignored.
    """
    for idx in range(len(page.headers) - 1, -1, -1):
        header_offset = page.headers[idx].char_index
        if header_offset is not None and header_offset < char_index:
            return idx
    return None

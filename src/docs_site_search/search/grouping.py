"""Group search results under their parent section page."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from docs_site_search.domain.model import Page
from docs_site_search.domain.search import SearchResult


def get_parent_page_path(path: str) -> str:
    """Return the section root of a path: ``/guide/setup`` -> ``/guide/``."""
    parts = path.split("/")
    if len(parts) > 1 and parts[1]:
        return f"/{parts[1]}/"
    return "/"


def get_parent_page_title(page: Page, pages_by_path: Mapping[str, Page]) -> str:
    """Return the title of the page's section root, or its own title when none exists."""
    parent = pages_by_path.get(get_parent_page_path(page.path), page)
    return parent.title


def group_by_parent(results: Sequence[SearchResult]) -> list[SearchResult]:
    """Order results by parent group and keep the parent title on the first entry only.

    Groups appear in the order their first member appears in ``results``;
    members keep their relative order.
    """
    groups: dict[str | None, list[SearchResult]] = {}
    for result in results:
        groups.setdefault(result.parent_page_title, []).append(result)

    grouped: list[SearchResult] = []
    for members in groups.values():
        grouped.append(members[0])
        grouped.extend(member.model_copy(update={"parent_page_title": None}) for member in members[1:])
    return grouped

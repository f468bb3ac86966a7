"""
Schema definition for page indexing.

Every charset index shares one schema: the three searchable page fields and
the boost each contributes when a query matches it. Titles outrank headings,
headings outrank body text.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from docs_site_search.domain.search import FieldQuery


if TYPE_CHECKING:
    from docs_site_search.config import Settings


@dataclass(frozen=True)
class TextField:
    """
    Analyzed text field for full-text search.

    Args:
        name: ``Page`` attribute the text is read from
        boost: Multiplier applied to the field's scores (default: 1.0)
    """

    name: str
    boost: float = 1.0


@dataclass
class Schema:
    """
    Ordered text fields of a page index, keyed by a unique page attribute.

    Example:
        schema = Schema(
            fields=[
                TextField("title", boost=10.0),
                TextField("headers_str", boost=7.0),
                TextField("content"),
            ],
            unique_field="path",
        )
    """

    fields: list[TextField]
    unique_field: str = "path"
    name: str = "pages"
    _by_name: dict[str, TextField] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._by_name = {f.name: f for f in self.fields}
        if len(self._by_name) != len(self.fields):
            duplicates = sorted({f.name for f in self.fields if [g.name for g in self.fields].count(f.name) > 1})
            msg = f"Duplicate field names in schema '{self.name}': {duplicates}"
            raise ValueError(msg)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[TextField]:
        return iter(self.fields)

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    def get_boost(self, field_name: str) -> float:
        """Boost of a field; unknown fields weigh 1.0."""
        found = self._by_name.get(field_name)
        return found.boost if found else 1.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "unique_field": self.unique_field,
            "fields": {f.name: f.boost for f in self.fields},
        }

    def build_query_plan(self, query: str, limit: int) -> list[FieldQuery]:
        """Return one field query per schema field, in schema order."""
        return [FieldQuery(field=f.name, query=query, limit=limit, boost=f.boost) for f in self.fields]


def create_page_schema(settings: Settings | None = None) -> Schema:
    """
    Create the schema used by every charset index.

    Fields:
    - title: Page title (boost=10)
    - headers_str: All heading titles (boost=7)
    - content: Plain-text body (boost=1)

    Boosts are taken from ``settings`` when given.
    """
    return Schema(
        name="pages",
        unique_field="path",
        fields=[
            TextField("title", boost=settings.title_boost if settings else 10.0),
            TextField("headers_str", boost=settings.headings_boost if settings else 7.0),
            TextField("content", boost=settings.content_boost if settings else 1.0),
        ],
    )

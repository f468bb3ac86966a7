"""Domain model - pages and their headings.

Value objects are immutable pydantic models. Attribute names are snake_case;
camelCase aliases let the page records emitted by the site generator
(``contentLowercase``, ``headersStr``, ``charIndex``) validate as-is.

Derived search fields are filled in at construction when a record omits them:
- content_lowercase: length-preserving lowercase of content
- headers_str: heading titles joined with spaces
- charsets: script flags detected from title, headings and content
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from docs_site_search.search.charsets import contains_cjk, contains_cyrillic


_MODEL_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


def lowercase_preserving_offsets(text: str) -> str:
    """Lowercase text without changing its length.

    ``str.lower`` expands a few characters (e.g. "İ" becomes two code points),
    which would shift every offset after them. Such characters are kept as-is
    so an index found in the result is valid in the original.
    """
    lowered = text.lower()
    if len(lowered) == len(text):
        return lowered
    chars = []
    for char in text:
        lower = char.lower()
        chars.append(lower if len(lower) == 1 else char)
    return "".join(chars)


class Charsets(BaseModel):
    """Which non-Latin scripts a page contains."""

    model_config = _MODEL_CONFIG

    cyrillic: bool = False
    cjk: bool = False

    @classmethod
    def detect(cls, *texts: str) -> Charsets:
        return cls(
            cyrillic=any(contains_cyrillic(text) for text in texts),
            cjk=any(contains_cjk(text) for text in texts),
        )


class Header(BaseModel):
    """One heading inside a page.

    ``char_index`` is the heading's offset within the page content, or None
    when the extractor did not track it.
    """

    model_config = _MODEL_CONFIG

    title: str
    level: int
    slug: str = ""
    char_index: int | None = None


def _header_title(header: Any) -> str:
    if isinstance(header, Header):
        return header.title
    if isinstance(header, dict):
        return str(header.get("title", ""))
    return ""


def _pick(data: dict[str, Any], name: str) -> Any:
    """Return a field by attribute name or alias, None when absent."""
    value = data.get(name)
    if value is None:
        value = data.get(to_camel(name))
    return value


class Page(BaseModel):
    """A document unit of the site corpus, keyed by ``path``."""

    model_config = _MODEL_CONFIG

    path: str
    title: str = ""
    headers: list[Header] = Field(default_factory=list)
    content: str = ""
    content_lowercase: str = ""
    headers_str: str = ""
    charsets: Charsets = Field(default_factory=Charsets)
    frontmatter: dict[str, Any] | None = None

    @model_validator(mode="before")
    @classmethod
    def _derive_search_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        data = dict(data)
        content = _pick(data, "content") or ""
        data["content"] = content
        headers = _pick(data, "headers") or []
        data["headers"] = headers

        if not _pick(data, "content_lowercase"):
            data.pop("contentLowercase", None)
            data["content_lowercase"] = lowercase_preserving_offsets(content)

        headers_str = _pick(data, "headers_str")
        if headers_str is None:
            data.pop("headersStr", None)
            headers_str = " ".join(_header_title(header) for header in headers)
            data["headers_str"] = headers_str

        if _pick(data, "charsets") is None:
            title = _pick(data, "title") or ""
            data["charsets"] = Charsets.detect(title, headers_str, content)

        return data

    @model_validator(mode="after")
    def _check_lowercase_offsets(self) -> Page:
        if len(self.content_lowercase) != len(self.content):
            raise ValueError(
                f"content_lowercase must have the same length as content for page {self.path!r} "
                f"({len(self.content_lowercase)} != {len(self.content)})"
            )
        return self

    @property
    def is_searchable(self) -> bool:
        """False when the page opted out with ``search: false`` frontmatter."""
        if not self.frontmatter:
            return True
        return self.frontmatter.get("search") is not False

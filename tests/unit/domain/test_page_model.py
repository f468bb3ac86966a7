"""Unit tests for the page domain model."""

from pydantic import ValidationError
import pytest

from docs_site_search.domain.model import Charsets, Header, Page, lowercase_preserving_offsets
from docs_site_search.domain.search import Match, SearchResult


@pytest.mark.unit
class TestLowercasePreservingOffsets:
    def test_plain_lowercase(self):
        assert lowercase_preserving_offsets("Hello WORLD") == "hello world"

    def test_expanding_characters_are_kept(self):
        text = "İstanbul Guide"

        lowered = lowercase_preserving_offsets(text)

        assert len(lowered) == len(text)
        assert lowered == "İstanbul guide"


@pytest.mark.unit
class TestPageDerivedFields:
    def test_derives_lowercase_headers_str_and_charsets(self):
        page = Page(
            path="/a",
            title="Title",
            content="Some CONTENT",
            headers=[Header(title="First", level=1), Header(title="Second", level=2)],
        )

        assert page.content_lowercase == "some content"
        assert page.headers_str == "First Second"
        assert page.charsets == Charsets(cyrillic=False, cjk=False)

    def test_detects_scripts_in_title_headings_and_content(self):
        assert Page(path="/a", title="Привет").charsets.cyrillic
        assert Page(path="/a", headers=[{"title": "指南", "level": 1}]).charsets.cjk
        assert Page(path="/a", content="한국어").charsets.cjk

    def test_camel_case_record_validates(self):
        page = Page.model_validate(
            {
                "path": "/guide/setup",
                "title": "Setup",
                "content": "Run setup.",
                "contentLowercase": "run setup.",
                "headersStr": "Install",
                "headers": [{"title": "Install", "level": 2, "slug": "install", "charIndex": 4}],
                "charsets": {"cyrillic": True, "cjk": False},
            }
        )

        assert page.headers[0].char_index == 4
        assert page.headers_str == "Install"
        assert page.charsets.cyrillic is True

    def test_null_content_and_headers_become_empty(self):
        page = Page.model_validate({"path": "/a", "content": None, "headers": None})

        assert page.content == ""
        assert page.content_lowercase == ""
        assert page.headers == []
        assert page.headers_str == ""

    def test_empty_lowercase_is_derived(self):
        page = Page(path="/a", content="ABC", content_lowercase="")

        assert page.content_lowercase == "abc"

    def test_lowercase_of_wrong_length_is_rejected(self):
        with pytest.raises(ValidationError, match="same length"):
            Page(path="/a", content="ABC", content_lowercase="ab")

    def test_page_is_immutable(self):
        page = Page(path="/a", title="A")

        with pytest.raises(ValidationError):
            page.title = "B"


@pytest.mark.unit
@pytest.mark.parametrize(
    ("frontmatter", "expected"),
    [
        (None, True),
        ({}, True),
        ({"search": True}, True),
        ({"search": "false"}, True),
        ({"search": False}, False),
    ],
)
def test_is_searchable(frontmatter, expected):
    assert Page(path="/a", frontmatter=frontmatter).is_searchable is expected


@pytest.mark.unit
def test_match_kind():
    assert Match(header_index=0, char_index=0, term_length=1).is_header_match
    assert not Match(char_index=3, term_length=1).is_header_match


@pytest.mark.unit
def test_search_result_exposes_page_identity():
    result = SearchResult(
        page=Page(path="/a", title="A"),
        parent_page_title="A",
        heading_str="A",
        slug="",
        content_str=None,
    )

    assert result.path == "/a"
    assert result.title == "A"

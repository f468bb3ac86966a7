"""Unit tests for charset index routing."""

from prometheus_client import REGISTRY
import pytest

from docs_site_search.config import Settings
from docs_site_search.domain.model import Charsets
from docs_site_search.search.router import build_index
from tests.fixtures.pages import make_page


def _doc_count(index: str) -> float | None:
    return REGISTRY.get_sample_value("site_search_index_document_count", {"index": index})


@pytest.mark.unit
class TestBuildIndex:
    def test_opted_out_pages_are_excluded_everywhere(self, site_pages):
        indexes = build_index(site_pages)

        assert "/private/notes" not in indexes.primary
        assert "/private/notes" not in indexes.pages_by_path
        assert len(indexes.primary) == len(site_pages) - 1

    def test_pages_by_path_covers_every_searchable_page(self, site_pages):
        indexes = build_index(site_pages)

        assert "/" in indexes.pages_by_path
        assert indexes.pages_by_path["/guide/"].title == "Guide"

    def test_auxiliary_indexes_hold_flagged_pages_only(self, site_pages):
        indexes = build_index(site_pages)

        assert indexes.cyrillic is not None
        assert indexes.cjk is not None
        assert len(indexes.cyrillic) == 1
        assert "/ru/install" in indexes.cyrillic
        assert len(indexes.cjk) == 1
        assert "/zh/guide" in indexes.cjk

    def test_latin_only_corpus_has_no_auxiliary_indexes(self):
        indexes = build_index([make_page("/a", "A", "plain text")])

        assert indexes.cyrillic is None
        assert indexes.cjk is None
        assert indexes.active == [indexes.primary]

    def test_active_lists_primary_first(self, site_pages):
        indexes = build_index(site_pages)

        assert [index.name for index in indexes.active] == ["forward", "cyrillic", "cjk"]

    def test_explicit_charset_flags_are_respected(self):
        page = make_page("/x", "X", "plain text", charsets=Charsets(cyrillic=True))

        indexes = build_index([page])

        assert indexes.cyrillic is not None
        assert "/x" in indexes.cyrillic
        assert indexes.cjk is None

    def test_empty_corpus(self):
        indexes = build_index([])

        assert len(indexes.primary) == 0
        assert indexes.pages_by_path == {}

    def test_settings_boosts_reach_the_schema(self):
        indexes = build_index([make_page("/a", "A")], Settings(title_boost=3.0))

        assert indexes.schema.get_boost("title") == 3.0
        assert indexes.settings.title_boost == 3.0

    def test_document_count_gauge_tracks_each_index(self, site_pages):
        build_index(site_pages)
        assert _doc_count("forward") == 8
        assert _doc_count("cjk") == 1

        build_index([make_page("/a", "A")])
        assert _doc_count("forward") == 1
        assert _doc_count("cjk") == 0

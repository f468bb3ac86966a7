"""Unit tests for heading breadcrumbs."""

import pytest

from docs_site_search.domain.model import Header
from docs_site_search.search.headings import find_enclosing_header, resolve_heading_path
from tests.fixtures.pages import make_page


def _outline(*levels_and_titles: tuple[int, str]) -> list[Header]:
    return [Header(title=title, level=level, slug=title.lower()) for level, title in levels_and_titles]


@pytest.mark.unit
class TestResolveHeadingPath:
    def test_no_heading_returns_page_title(self):
        page = make_page("/a", "Page title", headers=_outline((1, "A")))

        assert resolve_heading_path(page) == "Page title"

    def test_full_chain(self):
        page = make_page("/a", "T", headers=_outline((1, "A"), (2, "B"), (3, "C")))

        assert resolve_heading_path(page, 2) == "A > B > C"

    def test_top_level_heading_is_alone(self):
        page = make_page("/a", "T", headers=_outline((1, "A"), (2, "B")))

        assert resolve_heading_path(page, 0) == "A"

    def test_nearest_preceding_parent_wins(self):
        page = make_page("/a", "T", headers=_outline((1, "A"), (2, "B"), (2, "C"), (3, "D")))

        assert resolve_heading_path(page, 3) == "A > C > D"

    def test_parent_must_come_before(self):
        page = make_page("/a", "T", headers=_outline((2, "B"), (1, "A")))

        assert resolve_heading_path(page, 0) == "B"

    def test_skipped_levels_shorten_the_breadcrumb(self):
        page = make_page("/a", "T", headers=_outline((1, "A"), (4, "D")))

        assert resolve_heading_path(page, 1) == "D"

    def test_outline_starting_below_level_one(self):
        page = make_page("/a", "T", headers=_outline((2, "X"), (3, "Y")))

        assert resolve_heading_path(page, 1) == "X > Y"


@pytest.mark.unit
class TestFindEnclosingHeader:
    @pytest.fixture
    def page(self):
        return make_page(
            "/a",
            "T",
            headers=[
                Header(title="One", level=1, char_index=0),
                Header(title="Two", level=2, char_index=50),
                Header(title="Untracked", level=2),
                Header(title="Four", level=2, char_index=120),
            ],
        )

    def test_returns_last_header_before_position(self, page):
        assert find_enclosing_header(page, 60) == 1
        assert find_enclosing_header(page, 130) == 3

    def test_untracked_headers_are_ignored(self, page):
        assert find_enclosing_header(page, 100) == 1

    def test_header_offset_must_be_strictly_before(self, page):
        assert find_enclosing_header(page, 0) is None
        assert find_enclosing_header(page, 50) == 0

    def test_page_without_headers(self):
        assert find_enclosing_header(make_page("/a", "T", "body"), 2) is None

"""Shared test fixtures and configuration."""

import os
from pathlib import Path
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from docs_site_search.config import get_settings
from docs_site_search.domain.model import Header, Page
from tests.fixtures.pages import make_page


# Drop any SITE_SEARCH_* overrides from the developer shell so defaults apply
for key in [k for k in os.environ if k.upper().startswith("SITE_SEARCH_")]:
    del os.environ[key]


@pytest.fixture(autouse=True)
def clean_settings_cache():
    """Make every test read settings fresh from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def setup_page() -> Page:
    """Page from the documented end-to-end example."""
    return make_page("/guide/setup", "Setup", "Install the CLI tool.\nRun setup after install.")


@pytest.fixture
def outlined_page() -> Page:
    """Page with a three-level outline and tracked heading offsets."""
    content = "Intro\nWelcome aboard.\nUsage\nCall run often.\nLinux\nUse the package manager."
    return make_page(
        "/guide/usage",
        "Usage guide",
        content,
        headers=[
            Header(title="Intro", level=1, slug="intro", char_index=0),
            Header(title="Usage", level=2, slug="usage", char_index=22),
            Header(title="Linux", level=3, slug="linux", char_index=44),
        ],
    )


@pytest.fixture
def site_pages() -> list[Page]:
    """Small multi-script corpus with section roots."""
    return [
        make_page("/", "Home", "Welcome to the documentation."),
        make_page("/guide/", "Guide", "Everything about using the tool."),
        make_page("/guide/setup", "Setup", "Install the CLI tool.\nRun setup after install."),
        make_page(
            "/guide/deploy",
            "Deploy",
            "Ship the build to production.",
            headers=[Header(title="Deploy with setup scripts", level=2, slug="deploy-with-setup-scripts")],
        ),
        make_page("/api/", "API", "Reference for every endpoint."),
        make_page("/api/client", "Client", "The client wraps every endpoint."),
        make_page("/ru/install", "Установка", "Установка пакета через менеджер."),
        make_page("/zh/guide", "安装指南", "安装指南的内容。"),
        make_page("/private/notes", "Notes", "Secret setup notes.", frontmatter={"search": False}),
    ]


def pytest_collection_modifyitems(config, items):
    """Mark tests by directory so ``-m unit`` and ``-m integration`` select them."""
    for item in items:
        parts = Path(str(item.fspath)).parts
        for marker in ("unit", "integration"):
            if marker in parts:
                item.add_marker(getattr(pytest.mark, marker))

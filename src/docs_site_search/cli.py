"""Command line entry point: search a JSON dump of page records.

Usage::

    docs-site-search pages.json "install linux" --limit 5

The pages file holds a JSON array of page records as emitted by the site
generator (camelCase or snake_case keys). One JSON object per result is
written to stdout.
"""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import Sequence
import logging
from pathlib import Path
import sys

import orjson
from pydantic import ValidationError

from docs_site_search.config import get_settings
from docs_site_search.domain.search import SearchResult
from docs_site_search.exceptions import SiteSearchError
from docs_site_search.observability.logging import configure_logging
from docs_site_search.site_search import SiteSearch


logger = logging.getLogger(__name__)


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Search a site's page records and print enriched, grouped results",
    )
    parser.add_argument("pages", type=Path, help="Path to a JSON array of page records")
    parser.add_argument("query", help="Query string")
    parser.add_argument(
        "--terms",
        nargs="+",
        metavar="TERM",
        help="Explicit query terms (default: the query's whitespace-separated words)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        help="Hits per field per index (default: SITE_SEARCH_DEFAULT_LIMIT)",
    )
    return parser


def _validate_args(args: argparse.Namespace) -> None:
    if args.limit is not None and args.limit < 1:
        raise ValueError("--limit must be >= 1")


def _load_records(path: Path) -> list:
    records = orjson.loads(path.read_bytes())
    if not isinstance(records, list):
        raise ValueError(f"{path} must contain a JSON array of page records")
    return records


def _result_payload(result: SearchResult) -> dict:
    return {
        "path": result.path,
        "title": result.title,
        "parentPageTitle": result.parent_page_title,
        "headingStr": result.heading_str,
        "slug": result.slug,
        "contentStr": result.content_str,
    }


async def _run(args: argparse.Namespace, records: list) -> list[SearchResult]:
    site_search = SiteSearch(get_settings())
    await site_search.rebuild(SiteSearch.load_pages(records))
    return await site_search.search(args.query, args.terms, args.limit)


def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_output=settings.log_json)
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    try:
        _validate_args(args)
        records = _load_records(args.pages)
    except OSError as exc:
        logger.error("Cannot read pages file: %s", exc)
        return 1
    except ValueError as exc:
        logger.error("Invalid input: %s", exc)
        return 1

    try:
        results = asyncio.run(_run(args, records))
    except ValidationError as exc:
        logger.error("Invalid page record: %s", exc)
        return 1
    except SiteSearchError as exc:
        logger.error("Search failed: %s", exc)
        return 2

    for result in results:
        sys.stdout.write(orjson.dumps(_result_payload(result)).decode("utf-8") + "\n")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

"""In-memory full-text index over pages.

The index is a black box to the rest of the package: ``add`` bulk-loads
pages and ``search`` runs a query plan (one ``FieldQuery`` per field) and
returns ranked pages. Tokenization is delegated to a ``TokenizerProfile`` so
the same class serves the Latin, Cyrillic and CJK indexes.

Per field query, a page matches when it contains every query term in that
field. Matches are scored with BM25, multiplied by the field boost and capped
at the query's limit. Scores of a page across fields are summed to rank the
merged result list.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
import heapq
from itertools import count
import logging

from docs_site_search.domain.model import Page
from docs_site_search.domain.search import FieldQuery
from docs_site_search.exceptions import UnknownFieldError
from docs_site_search.search.analyzers import TokenizerProfile
from docs_site_search.search.schema import Schema
from docs_site_search.search.stats import average_field_length, bm25, calculate_idf


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankedDocument:
    """A scored page path produced by a single field query."""

    path: str
    score: float


class FullTextIndex:
    """Inverted index keyed by page path, one postings table per field."""

    def __init__(
        self,
        schema: Schema,
        profile: TokenizerProfile,
        *,
        name: str | None = None,
        k1: float = 1.2,
        b: float = 0.75,
    ) -> None:
        self.schema = schema
        self.profile = profile
        self.name = name or profile.name
        self.k1 = k1
        self.b = b
        # field -> term -> path -> term frequency
        self._postings: dict[str, dict[str, dict[str, int]]] = {f.name: defaultdict(dict) for f in schema}
        # field -> path -> indexed term count
        self._field_lengths: dict[str, dict[str, int]] = {f.name: {} for f in schema}
        self._pages: dict[str, Page] = {}
        # insertion order breaks score ties; re-added pages go last
        self._order: dict[str, int] = {}
        self._sequence = count()

    def __len__(self) -> int:
        return len(self._pages)

    def __contains__(self, path: str) -> bool:
        return path in self._pages

    def add(self, pages: Iterable[Page]) -> None:
        """Index pages; a page whose path is already indexed is replaced."""
        added = 0
        for page in pages:
            if page.path in self._pages:
                self.remove(page.path)
            self._index_page(page)
            added += 1
        logger.debug("Index %s: added %d pages (%d total)", self.name, added, len(self._pages))

    def remove(self, path: str) -> None:
        if path not in self._pages:
            return
        for field_name, postings in self._postings.items():
            for term in [t for t, docs in postings.items() if path in docs]:
                del postings[term][path]
                if not postings[term]:
                    del postings[term]
            self._field_lengths[field_name].pop(path, None)
        del self._pages[path]
        del self._order[path]

    def _index_page(self, page: Page) -> None:
        path = getattr(page, self.schema.unique_field)
        self._pages[path] = page
        self._order[path] = next(self._sequence)
        for field in self.schema:
            text = getattr(page, field.name, "") or ""
            terms = self.profile.index_terms(text)
            self._field_lengths[field.name][path] = len(terms)
            for term, frequency in Counter(terms).items():
                self._postings[field.name][term][path] = frequency

    def search_field(self, field_query: FieldQuery) -> list[RankedDocument]:
        """Return the top ``limit`` pages holding every query term in one field."""
        if field_query.field not in self.schema:
            raise UnknownFieldError(field_query.field, self.schema.field_names)
        if field_query.limit <= 0 or not self._pages:
            return []

        terms = self.profile.query_terms(field_query.query)
        if not terms:
            return []

        postings = self._postings[field_query.field]
        term_postings = [postings.get(term) for term in terms]
        if not all(term_postings):
            return []

        candidates = set.intersection(*(set(docs) for docs in term_postings))
        if not candidates:
            return []

        lengths = self._field_lengths[field_query.field]
        avg_length = average_field_length(lengths)
        total_docs = len(self._pages)
        scores: dict[str, float] = {}
        for path in candidates:
            score = 0.0
            for docs in term_postings:
                idf = calculate_idf(len(docs), total_docs)
                score += idf * bm25(docs[path], lengths.get(path, 0), avg_length, k1=self.k1, b=self.b)
            scores[path] = score * field_query.boost

        top = heapq.nsmallest(
            field_query.limit,
            scores.items(),
            key=lambda item: (-item[1], self._order[item[0]]),
        )
        return [RankedDocument(path=path, score=score) for path, score in top]

    async def search(self, plan: Sequence[FieldQuery]) -> list[Page]:
        """Run every field query of the plan and return merged, ranked pages."""
        totals: dict[str, float] = defaultdict(float)
        for field_query in plan:
            for ranked in self.search_field(field_query):
                totals[ranked.path] += ranked.score

        ordered = sorted(totals.items(), key=lambda item: (-item[1], self._order[item[0]]))
        return [self._pages[path] for path, _score in ordered]

"""Analyzer utilities for the per-script search indexes.

Analyzers follow a composable tokenizer/filter design: a tokenizer turns raw
text into tokens and filters transform the stream. Each full-text index is
configured with a ``TokenizerProfile`` that bundles an analyzer with the
prefix policy applied at indexing time.

Profiles:
- forward: word tokens, lowercased, every prefix indexed (Latin scripts)
- cyrillic: whitespace split, lowercased, whole words only
- cjk: one token per Hangul/CJK character, no case folding
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, replace
import re
from typing import Protocol

from docs_site_search.search.charsets import CJK_PATTERN


@dataclass(frozen=True)
class Token:
    """A term with its ordinal and character span in the analyzed text."""

    text: str
    position: int
    start_char: int
    end_char: int


# Analyzers map raw text to the final token list
Analyzer = Callable[[str], list[Token]]


class Tokenizer(Protocol):
    def __call__(self, text: str) -> Iterator[Token]:  # pragma: no cover - interface definition
        ...


class TokenFilter(Protocol):
    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:  # pragma: no cover - interface definition
        ...


class RegexTokenizer:
    """One token per non-overlapping match of ``pattern`` (default: word runs)."""

    def __init__(self, pattern: str | re.Pattern[str] = r"\w+") -> None:
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def __call__(self, text: str) -> Iterator[Token]:
        for position, found in enumerate(self.pattern.finditer(text)):
            yield Token(found.group(), position, found.start(), found.end())


class WhitespaceTokenizer(RegexTokenizer):
    """Splits on runs of whitespace; punctuation stays attached to its word."""

    def __init__(self) -> None:
        super().__init__(r"\S+")


class CjkTokenizer(RegexTokenizer):
    """Emits every Hangul syllable/jamo and CJK ideograph as its own token.

    Text in other scripts is skipped. ``finditer`` builds a fresh scanner for
    every call, so the tokenizer is reentrant and restartable.
    """

    def __init__(self) -> None:
        super().__init__(CJK_PATTERN)


class LowercaseFilter:
    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            lowered = token.text.lower()
            yield token if lowered == token.text else replace(token, text=lowered)


class AnalyzerPipeline:
    """A tokenizer followed by token filters, applied in order."""

    def __init__(self, tokenizer: Tokenizer, filters: Sequence[TokenFilter] = ()) -> None:
        self.tokenizer = tokenizer
        self.filters = tuple(filters)

    def __call__(self, text: str) -> list[Token]:
        if not text:
            return []
        tokens: Iterable[Token] = self.tokenizer(text)
        for token_filter in self.filters:
            tokens = token_filter(tokens)
        # filters may drop tokens, so positions are reassigned afterwards
        return [replace(token, position=position) for position, token in enumerate(tokens)]


def forward_prefixes(term: str) -> Iterator[str]:
    """Yield every non-empty prefix of ``term``, shortest first."""
    for end in range(1, len(term) + 1):
        yield term[:end]


@dataclass(frozen=True)
class TokenizerProfile:
    """Analyzer plus indexing policy used by one full-text index.

    The same analyzer runs over documents and queries. With ``forward`` set,
    documents are indexed under every prefix of each token so a partially
    typed query word still matches.
    """

    name: str
    analyzer: Analyzer
    forward: bool = False

    def index_terms(self, text: str) -> list[str]:
        terms: list[str] = []
        for token in self.analyzer(text):
            if self.forward:
                terms.extend(forward_prefixes(token.text))
            else:
                terms.append(token.text)
        return terms

    def query_terms(self, text: str) -> list[str]:
        seen: set[str] = set()
        terms: list[str] = []
        for token in self.analyzer(text):
            if token.text and token.text not in seen:
                seen.add(token.text)
                terms.append(token.text)
        return terms


_PROFILE_FACTORIES: dict[str, Callable[[], TokenizerProfile]] = {
    "forward": lambda: TokenizerProfile(
        "forward",
        AnalyzerPipeline(RegexTokenizer(), [LowercaseFilter()]),
        forward=True,
    ),
    "cyrillic": lambda: TokenizerProfile(
        "cyrillic",
        AnalyzerPipeline(WhitespaceTokenizer(), [LowercaseFilter()]),
    ),
    "cjk": lambda: TokenizerProfile("cjk", AnalyzerPipeline(CjkTokenizer())),
}


def get_profile(name: str | None) -> TokenizerProfile:
    """Return tokenizer profile by name, defaulting to the forward profile."""

    if name is None:
        return _PROFILE_FACTORIES["forward"]()
    normalized = name.lower()
    if normalized not in _PROFILE_FACTORIES:
        msg = f"Unknown tokenizer profile '{name}'. Available: {sorted(_PROFILE_FACTORIES)}"
        raise ValueError(msg)
    return _PROFILE_FACTORIES[normalized]()

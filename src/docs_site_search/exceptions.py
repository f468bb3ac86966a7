"""Exceptions raised by docs-site-search."""


class SiteSearchError(Exception):
    """Base class for docs-site-search errors."""


class IndexNotReadyError(SiteSearchError):
    """A query was issued but no index build finished in time."""


class UnknownFieldError(SiteSearchError, KeyError):
    """A query plan referenced a field the index schema does not define."""

    def __init__(self, field: str, available: list[str]) -> None:
        self.field = field
        self.available = available
        super().__init__(f"Unknown field '{field}'. Available: {sorted(available)}")

    def __str__(self) -> str:
        return self.args[0]

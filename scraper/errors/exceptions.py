"""
Fehlerklassen der Ingestion-Pipeline.

Jede Klasse entspricht genau einem Ausgang von ``ingest``:
HttpStatusError -> Blocked, NetworkError/ParseError -> Failure.
"""

from typing import Optional


class ScraperError(Exception):
    """Common root, so callers can catch every fetch/parse fault at once."""


class NetworkError(ScraperError):
    """No usable response: DNS, connect, timeout, browser crash or an unencodable URL."""


class HttpStatusError(ScraperError):
    """The portal answered, but with a non-2xx status (treated as blocked)."""

    def __init__(self, status_code: int, url: Optional[str] = None):
        self.status_code = status_code
        self.url = url
        super().__init__(f"HTTP {status_code} for {url}" if url else f"HTTP {status_code}")


class ParseError(ScraperError):
    """Markup was empty or could not be turned into a document tree."""

from .exceptions import (
    ScraperError,
    NetworkError,
    HttpStatusError,
    ParseError,
)

__all__ = [
    "ScraperError",
    "NetworkError",
    "HttpStatusError",
    "ParseError",
]

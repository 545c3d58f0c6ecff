from .markup import DocumentTree, parse
from .http import PageFetcher, build_fetcher
from .log import Logger, get_logger, setup_logging

__all__ = [
    "DocumentTree",
    "parse",
    "PageFetcher",
    "build_fetcher",
    "Logger",
    "get_logger",
    "setup_logging",
]

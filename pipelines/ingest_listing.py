# pipelines/ingest_listing.py

import asyncio
import logging
from typing import List, Optional, Protocol, Sequence

from config import ACTIVE_CONFIG
from scraper.errors.exceptions import HttpStatusError, NetworkError, ParseError
from scraper.interfaces.models import (
    Blocked,
    ErrorKind,
    Failure,
    Outcome,
    Success,
)
from scraper.sources import get_extractor
from scraper.sources.platforms import classify, supported_platforms
from scraper.utils.http import PageFetcher, build_fetcher
from scraper.utils.log import Logger, _log
from scraper.utils.markup import parse


class Fetcher(Protocol):
    async def fetch(self, url: str) -> str:
        ...


# ----------------------------------------------------------
# EINE URL -> Outcome
# ----------------------------------------------------------
async def ingest(
    url: str,
    fetcher: Optional[Fetcher] = None,
    logger: Optional[Logger] = None,
) -> Outcome:
    """
    Classify -> Fetch -> Parse -> Extract.

    Jeder Fehler endet in genau einem Outcome; nichts wird erneut versucht
    und pro Aufruf gibt es höchstens einen Netzwerk-Request.
    """
    url = (url or "").strip()
    if not url:
        return Failure(ErrorKind.UNSUPPORTED_PLATFORM, "URL is required")

    platform = classify(url)
    if platform is None:
        detail = (
            f"Unsupported platform for {url}. "
            f"Supported: {', '.join(supported_platforms())}"
        )
        _log(logger, f"⚠️ {detail}", logging.WARNING)
        return Failure(ErrorKind.UNSUPPORTED_PLATFORM, detail)

    _log(logger, f"🏠 [{platform.display_name}] Fetching: {url}")

    if fetcher is None:
        fetcher = build_fetcher()

    try:
        markup = await fetcher.fetch(url)
    except HttpStatusError as e:
        _log(logger, f"⛔ [{platform.display_name}] blocked with HTTP {e.status_code}", logging.WARNING)
        return Blocked(platform=platform, status_code=e.status_code)
    except NetworkError as e:
        _log(logger, f"❌ [{platform.display_name}] network error: {e}", logging.ERROR)
        return Failure(ErrorKind.NETWORK_ERROR, str(e))

    try:
        doc = parse(markup)
    except ParseError as e:
        _log(logger, f"❌ [{platform.display_name}] parse error: {e}", logging.ERROR)
        return Failure(ErrorKind.PARSE_ERROR, str(e))

    listing = get_extractor(platform).extract(doc)
    _log(
        logger,
        f"✅ [{platform.display_name}] {listing.title!r} price={listing.price} "
        f"area={listing.area_m2} bedrooms={listing.bedrooms}",
    )
    return Success(listing)


# ----------------------------------------------------------
# Mehrere URLs parallel, Reihenfolge bleibt erhalten
# ----------------------------------------------------------
async def ingest_many(
    urls: Sequence[str],
    fetcher: Optional[Fetcher] = None,
    concurrency: Optional[int] = None,
    logger: Optional[Logger] = None,
) -> List[Outcome]:
    limit = concurrency or ACTIVE_CONFIG.SCRAPER["MAX_CONCURRENCY"]
    semaphore = asyncio.Semaphore(max(1, limit))

    async def _one(u: str, f: Fetcher) -> Outcome:
        async with semaphore:
            return await ingest(u, fetcher=f, logger=logger)

    if fetcher is None:
        fetcher = build_fetcher()
        if isinstance(fetcher, PageFetcher):
            # ein Connection-Pool für den ganzen Batch
            async with fetcher:
                return list(await asyncio.gather(*(_one(u, fetcher) for u in urls)))

    return list(await asyncio.gather(*(_one(u, fetcher) for u in urls)))


# ----------------------------------------------------------
# Sync wrapper (für CLI & Skripte)
# ----------------------------------------------------------
def ingest_sync(url: str, logger: Optional[Logger] = None) -> Outcome:
    return asyncio.run(ingest(url, logger=logger))

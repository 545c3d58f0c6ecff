# scraper/utils/http.py

from typing import Optional

import httpx

from scraper.errors.exceptions import HttpStatusError, NetworkError
from scraper.sources.scraper_config import FetcherConfig, default_fetcher_config


class PageFetcher:
    """
    Genau ein GET pro Aufruf, mit Browser-Headern und festem Timeout.

    - keine Retries, kein Proxy
    - Non-2xx -> HttpStatusError (einziges Signal für "blockiert")
    - DNS/Connect/Timeout/ungültige URL -> NetworkError

    Ohne geteilten Client wird pro Aufruf ein Client geöffnet und wieder
    geschlossen. Als ``async with`` benutzt (oder mit ``client=``) teilen
    sich alle Aufrufe einen Connection-Pool; ``aclose()`` gibt ihn frei.
    """

    def __init__(
        self,
        config: Optional[FetcherConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config or default_fetcher_config()
        self._transport = transport
        self._shared = client
        self._owns_shared = False

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.config.timeout,
            headers=self.config.headers(),
            follow_redirects=True,
            transport=self._transport or httpx.AsyncHTTPTransport(retries=0),
        )

    async def __aenter__(self) -> "PageFetcher":
        if self._shared is None:
            self._shared = self._client()
            self._owns_shared = True
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()

    async def aclose(self) -> None:
        # a client passed in by the caller stays open
        if self._shared is not None and self._owns_shared:
            await self._shared.aclose()
            self._shared = None
            self._owns_shared = False

    async def _get(self, client: httpx.AsyncClient, target: httpx.URL, url: str) -> str:
        async with client.stream("GET", target) as response:
            if not response.is_success:
                raise HttpStatusError(response.status_code, url)
            await response.aread()
            return response.text

    async def fetch(self, url: str) -> str:
        try:
            target = httpx.URL(url)
            if self._shared is not None:
                return await self._get(self._shared, target, url)
            async with self._client() as client:
                return await self._get(client, target, url)
        except httpx.TimeoutException as e:
            raise NetworkError(f"timeout after {self.config.timeout:g}s: {url}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NetworkError(f"{type(e).__name__}: {e}") from e
        except (UnicodeError, ValueError) as e:
            # httpx's URL encoder rejects e.g. lone surrogates this way
            raise NetworkError(f"invalid URL {url!r}: {e}") from e


def build_fetcher(config: Optional[FetcherConfig] = None):
    config = config or default_fetcher_config()
    if config.backend == "browser":
        from scraper.utils.browser import BrowserFetcher

        return BrowserFetcher(config)
    return PageFetcher(config)

# scraper/sources/scraper_config.py

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from config import ACTIVE_CONFIG

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/124.0.0.0 Safari/537.36"
)

# Header-Set eines normalen Desktop-Chrome
BROWSER_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8",
    "Accept-Language": "pt-BR,pt;q=0.9,en-US;q=0.8,en;q=0.7",
    "Accept-Encoding": "gzip, deflate, br",
    "Cache-Control": "no-cache",
    "Upgrade-Insecure-Requests": "1",
    "Sec-Fetch-Dest": "document",
    "Sec-Fetch-Mode": "navigate",
    "Sec-Fetch-Site": "none",
    "Sec-Fetch-User": "?1",
}


@dataclass(frozen=True)
class FetcherConfig:
    timeout: float = 20.0
    user_agent: str = DEFAULT_USER_AGENT
    extra_headers: Mapping[str, str] = field(default_factory=dict)
    backend: str = "http"
    headless: bool = True
    browser_timeout_ms: int = 30000
    locale: str = "pt-BR"

    def headers(self) -> Dict[str, str]:
        headers = {"User-Agent": self.user_agent, **BROWSER_HEADERS}
        headers.update(self.extra_headers)
        return headers

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "FetcherConfig":
        return cls(
            timeout=float(settings.get("TIMEOUT", 20.0)),
            user_agent=settings.get("USER_AGENT") or DEFAULT_USER_AGENT,
            extra_headers=dict(settings.get("EXTRA_HEADERS") or {}),
            backend=settings.get("BACKEND", "http"),
            headless=bool(settings.get("HEADLESS", True)),
            browser_timeout_ms=int(settings.get("BROWSER_TIMEOUT", 30000)),
            locale=settings.get("LOCALE", "pt-BR"),
        )


def default_fetcher_config() -> FetcherConfig:
    return FetcherConfig.from_settings(ACTIVE_CONFIG.SCRAPER)

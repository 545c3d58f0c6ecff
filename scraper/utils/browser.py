from typing import Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from scraper.errors.exceptions import HttpStatusError, NetworkError
from scraper.sources.scraper_config import FetcherConfig, default_fetcher_config


class BrowserFactory:
    def __init__(self, config: FetcherConfig):
        self.config = config
        self.browser = None
        self.page = None
        self.pw = None

    async def __aenter__(self):
        self.pw = await async_playwright().start()

        try:
            self.browser = await self.pw.chromium.launch(
                headless=self.config.headless,
                args=[
                    "--no-sandbox",
                    "--disable-dev-shm-usage",
                ],
            )

            extra = {k: v for k, v in self.config.headers().items() if k not in ("User-Agent", "Accept-Encoding")}
            context = await self.browser.new_context(
                viewport={"width": 1600, "height": 1000},
                java_script_enabled=True,
                locale=self.config.locale,
                user_agent=self.config.user_agent,
                extra_http_headers=extra,
            )

            self.page = await context.new_page()
        except BaseException:
            # __aexit__ läuft nicht, wenn __aenter__ scheitert
            await self.close()
            raise
        return self.page

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def close(self):
        browser, pw = self.browser, self.pw
        self.browser = self.page = self.pw = None
        try:
            if browser:
                await browser.close()
        finally:
            if pw:
                await pw.stop()


class BrowserFetcher:
    """
    Gleicher Vertrag wie PageFetcher, aber über headless Chromium.
    Genau eine Navigation; der Status der Hauptantwort entscheidet.
    """

    def __init__(self, config: Optional[FetcherConfig] = None):
        self.config = config or default_fetcher_config()

    async def fetch(self, url: str) -> str:
        try:
            async with BrowserFactory(self.config) as page:
                response = await page.goto(
                    url,
                    timeout=self.config.browser_timeout_ms,
                    wait_until="domcontentloaded",
                )
                if response is not None and not response.ok:
                    raise HttpStatusError(response.status, url)
                return await page.content()
        except PlaywrightTimeoutError as e:
            raise NetworkError(f"timeout after {self.config.browser_timeout_ms}ms: {url}") from e
        except PlaywrightError as e:
            raise NetworkError(f"browser error: {e}") from e
        except (UnicodeError, ValueError) as e:
            raise NetworkError(f"invalid URL {url!r}: {e}") from e


__all__ = ["BrowserFactory", "BrowserFetcher"]

import pytest

from scraper.errors.exceptions import HttpStatusError, NetworkError


class FakeFetcher:
    """Ersetzt den echten Fetcher; zählt Aufrufe."""

    def __init__(self, markup: str = "", status: int = 200, error: Exception = None):
        self.markup = markup
        self.status = status
        self.error = error
        self.calls = []

    async def fetch(self, url: str) -> str:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        if not 200 <= self.status < 300:
            raise HttpStatusError(self.status, url)
        return self.markup


def page(body: str, head: str = "") -> str:
    return f"<html><head>{head}</head><body>{body}</body></html>"


OLX_PAGE = page(
    "<h1>Apartamento 2 Quartos</h1>"
    "<h2>Venda</h2>"
    "<h2>R$ 850.000</h2>"
    "<p>75 m² · 2 quartos · Pinheiros, São Paulo</p>"
)


@pytest.fixture
def fake_fetcher():
    return FakeFetcher


@pytest.fixture
def olx_page():
    return OLX_PAGE


@pytest.fixture
def network_error():
    return NetworkError("ConnectError: connection refused")

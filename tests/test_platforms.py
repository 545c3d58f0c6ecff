import pytest

from scraper.interfaces.models import PlatformId
from scraper.sources.platforms import classify, supported_platforms


@pytest.mark.parametrize(
    "url, platform",
    [
        ("https://www.olx.com.br/imovel/123", PlatformId.OLX),
        ("http://sp.olx.com.br/sao-paulo-e-regiao/imoveis/apto-99?utm=x", PlatformId.OLX),
        ("olx.com.br/x", PlatformId.OLX),
        ("https://www.quintoandar.com.br/imovel/893/comprar", PlatformId.QUINTOANDAR),
        ("https://www.vivareal.com.br/imovel/456", PlatformId.VIVAREAL),
        ("https://loft.com.br/imovel/apartamento-pinheiros/abc", PlatformId.LOFT),
        ("https://www.zapimoveis.com.br/imovel/venda-apartamento/", PlatformId.ZAPIMOVEIS),
    ],
)
def test_classify_known_domains(url, platform):
    assert classify(url) is platform


@pytest.mark.parametrize(
    "url",
    [
        "https://www.unknown-site.com/x",
        "",
        "https://www.imovelweb.com.br/propriedades/1",
        # kein Lowercasing
        "https://www.OLX.COM.BR/imovel/1",
    ],
)
def test_classify_unsupported(url):
    assert classify(url) is None


def test_classify_priority_first_match_wins():
    # enthält zwei Domains; OLX steht in der Reihenfolge vorne
    url = "https://www.vivareal.com.br/redirect?to=olx.com.br"
    assert classify(url) is PlatformId.OLX


def test_supported_platforms_lists_display_names():
    names = supported_platforms()
    assert names[:4] == ["OLX", "QuintoAndar", "VivaReal", "Loft"]

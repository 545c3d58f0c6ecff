import pytest

from scraper.interfaces.models import Address, NormalizedListing, PlatformId
from scraper.sources import EXTRACTORS, get_extractor
from scraper.sources.base import (
    parse_area,
    parse_area_value,
    parse_bedrooms,
    parse_price,
    split_address,
)
from scraper.sources.olx import OlxExtractor
from scraper.sources.quintoandar import QuintoAndarExtractor
from scraper.sources.vivareal import VivaRealExtractor
from scraper.utils.markup import parse


# ----------------------------------------------------------
# Helper
# ----------------------------------------------------------
@pytest.mark.parametrize(
    "text, expected",
    [
        ("R$ 850.000", 850000),
        ("R$ 1.250.000,00", 1250000),
        ("R$\xa0420.000", 420000),
        ("850000.00", 850000),
        ("Consulte", None),
        ("", None),
    ],
)
def test_parse_price(text, expected):
    assert parse_price(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("75 m²", 75),
        ("75m2", 75),
        ("Área útil 1.200 M²", 1200),
        ("62,6 m²", 63),
        ("0 m² · 88 m²", 88),
        ("75 metros", None),
        ("R$ 9.000/m²", None),
    ],
)
def test_parse_area(text, expected):
    assert parse_area(text) == expected


def test_parse_area_value_accepts_bare_number():
    assert parse_area_value("75") == 75
    assert parse_area_value("75 m²") == 75
    assert parse_area_value("—") is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2 quartos", 2),
        ("1 Quarto", 1),
        ("3QUARTOS", 3),
        ("2 banheiros", None),
    ],
)
def test_parse_bedrooms(text, expected):
    assert parse_bedrooms(text) == expected


def test_split_address():
    assert split_address("Pinheiros, São Paulo") == Address("Pinheiros", "São Paulo", "SP")
    assert split_address("Copacabana, Rio de Janeiro - RJ") == Address("Copacabana", "Rio de Janeiro", "SP")
    assert split_address("75 m² · 2 quartos · Moema, São Paulo").bairro == "Moema"
    assert split_address("Vila Mariana") == Address("Vila Mariana", "São Paulo", "SP")
    assert split_address(None) == Address("Centro", "São Paulo", "SP")
    assert split_address(", ") == Address()


# ----------------------------------------------------------
# OLX
# ----------------------------------------------------------
def test_olx_scenario_from_free_text(olx_page):
    listing = OlxExtractor().extract(parse(olx_page))

    assert listing.title == "Apartamento 2 Quartos"
    assert listing.price == 850000
    assert listing.area_m2 == 75
    assert listing.bedrooms == 2
    assert listing.address == Address("Pinheiros", "São Paulo", "SP")


def test_address_fallback_ignores_title_with_comma():
    html = (
        "<html><head><title>Casa à venda, Jardim Europa | OLX</title></head><body>"
        "<h1>Casa à venda, Jardim Europa</h1>"
        "<p>120 m² · 3 quartos · Pinheiros, São Paulo</p></body></html>"
    )
    listing = OlxExtractor().extract(parse(html))

    assert listing.title == "Casa à venda, Jardim Europa"
    assert listing.area_m2 == 120
    assert listing.bedrooms == 3
    assert listing.address == Address("Pinheiros", "São Paulo", "SP")


def test_olx_primary_selectors_win_over_fallbacks():
    html = """
    <h1 data-ds-component="DS-Text">Cobertura Duplex</h1>
    <h1>Outro título</h1>
    <h2 data-ds-component="DS-Text">R$ 2.300.000</h2>
    <div data-testid="ad-properties">
      <span data-testid="size">180m²</span>
      <span data-testid="rooms">4</span>
    </div>
    <div id="location"><span>Jardins, São Paulo - SP</span></div>
    <p>Condomínio R$ 3.000 · 999 m²</p>
    """
    listing = OlxExtractor().extract(parse(html))

    assert listing.title == "Cobertura Duplex"
    assert listing.price == 2300000
    assert listing.area_m2 == 180
    assert listing.bedrooms == 4
    assert listing.address.bairro == "Jardins"
    assert listing.address.cidade == "São Paulo"


def test_olx_without_title_uses_default_label():
    listing = OlxExtractor().extract(parse("<p>Sem título</p>"))
    assert listing.title == "Imóvel OLX"


# ----------------------------------------------------------
# QuintoAndar
# ----------------------------------------------------------
def test_quintoandar_selectors():
    html = """
    <h1 data-testid="house-main-info-title">Apartamento à venda</h1>
    <p data-testid="house-price">R$ 640.000</p>
    <span data-testid="house-area">58 m²</span>
    <span data-testid="house-bedrooms">2 quartos</span>
    <span data-testid="house-address">Vila Madalena, São Paulo</span>
    """
    listing = QuintoAndarExtractor().extract(parse(html))

    assert listing == NormalizedListing(
        title="Apartamento à venda",
        price=640000,
        area_m2=58,
        bedrooms=2,
        address=Address("Vila Madalena", "São Paulo", "SP"),
    )


def test_quintoandar_generic_h1_fallback():
    listing = QuintoAndarExtractor().extract(parse("<h1>  Casa   térrea </h1>"))
    assert listing.title == "Casa térrea"


# ----------------------------------------------------------
# VivaReal / Loft
# ----------------------------------------------------------
def test_vivareal_selectors():
    html = """
    <h1 class="title__title">Apartamento com 3 Quartos à venda, 90m²</h1>
    <p class="title__address">Perdizes, São Paulo - SP</p>
    <h3 class="price__price-info">R$ 1.100.000</h3>
    <ul>
      <li class="features__item features__item--area">90 m²</li>
      <li class="features__item features__item--bedroom">3 quartos</li>
    </ul>
    """
    listing = VivaRealExtractor().extract(parse(html))

    assert listing.title == "Apartamento com 3 Quartos à venda, 90m²"
    assert listing.price == 1100000
    assert listing.area_m2 == 90
    assert listing.bedrooms == 3
    assert listing.address == Address("Perdizes", "São Paulo", "SP")


def test_vivareal_itemprop_attributes():
    html = """
    <h1>Studio</h1>
    <meta itemprop="floorSize" content="32"/>
    <meta itemprop="numberOfRooms" content="0"/>
    """
    listing = VivaRealExtractor().extract(parse(html))
    assert listing.area_m2 == 32
    # 0 Quartos ist ein bekannter Wert, nicht "unbekannt"
    assert listing.bedrooms == 0


def test_loft_and_zap_use_vivareal_extractor():
    assert get_extractor(PlatformId.LOFT) is get_extractor(PlatformId.VIVAREAL)
    assert get_extractor(PlatformId.ZAPIMOVEIS) is get_extractor(PlatformId.VIVAREAL)
    assert isinstance(get_extractor(PlatformId.LOFT), VivaRealExtractor)


# ----------------------------------------------------------
# Totalität & Idempotenz
# ----------------------------------------------------------
@pytest.mark.parametrize("platform", list(EXTRACTORS))
@pytest.mark.parametrize(
    "html",
    [
        "<p>nothing here</p>",
        "<h1></h1><h2>R$</h2><li class='features__item--area'>0 m²</li>",
        "<div>0 m2, 0 m²</div><span data-testid='house-area'>abc</span>",
        "<body>" + "<div>" * 50 + "Rua X, 10" + "</div>" * 50 + "</body>",
    ],
)
def test_extract_is_total(platform, html):
    listing = get_extractor(platform).extract(parse(html))

    assert listing.title
    assert isinstance(listing.price, int) and listing.price >= 0
    assert isinstance(listing.area_m2, int) and listing.area_m2 > 0
    assert listing.bedrooms is None or listing.bedrooms >= 0
    assert listing.address.bairro and listing.address.cidade
    assert listing.address.estado == "SP"


def test_defaults_when_nothing_matches():
    listing = VivaRealExtractor().extract(parse("<p>nada</p>"))

    assert listing.title == "Imóvel VivaReal"
    assert listing.price == 0
    assert listing.area_m2 == 75
    assert listing.bedrooms is None
    assert listing.address == Address("Centro", "São Paulo", "SP")
    assert "bedrooms" not in listing.to_dict()


@pytest.mark.parametrize("platform", list(EXTRACTORS))
def test_extract_is_idempotent(platform, olx_page):
    extractor = get_extractor(platform)
    first = extractor.extract(parse(olx_page))
    second = extractor.extract(parse(olx_page))

    assert first == second
    assert first.to_dict() == second.to_dict()

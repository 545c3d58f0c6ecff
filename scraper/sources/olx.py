# scraper/sources/olx.py

from scraper.interfaces.models import PlatformId
from scraper.sources.base import (
    ListingExtractor,
    any_text_of,
    meta_of,
    parse_area_value,
    parse_bedrooms,
    parse_int,
    parse_price,
    text_of,
)


def _price_with_currency(text: str):
    # OLX rendert mehrere h2; nur der mit "R$" ist der Preis
    if "R$" not in text:
        return None
    return parse_price(text)


class OlxExtractor(ListingExtractor):
    platform = PlatformId.OLX
    default_title = "Imóvel OLX"

    title_strategies = (
        text_of("h1[data-ds-component='DS-Text']"),
        text_of("[data-testid='ad-title']"),
        text_of("h1"),
    )

    price_strategies = (
        text_of("[data-testid='ad-price']", parse_price),
        any_text_of("h2[data-ds-component='DS-Text']", _price_with_currency),
        any_text_of("h2", _price_with_currency),
        meta_of("product:price:amount", parse_price),
    )

    area_strategies = (
        text_of("[data-testid='ad-properties'] [data-testid='size']", parse_area_value),
    )

    bedroom_strategies = (
        text_of("[data-testid='ad-properties'] [data-testid='rooms']", parse_int),
        any_text_of("[data-testid='ad-properties'] span", parse_bedrooms),
    )

    address_strategies = (
        text_of("#location span"),
        text_of("[data-testid='location']"),
    )

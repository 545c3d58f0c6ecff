# scraper/sources/vivareal.py
#
# VivaReal, Loft und Zap teilen dasselbe Markup (Grupo ZAP); Loft und Zap
# laufen deshalb bewusst über diesen Extractor.

from scraper.interfaces.models import PlatformId
from scraper.sources.base import (
    ListingExtractor,
    attr_of,
    parse_area_value,
    parse_int,
    parse_price,
    text_of,
)


class VivaRealExtractor(ListingExtractor):
    platform = PlatformId.VIVAREAL
    default_title = "Imóvel VivaReal"

    title_strategies = (
        text_of("h1.title__title"),
        text_of("[data-testid='listing-title']"),
        text_of("h1"),
    )

    price_strategies = (
        text_of("h3.price__price-info", parse_price),
        text_of("[data-testid='price-value']", parse_price),
        text_of("[data-testid='price-info-value']", parse_price),
    )

    area_strategies = (
        text_of("li.features__item--area", parse_area_value),
        text_of("[itemprop='floorSize']", parse_area_value),
        attr_of("[itemprop='floorSize']", "content", parse_area_value),
    )

    bedroom_strategies = (
        text_of("li.features__item--bedroom", parse_int),
        text_of("[itemprop='numberOfRooms']", parse_int),
        attr_of("[itemprop='numberOfRooms']", "content", parse_int),
    )

    address_strategies = (
        text_of("p.title__address"),
        text_of("[data-testid='address-info-value']"),
        text_of("[data-testid='location-address']"),
    )

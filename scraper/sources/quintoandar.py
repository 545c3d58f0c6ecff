# scraper/sources/quintoandar.py

from scraper.interfaces.models import PlatformId
from scraper.sources.base import (
    ListingExtractor,
    parse_area_value,
    parse_int,
    parse_price,
    text_of,
)


class QuintoAndarExtractor(ListingExtractor):
    platform = PlatformId.QUINTOANDAR
    default_title = "Imóvel QuintoAndar"

    title_strategies = (
        text_of("h1[data-testid='house-main-info-title']"),
        text_of("[data-testid='house-title']"),
        text_of("h1"),
    )

    price_strategies = (
        text_of("[data-testid='house-price']", parse_price),
        text_of("[data-testid='price-info-value']", parse_price),
        text_of("[data-testid='sale-price']", parse_price),
    )

    area_strategies = (
        text_of("[data-testid='house-area']", parse_area_value),
        text_of("[data-testid='house-main-info-area']", parse_area_value),
    )

    bedroom_strategies = (
        text_of("[data-testid='house-bedrooms']", parse_int),
        text_of("[data-testid='house-main-info-bedrooms']", parse_int),
    )

    address_strategies = (
        text_of("[data-testid='house-address']"),
        text_of("[data-testid='house-main-info-address']"),
        text_of("address"),
    )

from typing import Dict

from scraper.interfaces.models import PlatformId

from .base import ListingExtractor
from .olx import OlxExtractor
from .quintoandar import QuintoAndarExtractor
from .vivareal import VivaRealExtractor

_vivareal = VivaRealExtractor()

# Loft und Zap haben keinen eigenen Extractor
EXTRACTORS: Dict[PlatformId, ListingExtractor] = {
    PlatformId.OLX: OlxExtractor(),
    PlatformId.QUINTOANDAR: QuintoAndarExtractor(),
    PlatformId.VIVAREAL: _vivareal,
    PlatformId.LOFT: _vivareal,
    PlatformId.ZAPIMOVEIS: _vivareal,
}


def get_extractor(platform: PlatformId) -> ListingExtractor:
    return EXTRACTORS[platform]


__all__ = [
    "EXTRACTORS",
    "get_extractor",
    "ListingExtractor",
    "OlxExtractor",
    "QuintoAndarExtractor",
    "VivaRealExtractor",
]

# scraper/sources/platforms.py

from typing import List, Optional

from scraper.interfaces.models import PLATFORM_DOMAINS, PlatformId


def classify(url: str) -> Optional[PlatformId]:
    """
    Ordnet eine URL einer bekannten Plattform zu.

    Reiner Substring-Test gegen die Domain jeder Plattform, in fester
    Reihenfolge; kein Lowercasing, kein Entfernen des Schemas.
    None = nicht unterstützt.
    """
    if not url:
        return None
    for platform, domain in PLATFORM_DOMAINS.items():
        if domain in url:
            return platform
    return None


def supported_platforms() -> List[str]:
    return [p.display_name for p in PLATFORM_DOMAINS]

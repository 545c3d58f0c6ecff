from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union


DEFAULT_BAIRRO = "Centro"
DEFAULT_CIDADE = "São Paulo"
DEFAULT_ESTADO = "SP"
DEFAULT_AREA_M2 = 75
DEFAULT_PRICE = 0


class PlatformId(str, Enum):
    OLX = "olx"
    QUINTOANDAR = "quintoandar"
    VIVAREAL = "vivareal"
    LOFT = "loft"
    ZAPIMOVEIS = "zapimoveis"

    @property
    def domain(self) -> str:
        return PLATFORM_DOMAINS[self]

    @property
    def display_name(self) -> str:
        return PLATFORM_NAMES[self]


# Reihenfolge = Priorität beim Klassifizieren
PLATFORM_DOMAINS: Dict[PlatformId, str] = {
    PlatformId.OLX: "olx.com.br",
    PlatformId.QUINTOANDAR: "quintoandar.com.br",
    PlatformId.VIVAREAL: "vivareal.com.br",
    PlatformId.LOFT: "loft.com.br",
    PlatformId.ZAPIMOVEIS: "zapimoveis.com.br",
}

PLATFORM_NAMES: Dict[PlatformId, str] = {
    PlatformId.OLX: "OLX",
    PlatformId.QUINTOANDAR: "QuintoAndar",
    PlatformId.VIVAREAL: "VivaReal",
    PlatformId.LOFT: "Loft",
    PlatformId.ZAPIMOVEIS: "Zap Imóveis",
}


class ErrorKind(str, Enum):
    UNSUPPORTED_PLATFORM = "UnsupportedPlatform"
    NETWORK_ERROR = "NetworkError"
    PARSE_ERROR = "ParseError"


@dataclass(frozen=True)
class Address:
    bairro: str = DEFAULT_BAIRRO
    cidade: str = DEFAULT_CIDADE
    estado: str = DEFAULT_ESTADO

    def to_dict(self) -> Dict[str, str]:
        return {"bairro": self.bairro, "cidade": self.cidade, "estado": self.estado}


@dataclass(frozen=True)
class NormalizedListing:
    """Normalisiertes Inserat, wie es die Bewertung erwartet."""

    title: str
    price: int
    area_m2: int
    bedrooms: Optional[int] = None
    address: Address = field(default_factory=Address)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "title": self.title,
            "price": self.price,
            "area_m2": self.area_m2,
        }
        # unbekannt != 0 Quartos: Feld weglassen
        if self.bedrooms is not None:
            data["bedrooms"] = self.bedrooms
        data["address"] = self.address.to_dict()
        return data


@dataclass(frozen=True)
class Success:
    listing: NormalizedListing


@dataclass(frozen=True)
class Blocked:
    platform: PlatformId
    status_code: Optional[int] = None


@dataclass(frozen=True)
class Failure:
    reason: ErrorKind
    detail: str


Outcome = Union[Success, Blocked, Failure]

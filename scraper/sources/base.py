# scraper/sources/base.py
"""
Gemeinsame Extraktions-Bausteine für alle Plattformen.

Jedes Feld wird über eine geordnete Liste von Strategien gelesen. Eine
Strategie ist eine reine Funktion DocumentTree -> Optional[Wert]; die erste,
die etwas liefert, gewinnt. Liefert keine etwas, greift der Default des
Feldes. Die Extraktion wirft nie.
"""

import re
from typing import Any, Callable, Iterable, Optional, Sequence

from scraper.interfaces.models import (
    DEFAULT_AREA_M2,
    DEFAULT_BAIRRO,
    DEFAULT_CIDADE,
    DEFAULT_ESTADO,
    DEFAULT_PRICE,
    Address,
    NormalizedListing,
    PlatformId,
)
from scraper.utils.markup import DocumentTree

Strategy = Callable[[DocumentTree], Optional[Any]]
Parser = Callable[[str], Optional[Any]]

# 1.200 | 75 | 75,5
NUMBER = r"(\d{1,3}(?:\.\d{3})+|\d+)(?:,(\d+))?"

AREA_PATTERN = re.compile(NUMBER + r"\s*m(?:²|2)(?![A-Za-z0-9])", re.I)
BEDROOM_PATTERN = re.compile(r"(\d+)\s*quartos?(?![A-Za-z])", re.I)
PRICE_PATTERN = re.compile(NUMBER)

# "Pinheiros, São Paulo" / "75 m² · 2 quartos · Pinheiros, São Paulo - SP"
ADDRESS_LINE_PATTERN = re.compile(
    r"^(?:[^,\n]*[·|]\s*)?[A-ZÀ-Ý][^,\n·|]{1,60},\s*[A-ZÀ-Ý][^,\n·|]{1,40}$",
    re.M,
)
UF_SUFFIX = re.compile(r"\s*[-/]\s*[A-Z]{2}$")


# ----------------------------------------------------------
# Text-Helper
# ----------------------------------------------------------
def clean_text(s: Optional[str]) -> Optional[str]:
    if not s:
        return None
    s = re.sub(r"\s+", " ", s).strip()
    return s or None


def _to_number(integer_part: str, fraction: Optional[str]) -> float:
    value = float(integer_part.replace(".", ""))
    if fraction:
        value += float(f"0.{fraction}")
    return value


def parse_price(text: Optional[str]) -> Optional[int]:
    """
    'R$ 850.000' -> 850000, 'R$ 1.250.000,00' -> 1250000.
    Centavos werden abgeschnitten.
    """
    if not text:
        return None
    m = PRICE_PATTERN.search(text.replace("\xa0", " "))
    if not m:
        return None
    return int(m.group(1).replace(".", ""))


def parse_area(text: Optional[str]) -> Optional[int]:
    """Zahl direkt vor m²/m2, auf ganze m² gerundet; nur positive Werte."""
    if not text:
        return None
    for m in AREA_PATTERN.finditer(text):
        value = int(round(_to_number(m.group(1), m.group(2))))
        if value > 0:
            return value
    return None


def parse_area_value(text: Optional[str]) -> Optional[int]:
    """Wie parse_area, akzeptiert aber auch eine nackte Zahl (Feature-Element)."""
    value = parse_area(text)
    if value is not None:
        return value
    if not text:
        return None
    m = PRICE_PATTERN.search(text)
    if not m:
        return None
    value = int(round(_to_number(m.group(1), m.group(2))))
    return value if value > 0 else None


def parse_bedrooms(text: Optional[str]) -> Optional[int]:
    if not text:
        return None
    m = BEDROOM_PATTERN.search(text)
    if m:
        return int(m.group(1))
    return None


def parse_int(text: Optional[str]) -> Optional[int]:
    if not text:
        return None
    m = re.search(r"\d+", text)
    if not m:
        return None
    return int(m.group(0))


def split_address(text: Optional[str]) -> Address:
    """
    Freitext an Kommas trennen: erstes Segment = Bairro, zweites = Cidade.
    Der Bundesstaat wird nie aus dem Text gelesen.
    """
    bairro, cidade = DEFAULT_BAIRRO, DEFAULT_CIDADE
    if text:
        parts = [p.strip() for p in text.split(",")]
        first = re.split(r"[·|]", parts[0])[-1].strip()
        if first:
            bairro = first
        if len(parts) > 1:
            second = UF_SUFFIX.sub("", parts[1]).strip()
            if second:
                cidade = second
    return Address(bairro=bairro, cidade=cidade, estado=DEFAULT_ESTADO)


# ----------------------------------------------------------
# Strategien
# ----------------------------------------------------------
def _apply(value: Optional[str], parse: Optional[Parser]) -> Optional[Any]:
    value = clean_text(value)
    if value is None:
        return None
    return parse(value) if parse else value


def text_of(selector: str, parse: Optional[Parser] = None) -> Strategy:
    """Text des ersten Treffers."""

    def strategy(doc: DocumentTree) -> Optional[Any]:
        el = doc.select_one(selector)
        if el is None:
            return None
        return _apply(el.get_text(" ", strip=True), parse)

    return strategy


def any_text_of(selector: str, parse: Parser) -> Strategy:
    """Erster Treffer (in Dokumentreihenfolge), dessen Text sich parsen lässt."""

    def strategy(doc: DocumentTree) -> Optional[Any]:
        for el in doc.select(selector):
            value = _apply(el.get_text(" ", strip=True), parse)
            if value is not None:
                return value
        return None

    return strategy


def attr_of(selector: str, attr: str, parse: Optional[Parser] = None) -> Strategy:
    def strategy(doc: DocumentTree) -> Optional[Any]:
        el = doc.select_one(selector)
        if el is None:
            return None
        raw = el.get(attr)
        if isinstance(raw, list):
            raw = " ".join(raw)
        return _apply(raw, parse)

    return strategy


def meta_of(name: str, parse: Optional[Parser] = None) -> Strategy:
    def strategy(doc: DocumentTree) -> Optional[Any]:
        return _apply(doc.meta(name), parse)

    return strategy


def from_text(parse: Parser) -> Strategy:
    """Regex-Fallback über den kompletten Seitentext."""

    def strategy(doc: DocumentTree) -> Optional[Any]:
        return parse(doc.text())

    return strategy


def address_line(doc: DocumentTree) -> Optional[str]:
    m = ADDRESS_LINE_PATTERN.search(doc.body_text())
    return m.group(0) if m else None


def first_match(strategies: Iterable[Strategy], doc: DocumentTree, default: Any = None) -> Any:
    for strategy in strategies:
        value = strategy(doc)
        if value is not None:
            return value
    return default


# ----------------------------------------------------------
# Basis-Extractor
# ----------------------------------------------------------
class ListingExtractor:
    """
    Gemeinsamer Vertrag: extract(doc) -> NormalizedListing.

    Subklassen setzen nur ihre Selektor-Listen; die Freitext-Fallbacks für
    Fläche, Quartos und Adresse werden hier angehängt.
    """

    platform: PlatformId
    default_title: str = "Imóvel"

    title_strategies: Sequence[Strategy] = ()
    price_strategies: Sequence[Strategy] = ()
    area_strategies: Sequence[Strategy] = ()
    bedroom_strategies: Sequence[Strategy] = ()
    address_strategies: Sequence[Strategy] = ()

    def extract(self, doc: DocumentTree) -> NormalizedListing:
        title = first_match(self.title_strategies, doc, self.default_title)

        price = first_match(self.price_strategies, doc, DEFAULT_PRICE)

        area_m2 = first_match(
            [*self.area_strategies, from_text(parse_area)],
            doc,
            DEFAULT_AREA_M2,
        )

        bedrooms = first_match(
            [*self.bedroom_strategies, from_text(parse_bedrooms)],
            doc,
        )

        address_text = first_match([*self.address_strategies, address_line], doc)

        return NormalizedListing(
            title=title,
            price=max(int(price), 0),
            area_m2=area_m2 if area_m2 > 0 else DEFAULT_AREA_M2,
            bedrooms=bedrooms,
            address=split_address(address_text),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(platform={self.platform.value!r})"

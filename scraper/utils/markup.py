# scraper/utils/markup.py

from typing import List, Optional, Union

from bs4 import BeautifulSoup, Comment, Doctype, Tag

from scraper.errors.exceptions import ParseError

SKIP_TAGS = ("script", "style", "noscript", "template")
# Überschriften und <title> tragen den Anzeigentitel, nicht die Adresse
HEADING_TAGS = ("title", "h1", "h2")


class DocumentTree:
    """Read-only Sicht auf eine geparste Seite."""

    def __init__(self, soup: BeautifulSoup):
        self._soup = soup
        self._text: Optional[str] = None
        self._body_text: Optional[str] = None

    def select_one(self, selector: str) -> Optional[Tag]:
        return self._soup.select_one(selector)

    def select(self, selector: str) -> List[Tag]:
        return list(self._soup.select(selector))

    def meta(self, name: str) -> Optional[str]:
        el = self._soup.find("meta", attrs={"property": name}) or self._soup.find(
            "meta", attrs={"name": name}
        )
        if el is None:
            return None
        content = el.get("content")
        return content.strip() if content else None

    def _lines(self, skip_headings: bool) -> str:
        parts = []
        for s in self._soup.find_all(string=True):
            if isinstance(s, (Comment, Doctype)):
                continue
            if s.parent is not None and s.parent.name in SKIP_TAGS:
                continue
            if skip_headings and s.find_parent(list(HEADING_TAGS)) is not None:
                continue
            chunk = s.strip()
            if chunk:
                parts.append(chunk)
        return "\n".join(parts)

    def text(self) -> str:
        """Ganzer Seitentext ohne <script>/<style>, zeilenweise."""
        if self._text is None:
            self._text = self._lines(skip_headings=False)
        return self._text

    def body_text(self) -> str:
        """Wie text(), aber ohne <title>, <h1> und <h2>."""
        if self._body_text is None:
            self._body_text = self._lines(skip_headings=True)
        return self._body_text


def parse(markup: Union[str, bytes]) -> DocumentTree:
    if not markup or not markup.strip():
        raise ParseError("empty document")

    try:
        soup = BeautifulSoup(markup, "lxml")
    except Exception as e:
        raise ParseError(f"could not parse markup: {e}") from e

    if soup is None or not soup.contents:
        raise ParseError("parser produced no document")

    return DocumentTree(soup)

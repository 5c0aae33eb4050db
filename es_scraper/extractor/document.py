"""Loaded specification document and the lookups the extractor performs on it.

The document is parsed once with BeautifulSoup and treated as immutable
afterwards. Section lookups go through an id index built on first use so
repeated attribute scans stay linear in the size of the document.

Example
-------
>>> from es_scraper.extractor.document import SpecDocument
>>> doc = SpecDocument.from_html(
...     '<html><body><emu-clause id="sec-a"><h1>A</h1></emu-clause></body></html>'
... )
>>> doc.element("sec-a").h1.get_text()
'A'
"""

from __future__ import annotations

import typing as typ

import soupsieve as sv
from bs4 import BeautifulSoup, Tag

from es_scraper.errors import ensure

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from pathlib import Path

DEFAULT_PARSER = "html.parser"


class SpecDocument:
    """Read-only view over a parsed specification document."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self.soup = soup
        self._ids: dict[str, Tag] | None = None

    @classmethod
    def from_html(cls, html: str, *, parser: str = DEFAULT_PARSER) -> SpecDocument:
        """Parse ``html`` with the named BeautifulSoup tree builder."""
        return cls(BeautifulSoup(html, parser))

    @classmethod
    def load(cls, path: Path, *, parser: str = DEFAULT_PARSER) -> SpecDocument:
        """Read and parse the document stored at ``path``.

        Raises
        ------
        FileNotFoundError
            If ``path`` does not exist.
        """
        if not path.exists():
            msg = f"Specification document '{path}' not found."
            raise FileNotFoundError(msg)
        return cls.from_html(path.read_text(encoding="utf-8"), parser=parser)

    @property
    def body(self) -> Tag:
        """Return the element holding the top-level clauses.

        Raw ecmarkup sources omit ``<body>``, and ``html.parser`` does not add one,
        so the ``<html>`` element or the document root stands in for it.
        """
        return self.soup.body or self.soup.html or self.soup

    def element(self, element_id: str) -> Tag:
        """Return the element whose ``id`` attribute equals ``element_id``."""
        if self._ids is None:
            self._ids = {}
            for tag in self.soup.find_all(id=True):
                self._ids.setdefault(str(tag["id"]), tag)
        found = self._ids.get(element_id)
        ensure(found is not None, f"No element with id {element_id!r}")
        return typ.cast("Tag", found)

    def child_paragraphs(self, element_id: str) -> list[Tag]:
        """Return the ``<p>`` elements directly under ``element_id``."""
        return self.element(element_id).find_all("p", recursive=False)

    def reference_names(self, anchor: str) -> list[str]:
        """Return the defined terms listed under ``anchor``, ``%`` stripped.

        The anchor is escaped before use as a selector key since specification
        ids routinely contain ``.``, ``@`` and ``%``.
        """
        terms = self.soup.select(f"#{sv.escape(anchor)} dfn")
        ensure(terms, f"Reference clause {anchor!r} lists no defined terms")
        return [term.get_text().replace("%", "") for term in terms]


__all__ = ["DEFAULT_PARSER", "SpecDocument"]

"""Build the table of contents from the specification's nested clauses."""

from __future__ import annotations

import typing as typ

from es_scraper.errors import ensure

from .models import Section

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from bs4 import Tag

    from .document import SpecDocument

CLAUSE_TAG = "emu-clause"


def _clean_title(text: str) -> str:
    """Collapse whitespace runs, line breaks included, into single spaces."""
    return " ".join(text.split())


def _build_sections(root: Tag) -> tuple[Section, ...]:
    sections: list[Section] = []
    for clause in root.find_all(CLAUSE_TAG, recursive=False):
        heading = clause.find("h1", recursive=False)
        clause_id = clause.get("id")
        ensure(heading is not None, f"Clause {clause_id!r} has no <h1> heading")
        ensure(clause_id, f"Clause {heading.get_text()!r} has no id")
        sections.append(
            Section(
                title=_clean_title(heading.get_text()),
                id=str(clause_id),
                children=_build_sections(clause),
            )
        )
    return tuple(sections)


def build_toc(document: SpecDocument) -> list[Section]:
    """Return the clause tree under the document body, in document order.

    Every clause is included regardless of content; choosing the relevant
    range is left to :mod:`es_scraper.extractor.reclassify`.
    """
    return list(_build_sections(document.body))


__all__ = ["CLAUSE_TAG", "build_toc"]

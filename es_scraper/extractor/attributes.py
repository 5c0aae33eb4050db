"""Mine property attribute declarations from section prose.

Property clauses in the specification end with a fixed sentence such as
``This property has the attributes { [[Writable]]: *false*, [[Enumerable]]:
*false*, [[Configurable]]: *true* }.`` which is condensed into an attribute
code: one letter per flag that holds, in ``w``/``e``/``c`` order.
"""

from __future__ import annotations

import re
import typing as typ

from es_scraper._constants import ATTRIBUTES_MARKER
from es_scraper.errors import SpecIntegrityError, ensure

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from .document import SpecDocument
    from .models import Section

_ATTRIBUTES_SENTENCE = re.compile(
    r"has the attributes \{ \[\[Writable\]\]: \*(?P<writable>true|false)\*, "
    r"\[\[Enumerable\]\]: \*(?P<enumerable>true|false)\*, "
    r"\[\[Configurable\]\]: \*(?P<configurable>true|false)\* \}\."
)
_FLAG_LETTERS = (("writable", "w"), ("enumerable", "e"), ("configurable", "c"))


def attribute_code(sentence: str) -> str:
    """Return the ``wec`` code declared by an attributes ``sentence``.

    Raises
    ------
    SpecIntegrityError
        If the sentence does not follow the fixed attributes template.
    """
    match = _ATTRIBUTES_SENTENCE.search(" ".join(sentence.split()))
    if match is None:
        msg = f"Unrecognised attributes sentence: {sentence!r}"
        raise SpecIntegrityError(msg)
    return "".join(
        letter for flag, letter in _FLAG_LETTERS if match.group(flag) == "true"
    )


class AttributeExtractor:
    """Look up attribute codes by section, memoised for the extractor's lifetime."""

    def __init__(self, document: SpecDocument) -> None:
        self.document = document
        self._cache: dict[str, str | None] = {}

    def __call__(self, section: Section) -> str | None:
        """Return the attribute code declared in ``section``.

        Returns
        -------
        str | None
            The code, or ``None`` when the section has no attributes
            paragraph; callers apply their own default.

        Raises
        ------
        SpecIntegrityError
            If more than one paragraph declares attributes.
        """
        if section.id not in self._cache:
            self._cache[section.id] = self._extract(section)
        return self._cache[section.id]

    def _extract(self, section: Section) -> str | None:
        texts = (
            " ".join(p.get_text().split())
            for p in self.document.child_paragraphs(section.id)
        )
        paragraphs = [text for text in texts if ATTRIBUTES_MARKER in text]
        if not paragraphs:
            return None
        ensure(
            len(paragraphs) == 1,
            f"Expected {section.title} to have 1 attributes paragraph, "
            f"found {len(paragraphs)}",
        )
        return attribute_code(paragraphs[0])


__all__ = ["AttributeExtractor", "attribute_code"]

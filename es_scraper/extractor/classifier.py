"""Classify member clauses into property, accessor, method and constructor records."""

from __future__ import annotations

import re
import typing as typ

from es_scraper._constants import DEFAULT_DATA_ATTRIBUTES
from es_scraper.errors import ensure

from .models import AccessorProperty, Constructor, DataProperty, Method, Property
from .signature import is_call_signature, parse_signature

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    import collections.abc as cabc

    from .models import Section

    AttributeLookup = cabc.Callable[[Section], str | None]

# Abstract operations, syntax literals and record type definitions nest under
# member clauses without describing further members.
_HELPER_TITLE = re.compile(r"^[A-Z][A-Za-z]+\s*\(|^`|Record$")
_ACCESSOR_PREFIX = re.compile(r"^(get|set) ")


def _is_accessor_title(title: str) -> bool:
    return _ACCESSOR_PREFIX.match(title) is not None


def _has_accessor_pair(section: Section) -> bool:
    return sum(_is_accessor_title(c.title) for c in section.children) == 2


def is_bare(section: Section) -> bool:
    """Return whether ``section`` is a leaf member clause.

    A member is bare when every child is a childless helper clause (abstract
    operation, syntax literal or record definition), or when it holds exactly
    a ``get``/``set`` accessor pair.
    """
    helpers_only = all(
        _HELPER_TITLE.search(c.title) and not c.children for c in section.children
    )
    return helpers_only or _has_accessor_pair(section)


def bare(section: Section) -> Section:
    """Return ``section`` after checking it is bare.

    Raises
    ------
    SpecIntegrityError
        If the section nests anything other than helper clauses.
    """
    ensure(
        is_bare(section),
        f"Not all children are abstract operations or type definitions "
        f"for {section.title}",
    )
    return section


class MemberClassifier:
    """Turn bare member sections into catalog member records.

    Parameters
    ----------
    attributes : Callable[[Section], str | None]
        Lookup returning a section's declared attribute code, typically an
        :class:`~es_scraper.extractor.attributes.AttributeExtractor`.
    """

    def __init__(self, attributes: AttributeLookup) -> None:
        self.attributes = attributes

    def make_method(self, section: Section) -> Method:
        name, parameters = parse_signature(section.title)
        return Method(
            name=name, parameters=parameters, attributes=self.attributes(section)
        )

    def make_property(self, section: Section) -> Property:
        """Classify ``section`` as an accessor or data property.

        Accessor codes carry ``g``/``s`` for the functions actually present,
        followed by ``c``. Data properties without an attributes paragraph
        default to ``wc``.
        """
        title = section.title
        if _has_accessor_pair(section):
            return AccessorProperty(name=title.replace(" ", ""), attributes="gsc")
        if _is_accessor_title(title):
            getter = "g" if title.startswith("get ") else ""
            setter = "s" if title.startswith("set ") else ""
            return AccessorProperty(
                name=title[4:].replace(" ", ""), attributes=f"{getter}{setter}c"
            )
        attributes = self.attributes(section)
        if attributes is None:
            attributes = DEFAULT_DATA_ATTRIBUTES
        return DataProperty(name=title.replace(" ", ""), attributes=attributes)

    def make_member(self, section: Section) -> Method | Property:
        """Dispatch on the title: call signatures are methods."""
        if is_call_signature(section.title):
            return self.make_method(section)
        return self.make_property(section)

    def make_constructor(self, section: Section | None) -> Constructor | None:
        if section is None:
            return None
        ensure(
            is_call_signature(section.title),
            f"Constructor section {section.title!r} does not specify a constructor",
        )
        name, parameters = parse_signature(section.title)
        return Constructor(name=name, parameters=parameters)


__all__ = ["MemberClassifier", "bare", "is_bare"]

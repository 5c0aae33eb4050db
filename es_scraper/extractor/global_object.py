"""Propagate global exposure from the Global Object clause into the catalog.

"The Global Object" clause lists, in four fixed sub-clauses, the value
properties, functions, constructors and other namespaces reachable from the
global scope. Value properties and functions become standalone descriptors;
constructors and namespaces must already be in the catalog and only have
their ``global`` flag set.
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import re
import typing as typ

from es_scraper._constants import GLOBAL_OBJECT_CLAUSE
from es_scraper.errors import ensure

from .classifier import bare
from .models import ClassBinding, Function, GlobalProperty, Namespace
from .signature import parse_signature

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from .attributes import AttributeExtractor
    from .models import Binding, Section

logger = logging.getLogger(__name__)

GLOBAL_OBJECT_LAYOUT = (
    "Value Properties of the Global Object",
    "Function Properties of the Global Object",
    "Constructor Properties of the Global Object",
    "Other Properties of the Global Object",
)
URI_FUNCTIONS_CLAUSE = "URI Handling Functions"
_ELIDED_ARGUMENTS = " ( . . . )"
_CAPITALISED = re.compile(r"^[A-Z]")


def find_binding(catalog: cabc.Iterable[Binding], name: str) -> Binding | None:
    """Return the first descriptor in ``catalog`` called ``name``."""
    return next((binding for binding in catalog if binding.name == name), None)


def global_object_clause(toc: cabc.Sequence[Section]) -> Section:
    """Return the Global Object clause after checking its four-part layout."""
    clause = next((s for s in toc if s.title == GLOBAL_OBJECT_CLAUSE), None)
    ensure(clause is not None, f"TOC has no {GLOBAL_OBJECT_CLAUSE!r}")
    titles = tuple(child.title for child in clause.children)
    ensure(
        titles == GLOBAL_OBJECT_LAYOUT,
        f"Unexpected global object structure: {list(titles)}",
    )
    return clause


def _function_sections(section: Section) -> list[Section]:
    if section.title == URI_FUNCTIONS_CLAUSE:
        return [c for c in section.children if not _CAPITALISED.match(c.title)]
    return [section]


class GlobalPropagator:
    """Flag and synthesize global bindings from the Global Object clause."""

    def __init__(self, attributes: AttributeExtractor) -> None:
        self.attributes = attributes

    def global_properties(self, clause: Section) -> list[GlobalProperty]:
        properties: list[GlobalProperty] = []
        for section in clause.children:
            attributes = self.attributes(bare(section))
            ensure(
                attributes is not None,
                f"Global value property {section.title} declares no attributes",
            )
            properties.append(GlobalProperty(name=section.title, attributes=attributes))
        return properties

    def global_functions(self, clause: Section) -> list[Function]:
        functions: list[Function] = []
        for section in clause.children:
            for leaf in _function_sections(section):
                name, parameters = parse_signature(bare(leaf).title)
                functions.append(Function(name=name, parameters=parameters))
        return functions

    def propagate(
        self, catalog: list[Binding], toc: cabc.Sequence[Section]
    ) -> list[Binding]:
        """Append global properties and functions, then flag global bindings.

        Raises
        ------
        SpecIntegrityError
            If the clause layout is unexpected, or a constructor or namespace
            listed as global has no matching class or namespace descriptor.
        """
        values, functions, constructors, others = global_object_clause(toc).children
        catalog.extend(self.global_properties(values))
        catalog.extend(self.global_functions(functions))
        for section in constructors.children:
            title = bare(section).title.replace(_ELIDED_ARGUMENTS, "")
            binding = find_binding(catalog, title)
            ensure(isinstance(binding, ClassBinding), f"{title} is not a class")
            binding.global_ = True
        for section in others.children:
            title = bare(section).title
            binding = find_binding(catalog, title)
            ensure(isinstance(binding, Namespace), f"{title} is not a namespace")
            binding.global_ = True
        logger.info(
            "Flagged %d constructors and %d namespaces as global",
            len(constructors.children),
            len(others.children),
        )
        return catalog


__all__ = [
    "GLOBAL_OBJECT_LAYOUT",
    "GlobalPropagator",
    "find_binding",
    "global_object_clause",
]

"""Assemble one namespace or class descriptor per normalised object group.

Groups titled "... Object" describe plain namespace objects (``Math``,
``JSON``); all others describe classes. Members are read from the structural
"Properties of ..." clauses; only namespaces without value/function property
clauses fall back to splitting their direct children on whether the title is
a call signature.
"""

from __future__ import annotations

import re
import typing as typ

from es_scraper.errors import ensure

from .classifier import bare
from .models import ClassBinding, Namespace
from .signature import is_call_signature

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from .classifier import MemberClassifier
    from .models import Method, Property, Section

_NAMESPACE_VALUES = re.compile(r"Value Properties of")
_NAMESPACE_FUNCTIONS = re.compile(r"Function Properties of")
_CLASS_STATICS = re.compile(r"Properties of .* Constructor")
_CLASS_INSTANCES = re.compile(r"Properties of .* Instances")
_CLASS_PROTOTYPE = re.compile(r"Properties of .* Prototype Object")
_CLASS_CONSTRUCTOR = re.compile(r"The .* Constructor")
_NAMESPACE_NAME = re.compile(r"^The | Object$")
_CLASS_NAME = re.compile(r" Objects| \(.*\)")


def _find(group: Section, pattern: re.Pattern[str]) -> Section | None:
    return next((c for c in group.children if pattern.search(c.title)), None)


def _members(group: Section, pattern: re.Pattern[str]) -> list[Section]:
    """Return the bare members of the first child matching ``pattern``."""
    found = _find(group, pattern)
    if found is None:
        return []
    return [bare(member) for member in found.children]


def _split(sections: list[Section]) -> tuple[list[Section], list[Section]]:
    """Partition ``sections`` into (properties, methods)."""
    properties = [s for s in sections if not is_call_signature(s.title)]
    methods = [s for s in sections if is_call_signature(s.title)]
    return properties, methods


class BindingAssembler:
    """Build namespace and class descriptors with a shared member classifier."""

    def __init__(self, members: MemberClassifier) -> None:
        self.members = members

    def assemble(self, group: Section) -> Namespace | ClassBinding:
        if group.title.endswith("Object"):
            return self.namespace(group)
        return self.class_binding(group)

    def namespace(self, group: Section) -> Namespace:
        property_sections = _members(group, _NAMESPACE_VALUES)
        method_sections = _members(group, _NAMESPACE_FUNCTIONS)
        ensure(
            not any(is_call_signature(s.title) for s in property_sections),
            f"Value properties of {group.title} include a function",
        )
        ensure(
            all(is_call_signature(s.title) for s in method_sections),
            f"Function properties of {group.title} include a non-function",
        )
        if not property_sections and not method_sections:
            property_sections, method_sections = _split(
                [bare(child) for child in group.children]
            )
        return Namespace(
            name=_NAMESPACE_NAME.sub("", group.title),
            static_properties=self._properties(property_sections),
            static_methods=self._methods(method_sections),
        )

    def class_binding(self, group: Section) -> ClassBinding:
        static_sections = _members(group, _CLASS_STATICS)
        instance_sections = _members(group, _CLASS_INSTANCES)
        prototype_sections = _members(group, _CLASS_PROTOTYPE)
        constructor_clause = _find(group, _CLASS_CONSTRUCTOR)
        constructor_section = (
            constructor_clause.children[0]
            if constructor_clause is not None and constructor_clause.children
            else None
        )
        ensure(
            not any(is_call_signature(s.title) for s in instance_sections),
            f"Instance properties of {group.title} include a function",
        )
        static_properties, static_methods = _split(static_sections)
        prototype_properties, prototype_methods = _split(prototype_sections)
        return ClassBinding(
            name=_CLASS_NAME.sub("", group.title),
            constructor=self.members.make_constructor(constructor_section),
            static_properties=self._properties(static_properties),
            static_methods=self._methods(static_methods),
            prototype_properties=self._properties(prototype_properties),
            instance_methods=self._methods(prototype_methods),
            instance_properties=self._properties(instance_sections),
        )

    def _properties(self, sections: list[Section]) -> list[Property]:
        return [self.members.make_property(s) for s in sections]

    def _methods(self, sections: list[Section]) -> list[Method]:
        return [self.members.make_method(s) for s in sections]


__all__ = ["BindingAssembler"]

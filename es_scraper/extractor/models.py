"""Typed records shared by the catalog extraction pipeline.

Two families live here. :class:`Section` is the transient outline node built
from the specification's nested clauses; it is immutable so restructuring
always produces new values. The binding descriptors are the catalog's units,
modelled as ``msgspec`` structs tagged on a ``type`` field so the catalog
encodes to the exact JSON shape downstream documentation tooling reads and
decodes back into the same tagged union.

Example
-------
>>> from es_scraper.extractor.models import Parameters, Method
>>> method = Method(name="bar()", parameters=Parameters(required=2))
>>> method.attributes is None
True
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import msgspec


@dc.dataclass(frozen=True, slots=True)
class Section:
    """One clause of the specification outline.

    Attributes
    ----------
    title : str
        Heading text with whitespace runs collapsed to single spaces.
    id : str
        Anchor id of the clause element.
    children : tuple[Section, ...]
        Nested clauses in document order.
    """

    title: str
    id: str
    children: tuple[Section, ...] = ()

    def child(self, title: str) -> Section | None:
        """Return the first direct child whose title equals ``title``."""
        return next((c for c in self.children if c.title == title), None)

    def index_of(self, title: str) -> int:
        """Return the index of the child titled ``title``, or ``-1``."""
        for idx, candidate in enumerate(self.children):
            if candidate.title == title:
                return idx
        return -1


class Parameters(msgspec.Struct, frozen=True):
    """Arity of a call signature."""

    required: int = 0
    optional: int = 0
    rest: bool = False


class DataProperty(msgspec.Struct, tag_field="type", tag="data-property", kw_only=True):
    """Plain value property with a ``wec`` attribute code."""

    name: str
    attributes: str


class AccessorProperty(
    msgspec.Struct, tag_field="type", tag="accessor-property", kw_only=True
):
    """Getter/setter property with a ``gsec`` attribute code."""

    name: str
    attributes: str


Property = DataProperty | AccessorProperty


class Method(
    msgspec.Struct, tag_field="type", tag="method", kw_only=True, omit_defaults=True
):
    """Function-valued property; ``attributes`` is absent unless declared."""

    name: str
    parameters: Parameters
    attributes: str | None = None


class Constructor(msgspec.Struct, tag_field="type", tag="constructor", kw_only=True):
    name: str
    parameters: Parameters


class Namespace(
    msgspec.Struct, tag_field="type", tag="namespace", kw_only=True, rename="camel"
):
    """Plain object exposing static members only (``Math``, ``JSON``...)."""

    name: str
    global_: bool = msgspec.field(default=False, name="global")
    static_properties: list[Property] = msgspec.field(default_factory=list)
    static_methods: list[Method] = msgspec.field(default_factory=list)


class ClassBinding(
    msgspec.Struct, tag_field="type", tag="class", kw_only=True, rename="camel"
):
    """Constructor function together with its static and prototype members."""

    name: str
    global_: bool = msgspec.field(default=False, name="global")
    constructor: Constructor | None = None
    static_properties: list[Property] = msgspec.field(default_factory=list)
    static_methods: list[Method] = msgspec.field(default_factory=list)
    prototype_properties: list[Property] = msgspec.field(default_factory=list)
    instance_methods: list[Method] = msgspec.field(default_factory=list)
    instance_properties: list[Property] = msgspec.field(default_factory=list)


class GlobalProperty(
    msgspec.Struct, tag_field="type", tag="global-property", kw_only=True
):
    name: str
    attributes: str


class Function(msgspec.Struct, tag_field="type", tag="function", kw_only=True):
    """Global function; always flagged ``global``."""

    name: str
    parameters: Parameters
    global_: bool = msgspec.field(default=True, name="global")


Binding = Namespace | ClassBinding | GlobalProperty | Function

Catalog: typ.TypeAlias = list[Binding]


__all__ = [
    "AccessorProperty",
    "Binding",
    "Catalog",
    "ClassBinding",
    "Constructor",
    "DataProperty",
    "Function",
    "GlobalProperty",
    "Method",
    "Namespace",
    "Parameters",
    "Property",
    "Section",
]

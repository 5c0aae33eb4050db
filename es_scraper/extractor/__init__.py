"""Extraction pipeline turning the ECMAScript specification into a binding catalog."""

from .codec import load_catalog
from .document import SpecDocument
from .global_object import find_binding
from .models import (
    AccessorProperty,
    Binding,
    ClassBinding,
    Constructor,
    DataProperty,
    Function,
    GlobalProperty,
    Method,
    Namespace,
    Parameters,
    Section,
)
from .pipeline import CatalogExtractor, CatalogPipeline, build_catalog
from .signature import parse_signature

__all__ = [
    "AccessorProperty",
    "Binding",
    "CatalogExtractor",
    "CatalogPipeline",
    "ClassBinding",
    "Constructor",
    "DataProperty",
    "Function",
    "GlobalProperty",
    "Method",
    "Namespace",
    "Parameters",
    "Section",
    "SpecDocument",
    "build_catalog",
    "find_binding",
    "load_catalog",
    "parse_signature",
]

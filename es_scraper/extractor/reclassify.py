"""Restructure the built-in objects range of the TOC into classifiable groups.

The specification groups its built-in objects under a handful of top-level
clauses. This module slices out that range and flattens it to one group per
object, applying a fixed set of rewrites for clauses whose layout departs
from the usual "Properties of the X Constructor / Prototype / Instances"
pattern. Each rewrite is keyed by the clause title and returns new
:class:`~es_scraper.extractor.models.Section` values, sharing unchanged
subtrees with the input.

Example
-------
>>> from es_scraper.extractor.models import Section
>>> from es_scraper.extractor.reclassify import reclassify_group
>>> reclassify_group(Section("Module Namespace Objects", "sec-module-ns"))
[]
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging

from es_scraper._constants import (
    FIRST_OBJECTS_CLAUSE,
    LAST_OBJECTS_CLAUSE,
    NATIVE_ERROR_TEMPLATE,
    TYPED_ARRAY_PLACEHOLDER,
)
from es_scraper.errors import ensure

from .models import Section

logger = logging.getLogger(__name__)

Rewrite = cabc.Callable[[Section], list[Section]]


def _child_index(group: Section, title: str) -> int:
    idx = group.index_of(title)
    ensure(idx >= 0, f"{group.title} has no {title!r} clause")
    return idx


def _split_error_objects(group: Section) -> list[Section]:
    """Separate the Error class from the native error template and siblings.

    Children after "Properties of Error Instances" are the native error type
    list (read separately as a reference clause), the ``_NativeError_``
    template, the remaining error classes, and a trailing clause of abstract
    operations which is dropped.
    """
    end = _child_index(group, "Properties of Error Instances") + 1
    trailing = group.children[end:-1]
    ensure(len(trailing) >= 2, f"{group.title} is missing native error clauses")
    native_types, native_structure, *other_errors = trailing
    ensure(
        native_types.title == "Native Error Types Used in This Standard",
        f"Unexpected native error types clause {native_types.title!r}",
    )
    ensure(
        native_structure.title == NATIVE_ERROR_TEMPLATE,
        f"Unexpected native error structure clause {native_structure.title!r}",
    )
    return [
        dc.replace(group, children=group.children[:end]),
        native_structure,
        *other_errors,
    ]


def _split_typed_arrays(group: Section) -> list[Section]:
    """Split %TypedArray% from the per-constructor ``_TypedArray_`` template."""
    end = _child_index(group, "Abstract Operations for TypedArray Objects") + 1
    return [
        dc.replace(group, children=group.children[:end]),
        Section(
            title=TYPED_ARRAY_PLACEHOLDER, id=group.id, children=group.children[end:]
        ),
    ]


def _flatten_legacy_accessors(group: Section) -> list[Section]:
    """Lift the legacy ``__defineGetter__`` family into the prototype members."""
    idx = _child_index(group, "Properties of the Object Prototype Object")
    prototype = group.children[idx]
    members: list[Section] = []
    for member in prototype.children:
        if member.title == "Legacy Object.prototype Accessor Methods":
            members.extend(member.children)
        else:
            members.append(member)
    flattened = dc.replace(prototype, children=tuple(members))
    return [
        dc.replace(
            group,
            children=(*group.children[:idx], flattened, *group.children[idx + 1 :]),
        )
    ]


def _promote_iterator_prototypes(group: Section) -> list[Section]:
    """Keep only the iterator prototype objects, as standalone groups."""
    promoted: list[Section] = []
    for title in ("The %IteratorPrototype% Object", "The %AsyncIteratorPrototype% Object"):
        found = group.child(title)
        ensure(found is not None, f"{group.title} has no {title!r} clause")
        promoted.append(found)
    return promoted


def _drop(_group: Section) -> list[Section]:
    return []


REWRITES: dict[str, Rewrite] = {
    "Error Objects": _split_error_objects,
    "TypedArray Objects": _split_typed_arrays,
    "Object Objects": _flatten_legacy_accessors,
    "Iteration": _promote_iterator_prototypes,
    # Module namespace exotic objects have no global binding.
    "Module Namespace Objects": _drop,
}


def reclassify_group(group: Section) -> list[Section]:
    """Return the normalised groups that replace ``group``."""
    rewrite = REWRITES.get(group.title)
    if rewrite is None:
        return [group]
    logger.debug("Rewriting %s", group.title)
    return rewrite(group)


def object_groups(toc: cabc.Sequence[Section]) -> list[Section]:
    """Return one group per built-in object from the full TOC.

    Parameters
    ----------
    toc : Sequence[Section]
        Top-level clauses as produced by :func:`~es_scraper.extractor.toc.build_toc`.

    Returns
    -------
    list[Section]
        Children of every clause from "Fundamental Objects" through
        "Reflection" inclusive, after applying :data:`REWRITES`.

    Raises
    ------
    SpecIntegrityError
        If either boundary clause is missing or a rewrite finds an
        unexpected structure.
    """
    titles = [section.title for section in toc]
    ensure(FIRST_OBJECTS_CLAUSE in titles, f"TOC has no {FIRST_OBJECTS_CLAUSE!r}")
    ensure(LAST_OBJECTS_CLAUSE in titles, f"TOC has no {LAST_OBJECTS_CLAUSE!r}")
    start = titles.index(FIRST_OBJECTS_CLAUSE)
    stop = titles.index(LAST_OBJECTS_CLAUSE) + 1
    ensure(start < stop, f"{LAST_OBJECTS_CLAUSE!r} precedes {FIRST_OBJECTS_CLAUSE!r}")
    return [
        normalised
        for chapter in toc[start:stop]
        for group in chapter.children
        for normalised in reclassify_group(group)
    ]


__all__ = ["REWRITES", "object_groups", "reclassify_group"]

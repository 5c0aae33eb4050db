"""Expand placeholder class templates into one class per concrete name.

The specification describes the nine typed array constructors and the six
native error constructors once each, through ``_TypedArray_`` and
``_NativeError_`` templates. Expansion copies the template descriptor with the
placeholder substituted in the class, constructor and member names.

Example
-------
>>> from es_scraper.extractor.models import ClassBinding
>>> from es_scraper.extractor.expander import expand_template
>>> template = ClassBinding(name="_TypedArray_")
>>> [c.name for c in expand_template(template, "_TypedArray_", ["Int8Array"])]
['Int8Array']
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

import msgspec

from es_scraper._constants import (
    NATIVE_ERROR_PLACEHOLDER,
    NATIVE_ERROR_TEMPLATE,
    TYPED_ARRAY_PLACEHOLDER,
)

from .models import ClassBinding

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from .models import Binding, Constructor, Method, Property

    Named = typ.TypeVar("Named", Constructor, Method, Property)


def _rename(member: Named, placeholder: str, replacement: str) -> Named:
    return msgspec.structs.replace(
        member, name=member.name.replace(placeholder, replacement, 1)
    )


def substitute_name(
    template: ClassBinding, placeholder: str, replacement: str, *, name: str
) -> ClassBinding:
    """Return a copy of ``template`` named ``name`` with ``placeholder`` substituted.

    Instance properties never mention the placeholder and are shared with the
    template rather than copied.
    """

    def rename_all(members: list[Named]) -> list[Named]:
        return [_rename(m, placeholder, replacement) for m in members]

    constructor = template.constructor
    return ClassBinding(
        name=name,
        global_=template.global_,
        constructor=(
            None
            if constructor is None
            else _rename(constructor, placeholder, replacement)
        ),
        static_properties=rename_all(template.static_properties),
        static_methods=rename_all(template.static_methods),
        prototype_properties=rename_all(template.prototype_properties),
        instance_methods=rename_all(template.instance_methods),
        instance_properties=template.instance_properties,
    )


def expand_template(
    template: ClassBinding, placeholder: str, names: cabc.Iterable[str]
) -> list[ClassBinding]:
    """Return one sibling class per entry of ``names``."""
    return [substitute_name(template, placeholder, n, name=n) for n in names]


class TemplateExpander:
    """Replace template classes in a catalog by their concrete instantiations.

    Parameters
    ----------
    typed_arrays : Sequence[str]
        Concrete typed array constructor names, e.g. ``Int8Array``.
    native_errors : Sequence[str]
        Concrete native error names, e.g. ``TypeError``.
    """

    def __init__(
        self, typed_arrays: cabc.Sequence[str], native_errors: cabc.Sequence[str]
    ) -> None:
        self.templates: dict[str, tuple[str, cabc.Sequence[str]]] = {
            TYPED_ARRAY_PLACEHOLDER: (TYPED_ARRAY_PLACEHOLDER, typed_arrays),
            NATIVE_ERROR_TEMPLATE: (NATIVE_ERROR_PLACEHOLDER, native_errors),
        }

    def expand(self, bindings: cabc.Iterable[Binding]) -> list[Binding]:
        expanded: list[Binding] = []
        for binding in bindings:
            template = (
                self.templates.get(binding.name)
                if isinstance(binding, ClassBinding)
                else None
            )
            if template is None:
                expanded.append(binding)
                continue
            placeholder, names = template
            expanded.extend(expand_template(binding, placeholder, names))
        return expanded


__all__ = ["TemplateExpander", "expand_template", "substitute_name"]

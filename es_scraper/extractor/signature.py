r"""Parse human-readable call signatures into arity records.

Specification headings describe callables as
``Array.from ( _items_ [ , _mapper_ [ , _thisArg_ ] ] )``. The parser
normalises that into ``("Array.from()", Parameters(required=1, optional=2))``.

Example
-------
>>> from es_scraper.extractor.signature import parse_signature
>>> parse_signature("Name ( _a_, _b_ [ , _c_ ] )")
('Name()', Parameters(required=2, optional=1, rest=False))
>>> parse_signature("Name ( ..._args_ )")
('Name()', Parameters(required=0, optional=0, rest=True))
"""

from __future__ import annotations

import re

from es_scraper.errors import ensure

from .models import Parameters

# Spaces are insignificant except right after a comma.
_STRAY_SPACE = re.compile(r"(?<!,) ")
_SIGNATURE = re.compile(r"(?P<name>.*)\((?P<parameters>.*)\)")
_REST_MARKER = "..."


def is_call_signature(title: str) -> bool:
    """Return whether ``title`` reads as a call signature."""
    return title.endswith(")")


def parse_signature(title: str) -> tuple[str, Parameters]:
    """Split ``title`` into a normalised ``"Name()"`` and its parameter counts.

    Parameters
    ----------
    title : str
        Heading text shaped as ``Name(param, [optional], ...rest)``.

    Returns
    -------
    tuple[str, Parameters]
        The callable name suffixed with ``()`` and the derived arity.

    Raises
    ------
    SpecIntegrityError
        If ``title`` does not contain a parenthesised parameter list.
    """
    compact = _STRAY_SPACE.sub("", title)
    match = _SIGNATURE.fullmatch(compact)
    ensure(match, f"Heading {title!r} is not a call signature")
    name = match.group("name")
    parameters = match.group("parameters")
    count = len(parameters.split(",")) if parameters.strip() else 0
    optional = parameters.count("[")
    rest = _REST_MARKER in parameters
    return f"{name}()", Parameters(
        required=count - optional - int(rest), optional=optional, rest=rest
    )


__all__ = ["is_call_signature", "parse_signature"]

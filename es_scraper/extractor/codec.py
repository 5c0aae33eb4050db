"""JSON encoding for the TOC and catalog artifacts.

Example
-------
>>> from es_scraper.extractor.codec import decode_catalog, encode_pretty
>>> from es_scraper.extractor.models import GlobalProperty
>>> payload = encode_pretty([GlobalProperty(name="NaN", attributes="")])
>>> decode_catalog(payload)[0].name
'NaN'
"""

from __future__ import annotations

import typing as typ

import msgspec

from .models import Catalog

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from pathlib import Path

_DECODER = msgspec.json.Decoder(Catalog)


def encode_pretty(value: object, *, indent: int = 2) -> bytes:
    """Encode ``value`` as indented, newline-terminated JSON."""
    return msgspec.json.format(msgspec.json.encode(value), indent=indent) + b"\n"


def write_json(path: Path, value: object, *, indent: int = 2) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(encode_pretty(value, indent=indent))
    return path


def decode_catalog(payload: bytes | str) -> Catalog:
    """Decode a catalog payload into typed binding descriptors."""
    return _DECODER.decode(payload)


def load_catalog(path: Path) -> Catalog:
    """Read the catalog written at ``path``.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    msgspec.ValidationError
        If the payload does not match the catalog schema.
    """
    if not path.exists():
        msg = f"Catalog file '{path}' not found."
        raise FileNotFoundError(msg)
    return decode_catalog(path.read_bytes())


__all__ = ["decode_catalog", "encode_pretty", "load_catalog", "write_json"]

"""Load scraper configuration YAML into a typed dataclass."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .models import ScraperConfig, ScraperConfigError

_FIELDS = {field.name: field for field in dc.fields(ScraperConfig)}


def load_scraper_config(path: Path) -> ScraperConfig:
    """Load the YAML configuration describing where and how to scrape.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file. Every key is optional
        and mirrors a :class:`ScraperConfig` field.

    Returns
    -------
    ScraperConfig
        Defaults overlaid with the values present in the file. A relative
        ``generated_dir`` is resolved against the file's directory.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    ScraperConfigError
        If the top level is not a mapping, a key is unknown, or a value has
        the wrong type.

    Examples
    --------
    >>> from pathlib import Path
    >>> from es_scraper.config import load_scraper_config
    >>> config = load_scraper_config(Path("es-scraper.yaml"))  # doctest: +SKIP
    >>> config.catalog_path  # doctest: +SKIP
    PosixPath('generated/data.json')
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise ScraperConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    unknown = sorted(set(raw) - set(_FIELDS))
    if unknown:
        msg = f"Unknown configuration keys: {', '.join(unknown)}"
        raise ScraperConfigError(msg)

    values: dict[str, typ.Any] = {}
    for key, value in raw.items():
        match key, value:
            case "generated_dir", str():
                values[key] = path.parent / Path(value)
            case "indent", int() if not isinstance(value, bool) and value >= 0:
                values[key] = value
            case "indent", _:
                msg = f"'indent' must be a non-negative integer, got {value!r}"
                raise ScraperConfigError(msg)
            case _, str() if value.strip():
                values[key] = value.strip()
            case _:
                msg = f"'{key}' must be a non-empty string, got {value!r}"
                raise ScraperConfigError(msg)
    return ScraperConfig(**values)


__all__ = ["load_scraper_config"]

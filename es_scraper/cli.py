"""Cyclopts CLI entrypoint for extracting the ECMAScript global binding catalog.

The ``es-scraper`` console script defined here reads the specification
document from the generated-assets directory, writes the table-of-contents
debugging artifact and the catalog next to it, and can print a single catalog
entry for inspection.

Examples
--------
Scrape with the default configuration:

>>> from es_scraper.cli import main
>>> main()  # doctest: +SKIP

Scrape from a custom directory, then inspect one binding:

>>> from es_scraper.cli import app
>>> app(["scrape", "--generated-dir", "build"])  # doctest: +SKIP
>>> app(["show", "Math", "--generated-dir", "build"])  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import ScraperConfig, load_scraper_config
from .extractor import CatalogPipeline, find_binding, load_catalog
from .extractor.codec import encode_pretty

app = App(
    name="es-scraper",
    config=cyclopts.config.Env("ES_SCRAPER_", command=False),  # type: ignore[unknown-argument]
)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _resolve_config(config: Path | None, generated_dir: Path | None) -> ScraperConfig:
    """Load ``config`` when given and apply the ``generated_dir`` override."""
    resolved = load_scraper_config(config) if config else ScraperConfig()
    if generated_dir is not None:
        resolved = dc.replace(resolved, generated_dir=generated_dir)
    return resolved


@app.command(help="Extract the global binding catalog from the specification.")
def scrape(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to scraper config (YAML)")
    ] = None,
    generated_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the generated-assets directory"),
    ] = None,
    verbose: typ.Annotated[
        bool, Parameter(help="Log pipeline progress")
    ] = False,
) -> None:
    """Run the extraction pipeline and report the written artifacts.

    Parameters
    ----------
    config : Path or None, optional
        YAML configuration overlaying the defaults; when ``None`` the defaults
        are used as-is.
    generated_dir : Path or None, optional
        Directory containing ``spec.html`` and receiving the artifacts; takes
        precedence over the configuration file.
    verbose : bool, optional
        Emit INFO-level progress logging.

    Raises
    ------
    FileNotFoundError
        If the configuration file or specification document is missing.
    SpecIntegrityError
        If the document's structure does not match expectations.
    """
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    pipeline = CatalogPipeline(_resolve_config(config, generated_dir))
    for path in pipeline.run():
        print(f"wrote {_format_path(path)}")


@app.command(help="Print one catalog entry by name.")
def show(
    name: str,
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to scraper config (YAML)")
    ] = None,
    generated_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the generated-assets directory"),
    ] = None,
) -> None:
    """Print the descriptor called ``name`` from the written catalog.

    Raises
    ------
    KeyError
        If no descriptor in the catalog is called ``name``.
    """
    resolved = _resolve_config(config, generated_dir)
    binding = find_binding(load_catalog(resolved.catalog_path), name)
    if binding is None:
        msg = f"No catalog entry named '{name}'"
        raise KeyError(msg)
    print(encode_pretty(binding, indent=resolved.indent).decode("utf-8"), end="")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``es-scraper`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()

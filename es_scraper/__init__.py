"""Extract the ECMAScript global binding catalog from the language specification.

This package exposes the CLI entry points used by ``es-scraper`` to turn the
specification document into ``toc.json`` and ``data.json``.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from es_scraper import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]

"""Shared fixtures for the es_scraper test suite."""

from __future__ import annotations

import collections.abc as cabc
import textwrap
from pathlib import Path

import pytest

from es_scraper._constants import NATIVE_ERROR_ANCHOR, TYPED_ARRAY_ANCHOR
from es_scraper.extractor import SpecDocument, build_catalog

FIXTURES = Path(__file__).resolve().parent / "fixtures"
MINI_SPEC = FIXTURES / "mini_spec.html"


@pytest.fixture
def make_document() -> cabc.Callable[[str], SpecDocument]:
    """Return a factory wrapping an HTML fragment in a page and parsing it."""

    def _make(body: str) -> SpecDocument:
        html = f"<html><body>{textwrap.dedent(body)}</body></html>"
        return SpecDocument.from_html(html)

    return _make


@pytest.fixture(scope="session")
def mini_spec_html() -> str:
    """Return the fixture specification covering every reclassified clause."""
    return MINI_SPEC.read_text(encoding="utf-8")


@pytest.fixture
def mini_spec_document(mini_spec_html: str) -> SpecDocument:
    return SpecDocument.from_html(mini_spec_html)


@pytest.fixture
def mini_catalog(mini_spec_document: SpecDocument) -> list:
    """Return the catalog extracted from the fixture specification."""
    return build_catalog(
        mini_spec_document,
        typed_array_anchor=TYPED_ARRAY_ANCHOR,
        native_error_anchor=NATIVE_ERROR_ANCHOR,
    )


@pytest.fixture
def generated_dir(tmp_path: Path, mini_spec_html: str) -> Path:
    """Return a generated-assets directory holding the fixture as spec.html."""
    directory = tmp_path / "generated"
    directory.mkdir()
    (directory / "spec.html").write_text(mini_spec_html, encoding="utf-8")
    return directory

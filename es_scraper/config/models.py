"""Typed dataclasses describing es_scraper configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from es_scraper import _constants
from es_scraper.extractor.document import DEFAULT_PARSER


class ScraperConfigError(ValueError):
    """Raised when the scraper configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class ScraperConfig:
    """Locations and document anchors used by a catalog extraction run.

    Attributes
    ----------
    generated_dir : Path
        Directory holding the input document and receiving both artifacts.
    spec_filename : str
        Name of the specification document inside ``generated_dir``.
    toc_filename : str
        Name of the table-of-contents debugging artifact.
    catalog_filename : str
        Name of the catalog artifact read by documentation tooling.
    html_parser : str
        BeautifulSoup tree builder used to parse the document.
    typed_array_anchor : str
        Id of the table listing the concrete typed array constructors.
    native_error_anchor : str
        Id of the clause listing the native error types.
    indent : int
        Indentation of the pretty-printed JSON artifacts.
    """

    generated_dir: Path = Path(_constants.GENERATED_DIR)
    spec_filename: str = _constants.SPEC_FILENAME
    toc_filename: str = _constants.TOC_FILENAME
    catalog_filename: str = _constants.CATALOG_FILENAME
    html_parser: str = DEFAULT_PARSER
    typed_array_anchor: str = _constants.TYPED_ARRAY_ANCHOR
    native_error_anchor: str = _constants.NATIVE_ERROR_ANCHOR
    indent: int = 2

    @property
    def spec_path(self) -> Path:
        return self.generated_dir / self.spec_filename

    @property
    def toc_path(self) -> Path:
        return self.generated_dir / self.toc_filename

    @property
    def catalog_path(self) -> Path:
        return self.generated_dir / self.catalog_filename


__all__ = ["ScraperConfig", "ScraperConfigError"]

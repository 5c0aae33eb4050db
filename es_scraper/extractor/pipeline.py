"""High-level orchestration for catalog extraction.

This module wires the extraction stages together: it loads the specification
document, builds and persists the full table of contents, restructures the
built-in objects range, assembles one descriptor per object, expands the
typed array and native error templates, propagates global exposure, and
finally writes the catalog consumed by downstream documentation tooling.

Any structural surprise raises :class:`~es_scraper.errors.SpecIntegrityError`
before the catalog is written, so a stale or partial catalog is never
produced.

Example
-------
>>> from pathlib import Path
>>> from es_scraper.config import ScraperConfig
>>> from es_scraper.extractor import CatalogPipeline
>>> pipeline = CatalogPipeline(ScraperConfig(generated_dir=Path("generated")))
>>> pipeline.run()  # doctest: +SKIP
[PosixPath('generated/toc.json'), PosixPath('generated/data.json')]
"""

from __future__ import annotations

import collections
import logging
import typing as typ

from es_scraper.errors import ensure

from .assembler import BindingAssembler
from .attributes import AttributeExtractor
from .classifier import MemberClassifier
from .codec import write_json
from .document import SpecDocument
from .expander import TemplateExpander
from .global_object import GlobalPropagator
from .reclassify import object_groups
from .toc import build_toc

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    import collections.abc as cabc
    from pathlib import Path

    from es_scraper.config import ScraperConfig

    from .models import Binding, Section

logger = logging.getLogger(__name__)


def _ensure_unique_names(catalog: cabc.Sequence[Binding]) -> None:
    counts = collections.Counter(binding.name for binding in catalog)
    duplicates = sorted(name for name, count in counts.items() if count > 1)
    ensure(not duplicates, f"Duplicate catalog entries: {', '.join(duplicates)}")


class CatalogExtractor:
    """Run the pure extraction stages against one loaded document.

    Parameters
    ----------
    document : SpecDocument
        Parsed specification document.
    typed_array_anchor : str
        Id of the table listing the concrete typed array constructors.
    native_error_anchor : str
        Id of the clause listing the native error types.
    """

    def __init__(
        self,
        document: SpecDocument,
        *,
        typed_array_anchor: str,
        native_error_anchor: str,
    ) -> None:
        self.document = document
        self.attributes = AttributeExtractor(document)
        self.assembler = BindingAssembler(MemberClassifier(self.attributes))
        self.typed_array_anchor = typed_array_anchor
        self.native_error_anchor = native_error_anchor

    def toc(self) -> list[Section]:
        return build_toc(self.document)

    def catalog(self, toc: cabc.Sequence[Section]) -> list[Binding]:
        """Return the ordered, fully propagated catalog for ``toc``."""
        groups = object_groups(toc)
        logger.info("Classifying %d object groups", len(groups))
        bindings: list[Binding] = []
        for group in groups:
            logger.debug("Assembling %s", group.title)
            bindings.append(self.assembler.assemble(group))
        expander = TemplateExpander(
            typed_arrays=self.document.reference_names(self.typed_array_anchor),
            native_errors=self.document.reference_names(self.native_error_anchor),
        )
        catalog = GlobalPropagator(self.attributes).propagate(
            expander.expand(bindings), toc
        )
        _ensure_unique_names(catalog)
        return catalog


class CatalogPipeline:
    """Read the configured document and write the TOC and catalog artifacts."""

    def __init__(self, config: ScraperConfig) -> None:
        self.config = config

    def run(self) -> list[Path]:
        """Execute every stage and return the written artifact paths.

        Returns
        -------
        list[Path]
            The TOC path followed by the catalog path.

        Raises
        ------
        FileNotFoundError
            If the specification document is missing.
        SpecIntegrityError
            If the document does not match the expected structure. The TOC
            artifact may already have been written; the catalog is not.
        """
        config = self.config
        logger.info("Loading %s", config.spec_path)
        document = SpecDocument.load(config.spec_path, parser=config.html_parser)
        extractor = CatalogExtractor(
            document,
            typed_array_anchor=config.typed_array_anchor,
            native_error_anchor=config.native_error_anchor,
        )
        toc = extractor.toc()
        written = [write_json(config.toc_path, toc, indent=config.indent)]
        catalog = extractor.catalog(toc)
        logger.info("Extracted %d global bindings", len(catalog))
        written.append(write_json(config.catalog_path, catalog, indent=config.indent))
        return written


def build_catalog(
    document: SpecDocument,
    *,
    typed_array_anchor: str,
    native_error_anchor: str,
) -> list[Binding]:
    """Return the catalog for ``document`` without touching the filesystem."""
    extractor = CatalogExtractor(
        document,
        typed_array_anchor=typed_array_anchor,
        native_error_anchor=native_error_anchor,
    )
    return extractor.catalog(extractor.toc())


__all__ = ["CatalogExtractor", "CatalogPipeline", "build_catalog"]

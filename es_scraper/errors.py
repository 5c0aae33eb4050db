"""Error taxonomy for the ECMAScript catalog scraper.

Every failure raised while extracting the catalog is an integrity violation:
the specification document no longer matches a structural expectation the
scraper relies on. These are never recovered from; the run aborts and no
catalog is written.
"""

from __future__ import annotations


class SpecIntegrityError(RuntimeError):
    """Raised when the specification document violates a structural expectation."""


def ensure(condition: object, message: str) -> None:
    """Raise :class:`SpecIntegrityError` with ``message`` unless ``condition`` holds."""
    if not condition:
        raise SpecIntegrityError(message)


__all__ = ["SpecIntegrityError", "ensure"]

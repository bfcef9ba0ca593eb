"""
Parsing errors raised while scraping submission listing pages.

Every failure is a data-validation failure: the page did not have the
shape the scraper expects. Callers decide whether to refetch, treat the
page as the end of a listing, or alert.
"""

from typing import Any, Dict, Optional


class ScrapeError(Exception):
    """Base class for all page-shape failures."""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}

    @property
    def field(self) -> Optional[str]:
        """Name of the field being extracted when the failure happened."""
        return self.context.get('field')

    @property
    def text(self) -> Optional[str]:
        """Offending text, when there was any."""
        return self.context.get('text')

    @property
    def row(self) -> Optional[int]:
        """Zero-based index of the table row that failed."""
        return self.context.get('row')

    def __str__(self) -> str:
        message = super().__str__()
        if not self.context:
            return message
        details = ", ".join(f"{key}={value!r}" for key, value in self.context.items())
        return f"{message} ({details})"


class StructuralMismatchError(ScrapeError):
    """Raised when an expected element (table, cell, link, attribute) is absent."""


class FormatMismatchError(ScrapeError):
    """Raised when a field's text does not parse into its target type."""


class PatternMismatchError(ScrapeError):
    """Raised when no link on the page or row matches a required pattern."""

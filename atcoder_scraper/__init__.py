"""
Scraper for AtCoder contest submission listing pages.
"""

from .errors import (
    FormatMismatchError,
    PatternMismatchError,
    ScrapeError,
    StructuralMismatchError,
)
from .models import Submission
from .submission import scrape_submission_page_count, scrape_submissions

__all__ = [
    'Submission',
    'scrape_submissions',
    'scrape_submission_page_count',
    'ScrapeError',
    'StructuralMismatchError',
    'FormatMismatchError',
    'PatternMismatchError',
]

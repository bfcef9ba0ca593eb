"""
Submission listing scraper.

Turns the HTML of a contest's submissions page into Submission records and
finds the highest page index linked from a listing page. Both entry points
are pure: HTML text in, typed data out, no network access.

Column order of the results table is a contract with the site; there is no
header lookup. Each row reads, left to right:

    time | problem | user | language | point | length | result | [exec time]

Later columns (memory, detail link) are not read by position. The submission
id comes from whichever link in the row points at a submission detail page.
"""

import logging
import re
from datetime import datetime
from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from .config import DEFAULT_HTML_PARSER
from .errors import (
    FormatMismatchError,
    PatternMismatchError,
    ScrapeError,
    StructuralMismatchError,
)
from .models import Submission
from .utils import last_path_segment, page_from_href

logger = logging.getLogger(__name__)

# Pagination links end with e.g. "?page=2208"
PAGE_LINK_PATTERN = re.compile(r'page=\d+\Z')
# Submission detail links end with e.g. "/contests/abc107/submissions/3162263"
SUBMISSION_LINK_PATTERN = re.compile(r'submissions/\d+\Z')

TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S%z'
LENGTH_UNIT = 'Byte'
EXECUTION_TIME_UNIT = 'ms'

# ids, lengths and execution times are unsigned 64-bit on the site
U64_MAX = 2**64 - 1

COLUMNS = (
    'time',
    'problem',
    'user',
    'language',
    'point',
    'length',
    'result',
    'execution_time',
)


def scrape_submission_page_count(html: str, *, features: str = DEFAULT_HTML_PARSER) -> int:
    """
    Find the highest page index linked from a submissions listing.

    A listing with a single page may carry no pagination links at all; that
    case raises like any other page without them; the caller decides what
    it means.

    Args:
        html: Decoded page HTML
        features: BeautifulSoup tree builder

    Returns:
        Maximum page index among pagination links

    Raises:
        PatternMismatchError: No link target ends with page=<digits>
    """
    soup = BeautifulSoup(html, features)

    pages = []
    for link in soup.find_all('a', href=True):
        href = link['href']
        if not PAGE_LINK_PATTERN.search(href):
            continue
        page = page_from_href(href)
        if page is not None:
            pages.append(page)

    if not pages:
        raise PatternMismatchError(
            "no pagination link found",
            context={'pattern': PAGE_LINK_PATTERN.pattern},
        )

    logger.debug("Found %d pagination links, max page %d", len(pages), max(pages))
    return max(pages)


def scrape_submissions(
    html: str,
    contest_id: str,
    *,
    features: str = DEFAULT_HTML_PARSER
) -> List[Submission]:
    """
    Parse every row of a submissions listing page.

    Rows are returned in document order. The first row that cannot be parsed
    aborts the whole call; no partial list is ever returned.

    Args:
        html: Decoded page HTML
        contest_id: Contest the page belongs to, copied onto every record
        features: BeautifulSoup tree builder

    Returns:
        List of Submission records

    Raises:
        ScrapeError: The page or one of its rows does not have the expected shape
    """
    soup = BeautifulSoup(html, features)

    tbody = soup.find('tbody')
    if tbody is None:
        raise StructuralMismatchError("no results table", context={'element': 'tbody'})

    submissions = []
    for index, tr in enumerate(tbody.find_all('tr')):
        try:
            submissions.append(_scrape_row(tr, contest_id))
        except ScrapeError as e:
            e.context.setdefault('row', index)
            raise

    logger.debug("Scraped %d submissions for %s", len(submissions), contest_id)
    return submissions


def _scrape_row(tr: Tag, contest_id: str) -> Submission:
    cells = tr.find_all('td')

    epoch_second = _parse_epoch_second(_required_text(cells, 'time'))
    problem_id = _link_id(cells, 'problem')
    user_id = _link_id(cells, 'user')
    language = _optional_text(cells, 'language') or ''
    point = _parse_point(_required_text(cells, 'point'))
    length = _parse_unsigned(
        _required_text(cells, 'length').replace(LENGTH_UNIT, '').strip(),
        'length',
    )
    result = _required_text(cells, 'result')
    execution_time = _parse_execution_time(_optional_text(cells, 'execution_time'))

    return Submission(
        id=_submission_id(tr),
        epoch_second=epoch_second,
        problem_id=problem_id,
        contest_id=contest_id,
        user_id=user_id,
        language=language,
        point=point,
        length=length,
        result=result,
        execution_time=execution_time,
    )


def _cell(cells: List[Tag], column: str) -> Optional[Tag]:
    position = COLUMNS.index(column)
    if position >= len(cells):
        return None
    return cells[position]


def _first_text(cell: Tag) -> Optional[str]:
    # First non-blank text node in document order
    return next(cell.stripped_strings, None)


def _optional_text(cells: List[Tag], column: str) -> Optional[str]:
    cell = _cell(cells, column)
    if cell is None:
        return None
    return _first_text(cell)


def _required_text(cells: List[Tag], column: str) -> str:
    cell = _cell(cells, column)
    if cell is None:
        raise StructuralMismatchError("missing cell", context={'field': column})
    text = _first_text(cell)
    if text is None:
        raise StructuralMismatchError("missing cell text", context={'field': column})
    return text


def _link_id(cells: List[Tag], column: str) -> str:
    """Trailing path segment of the first link inside a cell."""
    cell = _cell(cells, column)
    if cell is None:
        raise StructuralMismatchError("missing cell", context={'field': column})
    link = cell.find('a')
    if link is None:
        raise StructuralMismatchError("missing link", context={'field': column})
    href = link.get('href')
    if href is None:
        raise StructuralMismatchError("missing link target", context={'field': column})
    return last_path_segment(href)


def _submission_id(tr: Tag) -> int:
    for link in tr.find_all('a', href=True):
        href = link['href']
        if SUBMISSION_LINK_PATTERN.search(href):
            return _parse_unsigned(last_path_segment(href).strip(), 'id')
    raise PatternMismatchError(
        "no submission detail link found",
        context={'field': 'id', 'pattern': SUBMISSION_LINK_PATTERN.pattern},
    )


def _parse_epoch_second(text: str) -> int:
    try:
        submitted_at = datetime.strptime(text, TIMESTAMP_FORMAT)
    except ValueError as e:
        raise FormatMismatchError(
            "malformed timestamp", context={'field': 'time', 'text': text}
        ) from e
    epoch_second = int(submitted_at.timestamp())
    if epoch_second < 0:
        raise FormatMismatchError(
            "timestamp before the epoch", context={'field': 'time', 'text': text}
        )
    return epoch_second


def _parse_point(text: str) -> float:
    # float() would also take digit separators like "1_000"
    if '_' in text:
        raise FormatMismatchError(
            "malformed point", context={'field': 'point', 'text': text}
        )
    try:
        return float(text)
    except ValueError as e:
        raise FormatMismatchError(
            "malformed point", context={'field': 'point', 'text': text}
        ) from e


def _is_u64(text: str) -> bool:
    return text.isascii() and text.isdigit() and int(text) <= U64_MAX


def _parse_unsigned(text: str, field: str) -> int:
    if not _is_u64(text):
        raise FormatMismatchError(
            f"malformed {field}", context={'field': field, 'text': text}
        )
    return int(text)


def _parse_execution_time(text: Optional[str]) -> Optional[int]:
    """Best effort: anything unparseable becomes None."""
    if text is None:
        return None
    value = text.replace(EXECUTION_TIME_UNIT, '').strip()
    if not _is_u64(value):
        logger.debug("Ignoring execution time %r", text)
        return None
    return int(value)

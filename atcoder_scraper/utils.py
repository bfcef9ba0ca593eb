"""
Shared utility functions for the scraper.
"""

from typing import Optional

from .config import DEFAULT_BASE_URL


def submissions_url(contest_id: str, page: int = 1, base_url: str = DEFAULT_BASE_URL) -> str:
    """
    Build the submissions listing URL for a contest page.

    Args:
        contest_id: Contest identifier (e.g., abc107)
        page: 1-based listing page
        base_url: Site root, without trailing slash

    Returns:
        Listing URL (e.g., https://atcoder.jp/contests/abc107/submissions?page=2)
    """
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    return f"{base_url.rstrip('/')}/contests/{contest_id}/submissions?page={page}"


def last_path_segment(href: str) -> str:
    """
    Return the text after the last '/' of a link target.

    Args:
        href: Link target (e.g., /contests/abc107/tasks/abc107_a)

    Returns:
        Trailing segment (e.g., abc107_a); the whole string if it has no '/'
    """
    return href.rsplit('/', 1)[-1]


def page_from_href(href: str) -> Optional[int]:
    """
    Extract the page index encoded after the last '=' of a link target.

    Args:
        href: Link target (e.g., ?page=2208)

    Returns:
        Page index, or None if the trailing text is not a number
    """
    value = href.rsplit('=', 1)[-1]
    if not (value.isascii() and value.isdigit()):
        return None
    return int(value)

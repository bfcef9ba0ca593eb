from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"

ROW_DEFAULTS = {
    "time": "2018-09-08 22:59:58+0900",
    "problem": '<a href="/contests/abc107/tasks/abc107_d">D - Median of Medians</a>',
    "user": '<a href="/users/tourist">tourist</a>',
    "language": '<a href="/contests/abc107/submissions?f.Language=3003">C++14 (GCC 5.4.1)</a>',
    "point": "700",
    "length": "1846 Byte",
    "result": "<span class='label label-success'>AC</span>",
    "execution_time": "38 ms",
    "memory": "4352 KB",
    "detail": "<a href='/contests/abc107/submissions/3163014'>Detail</a>",
}


def _build_row(**cells):
    values = dict(ROW_DEFAULTS, **cells)
    tds = "".join(
        f"<td>{content}</td>" for content in values.values() if content is not None
    )
    return f"<tr>{tds}</tr>"


def _build_page(*rows):
    return (
        "<html><body><table><thead><tr><th>Submission Time</th></tr></thead>"
        f"<tbody>{''.join(rows)}</tbody></table></body></html>"
    )


@pytest.fixture
def build_row():
    """Render one results row; pass None to drop a cell, strings replace its content."""
    return _build_row


@pytest.fixture
def build_page():
    """Wrap rendered rows in a listing page."""
    return _build_page


@pytest.fixture(scope="session")
def listing_html():
    return (FIXTURES / "abc107_submissions.html").read_text(encoding="utf-8")


@pytest.fixture
def listing_file():
    return FIXTURES / "abc107_submissions.html"

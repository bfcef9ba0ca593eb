"""
Command line entry point for the submissions scraper.

Works on HTML files that were already downloaded; fetching pages is left to
whatever drives the scraper.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from .config import ScraperConfig
from .errors import ScrapeError
from .submission import scrape_submission_page_count, scrape_submissions
from .utils import submissions_url

logger = logging.getLogger(__name__)


def _read_html(path: str) -> str:
    return Path(path).read_text(encoding='utf-8')


def run_submissions(args, config: ScraperConfig) -> int:
    """Print the submissions found in a saved listing page as JSON."""
    submissions = scrape_submissions(
        _read_html(args.file),
        args.contest,
        features=config.html_parser,
    )
    logger.info("Parsed %d submissions from %s", len(submissions), args.file)
    print(json.dumps([s.to_dict() for s in submissions], indent=args.indent, ensure_ascii=False))
    return 0


def run_pages(args, config: ScraperConfig) -> int:
    """Print the highest page index linked from a saved listing page."""
    print(scrape_submission_page_count(_read_html(args.file), features=config.html_parser))
    return 0


def run_url(args, config: ScraperConfig) -> int:
    """Print the listing URL for a contest page."""
    print(submissions_url(args.contest, args.page, base_url=config.base_url))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='atcoder-scraper',
        description='AtCoder submissions listing scraper',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Parse a saved listing page
  atcoder-scraper submissions abc107_page1.html --contest abc107

  # Highest page index linked from a listing page
  atcoder-scraper pages abc107_page1.html

  # Listing URL for page 3
  atcoder-scraper url abc107 --page 3
"""
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        help='Logging level (default: ATCODER_LOG_LEVEL or INFO)'
    )

    commands = parser.add_subparsers(dest='command', required=True)

    submissions = commands.add_parser('submissions', help='Parse submissions from a saved page')
    submissions.add_argument('file', help='Path to a saved listing page')
    submissions.add_argument('--contest', required=True, help='Contest id the page belongs to')
    submissions.add_argument(
        '--indent',
        type=int,
        default=None,
        help='Indent JSON output by this many spaces'
    )
    submissions.set_defaults(handler=run_submissions)

    pages = commands.add_parser('pages', help='Print the highest linked page index')
    pages.add_argument('file', help='Path to a saved listing page')
    pages.set_defaults(handler=run_pages)

    url = commands.add_parser('url', help='Print the listing URL for a contest page')
    url.add_argument('contest', help='Contest id')
    url.add_argument('--page', type=int, default=1, help='Page index (default: 1)')
    url.set_defaults(handler=run_url)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))
    config = ScraperConfig.from_env()

    args = build_parser().parse_args(argv)
    if args.log_level:
        config.log_level = args.log_level.upper()

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    try:
        return args.handler(args, config)
    except ScrapeError as e:
        logger.error("Page could not be parsed: %s", e)
        return 1
    except (OSError, ValueError) as e:
        logger.error("%s", e)
        return 1


if __name__ == '__main__':
    sys.exit(main())

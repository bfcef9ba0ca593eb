"""
Configuration dataclasses for the submissions scraper.
"""

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://atcoder.jp"
DEFAULT_HTML_PARSER = "html.parser"


@dataclass
class ScraperConfig:
    """Main configuration for the scraper and its command line."""
    # Listing URLs
    base_url: str = DEFAULT_BASE_URL

    # BeautifulSoup tree builder ("html.parser", "lxml", "html5lib")
    html_parser: str = DEFAULT_HTML_PARSER

    # Logging
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ScraperConfig":
        """
        Build configuration from environment variables.

        Reads ATCODER_BASE_URL, ATCODER_HTML_PARSER and ATCODER_LOG_LEVEL,
        falling back to the defaults for anything unset or empty.

        Returns:
            ScraperConfig instance
        """
        return cls(
            base_url=os.getenv("ATCODER_BASE_URL") or DEFAULT_BASE_URL,
            html_parser=os.getenv("ATCODER_HTML_PARSER") or DEFAULT_HTML_PARSER,
            log_level=(os.getenv("ATCODER_LOG_LEVEL") or "INFO").upper(),
        )

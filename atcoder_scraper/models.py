"""
Data models for scraped submission listings.
"""

from dataclasses import asdict, dataclass
from typing import Optional


@dataclass(frozen=True)
class Submission:
    """One row of a contest's submissions table."""
    id: int
    epoch_second: int
    problem_id: str
    contest_id: str
    user_id: str
    language: str
    point: float
    length: int
    result: str
    execution_time: Optional[int] = None

    def to_dict(self) -> dict:
        """Plain dict in field order, ready for JSON output."""
        return asdict(self)

"""Data models for vote classification."""

from dataclasses import dataclass
from enum import Enum


class Category(str, Enum):
    """Confidence-aware label for a topic's vote tally.

    - YES: The topic is present
    - NO: The topic is absent
    - MIXED: Votes are evenly split
    - UNKNOWN: Too few votes to say
    """

    YES = "yes"
    NO = "no"
    MIXED = "mixed"
    UNKNOWN = "unknown"


# Base ordering rank per category; lower sorts first
CATEGORY_BASE_RANK: dict[Category, int] = {
    Category.YES: 0,
    Category.NO: 1,
    Category.MIXED: 2,
    Category.UNKNOWN: 2,
}


@dataclass(frozen=True)
class WilsonInterval:
    """Wilson score interval for the true yes-proportion.

    Attributes:
        lower: Lower bound, clamped at 0.
        upper: Upper bound, clamped at 1.
    """

    lower: float
    upper: float

    def straddles(self, point: float) -> bool:
        """Check whether the interval contains a point."""
        return self.lower <= point <= self.upper

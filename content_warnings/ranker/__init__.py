"""Ranking of classified warnings for presentation."""

from content_warnings.ranker.models import RankedWarnings
from content_warnings.ranker.ranker import WarningRanker, rank_warnings_pure


__all__ = [
    "RankedWarnings",
    "WarningRanker",
    "rank_warnings_pure",
]

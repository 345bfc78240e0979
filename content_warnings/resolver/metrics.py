"""Metrics collection for identity resolution."""

from dataclasses import dataclass, field
from typing import ClassVar

from content_warnings.resolver.models import ResolutionTier


@dataclass
class ResolverMetrics:
    """Metrics for resolver operations.

    Attributes:
        resolutions_total: Number of resolve calls.
        matched_by_tier: Matches per winning tier.
        not_found_total: Resolutions with no match.
        searches_total: Catalog searches issued.
        search_failures_total: Searches that returned no response.
    """

    resolutions_total: int = 0
    matched_by_tier: dict[str, int] = field(default_factory=dict)
    not_found_total: int = 0
    searches_total: int = 0
    search_failures_total: int = 0

    _instance: ClassVar["ResolverMetrics | None"] = None

    @classmethod
    def get_instance(cls) -> "ResolverMetrics":
        """Get singleton metrics instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset metrics (primarily for testing)."""
        cls._instance = None

    def record_search(self, succeeded: bool) -> None:
        """Record an issued catalog search.

        Args:
            succeeded: Whether a response was received.
        """
        self.searches_total += 1
        if not succeeded:
            self.search_failures_total += 1

    def record_resolution(self, tier: ResolutionTier | None) -> None:
        """Record the outcome of a resolution.

        Args:
            tier: Winning tier, or None when not found.
        """
        self.resolutions_total += 1
        if tier is None:
            self.not_found_total += 1
        else:
            self.matched_by_tier[tier.value] = (
                self.matched_by_tier.get(tier.value, 0) + 1
            )

    def to_dict(self) -> dict[str, int | dict[str, int]]:
        """Convert metrics to dictionary."""
        return {
            "resolutions_total": self.resolutions_total,
            "matched_by_tier": dict(self.matched_by_tier),
            "not_found_total": self.not_found_total,
            "searches_total": self.searches_total,
            "search_failures_total": self.search_failures_total,
        }

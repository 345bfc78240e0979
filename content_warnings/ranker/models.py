"""Data models for the warning ranker."""

from dataclasses import dataclass, field

from content_warnings.catalog.models import TopicVote


@dataclass(frozen=True)
class RankedWarnings:
    """Ordered warnings for presentation.

    Attributes:
        pinned: Votes for topics the user pinned, never truncated.
        automatic: Top confidently-present topics, at most ``cap`` long.
    """

    pinned: list[TopicVote] = field(default_factory=list)
    automatic: list[TopicVote] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """Check whether there is nothing to present."""
        return not self.pinned and not self.automatic

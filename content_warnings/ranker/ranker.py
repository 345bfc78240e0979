"""Warning ranker merging pinned topics with automatic ones."""

from collections.abc import Iterable, Set

import structlog

from content_warnings.catalog.models import TopicVote
from content_warnings.classifier.classifier import VoteClassifier
from content_warnings.classifier.models import Category
from content_warnings.config.schemas import ClassifierConfig
from content_warnings.ranker.models import RankedWarnings


logger = structlog.get_logger()


class WarningRanker:
    """Produces the pinned and automatic warning lists.

    - pinned: every vote whose topic is pinned, ordered by
      ``(sort_rank, -yes_sum)``; never truncated.
    - automatic: unpinned votes classified YES, ordered sensitive first
      then by yes votes descending, truncated to ``cap``.

    Sorts are stable, so ties keep input order.
    """

    def __init__(self, classifier: VoteClassifier | None = None) -> None:
        """Initialize the ranker.

        Args:
            classifier: Classifier used for categories and ranks.
        """
        self._classifier = classifier or VoteClassifier()
        self._log = logger.bind(component="ranker")

    @property
    def classifier(self) -> VoteClassifier:
        """Get the classifier."""
        return self._classifier

    def rank(
        self,
        votes: Iterable[TopicVote],
        pinned_ids: Set[int],
        cap: int,
    ) -> RankedWarnings:
        """Rank votes into pinned and automatic lists.

        Args:
            votes: All topic votes for one catalog entry.
            pinned_ids: Topic identifiers the user pinned.
            cap: Maximum number of automatic warnings (at least 1).

        Returns:
            RankedWarnings with both ordered lists.

        Raises:
            ValueError: If cap is less than 1.
        """
        if cap < 1:
            msg = f"cap must be a positive integer, got {cap}"
            raise ValueError(msg)

        pinned: list[TopicVote] = []
        remainder: list[TopicVote] = []
        for vote in votes:
            if vote.topic_id in pinned_ids:
                pinned.append(vote)
            else:
                remainder.append(vote)

        pinned.sort(key=lambda v: (self._classifier.sort_rank(v), -v.yes_sum))

        confident = [
            v for v in remainder if self._classifier.classify(v) == Category.YES
        ]
        confident.sort(key=lambda v: (not v.topic.is_sensitive, -v.yes_sum))
        automatic = confident[:cap]

        self._log.debug(
            "warnings_ranked",
            votes_in=len(pinned) + len(remainder),
            pinned=len(pinned),
            confident=len(confident),
            automatic=len(automatic),
            cap=cap,
        )
        return RankedWarnings(pinned=pinned, automatic=automatic)


def rank_warnings_pure(
    votes: Iterable[TopicVote],
    pinned_ids: Set[int],
    cap: int,
    config: ClassifierConfig | None = None,
) -> RankedWarnings:
    """Pure function API for warning ranking.

    Args:
        votes: All topic votes for one catalog entry.
        pinned_ids: Topic identifiers the user pinned.
        cap: Maximum number of automatic warnings.
        config: Classifier configuration.

    Returns:
        RankedWarnings with both ordered lists.
    """
    return WarningRanker(VoteClassifier(config)).rank(votes, pinned_ids, cap)

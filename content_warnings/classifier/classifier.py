"""Vote classifier turning yes/no tallies into a Category."""

import structlog

from content_warnings.catalog.models import TopicVote
from content_warnings.classifier.models import (
    CATEGORY_BASE_RANK,
    Category,
    WilsonInterval,
)
from content_warnings.classifier.wilson import wilson_interval
from content_warnings.config.schemas import ClassifierConfig


logger = structlog.get_logger()

# Proportion a confident majority must clear
MAJORITY = 0.5


class VoteClassifier:
    """Classifies topic votes with a Wilson score confidence model.

    Classification steps for a vote with ``total = yes + no``:
        1. Fewer than the topic's minimum votes (or none at all): UNKNOWN.
        2. Wilson lower bound above 0.5: YES.
        3. Wilson upper bound below 0.5: NO.
        4. Otherwise compare raw counts: YES, NO, or MIXED on a tie.

    Sensitive topics use the lower ``min_votes_sensitive`` threshold.
    """

    def __init__(self, config: ClassifierConfig | None = None) -> None:
        """Initialize the classifier.

        Args:
            config: Classifier thresholds and confidence level.
        """
        self._config = config or ClassifierConfig()
        self._z = self._config.z_score
        self._log = logger.bind(component="classifier")

    @property
    def config(self) -> ClassifierConfig:
        """Get the classifier configuration."""
        return self._config

    @property
    def z_score(self) -> float:
        """Get the z-value used for the Wilson interval."""
        return self._z

    def min_votes_for(self, vote: TopicVote) -> int:
        """Get the minimum vote count required to classify a topic.

        Args:
            vote: Topic vote record.

        Returns:
            Minimum total votes for this topic.
        """
        if vote.topic.is_sensitive:
            return self._config.min_votes_sensitive
        return self._config.min_votes

    def interval(self, vote: TopicVote) -> WilsonInterval | None:
        """Compute the Wilson interval for a vote, if it has any votes.

        Args:
            vote: Topic vote record.

        Returns:
            WilsonInterval, or None when no votes were cast.
        """
        if vote.total_votes == 0:
            return None
        return wilson_interval(vote.yes_sum, vote.total_votes, self._z)

    def classify(self, vote: TopicVote) -> Category:
        """Classify a topic's votes.

        Args:
            vote: Topic vote record.

        Returns:
            The vote's Category.
        """
        total = vote.total_votes
        minimum = self.min_votes_for(vote)

        if total == 0 or total < minimum:
            self._log.debug(
                "vote_classified",
                topic_id=vote.topic_id,
                topic=vote.topic.name,
                total=total,
                min_votes=minimum,
                category=Category.UNKNOWN.value,
            )
            return Category.UNKNOWN

        bounds = wilson_interval(vote.yes_sum, total, self._z)
        if bounds.lower > MAJORITY:
            category = Category.YES
        elif bounds.upper < MAJORITY:
            category = Category.NO
        elif vote.yes_sum > vote.no_sum:
            category = Category.YES
        elif vote.no_sum > vote.yes_sum:
            category = Category.NO
        else:
            category = Category.MIXED

        self._log.debug(
            "vote_classified",
            topic_id=vote.topic_id,
            topic=vote.topic.name,
            yes=vote.yes_sum,
            no=vote.no_sum,
            lower=round(bounds.lower, 4),
            upper=round(bounds.upper, 4),
            straddles=bounds.straddles(MAJORITY),
            category=category.value,
        )
        return category

    def sort_rank(self, vote: TopicVote) -> int:
        """Get the ordering rank of a vote; lower sorts first.

        Base rank is 0 for YES, 1 for NO, and 2 for MIXED or UNKNOWN.
        Sensitive topics have ``sensitive_rank_bonus`` subtracted.

        Args:
            vote: Topic vote record.

        Returns:
            Integer rank.
        """
        rank = CATEGORY_BASE_RANK[self.classify(vote)]
        if vote.topic.is_sensitive:
            rank -= self._config.sensitive_rank_bonus
        return rank


def classify_vote(vote: TopicVote, config: ClassifierConfig | None = None) -> Category:
    """Pure function API for vote classification.

    Args:
        vote: Topic vote record.
        config: Classifier configuration.

    Returns:
        The vote's Category.
    """
    return VoteClassifier(config).classify(vote)

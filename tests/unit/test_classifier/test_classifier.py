"""Unit tests for the vote classifier."""

import pytest

from content_warnings.catalog.models import TopicVote
from content_warnings.classifier.classifier import VoteClassifier, classify_vote
from content_warnings.classifier.models import Category
from content_warnings.config.schemas import ClassifierConfig
from tests.helpers.factories import make_vote


class TestClassifyThresholds:
    """Tests for minimum-vote thresholds."""

    @pytest.mark.parametrize("sensitive", [False, True])
    def test_zero_votes_unknown(self, sensitive: bool) -> None:
        """Test zero votes are unknown regardless of sensitivity."""
        vote = make_vote(1, 0, 0, sensitive=sensitive)

        assert classify_vote(vote) == Category.UNKNOWN

    def test_zero_votes_unknown_with_zero_threshold(self) -> None:
        """Test zero votes stay unknown when thresholds are zero."""
        config = ClassifierConfig(min_votes=0, min_votes_sensitive=0)

        assert classify_vote(make_vote(1, 0, 0), config) == Category.UNKNOWN
        assert (
            classify_vote(make_vote(1, 0, 0, sensitive=True), config)
            == Category.UNKNOWN
        )

    def test_below_threshold_unknown(self) -> None:
        """Test fewer votes than min_votes are unknown."""
        assert classify_vote(make_vote(1, 2, 0)) == Category.UNKNOWN

    def test_sensitive_uses_lower_threshold(self) -> None:
        """Test a single yes vote surfaces only for a sensitive topic."""
        config = ClassifierConfig(min_votes=3, min_votes_sensitive=1)

        sensitive = classify_vote(make_vote(1, 1, 0, sensitive=True), config)
        normal = classify_vote(make_vote(2, 1, 0), config)

        assert sensitive in (Category.YES, Category.NO)
        assert sensitive == Category.YES
        assert normal == Category.UNKNOWN

    def test_min_votes_for(self) -> None:
        """Test the threshold picked per topic."""
        classifier = VoteClassifier(ClassifierConfig(min_votes=4, min_votes_sensitive=2))

        assert classifier.min_votes_for(make_vote(1, 0, 0)) == 4
        assert classifier.min_votes_for(make_vote(1, 0, 0, sensitive=True)) == 2

    def test_missing_counts_read_as_zero(self) -> None:
        """Test a vote with null counts classifies as unknown."""
        vote = TopicVote.model_validate(
            {"topic": {"id": 1, "name": "x"}, "yesSum": None}
        )

        assert vote.yes_sum == 0
        assert vote.no_sum == 0
        assert classify_vote(vote) == Category.UNKNOWN


class TestClassifyConfidence:
    """Tests for the Wilson and raw-fallback branches."""

    def test_confident_yes(self) -> None:
        """Test 8 yes / 1 no is a confident yes."""
        assert classify_vote(make_vote(5, 8, 1)) == Category.YES

    def test_confident_no(self) -> None:
        """Test 1 yes / 8 no is a confident no."""
        assert classify_vote(make_vote(5, 1, 8)) == Category.NO

    def test_even_split_mixed(self) -> None:
        """Test 3 yes / 3 no falls back to raw comparison and is mixed."""
        classifier = VoteClassifier()
        vote = make_vote(5, 3, 3)

        interval = classifier.interval(vote)
        assert interval is not None
        assert interval.straddles(0.5)
        assert classifier.classify(vote) == Category.MIXED

    def test_raw_fallback_yes(self) -> None:
        """Test a straddling interval with more yes votes is yes."""
        classifier = VoteClassifier()
        vote = make_vote(5, 2, 1)

        interval = classifier.interval(vote)
        assert interval is not None
        assert interval.straddles(0.5)
        assert classifier.classify(vote) == Category.YES

    def test_raw_fallback_no(self) -> None:
        """Test a straddling interval with more no votes is no."""
        assert classify_vote(make_vote(5, 1, 2)) == Category.NO

    def test_interval_none_without_votes(self) -> None:
        """Test no interval is computed for zero votes."""
        assert VoteClassifier().interval(make_vote(5, 0, 0)) is None

    def test_higher_confidence_widens_interval(self) -> None:
        """Test a stricter confidence level gives a wider interval."""
        vote = make_vote(5, 6, 2)
        loose = VoteClassifier(ClassifierConfig(confidence_level=0.80)).interval(vote)
        strict = VoteClassifier(ClassifierConfig(confidence_level=0.99)).interval(vote)

        assert loose is not None
        assert strict is not None
        assert strict.lower < loose.lower
        assert strict.upper > loose.upper

    def test_z_score_from_config(self) -> None:
        """Test the classifier uses the configured confidence level."""
        classifier = VoteClassifier(ClassifierConfig(confidence_level=0.95))

        assert classifier.z_score == pytest.approx(1.96, abs=1e-3)


class TestClassifyMonotonicity:
    """Tests for monotonic behavior over yes votes."""

    @pytest.mark.parametrize("sensitive", [False, True])
    def test_more_yes_never_flips_yes_to_no(self, sensitive: bool) -> None:
        """Test raising yes at a fixed total never turns yes into no."""
        classifier = VoteClassifier()

        for total in range(0, 25):
            seen_yes = False
            for yes in range(total + 1):
                category = classifier.classify(
                    make_vote(1, yes, total - yes, sensitive=sensitive)
                )
                if seen_yes:
                    assert category != Category.NO, (total, yes)
                seen_yes = seen_yes or category == Category.YES


class TestSortRank:
    """Tests for sort ranks."""

    def test_base_ranks(self) -> None:
        """Test base ranks per category for non-sensitive topics."""
        classifier = VoteClassifier()

        assert classifier.sort_rank(make_vote(1, 8, 1)) == 0
        assert classifier.sort_rank(make_vote(1, 1, 8)) == 1
        assert classifier.sort_rank(make_vote(1, 3, 3)) == 2
        assert classifier.sort_rank(make_vote(1, 0, 0)) == 2

    def test_sensitive_bonus(self) -> None:
        """Test sensitive topics rank ahead of equal or lower categories."""
        classifier = VoteClassifier()

        sensitive_yes = classifier.sort_rank(make_vote(1, 8, 1, sensitive=True))
        sensitive_no = classifier.sort_rank(make_vote(1, 1, 8, sensitive=True))
        sensitive_unknown = classifier.sort_rank(make_vote(1, 0, 0, sensitive=True))

        assert sensitive_yes < classifier.sort_rank(make_vote(2, 8, 1))
        assert sensitive_no < classifier.sort_rank(make_vote(2, 1, 8))
        assert sensitive_unknown < classifier.sort_rank(make_vote(2, 0, 0))

    def test_zero_bonus(self) -> None:
        """Test a zero bonus leaves sensitive ranks unchanged."""
        classifier = VoteClassifier(ClassifierConfig(sensitive_rank_bonus=0))

        assert classifier.sort_rank(make_vote(1, 8, 1, sensitive=True)) == 0

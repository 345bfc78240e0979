"""Unit tests for catalog wire models."""

import pytest
from pydantic import ValidationError

from content_warnings.catalog.models import (
    CatalogEntry,
    CatalogQuery,
    ItemKind,
    MediaDetails,
    SearchResponse,
    TopicSummary,
    TopicVote,
)


class TestCatalogEntry:
    """Tests for CatalogEntry decoding."""

    def test_decode_wire_payload(self) -> None:
        """Test a search item decodes from camelCase JSON."""
        entry = CatalogEntry.model_validate(
            {
                "id": 10752,
                "name": "John Wick",
                "tmdbId": 245891,
                "releaseYear": 2014,
                "itemType": {"id": 15, "name": "Movie"},
                "posterImage": "ignored.jpg",
            }
        )

        assert entry.id == 10752
        assert entry.tmdb_id == 245891
        assert entry.release_year == "2014"
        assert entry.item_type_name == "Movie"
        assert entry.kind == ItemKind.SINGLE_WORK

    @pytest.mark.parametrize("raw", [0, "0", "", None])
    def test_empty_tmdb_id_is_absent(self, raw: object) -> None:
        """Test zero and blank TMDB ids are treated as missing."""
        entry = CatalogEntry.model_validate({"id": 1, "tmdbId": raw})

        assert entry.tmdb_id is None

    def test_null_name_is_empty(self) -> None:
        """Test a null name decodes as an empty string."""
        entry = CatalogEntry.model_validate({"id": 9, "name": None})

        assert entry.name == ""

    def test_unknown_kind(self) -> None:
        """Test an unrecognized kind label maps to None."""
        entry = CatalogEntry.model_validate({"id": 1, "itemType": {"name": "Book"}})

        assert entry.item_type_name == "Book"
        assert entry.kind is None

    def test_series_kind(self) -> None:
        """Test the series kind label."""
        entry = CatalogEntry.model_validate({"id": 1, "itemType": {"name": "TV Show"}})

        assert entry.kind == ItemKind.SERIES

    def test_immutable(self) -> None:
        """Test entries are frozen."""
        entry = CatalogEntry(id=1, name="X")

        with pytest.raises(ValidationError):
            entry.name = "Y"  # type: ignore[misc]


class TestItemKind:
    """Tests for ItemKind."""

    def test_expected(self) -> None:
        """Test the expected kind per page type."""
        assert ItemKind.expected(True) == ItemKind.SERIES
        assert ItemKind.expected(False) == ItemKind.SINGLE_WORK


class TestSearchResponse:
    """Tests for SearchResponse decoding."""

    def test_null_items_empty(self) -> None:
        """Test a null item list decodes as empty."""
        assert SearchResponse.model_validate({"items": None}).items == []

    def test_missing_items_empty(self) -> None:
        """Test a missing item list decodes as empty."""
        assert SearchResponse.model_validate({}).items == []

    def test_from_payload_skips_malformed_items(self) -> None:
        """Test a bad item is dropped and its valid siblings are kept."""
        response = SearchResponse.from_payload(
            {
                "items": [
                    {"name": "no id"},
                    {"id": 1, "name": "X", "itemType": {"name": "Movie"}},
                ]
            }
        )

        assert response is not None
        assert [e.id for e in response.items] == [1]

    def test_from_payload_null_items_empty(self) -> None:
        """Test a null item list builds an empty response."""
        response = SearchResponse.from_payload({"items": None})

        assert response is not None
        assert response.items == []

    @pytest.mark.parametrize("payload", [[1, 2], {"items": "X"}, "text"])
    def test_from_payload_wrong_shape(self, payload: object) -> None:
        """Test payloads that are not search results yield None."""
        assert SearchResponse.from_payload(payload) is None


class TestTopicVote:
    """Tests for TopicVote decoding."""

    def test_decode(self) -> None:
        """Test a vote decodes with topic details."""
        vote = TopicVote.model_validate(
            {
                "topic": {
                    "id": 153,
                    "name": "a dog dies",
                    "doesName": "Does the dog die",
                    "isSensitive": True,
                },
                "yesSum": 12,
                "noSum": 3,
                "comment": "Off screen",
            }
        )

        assert vote.topic_id == 153
        assert vote.topic.does_name == "Does the dog die"
        assert vote.topic.is_sensitive is True
        assert vote.total_votes == 15
        assert vote.comment == "Off screen"

    def test_null_sensitivity(self) -> None:
        """Test a null sensitivity flag reads as false."""
        vote = TopicVote.model_validate({"topic": {"id": 1, "isSensitive": None}})

        assert vote.topic.is_sensitive is False
        assert vote.total_votes == 0

    def test_negative_counts_rejected(self) -> None:
        """Test negative vote counts are invalid."""
        with pytest.raises(ValidationError):
            TopicVote.model_validate({"topic": {"id": 1}, "yesSum": -1})


class TestMediaDetails:
    """Tests for MediaDetails.from_payload."""

    def test_from_payload(self) -> None:
        """Test votes are decoded in order."""
        details = MediaDetails.from_payload(
            {
                "item": {"id": 1},
                "topicItemStats": [
                    {"topic": {"id": 5}, "yesSum": 8, "noSum": 1},
                    {"topic": {"id": 6}, "yesSum": 0, "noSum": 4},
                ],
            }
        )

        assert details is not None
        assert [v.topic_id for v in details.topic_votes] == [5, 6]

    def test_invalid_votes_skipped(self) -> None:
        """Test malformed vote entries are skipped."""
        details = MediaDetails.from_payload(
            {
                "topicItemStats": [
                    {"topic": {"id": 5}, "yesSum": 8, "noSum": 1},
                    {"yesSum": 2},
                    "garbage",
                ]
            }
        )

        assert details is not None
        assert [v.topic_id for v in details.topic_votes] == [5]

    @pytest.mark.parametrize(
        "payload",
        [None, [], "text", {"item": {}}, {"topicItemStats": None}],
    )
    def test_missing_vote_list(self, payload: object) -> None:
        """Test payloads without a vote list yield None."""
        assert MediaDetails.from_payload(payload) is None

    def test_empty_vote_list(self) -> None:
        """Test an empty vote list yields empty details."""
        details = MediaDetails.from_payload({"topicItemStats": []})

        assert details is not None
        assert details.topic_votes == []


class TestTopicSummary:
    """Tests for TopicSummary decoding."""

    def test_decode_with_category(self) -> None:
        """Test the category name is flattened."""
        topic = TopicSummary.model_validate(
            {
                "id": 153,
                "name": "a dog dies",
                "TopicCategory": {"id": 1, "name": "Animal"},
                "keywords": "pet puppy",
            }
        )

        assert topic.category_name == "Animal"
        assert topic.keywords == "pet puppy"

    def test_defaults(self) -> None:
        """Test missing category and null keywords."""
        topic = TopicSummary.model_validate(
            {"id": 1, "name": "x", "TopicCategory": None, "keywords": None}
        )

        assert topic.category_name == "Uncategorized"
        assert topic.keywords == ""


class TestCatalogQuery:
    """Tests for CatalogQuery validation."""

    def test_external_id(self) -> None:
        """Test a query by external id."""
        query = CatalogQuery(external_id="tt123")

        assert query.free_text is None

    def test_both_rejected(self) -> None:
        """Test setting both fields is rejected."""
        with pytest.raises(ValidationError, match="Exactly one"):
            CatalogQuery(external_id="tt123", free_text="X")

    def test_neither_rejected(self) -> None:
        """Test setting neither field is rejected."""
        with pytest.raises(ValidationError, match="Exactly one"):
            CatalogQuery()

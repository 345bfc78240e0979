"""Wire models for the DoesTheDogDie catalog API.

Responses are camelCase JSON; models accept both the wire aliases and
the Python field names and ignore keys they do not use.
"""

from enum import Enum
from typing import Annotated, Any

import structlog
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from content_warnings.catalog.constants import CatalogEndpoint
from content_warnings.catalog.metrics import CatalogMetrics


logger = structlog.get_logger()


class ItemKind(str, Enum):
    """Kind label of a catalog entry, as reported by ``itemType.name``.

    - SERIES: A television series
    - SINGLE_WORK: A single film
    """

    SERIES = "TV Show"
    SINGLE_WORK = "Movie"

    @classmethod
    def expected(cls, is_series: bool) -> "ItemKind":
        """Return the kind a page of the given type should match."""
        return cls.SERIES if is_series else cls.SINGLE_WORK


class WireModel(BaseModel):
    """Base for immutable records decoded from API responses."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class CatalogEntry(WireModel):
    """A candidate match returned by a catalog search.

    Attributes:
        id: Catalog identifier.
        name: Display name.
        tmdb_id: TMDB identifier, if the catalog knows it.
        release_year: Release year, normalized to a string.
        item_type_name: Raw kind label (``itemType.name``).
    """

    id: int
    name: str = ""
    tmdb_id: int | None = Field(default=None, alias="tmdbId")
    release_year: str | None = Field(default=None, alias="releaseYear")
    item_type_name: str | None = Field(default=None, alias="itemTypeName")

    @model_validator(mode="before")
    @classmethod
    def flatten_item_type(cls, data: Any) -> Any:
        """Lift ``itemType.name`` into ``itemTypeName``."""
        if isinstance(data, dict) and "itemType" in data:
            data = dict(data)
            item_type = data.pop("itemType")
            if isinstance(item_type, dict):
                data.setdefault("itemTypeName", item_type.get("name"))
        return data

    @field_validator("name", mode="before")
    @classmethod
    def null_name_is_empty(cls, v: Any) -> Any:
        """Treat a null name as an empty string."""
        return "" if v is None else v

    @field_validator("tmdb_id", mode="before")
    @classmethod
    def zero_tmdb_id_is_absent(cls, v: Any) -> Any:
        """Treat 0 and empty strings as a missing TMDB id."""
        if v in (0, "0", ""):
            return None
        return v

    @field_validator("release_year", mode="before")
    @classmethod
    def year_as_string(cls, v: Any) -> Any:
        """Coerce numeric years to strings."""
        if v is None:
            return None
        return str(v)

    @property
    def kind(self) -> ItemKind | None:
        """Get the kind as an ItemKind, or None for other labels.

        A typed view for callers outside the matcher. Matching compares the raw
        ``item_type_name`` so entries with unknown labels never match.
        """
        try:
            return ItemKind(self.item_type_name)
        except ValueError:
            return None


class SearchResponse(WireModel):
    """Result of a catalog search; ``items`` may be empty."""

    items: list[CatalogEntry] = Field(default_factory=list)

    @field_validator("items", mode="before")
    @classmethod
    def null_items_are_empty(cls, v: Any) -> Any:
        """Treat a null item list as empty."""
        return v if v is not None else []

    @classmethod
    def from_payload(cls, payload: Any) -> "SearchResponse | None":
        """Build a search response, skipping malformed items.

        Args:
            payload: Decoded JSON from the search endpoint.

        Returns:
            SearchResponse, or None if the payload is not a search result.
        """
        if not isinstance(payload, dict):
            return None
        raw_items = payload.get("items")
        if raw_items is None:
            raw_items = []
        if not isinstance(raw_items, list):
            return None

        items: list[CatalogEntry] = []
        for index, raw in enumerate(raw_items):
            try:
                items.append(CatalogEntry.model_validate(raw))
            except ValidationError as e:
                CatalogMetrics.get_instance().record_skipped_record(
                    CatalogEndpoint.SEARCH
                )
                logger.warning(
                    "catalog_search_item_skipped",
                    component="catalog",
                    index=index,
                    error_count=e.error_count(),
                )
        return cls(items=items)


class Topic(WireModel):
    """A warning topic descriptor.

    Attributes:
        id: Topic identifier.
        name: Display name (e.g., "a dog dies").
        does_name: Question-form name (e.g., "Does the dog die").
        is_sensitive: Whether the topic is flagged as highly sensitive.
    """

    id: int
    name: str = ""
    does_name: str | None = Field(default=None, alias="doesName")
    is_sensitive: bool = Field(default=False, alias="isSensitive")

    @field_validator("is_sensitive", mode="before")
    @classmethod
    def null_is_not_sensitive(cls, v: Any) -> Any:
        """Treat a null sensitivity flag as false."""
        return False if v is None else v


class TopicVote(WireModel):
    """Aggregate yes/no votes for one topic against one catalog entry.

    Missing or null counts are read as zero.
    """

    topic: Topic
    yes_sum: Annotated[int, Field(ge=0, alias="yesSum")] = 0
    no_sum: Annotated[int, Field(ge=0, alias="noSum")] = 0
    comment: str | None = None

    @field_validator("yes_sum", "no_sum", mode="before")
    @classmethod
    def null_count_is_zero(cls, v: Any) -> Any:
        """Read a null vote count as zero."""
        return 0 if v is None else v

    @property
    def topic_id(self) -> int:
        """Get the topic identifier."""
        return self.topic.id

    @property
    def total_votes(self) -> int:
        """Get the total number of votes cast."""
        return self.yes_sum + self.no_sum


class MediaDetails(WireModel):
    """Details of a catalog entry, including per-topic vote tallies."""

    topic_votes: list[TopicVote] = Field(default_factory=list, alias="topicItemStats")

    @classmethod
    def from_payload(cls, payload: Any) -> "MediaDetails | None":
        """Build details from a decoded response, skipping malformed votes.

        Args:
            payload: Decoded JSON from the media endpoint.

        Returns:
            MediaDetails, or None if the payload has no vote list.
        """
        if not isinstance(payload, dict):
            return None
        raw_votes = payload.get("topicItemStats")
        if not isinstance(raw_votes, list):
            return None

        votes: list[TopicVote] = []
        for index, raw in enumerate(raw_votes):
            try:
                votes.append(TopicVote.model_validate(raw))
            except ValidationError as e:
                CatalogMetrics.get_instance().record_skipped_record(
                    CatalogEndpoint.MEDIA
                )
                logger.warning(
                    "topic_vote_skipped",
                    component="catalog",
                    index=index,
                    error_count=e.error_count(),
                )
        return cls(topic_votes=votes)


class TopicSummary(WireModel):
    """A selectable topic from the categories endpoint.

    Attributes:
        id: Topic identifier.
        name: Topic name.
        category_name: Name of the topic's category.
        keywords: Free-text search keywords.
    """

    id: int
    name: str
    category_name: str = Field(default="Uncategorized", alias="categoryName")
    keywords: str = ""

    @model_validator(mode="before")
    @classmethod
    def flatten_category(cls, data: Any) -> Any:
        """Lift ``TopicCategory.name`` into ``categoryName``."""
        if isinstance(data, dict) and "TopicCategory" in data:
            data = dict(data)
            category = data.pop("TopicCategory")
            if isinstance(category, dict) and category.get("name"):
                data.setdefault("categoryName", category["name"])
        return data

    @field_validator("keywords", mode="before")
    @classmethod
    def null_keywords_are_empty(cls, v: Any) -> Any:
        """Treat null keywords as an empty string."""
        return v or ""


class CatalogQuery(BaseModel):
    """A catalog search query: by external (IMDb) id or by free text."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    external_id: str | None = None
    free_text: str | None = None

    @model_validator(mode="after")
    def validate_exactly_one(self) -> "CatalogQuery":
        """Ensure exactly one of external_id and free_text is set."""
        if (self.external_id is None) == (self.free_text is None):
            msg = "Exactly one of external_id or free_text must be set"
            raise ValueError(msg)
        return self

"""Configuration schemas for the warnings engine."""

from typing import Annotated

from pydantic import Field, field_validator, model_validator

from content_warnings.config.constants import (
    DTDD_BASE_URL,
    DTDD_CATEGORIES_URL,
    DTDD_MEDIA_URL,
    DTDD_SEARCH_URL,
)
from content_warnings.data_model import StrictBaseModel
from content_warnings.fetch.config import FetchConfig


class ClassifierConfig(StrictBaseModel):
    """Vote classification settings.

    Attributes:
        min_votes: Minimum total votes before a topic is classified.
        min_votes_sensitive: Minimum total votes for a sensitive topic.
        confidence_level: Two-sided confidence level of the Wilson interval.
        sensitive_rank_bonus: Amount subtracted from a sensitive topic's rank.
    """

    min_votes: Annotated[int, Field(ge=0, le=1000)] = 3
    min_votes_sensitive: Annotated[int, Field(ge=0, le=1000)] = 1
    confidence_level: Annotated[float, Field(gt=0.0, lt=1.0)] = 0.90
    sensitive_rank_bonus: Annotated[int, Field(ge=0, le=10)] = 1

    @model_validator(mode="after")
    def validate_sensitive_threshold(self) -> "ClassifierConfig":
        """Ensure sensitive topics never need more votes than other topics."""
        if self.min_votes_sensitive > self.min_votes:
            msg = (
                f"min_votes_sensitive ({self.min_votes_sensitive}) must not "
                f"exceed min_votes ({self.min_votes})"
            )
            raise ValueError(msg)
        return self

    @property
    def z_score(self) -> float:
        """Get the standard normal z-value for ``confidence_level``."""
        from content_warnings.classifier.wilson import z_for_confidence

        return z_for_confidence(self.confidence_level)


class ApiConfig(StrictBaseModel):
    """DoesTheDogDie endpoint locations."""

    base_url: str = DTDD_BASE_URL
    search_url: str = DTDD_SEARCH_URL
    media_url: str = DTDD_MEDIA_URL
    categories_url: str = DTDD_CATEGORIES_URL

    @field_validator("base_url", "search_url", "media_url", "categories_url")
    @classmethod
    def validate_http_url(cls, v: str) -> str:
        """Ensure endpoint URLs use http or https."""
        if not v.startswith(("http://", "https://")):
            msg = f"URL must start with http:// or https://: {v}"
            raise ValueError(msg)
        return v.rstrip("/")


class EngineConfig(StrictBaseModel):
    """Root configuration for engine.yaml.

    Attributes:
        version: Schema version.
        classifier: Vote classification settings.
        api: Endpoint locations.
        fetch: HTTP transport settings.
    """

    version: Annotated[str, Field(pattern=r"^\d+\.\d+$")] = "1.0"
    classifier: ClassifierConfig = Field(default_factory=ClassifierConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)

"""Data models for identity resolution."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import field_validator

from content_warnings.catalog.models import CatalogEntry
from content_warnings.data_model import StrictBaseModel


class WorkIdentity(StrictBaseModel):
    """Identifying signals scraped from a film page.

    Attributes:
        imdb_id: IMDb title id (e.g., 'tt0133093').
        tmdb_id: TMDB numeric id.
        is_series: Whether the page is a series rather than a single film.
        title: Display title.
        year: Release year.
        native_title: Original-language title, if different.
    """

    imdb_id: str | None = None
    tmdb_id: int | None = None
    is_series: bool = False
    title: str | None = None
    year: str | None = None
    native_title: str | None = None

    @field_validator("imdb_id", "title", "native_title", mode="before")
    @classmethod
    def blank_is_absent(cls, v: Any) -> Any:
        """Strip text and treat blank strings as missing."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("year", mode="before")
    @classmethod
    def year_as_string(cls, v: Any) -> Any:
        """Coerce numeric years to strings; blank means missing."""
        if v is None:
            return None
        text = str(v).strip()
        return text or None

    @field_validator("tmdb_id", mode="before")
    @classmethod
    def blank_tmdb_id_is_absent(cls, v: Any) -> Any:
        """Treat blank strings as a missing TMDB id."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ResolutionTier(str, Enum):
    """Resolution tier that produced a match.

    - EXTERNAL_ID: Search by IMDb id
    - TITLE: Free-text search by display title
    - NATIVE_TITLE: Free-text search by original-language title
    """

    EXTERNAL_ID = "EXTERNAL_ID"
    TITLE = "TITLE"
    NATIVE_TITLE = "NATIVE_TITLE"


@dataclass(frozen=True)
class ResolutionResult:
    """Outcome of resolving a WorkIdentity.

    Attributes:
        entry: Matched catalog entry, or None when not found.
        tier: Tier that produced the match.
        attempted_tiers: Tiers tried, in order.
    """

    entry: CatalogEntry | None = None
    tier: ResolutionTier | None = None
    attempted_tiers: tuple[ResolutionTier, ...] = field(default_factory=tuple)

    @property
    def found(self) -> bool:
        """Check whether a catalog entry was matched."""
        return self.entry is not None

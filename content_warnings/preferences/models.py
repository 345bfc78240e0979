"""User preference models."""

from typing import Annotated

from pydantic import Field

from content_warnings.data_model.base import StrictBaseModel
from content_warnings.preferences.constants import DEFAULT_MAX_WARNINGS


class UserPreferences(StrictBaseModel):
    """Per-user presentation preferences.

    Attributes:
        pinned_topic_ids: Topics always shown with their category.
        max_automatic_warnings: Cap on the automatic list length.
    """

    pinned_topic_ids: frozenset[int] = Field(default_factory=frozenset)
    max_automatic_warnings: Annotated[int, Field(ge=1)] = DEFAULT_MAX_WARNINGS

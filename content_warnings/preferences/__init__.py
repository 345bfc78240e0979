"""User preferences: pinned topics and the automatic warning cap."""

from content_warnings.preferences.constants import (
    API_KEY_STORAGE_KEY,
    DEFAULT_MAX_WARNINGS,
    MAX_WARNINGS_STORAGE_KEY,
    PINNED_TOPICS_STORAGE_KEY,
)
from content_warnings.preferences.models import UserPreferences
from content_warnings.preferences.protocols import PreferenceStore
from content_warnings.preferences.store import (
    MappingPreferenceStore,
    YamlPreferenceStore,
)


__all__ = [
    "API_KEY_STORAGE_KEY",
    "DEFAULT_MAX_WARNINGS",
    "MAX_WARNINGS_STORAGE_KEY",
    "PINNED_TOPICS_STORAGE_KEY",
    "MappingPreferenceStore",
    "PreferenceStore",
    "UserPreferences",
    "YamlPreferenceStore",
]

"""Protocol definitions for preference storage."""

from typing import Protocol, runtime_checkable

from content_warnings.preferences.models import UserPreferences


@runtime_checkable
class PreferenceStore(Protocol):
    """Read-only source of user preferences."""

    def load_preferences(self) -> UserPreferences:
        """Load the current preferences.

        Returns:
            UserPreferences, with defaults for anything missing or invalid.
        """
        ...

"""Preference storage keys and defaults."""

# Storage keys
API_KEY_STORAGE_KEY = "dtdd-key"
PINNED_TOPICS_STORAGE_KEY = "dtdd-pinned-topics"
MAX_WARNINGS_STORAGE_KEY = "dtdd-max-warnings"

DEFAULT_MAX_WARNINGS = 5

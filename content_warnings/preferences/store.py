"""Preference stores backed by a key-value mapping or a YAML file."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog
import yaml

from content_warnings.preferences.constants import (
    API_KEY_STORAGE_KEY,
    DEFAULT_MAX_WARNINGS,
    MAX_WARNINGS_STORAGE_KEY,
    PINNED_TOPICS_STORAGE_KEY,
)
from content_warnings.preferences.models import UserPreferences


logger = structlog.get_logger()


class MappingPreferenceStore:
    """Reads preferences out of an opaque key-value mapping.

    Values are interpreted leniently:
    - A missing, non-integer, or < 1 display cap falls back to the default.
    - Pinned ids that are not integers are ignored.
    """

    def __init__(self, data: Mapping[str, Any] | None = None, run_id: str = "") -> None:
        """Initialize the store.

        Args:
            data: Stored key-value pairs.
            run_id: Run identifier for logging.
        """
        self._data: Mapping[str, Any] = data or {}
        self._log = logger.bind(component="preferences", run_id=run_id)

    def load_preferences(self) -> UserPreferences:
        """Load preferences from the mapping.

        Returns:
            UserPreferences.
        """
        prefs = UserPreferences(
            pinned_topic_ids=self._read_pinned(),
            max_automatic_warnings=self._read_cap(),
        )
        self._log.debug(
            "preferences_loaded",
            pinned=len(prefs.pinned_topic_ids),
            max_automatic_warnings=prefs.max_automatic_warnings,
        )
        return prefs

    def _read_pinned(self) -> frozenset[int]:
        raw = self._data.get(PINNED_TOPICS_STORAGE_KEY)
        if raw is None:
            return frozenset()
        if not isinstance(raw, list | tuple | set | frozenset):
            self._log.warning("pinned_topics_invalid", value_type=type(raw).__name__)
            return frozenset()

        pinned = [v for v in raw if isinstance(v, int) and not isinstance(v, bool)]
        if len(pinned) != len(raw):
            self._log.info("pinned_topics_ignored", ignored=len(raw) - len(pinned))
        return frozenset(pinned)

    def _read_cap(self) -> int:
        raw = self._data.get(MAX_WARNINGS_STORAGE_KEY)
        if raw is None:
            return DEFAULT_MAX_WARNINGS
        try:
            cap = int(raw)
        except (TypeError, ValueError):
            cap = 0
        if isinstance(raw, bool) or cap < 1:
            self._log.warning("max_warnings_invalid", value=str(raw))
            return DEFAULT_MAX_WARNINGS
        return cap


class YamlPreferenceStore(MappingPreferenceStore):
    """Preference store reading a YAML mapping from disk.

    The file uses the same keys as the mapping store. An API key stored in
    the file is ignored; secrets come from the environment.
    """

    def __init__(self, path: Path, run_id: str = "") -> None:
        """Initialize the store.

        Args:
            path: Path to the YAML preferences file.
            run_id: Run identifier for logging.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            ValueError: If the file is not a YAML mapping.
        """
        if not path.exists():
            msg = f"Preferences file not found: {path}"
            raise FileNotFoundError(msg)

        with path.open() as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                msg = f"Invalid YAML in {path}: {e}"
                raise ValueError(msg) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            msg = f"Preferences file {path} must contain a mapping"
            raise ValueError(msg)

        super().__init__(data, run_id=run_id)
        self.path = path
        if API_KEY_STORAGE_KEY in data:
            self._log.warning(
                "preference_secret_ignored",
                key=API_KEY_STORAGE_KEY,
                hint="Set DTDD_API_KEY in the environment instead",
            )

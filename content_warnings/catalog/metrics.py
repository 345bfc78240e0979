"""Per-endpoint counters for DoesTheDogDie API calls."""

from dataclasses import dataclass, field
from typing import ClassVar

from content_warnings.catalog.constants import CatalogEndpoint


@dataclass
class CatalogMetrics:
    """Metrics for catalog API calls.

    Singleton class. Counters are keyed by endpoint name (search, media,
    categories).
    """

    requests_by_endpoint: dict[str, int] = field(default_factory=dict)
    failures_by_endpoint: dict[str, int] = field(default_factory=dict)
    skipped_records_by_endpoint: dict[str, int] = field(default_factory=dict)
    auth_rejected_total: int = 0
    retries_total: int = 0

    _instance: ClassVar["CatalogMetrics | None"] = None

    @classmethod
    def get_instance(cls) -> "CatalogMetrics":
        """Get singleton metrics instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset metrics (primarily for testing)."""
        cls._instance = None

    def record_request(self, endpoint: CatalogEndpoint, attempts: int = 1) -> None:
        """Record one call to an endpoint.

        Args:
            endpoint: Endpoint called.
            attempts: HTTP attempts the call took, retries included.
        """
        key = endpoint.value
        self.requests_by_endpoint[key] = self.requests_by_endpoint.get(key, 0) + 1
        self.retries_total += max(0, attempts - 1)

    def record_failure(self, endpoint: CatalogEndpoint) -> None:
        """Record a call that produced no usable payload."""
        key = endpoint.value
        self.failures_by_endpoint[key] = self.failures_by_endpoint.get(key, 0) + 1

    def record_auth_rejected(self) -> None:
        """Record a 401 or 403 answer."""
        self.auth_rejected_total += 1

    def record_skipped_record(self, endpoint: CatalogEndpoint) -> None:
        """Record a malformed record dropped from an otherwise valid payload."""
        key = endpoint.value
        self.skipped_records_by_endpoint[key] = (
            self.skipped_records_by_endpoint.get(key, 0) + 1
        )

    def to_dict(self) -> dict[str, int | dict[str, int]]:
        """Convert metrics to dictionary."""
        return {
            "requests_by_endpoint": dict(self.requests_by_endpoint),
            "failures_by_endpoint": dict(self.failures_by_endpoint),
            "skipped_records_by_endpoint": dict(self.skipped_records_by_endpoint),
            "auth_rejected_total": self.auth_rejected_total,
            "retries_total": self.retries_total,
        }

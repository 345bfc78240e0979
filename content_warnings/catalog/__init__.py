"""DoesTheDogDie catalog access.

Wire models for search results and topic votes, the collaborator
protocols consumed by the resolver and panel, and the HTTP client that
implements them.
"""

from content_warnings.catalog.client import DtddClient, media_url_for
from content_warnings.catalog.constants import CatalogEndpoint
from content_warnings.catalog.metrics import CatalogMetrics
from content_warnings.catalog.models import (
    CatalogEntry,
    CatalogQuery,
    ItemKind,
    MediaDetails,
    SearchResponse,
    Topic,
    TopicSummary,
    TopicVote,
)
from content_warnings.catalog.protocols import CatalogDetails, CatalogSearch
from content_warnings.catalog.topics import filter_topics, order_topics


__all__ = [
    "CatalogDetails",
    "CatalogEndpoint",
    "CatalogEntry",
    "CatalogMetrics",
    "CatalogQuery",
    "CatalogSearch",
    "DtddClient",
    "ItemKind",
    "MediaDetails",
    "SearchResponse",
    "Topic",
    "TopicSummary",
    "TopicVote",
    "filter_topics",
    "media_url_for",
    "order_topics",
]

"""Identity resolution against the warnings catalog.

Maps the identifiers scraped from a film page to a single catalog
entry, falling back from IMDb id to title to native title.
"""

from content_warnings.resolver.matcher import match_catalog_result
from content_warnings.resolver.metrics import ResolverMetrics
from content_warnings.resolver.models import (
    ResolutionResult,
    ResolutionTier,
    WorkIdentity,
)
from content_warnings.resolver.resolver import IdentityResolver


__all__ = [
    "IdentityResolver",
    "ResolutionResult",
    "ResolutionTier",
    "ResolverMetrics",
    "WorkIdentity",
    "match_catalog_result",
]

"""Protocol interfaces for catalog collaborators."""

from typing import Protocol, runtime_checkable

from content_warnings.catalog.models import CatalogQuery, MediaDetails, SearchResponse


@runtime_checkable
class CatalogSearch(Protocol):
    """Searches the catalog by external id or free text."""

    def search(self, query: CatalogQuery) -> SearchResponse | None:
        """Run a catalog search.

        Args:
            query: The search query.

        Returns:
            Search response, or None when the search could not be completed.
        """
        ...


@runtime_checkable
class CatalogDetails(Protocol):
    """Fetches per-topic vote tallies for a catalog entry."""

    def get_details(self, catalog_id: int) -> MediaDetails | None:
        """Fetch details for a catalog entry.

        Args:
            catalog_id: Catalog identifier.

        Returns:
            Media details, or None when unavailable.
        """
        ...

"""DoesTheDogDie API client.

Implements the catalog search and details collaborators on top of
HttpFetcher. Transport failures, error statuses, and undecodable bodies
are logged and surface as None, never as exceptions.
"""

import json
from typing import Any
from urllib.parse import urlencode

import structlog
from pydantic import ValidationError

from content_warnings.catalog.constants import (
    API_KEY_HEADER,
    CatalogEndpoint,
    SEARCH_PARAM_IMDB,
    SEARCH_PARAM_TEXT,
)
from content_warnings.catalog.metrics import CatalogMetrics
from content_warnings.catalog.models import (
    CatalogQuery,
    MediaDetails,
    SearchResponse,
    TopicSummary,
)
from content_warnings.config.schemas import ApiConfig
from content_warnings.fetch.client import HttpFetcher
from content_warnings.fetch.constants import (
    HTTP_STATUS_FORBIDDEN,
    HTTP_STATUS_UNAUTHORIZED,
)
from content_warnings.settings.app import AppSettings


logger = structlog.get_logger()


def media_url_for(catalog_id: int, api_config: ApiConfig | None = None) -> str:
    """Build the public page URL for a catalog entry.

    Args:
        catalog_id: Catalog identifier.
        api_config: API configuration (defaults used when omitted).

    Returns:
        URL of the entry's page on DoesTheDogDie.
    """
    config = api_config or ApiConfig()
    return f"{config.base_url.rstrip('/')}/media/{catalog_id}"


class DtddClient:
    """Client for the DoesTheDogDie search, media, and categories endpoints."""

    def __init__(
        self,
        fetcher: HttpFetcher,
        settings: AppSettings | None = None,
        api_config: ApiConfig | None = None,
        run_id: str = "",
    ) -> None:
        """Initialize the client.

        Args:
            fetcher: HTTP fetcher used for all requests.
            settings: Application settings carrying the API key.
            api_config: Endpoint configuration.
            run_id: Run identifier for logging.
        """
        self._fetcher = fetcher
        self._api_config = api_config or ApiConfig()
        self._headers = {"Accept": "application/json"}
        if settings is not None:
            self._headers.update(settings.api_key_header())
        self._log = logger.bind(component="catalog", run_id=run_id)
        self._metrics = CatalogMetrics.get_instance()

    @property
    def has_api_key(self) -> bool:
        """Check whether requests carry an API key."""
        return API_KEY_HEADER in self._headers

    def build_search_url(self, query: CatalogQuery) -> str:
        """Build the search URL for a query.

        Args:
            query: The search query.

        Returns:
            Fully encoded search URL.
        """
        if query.external_id is not None:
            params = {SEARCH_PARAM_IMDB: query.external_id}
        else:
            params = {SEARCH_PARAM_TEXT: query.free_text or ""}
        return f"{self._api_config.search_url}?{urlencode(params)}"

    def search(self, query: CatalogQuery) -> SearchResponse | None:
        """Search the catalog.

        Args:
            query: Search by external id or by free text.

        Returns:
            SearchResponse (possibly empty), or None if the search failed.
        """
        payload = self._get_json(
            self.build_search_url(query), CatalogEndpoint.SEARCH
        )
        if payload is None:
            return None

        response = SearchResponse.from_payload(payload)
        if response is None:
            self._metrics.record_failure(CatalogEndpoint.SEARCH)
            self._log.warning("catalog_search_invalid")
            return None

        self._log.debug(
            "catalog_search_complete",
            by_external_id=query.external_id is not None,
            items=len(response.items),
        )
        return response

    def get_details(self, catalog_id: int) -> MediaDetails | None:
        """Fetch per-topic vote tallies for a catalog entry.

        Args:
            catalog_id: Catalog identifier.

        Returns:
            MediaDetails, or None if unavailable.
        """
        payload = self._get_json(
            f"{self._api_config.media_url}/{catalog_id}", CatalogEndpoint.MEDIA
        )
        if payload is None:
            return None

        details = MediaDetails.from_payload(payload)
        if details is None:
            self._metrics.record_failure(CatalogEndpoint.MEDIA)
            self._log.info("catalog_details_empty", catalog_id=catalog_id)
            return None

        self._log.debug(
            "catalog_details_loaded",
            catalog_id=catalog_id,
            topics=len(details.topic_votes),
        )
        return details

    def get_topics(self) -> list[TopicSummary] | None:
        """Fetch every selectable warning topic.

        Returns:
            List of topics, or None if unavailable.
        """
        payload = self._get_json(
            self._api_config.categories_url, CatalogEndpoint.CATEGORIES
        )
        if not isinstance(payload, list):
            if payload is not None:
                self._metrics.record_failure(CatalogEndpoint.CATEGORIES)
                self._log.warning("catalog_topics_invalid")
            return None

        topics: list[TopicSummary] = []
        for raw in payload:
            try:
                topics.append(TopicSummary.model_validate(raw))
            except ValidationError as e:
                self._metrics.record_skipped_record(CatalogEndpoint.CATEGORIES)
                self._log.warning("catalog_topic_skipped", error_count=e.error_count())
        return topics

    def _get_json(self, url: str, endpoint: CatalogEndpoint) -> Any | None:
        """Fetch a URL and decode its JSON body.

        Args:
            url: URL to fetch.
            endpoint: Endpoint the URL belongs to, for metrics.

        Returns:
            Decoded JSON, or None on any failure.
        """
        result = self._fetcher.fetch(url, extra_headers=self._headers)
        self._metrics.record_request(endpoint, result.attempts)

        if result.status_code in (HTTP_STATUS_UNAUTHORIZED, HTTP_STATUS_FORBIDDEN):
            self._metrics.record_auth_rejected()
            self._metrics.record_failure(endpoint)
            self._log.warning(
                "catalog_auth_rejected",
                status_code=result.status_code,
                has_api_key=self.has_api_key,
                hint="Set DTDD_API_KEY to a valid DoesTheDogDie API key",
            )
            return None

        if not result.is_success:
            self._metrics.record_failure(endpoint)
            self._log.warning(
                "catalog_fetch_failed",
                status_code=result.status_code,
                error_class=result.error.error_class.value if result.error else None,
                error=result.error.message if result.error else None,
            )
            return None

        try:
            return result.json_body()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            self._metrics.record_failure(endpoint)
            self._log.warning("catalog_response_not_json", error=str(e))
            return None

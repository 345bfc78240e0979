"""Tiered identity resolver mapping a viewed work to a catalog entry."""

import structlog

from content_warnings.catalog.models import CatalogEntry, CatalogQuery, SearchResponse
from content_warnings.catalog.protocols import CatalogSearch
from content_warnings.resolver.matcher import match_catalog_result
from content_warnings.resolver.metrics import ResolverMetrics
from content_warnings.resolver.models import (
    ResolutionResult,
    ResolutionTier,
    WorkIdentity,
)


logger = structlog.get_logger()


class IdentityResolver:
    """Resolves a WorkIdentity through three ordered tiers.

    Tiers, first match wins:
        EXTERNAL_ID -> TITLE -> NATIVE_TITLE

    EXTERNAL_ID takes the first result of an IMDb id search unless its
    TMDB id conflicts with the page's. The title tiers run a free-text
    search and apply ``match_catalog_result``. A search that returns no
    response counts as no match for its tier.
    """

    def __init__(
        self,
        search: CatalogSearch,
        run_id: str = "",
        metrics: ResolverMetrics | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            search: Catalog search collaborator.
            run_id: Run identifier for logging.
            metrics: Optional metrics instance.
        """
        self._search = search
        self._metrics = metrics or ResolverMetrics.get_instance()
        self._log = logger.bind(component="resolver", run_id=run_id)

    def resolve(self, identity: WorkIdentity) -> CatalogEntry | None:
        """Resolve a work to its catalog entry.

        Args:
            identity: Signals scraped from the page.

        Returns:
            Matched CatalogEntry, or None when the work is not found.
        """
        return self.resolve_detailed(identity).entry

    def resolve_detailed(self, identity: WorkIdentity) -> ResolutionResult:
        """Resolve a work and report which tiers ran.

        Args:
            identity: Signals scraped from the page.

        Returns:
            ResolutionResult with the match and the tiers attempted.
        """
        log = self._log.bind(
            imdb_id=identity.imdb_id,
            tmdb_id=identity.tmdb_id,
            is_series=identity.is_series,
            title=identity.title,
            year=identity.year,
        )
        attempted: list[ResolutionTier] = []

        if identity.imdb_id:
            attempted.append(ResolutionTier.EXTERNAL_ID)
            entry = self._match_external_id(identity, log)
            if entry is not None:
                return self._matched(entry, ResolutionTier.EXTERNAL_ID, attempted, log)

        if identity.title:
            attempted.append(ResolutionTier.TITLE)
            entry = self._match_text(identity, identity.title)
            if entry is not None:
                return self._matched(entry, ResolutionTier.TITLE, attempted, log)

        if identity.native_title:
            attempted.append(ResolutionTier.NATIVE_TITLE)
            entry = self._match_text(identity, identity.native_title)
            if entry is not None:
                return self._matched(
                    entry, ResolutionTier.NATIVE_TITLE, attempted, log
                )

        self._metrics.record_resolution(None)
        log.info(
            "resolution_not_found",
            attempted_tiers=[t.value for t in attempted],
        )
        return ResolutionResult(attempted_tiers=tuple(attempted))

    def _match_external_id(
        self,
        identity: WorkIdentity,
        log: structlog.stdlib.BoundLogger,
    ) -> CatalogEntry | None:
        """Run the external id tier.

        Args:
            identity: Work identity carrying an IMDb id.
            log: Bound logger.

        Returns:
            The accepted first candidate, or None.
        """
        response = self._run_search(CatalogQuery(external_id=identity.imdb_id))
        if response is None or not response.items:
            return None

        candidate = response.items[0]
        if (
            identity.tmdb_id is not None
            and candidate.tmdb_id is not None
            and candidate.tmdb_id != identity.tmdb_id
        ):
            log.info(
                "external_id_candidate_rejected",
                catalog_id=candidate.id,
                candidate_tmdb_id=candidate.tmdb_id,
            )
            return None
        return candidate

    def _match_text(self, identity: WorkIdentity, text: str) -> CatalogEntry | None:
        """Run a free-text tier for the given title.

        Args:
            identity: Work identity.
            text: Title to search for and match against.

        Returns:
            The matched candidate, or None.
        """
        response = self._run_search(CatalogQuery(free_text=text))
        if response is None:
            return None
        return match_catalog_result(
            response.items,
            tmdb_id=identity.tmdb_id,
            title=text,
            year=identity.year,
            is_series=identity.is_series,
        )

    def _run_search(self, query: CatalogQuery) -> SearchResponse | None:
        """Issue a search and record it."""
        response = self._search.search(query)
        self._metrics.record_search(succeeded=response is not None)
        return response

    def _matched(
        self,
        entry: CatalogEntry,
        tier: ResolutionTier,
        attempted: list[ResolutionTier],
        log: structlog.stdlib.BoundLogger,
    ) -> ResolutionResult:
        """Record and build a successful resolution."""
        self._metrics.record_resolution(tier)
        log.info(
            "resolution_tier_matched",
            tier=tier.value,
            catalog_id=entry.id,
            catalog_name=entry.name,
        )
        return ResolutionResult(
            entry=entry, tier=tier, attempted_tiers=tuple(attempted)
        )

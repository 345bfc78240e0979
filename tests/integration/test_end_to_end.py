"""End-to-end tests from page identity to ranked warnings."""

import httpx

from content_warnings.catalog.metrics import CatalogMetrics
from content_warnings.classifier.classifier import VoteClassifier
from content_warnings.classifier.models import Category
from content_warnings.panel.service import WarningPanelService
from content_warnings.panel.state_machine import PanelState
from content_warnings.preferences.store import MappingPreferenceStore
from content_warnings.ranker.ranker import WarningRanker
from content_warnings.resolver.metrics import ResolverMetrics
from content_warnings.resolver.models import WorkIdentity
from content_warnings.resolver.resolver import IdentityResolver
from tests.helpers.dtdd import SCENARIO_ROUTES, dtdd_client


IDENTITY = WorkIdentity(imdb_id="tt123", title="X", year="2020", is_series=False)


class TestEndToEnd:
    """Tests for the full resolve, classify, and rank pipeline."""

    def setup_method(self) -> None:
        """Reset metrics before each test."""
        CatalogMetrics.reset()
        ResolverMetrics.reset()

    def test_core_operations(self) -> None:
        """Test resolve, classify, and rank over canned responses."""
        seen: list[httpx.Request] = []
        client = dtdd_client(SCENARIO_ROUTES, seen)

        entry = IdentityResolver(client).resolve(IDENTITY)
        assert entry is not None
        assert entry.id == 1
        assert entry.tmdb_id is None
        assert len(seen) == 1

        details = client.get_details(entry.id)
        assert details is not None
        classifier = VoteClassifier()
        assert classifier.classify(details.topic_votes[0]) == Category.YES

        ranked = WarningRanker(classifier).rank(
            details.topic_votes, pinned_ids=set(), cap=5
        )
        assert ranked.pinned == []
        assert [v.topic_id for v in ranked.automatic] == [5]

    def test_panel_service(self) -> None:
        """Test the panel service over canned responses."""
        client = dtdd_client(SCENARIO_ROUTES)
        service = WarningPanelService(
            resolver=IdentityResolver(client),
            details=client,
            preferences=MappingPreferenceStore({}),
        )

        result = service.load(IDENTITY)

        assert result.state == PanelState.LOADED
        assert result.media_url == "https://www.doesthedogdie.com/media/1"
        assert [w.topic_id for w in result.automatic] == [5]
        assert ResolverMetrics.get_instance().matched_by_tier == {"EXTERNAL_ID": 1}
        assert CatalogMetrics.get_instance().requests_by_endpoint == {
            "search": 1,
            "media": 1,
        }

    def test_pinned_topic_moves_to_pinned_list(self) -> None:
        """Test pinning the confident topic moves it out of the automatic list."""
        client = dtdd_client(SCENARIO_ROUTES)
        service = WarningPanelService(
            resolver=IdentityResolver(client),
            details=client,
            preferences=MappingPreferenceStore({"dtdd-pinned-topics": [5]}),
        )

        result = service.load(IDENTITY)

        assert [w.topic_id for w in result.pinned] == [5]
        assert result.automatic == []

    def test_title_fallback_when_id_unknown(self) -> None:
        """Test an unknown IMDb id falls back to the title search."""
        routes = {
            "/dddsearch?imdb=tt999": {"items": []},
            "/dddsearch?q=X": SCENARIO_ROUTES["/dddsearch?imdb=tt123"],
            "/media/1": SCENARIO_ROUTES["/media/1"],
        }
        client = dtdd_client(routes)
        service = WarningPanelService(resolver=IdentityResolver(client), details=client)

        result = service.load(IDENTITY.model_copy(update={"imdb_id": "tt999"}))

        assert result.state == PanelState.LOADED
        assert ResolverMetrics.get_instance().matched_by_tier == {"TITLE": 1}

    def test_unknown_work_not_found(self) -> None:
        """Test a work absent from the catalog ends in NOT_FOUND."""
        client = dtdd_client({})
        service = WarningPanelService(resolver=IdentityResolver(client), details=client)

        result = service.load(IDENTITY)

        assert result.state == PanelState.NOT_FOUND
        assert ResolverMetrics.get_instance().search_failures_total == 2

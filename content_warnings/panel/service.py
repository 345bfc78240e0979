"""Warning panel service wiring resolution, classification, and ranking."""

import structlog

from content_warnings.catalog.client import media_url_for
from content_warnings.catalog.models import TopicVote
from content_warnings.catalog.protocols import CatalogDetails
from content_warnings.classifier.classifier import VoteClassifier
from content_warnings.config.schemas import ApiConfig
from content_warnings.panel.models import PanelResult, PanelWarning
from content_warnings.panel.state_machine import PanelStateMachine
from content_warnings.preferences.models import UserPreferences
from content_warnings.preferences.protocols import PreferenceStore
from content_warnings.ranker.ranker import WarningRanker
from content_warnings.resolver.models import WorkIdentity
from content_warnings.resolver.resolver import IdentityResolver


logger = structlog.get_logger()


class WarningPanelService:
    """Loads the warning panel for a viewed work.

    Pipeline: resolve -> fetch details -> classify -> rank.

    A work that cannot be resolved and a resolved work without vote data
    both end in NOT_FOUND. An unexpected exception ends in ERROR.
    """

    def __init__(
        self,
        resolver: IdentityResolver,
        details: CatalogDetails,
        classifier: VoteClassifier | None = None,
        preferences: PreferenceStore | None = None,
        api_config: ApiConfig | None = None,
        run_id: str = "",
    ) -> None:
        """Initialize the service.

        Args:
            resolver: Identity resolver.
            details: Catalog details collaborator.
            classifier: Vote classifier (defaults used when omitted).
            preferences: Preference store; defaults apply when omitted.
            api_config: API configuration used to build media URLs.
            run_id: Run identifier for logging.
        """
        self._resolver = resolver
        self._details = details
        self._classifier = classifier or VoteClassifier()
        self._ranker = WarningRanker(self._classifier)
        self._preferences = preferences
        self._api_config = api_config or ApiConfig()
        self._run_id = run_id
        self._log = logger.bind(component="panel", run_id=run_id)

    def load(self, identity: WorkIdentity) -> PanelResult:
        """Load the panel for one work.

        Args:
            identity: Signals scraped from the page.

        Returns:
            PanelResult in a terminal state.
        """
        machine = PanelStateMachine(run_id=self._run_id)

        try:
            entry = self._resolver.resolve(identity)
            if entry is None:
                machine.to_not_found()
                return PanelResult(state=machine.state)

            media_url = media_url_for(entry.id, self._api_config)
            details = self._details.get_details(entry.id)
            if details is None or not details.topic_votes:
                self._log.info("panel_details_empty", catalog_id=entry.id)
                machine.to_not_found()
                return PanelResult(
                    state=machine.state, media_id=entry.id, media_url=media_url
                )

            pinned, automatic = self._build_rows(details.topic_votes)
            machine.to_loaded()
            self._log.info(
                "panel_loaded",
                catalog_id=entry.id,
                pinned=len(pinned),
                automatic=len(automatic),
            )
            return PanelResult(
                state=machine.state,
                media_id=entry.id,
                media_url=media_url,
                pinned=pinned,
                automatic=automatic,
            )

        except Exception as e:  # noqa: BLE001
            self._log.exception("panel_load_failed", error=str(e))
            machine.to_error()
            return PanelResult(state=machine.state)

    def _build_rows(
        self,
        votes: list[TopicVote],
    ) -> tuple[list[PanelWarning], list[PanelWarning]]:
        """Rank votes and convert them to panel rows.

        Args:
            votes: Topic votes of the matched entry.

        Returns:
            Tuple of (pinned rows, automatic rows).
        """
        prefs = (
            self._preferences.load_preferences()
            if self._preferences is not None
            else UserPreferences()
        )
        ranked = self._ranker.rank(
            votes, prefs.pinned_topic_ids, prefs.max_automatic_warnings
        )
        pinned = [
            PanelWarning.from_vote(v, self._classifier.classify(v), is_pinned=True)
            for v in ranked.pinned
        ]
        automatic = [
            PanelWarning.from_vote(v, self._classifier.classify(v), is_pinned=False)
            for v in ranked.automatic
        ]
        return pinned, automatic

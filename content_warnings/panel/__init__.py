"""Warning panel: the presentation-facing pipeline and its states."""

from content_warnings.panel.models import PanelResult, PanelWarning
from content_warnings.panel.service import WarningPanelService
from content_warnings.panel.state_machine import (
    PanelState,
    PanelStateMachine,
    PanelStateTransitionError,
)


__all__ = [
    "PanelResult",
    "PanelState",
    "PanelStateMachine",
    "PanelStateTransitionError",
    "PanelWarning",
    "WarningPanelService",
]

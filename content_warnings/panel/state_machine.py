"""State machine for a warning panel load."""

from enum import Enum

import structlog


logger = structlog.get_logger()


class PanelState(str, Enum):
    """State of a warning panel.

    States represent the lifecycle of one panel load:
    - LOADING: Resolution and detail fetching are in progress
    - LOADED: Warnings were fetched and ranked
    - NOT_FOUND: The work is not in the catalog or has no votes
    - ERROR: An unexpected failure occurred
    """

    LOADING = "LOADING"
    LOADED = "LOADED"
    NOT_FOUND = "NOT_FOUND"
    ERROR = "ERROR"


# Valid state transitions
_VALID_TRANSITIONS: dict[PanelState, set[PanelState]] = {
    PanelState.LOADING: {PanelState.LOADED, PanelState.NOT_FOUND, PanelState.ERROR},
    PanelState.LOADED: set(),  # Terminal state
    PanelState.NOT_FOUND: set(),  # Terminal state
    PanelState.ERROR: set(),  # Terminal state
}


class PanelStateTransitionError(Exception):
    """Raised when an illegal state transition is attempted."""

    def __init__(
        self,
        run_id: str,
        from_state: PanelState,
        to_state: PanelState,
    ) -> None:
        """Initialize the transition error.

        Args:
            run_id: Identifier of the run.
            from_state: Current state.
            to_state: Attempted target state.
        """
        self.run_id = run_id
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(
            f"Illegal panel state transition for run '{run_id}': "
            f"{from_state.value} -> {to_state.value}"
        )


class PanelStateMachine:
    """Manages state transitions for a panel load.

    Enforces valid transitions and logs all state changes.
    """

    def __init__(
        self,
        run_id: str = "",
        initial_state: PanelState = PanelState.LOADING,
    ) -> None:
        """Initialize the state machine.

        Args:
            run_id: Identifier for the current run.
            initial_state: Starting state.
        """
        self._run_id = run_id
        self._state = initial_state
        self._log = logger.bind(component="panel", run_id=run_id)

    @property
    def run_id(self) -> str:
        """Get the run identifier."""
        return self._run_id

    @property
    def state(self) -> PanelState:
        """Get the current state."""
        return self._state

    @property
    def is_terminal(self) -> bool:
        """Check if current state is terminal."""
        return not _VALID_TRANSITIONS[self._state]

    def can_transition_to(self, target: PanelState) -> bool:
        """Check if a transition to the target state is valid.

        Args:
            target: The target state.

        Returns:
            True if the transition is valid.
        """
        return target in _VALID_TRANSITIONS.get(self._state, set())

    def transition_to(self, target: PanelState) -> None:
        """Transition to a new state.

        Args:
            target: The target state.

        Raises:
            PanelStateTransitionError: If the transition is invalid.
        """
        if not self.can_transition_to(target):
            error = PanelStateTransitionError(
                run_id=self._run_id,
                from_state=self._state,
                to_state=target,
            )
            self._log.error(
                "illegal_panel_state_transition",
                from_state=self._state.value,
                to_state=target.value,
            )
            raise error

        old_state = self._state
        self._state = target

        self._log.info(
            "panel_state_transition",
            from_state=old_state.value,
            to_state=target.value,
        )

    def to_loaded(self) -> None:
        """Transition to LOADED state."""
        self.transition_to(PanelState.LOADED)

    def to_not_found(self) -> None:
        """Transition to NOT_FOUND state."""
        self.transition_to(PanelState.NOT_FOUND)

    def to_error(self) -> None:
        """Transition to ERROR state."""
        self.transition_to(PanelState.ERROR)

"""Unit tests for the panel state machine."""

import pytest

from content_warnings.panel.state_machine import (
    PanelState,
    PanelStateMachine,
    PanelStateTransitionError,
)


class TestPanelState:
    """Tests for PanelState enum."""

    def test_all_states_defined(self) -> None:
        """Test all required states are defined."""
        assert PanelState.LOADING.value == "LOADING"
        assert PanelState.LOADED.value == "LOADED"
        assert PanelState.NOT_FOUND.value == "NOT_FOUND"
        assert PanelState.ERROR.value == "ERROR"


class TestPanelStateMachine:
    """Tests for PanelStateMachine class."""

    def test_initial_state(self) -> None:
        """Test initial state is LOADING."""
        sm = PanelStateMachine(run_id="test-run")

        assert sm.state == PanelState.LOADING
        assert sm.run_id == "test-run"
        assert not sm.is_terminal

    @pytest.mark.parametrize(
        "target",
        [PanelState.LOADED, PanelState.NOT_FOUND, PanelState.ERROR],
    )
    def test_loading_to_terminal(self, target: PanelState) -> None:
        """Test LOADING may move to any terminal state."""
        sm = PanelStateMachine(run_id="test")

        sm.transition_to(target)

        assert sm.state == target
        assert sm.is_terminal

    def test_helpers(self) -> None:
        """Test the named transition helpers."""
        loaded = PanelStateMachine()
        loaded.to_loaded()
        not_found = PanelStateMachine()
        not_found.to_not_found()
        error = PanelStateMachine()
        error.to_error()

        assert loaded.state == PanelState.LOADED
        assert not_found.state == PanelState.NOT_FOUND
        assert error.state == PanelState.ERROR

    def test_terminal_states_final(self) -> None:
        """Test no transition leaves a terminal state."""
        sm = PanelStateMachine(run_id="test")
        sm.to_loaded()

        with pytest.raises(PanelStateTransitionError) as exc_info:
            sm.to_error()

        assert exc_info.value.from_state == PanelState.LOADED
        assert exc_info.value.to_state == PanelState.ERROR
        assert "LOADED -> ERROR" in str(exc_info.value)
        assert sm.state == PanelState.LOADED

    def test_self_transition_rejected(self) -> None:
        """Test LOADING cannot transition to itself."""
        sm = PanelStateMachine(run_id="test")

        assert not sm.can_transition_to(PanelState.LOADING)
        with pytest.raises(PanelStateTransitionError):
            sm.transition_to(PanelState.LOADING)

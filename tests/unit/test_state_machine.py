"""Unit tests for configuration load state machine."""

import pytest

from bpm_config.features.config.state_machine import (
    ConfigState,
    ConfigStateError,
    ConfigStateMachine,
)


class TestConfigState:
    """Tests for ConfigState enum."""

    @pytest.mark.unit
    def test_all_states_defined(self) -> None:
        """Test that all expected states are defined."""
        expected_states = {"UNLOADED", "FETCHING", "PARSED", "READY", "FAILED"}
        actual_states = {state.name for state in ConfigState}
        assert actual_states == expected_states


class TestConfigStateMachine:
    """Tests for ConfigStateMachine."""

    @pytest.mark.unit
    def test_initial_state(self) -> None:
        """Test that initial state is UNLOADED."""
        machine = ConfigStateMachine()
        assert machine.state == ConfigState.UNLOADED
        assert not machine.is_terminal()

    @pytest.mark.unit
    def test_happy_path(self) -> None:
        """Test UNLOADED -> FETCHING -> PARSED -> READY."""
        machine = ConfigStateMachine()
        machine.transition(ConfigState.FETCHING)
        machine.transition(ConfigState.PARSED)
        machine.transition(ConfigState.READY)
        assert machine.is_ready()
        assert machine.is_terminal()

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "path",
        [
            [],
            [ConfigState.FETCHING],
            [ConfigState.FETCHING, ConfigState.PARSED],
        ],
    )
    def test_failed_reachable_from_non_terminal(
        self, path: list[ConfigState]
    ) -> None:
        """Test that every non-terminal state can fail."""
        machine = ConfigStateMachine()
        for state in path:
            machine.transition(state)
        machine.transition(ConfigState.FAILED)
        assert machine.is_failed()
        assert machine.is_terminal()

    @pytest.mark.unit
    def test_cannot_skip_parsing(self) -> None:
        """Test that FETCHING cannot jump to READY."""
        machine = ConfigStateMachine()
        machine.transition(ConfigState.FETCHING)
        assert not machine.can_transition(ConfigState.READY)
        with pytest.raises(ConfigStateError) as exc_info:
            machine.transition(ConfigState.READY)
        assert exc_info.value.from_state == ConfigState.FETCHING
        assert exc_info.value.to_state == ConfigState.READY

    @pytest.mark.unit
    @pytest.mark.parametrize("terminal", [ConfigState.READY, ConfigState.FAILED])
    def test_terminal_states_have_no_exits(self, terminal: ConfigState) -> None:
        """Test that READY and FAILED are terminal."""
        machine = ConfigStateMachine()
        if terminal == ConfigState.READY:
            machine.transition(ConfigState.FETCHING)
            machine.transition(ConfigState.PARSED)
        machine.transition(terminal)
        for state in ConfigState:
            assert not machine.can_transition(state)

    @pytest.mark.unit
    def test_error_message(self) -> None:
        """Test the invalid transition message."""
        error = ConfigStateError(ConfigState.READY, ConfigState.FETCHING)
        assert str(error) == "Invalid state transition: READY -> FETCHING"

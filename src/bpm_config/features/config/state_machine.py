"""Configuration load state machine implementation."""

from enum import Enum, auto
from typing import ClassVar


class ConfigState(Enum):
    """Configuration loading states.

    State transitions:
        UNLOADED -> FETCHING: Resolve deployment and read the resource
        FETCHING -> PARSED: Resource decoded and parsed
        PARSED -> READY: Key selected and result persisted if requested
        Any non-terminal -> FAILED: Error occurred at any stage
    """

    UNLOADED = auto()
    FETCHING = auto()
    PARSED = auto()
    READY = auto()
    FAILED = auto()


class ConfigStateError(Exception):
    """Raised when an invalid state transition is attempted."""

    def __init__(self, from_state: ConfigState, to_state: ConfigState) -> None:
        """Initialize the error.

        Args:
            from_state: The current state.
            to_state: The attempted target state.
        """
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(
            f"Invalid state transition: {from_state.name} -> {to_state.name}"
        )


class ConfigStateMachine:
    """State machine for a single configuration load."""

    VALID_TRANSITIONS: ClassVar[dict[ConfigState, set[ConfigState]]] = {
        ConfigState.UNLOADED: {ConfigState.FETCHING, ConfigState.FAILED},
        ConfigState.FETCHING: {ConfigState.PARSED, ConfigState.FAILED},
        ConfigState.PARSED: {ConfigState.READY, ConfigState.FAILED},
        ConfigState.READY: set(),  # Terminal state
        ConfigState.FAILED: set(),  # Terminal state
    }

    def __init__(self) -> None:
        """Initialize the state machine in UNLOADED state."""
        self._state = ConfigState.UNLOADED

    @property
    def state(self) -> ConfigState:
        """Get the current state."""
        return self._state

    def can_transition(self, to_state: ConfigState) -> bool:
        """Check if a transition to the given state is valid."""
        return to_state in self.VALID_TRANSITIONS.get(self._state, set())

    def transition(self, to_state: ConfigState) -> None:
        """Transition to a new state.

        Args:
            to_state: The target state.

        Raises:
            ConfigStateError: If the transition is invalid.
        """
        if not self.can_transition(to_state):
            raise ConfigStateError(self._state, to_state)
        self._state = to_state

    def is_terminal(self) -> bool:
        """Check if the current state is terminal."""
        return self._state in (ConfigState.READY, ConfigState.FAILED)

    def is_ready(self) -> bool:
        """Check if the configuration was loaded successfully."""
        return self._state == ConfigState.READY

    def is_failed(self) -> bool:
        """Check if configuration loading has failed."""
        return self._state == ConfigState.FAILED

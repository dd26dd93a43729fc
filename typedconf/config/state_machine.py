"""Configuration loading state machine."""

from enum import Enum, auto
from typing import ClassVar


class ConfigState(Enum):
    """Configuration loading states.

    State transitions:
        UNLOADED -> LOADING: Start reading the primary file
        LOADING -> VALIDATED: Primary file and its includes parsed
        VALIDATED -> READY: Overrides merged and the store is usable
        Any -> FAILED: An error stopped the load
    """

    UNLOADED = auto()
    LOADING = auto()
    VALIDATED = auto()
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
    """Enforces valid state transitions while a store is being built."""

    VALID_TRANSITIONS: ClassVar[dict[ConfigState, set[ConfigState]]] = {
        ConfigState.UNLOADED: {ConfigState.LOADING, ConfigState.FAILED},
        ConfigState.LOADING: {ConfigState.VALIDATED, ConfigState.FAILED},
        ConfigState.VALIDATED: {ConfigState.READY, ConfigState.FAILED},
        ConfigState.READY: {ConfigState.FAILED},
        ConfigState.FAILED: set(),  # Terminal state
    }

    def __init__(self) -> None:
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

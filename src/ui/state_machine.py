"""Run state machine for Browser Selector.

One pass per invocation:
    Idle -> ConfigLoaded -> CatalogBuilt -> UrlAnalyzed -> AwaitingChoice
         -> Resolved -> Launched
    CatalogBuilt --[no browsers]--> Failed
    AwaitingChoice --[dismissed]--> Cancelled
    Resolved --[launch error]--> Failed
"""

from __future__ import annotations

import logging
from enum import Enum

from PyQt6.QtCore import QObject, pyqtSignal

logger = logging.getLogger(__name__)


class RunState(Enum):
    """Run state enumeration."""

    IDLE = "idle"
    CONFIG_LOADED = "config_loaded"
    CATALOG_BUILT = "catalog_built"
    URL_ANALYZED = "url_analyzed"
    AWAITING_CHOICE = "awaiting_choice"
    RESOLVED = "resolved"
    LAUNCHED = "launched"
    CANCELLED = "cancelled"
    FAILED = "failed"


TERMINAL_STATES = frozenset({RunState.LAUNCHED, RunState.CANCELLED, RunState.FAILED})


class InvalidTransitionError(Exception):
    """Raised when an invalid state transition is attempted."""

    pass


class StateManager(QObject):
    """
    Tracks the run state and rejects transitions outside the FSM.

    Emits state_changed signal when transitions occur.
    """

    state_changed = pyqtSignal(RunState)

    VALID_TRANSITIONS: dict[RunState, set[RunState]] = {
        RunState.IDLE: {RunState.CONFIG_LOADED},
        RunState.CONFIG_LOADED: {RunState.CATALOG_BUILT},
        RunState.CATALOG_BUILT: {RunState.URL_ANALYZED, RunState.FAILED},
        RunState.URL_ANALYZED: {RunState.AWAITING_CHOICE},
        RunState.AWAITING_CHOICE: {RunState.RESOLVED, RunState.CANCELLED},
        RunState.RESOLVED: {RunState.LAUNCHED, RunState.FAILED},
        RunState.LAUNCHED: set(),
        RunState.CANCELLED: set(),
        RunState.FAILED: set(),
    }

    def __init__(self, parent: QObject | None = None) -> None:
        """Initialize the StateManager in IDLE state."""
        super().__init__(parent)
        self._state = RunState.IDLE
        self._error_message: str = ""

    @property
    def state(self) -> RunState:
        """Return the current run state."""
        return self._state

    @property
    def error_message(self) -> str:
        """Return the failure message, if in FAILED state."""
        return self._error_message

    @property
    def is_finished(self) -> bool:
        return self._state in TERMINAL_STATES

    def can_transition_to(self, new_state: RunState) -> bool:
        """
        Check if transition to the given state is valid.

        Args:
            new_state: The target state

        Returns:
            True if the transition is valid
        """
        return new_state in self.VALID_TRANSITIONS.get(self._state, set())

    def transition_to(self, new_state: RunState, error_message: str = "") -> bool:
        """
        Attempt to transition to a new state.

        Args:
            new_state: The target state
            error_message: Error message if transitioning to FAILED state

        Returns:
            True if transition succeeded

        Raises:
            InvalidTransitionError: If transition is not valid
        """
        if not self.can_transition_to(new_state):
            msg = f"Invalid transition: {self._state.value} -> {new_state.value}"
            logger.warning(msg)
            raise InvalidTransitionError(msg)

        old_state = self._state
        self._state = new_state

        if new_state == RunState.FAILED:
            self._error_message = error_message
        else:
            self._error_message = ""

        logger.info("State transition: %s -> %s", old_state.value, new_state.value)
        self.state_changed.emit(new_state)
        return True

    def fail(self, message: str) -> bool:
        """Transition to FAILED."""
        return self.transition_to(RunState.FAILED, message)

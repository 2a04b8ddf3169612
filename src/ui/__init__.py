"""User interface package for Browser Selector."""

from src.ui.state_machine import RunState, StateManager, InvalidTransitionError
from src.ui.app import create_application
from src.ui.orchestrator import Orchestrator, EXIT_OK, EXIT_FAILURE

__all__ = [
    # State machine
    "RunState",
    "StateManager",
    "InvalidTransitionError",
    # App
    "create_application",
    # Flow
    "Orchestrator",
    "EXIT_OK",
    "EXIT_FAILURE",
]

"""Core recording control logic."""

from .application import RecdeckApplication
from .control_loop import ControlLoop
from .session import HoldTracker, RecordingSession
from .state_machine import DEFAULT_HOLD_THRESHOLD, ButtonStateMachine

__all__ = [
    "DEFAULT_HOLD_THRESHOLD",
    "ButtonStateMachine",
    "ControlLoop",
    "HoldTracker",
    "RecdeckApplication",
    "RecordingSession",
]

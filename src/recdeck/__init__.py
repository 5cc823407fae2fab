"""recdeck: Stream Deck control for recording, playing and deleting audio takes."""

__version__ = "0.1.0"

from .core import ButtonStateMachine, ControlLoop, RecdeckApplication

__all__ = [
    "ButtonStateMachine",
    "ControlLoop",
    "RecdeckApplication",
]

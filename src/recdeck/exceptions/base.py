"""Root of the recdeck exception hierarchy.

A recdeck error is raised by the component that owns the failing resource
(daemon socket, player process, recording file, panel, config file) and
carries two texts: a short `user_message` the CLI prints, and a
`technical_message` the state machine and control loop write to the log.
`recovery_hint` is printed below the user message when set.
"""

from typing import Optional


class RecdeckError(Exception):
    """
    Base exception for all recdeck errors.

    Attributes:
        user_message: Short description shown by the CLI
        technical_message: Log line with the command, path or device involved
        recoverable: False only for errors that end the control loop
        recovery_hint: What the user can do about it, if anything
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

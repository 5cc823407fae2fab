"""Recording daemon client."""

from .client import DEFAULT_SOCKET_PATH, LISTENING_MARKER, DaemonClient, DaemonStatus

__all__ = ["DEFAULT_SOCKET_PATH", "LISTENING_MARKER", "DaemonClient", "DaemonStatus"]

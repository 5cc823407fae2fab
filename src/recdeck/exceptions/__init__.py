"""
Custom exception hierarchy for recdeck.

## Exception Hierarchy

```
RecdeckError (base)
├── DaemonError
│   ├── DaemonConnectionError
│   └── DaemonBusyError
├── RecordingError
│   ├── RecordingAlreadyActiveError
│   └── RecordingDeleteError
├── PlaybackError
├── PanelError
│   ├── PanelNotFoundError
│   └── PanelReadError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

Everything except PanelReadError is recovered where it happens: the button
state machine logs it and leaves its state (and the key's icon) as the
failure dictates. PanelReadError ends the control loop.
"""

from .base import RecdeckError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .daemon import DaemonBusyError, DaemonConnectionError, DaemonError
from .handlers import format_error_for_display, wrap_pydantic_error
from .panel import PanelError, PanelNotFoundError, PanelReadError
from .recording import (
    PlaybackError,
    RecordingAlreadyActiveError,
    RecordingDeleteError,
    RecordingError,
)

__all__ = [
    # Base
    "RecdeckError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Daemon
    "DaemonBusyError",
    "DaemonConnectionError",
    "DaemonError",
    # Panel
    "PanelError",
    "PanelNotFoundError",
    "PanelReadError",
    # Recording
    "PlaybackError",
    "RecordingAlreadyActiveError",
    "RecordingDeleteError",
    "RecordingError",
    # Handlers
    "format_error_for_display",
    "wrap_pydantic_error",
]

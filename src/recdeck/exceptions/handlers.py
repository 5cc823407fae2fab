"""
Centralized error handling utilities.

The layering follows a simple rule: low-level code (sockets, subprocess,
filesystem, HID) raises standard Python exceptions; the components that
own those resources convert them to RecdeckError subclasses with a user
message and a recovery hint; the CLI formats them for display.

| Scenario | Use This |
|----------|----------|
| Daemon socket unreachable | `DaemonConnectionError` |
| Daemon not idle | `DaemonBusyError` |
| Delete of a take failed | `RecordingDeleteError` |
| Player failed | `PlaybackError` |
| Config JSON broken | `ConfigFileInvalidError` via `wrap_pydantic_error` |
"""

from typing import Optional

from .base import RecdeckError
from .config import ConfigFileInvalidError, ConfigValidationError


def wrap_pydantic_error(error: Exception, file_path: str) -> RecdeckError:
    """
    Convert Pydantic validation errors to recdeck exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    # Format: "Invalid JSON: <actual error> [type=json_invalid, ..."
    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg

        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get('loc', ())) or "config"
            return ConfigValidationError(
                field=field,
                value=first_error.get('input'),
                error_msg=first_error.get('msg', 'validation failed'),
                file_path=file_path
            )
        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get('loc', ())) or "config"
                error_lines.append(f"  - {field}: {err.get('msg', 'validation failed')}")

            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=f"{len(errors)} validation errors:\n" + "\n".join(error_lines),
                file_path=file_path
            )

    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=error_msg,
        file_path=file_path
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, RecdeckError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None

"""Data models for recdeck."""

from .binding import KeyBinding, KeyBindingTable
from .config import DEFAULT_CONFIG_PATH, AppConfig, IconConfig
from .enums import Gesture, IconState, KeyState
from .persistence import PydanticPersistence

__all__ = [
    "AppConfig",
    "DEFAULT_CONFIG_PATH",
    "Gesture",
    "IconConfig",
    "IconState",
    "KeyBinding",
    "KeyBindingTable",
    "KeyState",
    "PydanticPersistence",
]

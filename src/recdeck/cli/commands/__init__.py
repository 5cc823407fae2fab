"""CLI commands for recdeck."""

from .bindings import bindings_group
from .config import config_group
from .daemon import daemon_group
from .devices import devices_group

__all__ = ["bindings_group", "config_group", "daemon_group", "devices_group"]

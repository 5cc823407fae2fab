"""Playback of recorded takes."""

from .launcher import DEFAULT_PLAYER, DEFAULT_SINK, PlaybackLauncher

__all__ = ["DEFAULT_PLAYER", "DEFAULT_SINK", "PlaybackLauncher"]

"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from .binding import KeyBinding, KeyBindingTable
from .enums import IconState
from .persistence import PydanticPersistence

DEFAULT_CONFIG_DIR = Path.home() / ".recdeck"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.json"


def _default_bindings() -> list[KeyBinding]:
    return [
        KeyBinding(key=0, path=Path("/tmp/recording_A.wav")),
        KeyBinding(key=1, path=Path("/tmp/recording_B.wav")),
    ]


class IconConfig(BaseModel):
    """Icon image files for each key state."""

    directory: Path = Field(
        default_factory=lambda: DEFAULT_CONFIG_DIR / "icons",
        description="Directory the icon file names are resolved against",
    )
    empty: str = Field(default="rec_off.png", description="Icon for a key with no recording")
    recording: str = Field(
        default="rec_on.png", description="Icon while recording, or while a take is held"
    )
    has_file: str = Field(default="play.png", description="Icon for a key with a recording")

    def path_for(self, state: IconState) -> Path:
        """Resolve the icon file for a state."""
        names = {
            IconState.EMPTY: self.empty,
            IconState.RECORDING: self.recording,
            IconState.HAS_FILE: self.has_file,
        }
        return self.directory / names[state]


class AppConfig(BaseModel):
    """Application configuration and settings."""

    # Recording daemon
    socket_path: Path = Field(
        default=Path("/tmp/rust-audio-monitor.sock"),
        description="Unix socket of the recording daemon",
    )
    daemon_timeout: float | None = Field(
        default=5.0,
        gt=0,
        description="Seconds to wait on a daemon exchange (None = wait forever)",
    )

    # Playback
    player: str = Field(default="pw-play", description="External player executable")
    playback_sink: str | None = Field(
        default="MyMixer",
        description="Output sink passed to the player with --target (None = default output)",
    )

    # Gestures
    hold_threshold: float = Field(
        default=2.0,
        gt=0,
        description="Seconds a key with a recording must be held to delete it",
    )

    # Panel
    brightness: int = Field(default=50, ge=0, le=100, description="Panel brightness (percent)")
    read_timeout_ms: int = Field(
        default=100, gt=0, description="How long each panel read waits for events (milliseconds)"
    )
    icons: IconConfig = Field(default_factory=IconConfig, description="Key icon images")

    bindings: list[KeyBinding] = Field(
        default_factory=_default_bindings,
        description="Panel keys and the recording files they control",
    )

    @field_validator("bindings")
    @classmethod
    def validate_unique_keys(cls, v: list[KeyBinding]) -> list[KeyBinding]:
        """Ensure each key is bound at most once."""
        seen: set[int] = set()
        for binding in v:
            if binding.key in seen:
                raise ValueError(f"key {binding.key} is bound more than once")
            seen.add(binding.key)
        return v

    def binding_table(self) -> KeyBindingTable:
        """Build the immutable key binding table."""
        return KeyBindingTable(self.bindings)

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.recdeck/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH
        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_CONFIG_PATH
        PydanticPersistence.save_json(self, path)

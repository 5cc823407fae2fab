"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import Mock

import numpy as np
import pytest
import soundfile as sf

from recdeck.core import ButtonStateMachine
from recdeck.daemon import DaemonClient, DaemonStatus
from recdeck.devices import PanelEvent
from recdeck.exceptions import PanelReadError
from recdeck.icons import IconStore
from recdeck.models import IconState, KeyBinding, KeyBindingTable
from recdeck.playback import PlaybackLauncher


class FakePanel:
    """In-memory panel that records what was drawn and replays scripted events."""

    def __init__(self, key_count: int = 15, batches: list[list[PanelEvent]] | None = None):
        self._key_count = key_count
        self._batches = list(batches or [])
        self.staged: dict[int, object] = {}
        self.shown: dict[int, object] = {}
        self.flush_count = 0
        self.clear_count = 0
        self.brightness: int | None = None
        self.closed = False

    def read_events(self, timeout_ms: int) -> list[PanelEvent]:
        if not self._batches:
            raise PanelReadError("no more scripted events")
        return self._batches.pop(0)

    def set_button_image(self, key, image) -> None:
        self.staged[key] = image

    def flush(self) -> None:
        self.shown.update(self.staged)
        self.staged.clear()
        self.flush_count += 1

    def clear_all_button_images(self) -> None:
        self.clear_count += 1
        for key in range(self._key_count):
            self.staged[key] = None

    def key_count(self) -> int:
        return self._key_count

    def set_brightness(self, percent: int) -> None:
        self.brightness = percent

    def close(self) -> None:
        self.closed = True


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


def write_wav(path: Path, duration: float = 0.1, sample_rate: int = 44100) -> Path:
    """Write a short sine wave WAV file."""
    t = np.linspace(0, duration, int(sample_rate * duration), dtype=np.float32)
    audio_data = np.sin(2 * np.pi * 440 * t).astype(np.float32)
    sf.write(str(path), audio_data, sample_rate)
    return path


@pytest.fixture
def recording_file(temp_dir):
    """An existing recording for key 0."""
    return write_wav(temp_dir / "recording_A.wav")


@pytest.fixture
def bindings(temp_dir):
    """Keys 0 and 1 bound to files in the temp directory."""
    return KeyBindingTable([
        KeyBinding(key=0, path=temp_dir / "recording_A.wav"),
        KeyBinding(key=1, path=temp_dir / "recording_B.wav"),
    ])


@pytest.fixture
def icons():
    """Solid-colour icons."""
    return IconStore.fallback()


@pytest.fixture
def panel():
    return FakePanel()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def daemon():
    """Daemon client mock that reports idle and accepts every command."""
    client = Mock(spec=DaemonClient)
    client.status.return_value = DaemonStatus("Listening")
    client.start_recording.return_value = "OK"
    client.stop_recording.return_value = "OK"
    return client


@pytest.fixture
def launcher():
    return Mock(spec=PlaybackLauncher)


@pytest.fixture
def machine(bindings, daemon, launcher, icons, panel, clock):
    """State machine wired to fakes."""
    return ButtonStateMachine(
        bindings=bindings,
        daemon=daemon,
        launcher=launcher,
        icons=icons,
        panel=panel,
        hold_threshold=2.0,
        clock=clock,
    )


@pytest.fixture
def shown_state(panel, icons):
    """Return the IconState currently displayed on a key (None if blank)."""
    def _shown(key: int) -> IconState | None:
        image = panel.shown.get(key)
        for state in IconState:
            if image is icons.image_for(state):
                return state
        return None
    return _shown

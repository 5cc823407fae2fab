"""Tests for the playback launcher."""

import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from recdeck.exceptions import PlaybackError
from recdeck.playback import PlaybackLauncher


def completed(returncode: int = 0, stderr: str = "") -> Mock:
    return Mock(returncode=returncode, stderr=stderr)


@pytest.mark.unit
class TestBuildCommand:

    def test_with_sink(self):
        launcher = PlaybackLauncher(player="pw-play", sink="MyMixer")
        assert launcher.build_command(Path("/tmp/a.wav")) == [
            "pw-play", "--target", "MyMixer", "/tmp/a.wav"
        ]

    def test_default_output(self):
        launcher = PlaybackLauncher(player="aplay", sink=None)
        assert launcher.build_command(Path("/tmp/a.wav")) == ["aplay", "/tmp/a.wav"]


@pytest.mark.unit
class TestRun:

    @patch("recdeck.playback.launcher.subprocess.run")
    def test_success(self, mock_run):
        mock_run.return_value = completed(0)

        PlaybackLauncher().run(Path("/tmp/a.wav"))

        args, kwargs = mock_run.call_args
        assert args[0] == ["pw-play", "--target", "MyMixer", "/tmp/a.wav"]
        assert kwargs["stdout"] is subprocess.DEVNULL

    @patch("recdeck.playback.launcher.subprocess.run")
    def test_non_zero_exit(self, mock_run):
        mock_run.return_value = completed(1, "target not found")

        with pytest.raises(PlaybackError) as exc_info:
            PlaybackLauncher().run(Path("/tmp/a.wav"))

        assert "exit status 1" in exc_info.value.reason
        assert "target not found" in exc_info.value.reason

    @patch("recdeck.playback.launcher.subprocess.run")
    def test_spawn_failure(self, mock_run):
        mock_run.side_effect = FileNotFoundError("pw-play")

        with pytest.raises(PlaybackError) as exc_info:
            PlaybackLauncher().run(Path("/tmp/a.wav"))

        assert "could not start" in exc_info.value.reason


@pytest.mark.unit
class TestPlay:

    @patch("recdeck.playback.launcher.subprocess.run")
    def test_play_runs_in_background(self, mock_run):
        mock_run.return_value = completed(0)

        thread = PlaybackLauncher(sink=None).play(Path("/tmp/a.wav"))
        thread.join(timeout=5)

        assert thread.daemon
        mock_run.assert_called_once()

    @patch("recdeck.playback.launcher.subprocess.run")
    def test_play_failure_is_only_logged(self, mock_run, caplog):
        mock_run.side_effect = OSError("no such file")

        thread = PlaybackLauncher(player="missing-player").play(Path("/tmp/a.wav"))
        thread.join(timeout=5)

        assert "missing-player" in caplog.text

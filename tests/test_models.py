"""Tests for configuration and binding models."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from recdeck.exceptions import ConfigFileInvalidError, ConfigValidationError
from recdeck.models import AppConfig, Gesture, IconConfig, IconState, KeyBinding, KeyBindingTable


@pytest.mark.unit
class TestGesture:

    @pytest.mark.parametrize("elapsed,expected", [
        (0.0, Gesture.TAP),
        (0.5, Gesture.TAP),
        (1.999, Gesture.TAP),
        (2.0, Gesture.HOLD),
        (2.5, Gesture.HOLD),
    ])
    def test_classify(self, elapsed, expected):
        assert Gesture.classify(elapsed, 2.0) is expected


@pytest.mark.unit
class TestKeyBindingTable:

    def test_lookup(self):
        table = KeyBindingTable([
            KeyBinding(key=3, path=Path("/tmp/c.wav")),
            KeyBinding(key=0, path=Path("/tmp/a.wav")),
        ])

        assert 0 in table
        assert 1 not in table
        assert table.path_for(3) == Path("/tmp/c.wav")
        assert table.path_for(1) is None
        assert table.get(0).key == 0
        assert [b.key for b in table] == [0, 3]
        assert len(table) == 2

    def test_duplicate_keys_rejected(self):
        with pytest.raises(ConfigValidationError):
            KeyBindingTable([
                KeyBinding(key=0, path=Path("/tmp/a.wav")),
                KeyBinding(key=0, path=Path("/tmp/b.wav")),
            ])

    def test_binding_is_frozen(self):
        binding = KeyBinding(key=0, path=Path("/tmp/a.wav"))
        with pytest.raises(ValidationError):
            binding.key = 1

    def test_negative_key_rejected(self):
        with pytest.raises(ValidationError):
            KeyBinding(key=-1, path=Path("/tmp/a.wav"))


@pytest.mark.unit
class TestAppConfig:

    def test_defaults(self):
        config = AppConfig()

        assert config.socket_path == Path("/tmp/rust-audio-monitor.sock")
        assert config.player == "pw-play"
        assert config.playback_sink == "MyMixer"
        assert config.hold_threshold == 2.0
        assert config.brightness == 50
        assert [(b.key, b.path) for b in config.bindings] == [
            (0, Path("/tmp/recording_A.wav")),
            (1, Path("/tmp/recording_B.wav")),
        ]

    def test_icon_paths(self, temp_dir):
        icons = IconConfig(directory=temp_dir)
        assert icons.path_for(IconState.EMPTY) == temp_dir / "rec_off.png"
        assert icons.path_for(IconState.RECORDING) == temp_dir / "rec_on.png"
        assert icons.path_for(IconState.HAS_FILE) == temp_dir / "play.png"

    def test_duplicate_binding_keys_rejected(self):
        with pytest.raises(ValidationError):
            AppConfig(bindings=[
                KeyBinding(key=0, path=Path("/tmp/a.wav")),
                KeyBinding(key=0, path=Path("/tmp/b.wav")),
            ])

    def test_missing_file_gives_defaults(self, temp_dir):
        config = AppConfig.load_or_default(temp_dir / "missing.json")
        assert config == AppConfig()

    def test_save_and_load(self, temp_dir):
        path = temp_dir / "config.json"
        config = AppConfig(
            hold_threshold=1.5,
            playback_sink=None,
            bindings=[KeyBinding(key=4, path=temp_dir / "x.wav")],
        )

        config.save(path)
        loaded = AppConfig.load_or_default(path)

        assert loaded.hold_threshold == 1.5
        assert loaded.playback_sink is None
        assert loaded.binding_table().path_for(4) == temp_dir / "x.wav"

    def test_save_keeps_backup(self, temp_dir):
        path = temp_dir / "config.json"
        AppConfig(brightness=10).save(path)
        AppConfig(brightness=20).save(path)

        backup = json.loads((temp_dir / "config.json.bak").read_text())
        assert backup["brightness"] == 10

    def test_invalid_json(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text('{"brightness": 10,}')

        with pytest.raises(ConfigFileInvalidError):
            AppConfig.load_or_default(path)

    def test_empty_file(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text("")

        with pytest.raises(ConfigFileInvalidError):
            AppConfig.load_or_default(path)

    def test_invalid_value(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text('{"hold_threshold": -1}')

        with pytest.raises(ConfigValidationError) as exc_info:
            AppConfig.load_or_default(path)

        assert exc_info.value.field == "hold_threshold"
        assert str(path) in exc_info.value.recovery_hint

    def test_duplicate_keys_in_file(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text(json.dumps({"bindings": [
            {"key": 0, "path": "/tmp/a.wav"},
            {"key": 0, "path": "/tmp/b.wav"},
        ]}))

        with pytest.raises(ConfigValidationError) as exc_info:
            AppConfig.load_or_default(path)

        assert exc_info.value.field == "bindings"

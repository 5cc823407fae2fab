"""Tests for recording session and hold tracking."""

import pytest

from recdeck.core import HoldTracker, RecordingSession
from recdeck.exceptions import RecordingAlreadyActiveError


@pytest.mark.unit
class TestRecordingSession:

    def test_starts_idle(self):
        session = RecordingSession()
        assert session.active_key is None
        assert not session.is_active(0)

    def test_begin_and_end(self):
        session = RecordingSession()
        session.begin(3)
        assert session.active_key == 3
        assert session.is_active(3)

        assert session.end(3) is True
        assert session.active_key is None

    def test_second_key_is_refused(self):
        session = RecordingSession()
        session.begin(0)

        with pytest.raises(RecordingAlreadyActiveError) as exc_info:
            session.begin(1)

        assert exc_info.value.active_key == 0
        assert session.active_key == 0

    def test_end_by_other_key_does_nothing(self):
        session = RecordingSession()
        session.begin(0)

        assert session.end(1) is False
        assert session.active_key == 0


@pytest.mark.unit
class TestHoldTracker:

    def test_finish_returns_elapsed(self):
        holds = HoldTracker()
        holds.start(2, 10.0)
        assert holds.is_holding(2)

        assert holds.finish(2, 12.5) == pytest.approx(2.5)
        assert not holds.is_holding(2)

    def test_finish_untracked_key(self):
        assert HoldTracker().finish(4, 1.0) is None

    def test_clear(self):
        holds = HoldTracker()
        holds.start(0, 1.0)
        holds.start(1, 1.0)
        assert sorted(holds.keys()) == [0, 1]

        holds.clear()
        assert holds.keys() == []

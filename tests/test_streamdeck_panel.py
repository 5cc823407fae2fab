"""Tests for the Stream Deck panel driver with a mocked device."""

from unittest.mock import MagicMock, patch

import pytest
from PIL import Image
from StreamDeck.Transport.Transport import TransportError

from recdeck.devices import ButtonDownEvent, ButtonUpEvent
from recdeck.devices.streamdeck import StreamDeckPanel, discover_panels, open_first_panel
from recdeck.exceptions import PanelError, PanelNotFoundError, PanelReadError


def make_deck(serial: str = "AL000001", key_count: int = 15) -> MagicMock:
    deck = MagicMock()
    deck.connected.return_value = True
    deck.key_count.return_value = key_count
    deck.deck_type.return_value = "Stream Deck Original"
    deck.get_serial_number.return_value = serial
    deck.is_visual.return_value = True
    return deck


@pytest.fixture
def deck():
    return make_deck()


@pytest.fixture
def pil_helper():
    with patch("recdeck.devices.streamdeck.PILHelper") as helper:
        helper.create_scaled_key_image.side_effect = lambda deck, image, margins: image
        helper.to_native_key_format.side_effect = lambda deck, image: ("native", image)
        yield helper


@pytest.mark.unit
class TestStreamDeckPanel:

    def test_open_installs_callback(self, deck):
        panel = StreamDeckPanel(deck)
        panel.open()

        deck.open.assert_called_once()
        deck.reset.assert_called_once()
        deck.set_key_callback.assert_called_once_with(panel._on_key_change)

    def test_open_failure(self, deck):
        deck.open.side_effect = TransportError("busy")

        with pytest.raises(PanelError):
            StreamDeckPanel(deck).open()

    def test_callbacks_become_events_in_order(self, deck):
        panel = StreamDeckPanel(deck)
        panel._on_key_change(deck, 3, True)
        panel._on_key_change(deck, 3, False)
        panel._on_key_change(deck, 4, True)

        assert panel.read_events(10) == [ButtonDownEvent(3), ButtonUpEvent(3), ButtonDownEvent(4)]
        assert panel.read_events(10) == []

    def test_read_from_disconnected_deck_fails(self, deck):
        deck.connected.return_value = False

        with pytest.raises(PanelReadError):
            StreamDeckPanel(deck).read_events(10)

    def test_images_are_written_on_flush(self, deck, pil_helper):
        panel = StreamDeckPanel(deck)
        image = Image.new("RGB", (72, 72))

        panel.set_button_image(2, image)
        deck.set_key_image.assert_not_called()

        panel.flush()
        deck.set_key_image.assert_called_once_with(2, ("native", image))

        panel.flush()
        assert deck.set_key_image.call_count == 1

    def test_clear_all_stages_every_key(self, deck, pil_helper):
        pil_helper.create_key_image.return_value = "blank"
        panel = StreamDeckPanel(deck)

        panel.clear_all_button_images()
        panel.flush()

        assert deck.set_key_image.call_count == 15

    def test_flush_transport_error(self, deck, pil_helper):
        deck.set_key_image.side_effect = TransportError("unplugged")
        panel = StreamDeckPanel(deck)
        panel.set_button_image(0, Image.new("RGB", (72, 72)))

        with pytest.raises(PanelError):
            panel.flush()

    def test_key_count_and_brightness(self, deck):
        panel = StreamDeckPanel(deck)
        panel.set_brightness(50)

        assert panel.key_count() == 15
        deck.set_brightness.assert_called_once_with(50)


@pytest.mark.unit
class TestDiscovery:

    @patch("recdeck.devices.streamdeck.DeviceManager")
    def test_discover(self, mock_manager):
        mock_manager.return_value.enumerate.return_value = [make_deck("A"), make_deck("B", 32)]

        panels = discover_panels()

        assert [(p.serial, p.key_count) for p in panels] == [("A", 15), ("B", 32)]

    @patch("recdeck.devices.streamdeck.DeviceManager")
    def test_open_first(self, mock_manager):
        first = make_deck("A")
        mock_manager.return_value.enumerate.return_value = [first, make_deck("B")]

        panel = open_first_panel()

        assert panel._deck is first

    @patch("recdeck.devices.streamdeck.DeviceManager")
    def test_open_by_serial(self, mock_manager):
        first, second = make_deck("A"), make_deck("B")
        mock_manager.return_value.enumerate.return_value = [first, second]

        panel = open_first_panel("B")

        assert panel._deck is second
        first.close.assert_called_once()
        first.reset.assert_not_called()
        first.set_key_callback.assert_not_called()
        second.set_key_callback.assert_called_once()

    @patch("recdeck.devices.streamdeck.DeviceManager")
    def test_deck_that_fails_to_open_is_skipped(self, mock_manager):
        broken, working = make_deck("A"), make_deck("B")
        broken.open.side_effect = TransportError("busy")
        mock_manager.return_value.enumerate.return_value = [broken, working]

        panel = open_first_panel()

        assert panel._deck is working

    @patch("recdeck.devices.streamdeck.DeviceManager")
    def test_deck_that_fails_to_reset_is_skipped(self, mock_manager):
        broken, working = make_deck("A"), make_deck("B")
        broken.reset.side_effect = TransportError("stalled")
        mock_manager.return_value.enumerate.return_value = [broken, working]

        panel = open_first_panel()

        assert panel._deck is working
        broken.set_key_callback.assert_not_called()

    @patch("recdeck.devices.streamdeck.DeviceManager")
    def test_none_found(self, mock_manager):
        mock_manager.return_value.enumerate.return_value = []

        with pytest.raises(PanelNotFoundError):
            open_first_panel()

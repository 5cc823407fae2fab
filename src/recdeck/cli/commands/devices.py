"""Panel device commands."""

import logging

import click

logger = logging.getLogger(__name__)


@click.group(name="devices")
def devices_group():
    """Stream Deck device commands."""
    pass


@devices_group.command(name="list")
def list_devices():
    """List attached Stream Decks."""
    from recdeck.devices.streamdeck import discover_panels

    panels = discover_panels()

    if not panels:
        click.echo("No Stream Decks found.")
        return

    click.echo("Stream Decks:\n")
    for i, panel in enumerate(panels):
        click.echo(f"  [{i}] {panel.deck_type} (serial {panel.serial}, {panel.key_count} keys)")

"""Key binding commands."""

import logging
from pathlib import Path

import click
import soundfile as sf

logger = logging.getLogger(__name__)


def describe_recording(path: Path) -> str:
    """Describe the take at `path` for display."""
    if not path.exists():
        return "empty"
    try:
        info = sf.info(str(path))
    except (RuntimeError, OSError) as e:
        # soundfile raises LibsndfileError (a RuntimeError) for unreadable audio
        logger.debug(f"Could not read audio info for {path}: {e}")
        return "recorded (unreadable audio)"
    return f"recorded ({info.duration:.1f}s, {info.samplerate} Hz, {info.channels} ch)"


@click.group(name="bindings")
def bindings_group():
    """Key binding commands."""
    pass


@bindings_group.command(name="list")
@click.pass_context
def list_bindings(ctx):
    """List bound keys and the state of their recordings."""
    from recdeck.cli.main import load_config

    config = load_config(ctx)
    table = config.binding_table()

    if not len(table):
        click.echo("No keys are bound.")
        return

    click.echo("Key bindings:\n")
    for binding in table:
        click.echo(f"  [{binding.key}] {binding.path}  {describe_recording(binding.path)}")

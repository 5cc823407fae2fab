"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from .commands import bindings_group, config_group, daemon_group, devices_group

logger = logging.getLogger(__name__)

DEFAULT_LOG_DIR = Path.home() / ".recdeck" / "logs"


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Pick the log file for the given flags."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "recdeck-debug.log"
    return DEFAULT_LOG_DIR / "recdeck.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    if debug or verbose >= 2:
        console_level = logging.DEBUG
    elif verbose == 1:
        console_level = logging.INFO
    else:
        console_level = logging.WARNING

    file_level = logging.DEBUG if debug else getattr(logging, log_level.upper())

    log_path = resolve_log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Rotating file handler (keeps last 5 files, max 10MB each)
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

    root_logger = logging.getLogger()
    root_logger.setLevel(min(file_level, console_level))
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(file_level)}, file={log_path}")


def report_error(error: Exception, log_path: Optional[Path] = None) -> None:
    """Print an error without a traceback and exit with status 1."""
    from recdeck.exceptions import format_error_for_display

    user_message, recovery_hint = format_error_for_display(error)

    click.echo("\n" + "=" * 70, err=True)
    click.echo(f"ERROR: {user_message}", err=True)
    click.echo("=" * 70, err=True)

    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)

    if log_path:
        click.echo(f"\nFor details, check the log file: {log_path}", err=True)

    sys.exit(1)


def load_config(ctx: click.Context):
    """Load the config named on the command line, reporting errors and exiting."""
    from recdeck.exceptions import RecdeckError
    from recdeck.models import AppConfig

    try:
        return AppConfig.load_or_default(ctx.obj.get('config_path'))
    except RecdeckError as e:
        report_error(e)


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version="0.1.0", prog_name="recdeck")
@click.option(
    '--config',
    '-c',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.recdeck/config.json)'
)
@click.option(
    '--serial',
    type=str,
    default=None,
    help='Serial number of the Stream Deck to use (default: first found)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./recdeck-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    config_path: Optional[Path],
    serial: Optional[str],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    recdeck - record, play back and delete audio takes from a Stream Deck.

    \b
    Each bound key cycles through three states:
    - Empty: press and hold to record, release to stop
    - Has recording: tap to play it back
    - Has recording: hold for 2 seconds to delete it

    Releasing the last key on the deck exits.

    \b
    Examples:
      # Run with the default config
      recdeck

      # Use a specific deck and config
      recdeck --serial AL12345 --config ./studio.json

      # Check that the recording daemon is up
      recdeck daemon status

      # List attached decks
      recdeck devices list
    """
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path

    if ctx.invoked_subcommand is not None:
        return

    # Lazy imports keep --help and utility commands free of the HID backend
    from recdeck.core import RecdeckApplication
    from recdeck.devices.streamdeck import open_first_panel
    from recdeck.exceptions import RecdeckError
    from recdeck.models import AppConfig

    setup_logging(verbose, debug, log_file, log_level)
    log_path = resolve_log_path(debug, log_file)

    logger.info("Starting recdeck")

    panel = None
    try:
        config_obj = AppConfig.load_or_default(config_path)
        panel = open_first_panel(serial)
        app = RecdeckApplication(config_obj, panel)
        app.run()
    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        click.echo("\nShutting down...", err=True)
    except RecdeckError as e:
        logger.error(f"recdeck stopped: {e.technical_message}")
        report_error(e, log_path)
    except Exception as e:
        logger.exception("Error running application")
        report_error(e, log_path)
    finally:
        if panel is not None:
            panel.close()


cli.add_command(bindings_group)
cli.add_command(config_group)
cli.add_command(daemon_group)
cli.add_command(devices_group)

if __name__ == "__main__":
    cli()

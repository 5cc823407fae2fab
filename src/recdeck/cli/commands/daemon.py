"""Recording daemon commands."""

import click

from recdeck.daemon import DaemonClient
from recdeck.exceptions import DaemonConnectionError


def _client(ctx: click.Context) -> DaemonClient:
    from recdeck.cli.main import load_config

    config = load_config(ctx)
    return DaemonClient(config.socket_path, timeout=config.daemon_timeout)


@click.group(name="daemon")
def daemon_group():
    """Talk to the recording daemon."""
    pass


@daemon_group.command(name="status")
@click.pass_context
def status(ctx):
    """Show the daemon's STATUS response."""
    from recdeck.cli.main import report_error

    client = _client(ctx)
    try:
        result = client.status()
    except DaemonConnectionError as e:
        report_error(e)
        return

    state = "idle (ready to record)" if result.is_listening else "busy"
    click.echo(f"Daemon at {client.socket_path}: {state}")
    click.echo(f"  Response: {result.raw}")


@daemon_group.command(name="send")
@click.argument('command', nargs=-1, required=True)
@click.pass_context
def send(ctx, command: tuple[str, ...]):
    """
    Send a raw command (STATUS, START <path>, STOP) and print the response.

    \b
    Example:
      recdeck daemon send START /tmp/test.wav
    """
    from recdeck.cli.main import report_error

    client = _client(ctx)
    try:
        response = client.send(" ".join(command))
    except DaemonConnectionError as e:
        report_error(e)
        return

    click.echo(response)

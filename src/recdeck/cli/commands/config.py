"""Configuration commands."""

import click

from recdeck.models import DEFAULT_CONFIG_PATH, AppConfig


@click.group(name="config")
def config_group():
    """Show or create the configuration file."""
    pass


@config_group.command(name="path")
@click.pass_context
def config_path(ctx):
    """Print the config file location."""
    click.echo(str(ctx.obj.get('config_path') or DEFAULT_CONFIG_PATH))


@config_group.command(name="show")
@click.pass_context
def show(ctx):
    """Print the effective configuration as JSON."""
    from recdeck.cli.main import load_config

    config = load_config(ctx)
    click.echo(config.model_dump_json(indent=2))


@config_group.command(name="init")
@click.option('--force', is_flag=True, help='Overwrite an existing config file')
@click.pass_context
def init(ctx, force: bool):
    """Write a config file with default values."""
    path = ctx.obj.get('config_path') or DEFAULT_CONFIG_PATH
    if path.exists() and not force:
        click.echo(f"Config already exists at {path} (use --force to overwrite)", err=True)
        raise click.exceptions.Exit(1)

    AppConfig().save(path)
    click.echo(f"Wrote default config to {path}")

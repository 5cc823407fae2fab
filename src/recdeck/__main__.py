"""Main entry point for recdeck."""

from recdeck.cli.main import cli

if __name__ == "__main__":
    cli()

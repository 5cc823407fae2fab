"""Command line interface for recdeck."""

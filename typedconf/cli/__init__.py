"""Command line interface."""

from typedconf.cli.main import cli


__all__ = ["cli"]

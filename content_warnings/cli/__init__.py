"""Command-line interface."""

from content_warnings.cli.main import cli


__all__ = ["cli"]

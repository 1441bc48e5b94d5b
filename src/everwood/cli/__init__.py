"""Command-line interface for Everwood."""

from everwood.cli.main import app

__all__ = ["app"]

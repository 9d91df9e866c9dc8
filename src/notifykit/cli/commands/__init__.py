"""CLI command modules."""

from notifykit.cli.commands import platforms, send

__all__ = ["platforms", "send"]

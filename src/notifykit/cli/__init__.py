"""Command-line interface for notifykit."""

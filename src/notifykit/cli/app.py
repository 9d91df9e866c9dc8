"""
Main Typer application for the notifykit CLI.

This module defines the root CLI application and registers all commands.
"""

from typing import Annotated

import typer

from notifykit import __version__
from notifykit.cli.commands import platforms, send
from notifykit.cli.output import print_info

# Create the main Typer app
app = typer.Typer(
    name="notifykit",
    help="Deliver notifications through Slack, Telegram, Pushover, PagerDuty and more.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=True,
    pretty_exceptions_show_locals=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print_info(f"notifykit version [green]{__version__}[/green]")
        raise typer.Exit()


# noinspection PyUnusedLocal
@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    [bold blue]notifykit[/bold blue] - notification dispatch

    Sends one message through the backend selected in the config file.
    """


app.command(name="send")(send.send)
app.command(name="platforms")(platforms.platforms)


if __name__ == "__main__":
    app()

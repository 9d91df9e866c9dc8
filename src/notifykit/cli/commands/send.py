"""
notifykit send - Deliver a message through the configured backend.

Usage:
    notifykit send "disk almost full" --config notify.yaml
    notifykit send "filled" --platform Telegram --extension '{"intent": {...}}'
"""

import json
from pathlib import Path
from typing import Annotated, Any, Optional

import typer

from notifykit.cli.output import (
    print_error,
    print_success,
    print_table,
    print_warning,
    setup_logging,
)
from notifykit.config import load_config
from notifykit.exceptions import NotifyError
from notifykit.models import Platform
from notifykit.router import Notify


def _parse_extension(raw: Optional[str]) -> Optional[dict[str, Any]]:
    if not raw:
        return None
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        print_error(f"Invalid --extension JSON: {e}")
        raise typer.Exit(2)
    if not isinstance(data, dict):
        print_error("--extension must be a JSON object")
        raise typer.Exit(2)
    return data


def send(
    message: Annotated[str, typer.Argument(help="Message text to deliver.")],
    config_path: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="YAML config file. NOTIFYKIT_* environment variables override it.",
        ),
    ] = None,
    platform: Annotated[
        Optional[Platform],
        typer.Option(
            "--platform",
            "-p",
            help="Override the configured platform.",
        ),
    ] = None,
    extension: Annotated[
        Optional[str],
        typer.Option(
            "--extension",
            "-e",
            help="Extension metadata as a JSON object.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug logging.",
        ),
    ] = False,
) -> None:
    """Send a message through the configured platform."""
    setup_logging(verbose)

    try:
        config = load_config(config_path)
        if platform is not None:
            config = config.model_copy(update={"platform": platform})

        report = Notify(config).send_sync(message, _parse_extension(extension))
    except NotifyError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if len(report.outcomes) > 1:
        print_table(
            ["Recipient", "Status", "Error"],
            [
                [o.recipient, "sent" if o.success else "failed", o.error or ""]
                for o in report.outcomes
            ],
            title=f"{report.platform.value} delivery",
        )

    if report.all_failed:
        print_warning(f"No recipient received the message via {report.platform.value}")
    elif report.failed:
        print_warning(
            f"Sent via {report.platform.value} with {len(report.failed)} failed recipient(s)"
        )
    else:
        print_success(f"Sent via {report.platform.value}")

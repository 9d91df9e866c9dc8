"""
notifykit platforms - List supported notification platforms.
"""

from notifykit.cli.output import print_table
from notifykit.models import Platform
from notifykit.router import Notify


def platforms() -> None:
    """List platform tags and whether they are routed."""
    routed = set(Notify.routed_platforms())
    print_table(
        ["Platform", "Routed"],
        [[p.value, "yes" if p in routed else "no (reserved)"] for p in Platform],
        title="Notification platforms",
    )

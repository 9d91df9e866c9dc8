"""Telegram destination resolution.

Turns the human-entered ``channel`` value plus the ``topic_id`` / ``chat_id``
overrides into the chat id, handle and topic the Telegram adapter sends to.
"""

from typing import Mapping

from pydantic import BaseModel

from notifykit.exceptions import ValidationError
from notifykit.models import Platform


class ResolvedDestination(BaseModel):
    """Concrete Telegram destination."""

    chat_id: int = 0
    chat_name: str = ""  # public handle without the leading '@'
    topic_id: int = 0


def parse_id(value: str | None, what: str) -> int:
    """Parse a numeric Telegram id.

    Absent or blank values mean "not set" and give 0. Anything else must be
    an integer.
    """
    if value is None or not value.strip():
        return 0
    try:
        return int(value.strip())
    except ValueError as e:
        raise ValidationError(
            f"invalid {what}: {value!r} is not a numeric id",
            platform=Platform.TELEGRAM.value,
        ) from e


def resolve_destination(channel: str, others: Mapping[str, str]) -> ResolvedDestination:
    """Resolve a Telegram destination.

    A channel containing '@' is a public handle (chat id 0). Only one leading
    '@' is dropped; a handle with another '@' in it is rejected. Otherwise
    the channel is parsed as a chat id. A non-zero ``others["chat_id"]``
    overrides either, so a handle that was looked up out of band is sent to
    by id.
    """
    if "@" in channel:
        chat_id = 0
        chat_name = channel.strip().removeprefix("@")
        if not chat_name or "@" in chat_name:
            raise ValidationError(
                f"invalid channel: {channel!r} is not a public handle",
                platform=Platform.TELEGRAM.value,
            )
    else:
        chat_id = parse_id(channel, "channel")
        chat_name = ""

    topic_id = parse_id(others.get("topic_id"), "topic_id")

    override = parse_id(others.get("chat_id"), "chat_id")
    if override != 0:
        chat_id = override

    return ResolvedDestination(chat_id=chat_id, chat_name=chat_name, topic_id=topic_id)

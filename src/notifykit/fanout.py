"""Concurrent delivery of one message to many Telegram chats."""

import asyncio
import logging
from typing import Any, Optional, Sequence

from notifykit.exceptions import ValidationError
from notifykit.models import DeliveryOutcome, Platform

logger = logging.getLogger(__name__)


async def fan_out(
    bot: Any,
    message: str,
    chat_ids: Sequence[int],
    reply_markup: Optional[Any] = None,
) -> list[DeliveryOutcome]:
    """Send ``message`` to every chat id concurrently.

    One task per chat id, all started together; returns once every task has
    finished. A failed recipient is logged and recorded in its outcome and
    never affects the others.

    Args:
        bot: Object with an async ``send_message(chat_id=, text=, reply_markup=)``
        message: The message body
        chat_ids: Recipients, one delivery each (duplicates are sent twice)
        reply_markup: Optional inline keyboard attached to every message

    Returns:
        One outcome per chat id, in the order given
    """
    if not chat_ids:
        raise ValidationError("missing chat ids", platform=Platform.TELEGRAM.value)

    results = await asyncio.gather(
        *[
            bot.send_message(chat_id=chat_id, text=message, reply_markup=reply_markup)
            for chat_id in chat_ids
        ],
        return_exceptions=True,
    )

    outcomes = []
    for chat_id, result in zip(chat_ids, results):
        if isinstance(result, BaseException):
            logger.error(f"[TgBot] Failed to send bot message to {chat_id}: {result}")
            outcomes.append(
                DeliveryOutcome(recipient=str(chat_id), success=False, error=str(result))
            )
        else:
            outcomes.append(DeliveryOutcome(recipient=str(chat_id), success=True))

    failed = sum(1 for o in outcomes if not o.success)
    if failed:
        logger.warning(f"[TgBot] {failed}/{len(outcomes)} deliveries failed")
    return outcomes

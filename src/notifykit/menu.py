"""Inline trade menu for Telegram bot messages.

When a message is about exactly one token swap, the bot attaches a single
URL button that deep-links into the swap bot's mini app with the trade side
and token pre-filled.
"""

import base64
import json
import logging
from typing import Any, Optional

from pydantic import ValidationError as PydanticValidationError
from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from notifykit.config.schema import DEFAULT_TRADE_BOT
from notifykit.models import ZERO_ADDRESS, ExtensionMetadata, SwapIntent

logger = logging.getLogger(__name__)

TRADE_PATH = "/trade"
BUTTON_TEXT = "Buy"


def link_to_page(bot_id: str, path: str, data: Any) -> str:
    """Build a t.me mini app deep link carrying ``path`` and ``data``.

    The payload is compact, key-sorted JSON encoded with standard base64.
    """
    payload = json.dumps({"p": path, "d": data}, sort_keys=True, separators=(",", ":"))
    encoded = base64.b64encode(payload.encode("utf-8")).decode("ascii")
    return f"https://t.me/{bot_id}/swap?startapp={encoded}"


def trade_side(intent: SwapIntent) -> Optional[tuple[str, str]]:
    """Return (side, token) for a one-sided swap, or None if ambiguous."""
    if intent.buy_token == ZERO_ADDRESS and intent.sell_token != ZERO_ADDRESS:
        return "SELL", intent.sell_token
    if intent.sell_token == ZERO_ADDRESS and intent.buy_token != ZERO_ADDRESS:
        return "BUY", intent.buy_token
    return None


def _coerce(extension: Any) -> Optional[ExtensionMetadata]:
    if extension is None or isinstance(extension, ExtensionMetadata):
        return extension
    try:
        return ExtensionMetadata.model_validate(extension)
    except PydanticValidationError as e:
        logger.debug(f"Ignoring malformed extension metadata: {e}")
        return None


def build_trade_menu(
    extension: Any, bot_id: str = DEFAULT_TRADE_BOT
) -> Optional[InlineKeyboardMarkup]:
    """Derive the inline trade menu for a message, if any.

    Args:
        extension: ExtensionMetadata, a dict of the same shape, or None
        bot_id: Username of the bot hosting the trade page

    Returns:
        A one-button keyboard, or None when there is not exactly one
        one-sided swap intent
    """
    metadata = _coerce(extension)
    if metadata is None or metadata.intent is None:
        return None

    intents = metadata.intent.swap_intents
    if len(intents) != 1:
        return None

    side = trade_side(intents[0])
    if side is None:
        return None

    link = link_to_page(bot_id, TRADE_PATH, {"s": side[0], "t": side[1]})
    return InlineKeyboardMarkup([[InlineKeyboardButton(BUTTON_TEXT, url=link)]])

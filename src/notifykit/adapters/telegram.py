"""Telegram adapters using python-telegram-bot.

``TelegramAdapter`` sends to one resolved chat (group, channel or user).
``TelegramBotAdapter`` fans one message out to a list of chat ids and may
attach an inline trade menu.
"""

import logging
from typing import Any, Optional

from telegram import Bot
from telegram.error import TelegramError

from notifykit.adapters.base import BackendAdapter
from notifykit.config.schema import TelegramBotOptions, TelegramOptions
from notifykit.fanout import fan_out
from notifykit.menu import build_trade_menu
from notifykit.models import DeliveryOutcome, Platform

logger = logging.getLogger(__name__)


class TelegramAdapter(BackendAdapter):
    """Sends to a single chat, optionally inside a forum topic.

    A non-zero chat id wins; otherwise the public handle is used.
    """

    def __init__(self, options: TelegramOptions):
        self.options = options

    @property
    def platform(self) -> Platform:
        return Platform.TELEGRAM

    @property
    def target(self) -> int | str:
        if self.options.chat_id != 0:
            return self.options.chat_id
        return f"@{self.options.chat_name}"

    async def send(self, message: str) -> None:
        self._require(self.options.token, "token")
        self._require(self.options.chat_id or self.options.chat_name, "channel")
        self._require(message, "message")

        kwargs: dict[str, Any] = {"chat_id": self.target, "text": message}
        if self.options.chat_id != 0 and self.options.topic_id != 0:
            kwargs["message_thread_id"] = self.options.topic_id

        try:
            async with Bot(token=self.options.token) as bot:
                sent = await bot.send_message(**kwargs)
        except TelegramError as e:
            logger.error(f"Failed to send Telegram message to {self.target}: {e}")
            raise self._provider_error(f"telegram error: {e}") from e

        logger.debug(f"Telegram message {sent.message_id} sent to {self.target}")


class TelegramBotAdapter(BackendAdapter):
    """Sends the same message to every configured chat id concurrently."""

    def __init__(self, options: TelegramBotOptions):
        self.options = options

    @property
    def platform(self) -> Platform:
        return Platform.TELEGRAM

    async def send(self, message: str) -> None:
        """Broadcast without a menu.

        Per-recipient failures do not raise here either; use ``broadcast``
        to inspect them.
        """
        outcomes = await self.broadcast(message)
        if not any(o.success for o in outcomes):
            logger.warning(f"[TgBot] No chat received the message ({len(outcomes)} tried)")

    async def broadcast(
        self, message: str, extension: Optional[Any] = None
    ) -> list[DeliveryOutcome]:
        """Deliver to all chat ids and return the per-recipient outcomes.

        Individual failures are recorded, not raised. Only a bad token or
        missing input fails the whole call.
        """
        self._require(self.options.token, "token")
        self._require(self.options.chat_ids, "chat ids")
        self._require(message, "message")

        menu = build_trade_menu(extension, self.options.trade_bot)

        try:
            async with Bot(token=self.options.token) as bot:
                return await fan_out(bot, message, self.options.chat_ids, reply_markup=menu)
        except TelegramError as e:
            logger.error(f"[TgBot] init tg bot err: {e}")
            raise self._provider_error(f"telegram bot init failed: {e}") from e

"""Fake Telegram bot for exercising send paths without the network."""

from unittest.mock import MagicMock

from telegram.error import TelegramError

ADDRESS = "0x1111111111111111111111111111111111111111"


class FakeBot:
    """Stand-in for telegram.Bot that records sends and fails chosen chats."""

    def __init__(self, failing: tuple[int, ...] = ()) -> None:
        self.failing = set(failing)
        self.calls: list[dict] = []

    async def __aenter__(self) -> "FakeBot":
        return self

    async def __aexit__(self, *exc_info) -> bool:
        return False

    async def send_message(self, chat_id, text, reply_markup=None, **kwargs):
        self.calls.append(
            {"chat_id": chat_id, "text": text, "reply_markup": reply_markup, **kwargs}
        )
        if chat_id in self.failing:
            raise TelegramError("Chat not found")
        return MagicMock(message_id=len(self.calls))

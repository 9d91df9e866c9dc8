"""Backend adapter implementations."""

from notifykit.adapters.base import BackendAdapter
from notifykit.adapters.dingtalk import DingTalkAdapter
from notifykit.adapters.discord import DiscordAdapter
from notifykit.adapters.lark import LarkAdapter
from notifykit.adapters.pagerduty import PagerDutyAdapter
from notifykit.adapters.pushover import PushoverAdapter
from notifykit.adapters.ses import SesAdapter
from notifykit.adapters.slack import SlackAdapter
from notifykit.adapters.smtp import EmailAdapter
from notifykit.adapters.telegram import TelegramAdapter, TelegramBotAdapter

__all__ = [
    "BackendAdapter",
    "DingTalkAdapter",
    "DiscordAdapter",
    "EmailAdapter",
    "LarkAdapter",
    "PagerDutyAdapter",
    "PushoverAdapter",
    "SesAdapter",
    "SlackAdapter",
    "TelegramAdapter",
    "TelegramBotAdapter",
]

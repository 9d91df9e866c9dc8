"""
Pydantic configuration schema for notifykit.

``NotifyConfig`` is the flat record a caller fills in once. Each backend
adapter takes its own small options model, populated from the flat record
by the router.
"""

from pydantic import BaseModel, ConfigDict, Field

from notifykit.models import ChannelType, Platform

DEFAULT_TRADE_BOT = "official_swapbot"
DEFAULT_EMAIL_SUBJECT = "Notification"

# =============================================================================
# Root Configuration Model
# =============================================================================


class NotifyConfig(BaseModel):
    """
    Destination configuration for a ``Notify`` router.

    Only the fields the selected platform needs are read; the rest are
    ignored. ``others`` carries backend-specific overrides such as
    ``retryInterval``, ``retryExpire``, ``topic_id`` and ``chat_id``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    platform: Platform | None = None

    # Credentials and destination
    token: str = ""
    secret: str = ""
    channel: str = ""
    channel_type: ChannelType | None = None
    priority: int = 0

    # Paging
    source: str = ""
    severity: str = ""

    # Email
    to_email: str = ""
    sender: str = ""
    key: str = ""
    area: str = ""
    user: str = ""
    password: str = ""
    host: str = ""

    others: dict[str, str] = Field(default_factory=dict)
    chat_ids: list[int] = Field(default_factory=list)


# =============================================================================
# Per-backend Options
# =============================================================================


class PushoverOptions(BaseModel):
    """Pushover message options."""

    token: str = ""
    user: str = ""  # user or group key
    priority: int = 0
    retry: float = 0.0
    expire: float = 0.0


class SlackOptions(BaseModel):
    """Slack bot options."""

    token: str = ""
    channel: str = ""


class PagerDutyOptions(BaseModel):
    """PagerDuty Events API v2 options."""

    token: str = ""  # integration routing key
    source: str = ""
    severity: str = ""


class DiscordOptions(BaseModel):
    """Discord options.

    ``channel`` is either a webhook URL or a channel id used with a bot token.
    """

    token: str = ""
    channel: str = ""


class TelegramOptions(BaseModel):
    """Telegram single-destination options."""

    token: str = ""
    chat_id: int = 0
    chat_name: str = ""
    topic_id: int = 0


class TelegramBotOptions(BaseModel):
    """Telegram bot fan-out options."""

    token: str = ""
    chat_ids: list[int] = Field(default_factory=list)
    trade_bot: str = DEFAULT_TRADE_BOT


class DingTalkOptions(BaseModel):
    """DingTalk custom robot options."""

    webhook_url: str = ""
    secret: str = ""


class EmailOptions(BaseModel):
    """SMTP relay options."""

    to_email: str = ""
    user: str = ""
    password: str = ""
    host: str = ""  # host or host:port
    subject: str = DEFAULT_EMAIL_SUBJECT


class SesOptions(BaseModel):
    """AWS SES options."""

    to_email: str = ""
    key: str = ""
    secret: str = ""
    area: str = ""  # AWS region
    sender: str = ""
    subject: str = DEFAULT_EMAIL_SUBJECT


class LarkOptions(BaseModel):
    """Lark (Feishu) custom bot options."""

    token: str = ""

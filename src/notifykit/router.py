"""Notification router.

``Notify`` is the public entry point: it holds one immutable config, picks
the adapter for the configured platform and delivers a message through it.
"""

import asyncio
import logging
from typing import Any, Callable, Optional

from notifykit.adapters import (
    BackendAdapter,
    DingTalkAdapter,
    DiscordAdapter,
    EmailAdapter,
    LarkAdapter,
    PagerDutyAdapter,
    PushoverAdapter,
    SesAdapter,
    SlackAdapter,
    TelegramAdapter,
    TelegramBotAdapter,
)
from notifykit.config.schema import (
    DEFAULT_EMAIL_SUBJECT,
    DEFAULT_TRADE_BOT,
    DingTalkOptions,
    DiscordOptions,
    EmailOptions,
    LarkOptions,
    NotifyConfig,
    PagerDutyOptions,
    PushoverOptions,
    SesOptions,
    SlackOptions,
    TelegramBotOptions,
    TelegramOptions,
)
from notifykit.exceptions import NotifyError, UnsupportedPlatformError, ValidationError
from notifykit.models import (
    ChannelType,
    DeliveryOutcome,
    DeliveryReport,
    ExtensionMetadata,
    Platform,
)
from notifykit.resolver import resolve_destination

logger = logging.getLogger(__name__)


def _parse_float(value: Optional[str], what: str, platform: Platform) -> float:
    if value is None or not value.strip():
        return 0.0
    try:
        return float(value)
    except ValueError as e:
        raise ValidationError(f"invalid {what}: {value!r}", platform=platform.value) from e


class Notify:
    """Routes a message to the backend selected by ``config.platform``.

    The config is never modified. Each ``send`` builds a fresh adapter and
    makes one delivery attempt (one batch for Telegram bot fan-out); nothing
    is retried.
    """

    def __init__(self, config: NotifyConfig) -> None:
        self._config = config
        self._builders: dict[Platform, Callable[[], BackendAdapter]] = {
            Platform.PUSHOVER: self._pushover,
            Platform.SLACK: self._slack,
            Platform.PAGERDUTY: self._pagerduty,
            Platform.DISCORD: self._discord,
            Platform.TELEGRAM: self._telegram,
            Platform.DINGTALK: self._dingtalk,
            Platform.EMAIL: self._email,
            Platform.SES: self._ses,
            Platform.LARK: self._lark,
        }

    @property
    def config(self) -> NotifyConfig:
        return self._config

    @classmethod
    def routed_platforms(cls) -> list[Platform]:
        """Platforms that have an adapter."""
        return [p for p in Platform if p is not Platform.ARGUS]

    async def send(
        self,
        message: str,
        extension: Optional[ExtensionMetadata | dict[str, Any]] = None,
    ) -> DeliveryReport:
        """Deliver a message through the configured backend.

        Args:
            message: The message body
            extension: Optional call-scoped metadata; only used by the
                Telegram bot path to derive an inline trade menu

        Returns:
            DeliveryReport with one outcome per recipient. Fan-out sends
            succeed even when some or all recipients failed; inspect
            ``report.failed`` to decide what that means for the caller.

        Raises:
            UnsupportedPlatformError: If no adapter is routed for the platform
            ValidationError: If the adapter is missing required input
            ProviderError: If the backend rejects or fails the call
        """
        platform = self._config.platform
        if platform is None or platform not in self._builders:
            name = platform.value if platform else "unset"
            raise UnsupportedPlatformError(
                f"not supported notify platform: {name}", platform=name
            )

        logger.info(f"Sending notification via {platform.value}")

        try:
            if self._is_bot_fanout():
                outcomes = await self._telegram_bot().broadcast(message, extension)
            else:
                await self._builders[platform]().send(message)
                outcomes = [DeliveryOutcome(recipient=self._recipient(), success=True)]
        except NotifyError as e:
            logger.error(f"{platform.value} notification failed: {e}")
            raise

        return DeliveryReport(platform=platform, outcomes=outcomes)

    def send_sync(
        self,
        message: str,
        extension: Optional[ExtensionMetadata | dict[str, Any]] = None,
    ) -> DeliveryReport:
        """Blocking variant of ``send`` for callers without an event loop."""
        return asyncio.run(self.send(message, extension))

    def _is_bot_fanout(self) -> bool:
        return (
            self._config.platform is Platform.TELEGRAM
            and self._config.channel_type is ChannelType.BOT
        )

    def _recipient(self) -> str:
        c = self._config
        if c.platform in (Platform.EMAIL, Platform.SES):
            return c.to_email or c.token
        return c.channel or c.platform.value

    # -------------------------------------------------------------------------
    # Adapter builders
    # -------------------------------------------------------------------------

    def _pushover(self) -> BackendAdapter:
        c = self._config
        retry = c.others.get("retryInterval")
        expire = c.others.get("retryExpire")
        return PushoverAdapter(
            PushoverOptions(
                token=c.token,
                user=c.channel,
                priority=c.priority,
                retry=_parse_float(retry, "retryInterval", Platform.PUSHOVER),
                expire=_parse_float(expire, "retryExpire", Platform.PUSHOVER),
            )
        )

    def _slack(self) -> BackendAdapter:
        return SlackAdapter(SlackOptions(token=self._config.token, channel=self._config.channel))

    def _pagerduty(self) -> BackendAdapter:
        c = self._config
        return PagerDutyAdapter(
            PagerDutyOptions(token=c.token, source=c.source, severity=c.severity)
        )

    def _discord(self) -> BackendAdapter:
        return DiscordAdapter(DiscordOptions(token=self._config.token, channel=self._config.channel))

    def _telegram(self) -> BackendAdapter:
        destination = resolve_destination(self._config.channel, self._config.others)
        return TelegramAdapter(
            TelegramOptions(
                token=self._config.token,
                chat_id=destination.chat_id,
                chat_name=destination.chat_name,
                topic_id=destination.topic_id,
            )
        )

    def _telegram_bot(self) -> TelegramBotAdapter:
        c = self._config
        return TelegramBotAdapter(
            TelegramBotOptions(
                token=c.token,
                chat_ids=list(c.chat_ids),
                trade_bot=c.others.get("trade_bot") or DEFAULT_TRADE_BOT,
            )
        )

    def _dingtalk(self) -> BackendAdapter:
        return DingTalkAdapter(
            DingTalkOptions(webhook_url=self._config.channel, secret=self._config.token)
        )

    def _email(self) -> BackendAdapter:
        c = self._config
        return EmailAdapter(
            EmailOptions(
                to_email=c.to_email or c.token,
                user=c.user,
                password=c.password,
                host=c.host,
                subject=c.others.get("subject") or DEFAULT_EMAIL_SUBJECT,
            )
        )

    def _ses(self) -> BackendAdapter:
        c = self._config
        return SesAdapter(
            SesOptions(
                to_email=c.to_email or c.token,
                key=c.key,
                secret=c.secret,
                area=c.area,
                sender=c.sender,
                subject=c.others.get("subject") or DEFAULT_EMAIL_SUBJECT,
            )
        )

    def _lark(self) -> BackendAdapter:
        return LarkAdapter(LarkOptions(token=self._config.token))

"""Unit tests for the notification router."""

from contextlib import ExitStack
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from notifykit.config.schema import NotifyConfig
from notifykit.exceptions import ProviderError, UnsupportedPlatformError, ValidationError
from notifykit.models import ChannelType, Platform
from notifykit.router import Notify
from tests.helpers.fake_telegram import ADDRESS, FakeBot

ADAPTERS = {
    Platform.PUSHOVER: "PushoverAdapter",
    Platform.SLACK: "SlackAdapter",
    Platform.PAGERDUTY: "PagerDutyAdapter",
    Platform.DISCORD: "DiscordAdapter",
    Platform.TELEGRAM: "TelegramAdapter",
    Platform.DINGTALK: "DingTalkAdapter",
    Platform.EMAIL: "EmailAdapter",
    Platform.SES: "SesAdapter",
    Platform.LARK: "LarkAdapter",
}


@pytest.fixture
def patched_adapters():
    """Replace every adapter class the router can build with a mock."""
    with ExitStack() as stack:
        mocks = {}
        for name in [*ADAPTERS.values(), "TelegramBotAdapter"]:
            mock_class = stack.enter_context(patch(f"notifykit.router.{name}"))
            mock_class.return_value.send = AsyncMock()
            mock_class.return_value.broadcast = AsyncMock(return_value=[])
            mocks[name] = mock_class
        yield mocks


def make_notify(**fields) -> Notify:
    defaults = {"token": "tok", "channel": "12345"}
    defaults.update(fields)
    return Notify(NotifyConfig(**defaults))


class TestRouting:
    """Tests for platform selection."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("platform", list(ADAPTERS))
    async def test_routes_to_matching_adapter_only(self, platform, patched_adapters):
        notify = make_notify(platform=platform)

        report = await notify.send("hello")

        expected = ADAPTERS[platform]
        patched_adapters[expected].return_value.send.assert_awaited_once_with("hello")
        for name, mock_class in patched_adapters.items():
            if name != expected:
                mock_class.assert_not_called()
        assert report.platform == platform
        assert len(report.outcomes) == 1
        assert report.outcomes[0].success is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("platform", [None, Platform.ARGUS])
    async def test_unsupported_platform(self, platform, patched_adapters):
        notify = make_notify(platform=platform)

        with pytest.raises(UnsupportedPlatformError, match="not supported notify platform"):
            await notify.send("hello")

        for mock_class in patched_adapters.values():
            mock_class.assert_not_called()

    @pytest.mark.asyncio
    async def test_bot_channel_type_uses_fanout(self, patched_adapters):
        notify = make_notify(
            platform=Platform.TELEGRAM, channel_type=ChannelType.BOT, chat_ids=[1, 2]
        )
        extension = {"intent": None}

        await notify.send("hello", extension)

        patched_adapters["TelegramBotAdapter"].return_value.broadcast.assert_awaited_once_with(
            "hello", extension
        )
        patched_adapters["TelegramAdapter"].assert_not_called()

    @pytest.mark.asyncio
    async def test_send_twice_makes_two_attempts(self, patched_adapters):
        notify = make_notify(platform=Platform.SLACK)

        await notify.send("same")
        await notify.send("same")

        assert patched_adapters["SlackAdapter"].return_value.send.await_count == 2

    @pytest.mark.asyncio
    async def test_adapter_errors_propagate(self, patched_adapters):
        patched_adapters["LarkAdapter"].return_value.send.side_effect = ProviderError("down")
        notify = make_notify(platform=Platform.LARK)

        with pytest.raises(ProviderError, match="down"):
            await notify.send("hello")

    def test_send_sync(self, patched_adapters):
        report = make_notify(platform=Platform.DISCORD).send_sync("hello")

        assert report.platform == Platform.DISCORD
        patched_adapters["DiscordAdapter"].return_value.send.assert_awaited_once_with("hello")

    def test_routed_platforms(self):
        routed = Notify.routed_platforms()
        assert Platform.ARGUS not in routed
        assert set(routed) == set(ADAPTERS)


class TestOptionMapping:
    """Tests for how config fields reach each adapter."""

    @pytest.mark.asyncio
    async def test_pushover_options(self, patched_adapters):
        notify = make_notify(
            platform=Platform.PUSHOVER,
            channel="user-key",
            priority=2,
            others={"retryInterval": "60", "retryExpire": "3600"},
        )

        await notify.send("hello")

        options = patched_adapters["PushoverAdapter"].call_args[0][0]
        assert options.token == "tok"
        assert options.user == "user-key"
        assert options.priority == 2
        assert options.retry == 60.0
        assert options.expire == 3600.0

    @pytest.mark.asyncio
    async def test_pushover_bad_retry_rejected(self, patched_adapters):
        notify = make_notify(platform=Platform.PUSHOVER, others={"retryInterval": "soon"})

        with pytest.raises(ValidationError, match="retryInterval"):
            await notify.send("hello")

        patched_adapters["PushoverAdapter"].assert_not_called()

    @pytest.mark.asyncio
    async def test_telegram_destination_override(self, patched_adapters):
        notify = make_notify(
            platform=Platform.TELEGRAM,
            channel="12345",
            others={"chat_id": "67890", "topic_id": "9"},
        )

        await notify.send("hello")

        options = patched_adapters["TelegramAdapter"].call_args[0][0]
        assert options.chat_id == 67890
        assert options.topic_id == 9

    @pytest.mark.asyncio
    async def test_telegram_handle(self, patched_adapters):
        notify = make_notify(platform=Platform.TELEGRAM, channel="@mychannel")

        await notify.send("hello")

        options = patched_adapters["TelegramAdapter"].call_args[0][0]
        assert options.chat_id == 0
        assert options.chat_name == "mychannel"

    @pytest.mark.asyncio
    async def test_dingtalk_uses_channel_as_webhook(self, patched_adapters):
        notify = make_notify(
            platform=Platform.DINGTALK, channel="https://oapi.dingtalk.com/robot/send?access_token=x"
        )

        await notify.send("hello")

        options = patched_adapters["DingTalkAdapter"].call_args[0][0]
        assert options.webhook_url.startswith("https://oapi.dingtalk.com")
        assert options.secret == "tok"

    @pytest.mark.asyncio
    async def test_ses_recipient_falls_back_to_token(self, patched_adapters):
        notify = make_notify(
            platform=Platform.SES,
            token="ops@example.com",
            sender="alerts@example.com",
            area="us-east-1",
        )

        report = await notify.send("hello")

        options = patched_adapters["SesAdapter"].call_args[0][0]
        assert options.to_email == "ops@example.com"
        assert options.area == "us-east-1"
        assert report.outcomes[0].recipient == "ops@example.com"

    @pytest.mark.asyncio
    async def test_bot_options(self, patched_adapters):
        notify = make_notify(
            platform=Platform.TELEGRAM,
            channel_type=ChannelType.BOT,
            chat_ids=[1, 2, 3],
            others={"trade_bot": "my_swapbot"},
        )

        await notify.send("hello")

        options = patched_adapters["TelegramBotAdapter"].call_args[0][0]
        assert options.chat_ids == [1, 2, 3]
        assert options.trade_bot == "my_swapbot"

    @pytest.mark.asyncio
    async def test_config_is_not_mutated(self, patched_adapters):
        config = NotifyConfig(platform=Platform.PUSHOVER, token="tok", channel="u")
        before = config.model_dump()

        await Notify(config).send("hello")

        assert config.model_dump() == before


class TestTelegramBotFanout:
    """End-to-end bot fan-out through the router with a fake bot."""

    @pytest.mark.asyncio
    async def test_partial_failure_still_succeeds(self):
        bot = FakeBot(failing=(2,))
        notify = make_notify(
            platform=Platform.TELEGRAM, channel_type=ChannelType.BOT, chat_ids=[1, 2, 3]
        )

        with patch("notifykit.adapters.telegram.Bot", return_value=bot):
            report = await notify.send("hello")

        assert len(bot.calls) == 3
        assert len(report.outcomes) == 3
        assert [o.recipient for o in report.failed] == ["2"]

    @pytest.mark.asyncio
    async def test_menu_attached_for_single_intent(self, swap_extension):
        bot = FakeBot()
        notify = make_notify(
            platform=Platform.TELEGRAM, channel_type=ChannelType.BOT, chat_ids=[1, 2]
        )

        with patch("notifykit.adapters.telegram.Bot", return_value=bot):
            await notify.send("hello", swap_extension)

        markups = [call["reply_markup"] for call in bot.calls]
        assert all(markup is not None for markup in markups)
        assert markups[0].inline_keyboard[0][0].text == "Buy"

    @pytest.mark.asyncio
    async def test_two_intents_send_without_menu(self):
        bot = FakeBot()
        intent = {"buy_token": "0x", "sell_token": ADDRESS}
        notify = make_notify(
            platform=Platform.TELEGRAM, channel_type=ChannelType.BOT, chat_ids=[1]
        )

        with patch("notifykit.adapters.telegram.Bot", return_value=bot):
            report = await notify.send("hello", {"intent": {"swap_intents": [intent, intent]}})

        assert bot.calls[0]["reply_markup"] is None
        assert report.outcomes[0].success is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, 0, ["0x"]])
    async def test_non_string_token_sends_without_menu(self, token):
        bot = FakeBot()
        intent = {"buy_token": token, "sell_token": ADDRESS}
        notify = make_notify(
            platform=Platform.TELEGRAM, channel_type=ChannelType.BOT, chat_ids=[1, 2]
        )

        with patch("notifykit.adapters.telegram.Bot", return_value=bot):
            report = await notify.send("hello", {"intent": {"swap_intents": [intent]}})

        assert len(bot.calls) == 2
        assert all(call["reply_markup"] is None for call in bot.calls)
        assert all(o.success for o in report.outcomes)

    @pytest.mark.asyncio
    async def test_missing_chat_ids(self):
        notify = make_notify(platform=Platform.TELEGRAM, channel_type=ChannelType.BOT)

        with patch("notifykit.adapters.telegram.Bot") as mock_bot:
            with pytest.raises(ValidationError, match="chat ids"):
                await notify.send("hello")

        mock_bot.assert_not_called()

    @pytest.mark.asyncio
    async def test_bot_init_failure_is_provider_error(self):
        from telegram.error import InvalidToken

        bot = MagicMock()
        bot.__aenter__ = AsyncMock(side_effect=InvalidToken())
        bot.__aexit__ = AsyncMock(return_value=False)
        notify = make_notify(
            platform=Platform.TELEGRAM, channel_type=ChannelType.BOT, chat_ids=[1]
        )

        with patch("notifykit.adapters.telegram.Bot", return_value=bot):
            with pytest.raises(ProviderError, match="init failed"):
                await notify.send("hello")

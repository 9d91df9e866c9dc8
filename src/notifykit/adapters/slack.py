"""Slack adapter using the Web API."""

import asyncio
import logging

import aiohttp
from slack_sdk.errors import SlackApiError, SlackClientError
from slack_sdk.web.async_client import AsyncWebClient

from notifykit.adapters.base import BackendAdapter
from notifykit.config.schema import SlackOptions
from notifykit.models import Platform

logger = logging.getLogger(__name__)


class SlackAdapter(BackendAdapter):
    """Posts a message to a Slack channel with a bot token (xoxb-...)."""

    def __init__(self, options: SlackOptions):
        self.options = options

    @property
    def platform(self) -> Platform:
        return Platform.SLACK

    async def send(self, message: str) -> None:
        self._require(self.options.token, "token")
        self._require(self.options.channel, "channel")
        self._require(message, "message")

        client = AsyncWebClient(token=self.options.token)
        try:
            await client.chat_postMessage(channel=self.options.channel, text=message)
        except SlackApiError as e:
            error = e.response.get("error", str(e))
            logger.error(f"Failed to send Slack message: {error}")
            raise self._provider_error(
                f"slack api error: {error}", status_code=e.response.status_code
            ) from e
        except asyncio.TimeoutError as e:
            logger.error(f"Slack request to {self.options.channel} timed out")
            raise self._provider_error("request timed out") from e
        except (SlackClientError, aiohttp.ClientError) as e:
            logger.error(f"Slack request failed: {e}")
            raise self._provider_error(f"request failed: {e}") from e

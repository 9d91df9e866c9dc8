"""Discord adapter.

Posts through an incoming webhook when the channel is a webhook URL,
otherwise through the REST API with a bot token and channel id.
"""

from notifykit.adapters.base import BackendAdapter
from notifykit.config.schema import DiscordOptions
from notifykit.models import Platform

API_URL = "https://discord.com/api/v10"


class DiscordAdapter(BackendAdapter):
    """Sends a message to a Discord channel."""

    def __init__(self, options: DiscordOptions):
        self.options = options

    @property
    def platform(self) -> Platform:
        return Platform.DISCORD

    @property
    def is_webhook(self) -> bool:
        return self.options.channel.startswith(("https://", "http://"))

    async def send(self, message: str) -> None:
        self._require(self.options.channel, "channel")
        self._require(message, "message")

        if self.is_webhook:
            response = await self._post_json(self.options.channel, {"content": message})
        else:
            self._require(self.options.token, "token")
            response = await self._post_json(
                f"{API_URL}/channels/{self.options.channel}/messages",
                {"content": message},
                headers={"Authorization": f"Bot {self.options.token}"},
            )

        if response.status_code >= 400:
            data = self._json(response)
            raise self._provider_error(
                str(data.get("message", f"HTTP {response.status_code}")),
                status_code=response.status_code,
            )

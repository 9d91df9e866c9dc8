"""Pushover push notification adapter.

https://pushover.net/api#messages
"""

from notifykit.adapters.base import BackendAdapter
from notifykit.config.schema import PushoverOptions
from notifykit.models import Platform

API_URL = "https://api.pushover.net/1/messages.json"


class PushoverAdapter(BackendAdapter):
    """Sends a message to a Pushover user or group key."""

    def __init__(self, options: PushoverOptions):
        self.options = options

    @property
    def platform(self) -> Platform:
        return Platform.PUSHOVER

    async def send(self, message: str) -> None:
        self._require(self.options.token, "token")
        self._require(self.options.user, "user")
        self._require(message, "message")

        payload = self.options.model_dump(exclude_defaults=True)
        payload["message"] = message

        response = await self._post_json(API_URL, payload)
        data = self._json(response)

        if data.get("status") != 1:
            errors = data.get("errors") or [f"HTTP {response.status_code}"]
            raise self._provider_error(str(errors[0]), status_code=response.status_code)

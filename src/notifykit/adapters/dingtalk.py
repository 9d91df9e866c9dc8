"""DingTalk custom robot adapter.

https://open.dingtalk.com/document/robots/custom-robot-access
"""

import base64
import hashlib
import hmac
import time

from notifykit.adapters.base import BackendAdapter
from notifykit.config.schema import DingTalkOptions
from notifykit.models import Platform


def sign(secret: str, timestamp: str) -> str:
    """Sign a millisecond timestamp with the robot secret."""
    string_to_sign = f"{timestamp}\n{secret}".encode("utf-8")
    digest = hmac.new(secret.encode("utf-8"), string_to_sign, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("utf-8")


class DingTalkAdapter(BackendAdapter):
    """Posts a text message to a DingTalk robot webhook."""

    def __init__(self, options: DingTalkOptions):
        self.options = options

    @property
    def platform(self) -> Platform:
        return Platform.DINGTALK

    async def send(self, message: str) -> None:
        self._require(self.options.webhook_url, "webhook url")
        self._require(message, "message")

        params = None
        if self.options.secret:
            timestamp = str(round(time.time() * 1000))
            params = {"timestamp": timestamp, "sign": sign(self.options.secret, timestamp)}

        payload = {"msgtype": "text", "text": {"content": message}}
        response = await self._post_json(self.options.webhook_url, payload, params=params)
        data = self._json(response)

        if data.get("errcode", 0) != 0:
            raise self._provider_error(
                f"dingtalk error {data.get('errcode')}: {data.get('errmsg', '')}",
                status_code=response.status_code,
            )

"""Lark (Feishu) custom bot adapter."""

from notifykit.adapters.base import BackendAdapter
from notifykit.config.schema import LarkOptions
from notifykit.models import Platform

API_URL = "https://open.feishu.cn/open-apis/bot/v2/hook"


class LarkAdapter(BackendAdapter):
    """Posts a text message to a Lark bot webhook identified by its token."""

    def __init__(self, options: LarkOptions):
        self.options = options

    @property
    def platform(self) -> Platform:
        return Platform.LARK

    async def send(self, message: str) -> None:
        self._require(self.options.token, "token")
        self._require(message, "message")

        payload = {"msg_type": "text", "content": {"text": message}}
        response = await self._post_json(f"{API_URL}/{self.options.token}", payload)
        data = self._json(response)

        # Older webhooks answer with StatusCode instead of code
        code = data.get("code", data.get("StatusCode", 0))
        if code != 0:
            raise self._provider_error(
                f"lark error {code}: {data.get('msg', data.get('StatusMessage', ''))}",
                status_code=response.status_code,
            )

"""Backend adapter protocol definition."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx

from notifykit.exceptions import ProviderError, ValidationError
from notifykit.models import Platform

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class BackendAdapter(ABC):
    """Abstract base class for backend adapters.

    Each backend (Slack, Pushover, Telegram, etc.) implements this protocol
    so the router can deliver a text message without knowing the provider's
    request format. Adapters are built once per send from a small options
    model and validate their own inputs before touching the network.
    """

    @property
    @abstractmethod
    def platform(self) -> Platform:
        """The platform this adapter delivers to."""
        ...

    @abstractmethod
    async def send(self, message: str) -> None:
        """Deliver a text message.

        Args:
            message: The message body

        Raises:
            ValidationError: If a credential, destination or the message is missing
            ProviderError: If the provider rejects or fails the call
        """
        ...

    def _require(self, value: Any, what: str) -> None:
        """Raise ValidationError if ``value`` is empty."""
        if not value:
            raise ValidationError(f"missing {what}", platform=self.platform.value)

    def _provider_error(
        self, message: str, status_code: Optional[int] = None
    ) -> ProviderError:
        return ProviderError(message, platform=self.platform.value, status_code=status_code)

    async def _post_json(
        self,
        url: str,
        payload: dict[str, Any],
        headers: Optional[dict[str, str]] = None,
        params: Optional[dict[str, str]] = None,
    ) -> httpx.Response:
        """POST a JSON body and return the response.

        Transport failures become ProviderError; HTTP status handling is left
        to the caller since providers report errors differently.
        """
        try:
            async with httpx.AsyncClient(timeout=DEFAULT_TIMEOUT) as client:
                return await client.post(url, json=payload, headers=headers, params=params)
        except httpx.HTTPError as e:
            logger.error(f"{self.platform.value} request failed: {e}")
            raise self._provider_error(f"request failed: {e}") from e

    def _json(self, response: httpx.Response) -> dict[str, Any]:
        """Decode a JSON response body, mapping bad bodies to ProviderError."""
        try:
            data = response.json()
        except ValueError as e:
            raise self._provider_error(
                f"invalid response body (HTTP {response.status_code})",
                status_code=response.status_code,
            ) from e
        if not isinstance(data, dict):
            raise self._provider_error(
                f"unexpected response body (HTTP {response.status_code})",
                status_code=response.status_code,
            )
        return data

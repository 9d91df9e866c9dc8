"""AWS SES email adapter."""

import asyncio
import logging

import boto3
from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    InvalidRegionError,
    NoRegionError,
)

from notifykit.adapters.base import BackendAdapter
from notifykit.config.schema import SesOptions
from notifykit.exceptions import ValidationError
from notifykit.models import Platform

logger = logging.getLogger(__name__)


class SesAdapter(BackendAdapter):
    """Sends a plain-text email through Amazon SES."""

    def __init__(self, options: SesOptions):
        self.options = options

    @property
    def platform(self) -> Platform:
        return Platform.SES

    def _client(self):
        # Empty credentials fall back to the default boto3 credential chain
        return boto3.client(
            "ses",
            region_name=self.options.area,
            aws_access_key_id=self.options.key or None,
            aws_secret_access_key=self.options.secret or None,
        )

    async def send(self, message: str) -> None:
        self._require(self.options.to_email, "recipient email")
        self._require(self.options.sender, "sender")
        self._require(self.options.area, "region")
        self._require(message, "message")

        try:
            client = self._client()
        except (InvalidRegionError, NoRegionError) as e:
            raise ValidationError(
                f"invalid region {self.options.area!r}: {e}", platform=self.platform.value
            ) from e
        except BotoCoreError as e:
            raise self._provider_error(f"ses client setup failed: {e}") from e

        try:
            await asyncio.to_thread(
                client.send_email,
                Source=self.options.sender,
                Destination={"ToAddresses": [self.options.to_email]},
                Message={
                    "Subject": {"Data": self.options.subject, "Charset": "UTF-8"},
                    "Body": {"Text": {"Data": message, "Charset": "UTF-8"}},
                },
            )
        except ClientError as e:
            error = e.response.get("Error", {})
            logger.error(f"SES rejected email to {self.options.to_email}: {error}")
            raise self._provider_error(
                f"ses error {error.get('Code', '')}: {error.get('Message', str(e))}",
                status_code=e.response.get("ResponseMetadata", {}).get("HTTPStatusCode"),
            ) from e
        except BotoCoreError as e:
            raise self._provider_error(f"ses request failed: {e}") from e

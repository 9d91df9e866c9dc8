"""SMTP relay email adapter."""

import asyncio
import logging
import smtplib
from email.message import EmailMessage

from notifykit.adapters.base import BackendAdapter
from notifykit.config.schema import EmailOptions
from notifykit.exceptions import ValidationError
from notifykit.models import Platform

logger = logging.getLogger(__name__)

DEFAULT_PORT = 587
IMPLICIT_TLS_PORT = 465
SMTP_TIMEOUT = 30


class EmailAdapter(BackendAdapter):
    """Sends a plain-text email through an SMTP relay.

    Port 465 uses implicit TLS; any other port upgrades with STARTTLS.
    """

    def __init__(self, options: EmailOptions):
        self.options = options

    @property
    def platform(self) -> Platform:
        return Platform.EMAIL

    def _host_and_port(self) -> tuple[str, int]:
        host, _, port = self.options.host.partition(":")
        if not port:
            return host, DEFAULT_PORT
        try:
            return host, int(port)
        except ValueError as e:
            raise ValidationError(
                f"invalid smtp port in {self.options.host!r}", platform=self.platform.value
            ) from e

    def _build(self, message: str) -> EmailMessage:
        email = EmailMessage()
        email["From"] = self.options.user
        email["To"] = self.options.to_email
        email["Subject"] = self.options.subject
        email.set_content(message)
        return email

    def _deliver(self, host: str, port: int, email: EmailMessage) -> None:
        if port == IMPLICIT_TLS_PORT:
            smtp: smtplib.SMTP = smtplib.SMTP_SSL(host, port, timeout=SMTP_TIMEOUT)
        else:
            smtp = smtplib.SMTP(host, port, timeout=SMTP_TIMEOUT)

        with smtp:
            if port != IMPLICIT_TLS_PORT:
                smtp.starttls()
            if self.options.user:
                smtp.login(self.options.user, self.options.password)
            smtp.send_message(email)

    async def send(self, message: str) -> None:
        self._require(self.options.to_email, "recipient email")
        self._require(self.options.host, "smtp host")
        self._require(message, "message")

        host, port = self._host_and_port()
        email = self._build(message)

        try:
            await asyncio.to_thread(self._deliver, host, port, email)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"SMTP delivery to {self.options.to_email} failed: {e}")
            raise self._provider_error(f"smtp error: {e}") from e

"""PagerDuty adapter using the Events API v2.

https://developer.pagerduty.com/docs/events-api-v2/trigger-events/
"""

from notifykit.adapters.base import BackendAdapter
from notifykit.config.schema import PagerDutyOptions
from notifykit.exceptions import ValidationError
from notifykit.models import Platform

API_URL = "https://events.pagerduty.com/v2/enqueue"

SEVERITIES = ("critical", "error", "warning", "info")
DEFAULT_SOURCE = "notifykit"
DEFAULT_SEVERITY = "error"
MAX_SUMMARY_LENGTH = 1024


class PagerDutyAdapter(BackendAdapter):
    """Triggers a PagerDuty alert whose summary is the message."""

    def __init__(self, options: PagerDutyOptions):
        self.options = options

    @property
    def platform(self) -> Platform:
        return Platform.PAGERDUTY

    async def send(self, message: str) -> None:
        self._require(self.options.token, "routing key")
        self._require(message, "message")

        severity = (self.options.severity or DEFAULT_SEVERITY).lower()
        if severity not in SEVERITIES:
            raise ValidationError(
                f"invalid severity {self.options.severity!r}, expected one of {SEVERITIES}",
                platform=self.platform.value,
            )

        payload = {
            "routing_key": self.options.token,
            "event_action": "trigger",
            "payload": {
                "summary": message[:MAX_SUMMARY_LENGTH],
                "source": self.options.source or DEFAULT_SOURCE,
                "severity": severity,
            },
        }

        response = await self._post_json(API_URL, payload)
        if response.status_code >= 400:
            data = self._json(response)
            errors = data.get("errors") or []
            detail = data.get("message", f"HTTP {response.status_code}")
            if errors:
                detail = f"{detail}: {errors[0]}"
            raise self._provider_error(detail, status_code=response.status_code)

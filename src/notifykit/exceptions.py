"""
Notification exceptions for notifykit.

Defines the error taxonomy surfaced by the router and the backend adapters.
"""


class NotifyError(Exception):
    """Base exception for notification errors."""

    def __init__(self, message: str, platform: str | None = None):
        super().__init__(message)
        self.platform = platform


class UnsupportedPlatformError(NotifyError):
    """No adapter is routed for the configured platform."""

    pass


class ValidationError(NotifyError):
    """Required input missing or malformed; nothing was sent."""

    pass


class ProviderError(NotifyError):
    """The third-party backend rejected or failed the call."""

    def __init__(
        self,
        message: str,
        platform: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message, platform)
        self.status_code = status_code


class ConfigurationError(NotifyError):
    """Raised when configuration loading or validation fails."""

    pass

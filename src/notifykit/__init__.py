"""
notifykit - notification dispatch facade

Delivers a text message through one of several chat, paging and email
backends selected by configuration.
"""

from importlib.metadata import PackageNotFoundError, version

from notifykit.config.schema import NotifyConfig
from notifykit.exceptions import (
    ConfigurationError,
    NotifyError,
    ProviderError,
    UnsupportedPlatformError,
    ValidationError,
)
from notifykit.models import (
    ChannelType,
    DeliveryOutcome,
    DeliveryReport,
    ExtensionMetadata,
    Platform,
    SwapIntent,
    TxIntent,
)
from notifykit.router import Notify

try:
    __version__ = version("notifykit")
except PackageNotFoundError:
    __version__ = "0.1.0"

__all__ = [
    "__version__",
    "ChannelType",
    "ConfigurationError",
    "DeliveryOutcome",
    "DeliveryReport",
    "ExtensionMetadata",
    "Notify",
    "NotifyConfig",
    "NotifyError",
    "Platform",
    "ProviderError",
    "SwapIntent",
    "TxIntent",
    "UnsupportedPlatformError",
    "ValidationError",
]

"""Data models for notification dispatch."""

import re
from enum import Enum
from typing import Any, Optional

from eth_utils import to_checksum_address
from pydantic import BaseModel, Field, field_validator

ZERO_ADDRESS = "0x" + "0" * 40

_HEX_ADDRESS = re.compile(r"^(0x)?[0-9a-fA-F]{0,40}$")


class Platform(str, Enum):
    """Supported notification backends."""

    SLACK = "Slack"
    PUSHOVER = "Pushover"
    PAGERDUTY = "Pagerduty"
    DISCORD = "Discord"
    TELEGRAM = "Telegram"
    DINGTALK = "DingTalk"
    EMAIL = "Email"
    SES = "AwsEmail"
    LARK = "Lark"
    ARGUS = "Argus"  # reserved, no adapter


class ChannelType(str, Enum):
    """How a Telegram destination is addressed."""

    GROUP = "Group"
    CHANNEL = "Channel"
    USER = "User"
    BOT = "Bot"


def normalize_address(value: Any) -> str:
    """Normalize a hex token address to its EIP-55 checksummed 20-byte form.

    Short inputs are left-padded the way an address parser pads them, so
    ``"0x"`` and ``""`` both become the zero address.
    """
    if not isinstance(value, str) or not _HEX_ADDRESS.match(value):
        raise ValueError(f"invalid token address: {value!r}")
    digits = value[2:] if value[:2] == "0x" else value
    return to_checksum_address("0x" + digits.lower().rjust(40, "0"))


class SwapIntent(BaseModel):
    """A single token swap the message is about."""

    buy_token: str = ZERO_ADDRESS
    sell_token: str = ZERO_ADDRESS

    @field_validator("buy_token", "sell_token", mode="before")
    @classmethod
    def _normalize(cls, value: Any) -> str:
        return normalize_address(value)


class TxIntent(BaseModel):
    """Transaction intent attached to a notification."""

    swap_intents: list[SwapIntent] = Field(default_factory=list)


class ExtensionMetadata(BaseModel):
    """Optional call-scoped data sent alongside one message."""

    intent: Optional[TxIntent] = None


class DeliveryOutcome(BaseModel):
    """Result of delivering to one recipient."""

    recipient: str
    success: bool
    error: Optional[str] = None

    def __str__(self) -> str:
        """String representation for logging."""
        status = "ok" if self.success else f"failed: {self.error}"
        return f"{self.recipient}: {status}"


class DeliveryReport(BaseModel):
    """Result of one ``Notify.send`` call."""

    platform: Platform
    outcomes: list[DeliveryOutcome] = Field(default_factory=list)

    @property
    def succeeded(self) -> list[DeliveryOutcome]:
        return [o for o in self.outcomes if o.success]

    @property
    def failed(self) -> list[DeliveryOutcome]:
        return [o for o in self.outcomes if not o.success]

    @property
    def all_failed(self) -> bool:
        """True when there was at least one recipient and none succeeded."""
        return bool(self.outcomes) and not self.succeeded

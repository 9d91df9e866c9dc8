"""Configuration for notifykit."""

from notifykit.config.loader import apply_env_overrides, load_config, load_yaml_file
from notifykit.config.schema import (
    DingTalkOptions,
    DiscordOptions,
    EmailOptions,
    LarkOptions,
    NotifyConfig,
    PagerDutyOptions,
    PushoverOptions,
    SesOptions,
    SlackOptions,
    TelegramBotOptions,
    TelegramOptions,
)
from notifykit.exceptions import ConfigurationError

__all__ = [
    "ConfigurationError",
    "DingTalkOptions",
    "DiscordOptions",
    "EmailOptions",
    "LarkOptions",
    "NotifyConfig",
    "PagerDutyOptions",
    "PushoverOptions",
    "SesOptions",
    "SlackOptions",
    "TelegramBotOptions",
    "TelegramOptions",
    "apply_env_overrides",
    "load_config",
    "load_yaml_file",
]

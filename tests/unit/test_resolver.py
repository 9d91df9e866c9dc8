"""Unit tests for Telegram destination resolution."""

import pytest

from notifykit.exceptions import ValidationError
from notifykit.resolver import parse_id, resolve_destination


class TestResolveDestination:
    """Tests for resolve_destination."""

    def test_public_handle(self):
        dest = resolve_destination("@mychannel", {})
        assert dest.chat_id == 0
        assert dest.chat_name == "mychannel"
        assert dest.topic_id == 0

    def test_numeric_channel(self):
        dest = resolve_destination("12345", {})
        assert dest.chat_id == 12345
        assert dest.chat_name == ""

    def test_negative_group_id(self):
        assert resolve_destination("-1001234567890", {}).chat_id == -1001234567890

    def test_chat_id_override_wins(self):
        dest = resolve_destination("12345", {"chat_id": "67890"})
        assert dest.chat_id == 67890

    def test_chat_id_override_resolves_handle(self):
        dest = resolve_destination("@mychannel", {"chat_id": "-100555"})
        assert dest.chat_id == -100555
        assert dest.chat_name == "mychannel"

    def test_zero_override_is_ignored(self):
        assert resolve_destination("12345", {"chat_id": "0"}).chat_id == 12345

    def test_empty_override_is_ignored(self):
        assert resolve_destination("12345", {"chat_id": ""}).chat_id == 12345

    def test_topic_id(self):
        assert resolve_destination("12345", {"topic_id": "42"}).topic_id == 42

    def test_empty_channel(self):
        dest = resolve_destination("", {})
        assert dest.chat_id == 0
        assert dest.chat_name == ""

    def test_non_numeric_channel_rejected(self):
        with pytest.raises(ValidationError, match="channel"):
            resolve_destination("general", {})

    def test_non_numeric_topic_rejected(self):
        with pytest.raises(ValidationError, match="topic_id"):
            resolve_destination("12345", {"topic_id": "abc"})

    def test_non_numeric_override_rejected(self):
        with pytest.raises(ValidationError, match="chat_id"):
            resolve_destination("12345", {"chat_id": "abc"})


    def test_only_one_leading_at_is_dropped(self):
        assert resolve_destination(" @mychannel ", {}).chat_name == "mychannel"

    @pytest.mark.parametrize("channel", ["ops@team", "@@mychannel", "@"])
    def test_malformed_handle_rejected(self, channel):
        with pytest.raises(ValidationError, match="not a public handle"):
            resolve_destination(channel, {})


class TestParseId:
    """Tests for parse_id."""

    def test_none(self):
        assert parse_id(None, "x") == 0

    def test_whitespace(self):
        assert parse_id("  7 ", "x") == 7

    def test_error_carries_platform(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_id("1.5", "topic_id")
        assert exc_info.value.platform == "Telegram"

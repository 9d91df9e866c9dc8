"""
Pytest configuration and fixtures for notifykit tests.
"""

import os
import tempfile
from collections.abc import Generator
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from tests.helpers.fake_telegram import ADDRESS


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clean_env(monkeypatch) -> None:
    """Remove NOTIFYKIT_* variables that would override file config."""
    for key in list(os.environ):
        if key.startswith("NOTIFYKIT_"):
            monkeypatch.delenv(key)


@pytest.fixture
def mock_http():
    """Patch httpx.AsyncClient; yields (client, response) mocks."""
    response = MagicMock()
    response.status_code = 200
    response.json.return_value = {}

    with patch("httpx.AsyncClient") as mock_client_class:
        client = AsyncMock()
        client.post = AsyncMock(return_value=response)
        mock_client_class.return_value.__aenter__.return_value = client
        yield client, response


@pytest.fixture
def swap_extension() -> dict:
    """Extension metadata with one sell-side swap intent."""
    return {
        "intent": {
            "swap_intents": [
                {"buy_token": "0x", "sell_token": ADDRESS},
            ]
        }
    }


@pytest.fixture
def sample_config() -> dict:
    """Provide a sample configuration dictionary."""
    return {
        "platform": "Pushover",
        "token": "app-token",
        "channel": "user-key",
        "priority": 2,
        "others": {
            "retryInterval": "60",
            "retryExpire": "3600",
        },
    }

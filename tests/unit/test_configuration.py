"""Tests for client configuration."""

import os
from unittest.mock import patch

import pydantic
import pytest

from datahub_sdk.configuration import DatahubConfiguration


class TestDatahubConfiguration:
    """Tests for DatahubConfiguration."""

    def test_defaults(self) -> None:
        """Test default timeouts."""
        conf = DatahubConfiguration(endpoint="https://dh.example.com")
        assert conf.socket_timeout == 30
        assert conf.socket_connect_timeout == 10

    def test_endpoint_trailing_slash_stripped(self) -> None:
        """Test that the endpoint is normalized for concatenation."""
        conf = DatahubConfiguration(endpoint=" https://dh.example.com/ ")
        assert conf.endpoint == "https://dh.example.com"

    def test_non_positive_timeout_rejected(self) -> None:
        """Test that timeouts must be positive."""
        with pytest.raises(pydantic.ValidationError):
            DatahubConfiguration(socket_timeout=0)

    def test_unknown_field_rejected(self) -> None:
        """Test that misspelled settings are not silently ignored."""
        with pytest.raises(pydantic.ValidationError):
            DatahubConfiguration(socket_timout=5)  # type: ignore[call-arg]

    def test_milliseconds(self) -> None:
        """Test millisecond conversions."""
        conf = DatahubConfiguration(socket_timeout=18, socket_connect_timeout=3)
        assert conf.socket_timeout_ms == 18000
        assert conf.socket_connect_timeout_ms == 3000

    def test_to_httpx_timeout(self) -> None:
        """Test conversion to httpx timeout."""
        conf = DatahubConfiguration(socket_timeout=18, socket_connect_timeout=3)
        timeout = conf.to_httpx_timeout()
        assert timeout.read == 18.0
        assert timeout.write == 18.0
        assert timeout.connect == 3.0


class TestFromEnv:
    """Tests for environment-based configuration."""

    def test_reads_environment(self) -> None:
        """Test that settings are read from environment variables."""
        env = {
            "DATAHUB_ENDPOINT": "https://dh.example.com",
            "DATAHUB_SOCKET_TIMEOUT": "60",
            "DATAHUB_SOCKET_CONNECT_TIMEOUT": "5",
        }
        with patch.dict(os.environ, env, clear=True):
            conf = DatahubConfiguration.from_env()
        assert conf.endpoint == "https://dh.example.com"
        assert conf.socket_timeout == 60
        assert conf.socket_connect_timeout == 5

    def test_invalid_timeout_ignored(self) -> None:
        """Test that unparseable timeouts fall back to defaults."""
        with patch.dict(os.environ, {"DATAHUB_SOCKET_TIMEOUT": "soon"}, clear=True):
            conf = DatahubConfiguration.from_env()
        assert conf.socket_timeout == 30

    def test_overrides_win(self) -> None:
        """Test that explicit arguments take precedence."""
        with patch.dict(os.environ, {"DATAHUB_ENDPOINT": "https://env.example.com"}, clear=True):
            conf = DatahubConfiguration.from_env(endpoint="https://explicit.example.com")
        assert conf.endpoint == "https://explicit.example.com"

    def test_empty_environment(self) -> None:
        """Test configuration with nothing set."""
        with patch.dict(os.environ, {}, clear=True):
            conf = DatahubConfiguration.from_env()
        assert conf.endpoint == ""

"""
Client configuration consumed by the transport layer.

Timeouts are expressed in seconds, as the service documents them.
"""

from __future__ import annotations

import os
from contextlib import suppress
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Default timeouts (seconds)
_DEFAULT_SOCKET_TIMEOUT = 30
_DEFAULT_SOCKET_CONNECT_TIMEOUT = 10

_ENV_ENDPOINT = "DATAHUB_ENDPOINT"
_ENV_SOCKET_TIMEOUT = "DATAHUB_SOCKET_TIMEOUT"
_ENV_SOCKET_CONNECT_TIMEOUT = "DATAHUB_SOCKET_CONNECT_TIMEOUT"


class DatahubConfiguration(BaseModel):
    """Endpoint and socket settings shared by every connection.

    Example:
        >>> conf = DatahubConfiguration(endpoint="https://dh-cn-hangzhou.aliyuncs.com")
        >>> conf.socket_timeout
        30
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    endpoint: str = Field(default="", description="Base URL, e.g. https://dh.example.com")
    socket_timeout: int = Field(
        default=_DEFAULT_SOCKET_TIMEOUT, gt=0, description="Read timeout in seconds"
    )
    socket_connect_timeout: int = Field(
        default=_DEFAULT_SOCKET_CONNECT_TIMEOUT, gt=0, description="Connect timeout in seconds"
    )

    @field_validator("endpoint")
    @classmethod
    def _strip_endpoint(cls, value: str) -> str:
        return value.strip().rstrip("/")

    @classmethod
    def from_env(cls, **overrides: Any) -> DatahubConfiguration:
        """Build a configuration from environment variables.

        Reads DATAHUB_ENDPOINT, DATAHUB_SOCKET_TIMEOUT and
        DATAHUB_SOCKET_CONNECT_TIMEOUT. Unparseable timeouts are ignored.
        Explicit keyword arguments take precedence.
        """
        values: dict[str, Any] = {}

        endpoint = os.getenv(_ENV_ENDPOINT)
        if endpoint:
            values["endpoint"] = endpoint

        for env_name, field_name in (
            (_ENV_SOCKET_TIMEOUT, "socket_timeout"),
            (_ENV_SOCKET_CONNECT_TIMEOUT, "socket_connect_timeout"),
        ):
            raw = os.getenv(env_name)
            if raw:
                with suppress(ValueError):
                    values[field_name] = int(raw)

        values.update(overrides)
        return cls(**values)

    @property
    def socket_timeout_ms(self) -> int:
        """Read timeout in milliseconds."""
        return self.socket_timeout * 1000

    @property
    def socket_connect_timeout_ms(self) -> int:
        """Connect timeout in milliseconds."""
        return self.socket_connect_timeout * 1000

    def to_httpx_timeout(self) -> httpx.Timeout:
        """Convert to httpx Timeout.

        Writes are bounded by the read timeout, as there is no separate
        write setting.
        """
        return httpx.Timeout(
            connect=float(self.socket_connect_timeout),
            read=float(self.socket_timeout),
            write=float(self.socket_timeout),
            pool=float(self.socket_connect_timeout),
        )

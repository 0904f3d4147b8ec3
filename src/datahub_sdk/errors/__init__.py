"""Error hierarchy for datahub-sdk."""

from datahub_sdk.errors.base import (
    DatahubClientError,
    DatahubError,
    DatahubServiceError,
    ErrorContext,
    InvalidConnectionError,
    InvalidURIError,
    TransportError,
    UnsupportedProtocolError,
)

__all__ = [
    "DatahubClientError",
    "DatahubError",
    "DatahubServiceError",
    "ErrorContext",
    "InvalidConnectionError",
    "InvalidURIError",
    "TransportError",
    "UnsupportedProtocolError",
]

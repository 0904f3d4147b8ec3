"""datahub-sdk: Python client SDK for the DataHub streaming-data service.

Provides the HTTP connection used to talk to the DataHub API and typed
connector descriptors carried in its payloads.
"""
from __future__ import annotations

from datahub_sdk.configuration import DatahubConfiguration
from datahub_sdk.errors import (
    DatahubClientError,
    DatahubError,
    DatahubServiceError,
    TransportError,
)
from datahub_sdk.model import ConnectorConfig, ConnectorType, ElasticSearchDesc
from datahub_sdk.transport import (
    Connection,
    DefaultConnection,
    DefaultRequest,
    DefaultResponse,
    HttpMethod,
)

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "DatahubConfiguration",
    # Errors
    "DatahubClientError",
    "DatahubError",
    "DatahubServiceError",
    "TransportError",
    # Model
    "ConnectorConfig",
    "ConnectorType",
    "ElasticSearchDesc",
    # Transport
    "Connection",
    "DefaultConnection",
    "DefaultRequest",
    "DefaultResponse",
    "HttpMethod",
    # Version
    "__version__",
]

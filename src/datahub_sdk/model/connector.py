"""
Connector configuration base and registry.

A connector configuration describes an external sink that DataHub
pushes records to. Each concrete descriptor converts itself to and from
the JSON tree (a ``dict``) used in API payloads.
"""

from __future__ import annotations

import json
from abc import abstractmethod
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

from datahub_sdk.errors import DatahubClientError

C = TypeVar("C", bound="ConnectorConfig")


class ConnectorType(str, Enum):
    """Sink connector kinds known to the service."""

    SINK_ODPS = "sink_odps"
    SINK_ADS = "sink_ads"
    SINK_ES = "sink_es"
    SINK_FC = "sink_fc"
    SINK_MYSQL = "sink_mysql"
    SINK_OSS = "sink_oss"
    SINK_OTS = "sink_ots"
    SINK_HOLOGRES = "sink_hologres"
    SINK_DATAHUB = "sink_datahub"


class ConnectorConfig(BaseModel):
    """Base class for connector descriptors."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    @abstractmethod
    def to_json_node(self) -> dict[str, Any]:
        """Convert to the JSON tree sent to the service."""

    @abstractmethod
    def parse_from_json_node(self, node: Mapping[str, Any] | None) -> None:
        """Update this descriptor in place from a JSON tree."""

    def to_json(self) -> str:
        """Serialize to a JSON string."""
        return json.dumps(self.to_json_node())

    @classmethod
    def from_json_node(cls: type[C], node: Mapping[str, Any] | None) -> C:
        """Create a descriptor from a JSON tree."""
        config = cls()
        config.parse_from_json_node(node)
        return config


_CONNECTOR_CONFIGS: dict[ConnectorType, type[ConnectorConfig]] = {}


def register_connector_config(
    connector_type: ConnectorType,
) -> Callable[[type[C]], type[C]]:
    """Class decorator binding a descriptor class to a connector type."""

    def decorator(cls: type[C]) -> type[C]:
        _CONNECTOR_CONFIGS[connector_type] = cls
        return cls

    return decorator


def get_connector_config_class(connector_type: ConnectorType | str) -> type[ConnectorConfig]:
    """Look up the descriptor class for a connector type.

    Raises:
        DatahubClientError: If the type is unknown or has no descriptor
    """
    if isinstance(connector_type, ConnectorType):
        kind = connector_type
    else:
        try:
            kind = ConnectorType(str(connector_type).lower())
        except ValueError:
            raise DatahubClientError(f"Unknown connector type: {connector_type}") from None

    config_cls = _CONNECTOR_CONFIGS.get(kind)
    if config_cls is None:
        raise DatahubClientError(f"Unsupported connector type: {kind.value}")
    return config_cls


def parse_connector_config(
    connector_type: ConnectorType | str,
    node: Mapping[str, Any] | None,
) -> ConnectorConfig:
    """Parse a connector's config node into its descriptor."""
    return get_connector_config_class(connector_type).from_json_node(node)

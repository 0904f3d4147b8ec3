"""Connector descriptors exchanged with the DataHub API."""

from datahub_sdk.model.connector import (
    ConnectorConfig,
    ConnectorType,
    get_connector_config_class,
    parse_connector_config,
    register_connector_config,
)
from datahub_sdk.model.elasticsearch import ElasticSearchDesc

__all__ = [
    "ConnectorConfig",
    "ConnectorType",
    "ElasticSearchDesc",
    "get_connector_config_class",
    "parse_connector_config",
    "register_connector_config",
]

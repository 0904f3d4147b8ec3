"""Tests for the connector config registry."""

import pytest

from datahub_sdk.errors import DatahubClientError
from datahub_sdk.model import (
    ConnectorConfig,
    ConnectorType,
    ElasticSearchDesc,
    get_connector_config_class,
    parse_connector_config,
)


class TestRegistry:
    """Tests for connector type lookup."""

    def test_es_registered(self) -> None:
        """Test that the Elasticsearch sink maps to its descriptor."""
        assert get_connector_config_class(ConnectorType.SINK_ES) is ElasticSearchDesc

    def test_lookup_by_string(self) -> None:
        """Test lookup by the wire value, case-insensitively."""
        assert get_connector_config_class("sink_es") is ElasticSearchDesc
        assert get_connector_config_class("SINK_ES") is ElasticSearchDesc

    def test_unknown_type(self) -> None:
        """Test that unknown connector types are rejected."""
        with pytest.raises(DatahubClientError, match="Unknown connector type"):
            get_connector_config_class("sink_kafka")

    def test_type_without_descriptor(self) -> None:
        """Test that known types without a descriptor are rejected."""
        with pytest.raises(DatahubClientError, match="Unsupported connector type: sink_odps"):
            get_connector_config_class(ConnectorType.SINK_ODPS)

    def test_parse_connector_config(self) -> None:
        """Test parsing a config node for a connector type."""
        config = parse_connector_config(
            "sink_es",
            {"Index": "logs-2024", "IDFields": '["id"]'},
        )
        assert isinstance(config, ElasticSearchDesc)
        assert config.index == "logs-2024"
        assert config.id_fields == ["id"]

    def test_parse_missing_node(self) -> None:
        """Test that a missing node is reported through the registry too."""
        with pytest.raises(DatahubClientError, match="missing config"):
            parse_connector_config(ConnectorType.SINK_ES, None)


class TestConnectorConfig:
    """Tests for the descriptor base class."""

    def test_base_is_abstract(self) -> None:
        """Test that the base class cannot be instantiated."""
        with pytest.raises(TypeError):
            ConnectorConfig()  # type: ignore[abstract]

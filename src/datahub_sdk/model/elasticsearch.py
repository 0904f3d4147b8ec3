"""
Elasticsearch sink descriptor.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import Field

from datahub_sdk.errors import DatahubClientError, DatahubServiceError
from datahub_sdk.model.connector import (
    ConnectorConfig,
    ConnectorType,
    register_connector_config,
)

_TEXT_FIELDS = (
    ("Index", "index"),
    ("Endpoint", "endpoint"),
    ("User", "user"),
    ("Password", "password"),
)
_LIST_FIELDS = (
    ("IDFields", "id_fields"),
    ("TypeFields", "type_fields"),
)


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    # Containers have no scalar text
    if isinstance(value, (dict, list)):
        return ""
    return json.dumps(value)


def _parse_field_list(key: str, value: Any) -> list[str]:
    """Decode a field-name list.

    The service may send the list either as a JSON array or as a string
    holding a JSON-encoded array.
    """
    if isinstance(value, str):
        if not value.strip():
            return []
        try:
            value = json.loads(value)
        except json.JSONDecodeError as e:
            raise DatahubServiceError(f"Parse {key} failed:{value}", raw=value) from e

    if not isinstance(value, list):
        return []
    return [_as_text(item) for item in value]


@register_connector_config(ConnectorType.SINK_ES)
class ElasticSearchDesc(ConnectorConfig):
    """Configuration of an Elasticsearch sink connector.

    Example:
        >>> desc = ElasticSearchDesc(index="logs-2024", id_fields=["id", "ts"])
        >>> desc.to_json_node()["IDFields"]
        ['id', 'ts']
    """

    index: str | None = Field(default=None, alias="Index")
    endpoint: str | None = Field(default=None, alias="Endpoint")
    user: str | None = Field(default=None, alias="User")
    password: str | None = Field(default=None, alias="Password", repr=False)
    id_fields: list[str] = Field(default_factory=list, alias="IDFields")
    type_fields: list[str] = Field(default_factory=list, alias="TypeFields")

    def to_json_node(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

    def parse_from_json_node(self, node: Mapping[str, Any] | None) -> None:
        """Update fields present in ``node``; absent or null fields are kept.

        Raises:
            DatahubClientError: If ``node`` is None or empty
            DatahubServiceError: If a field list is not valid JSON
        """
        if not node:
            raise DatahubClientError("Invalid response, missing config.")

        for key, attr in _TEXT_FIELDS:
            value = node.get(key)
            if value is not None:
                setattr(self, attr, _as_text(value))

        for key, attr in _LIST_FIELDS:
            value = node.get(key)
            if value is not None:
                setattr(self, attr, _parse_field_list(key, value))

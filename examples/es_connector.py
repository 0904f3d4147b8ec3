#!/usr/bin/env python3
"""
Elasticsearch connector example.

Fetches a topic's Elasticsearch sink configuration and prints it.

Usage:
    export DATAHUB_ENDPOINT="https://dh-cn-hangzhou.aliyuncs.com"
    python examples/es_connector.py my_project my_topic
"""

import json
import sys

from datahub_sdk import (
    DatahubConfiguration,
    DefaultConnection,
    DefaultRequest,
    ElasticSearchDesc,
    HttpMethod,
)


def main(project: str, topic: str) -> None:
    """Run the connector example."""
    conf = DatahubConfiguration.from_env()
    request = DefaultRequest(
        HttpMethod.GET,
        f"/projects/{project}/topics/{topic}/connectors/sink_es",
        headers={"Accept-Encoding": "gzip", "x-datahub-client-version": "1.1"},
    )

    with DefaultConnection(conf) as conn:
        conn.connect(request)
        response = conn.get_response()
        payload = json.loads(conn.get_input_stream().read() or b"{}")

    if response.status >= 400:
        print(f"Request failed ({response.status}): {payload}")
        return

    desc = ElasticSearchDesc.from_json_node(payload.get("Config"))
    print(f"Index: {desc.index}")
    print(f"Endpoint: {desc.endpoint}")
    print(f"ID fields: {desc.id_fields}")
    print(f"Type fields: {desc.type_fields}")


if __name__ == "__main__":
    main(*sys.argv[1:3])

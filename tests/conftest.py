"""Root pytest fixtures for datahub-sdk tests."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from datahub_sdk.configuration import DatahubConfiguration

TEST_ENDPOINT = "test://datahub.example.com"


@pytest.fixture
def conf() -> DatahubConfiguration:
    """Configuration pointing at the harness ``test`` scheme."""
    return DatahubConfiguration(
        endpoint=TEST_ENDPOINT,
        socket_timeout=30,
        socket_connect_timeout=10,
    )


@pytest.fixture
def captured() -> list[httpx.Request]:
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def make_transport(
    captured: list[httpx.Request],
) -> Callable[[httpx.Response], httpx.MockTransport]:
    """Build a mock transport that records requests and replies with ``response``."""

    def factory(response: httpx.Response) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return response

        return httpx.MockTransport(handler)

    return factory

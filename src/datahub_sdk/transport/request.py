"""
Request and response descriptors exchanged with a Connection.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class HttpMethod(str, Enum):
    """HTTP methods understood by the service."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
    PATCH = "PATCH"
    OPTIONS = "OPTIONS"


@dataclass
class DefaultRequest:
    """A single API request.

    Attributes:
        http_method: HTTP method
        resource: Resource path appended to the configured endpoint
        headers: Request headers (one value per name)
        body: Optional request payload
    """

    http_method: HttpMethod = HttpMethod.GET
    resource: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None


@dataclass
class DefaultResponse:
    """Status, headers and body read back from a Connection.

    Attributes:
        status: HTTP status code
        headers: Response headers in arrival order; repeated headers are
            joined with ","
        body: Response body bytes
    """

    status: int = 0
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def get_header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None

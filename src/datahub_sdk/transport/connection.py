"""
Connection interface implemented by transports.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import IO, TYPE_CHECKING

if TYPE_CHECKING:
    from datahub_sdk.transport.request import DefaultRequest, DefaultResponse


class Connection(ABC):
    """One request/response exchange with the service.

    Lifecycle: ``connect(request)`` -> optionally write the body through
    ``get_output_stream()`` -> ``get_response()`` / ``get_input_stream()``
    -> ``disconnect()``. Every method except ``connect`` requires an open
    connection and raises ``InvalidConnectionError`` otherwise.
    """

    @abstractmethod
    def connect(self, request: DefaultRequest) -> None:
        """Open a connection for ``request``."""

    @abstractmethod
    def get_output_stream(self) -> IO[bytes]:
        """Return a writable stream for the request body."""

    @abstractmethod
    def get_response(self) -> DefaultResponse:
        """Return the response status and headers."""

    @abstractmethod
    def get_input_stream(self) -> IO[bytes]:
        """Return a readable stream over the response payload."""

    @abstractmethod
    def disconnect(self) -> None:
        """Release the underlying connection."""

"""Base error classes for datahub-sdk.

Provides a layered error hierarchy:
- DatahubError: Base class for all SDK errors
- TransportError: HTTP/network (I/O) errors
- InvalidURIError: Malformed or schemeless request URI
- UnsupportedProtocolError: Request URI scheme is not HTTP-family
- InvalidConnectionError: Connection used before connect, or no stream
- DatahubClientError: Client-side misuse or missing input
- DatahubServiceError: Malformed payload returned by the service
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ErrorContext:
    """Structured error context for diagnostics."""

    details: dict[str, Any] = field(default_factory=dict)
    """Additional details about the error"""

    source: str | None = None
    """Error source (e.g., 'transport', 'client', 'service')"""

    hint: str | None = None
    """Actionable hint for resolving the error"""

    def __str__(self) -> str:
        parts = []
        if self.source:
            parts.append(f"[{self.source}]")
        if self.hint:
            parts.append(f"(hint: {self.hint})")
        return " ".join(parts)


class DatahubError(Exception):
    """Base class for all datahub-sdk errors.

    Attributes:
        message: Human-readable error message
        context: Structured error context
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
    ) -> None:
        self.message = message
        self.context = context or ErrorContext()
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = str(self.context)
        if ctx_str:
            return f"{self.message} {ctx_str}"
        return self.message

    def with_hint(self, hint: str) -> DatahubError:
        """Add a hint to this error."""
        self.context.hint = hint
        return self


class TransportError(DatahubError):
    """I/O error while talking to the service.

    Raised when:
    - Network connection failure
    - Timeout
    - The connection is misused or has no readable stream
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        url: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="transport")
        if url:
            ctx.details["url"] = url
        super().__init__(message, ctx)
        self.url = url
        self.__cause__ = cause


class InvalidURIError(TransportError, ValueError):
    """Request URI is malformed or lacks a scheme."""


class UnsupportedProtocolError(TransportError):
    """Request URI scheme is not one of http, https or test."""

    def __init__(self, scheme: str, *, url: str | None = None) -> None:
        super().__init__(f"Protocol not supported: {scheme}", url=url)
        self.scheme = scheme


class InvalidConnectionError(TransportError):
    """Connection accessed while unconnected, or no payload stream exists."""

    def __init__(self, message: str = "Invalid connection.", *, url: str | None = None) -> None:
        super().__init__(message, url=url)


class DatahubClientError(DatahubError):
    """Error caused by the caller or by missing input on the client side."""

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(message, context or ErrorContext(source="client"))


class DatahubServiceError(DatahubError):
    """Error caused by an unexpected payload from the service.

    Attributes:
        raw: The offending raw payload, when available
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        raw: str | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="service")
        if raw is not None:
            ctx.details["raw"] = raw
        super().__init__(message, ctx)
        self.raw = raw

"""
HTTP transport using httpx for blocking request/response exchanges.

Provides:
- Fixed-length and chunked request framing
- Configurable read/connect timeouts
- Injected certificate policy
- Gzip response decoding and error-stream selection
"""

from __future__ import annotations

import gzip
import io
import os
from enum import Enum
from typing import IO, TYPE_CHECKING, Any

import httpx

from datahub_sdk.errors import (
    InvalidConnectionError,
    InvalidURIError,
    TransportError,
    UnsupportedProtocolError,
)
from datahub_sdk.telemetry import LogLevel, get_logger
from datahub_sdk.transport import headers as hdr
from datahub_sdk.transport.auth import ignore_https_certs
from datahub_sdk.transport.connection import Connection
from datahub_sdk.transport.request import DefaultResponse

if TYPE_CHECKING:
    from collections.abc import Iterator

    from datahub_sdk.configuration import DatahubConfiguration
    from datahub_sdk.transport.auth import CertPolicy
    from datahub_sdk.transport.request import DefaultRequest

logger = get_logger(__name__)

SUPPORTED_SCHEMES = frozenset({"http", "https", "test"})


def _trust_env_enabled() -> bool:
    """Use env proxy settings only when explicitly enabled."""
    return os.getenv("DATAHUB_HTTP_TRUST_ENV", "0") == "1"


class Framing(str, Enum):
    """How the request body is framed on the wire."""

    NONE = "none"
    FIXED_LENGTH = "fixed_length"
    CHUNKED = "chunked"


def _iter_chunks(data: bytes, size: int = hdr.CHUNK_SIZE) -> Iterator[bytes]:
    for offset in range(0, len(data), size):
        yield data[offset : offset + size]


def _set_header(headers: dict[str, str], name: str, value: str) -> None:
    for existing in [k for k in headers if k.lower() == name.lower()]:
        del headers[existing]
    headers[name] = value


def _wrap_http_error(exc: httpx.HTTPError, url: str) -> TransportError:
    if isinstance(exc, httpx.UnsupportedProtocol):
        return UnsupportedProtocolError(httpx.URL(url).scheme, url=url)
    if isinstance(exc, httpx.ConnectError):
        message = f"Connection failed: {exc}"
    elif isinstance(exc, httpx.TimeoutException):
        message = f"Request timed out: {exc}"
    else:
        message = f"HTTP error: {exc}"
    return TransportError(message, url=url, cause=exc)


class RequestBodyWriter(io.BytesIO):
    """Writable buffer whose contents become the request body."""

    def __init__(self) -> None:
        super().__init__()
        self.payload = b""

    def close(self) -> None:
        if not self.closed:
            self.payload = self.getvalue()
        super().close()

    def contents(self) -> bytes:
        """Bytes written so far, whether or not the writer was closed."""
        return self.payload if self.closed else self.getvalue()


class ResponseStream(io.RawIOBase):
    """Raw (undecoded) response payload as a readable binary stream."""

    def __init__(self, response: httpx.Response) -> None:
        super().__init__()
        self._response = response
        self._chunks = response.iter_raw()
        self._pending = b""

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: Any) -> int:
        while not self._pending:
            try:
                self._pending = next(self._chunks)
            except StopIteration:
                return 0
            except httpx.HTTPError as e:
                raise _wrap_http_error(e, str(self._response.url)) from e
        size = min(len(buffer), len(self._pending))
        buffer[:size] = self._pending[:size]
        self._pending = self._pending[size:]
        return size

    def close(self) -> None:
        if not self.closed:
            self._response.close()
        super().close()


class DefaultConnection(Connection):
    """Connection backed by a blocking httpx client.

    One instance carries exactly one request at a time. The request is
    prepared by ``connect`` and sent lazily, the first time the response
    or its payload is requested, so that a body written through
    ``get_output_stream`` is included.

    Example:
        >>> conn = DefaultConnection(DatahubConfiguration(endpoint="https://dh.example.com"))
        >>> conn.connect(DefaultRequest(HttpMethod.GET, "/projects"))
        >>> try:
        ...     resp = conn.get_response()
        ...     payload = conn.get_input_stream().read()
        ... finally:
        ...     conn.disconnect()
    """

    def __init__(
        self,
        conf: DatahubConfiguration,
        *,
        cert_policy: CertPolicy = ignore_https_certs,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the connection.

        Args:
            conf: Endpoint and timeout configuration
            cert_policy: Decides certificate verification for the target URL
            transport: Optional httpx transport (e.g. ``httpx.MockTransport``
                for the ``test`` scheme)
        """
        self._conf = conf
        self._cert_policy = cert_policy
        self._transport = transport

        self._client: httpx.Client | None = None
        self._request: DefaultRequest | None = None
        self._url: httpx.URL | None = None
        self._headers: dict[str, str] = {}
        self._framing = Framing.NONE
        self._content_length: int | None = None
        self._writer: RequestBodyWriter | None = None
        self._response: httpx.Response | None = None
        self._input_stream: IO[bytes] | None = None

    @property
    def connected(self) -> bool:
        """Whether ``connect`` succeeded and ``disconnect`` was not called."""
        return self._client is not None

    @property
    def url(self) -> httpx.URL | None:
        """Target URL of the current request."""
        return self._url

    @property
    def framing(self) -> Framing:
        """Body framing chosen for the current request."""
        return self._framing

    @property
    def chunk_size(self) -> int | None:
        """Chunk size when chunked framing is in effect."""
        return hdr.CHUNK_SIZE if self._framing is Framing.CHUNKED else None

    @property
    def content_length(self) -> int | None:
        """Declared body length when fixed-length framing is in effect."""
        return self._content_length if self._framing is Framing.FIXED_LENGTH else None

    def connect(self, request: DefaultRequest) -> None:
        if self.connected:
            error = TransportError("Connection already established.", url=str(self._url))
            logger.error(error.message, uri=str(self._url))
            raise error

        raw_uri = self._conf.endpoint + request.resource
        logger.debug("Connecting", uri=raw_uri)

        try:
            url = httpx.URL(raw_uri)
        except httpx.InvalidURL as e:
            error = InvalidURIError(f"Invalid request URI: {raw_uri}", url=raw_uri, cause=e)
            logger.error(error.message, uri=raw_uri)
            raise error from e

        if not url.scheme:
            error = InvalidURIError("Request URI(http or https) required.", url=raw_uri)
            logger.error(error.message, uri=raw_uri)
            raise error

        if url.scheme.lower() not in SUPPORTED_SCHEMES:
            error = UnsupportedProtocolError(url.scheme, url=raw_uri)
            logger.error(error.message, uri=raw_uri)
            raise error

        framing = Framing.NONE
        content_length: int | None = None
        headers: dict[str, str] = {}

        if request.body is not None:
            content_length = len(request.body)
            headers[hdr.CONTENT_LENGTH] = str(content_length)
            framing = Framing.FIXED_LENGTH

        if request.headers:
            if logger.is_enabled_for(LogLevel.DEBUG):
                logger.debug("Request headers", headers=dict(request.headers))
            for key, value in request.headers.items():
                if request.body is not None and key.lower() == hdr.CONTENT_LENGTH.lower():
                    # Fixed-length framing always declares the real body length
                    continue
                _set_header(headers, key, value)
                if (
                    key.lower() == hdr.TRANSFER_ENCODING.lower()
                    and value.lower() == hdr.CHUNKED
                ):
                    framing = Framing.CHUNKED

        if framing is Framing.CHUNKED:
            # Chunked framing replaces Content-Length no matter the header order
            headers = {k: v for k, v in headers.items() if k.lower() != hdr.CONTENT_LENGTH.lower()}

        client_kwargs: dict[str, Any] = {
            "timeout": self._conf.to_httpx_timeout(),
            "verify": self._cert_policy(url),
            "trust_env": _trust_env_enabled(),
            "follow_redirects": False,
        }
        if self._transport is not None:
            client_kwargs["transport"] = self._transport

        self._client = httpx.Client(**client_kwargs)
        self._request = request
        self._url = url
        self._headers = headers
        self._framing = framing
        self._content_length = content_length

    def get_output_stream(self) -> IO[bytes]:
        self._check_connection()
        if self._response is not None:
            raise TransportError("Cannot write request body after response has been read.")
        if self._writer is None:
            self._writer = RequestBodyWriter()
        return self._writer

    def get_response(self) -> DefaultResponse:
        self._check_connection()
        response = self._ensure_response()

        headers: dict[str, str] = {}
        names: dict[str, str] = {}
        encoding = response.headers.encoding
        for raw_key, raw_value in response.headers.raw:
            key = raw_key.decode(encoding)
            value = raw_value.decode(encoding)
            name = names.setdefault(key.lower(), key)
            if name in headers:
                headers[name] = f"{headers[name]},{value}"
            else:
                headers[name] = value

        # Body carries the status line text; the payload is read through
        # get_input_stream().
        return DefaultResponse(
            status=response.status_code,
            headers=headers,
            body=response.reason_phrase.encode(),
        )

    def get_input_stream(self) -> IO[bytes]:
        self._check_connection()
        if self._input_stream is not None:
            return self._input_stream

        response = self._ensure_response()
        if response.is_closed or (
            response.status_code // 100 >= 4 and response.headers.get(hdr.CONTENT_LENGTH) == "0"
        ):
            raise InvalidConnectionError(url=str(self._url))

        stream: IO[bytes] = io.BufferedReader(ResponseStream(response))
        encoding = response.headers.get(hdr.CONTENT_ENCODING)
        if encoding is not None and encoding.lower() == hdr.GZIP:
            stream = gzip.GzipFile(fileobj=stream, mode="rb")

        self._input_stream = stream
        return stream

    def disconnect(self) -> None:
        self._check_connection()
        client = self._client
        response = self._response

        self._client = None
        self._response = None
        self._input_stream = None
        self._writer = None
        self._request = None

        try:
            if response is not None:
                response.close()
        finally:
            if client is not None:
                client.close()

    def _check_connection(self) -> None:
        if self._client is None:
            raise InvalidConnectionError()

    def _build_content(self) -> bytes | Iterator[bytes] | None:
        assert self._request is not None
        if self._writer is not None:
            body: bytes | None = self._writer.contents()
            if (
                self._framing is Framing.FIXED_LENGTH
                and self._content_length is not None
                and len(body) != self._content_length
            ):
                error = TransportError(
                    f"Content-Length mismatch: declared {self._content_length}, "
                    f"written {len(body)}",
                    url=str(self._url),
                )
                logger.error(error.message, uri=str(self._url))
                raise error
        else:
            body = self._request.body

        if self._framing is Framing.CHUNKED:
            return _iter_chunks(body or b"")
        return body

    def _ensure_response(self) -> httpx.Response:
        if self._response is not None:
            return self._response

        assert self._client is not None
        assert self._request is not None
        url = str(self._url)
        content = self._build_content()

        http_request = self._client.build_request(
            self._request.http_method.value,
            url,
            headers=self._headers,
            content=content,
        )
        try:
            self._response = self._client.send(http_request, stream=True)
        except httpx.HTTPError as e:
            error = _wrap_http_error(e, url)
            logger.error(error.message, uri=url)
            raise error from e

        logger.debug("Response received", uri=url, status=self._response.status_code)
        return self._response

    def __enter__(self) -> DefaultConnection:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self.connected:
            self.disconnect()

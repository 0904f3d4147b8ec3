"""HTTP header names and values with special transport behavior."""

from __future__ import annotations

CONTENT_LENGTH = "Content-Length"
CONTENT_TYPE = "Content-Type"
CONTENT_ENCODING = "Content-Encoding"
TRANSFER_ENCODING = "Transfer-Encoding"
USER_AGENT = "User-Agent"
AUTHORIZATION = "Authorization"

CHUNKED = "chunked"
GZIP = "gzip"

# Chunk payload size used when chunked framing is requested.
CHUNK_SIZE = 1500 - 4

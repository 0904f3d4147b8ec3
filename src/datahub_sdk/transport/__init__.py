"""
Transport layer - HTTP connections to the DataHub API.

Provides an httpx-based connection with:
- Fixed-length and chunked request framing
- Read/connect timeout management
- Injected certificate policy
- Gzip decoding and error-stream fallback
"""

from datahub_sdk.transport.auth import CertPolicy, ignore_https_certs, verify_https_certs
from datahub_sdk.transport.connection import Connection
from datahub_sdk.transport.http import DefaultConnection, Framing
from datahub_sdk.transport.request import DefaultRequest, DefaultResponse, HttpMethod

__all__ = [
    "CertPolicy",
    "Connection",
    "DefaultConnection",
    "DefaultRequest",
    "DefaultResponse",
    "Framing",
    "HttpMethod",
    "ignore_https_certs",
    "verify_https_certs",
]

"""
Certificate policies applied when a connection is opened.

A policy receives the target URL and returns the value handed to httpx as
``verify``: ``False`` skips certificate checks, ``True`` uses the default
trust store, an ``ssl.SSLContext`` gives full control.
"""

from __future__ import annotations

import ssl
from typing import Callable, Union

import httpx

VerifyType = Union[bool, ssl.SSLContext]
CertPolicy = Callable[[httpx.URL], VerifyType]


def ignore_https_certs(url: httpx.URL) -> VerifyType:
    """Disable certificate verification for every URL."""
    return False


def verify_https_certs(url: httpx.URL) -> VerifyType:
    """Verify certificates against the default trust store."""
    return True

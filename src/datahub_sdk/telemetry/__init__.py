"""
Telemetry module for datahub-sdk.

Provides structured logging with credential masking.
"""

from datahub_sdk.telemetry.logger import (
    DatahubLogger,
    JsonFormatter,
    LogLevel,
    SensitiveDataMasker,
    TextFormatter,
    get_logger,
)

__all__ = [
    "DatahubLogger",
    "JsonFormatter",
    "LogLevel",
    "SensitiveDataMasker",
    "TextFormatter",
    "get_logger",
]

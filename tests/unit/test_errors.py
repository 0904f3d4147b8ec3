"""Tests for error module."""

from datahub_sdk.errors import (
    DatahubClientError,
    DatahubError,
    DatahubServiceError,
    ErrorContext,
    InvalidConnectionError,
    InvalidURIError,
    TransportError,
    UnsupportedProtocolError,
)


class TestErrorContext:
    """Tests for ErrorContext."""

    def test_empty_context(self) -> None:
        """Test empty context string representation."""
        assert str(ErrorContext()) == ""

    def test_context_with_source_and_hint(self) -> None:
        """Test context with source and hint."""
        ctx = ErrorContext(source="transport", hint="Check the endpoint")
        assert str(ctx) == "[transport] (hint: Check the endpoint)"


class TestDatahubError:
    """Tests for base error class."""

    def test_basic_error(self) -> None:
        """Test basic error creation."""
        error = DatahubError("Something went wrong")
        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"

    def test_with_hint(self) -> None:
        """Test adding hint to error."""
        error = DatahubError("Failed").with_hint("Retry later")
        assert error.context.hint == "Retry later"


class TestTransportErrors:
    """Tests for transport error kinds."""

    def test_transport_error(self) -> None:
        """Test transport error creation."""
        cause = OSError("reset")
        error = TransportError("Connection failed", url="https://dh.example.com", cause=cause)
        assert error.url == "https://dh.example.com"
        assert error.context.details["url"] == "https://dh.example.com"
        assert error.__cause__ is cause
        assert "[transport]" in str(error)

    def test_invalid_uri_error(self) -> None:
        """Test that invalid URI errors are both transport and value errors."""
        error = InvalidURIError("Invalid request URI: x")
        assert isinstance(error, TransportError)
        assert isinstance(error, ValueError)

    def test_unsupported_protocol(self) -> None:
        """Test unsupported protocol message."""
        error = UnsupportedProtocolError("ftp", url="ftp://x")
        assert error.scheme == "ftp"
        assert error.message == "Protocol not supported: ftp"

    def test_invalid_connection_default_message(self) -> None:
        """Test invalid connection message."""
        assert InvalidConnectionError().message == "Invalid connection."


class TestClientServiceErrors:
    """Tests for client and service errors."""

    def test_client_error(self) -> None:
        """Test client error source."""
        error = DatahubClientError("Invalid response, missing config.")
        assert error.context.source == "client"
        assert isinstance(error, DatahubError)

    def test_service_error_raw(self) -> None:
        """Test that service errors keep the raw payload."""
        error = DatahubServiceError("Parse IDFields failed:[", raw="[")
        assert error.raw == "["
        assert error.context.details["raw"] == "["
        assert error.context.source == "service"

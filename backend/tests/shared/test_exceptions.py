"""Tests for shared/exceptions.py."""

from shared.exceptions import (
    PropostasError,
    ConfigurationError,
    ValidationError,
    AuthenticationError,
    ExternalServiceError,
)


class TestPropostasError:
    def test_message(self):
        """PropostasError should store message."""
        error = PropostasError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_default_code(self):
        """PropostasError should default code to class name."""
        assert PropostasError("Test error").code == "PropostasError"

    def test_custom_code_and_details(self):
        """PropostasError should accept custom code and details."""
        error = PropostasError("Test error", code="CUSTOM", details={"key": "value"})
        assert error.code == "CUSTOM"
        assert error.details == {"key": "value"}

    def test_to_dict(self):
        """to_dict should produce the API error body."""
        assert PropostasError("Boom").to_dict() == {"error": "Boom"}


class TestSubclasses:
    def test_hierarchy(self):
        """All error bases should inherit from PropostasError."""
        for cls in (ConfigurationError, ValidationError, AuthenticationError):
            assert issubclass(cls, PropostasError)
        assert issubclass(ExternalServiceError, PropostasError)

    def test_external_service_error_records_service(self):
        """ExternalServiceError should record the service name in details."""
        error = ExternalServiceError("Down", service="supabase")
        assert error.service == "supabase"
        assert error.details["service"] == "supabase"

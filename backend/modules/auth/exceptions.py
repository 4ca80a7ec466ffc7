"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError, ValidationError


class MissingTokenError(AuthenticationError):
    """Raised when no session token is provided."""

    def __init__(self, message: str = "token missing"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidTokenError(AuthenticationError):
    """
    Raised when a session token cannot be accepted.

    Expired, malformed and mis-signed tokens all raise this same error.
    """

    def __init__(self, message: str = "invalid token"):
        super().__init__(message, code="INVALID_TOKEN")


class EmailNotConfirmedError(AuthenticationError):
    """Raised when the account exists but its e-mail was never confirmed."""

    def __init__(self, email: str):
        super().__init__(
            "Login failed: e-mail not confirmed yet. Please check your inbox.",
            code="EMAIL_NOT_CONFIRMED",
            details={"email": email},
        )


class InvalidCredentialsError(ValidationError):
    """Raised for every other sign-in failure."""

    def __init__(self, message: str = "Invalid email or password."):
        super().__init__(message, code="INVALID_CREDENTIALS")


class MissingFieldsError(ValidationError):
    """Raised when required request fields are absent or empty."""

    def __init__(self, message: str, fields: list[str]):
        super().__init__(message, code="MISSING_FIELDS", details={"fields": fields})


class DomainNotPermittedError(ValidationError):
    """Raised when a registration e-mail is outside the permitted domain."""

    def __init__(self, domain: str):
        super().__init__(
            f"Registration permitted only for e-mails from the {domain} domain.",
            code="DOMAIN_NOT_PERMITTED",
            details={"domain": domain},
        )


class RegistrationError(ValidationError):
    """Raised when the identity provider rejects a sign-up."""

    def __init__(self, message: str = "Error registering user."):
        super().__init__(message, code="REGISTRATION_FAILED")

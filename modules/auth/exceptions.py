"""
Authentication module exceptions.

Local validation errors are raised before any I/O. Provider errors carry
a provider-independent AuthErrorCode and the message shown to the user.
"""

from typing import Optional

from shared.exceptions import AuthenticationError, ValidationError

from .models import AuthErrorCode


USER_MESSAGES: dict[AuthErrorCode, str] = {
    AuthErrorCode.EMAIL_IN_USE: "This email address is already in use.",
    AuthErrorCode.INVALID_EMAIL: "Invalid email address.",
    AuthErrorCode.WEAK_PASSWORD: "Password is too weak. Use at least 6 characters.",
    AuthErrorCode.EMAIL_NOT_VERIFIED: "Email address has not been verified.",
    AuthErrorCode.INVALID_CREDENTIALS: "Sign-in failed. Please check your email and password.",
    AuthErrorCode.UNKNOWN: "Something went wrong. Please try again.",
}


def user_message(code: AuthErrorCode) -> str:
    """Message shown in the error dialog for a provider error code."""
    return USER_MESSAGES.get(code, USER_MESSAGES[AuthErrorCode.UNKNOWN])


REGISTRATION_TITLE = "Registration error"


class RegistrationValidationError(ValidationError):
    """Raised when the registration form fails local validation."""

    title = REGISTRATION_TITLE

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(
            message,
            code="REGISTRATION_INVALID",
            details={"field": field} if field else {},
        )


class LoginValidationError(ValidationError):
    """Raised when the login form is incomplete."""

    def __init__(self, message: str = "Please enter your email and password."):
        super().__init__(message, code="LOGIN_INVALID")


class ProviderAuthError(AuthenticationError):
    """Raised when the auth provider rejects an operation."""

    def __init__(self, code: AuthErrorCode, provider_message: Optional[str] = None):
        super().__init__(
            user_message(code),
            code=code.value.upper(),
            details={"provider_message": provider_message} if provider_message else {},
        )
        self.error_code = code


class EmailNotVerifiedError(ProviderAuthError):
    """Raised when an unverified identity tries to sign in."""

    title = "Not verified yet"

    def __init__(self):
        super().__init__(AuthErrorCode.EMAIL_NOT_VERIFIED)


class NotSignedInError(AuthenticationError):
    """Raised when an operation needs a signed-in identity and there is none."""

    def __init__(self, message: str = "No user is signed in"):
        super().__init__(message, code="NOT_SIGNED_IN")

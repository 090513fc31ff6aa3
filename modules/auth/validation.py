"""
Local form validation for the auth screens.

Runs before any network call; a failure raises and nothing is mutated.
"""

from typing import Optional

from shared.config import get_settings

from .models import RegisterRequest, LoginRequest
from .exceptions import RegistrationValidationError, LoginValidationError


def validate_registration(request: RegisterRequest, min_password_length: Optional[int] = None) -> None:
    """
    Validate a registration form.

    Checks, in order: all fields filled, terms accepted, password length.

    Raises:
        RegistrationValidationError: On the first failing check
    """
    if min_password_length is None:
        min_password_length = get_settings().min_password_length

    if not request.display_name.strip() or not request.email.strip() or not request.password.strip():
        raise RegistrationValidationError("Please fill in all fields.")
    if not request.terms_accepted:
        raise RegistrationValidationError("You must accept the terms of use.", field="terms_accepted")
    if len(request.password) < min_password_length:
        raise RegistrationValidationError(
            f"Password must be at least {min_password_length} characters.",
            field="password",
        )


def validate_login(request: LoginRequest) -> None:
    """
    Raises:
        LoginValidationError: If email or password is empty
    """
    if not request.email.strip() or not request.password:
        raise LoginValidationError()

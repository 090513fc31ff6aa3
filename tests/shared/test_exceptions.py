"""Tests for shared/exceptions.py."""

from shared.exceptions import (
    MarketplaceError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    GENERIC_ALERT_TITLE,
    GENERIC_ALERT_MESSAGE,
    alert_for,
)
from modules.auth.exceptions import EmailNotVerifiedError, RegistrationValidationError
from modules.storage.exceptions import ImageUploadError


class TestMarketplaceError:
    def test_defaults_code_to_class_name(self):
        """Code should default to the exception class name."""
        error = MarketplaceError("Something broke")
        assert error.message == "Something broke"
        assert error.code == "MarketplaceError"
        assert error.details == {}
        assert error.title == GENERIC_ALERT_TITLE

    def test_to_dict(self):
        """to_dict should carry code, title, message and details."""
        error = NotFoundError("Missing", code="THING_NOT_FOUND", details={"id": "1"})
        assert error.to_dict() == {
            "error": "THING_NOT_FOUND",
            "title": "Not found",
            "message": "Missing",
            "details": {"id": "1"},
        }

    def test_subclasses_share_base(self):
        """All error families should derive from MarketplaceError."""
        for cls in (NotFoundError, ValidationError, AuthenticationError, AuthorizationError):
            assert issubclass(cls, MarketplaceError)

    def test_title_override_is_per_instance(self):
        overridden = ValidationError("Bad", title="Check the form")
        assert overridden.title == "Check the form"
        assert ValidationError("Bad").title == "Missing information"


class TestExternalServiceError:
    def test_records_service(self):
        """Should record the failing service in details."""
        error = ExternalServiceError("Upload failed", service="supabase-storage")
        assert error.service == "supabase-storage"
        assert error.details["service"] == "supabase-storage"


class TestAlertFor:
    def test_own_errors_show_their_message(self):
        assert alert_for(AuthorizationError("You cannot edit this listing.")) == (
            "Not allowed",
            "You cannot edit this listing.",
        )

    def test_module_titles(self):
        assert alert_for(EmailNotVerifiedError())[0] == "Not verified yet"
        assert alert_for(RegistrationValidationError("Please fill in all fields.")) == (
            "Registration error",
            "Please fill in all fields.",
        )

    def test_service_errors_hide_service_detail(self):
        """The alert should not leak the backend's own error text."""
        error = ExternalServiceError("HTTP 503 from storage-api", service="supabase-storage")
        assert alert_for(error) == (GENERIC_ALERT_TITLE, GENERIC_ALERT_MESSAGE)

    def test_upload_error_alert(self):
        title, message = alert_for(ImageUploadError("listings/u/1.jpg", "timeout"))
        assert title == "Upload failed"
        assert "timeout" not in message

    def test_unexpected_errors_get_generic_alert(self):
        assert alert_for(RuntimeError("boom")) == (GENERIC_ALERT_TITLE, GENERIC_ALERT_MESSAGE)

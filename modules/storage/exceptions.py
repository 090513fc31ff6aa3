"""
Storage exceptions.
"""

from typing import Optional

from shared.exceptions import ExternalServiceError


class ImageUploadError(ExternalServiceError):
    """Raised when an image cannot be read or uploaded."""

    title = "Upload failed"
    alert_message = "The image could not be uploaded. Please try again."

    def __init__(self, path: str, reason: str, service: Optional[str] = None):
        super().__init__(
            f"Image upload failed for {path}: {reason}",
            service=service or "supabase-storage",
            code="IMAGE_UPLOAD_FAILED",
            details={"path": path, "reason": reason},
        )

"""Custom exceptions for the application."""

from enum import Enum


class ApplicationError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationReason(str, Enum):
    """Why a submission was rejected."""

    MISSING_FIELDS = "missing_fields"
    UNSUPPORTED_FILE_TYPE = "unsupported_file_type"
    FILE_TOO_LARGE = "file_too_large"


class ValidationError(ApplicationError):
    """Raised when a submission fails validation.

    The message is user-facing and is returned as-is in the response.
    """

    def __init__(self, reason: ValidationReason, message: str):
        self.reason = reason
        super().__init__(message)


class ConfigurationError(ApplicationError):
    """Raised when required server configuration is missing."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Server misconfigured: {detail}")


class DeliveryError(ApplicationError):
    """Raised when the email provider rejects a notification."""

    def __init__(self, status_code: int, detail: str | None = None):
        self.status_code = status_code
        self.detail = detail or ""
        super().__init__(f"Email provider error ({status_code}): {self.detail}")

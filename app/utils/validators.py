"""Validation logic for form submissions."""

from dataclasses import dataclass

from app.core.exceptions import ValidationReason
from app.schemas.submission import ApplicationSubmission, ContactSubmission

PDF_CONTENT_TYPE = "application/pdf"
MAX_RESUME_SIZE = 5 * 1024 * 1024

MISSING_APPLICATION_FIELDS = "Faltan campos requeridos (nombre, email, teléfono, CV)"
MISSING_CONTACT_FIELDS = "Faltan campos requeridos"
RESUME_TOO_LARGE = "El archivo es demasiado grande. Máximo 5MB."


@dataclass
class ValidationResult:
    """Result of validation process."""

    is_valid: bool
    error: str | None = None
    reason: ValidationReason | None = None


def validate_application(submission: ApplicationSubmission) -> ValidationResult:
    """Validate a job application.

    Checks run in order and the first failure wins: required fields,
    then the résumé MIME type, then its size.
    """
    resume = submission.resume
    if (
        not submission.full_name
        or not submission.email
        or not submission.phone
        or resume is None
    ):
        return ValidationResult(
            is_valid=False,
            error=MISSING_APPLICATION_FIELDS,
            reason=ValidationReason.MISSING_FIELDS,
        )

    if resume.content_type != PDF_CONTENT_TYPE:
        return ValidationResult(
            is_valid=False,
            error=f"Solo se aceptan archivos PDF. Recibido: {resume.content_type}",
            reason=ValidationReason.UNSUPPORTED_FILE_TYPE,
        )

    if resume.size_bytes > MAX_RESUME_SIZE:
        return ValidationResult(
            is_valid=False,
            error=RESUME_TOO_LARGE,
            reason=ValidationReason.FILE_TOO_LARGE,
        )

    return ValidationResult(is_valid=True)


def validate_contact(submission: ContactSubmission) -> ValidationResult:
    """Validate a contact-form message. Phone is optional."""
    if (
        not submission.name
        or not submission.email
        or not submission.subject
        or not submission.message
    ):
        return ValidationResult(
            is_valid=False,
            error=MISSING_CONTACT_FIELDS,
            reason=ValidationReason.MISSING_FIELDS,
        )

    return ValidationResult(is_valid=True)

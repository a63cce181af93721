"""Pydantic schemas for request/response validation."""

from app.schemas.email import EmailAttachment, OutboundEmail
from app.schemas.submission import (
    ApplicationSubmission,
    ContactSubmission,
    ResumeFile,
    SubmissionResponse,
)

__all__ = [
    "ApplicationSubmission",
    "ContactSubmission",
    "EmailAttachment",
    "OutboundEmail",
    "ResumeFile",
    "SubmissionResponse",
]

"""Schemas for incoming form submissions and the JSON reply."""

from pydantic import BaseModel, Field


class ResumeFile(BaseModel):
    """Uploaded résumé as received in the multipart body."""

    filename: str = ""
    content_type: str = ""
    size_bytes: int = Field(..., ge=0)
    content: bytes = b""


class ApplicationSubmission(BaseModel):
    """Job application read from the `/enviar-candidatura` form."""

    full_name: str = ""
    email: str = ""
    phone: str = ""
    cover_message: str = ""
    resume: ResumeFile | None = None


class ContactSubmission(BaseModel):
    """Contact-form message read from the `/enviar-contacto` JSON body."""

    name: str = ""
    email: str = ""
    phone: str = ""
    subject: str = ""
    message: str = ""


class SubmissionResponse(BaseModel):
    """JSON body returned by both endpoints."""

    success: bool
    message: str

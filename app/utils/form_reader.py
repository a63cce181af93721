"""Read submissions out of incoming request bodies."""

import logging
from typing import Any

from starlette.datastructures import FormData, UploadFile

from app.schemas.submission import ApplicationSubmission, ContactSubmission, ResumeFile

logger = logging.getLogger(__name__)


def _text(value: Any) -> str:
    if value is None or isinstance(value, UploadFile):
        return ""
    return value if isinstance(value, str) else str(value)


def _first(form: FormData, key: str) -> Any:
    values = form.getlist(key)
    return values[0] if values else None


async def _read_resume(value: Any) -> ResumeFile | None:
    if not isinstance(value, UploadFile):
        return None

    content = await value.read()
    if not content and not value.filename:
        # Browsers send an empty part when no file was chosen
        return None

    return ResumeFile(
        filename=value.filename or "",
        content_type=value.content_type or "",
        size_bytes=len(content),
        content=content,
    )


async def read_application_form(form: FormData) -> ApplicationSubmission:
    """Build an ApplicationSubmission from multipart form data.

    Missing fields are left empty; validation happens later.
    """
    resume = await _read_resume(_first(form, "cv"))
    submission = ApplicationSubmission(
        full_name=_text(_first(form, "nombre")),
        email=_text(_first(form, "email")),
        phone=_text(_first(form, "telefono")),
        cover_message=_text(_first(form, "mensaje")),
        resume=resume,
    )

    logger.info(
        "Application form received: nombre=%s email=%s telefono=%s mensaje=%s "
        "cv=%s cv_type=%s cv_size=%s",
        bool(submission.full_name),
        bool(submission.email),
        bool(submission.phone),
        bool(submission.cover_message),
        resume is not None,
        resume.content_type if resume else None,
        resume.size_bytes if resume else None,
    )
    return submission


def read_contact_payload(payload: Any) -> ContactSubmission:
    """Build a ContactSubmission from a decoded JSON body."""
    if not isinstance(payload, dict):
        payload = {}

    return ContactSubmission(
        name=_text(payload.get("name")),
        email=_text(payload.get("email")),
        phone=_text(payload.get("phone")),
        subject=_text(payload.get("subject")),
        message=_text(payload.get("message")),
    )

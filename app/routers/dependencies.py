"""Shared FastAPI dependencies for the form routers."""

from fastapi import Depends

from app.core.config import Settings, get_settings
from app.services.resend_client import ResendClient, get_resend_client
from app.services.submission_service import (
    SubmissionService,
    create_submission_service,
)


async def get_submission_service(
    email_client: ResendClient = Depends(get_resend_client),
    settings: Settings = Depends(get_settings),
) -> SubmissionService:
    """Create submission service with dependencies."""
    return create_submission_service(email_client, settings)

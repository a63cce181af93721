"""Application services."""

from app.services.resend_client import DeliveryResult, ResendClient
from app.services.submission_service import (
    SubmissionService,
    create_submission_service,
)

__all__ = [
    "DeliveryResult",
    "ResendClient",
    "SubmissionService",
    "create_submission_service",
]

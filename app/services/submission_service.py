"""Submission service relaying website forms to the business inbox."""

import logging

from app.core.config import Settings
from app.core.exceptions import ConfigurationError, DeliveryError, ValidationError
from app.schemas.email import OutboundEmail
from app.schemas.submission import ApplicationSubmission, ContactSubmission
from app.services.email_builder import (
    build_application_confirmation,
    build_application_notification,
    build_contact_notification,
)
from app.services.resend_client import DeliveryResult, ResendClient
from app.utils.validators import ValidationResult, validate_application, validate_contact

logger = logging.getLogger(__name__)


class SubmissionService:
    """Validates submissions and delivers the resulting emails."""

    def __init__(self, email_client: ResendClient, settings: Settings):
        self.email_client = email_client
        self.settings = settings

    @staticmethod
    def _raise_if_invalid(result: ValidationResult) -> None:
        if not result.is_valid:
            logger.info(f"Submission rejected ({result.reason.value}): {result.error}")
            raise ValidationError(result.reason, result.error)

    def _recipient(self) -> str:
        """Return the inbox address, checking the provider credential too."""
        if not self.settings.resend_api_key:
            logger.error("RESEND_API_KEY is not configured")
            raise ConfigurationError("RESEND_API_KEY is not configured")

        if not self.settings.contact_to:
            logger.error("CONTACT_TO is not configured")
            raise ConfigurationError("CONTACT_TO is not configured")

        return self.settings.contact_to

    async def _deliver(self, email: OutboundEmail) -> DeliveryResult:
        result = await self.email_client.send(email)
        if not result.succeeded:
            raise DeliveryError(result.status_code, result.error_body)
        return result

    async def submit_application(
        self, submission: ApplicationSubmission
    ) -> DeliveryResult:
        """Send the hiring notification for a job application.

        Raises ValidationError, ConfigurationError or DeliveryError. The
        applicant confirmation is not sent here; see send_application_confirmation.
        """
        self._raise_if_invalid(validate_application(submission))
        recipient = self._recipient()

        email = build_application_notification(submission, recipient)
        result = await self._deliver(email)
        logger.info(f"Application notification delivered ({result.status_code})")
        return result

    async def send_application_confirmation(
        self, submission: ApplicationSubmission
    ) -> None:
        """Best-effort acknowledgement to the applicant. Never raises."""
        try:
            result = await self.email_client.send(
                build_application_confirmation(submission)
            )
            if not result.succeeded:
                logger.warning(
                    f"Confirmation email rejected ({result.status_code}): {result.error_body}"
                )
        except Exception as e:
            logger.error(f"Error sending confirmation email: {e}", exc_info=True)

    async def submit_contact(self, submission: ContactSubmission) -> DeliveryResult:
        """Send a contact-form message to the business inbox."""
        self._raise_if_invalid(validate_contact(submission))
        recipient = self._recipient()

        email = build_contact_notification(submission, recipient)
        result = await self._deliver(email)
        logger.info(f"Contact notification delivered ({result.status_code})")
        return result


def create_submission_service(
    email_client: ResendClient, settings: Settings
) -> SubmissionService:
    """Factory function to create SubmissionService with dependencies."""
    return SubmissionService(email_client, settings)

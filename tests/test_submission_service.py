"""Tests for SubmissionService."""

import logging
from unittest.mock import AsyncMock

import httpx
import pytest

from app.core.config import Settings
from app.core.exceptions import (
    ConfigurationError,
    DeliveryError,
    ValidationError,
    ValidationReason,
)
from app.schemas.submission import ContactSubmission
from app.services.resend_client import DeliveryResult
from app.services.submission_service import (
    SubmissionService,
    create_submission_service,
)


@pytest.fixture
def service(mock_email_client, test_settings):
    return create_submission_service(mock_email_client, test_settings)


@pytest.fixture
def contact():
    return ContactSubmission(
        name="Luis", email="luis@x.com", subject="Reserva", message="Hola"
    )


class TestSubmitApplication:
    """Tests for submit_application."""

    @pytest.mark.asyncio
    async def test_sends_notification_only(self, service, mock_email_client, sample_application):
        """Test a valid application sends exactly one notification."""
        result = await service.submit_application(sample_application)

        assert result.succeeded is True
        mock_email_client.send.assert_awaited_once()
        email = mock_email_client.send.await_args.args[0]
        assert email.to == ["rrhh@mantagua.com"]
        assert email.attachments[0].filename == "cv.pdf"

    @pytest.mark.asyncio
    async def test_invalid_application_not_sent(self, service, mock_email_client, sample_application):
        """Test validation failures never reach the provider."""
        application = sample_application.model_copy(update={"phone": ""})

        with pytest.raises(ValidationError) as exc_info:
            await service.submit_application(application)

        assert exc_info.value.reason == ValidationReason.MISSING_FIELDS
        mock_email_client.send.assert_not_called()

    @pytest.mark.asyncio
    async def test_validation_runs_before_configuration(self, mock_email_client, sample_application):
        """Test an invalid submission is reported even when misconfigured."""
        service = SubmissionService(
            mock_email_client, Settings(_env_file=None, resend_api_key=None)
        )
        application = sample_application.model_copy(update={"full_name": ""})

        with pytest.raises(ValidationError):
            await service.submit_application(application)

    @pytest.mark.asyncio
    async def test_missing_api_key(self, mock_email_client, sample_application):
        """Test a missing API key is a configuration error."""
        service = SubmissionService(
            mock_email_client,
            Settings(_env_file=None, resend_api_key=None, contact_to="rrhh@mantagua.com"),
        )

        with pytest.raises(ConfigurationError) as exc_info:
            await service.submit_application(sample_application)

        assert "RESEND_API_KEY" in exc_info.value.detail
        mock_email_client.send.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("contact_to", [None, ""])
    async def test_missing_destination(self, mock_email_client, sample_application, contact_to):
        """Test a missing inbox address is a configuration error."""
        service = SubmissionService(
            mock_email_client,
            Settings(_env_file=None, resend_api_key="re_key", contact_to=contact_to),
        )

        with pytest.raises(ConfigurationError) as exc_info:
            await service.submit_application(sample_application)

        assert "CONTACT_TO" in exc_info.value.detail
        mock_email_client.send.assert_not_called()

    @pytest.mark.asyncio
    async def test_provider_rejection(self, service, mock_email_client, sample_application):
        """Test a non-2xx reply raises DeliveryError with the body."""
        mock_email_client.send.return_value = DeliveryResult(
            succeeded=False, status_code=422, error_body="invalid from"
        )

        with pytest.raises(DeliveryError) as exc_info:
            await service.submit_application(sample_application)

        assert exc_info.value.status_code == 422
        assert exc_info.value.detail == "invalid from"


class TestSendApplicationConfirmation:
    """Tests for send_application_confirmation."""

    @pytest.mark.asyncio
    async def test_sends_to_applicant(self, service, mock_email_client, sample_application):
        """Test the confirmation goes to the applicant."""
        await service.send_application_confirmation(sample_application)

        email = mock_email_client.send.await_args.args[0]
        assert email.to == ["ana@x.com"]

    @pytest.mark.asyncio
    async def test_exception_swallowed_and_logged(self, service, mock_email_client, sample_application, caplog):
        """Test a failing confirmation never raises."""
        mock_email_client.send = AsyncMock(side_effect=httpx.ConnectError("down"))

        with caplog.at_level(logging.ERROR):
            await service.send_application_confirmation(sample_application)

        assert any("confirmation" in r.getMessage() for r in caplog.records)

    @pytest.mark.asyncio
    async def test_rejection_logged(self, service, mock_email_client, sample_application, caplog):
        """Test a rejected confirmation is only logged."""
        mock_email_client.send.return_value = DeliveryResult(
            succeeded=False, status_code=500, error_body="oops"
        )

        with caplog.at_level(logging.WARNING):
            await service.send_application_confirmation(sample_application)

        assert any("oops" in r.getMessage() for r in caplog.records)


class TestSubmitContact:
    """Tests for submit_contact."""

    @pytest.mark.asyncio
    async def test_sends_notification(self, service, mock_email_client, contact):
        """Test a valid contact message is delivered to the inbox."""
        await service.submit_contact(contact)

        email = mock_email_client.send.await_args.args[0]
        assert email.to == ["rrhh@mantagua.com"]
        assert email.subject == "Contacto web: Reserva"

    @pytest.mark.asyncio
    async def test_missing_fields(self, service, mock_email_client, contact):
        """Test an incomplete contact message is rejected."""
        with pytest.raises(ValidationError):
            await service.submit_contact(contact.model_copy(update={"message": ""}))
        mock_email_client.send.assert_not_called()

    @pytest.mark.asyncio
    async def test_provider_rejection(self, service, mock_email_client, contact):
        """Test a non-2xx reply raises DeliveryError."""
        mock_email_client.send.return_value = DeliveryResult(
            succeeded=False, status_code=500, error_body="down"
        )
        with pytest.raises(DeliveryError):
            await service.submit_contact(contact)

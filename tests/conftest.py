"""Pytest configuration and fixtures."""

import os
import sys
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

# Add the app directory to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.config import Settings, get_settings  # noqa: E402
from app.schemas.submission import ApplicationSubmission, ResumeFile  # noqa: E402
from app.services.resend_client import DeliveryResult, get_resend_client  # noqa: E402

PDF_BYTES = b"%PDF-1.4\n1 0 obj << /Type /Catalog >> endobj\n%%EOF\n"


@pytest.fixture
def test_settings():
    """Settings with every required value present."""
    return Settings(
        _env_file=None,
        resend_api_key="re_test_key",
        contact_to="rrhh@mantagua.com",
    )


@pytest.fixture
def mock_email_client():
    """Mock Resend client whose sends all succeed."""
    client = MagicMock()
    client.send = AsyncMock(
        return_value=DeliveryResult(succeeded=True, status_code=200)
    )
    return client


@pytest.fixture
def sample_resume():
    """Small valid PDF résumé."""
    return ResumeFile(
        filename="cv.pdf",
        content_type="application/pdf",
        size_bytes=len(PDF_BYTES),
        content=PDF_BYTES,
    )


@pytest.fixture
def sample_application(sample_resume):
    """Valid job application."""
    return ApplicationSubmission(
        full_name="Ana",
        email="ana@x.com",
        phone="+56911112222",
        cover_message="Me encantaría trabajar en la cocina.",
        resume=sample_resume,
    )


@pytest.fixture
def make_client(mock_email_client):
    """Build a TestClient with injected settings and email client."""
    from app.main import app

    def _make(settings: Settings) -> TestClient:
        app.dependency_overrides[get_settings] = lambda: settings
        app.dependency_overrides[get_resend_client] = lambda: mock_email_client
        return TestClient(app, raise_server_exceptions=False)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def test_client(make_client, test_settings):
    """TestClient for a fully configured deployment."""
    return make_client(test_settings)

import logging
from dataclasses import dataclass

import httpx
from fastapi import Depends

from app.core.config import Settings, get_settings
from app.schemas.email import OutboundEmail

logger = logging.getLogger(__name__)


@dataclass
class DeliveryResult:
    """Outcome of one send call."""

    succeeded: bool
    status_code: int
    error_body: str | None = None


class ResendClient:
    """Resend transactional email API client.

    A fresh httpx client is opened for every send so an instance can be
    shared between the request and tasks that run after the response.
    """

    API_BASE = "https://api.resend.com"
    EMAILS_ENDPOINT = "/emails"

    def __init__(
        self,
        api_key: str | None,
        base_url: str = API_BASE,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout),
            transport=self._transport,
        )

    async def send(self, email: OutboundEmail) -> DeliveryResult:
        """POST one email. Non-2xx responses are returned, not raised."""
        async with self._http_client() as client:
            response = await client.post(
                self.EMAILS_ENDPOINT,
                json=email.to_payload(),
                headers={"Authorization": f"Bearer {self.api_key}"},
            )

        if response.is_success:
            logger.info(
                f"Email to {len(email.to)} recipient(s) accepted by Resend ({response.status_code})"
            )
            return DeliveryResult(succeeded=True, status_code=response.status_code)

        logger.error(f"Resend error {response.status_code}: {response.text[:500]}")
        return DeliveryResult(
            succeeded=False,
            status_code=response.status_code,
            error_body=response.text,
        )


def get_resend_client(settings: Settings = Depends(get_settings)) -> ResendClient:
    """FastAPI dependency for the Resend client."""
    return ResendClient(
        api_key=settings.resend_api_key,
        base_url=settings.resend_base_url,
        timeout=settings.resend_timeout,
    )

"""Schemas for emails sent through the Resend API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EmailAttachment(BaseModel):
    """File attached to an outbound email."""

    filename: str
    content: str = Field(..., description="Base64-encoded file content")


class OutboundEmail(BaseModel):
    """Email payload accepted by `POST /emails`."""

    model_config = ConfigDict(populate_by_name=True)

    sender: str = Field(..., alias="from")
    to: list[str]
    subject: str
    html: str
    attachments: list[EmailAttachment] | None = None

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the provider's JSON shape."""
        return self.model_dump(by_alias=True, exclude_none=True)

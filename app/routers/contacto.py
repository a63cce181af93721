"""API routes for the website contact form."""

from fastapi import APIRouter, Depends, Request

from app.core.responses import failure_response, preflight_response, success_response
from app.routers.dependencies import get_submission_service
from app.services.submission_service import SubmissionService
from app.utils.form_reader import read_contact_payload

router = APIRouter(prefix="/enviar-contacto", tags=["contacto"])

CONTACT_SENT = "Email enviado correctamente"
CONTACT_DELIVERY_FAILED = "Error enviando email"


@router.options("")
async def contact_preflight():
    """Answer the CORS preflight."""
    return preflight_response()


@router.post("")
async def submit_contact(
    request: Request,
    service: SubmissionService = Depends(get_submission_service),
):
    """Relay a contact-form message to the business inbox."""
    try:
        submission = read_contact_payload(await request.json())
        await service.submit_contact(submission)
    except Exception as e:
        return failure_response(e, CONTACT_DELIVERY_FAILED)

    return success_response(CONTACT_SENT)

"""API routes for job applications with a CV attached."""

from fastapi import APIRouter, BackgroundTasks, Depends, Request

from app.core.responses import failure_response, preflight_response, success_response
from app.routers.dependencies import get_submission_service
from app.services.submission_service import SubmissionService
from app.utils.form_reader import read_application_form

router = APIRouter(prefix="/enviar-candidatura", tags=["candidatura"])

APPLICATION_RECEIVED = (
    "Candidatura recibida correctamente. Te enviaremos un email de confirmación."
)
APPLICATION_DELIVERY_FAILED = "Error enviando candidatura"


@router.options("")
async def application_preflight():
    """Answer the CORS preflight."""
    return preflight_response()


@router.post("")
async def submit_application(
    request: Request,
    background_tasks: BackgroundTasks,
    service: SubmissionService = Depends(get_submission_service),
):
    """Relay a job application to the hiring inbox and confirm to the applicant."""
    try:
        form = await request.form()
        submission = await read_application_form(form)
        await service.submit_application(submission)
    except Exception as e:
        return failure_response(e, APPLICATION_DELIVERY_FAILED)

    background_tasks.add_task(service.send_application_confirmation, submission)
    return success_response(APPLICATION_RECEIVED)

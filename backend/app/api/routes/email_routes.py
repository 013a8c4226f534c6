from fastapi import APIRouter, Depends

from app.schemas import MessageResponse, SubmissionRequest
from app.api.routes.utils.email_utils import EmailService, get_email_service


router = APIRouter(prefix="/email", tags=["Email"])


# ---------------------------
# Contact Form Submission
# ---------------------------
@router.post("", response_model=MessageResponse)
async def send_email(
    payload: SubmissionRequest,
    email_service: EmailService = Depends(get_email_service),
):
    await email_service.deliver(payload)

    return {"message": "Email sent successfully"}

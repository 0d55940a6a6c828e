"""Reviewer notification route."""
import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from waittimes.exceptions import NotificationError
from waittimes.schemas.notification import ReviewEmailRequest, ReviewEmailResponse
from waittimes.services.notification_service import notify_reviewer

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/send-email", response_model=ReviewEmailResponse)
def send_review_email(payload: ReviewEmailRequest):
    """Email the reviewer about a new wait time. Store state is never touched."""
    try:
        notify_reviewer(payload.hospital_name, payload.new_wait_time)
    except NotificationError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": "Failed to send email"},
        )
    return ReviewEmailResponse(success=True, message="Email sent")

"""Public submission routes — intake plus the approved-only read views."""
import logging
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from waittimes.config import settings
from waittimes.database import get_db
from waittimes.exceptions import NotificationError
from waittimes.schemas.submission import SubmissionCreate, SubmissionOut
from waittimes.services import aggregation, submission_store
from waittimes.services.notification_service import notify_reviewer

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/", response_model=SubmissionOut, status_code=status.HTTP_201_CREATED)
def create_submission(payload: SubmissionCreate, response: Response, db: Session = Depends(get_db)):
    """Submit a wait-time report. It starts pending until an admin reviews it."""
    submission = submission_store.insert(db, payload.hospital_name, payload.wait_time)

    if settings.NOTIFY_ON_SUBMIT:
        # The submission is already committed; a mail failure is reported, not rolled back.
        try:
            notify_reviewer(submission.hospital_name, submission.wait_time)
            response.headers["X-Notification-Status"] = "sent"
        except NotificationError as exc:
            logger.warning("Submission %s stored but reviewer not notified: %s", submission.submission_id, exc)
            response.headers["X-Notification-Status"] = "failed"
    return submission


@router.get("/current", response_model=dict[str, SubmissionOut])
def current_wait_times(db: Session = Depends(get_db)):
    """Latest approved wait time per hospital."""
    return aggregation.current_wait_times(db)


@router.get("/history", response_model=list[SubmissionOut])
def approved_history(db: Session = Depends(get_db)):
    """Every approved submission, oldest first."""
    return aggregation.approved_history(db)


@router.get("/trends", response_model=dict[str, dict[str, int]])
def trends(db: Session = Depends(get_db)):
    """Average approved wait time per hospital and weekday."""
    return aggregation.trends_by_weekday(db)


@router.get("/hospitals", response_model=list[str])
def hospitals(db: Session = Depends(get_db)):
    """Hospitals with at least one approved report."""
    return submission_store.list_hospitals(db)

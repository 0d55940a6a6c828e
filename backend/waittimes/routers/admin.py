"""Admin moderation routes — review queue and approve/reject/delete actions."""
import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from waittimes.auth import require_admin
from waittimes.database import get_db
from waittimes.schemas.submission import AdminLoginOut, DeleteOut, SubmissionOut
from waittimes.services import moderation

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/login", response_model=AdminLoginOut, dependencies=[Depends(require_admin)])
def admin_login():
    """Check the admin password. 401 when it does not match."""
    return AdminLoginOut(authorized=True)


@router.get("/submissions/pending", response_model=list[SubmissionOut], dependencies=[Depends(require_admin)])
def list_pending(db: Session = Depends(get_db)):
    """Submissions awaiting review, oldest first."""
    return moderation.list_pending(db)


@router.get("/submissions/approved", response_model=list[SubmissionOut], dependencies=[Depends(require_admin)])
def list_approved(db: Session = Depends(get_db)):
    """Approved submissions, newest first."""
    return moderation.list_approved(db)


@router.get("/submissions/rejected", response_model=list[SubmissionOut], dependencies=[Depends(require_admin)])
def list_rejected(db: Session = Depends(get_db)):
    """Rejected submissions, newest first."""
    return moderation.list_rejected(db)


@router.post("/submissions/{submission_id}/approve", response_model=SubmissionOut, dependencies=[Depends(require_admin)])
def approve_submission(submission_id: str, db: Session = Depends(get_db)):
    """Approve a submission. Also flips a previously rejected one."""
    return moderation.approve(db, submission_id)


@router.post("/submissions/{submission_id}/reject", response_model=SubmissionOut, dependencies=[Depends(require_admin)])
def reject_submission(submission_id: str, db: Session = Depends(get_db)):
    """Reject a submission. Also flips a previously approved one."""
    return moderation.reject(db, submission_id)


@router.delete("/submissions/{submission_id}", response_model=DeleteOut, dependencies=[Depends(require_admin)])
def delete_submission(submission_id: str, db: Session = Depends(get_db)):
    """Permanently delete a submission."""
    moderation.remove(db, submission_id)
    return DeleteOut(deleted=True, submission_id=submission_id)

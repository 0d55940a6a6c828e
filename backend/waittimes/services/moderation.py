"""Moderation state machine for wait-time submissions.

pending ──approve──▶ approved ◀──approve/reject──▶ rejected ◀──reject── pending

Approve and reject set the target status unconditionally, so both are
idempotent and an administrator may flip an earlier decision. Nothing
returns to pending. Removal deletes the record outright.

There is no locking: two simultaneous decisions on the same id race at
the store and the last commit wins.
"""
import logging

from sqlalchemy.orm import Session

from waittimes.models.submission import SubmissionStatus, WaitTimeSubmission
from waittimes.services import submission_store
from waittimes.services.aggregation import by_timestamp

logger = logging.getLogger(__name__)


def _transition(db: Session, submission_id: str, target: SubmissionStatus) -> WaitTimeSubmission:
    current = submission_store.get(db, submission_id)
    previous = current.status
    if previous == target:
        logger.info("Submission %s already %s", submission_id, target.value)
        return current
    submission = submission_store.update_status(db, submission_id, target)
    logger.info("Submission %s %s -> %s", submission_id, previous.value, target.value)
    return submission


def approve(db: Session, submission_id: str) -> WaitTimeSubmission:
    return _transition(db, submission_id, SubmissionStatus.approved)


def reject(db: Session, submission_id: str) -> WaitTimeSubmission:
    return _transition(db, submission_id, SubmissionStatus.rejected)


def remove(db: Session, submission_id: str) -> None:
    """Permanently delete a submission. Irreversible."""
    submission_store.delete(db, submission_id)
    logger.info("Submission %s deleted", submission_id)


def list_pending(db: Session) -> list[WaitTimeSubmission]:
    """Pending submissions, oldest first."""
    pending = submission_store.query_by_status(db, SubmissionStatus.pending)
    return sorted(pending, key=by_timestamp)


def list_approved(db: Session) -> list[WaitTimeSubmission]:
    """Approved submissions, newest first."""
    approved = submission_store.query_by_status(db, SubmissionStatus.approved)
    return sorted(approved, key=by_timestamp, reverse=True)


def list_rejected(db: Session) -> list[WaitTimeSubmission]:
    """Rejected submissions, newest first."""
    rejected = submission_store.query_by_status(db, SubmissionStatus.rejected)
    return sorted(rejected, key=by_timestamp, reverse=True)

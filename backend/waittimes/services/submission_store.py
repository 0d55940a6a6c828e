"""Submission store — persistence contract for WaitTimeSubmission records.

The store owns no moderation or aggregation logic. It validates intake,
assigns ids and timestamps, and translates database failures into
``StoreUnavailableError`` so callers see one distinguishable outcome.
Each write is a single commit; concurrent writers to the same record
race at the database and the last commit wins.
"""
import logging
from datetime import datetime
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from waittimes.exceptions import NotFoundError, StoreUnavailableError, ValidationError
from waittimes.models.submission import SubmissionStatus, WaitTimeSubmission

logger = logging.getLogger(__name__)


MAX_HOSPITAL_NAME_LENGTH = 200  # matches the hospital_name column
MAX_WAIT_TIME = 2_147_483_647  # 32-bit INTEGER column

_WAIT_TIME_MESSAGE = "wait_time must be a non-negative whole number of minutes"


def validate_hospital_name(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("hospital_name must be a non-empty string")
    name = value.strip()
    if len(name) > MAX_HOSPITAL_NAME_LENGTH:
        raise ValidationError(f"hospital_name must be at most {MAX_HOSPITAL_NAME_LENGTH} characters")
    if not name.isprintable():
        raise ValidationError("hospital_name must not contain control characters")
    return name


def validate_wait_time(value: Any) -> int:
    """Coerce an intake wait time to whole, non-negative minutes."""
    if isinstance(value, bool) or value is None:
        raise ValidationError(_WAIT_TIME_MESSAGE)
    if isinstance(value, str):
        text = value.strip()
        if not (text.isascii() and text.isdigit()):
            raise ValidationError(_WAIT_TIME_MESSAGE)
        # Long digit strings are out of range anyway; skip int() on them.
        if len(text.lstrip("0")) > len(str(MAX_WAIT_TIME)):
            raise ValidationError(f"wait_time must be at most {MAX_WAIT_TIME} minutes")
        value = int(text)
    if isinstance(value, float):
        if not value.is_integer():
            raise ValidationError(_WAIT_TIME_MESSAGE)
        value = int(value)
    if not isinstance(value, int) or value < 0:
        raise ValidationError(_WAIT_TIME_MESSAGE)
    if value > MAX_WAIT_TIME:
        raise ValidationError(f"wait_time must be at most {MAX_WAIT_TIME} minutes")
    return value


def _fail(db: Session, action: str, exc: SQLAlchemyError) -> StoreUnavailableError:
    db.rollback()
    logger.error("Store failure during %s: %s", action, exc)
    return StoreUnavailableError(f"Submission store unavailable during {action}")


def insert(
    db: Session,
    hospital_name: Any,
    wait_time: Any,
    timestamp: Optional[datetime] = None,
) -> WaitTimeSubmission:
    """Store a new submission. Status is always forced to pending."""
    name = validate_hospital_name(hospital_name)
    minutes = validate_wait_time(wait_time)

    submission = WaitTimeSubmission(
        hospital_name=name,
        wait_time=minutes,
        status=SubmissionStatus.pending,
    )
    if timestamp is not None:
        submission.timestamp = timestamp
    try:
        db.add(submission)
        db.commit()
        db.refresh(submission)
    except SQLAlchemyError as exc:
        raise _fail(db, "insert", exc) from exc
    logger.info("Stored submission %s for '%s' (%d min)", submission.submission_id, name, minutes)
    return submission


def get(db: Session, submission_id: str) -> WaitTimeSubmission:
    try:
        submission = (
            db.query(WaitTimeSubmission)
            .filter(WaitTimeSubmission.submission_id == submission_id)
            .first()
        )
    except SQLAlchemyError as exc:
        raise _fail(db, "get", exc) from exc
    if not submission:
        raise NotFoundError(f"Submission {submission_id} not found")
    return submission


def update_status(db: Session, submission_id: str, new_status: SubmissionStatus) -> WaitTimeSubmission:
    submission = get(db, submission_id)
    submission.status = new_status
    try:
        db.commit()
        db.refresh(submission)
    except SQLAlchemyError as exc:
        raise _fail(db, "update_status", exc) from exc
    return submission


def delete(db: Session, submission_id: str) -> None:
    submission = get(db, submission_id)
    try:
        db.delete(submission)
        db.commit()
    except SQLAlchemyError as exc:
        raise _fail(db, "delete", exc) from exc


def query_by_status(db: Session, status: SubmissionStatus) -> list[WaitTimeSubmission]:
    """All submissions with ``status``. Order unspecified; callers sort."""
    try:
        return db.query(WaitTimeSubmission).filter(WaitTimeSubmission.status == status).all()
    except SQLAlchemyError as exc:
        raise _fail(db, "query_by_status", exc) from exc


def list_hospitals(db: Session) -> list[str]:
    """Distinct hospital names with at least one approved submission."""
    try:
        rows = (
            db.query(WaitTimeSubmission.hospital_name)
            .filter(WaitTimeSubmission.status == SubmissionStatus.approved)
            .distinct()
            .all()
        )
    except SQLAlchemyError as exc:
        raise _fail(db, "list_hospitals", exc) from exc
    return sorted(name for (name,) in rows)

"""Aggregation engine — read views derived from approved submissions.

The reducers are pure functions over a sequence of submissions. The
session-taking wrappers at the bottom fetch the approved set fresh on
every call; nothing is cached between requests.
"""
import logging
from collections import defaultdict
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from sqlalchemy.orm import Session

from waittimes.models.submission import SubmissionStatus, WaitTimeSubmission
from waittimes.services import submission_store

logger = logging.getLogger(__name__)

# Fixed English labels, indexed by datetime.weekday(); independent of locale.
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def _as_utc(ts: datetime) -> datetime:
    """SQLite hands back naive datetimes; they were written as UTC."""
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def by_timestamp(submission: WaitTimeSubmission) -> datetime:
    """Sort key on the UTC-normalized timestamp."""
    return _as_utc(submission.timestamp)


def _approved_only(submissions: Iterable[WaitTimeSubmission]) -> list[WaitTimeSubmission]:
    return [s for s in submissions if s.status == SubmissionStatus.approved]


def weekday_name(ts: datetime) -> str:
    return WEEKDAYS[_as_utc(ts).weekday()]


def round_half_up(total: int, count: int) -> int:
    return int((Decimal(total) / Decimal(count)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def latest_per_hospital(submissions: Iterable[WaitTimeSubmission]) -> dict[str, WaitTimeSubmission]:
    """Most recent approved submission per hospital.

    Sorted newest first, the first submission seen for a hospital is its
    latest. Exact timestamp ties resolve in whatever order the sort leaves
    them.
    """
    latest: dict[str, WaitTimeSubmission] = {}
    for submission in sorted(_approved_only(submissions), key=by_timestamp, reverse=True):
        latest.setdefault(submission.hospital_name, submission)
    return latest


def chronological(submissions: Iterable[WaitTimeSubmission]) -> list[WaitTimeSubmission]:
    """Every approved submission, oldest first. No deduplication."""
    return sorted(_approved_only(submissions), key=by_timestamp)


def weekday_averages(submissions: Iterable[WaitTimeSubmission]) -> dict[str, dict[str, int]]:
    """hospital -> weekday -> mean wait time, rounded half up to whole minutes.

    Only (hospital, weekday) pairs with at least one approved submission
    appear in the result.
    """
    buckets: dict[str, dict[str, list[int]]] = defaultdict(lambda: defaultdict(list))
    for submission in _approved_only(submissions):
        buckets[submission.hospital_name][weekday_name(submission.timestamp)].append(submission.wait_time)

    trends: dict[str, dict[str, int]] = {}
    for hospital, days in buckets.items():
        trends[hospital] = {
            day: round_half_up(sum(waits), len(waits))
            for day, waits in sorted(days.items(), key=lambda item: WEEKDAYS.index(item[0]))
        }
    return trends


def current_wait_times(db: Session) -> dict[str, WaitTimeSubmission]:
    approved = submission_store.query_by_status(db, SubmissionStatus.approved)
    snapshot = latest_per_hospital(approved)
    logger.debug("Snapshot computed for %d hospitals from %d approved submissions", len(snapshot), len(approved))
    return snapshot


def approved_history(db: Session) -> list[WaitTimeSubmission]:
    return chronological(submission_store.query_by_status(db, SubmissionStatus.approved))


def trends_by_weekday(db: Session) -> dict[str, dict[str, int]]:
    approved = submission_store.query_by_status(db, SubmissionStatus.approved)
    trends = weekday_averages(approved)
    logger.debug("Trends computed for %d hospitals from %d approved submissions", len(trends), len(approved))
    return trends

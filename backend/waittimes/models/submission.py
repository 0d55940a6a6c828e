"""WaitTimeSubmission ORM model — the single crowd-reported observation."""
import uuid
import enum
from datetime import datetime, timezone

from sqlalchemy import Column, String, Integer, DateTime, Enum as SAEnum

from waittimes.database import Base


class SubmissionStatus(str, enum.Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class WaitTimeSubmission(Base):
    __tablename__ = "wait_time_submissions"

    submission_id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    hospital_name = Column(String(200), nullable=False, index=True)
    wait_time = Column(Integer, nullable=False)  # minutes
    status = Column(SAEnum(SubmissionStatus), nullable=False, default=SubmissionStatus.pending, index=True)
    timestamp = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    def __repr__(self) -> str:
        return (
            f"<WaitTimeSubmission {self.submission_id} {self.hospital_name!r} "
            f"{self.wait_time}min {self.status.value if self.status else None}>"
        )

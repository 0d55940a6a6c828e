"""Pydantic schemas for wait-time submissions."""
from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel

from waittimes.models.submission import SubmissionStatus


class SubmissionCreate(BaseModel):
    # Loosely typed so intake rules live in one place (submission_store).
    # Any client-supplied status is ignored.
    hospital_name: Optional[Any] = None
    wait_time: Optional[Any] = None


class SubmissionOut(BaseModel):
    submission_id: str
    hospital_name: str
    wait_time: int
    status: SubmissionStatus
    timestamp: datetime

    model_config = {"from_attributes": True}


class DeleteOut(BaseModel):
    deleted: bool
    submission_id: str


class AdminLoginOut(BaseModel):
    authorized: bool

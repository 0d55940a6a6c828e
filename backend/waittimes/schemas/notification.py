"""Pydantic schemas for the reviewer notification endpoint."""
from typing import Union
from pydantic import BaseModel


class ReviewEmailRequest(BaseModel):
    hospital_name: str
    new_wait_time: Union[int, str]


class ReviewEmailResponse(BaseModel):
    success: bool
    message: str

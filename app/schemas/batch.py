import uuid
from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict

BatchStatus = Literal["upcoming", "active", "completed"]


class BatchCreate(BaseModel):
    batch_no: str
    subject_course: str
    starting_date: date
    ending_date: date
    published_status: bool = True
    status: BatchStatus = "upcoming"


class BatchUpdate(BaseModel):
    batch_no: str | None = None
    subject_course: str | None = None
    starting_date: date | None = None
    ending_date: date | None = None
    published_status: bool | None = None
    status: BatchStatus | None = None


class BatchResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    batch_no: str
    subject_course: str
    starting_date: date
    ending_date: date
    published_status: bool
    status: str
    created_at: datetime
    updated_at: datetime

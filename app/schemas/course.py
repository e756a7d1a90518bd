import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict

CourseStatus = Literal["active", "inactive"]


class CourseCreate(BaseModel):
    title: str | None = None
    course_code: str | None = None
    assignment_duration: int | None = None
    status: CourseStatus = "active"


class CourseUpdate(BaseModel):
    title: str | None = None
    course_code: str | None = None
    assignment_duration: int | None = None
    status: CourseStatus | None = None


class CourseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str | None = None
    course_code: str | None = None
    assignment_duration: int | None = None
    status: str
    created_at: datetime
    updated_at: datetime

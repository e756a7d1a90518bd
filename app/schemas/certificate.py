import uuid
from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict

from app.schemas.refs import CourseRef, StudentRef

CertificateStatus = Literal["pending", "issued", "dispatched"]


class CertificateBase(BaseModel):
    student_id: uuid.UUID | None = None
    course_id: uuid.UUID | None = None
    issue_date: date | None = None
    certificate_number: str | None = None
    sent_date: date | None = None
    door_number: str | None = None
    zip_code: str | None = None


class CertificateCreate(CertificateBase):
    status: CertificateStatus = "pending"


class CertificateUpdate(CertificateBase):
    status: CertificateStatus | None = None


class CertificateResponse(CertificateBase):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    status: str
    student: StudentRef | None = None
    course: CourseRef | None = None
    created_at: datetime
    updated_at: datetime

import uuid
import datetime as dt
from typing import Literal

from pydantic import BaseModel, ConfigDict

from app.schemas.refs import CourseRef, UserRef

StudentStatus = Literal["active", "inactive", "graduated"]
AssignmentStatus = Literal["pending", "complete"]


class PaymentInstallment(BaseModel):
    date: dt.date | None = None
    amount: float | None = None
    received: float | None = None


class BatchEnrollment(BaseModel):
    batch: str | None = None
    status: Literal["yes", "no"] | None = None


class StudentBase(BaseModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    course_id: uuid.UUID | None = None
    booked_by_id: uuid.UUID | None = None
    gender: str | None = None
    batch_no: str | None = None
    vendor: str | None = None
    course_type: str | None = None
    assignment_date: dt.date | None = None
    note: str | None = None
    admission_type: str | None = None
    payment_slots: str | None = None
    resit: BatchEnrollment | None = None
    microtech: BatchEnrollment | None = None


class StudentCreate(StudentBase):
    enrollment_date: dt.date | None = None
    status: StudentStatus = "active"
    assignment_status: AssignmentStatus = "pending"
    total_paid: float = 0
    course_fee: float = 0
    discount: float = 0
    received: float = 0
    refund: float = 0
    balance_due: float = 0
    payment_plan: list[PaymentInstallment] = []


class StudentUpdate(StudentBase):
    enrollment_date: dt.date | None = None
    status: StudentStatus | None = None
    assignment_status: AssignmentStatus | None = None
    total_paid: float | None = None
    course_fee: float | None = None
    discount: float | None = None
    received: float | None = None
    refund: float | None = None
    balance_due: float | None = None
    payment_plan: list[PaymentInstallment] | None = None


class StudentResponse(StudentBase):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    enrollment_date: dt.date | None = None
    status: str
    assignment_status: str
    total_paid: float
    course_fee: float
    discount: float
    received: float
    refund: float
    balance_due: float
    payment_plan: list[PaymentInstallment]
    course: CourseRef | None = None
    booked_by: UserRef | None = None
    created_at: dt.datetime
    updated_at: dt.datetime

import uuid
from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict

EmployeePosition = Literal["Manager", "Supervisor", "Staff"]
EmployeeStatus = Literal["Live", "Inactive"]


class EmployeeBase(BaseModel):
    full_name: str | None = None
    email: str | None = None
    mobile_number: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    date_of_birth: date | None = None
    license_number: str | None = None
    joining_date: date | None = None
    leaving_date: date | None = None
    contact_number: str | None = None
    gender: str | None = None
    employee_vendor: str | None = None
    note: str | None = None
    photo: str | None = None
    signature: str | None = None


class EmployeeCreate(EmployeeBase):
    position: EmployeePosition = "Staff"
    status: EmployeeStatus = "Live"


class EmployeeUpdate(EmployeeBase):
    position: EmployeePosition | None = None
    status: EmployeeStatus | None = None


class EmployeeResponse(EmployeeBase):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    position: str
    status: str
    created_at: datetime
    updated_at: datetime

import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict

VendorStatus = Literal["active", "inactive"]


class VendorBase(BaseModel):
    phone: str | None = None
    company: str | None = None
    contract_value: float | None = None
    logo: str | None = None
    fax: str | None = None
    web_address: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    registration_number: str | None = None
    invoice_prefix: str | None = None
    account_info: str | None = None


class VendorCreate(VendorBase):
    name: str
    email: str
    services: list[str] = []
    status: VendorStatus = "active"
    published: bool = False
    approved_by: list[str] = []


class VendorUpdate(VendorBase):
    name: str | None = None
    email: str | None = None
    services: list[str] | None = None
    status: VendorStatus | None = None
    published: bool | None = None
    approved_by: list[str] | None = None


class VendorResponse(VendorBase):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    email: str
    services: list[str]
    status: str
    published: bool
    approved_by: list[str]
    created_at: datetime
    updated_at: datetime

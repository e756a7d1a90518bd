import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict

PublishStatus = Literal["published", "draft"]


class LocationCreate(BaseModel):
    location_name: str | None = None
    name: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    publish_status: PublishStatus = "draft"


class LocationUpdate(BaseModel):
    location_name: str | None = None
    name: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    publish_status: PublishStatus | None = None


class LocationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    location_name: str | None = None
    name: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    publish_status: str
    created_at: datetime
    updated_at: datetime

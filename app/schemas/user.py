import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict

from app.core.permissions import Access, Resource


class PermissionGrant(BaseModel):
    resource: Resource
    access: Access


class RegisterRequest(BaseModel):
    # Presence is checked by the identity service so a missing field
    # produces the same message as a blank one.
    name: str | None = None
    email: str | None = None
    password: str | None = None
    role: str | None = None
    permissions: list[PermissionGrant] | None = None
    profile_image: str | None = None


class UserUpdate(BaseModel):
    name: str | None = None
    email: str | None = None
    password: str | None = None
    role: str | None = None
    permissions: list[PermissionGrant] | None = None
    profile_image: str | None = None


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    email: str
    profile_image: str | None = None
    role: str
    permissions: list[PermissionGrant] = []
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CurrentUserResponse(UserResponse):
    capabilities: dict[str, dict[str, bool]]


class LoginRequest(BaseModel):
    email: str
    password: str


class LoginResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    user: UserResponse


class MessageResponse(BaseModel):
    message: str


class UserUpdateResponse(BaseModel):
    message: str
    user: UserResponse


class PermissionCatalogResponse(BaseModel):
    resources: list[str]
    access_levels: list[str]

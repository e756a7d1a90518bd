import logging
import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.auth import get_current_user, require_role
from app.core.database import get_db
from app.core.permissions import ALL_ACCESS_LEVELS, ALL_RESOURCES, UserRole, capabilities
from app.models.user import User
from app.schemas.user import (
    CurrentUserResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    PermissionCatalogResponse,
    RegisterRequest,
    UserResponse,
    UserUpdate,
    UserUpdateResponse,
)
from app.services import identity

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth")

admin_only = Depends(require_role(UserRole.ADMIN))


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login and obtain JWT token",
)
def login(
    body: LoginRequest,
    db: Session = Depends(get_db),
) -> dict:
    token, user = identity.login(db, body.email, body.password)
    return {
        "token": token,
        "token_type": "bearer",
        "user": identity.user_to_dict(user),
    }


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register an admin or moderator",
    dependencies=[admin_only],
)
def register(
    body: RegisterRequest,
    db: Session = Depends(get_db),
) -> dict:
    identity.register(db, body)
    return {"message": "User registered successfully"}


@router.get(
    "/me",
    response_model=CurrentUserResponse,
    summary="Get current authenticated user",
)
def get_me(current_user: User = Depends(get_current_user)) -> dict:
    return {
        **identity.user_to_dict(current_user),
        "capabilities": capabilities(current_user),
    }


@router.get(
    "/permissions",
    response_model=PermissionCatalogResponse,
    summary="List grantable resources and access levels",
    dependencies=[admin_only],
)
def list_permissions() -> dict:
    return {"resources": ALL_RESOURCES, "access_levels": ALL_ACCESS_LEVELS}


@router.get(
    "/users",
    response_model=list[UserResponse],
    summary="List users",
    dependencies=[admin_only],
)
def list_users(db: Session = Depends(get_db)) -> list[dict]:
    return [identity.user_to_dict(u) for u in identity.list_users(db)]


@router.put(
    "/users/{user_id}",
    response_model=UserUpdateResponse,
    summary="Update a user",
    dependencies=[admin_only],
)
def update_user(
    user_id: uuid.UUID,
    body: UserUpdate,
    db: Session = Depends(get_db),
) -> dict:
    user = identity.update_user(db, user_id, body)
    return {"message": "User updated successfully", "user": identity.user_to_dict(user)}


@router.delete(
    "/users/{user_id}",
    response_model=MessageResponse,
    summary="Delete a user",
)
def delete_user(
    user_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> dict:
    # Role check happens inside the service, after the self-deletion check
    identity.delete_user(db, current_user, user_id)
    return {"message": "User deleted successfully"}

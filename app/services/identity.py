"""
Registration, login and admin-side user management.

Endpoints stay thin; the rules about who may hold which grants, email
uniqueness and self-deletion live here so they can be exercised without
the HTTP layer.
"""
import logging
import uuid
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.auth import create_access_token, hash_password, pwd_context, verify_password
from app.core.errors import AuthError, ConflictError, NotFoundError, ValidationError
from app.core.permissions import UserRole, normalize_grants, require_role
from app.models.user import User
from app.schemas.user import RegisterRequest, UserUpdate

logger = logging.getLogger(__name__)

VALID_ROLES = {r.value for r in UserRole}


def user_to_dict(user: User) -> dict[str, Any]:
    """Public view of a user. Never includes the password hash."""
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "profile_image": user.profile_image,
        "role": user.role,
        "permissions": normalize_grants(user.permissions),
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def _email_taken(db: Session, email: str, exclude_id: uuid.UUID | None = None) -> bool:
    query = db.query(User).filter(User.email == email)
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    return query.first() is not None


def _commit_unique_email(db: Session, message: str) -> None:
    # The pre-check can lose a race; the unique index is the final word.
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(message)


def _grants_for_role(role: str, grants: Any) -> list[dict[str, str]]:
    if role != UserRole.MODERATOR.value:
        return []
    normalized = normalize_grants(grants)
    if not normalized:
        raise ValidationError("Permissions are required for moderators")
    return normalized


def register(db: Session, body: RegisterRequest) -> User:
    if not all(
        value and value.strip()
        for value in (body.name, body.email, body.password, body.role)
    ):
        raise ValidationError("Name, email, password, and role are required")
    if body.role not in VALID_ROLES:
        raise ValidationError("Invalid role")

    permissions = _grants_for_role(body.role, body.permissions)

    if _email_taken(db, body.email):
        raise ConflictError("User already exists")

    user = User(
        name=body.name,
        email=body.email,
        password_hash=hash_password(body.password),
        role=body.role,
        permissions=permissions,
        profile_image=body.profile_image,
    )
    db.add(user)
    _commit_unique_email(db, "User already exists")
    db.refresh(user)

    logger.info("User '%s' registered with role %s", user.email, user.role)
    return user


def login(db: Session, email: str, password: str) -> tuple[str, User]:
    user = db.query(User).filter(User.email == email).first()
    if user:
        valid = verify_password(password, user.password_hash)
    else:
        pwd_context.dummy_verify()
        valid = False

    # Same error for unknown email and wrong password
    if not valid:
        logger.warning("Failed login attempt for '%s'", email)
        raise AuthError("Invalid credentials")

    token = create_access_token(user_id=user.id, role=user.role)
    logger.info("User '%s' logged in", user.email)
    return token, user


def list_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.created_at).all()


def update_user(db: Session, user_id: uuid.UUID, body: UserUpdate) -> User:
    user = db.get(User, user_id)
    if not user:
        raise NotFoundError("User not found")

    if body.role is not None and body.role not in VALID_ROLES:
        raise ValidationError("Invalid role")

    role = body.role or user.role
    grants = body.permissions if body.permissions is not None else user.permissions
    permissions = _grants_for_role(role, grants)

    if body.email and body.email != user.email:
        if _email_taken(db, body.email, exclude_id=user.id):
            raise ConflictError("Email already exists")
        user.email = body.email
    if body.name:
        user.name = body.name
    if body.password:
        user.password_hash = hash_password(body.password)
    if "profile_image" in body.model_fields_set:
        user.profile_image = body.profile_image

    user.role = role
    user.permissions = permissions

    _commit_unique_email(db, "Email already exists")
    db.refresh(user)

    logger.info("User '%s' updated", user.email)
    return user


def delete_user(db: Session, caller: User, user_id: uuid.UUID) -> None:
    # Checked before the role gate so self-deletion fails the same way
    # for every caller.
    if caller.id == user_id:
        raise ValidationError("Cannot delete your own account")
    require_role(caller, {UserRole.ADMIN})

    user = db.get(User, user_id)
    if not user:
        raise NotFoundError("User not found")

    email = user.email
    db.delete(user)
    db.commit()
    logger.info("User '%s' deleted by %s", email, caller.id)

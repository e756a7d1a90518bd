"""
JWT utilities and FastAPI dependencies for user authentication.
"""
import logging
import uuid
from datetime import datetime, timedelta, timezone

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from app.core import permissions
from app.core.config import settings
from app.core.database import get_db
from app.core.errors import Forbidden, Unauthenticated
from app.models.user import User

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
bearer_scheme = HTTPBearer(auto_error=False)

JWT_ALGORITHM = "HS256"


def hash_password(plain: str) -> str:
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def create_access_token(user_id: uuid.UUID, role: str) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "role": role,
        "iat": now,
        "exp": now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=JWT_ALGORITHM)


def decode_token(token: str) -> dict:
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise Unauthenticated("Token expired")
    except jwt.InvalidTokenError:
        raise Unauthenticated("Token is not valid")


def resolve_token(db: Session, token: str | None) -> User:
    """Verify the token, then load its user fresh from the database.

    Role and permissions always come from the stored row, never from the
    token claims, so changes apply on the next request.
    """
    if not token:
        raise Unauthenticated("No token, authorization denied")

    data = decode_token(token)
    try:
        user_id = uuid.UUID(str(data.get("sub")))
    except ValueError:
        raise Unauthenticated("Token is not valid")

    user = db.get(User, user_id)
    if not user:
        raise Unauthenticated("User not found")
    return user


# ── Dependencies ───────────────────────────────────────────────────────────

def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Extracts and validates the JWT, returns the User object."""
    token = credentials.credentials if credentials else None
    return resolve_token(db, token)


def require_role(*allowed: permissions.UserRole | str):
    """
    Returns a FastAPI dependency that admits only the listed roles.

    Usage:
        @router.get("/...", dependencies=[Depends(require_role(UserRole.ADMIN))])
    """

    def _checker(current_user: User = Depends(get_current_user)) -> User:
        try:
            permissions.require_role(current_user, allowed)
        except Forbidden:
            logger.warning(
                "Role check failed for user %s (role=%s)", current_user.id, current_user.role
            )
            raise
        return current_user

    return _checker


def require_permission(resource: permissions.Resource | str):
    """Returns a FastAPI dependency applying the coarse resource gate."""

    def _checker(current_user: User = Depends(get_current_user)) -> User:
        try:
            permissions.require_permission(current_user, resource)
        except Forbidden:
            logger.warning(
                "User %s denied access to resource '%s'",
                current_user.id,
                getattr(resource, "value", resource),
            )
            raise
        return current_user

    return _checker

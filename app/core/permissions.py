"""
Roles, permission grants and the authorization checks built on them.

A grant is a ``{"resource": ..., "access": ...}`` pair stored in the user's
``permissions`` JSON column. Only moderators carry grants; admins implicitly
hold every grant.

Two levels of checking exist and must stay separate:

* ``require_permission`` is the coarse gate in front of every CRUD verb. Any
  grant for the resource admits the request, whatever its access level.
* ``has_capability`` is the fine check (read vs. write). It only tells the
  client which actions to offer; the HTTP layer never uses it to reject.
"""
from enum import Enum
from typing import Any, Iterable

from app.core.errors import Forbidden


class UserRole(str, Enum):
    ADMIN = "admin"
    MODERATOR = "moderator"


class Resource(str, Enum):
    STUDENTS = "students"
    COURSES = "courses"
    BATCHES = "batches"
    CERTIFICATIONS = "certifications"
    EMPLOYEES = "employees"
    VENDORS = "vendors"
    LOCATIONS = "locations"
    REPORTS = "reports"


class Access(str, Enum):
    READ = "read"
    WRITE = "write"


ALL_RESOURCES: list[str] = [r.value for r in Resource]
ALL_ACCESS_LEVELS: list[str] = [a.value for a in Access]


def _value(item: Any) -> str:
    return item.value if isinstance(item, Enum) else str(item)


def normalize_grants(grants: Iterable[Any] | None) -> list[dict[str, str]]:
    """Return grants as plain dicts, dropping duplicates but keeping order."""
    result: list[dict[str, str]] = []
    seen: set[tuple[str, str]] = set()
    for grant in grants or []:
        if isinstance(grant, dict):
            resource, access = grant.get("resource"), grant.get("access")
        else:
            resource, access = grant.resource, grant.access
        key = (_value(resource), _value(access))
        if key in seen:
            continue
        seen.add(key)
        result.append({"resource": key[0], "access": key[1]})
    return result


def _grants_of(user: Any) -> list[dict[str, str]]:
    return normalize_grants(getattr(user, "permissions", None))


def require_role(user: Any, allowed: Iterable[UserRole | str]) -> None:
    """Reject unless the user's role is one of ``allowed`` (exact match)."""
    if user.role not in {_value(r) for r in allowed}:
        raise Forbidden("Forbidden: insufficient role")


def has_resource_access(user: Any, resource: Resource | str) -> bool:
    if user.role == UserRole.ADMIN.value:
        return True
    if user.role != UserRole.MODERATOR.value:
        return False
    target = _value(resource)
    return any(g["resource"] == target for g in _grants_of(user))


def require_permission(user: Any, resource: Resource | str) -> None:
    """Coarse gate: admin always, moderator with any grant on the resource."""
    if not has_resource_access(user, resource):
        raise Forbidden(
            "Forbidden: You do not have permission to access this resource."
        )


def has_capability(user: Any, resource: Resource | str, access: Access | str) -> bool:
    if user.role == UserRole.ADMIN.value:
        return True
    if user.role != UserRole.MODERATOR.value:
        return False
    wanted = {"resource": _value(resource), "access": _value(access)}
    return wanted in _grants_of(user)


def capabilities(user: Any) -> dict[str, dict[str, bool]]:
    """Per-resource read/write flags for the client to gate its actions on."""
    return {
        resource: {
            access: has_capability(user, resource, access)
            for access in ALL_ACCESS_LEVELS
        }
        for resource in ALL_RESOURCES
    }

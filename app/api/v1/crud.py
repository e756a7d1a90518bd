"""
Generic CRUD router factory.

One ``ResourceConfig`` describes a resource: its URL path, the permission
resource that gates it, the SQLAlchemy model and the pydantic schemas used
for create, update and responses. ``build_resource_router`` turns it into
five uniform endpoints, each behind the coarse permission gate.

Reference expansion is declarative: every ``ExpandField`` names a
relationship on the model and the columns of the referenced row to return
in its place. The same handler code serves every resource.
"""
import logging
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel
from sqlalchemy import JSON, inspect
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from app.core.auth import require_permission
from app.core.database import Base, get_db
from app.core.errors import ConflictError, NotFoundError, ValidationError
from app.core.permissions import Resource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExpandField:
    relationship: str
    columns: tuple[str, ...]


@dataclass(frozen=True)
class ResourceConfig:
    path: str
    permission: Resource
    model: type[Base]
    create_schema: type[BaseModel]
    update_schema: type[BaseModel]
    response_schema: type[BaseModel]
    expand_fields: tuple[ExpandField, ...] = field(default_factory=tuple)
    tag: str | None = None


# ── Helpers ────────────────────────────────────────────────────────────────

def _column_attrs(model: type[Base]) -> dict[str, Any]:
    return {attr.key: attr for attr in inspect(model).column_attrs}


def _foreign_key_of(config: ResourceConfig, expand: ExpandField) -> tuple[str, type[Base]]:
    """Return (local column name, referenced model) for an expanded relationship."""
    prop = inspect(config.model).relationships[expand.relationship]
    local_column = next(iter(prop.local_columns))
    return local_column.key, prop.mapper.class_


def _project(target: Any, columns: tuple[str, ...]) -> dict[str, Any] | None:
    if target is None:
        return None
    return {name: getattr(target, name) for name in columns}


def serialize(config: ResourceConfig, entity: Any) -> dict[str, Any]:
    data = {key: getattr(entity, key) for key in _column_attrs(config.model)}
    for expand in config.expand_fields:
        data[expand.relationship] = _project(
            getattr(entity, expand.relationship), expand.columns
        )
    return data


def _payload(body: BaseModel, config: ResourceConfig, *, partial: bool) -> dict[str, Any]:
    """Dump the body, keeping JSON columns in JSON-safe form."""
    # Creates leave unset optionals to column defaults; patches touch only what was sent.
    options = {"exclude_unset": True} if partial else {"exclude_none": True}
    data = body.model_dump(**options)
    json_data = body.model_dump(mode="json", **options)
    columns = _column_attrs(config.model)
    for key, value in data.items():
        attr = columns.get(key)
        if attr is None:
            continue
        if value is None and not attr.columns[0].nullable:
            raise ValidationError(f"Field '{key}' cannot be null")
        if isinstance(attr.columns[0].type, JSON):
            data[key] = json_data[key]
    return data


def _check_references(db: Session, config: ResourceConfig, data: dict[str, Any]) -> None:
    for expand in config.expand_fields:
        column, target_model = _foreign_key_of(config, expand)
        ref_id = data.get(column)
        if ref_id is not None and db.get(target_model, ref_id) is None:
            raise ValidationError(f"Referenced {expand.relationship} not found")


def _coerce_filter(attr: Any, raw: str) -> Any:
    try:
        python_type = attr.columns[0].type.python_type
    except NotImplementedError:
        return raw

    if python_type is bool:
        lowered = raw.lower()
        if lowered in ("true", "1", "yes"):
            return True
        if lowered in ("false", "0", "no"):
            return False
        raise ValueError(raw)
    if python_type is uuid.UUID:
        return uuid.UUID(raw)
    if python_type is datetime:
        return datetime.fromisoformat(raw)
    if python_type is date:
        return date.fromisoformat(raw)
    if python_type in (int, float):
        return python_type(raw)
    return raw


def _filtered_query(db: Session, config: ResourceConfig, params: dict[str, str]):
    columns = _column_attrs(config.model)
    query = db.query(config.model)
    for key, raw in params.items():
        attr = columns.get(key)
        if attr is None or isinstance(attr.columns[0].type, JSON):
            raise ValidationError(f"Unknown filter field: {key}")
        try:
            value = _coerce_filter(attr, raw)
        except ValueError:
            raise ValidationError(f"Invalid value for filter '{key}'")
        query = query.filter(getattr(config.model, key) == value)
    return query


def _with_expansions(config: ResourceConfig, query):
    for expand in config.expand_fields:
        query = query.options(selectinload(getattr(config.model, expand.relationship)))
    return query


def _get_or_404(db: Session, config: ResourceConfig, item_id: uuid.UUID) -> Any:
    query = db.query(config.model).filter(config.model.id == item_id)
    item = _with_expansions(config, query).first()
    if not item:
        raise NotFoundError("Item not found")
    return item


def _commit(db: Session, config: ResourceConfig) -> None:
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.info("Uniqueness violation on %s: %s", config.path, exc.orig)
        raise ConflictError(f"A {config.path} record with these values already exists")


# ── Router factory ─────────────────────────────────────────────────────────

def build_resource_router(config: ResourceConfig) -> APIRouter:
    router = APIRouter(
        prefix=f"/{config.path}",
        tags=[config.tag or config.path.capitalize()],
        dependencies=[Depends(require_permission(config.permission))],
    )
    create_schema = config.create_schema
    update_schema = config.update_schema

    @router.post(
        "",
        response_model=config.response_schema,
        status_code=status.HTTP_201_CREATED,
        summary=f"Create a {config.path} record",
    )
    def create_item(body: create_schema, db: Session = Depends(get_db)) -> dict:
        data = _payload(body, config, partial=False)
        _check_references(db, config, data)

        item = config.model(**data)
        db.add(item)
        _commit(db, config)

        logger.info("Created %s %s", config.path, item.id)
        return serialize(config, _get_or_404(db, config, item.id))

    @router.get(
        "",
        response_model=list[config.response_schema],
        summary=f"List {config.path}",
    )
    def list_items(request: Request, db: Session = Depends(get_db)) -> list[dict]:
        query = _filtered_query(db, config, dict(request.query_params))
        return [serialize(config, item) for item in _with_expansions(config, query).all()]

    @router.get(
        "/{item_id}",
        response_model=config.response_schema,
        summary=f"Get a {config.path} record",
    )
    def get_item(item_id: uuid.UUID, db: Session = Depends(get_db)) -> dict:
        return serialize(config, _get_or_404(db, config, item_id))

    @router.patch(
        "/{item_id}",
        response_model=config.response_schema,
        summary=f"Update a {config.path} record",
    )
    def update_item(
        item_id: uuid.UUID,
        body: update_schema,
        db: Session = Depends(get_db),
    ) -> dict:
        item = _get_or_404(db, config, item_id)

        data = _payload(body, config, partial=True)
        _check_references(db, config, data)
        for key, value in data.items():
            setattr(item, key, value)
        _commit(db, config)

        logger.info("Updated %s %s", config.path, item_id)
        return serialize(config, _get_or_404(db, config, item_id))

    @router.delete(
        "/{item_id}",
        summary=f"Delete a {config.path} record",
    )
    def delete_item(item_id: uuid.UUID, db: Session = Depends(get_db)) -> dict:
        item = _get_or_404(db, config, item_id)
        db.delete(item)
        db.commit()
        logger.info("Deleted %s %s", config.path, item_id)
        return {"message": "Item deleted successfully"}

    return router

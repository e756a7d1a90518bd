"""Reduced projections used when a reference field is expanded on read."""
import uuid

from pydantic import BaseModel


class CourseRef(BaseModel):
    id: uuid.UUID
    title: str | None = None


class StudentRef(BaseModel):
    id: uuid.UUID
    name: str | None = None


class UserRef(BaseModel):
    id: uuid.UUID
    name: str | None = None

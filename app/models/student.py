import uuid
from datetime import date, datetime

from sqlalchemy import Date, DateTime, Float, ForeignKey, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base, JSONType


class Student(Base):
    __tablename__ = "students"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(320), unique=True, nullable=True, index=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    enrollment_date: Mapped[date | None] = mapped_column(Date, default=date.today)
    status: Mapped[str] = mapped_column(String(20), default="active")
    course_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("courses.id", ondelete="SET NULL"), nullable=True, index=True
    )
    booked_by_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    total_paid: Mapped[float] = mapped_column(Float, default=0)
    gender: Mapped[str | None] = mapped_column(String(20), nullable=True)
    batch_no: Mapped[str | None] = mapped_column(String(50), nullable=True)
    vendor: Mapped[str | None] = mapped_column(String(255), nullable=True)
    course_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    assignment_status: Mapped[str] = mapped_column(String(20), default="pending")
    assignment_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    note: Mapped[str | None] = mapped_column(Text, nullable=True)
    admission_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    payment_slots: Mapped[str | None] = mapped_column(String(100), nullable=True)
    course_fee: Mapped[float] = mapped_column(Float, default=0)
    discount: Mapped[float] = mapped_column(Float, default=0)
    received: Mapped[float] = mapped_column(Float, default=0)
    refund: Mapped[float] = mapped_column(Float, default=0)
    balance_due: Mapped[float] = mapped_column(Float, default=0)
    payment_plan: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)
    resit: Mapped[dict | None] = mapped_column(JSONType, nullable=True)
    microtech: Mapped[dict | None] = mapped_column(JSONType, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    course: Mapped["Course | None"] = relationship()  # noqa: F821
    booked_by: Mapped["User | None"] = relationship()  # noqa: F821

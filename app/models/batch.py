import uuid
from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class Batch(Base):
    __tablename__ = "batches"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    batch_no: Mapped[str] = mapped_column(String(50), unique=True, nullable=False, index=True)
    subject_course: Mapped[str] = mapped_column(String(255), nullable=False)
    starting_date: Mapped[date] = mapped_column(Date, nullable=False)
    ending_date: Mapped[date] = mapped_column(Date, nullable=False)
    published_status: Mapped[bool] = mapped_column(Boolean, default=True)
    status: Mapped[str] = mapped_column(String(20), default="upcoming")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

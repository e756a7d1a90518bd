"""Initial tables

Revision ID: 001
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _uuid() -> postgresql.UUID:
    return postgresql.UUID(as_uuid=True)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", _uuid(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), nullable=False),
        sa.Column(
            "permissions", postgresql.JSONB(), nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column("profile_image", sa.String(1024), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "courses",
        sa.Column("id", _uuid(), primary_key=True),
        sa.Column("title", sa.String(255), nullable=True),
        sa.Column("course_code", sa.String(50), nullable=True),
        sa.Column("assignment_duration", sa.Integer(), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="active"),
        *_timestamps(),
    )
    op.create_index("ix_courses_course_code", "courses", ["course_code"], unique=True)

    op.create_table(
        "batches",
        sa.Column("id", _uuid(), primary_key=True),
        sa.Column("batch_no", sa.String(50), nullable=False),
        sa.Column("subject_course", sa.String(255), nullable=False),
        sa.Column("starting_date", sa.Date(), nullable=False),
        sa.Column("ending_date", sa.Date(), nullable=False),
        sa.Column("published_status", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("status", sa.String(20), nullable=False, server_default="upcoming"),
        *_timestamps(),
    )
    op.create_index("ix_batches_batch_no", "batches", ["batch_no"], unique=True)

    op.create_table(
        "locations",
        sa.Column("id", _uuid(), primary_key=True),
        sa.Column("location_name", sa.String(255), nullable=True),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("address_line1", sa.String(255), nullable=True),
        sa.Column("address_line2", sa.String(255), nullable=True),
        sa.Column("publish_status", sa.String(20), nullable=False, server_default="draft"),
        *_timestamps(),
    )

    op.create_table(
        "employees",
        sa.Column("id", _uuid(), primary_key=True),
        sa.Column("full_name", sa.String(255), nullable=True),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("mobile_number", sa.String(50), nullable=True),
        sa.Column("address_line1", sa.String(255), nullable=True),
        sa.Column("address_line2", sa.String(255), nullable=True),
        sa.Column("position", sa.String(20), nullable=False, server_default="Staff"),
        sa.Column("status", sa.String(20), nullable=False, server_default="Live"),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("license_number", sa.String(100), nullable=True),
        sa.Column("joining_date", sa.Date(), nullable=True),
        sa.Column("leaving_date", sa.Date(), nullable=True),
        sa.Column("contact_number", sa.String(50), nullable=True),
        sa.Column("gender", sa.String(20), nullable=True),
        sa.Column("employee_vendor", sa.String(255), nullable=True),
        sa.Column("note", sa.Text(), nullable=True),
        sa.Column("photo", sa.String(1024), nullable=True),
        sa.Column("signature", sa.String(1024), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "vendors",
        sa.Column("id", _uuid(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("company", sa.String(255), nullable=True),
        sa.Column("services", postgresql.JSONB(), nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column("contract_value", sa.Float(), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="active"),
        sa.Column("logo", sa.String(1024), nullable=True),
        sa.Column("fax", sa.String(50), nullable=True),
        sa.Column("web_address", sa.String(255), nullable=True),
        sa.Column("address_line1", sa.String(255), nullable=True),
        sa.Column("address_line2", sa.String(255), nullable=True),
        sa.Column("registration_number", sa.String(100), nullable=True),
        sa.Column("invoice_prefix", sa.String(20), nullable=True),
        sa.Column("published", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("approved_by", postgresql.JSONB(), nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column("account_info", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_vendors_email", "vendors", ["email"], unique=True)

    op.create_table(
        "students",
        sa.Column("id", _uuid(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("enrollment_date", sa.Date(), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="active"),
        sa.Column(
            "course_id", _uuid(),
            sa.ForeignKey("courses.id", ondelete="SET NULL"), nullable=True,
        ),
        sa.Column(
            "booked_by_id", _uuid(),
            sa.ForeignKey("users.id", ondelete="SET NULL"), nullable=True,
        ),
        sa.Column("total_paid", sa.Float(), nullable=False, server_default="0"),
        sa.Column("gender", sa.String(20), nullable=True),
        sa.Column("batch_no", sa.String(50), nullable=True),
        sa.Column("vendor", sa.String(255), nullable=True),
        sa.Column("course_type", sa.String(100), nullable=True),
        sa.Column("assignment_status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("assignment_date", sa.Date(), nullable=True),
        sa.Column("note", sa.Text(), nullable=True),
        sa.Column("admission_type", sa.String(100), nullable=True),
        sa.Column("payment_slots", sa.String(100), nullable=True),
        sa.Column("course_fee", sa.Float(), nullable=False, server_default="0"),
        sa.Column("discount", sa.Float(), nullable=False, server_default="0"),
        sa.Column("received", sa.Float(), nullable=False, server_default="0"),
        sa.Column("refund", sa.Float(), nullable=False, server_default="0"),
        sa.Column("balance_due", sa.Float(), nullable=False, server_default="0"),
        sa.Column("payment_plan", postgresql.JSONB(), nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column("resit", postgresql.JSONB(), nullable=True),
        sa.Column("microtech", postgresql.JSONB(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_students_email", "students", ["email"], unique=True)
    op.create_index("ix_students_course_id", "students", ["course_id"])
    op.create_index("ix_students_booked_by_id", "students", ["booked_by_id"])

    op.create_table(
        "certificates",
        sa.Column("id", _uuid(), primary_key=True),
        sa.Column(
            "student_id", _uuid(),
            sa.ForeignKey("students.id", ondelete="SET NULL"), nullable=True,
        ),
        sa.Column(
            "course_id", _uuid(),
            sa.ForeignKey("courses.id", ondelete="SET NULL"), nullable=True,
        ),
        sa.Column("issue_date", sa.Date(), nullable=True),
        sa.Column("certificate_number", sa.String(100), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("sent_date", sa.Date(), nullable=True),
        sa.Column("door_number", sa.String(50), nullable=True),
        sa.Column("zip_code", sa.String(20), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_certificates_student_id", "certificates", ["student_id"])
    op.create_index("ix_certificates_course_id", "certificates", ["course_id"])


def downgrade() -> None:
    op.drop_table("certificates")
    op.drop_table("students")
    op.drop_table("vendors")
    op.drop_table("employees")
    op.drop_table("locations")
    op.drop_table("batches")
    op.drop_table("courses")
    op.drop_table("users")

"""ORM models for the per-employee record collections.

Every table shares the :class:`EmployeeRecordMixin` columns (``id`` and the
``employee_id`` foreign key); the rest are plain domain fields. Dates are
``DATE`` columns, money is ``NUMERIC(12, 2)``.
"""

from __future__ import annotations

import uuid
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Optional

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, declared_attr, mapped_column

from peoplehub.database import Base

MONEY = sa.Numeric(12, 2)


class EmployeeRecordMixin:
    """``id`` + ``employee_id`` columns shared by every record table."""

    id: Mapped[str] = mapped_column(
        sa.String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )

    @declared_attr
    def employee_id(cls) -> Mapped[str]:
        return mapped_column(
            sa.String(36),
            sa.ForeignKey("employees.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id} employee={self.employee_id}>"


# ═════════════════════════════════════════════════════════════════════
# Personal
# ═════════════════════════════════════════════════════════════════════


class Education(EmployeeRecordMixin, Base):
    __tablename__ = "education"

    institution: Mapped[Optional[str]] = mapped_column(sa.String(200))
    degree: Mapped[Optional[str]] = mapped_column(sa.String(150))
    field_of_study: Mapped[Optional[str]] = mapped_column(sa.String(150))
    start_date: Mapped[Optional[date]] = mapped_column(sa.Date)
    end_date: Mapped[Optional[date]] = mapped_column(sa.Date)
    description: Mapped[Optional[str]] = mapped_column(sa.Text)


class EmergencyContact(EmployeeRecordMixin, Base):
    __tablename__ = "emergency_contacts"

    first_name: Mapped[Optional[str]] = mapped_column(sa.String(100))
    last_name: Mapped[Optional[str]] = mapped_column(sa.String(100))
    relationship: Mapped[Optional[str]] = mapped_column(sa.String(50))
    phone: Mapped[Optional[str]] = mapped_column(sa.String(30))
    email: Mapped[Optional[str]] = mapped_column(sa.String(255))
    address: Mapped[Optional[str]] = mapped_column(sa.Text)


# ═════════════════════════════════════════════════════════════════════
# Job
# ═════════════════════════════════════════════════════════════════════


class EmploymentHistory(EmployeeRecordMixin, Base):
    __tablename__ = "employment_history"

    effective_date: Mapped[date] = mapped_column(sa.Date, nullable=False)
    status: Mapped[str] = mapped_column(sa.String(50), nullable=False)
    location: Mapped[Optional[str]] = mapped_column(sa.String(100))
    division: Mapped[Optional[str]] = mapped_column(sa.String(100))
    department: Mapped[str] = mapped_column(sa.String(100), nullable=False)
    job_title: Mapped[str] = mapped_column(sa.String(150), nullable=False)
    reports_to: Mapped[Optional[str]] = mapped_column(sa.String(150))
    comment: Mapped[Optional[str]] = mapped_column(sa.Text)


class Compensation(EmployeeRecordMixin, Base):
    __tablename__ = "compensation"

    effective_date: Mapped[date] = mapped_column(sa.Date, nullable=False)
    pay_rate: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    pay_type: Mapped[str] = mapped_column(sa.String(50), nullable=False)
    overtime: Mapped[Optional[str]] = mapped_column(sa.String(50))
    change_reason: Mapped[str] = mapped_column(sa.String(100), nullable=False)
    comment: Mapped[Optional[str]] = mapped_column(sa.Text)


class Bonus(EmployeeRecordMixin, Base):
    __tablename__ = "bonuses"

    type: Mapped[str] = mapped_column(sa.String(100), nullable=False)
    amount: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    frequency: Mapped[str] = mapped_column(sa.String(50), nullable=False)
    eligibility_date: Mapped[Optional[date]] = mapped_column(sa.Date)
    description: Mapped[Optional[str]] = mapped_column(sa.Text)


# ═════════════════════════════════════════════════════════════════════
# Time off / documents / benefits
# ═════════════════════════════════════════════════════════════════════


class TimeOff(EmployeeRecordMixin, Base):
    __tablename__ = "time_off"

    type: Mapped[Optional[str]] = mapped_column(sa.String(50))
    start_date: Mapped[Optional[date]] = mapped_column(sa.Date)
    end_date: Mapped[Optional[date]] = mapped_column(sa.Date)
    days: Mapped[Optional[Decimal]] = mapped_column(sa.Numeric(6, 2))
    status: Mapped[Optional[str]] = mapped_column(sa.String(50))
    comment: Mapped[Optional[str]] = mapped_column(sa.Text)


class Document(EmployeeRecordMixin, Base):
    __tablename__ = "documents"

    category: Mapped[Optional[str]] = mapped_column(sa.String(100))
    name: Mapped[Optional[str]] = mapped_column(sa.String(255))
    file_name: Mapped[Optional[str]] = mapped_column(sa.String(255))
    upload_date: Mapped[Optional[date]] = mapped_column(sa.Date)


class Benefit(EmployeeRecordMixin, Base):
    __tablename__ = "benefits"

    type: Mapped[Optional[str]] = mapped_column(sa.String(100))
    plan: Mapped[Optional[str]] = mapped_column(sa.String(150))
    status: Mapped[Optional[str]] = mapped_column(sa.String(50))
    enrollment_date: Mapped[Optional[date]] = mapped_column(sa.Date)


class Dependent(EmployeeRecordMixin, Base):
    __tablename__ = "dependents"

    first_name: Mapped[str] = mapped_column(sa.String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(sa.String(100), nullable=False)
    relationship: Mapped[str] = mapped_column(sa.String(50), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(sa.Date, nullable=False)
    ssn: Mapped[Optional[str]] = mapped_column(sa.String(20))
    gender: Mapped[Optional[str]] = mapped_column(sa.String(20))
    is_student: Mapped[bool] = mapped_column(sa.Boolean, default=False, nullable=False)


# ═════════════════════════════════════════════════════════════════════
# Training / assets / notes
# ═════════════════════════════════════════════════════════════════════


class Training(EmployeeRecordMixin, Base):
    __tablename__ = "training"

    name: Mapped[Optional[str]] = mapped_column(sa.String(200))
    category: Mapped[Optional[str]] = mapped_column(sa.String(100))
    status: Mapped[Optional[str]] = mapped_column(sa.String(50))
    due_date: Mapped[Optional[date]] = mapped_column(sa.Date)
    completed_date: Mapped[Optional[date]] = mapped_column(sa.Date)
    credits: Mapped[Optional[Decimal]] = mapped_column(sa.Numeric(6, 2))


class Asset(EmployeeRecordMixin, Base):
    __tablename__ = "assets"

    category: Mapped[Optional[str]] = mapped_column(sa.String(100))
    description: Mapped[Optional[str]] = mapped_column(sa.Text)
    serial_number: Mapped[Optional[str]] = mapped_column(sa.String(100))
    date_assigned: Mapped[Optional[date]] = mapped_column(sa.Date)


class Note(EmployeeRecordMixin, Base):
    __tablename__ = "notes"

    title: Mapped[Optional[str]] = mapped_column(sa.String(200))
    content: Mapped[Optional[str]] = mapped_column(sa.Text)
    created_by: Mapped[Optional[str]] = mapped_column(sa.String(150))
    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )


# ═════════════════════════════════════════════════════════════════════
# Onboarding / offboarding checklists
# ═════════════════════════════════════════════════════════════════════


class ChecklistTaskMixin:
    task: Mapped[Optional[str]] = mapped_column(sa.String(200))
    description: Mapped[Optional[str]] = mapped_column(sa.Text)
    due_date: Mapped[Optional[date]] = mapped_column(sa.Date)
    status: Mapped[Optional[str]] = mapped_column(sa.String(50))
    completed_date: Mapped[Optional[date]] = mapped_column(sa.Date)


class OnboardingTask(ChecklistTaskMixin, EmployeeRecordMixin, Base):
    __tablename__ = "onboarding"


class OffboardingTask(ChecklistTaskMixin, EmployeeRecordMixin, Base):
    __tablename__ = "offboarding"

"""Employee ORM model.

SQLAlchemy 2.0 async-compatible model with Mapped[] annotations. Column names
match the schema created by ``001_initial_schema``.
"""

from __future__ import annotations

import uuid
from datetime import date
from typing import Optional

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column

from peoplehub.common.audit import TimestampMixin
from peoplehub.database import Base, JSONType


class Employee(Base, TimestampMixin):
    """Employee master record; every sub-record points back here."""

    __tablename__ = "employees"

    id: Mapped[str] = mapped_column(
        sa.String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    first_name: Mapped[str] = mapped_column(sa.String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(sa.String(100), nullable=False)
    email: Mapped[str] = mapped_column(sa.String(255), unique=True, nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(sa.String(30))
    job_title: Mapped[Optional[str]] = mapped_column(sa.String(150))
    department: Mapped[Optional[str]] = mapped_column(sa.String(100))
    location: Mapped[Optional[str]] = mapped_column(sa.String(100))
    hire_date: Mapped[Optional[date]] = mapped_column(sa.Date)
    # personal / address / contact / social / visa sections
    profile_data: Mapped[Optional[dict]] = mapped_column(JSONType)

    __table_args__ = (
        sa.Index("ix_employees_department", "department"),
        sa.Index("ix_employees_last_name", "last_name"),
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def __repr__(self) -> str:
        return f"<Employee {self.id} {self.full_name!r}>"

"""Employee service layer — async CRUD.

Uses:
  - ``paginate()`` from peoplehub.common.pagination
  - ``apply_filters / apply_search`` from peoplehub.common.filters
  - ``create_audit_entry`` from peoplehub.common.audit
  - ``NotFoundException / ConflictError`` from peoplehub.common.exceptions
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from peoplehub.common.audit import create_audit_entry
from peoplehub.common.exceptions import ConflictError, NotFoundException
from peoplehub.common.filters import apply_filters, apply_search
from peoplehub.common.pagination import Page, PaginationParams, paginate
from peoplehub.employees.models import Employee
from peoplehub.employees.schemas import EmployeeCreate, EmployeeDetail, EmployeeUpdate
from peoplehub.records.registry import RECORD_KINDS

logger = logging.getLogger(__name__)


class EmployeeService:
    """Async CRUD operations for employees."""

    # ── List (paginated, searchable, filterable) ────────────────────

    @staticmethod
    async def list_employees(
        db: AsyncSession,
        pagination: PaginationParams,
        *,
        search: Optional[str] = None,
        department: Optional[str] = None,
        location: Optional[str] = None,
    ) -> Page:
        """Return a paginated, filtered, searchable employee list."""

        query = select(Employee).order_by(Employee.last_name, Employee.first_name)
        query = apply_filters(
            query, Employee, {"department": department, "location": location},
        )
        if search:
            query = apply_search(
                query, Employee, search, ["first_name", "last_name", "email", "job_title"],
            )

        return await paginate(db, query, pagination, model=Employee)

    # ── Get single ──────────────────────────────────────────────────

    @staticmethod
    async def get_employee(db: AsyncSession, employee_id: str) -> Employee:
        employee = await db.get(Employee, employee_id)
        if employee is None:
            raise NotFoundException("Employee", employee_id)
        return employee

    # ── Create ──────────────────────────────────────────────────────

    @staticmethod
    async def create_employee(
        db: AsyncSession,
        data: EmployeeCreate,
        *,
        actor: Optional[str] = None,
    ) -> Employee:
        """Create a new employee record."""

        if data.id and await db.get(Employee, data.id) is not None:
            raise ConflictError("id", data.id)

        values = data.model_dump(exclude_none=True)
        employee = Employee(**values)

        db.add(employee)
        try:
            await db.flush()
        except IntegrityError as exc:
            await db.rollback()
            err = str(exc.orig)
            if "email" in err:
                raise ConflictError("email", data.email)
            raise

        await create_audit_entry(
            db,
            action="create",
            entity_type="employee",
            entity_id=employee.id,
            actor=actor,
            new_values=data.model_dump(mode="json", exclude_none=True),
        )
        logger.info("Created employee %s (%s)", employee.id, employee.full_name)
        return employee

    # ── Update ──────────────────────────────────────────────────────

    @staticmethod
    async def update_employee(
        db: AsyncSession,
        employee_id: str,
        data: EmployeeUpdate,
        *,
        actor: Optional[str] = None,
    ) -> Employee:
        """Partial-update an existing employee."""

        employee = await EmployeeService.get_employee(db, employee_id)

        changes = data.model_dump(exclude_unset=True)
        if not changes:
            return employee

        before = EmployeeDetail.model_validate(employee).model_dump(mode="json")
        old_values: dict[str, Any] = {field: before.get(field) for field in changes}
        for field, value in changes.items():
            setattr(employee, field, value)

        try:
            await db.flush()
        except IntegrityError as exc:
            await db.rollback()
            if "email" in str(exc.orig):
                raise ConflictError("email", changes.get("email", ""))
            raise

        await create_audit_entry(
            db,
            action="update",
            entity_type="employee",
            entity_id=employee.id,
            actor=actor,
            old_values=old_values,
            new_values=data.model_dump(mode="json", exclude_unset=True),
        )
        logger.info("Updated employee %s: %s", employee.id, ", ".join(sorted(changes)))
        return employee

    # ── Delete ──────────────────────────────────────────────────────

    @staticmethod
    async def delete_employee(
        db: AsyncSession,
        employee_id: str,
        *,
        actor: Optional[str] = None,
    ) -> None:
        """Delete an employee together with every record that belongs to it."""
        employee = await EmployeeService.get_employee(db, employee_id)
        snapshot = EmployeeDetail.model_validate(employee).model_dump(mode="json")

        for kind in RECORD_KINDS.values():
            await db.execute(delete(kind.model).where(kind.model.employee_id == employee_id))
        await db.delete(employee)
        await db.flush()

        await create_audit_entry(
            db,
            action="delete",
            entity_type="employee",
            entity_id=employee_id,
            actor=actor,
            old_values=snapshot,
        )
        logger.info("Deleted employee %s and its records", employee_id)


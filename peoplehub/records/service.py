"""Record service layer — CRUD over any registered collection.

Every method takes the :class:`RecordKind` it operates on, so one
implementation serves bonuses, notes, time off and the rest.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from peoplehub.common.audit import create_audit_entry
from peoplehub.common.exceptions import (
    BadRequestException,
    NotFoundException,
    ValidationException,
)
from peoplehub.employees.service import EmployeeService
from peoplehub.records.registry import RecordKind
from peoplehub.records.schemas import RecordCreate, RecordUpdate

logger = logging.getLogger(__name__)


class RecordService:
    """Async CRUD for per-employee record collections."""

    # ── List ────────────────────────────────────────────────────────

    @staticmethod
    async def list_records(
        db: AsyncSession,
        kind: RecordKind,
        employee_id: str,
    ) -> list[Any]:
        """All records of *kind* belonging to *employee_id*.

        Raises ``NotFoundException`` when the employee itself is unknown.
        """
        await EmployeeService.get_employee(db, employee_id)

        model = kind.model
        order_col = getattr(model, kind.order_by)
        stmt = (
            select(model)
            .where(model.employee_id == employee_id)
            .order_by(order_col.desc() if kind.descending else order_col.asc(), model.id)
        )
        result = await db.execute(stmt)
        return list(result.scalars().all())

    # ── Get single ──────────────────────────────────────────────────

    @staticmethod
    async def get_record(db: AsyncSession, kind: RecordKind, record_id: str) -> Any:
        record = await db.get(kind.model, record_id)
        if record is None:
            raise NotFoundException(kind.label, record_id)
        return record

    # ── Create ──────────────────────────────────────────────────────

    @staticmethod
    async def create_record(
        db: AsyncSession,
        kind: RecordKind,
        employee_id: str,
        data: RecordCreate,
        *,
        actor: Optional[str] = None,
    ) -> Any:
        """Insert a record for *employee_id* (taken from the URL)."""

        _check_owner(data.employee_id, employee_id)
        await EmployeeService.get_employee(db, employee_id)

        values = data.model_dump(exclude={"employee_id"})
        record = kind.model(employee_id=employee_id, **values)
        db.add(record)
        await db.flush()

        await create_audit_entry(
            db,
            action="create",
            entity_type=kind.slug,
            entity_id=record.id,
            actor=actor,
            new_values=data.model_dump(mode="json", exclude={"employee_id"}),
        )
        logger.info("Created %s %s for employee %s", kind.slug, record.id, employee_id)
        return record

    # ── Update ──────────────────────────────────────────────────────

    @staticmethod
    async def update_record(
        db: AsyncSession,
        kind: RecordKind,
        record_id: str,
        data: RecordUpdate,
        *,
        actor: Optional[str] = None,
    ) -> Any:
        """Partial update; fields required on create may not be cleared."""

        record = await RecordService.get_record(db, kind, record_id)
        _check_owner(data.employee_id, record.employee_id)

        changes = data.model_dump(exclude_unset=True, exclude={"employee_id"})
        cleared = sorted(
            name for name in kind.required_fields
            if name in changes and changes[name] is None
        )
        if cleared:
            raise ValidationException({name: ["This field is required."] for name in cleared})
        if not changes:
            return record

        before = kind.out_schema.model_validate(record).model_dump(mode="json")
        for field, value in changes.items():
            setattr(record, field, value)
        await db.flush()

        await create_audit_entry(
            db,
            action="update",
            entity_type=kind.slug,
            entity_id=record.id,
            actor=actor,
            old_values={field: before.get(field) for field in changes},
            new_values=data.model_dump(mode="json", exclude_unset=True, exclude={"employee_id"}),
        )
        logger.info("Updated %s %s: %s", kind.slug, record.id, ", ".join(sorted(changes)))
        return record

    # ── Delete ──────────────────────────────────────────────────────

    @staticmethod
    async def delete_record(
        db: AsyncSession,
        kind: RecordKind,
        record_id: str,
        *,
        actor: Optional[str] = None,
    ) -> None:
        record = await RecordService.get_record(db, kind, record_id)
        snapshot = kind.out_schema.model_validate(record).model_dump(mode="json")

        await db.delete(record)
        await db.flush()

        await create_audit_entry(
            db,
            action="delete",
            entity_type=kind.slug,
            entity_id=record_id,
            actor=actor,
            old_values=snapshot,
        )
        logger.info("Deleted %s %s", kind.slug, record_id)


def _check_owner(sent: Optional[str], owner: str) -> None:
    """A body ``employee_id``, when present, must name the owning employee."""
    if sent is not None and sent != owner:
        raise BadRequestException(
            "Employee ID mismatch",
            errors={"employee_id": [f"Expected '{owner}'."]},
        )

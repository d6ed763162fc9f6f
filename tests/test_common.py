"""Tests for common utilities — filters, search, pagination, problem details.

Exercises apply_filters, apply_search and paginate directly against the
in-memory database, plus the RFC 7807 error bodies.
"""

from __future__ import annotations

import logging
from datetime import date

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from peoplehub.common.audit import AuditTrail, create_audit_entry
from peoplehub.common.exceptions import (
    BadRequestException,
    ConflictError,
    NotFoundException,
    ValidationException,
)
from peoplehub.common.filters import _get_column, apply_filters, apply_search
from peoplehub.common.log import configure_logging
from peoplehub.common.pagination import PaginationParams, paginate
from peoplehub.employees.models import Employee
from tests.conftest import _make_employee


# ── Helpers ─────────────────────────────────────────────────────────


async def _seed_employee(db: AsyncSession, **kwargs) -> Employee:
    data = _make_employee(**kwargs)
    data["hire_date"] = date.fromisoformat(data["hire_date"])
    emp = Employee(**data)
    db.add(emp)
    await db.flush()
    return emp


async def _seed_three(db: AsyncSession) -> None:
    await _seed_employee(db, first_name="Alice", email="alice@example.com",
                         department="Finance", hire_date="2020-01-15")
    await _seed_employee(db, first_name="Bob", email="bob@example.com",
                         department="Engineering", hire_date="2021-06-01")
    await _seed_employee(db, first_name="Cara", email="cara@example.com",
                         department="Engineering", hire_date="2023-03-20")


def _names(rows) -> list[str]:
    return [e.first_name for e in rows]


# ═════════════════════════════════════════════════════════════════════
# FILTER TESTS
# ═════════════════════════════════════════════════════════════════════


class TestApplyFilters:
    """Tests for apply_filters utility."""

    async def test_filter_by_equality(self, db: AsyncSession):
        await _seed_three(db)
        query = apply_filters(select(Employee), Employee, {"department": "Finance"})
        rows = (await db.execute(query)).scalars().all()
        assert _names(rows) == ["Alice"]

    async def test_filter_none_values_skipped(self, db: AsyncSession):
        await _seed_three(db)
        query = apply_filters(select(Employee), Employee, {"department": None})
        assert len((await db.execute(query)).scalars().all()) == 3

    async def test_filter_by_ilike(self, db: AsyncSession):
        await _seed_three(db)
        query = apply_filters(select(Employee), Employee, {"email__ilike": "BOB"})
        assert _names((await db.execute(query)).scalars().all()) == ["Bob"]

    async def test_filter_by_from_to_range(self, db: AsyncSession):
        await _seed_three(db)
        query = apply_filters(
            select(Employee).order_by(Employee.hire_date),
            Employee,
            {"hire_date__from": date(2021, 1, 1), "hire_date__to": date(2023, 12, 31)},
        )
        assert _names((await db.execute(query)).scalars().all()) == ["Bob", "Cara"]

    async def test_filter_by_in(self, db: AsyncSession):
        await _seed_three(db)
        query = apply_filters(
            select(Employee).order_by(Employee.first_name),
            Employee,
            {"first_name__in": ["Alice", "Cara"]},
        )
        assert _names((await db.execute(query)).scalars().all()) == ["Alice", "Cara"]

    async def test_filter_nonexistent_column_ignored(self, db: AsyncSession):
        await _seed_three(db)
        query = apply_filters(select(Employee), Employee, {"salary": 10})
        assert len((await db.execute(query)).scalars().all()) == 3


class TestApplySearch:

    async def test_search_any_column(self, db: AsyncSession):
        await _seed_three(db)
        query = apply_search(
            select(Employee), Employee, "cara@", ["first_name", "email"],
        )
        assert _names((await db.execute(query)).scalars().all()) == ["Cara"]

    async def test_blank_search_is_noop(self, db: AsyncSession):
        await _seed_three(db)
        query = apply_search(select(Employee), Employee, "   ", ["first_name"])
        assert len((await db.execute(query)).scalars().all()) == 3


class TestGetColumn:

    def test_get_existing_column(self):
        assert _get_column(Employee, "email") is Employee.email

    def test_get_nonexistent_column(self):
        assert _get_column(Employee, "nope") is None


# ═════════════════════════════════════════════════════════════════════
# PAGINATION TESTS
# ═════════════════════════════════════════════════════════════════════


class TestPagination:

    async def test_paginate_with_sort(self, db: AsyncSession):
        await _seed_three(db)
        params = PaginationParams(page=1, page_size=2, sort="-hire_date")
        result = await paginate(db, select(Employee), params, model=Employee)
        assert _names(result.data) == ["Cara", "Bob"]
        assert result.meta.total == 3
        assert result.meta.has_next is True

    async def test_paginate_page_2(self, db: AsyncSession):
        await _seed_three(db)
        params = PaginationParams(page=2, page_size=2, sort="first_name")
        result = await paginate(db, select(Employee), params, model=Employee)
        assert _names(result.data) == ["Cara"]
        assert result.meta.has_prev is True
        assert result.meta.has_next is False

    async def test_unknown_sort_field_ignored(self, db: AsyncSession):
        await _seed_three(db)
        params = PaginationParams(page=1, page_size=10, sort="; DROP TABLE employees")
        result = await paginate(
            db, select(Employee).order_by(Employee.first_name), params, model=Employee,
        )
        assert _names(result.data) == ["Alice", "Bob", "Cara"]

    @pytest.mark.parametrize("sort", ["metadata", "-__table__", "registry"])
    async def test_non_column_sort_ignored(self, db: AsyncSession, sort):
        await _seed_three(db)
        params = PaginationParams(page=1, page_size=10, sort=sort)
        result = await paginate(
            db, select(Employee).order_by(Employee.first_name), params, model=Employee,
        )
        assert _names(result.data) == ["Alice", "Bob", "Cara"]

    async def test_total_counts_filtered_rows(self, db: AsyncSession):
        await _seed_three(db)
        query = apply_filters(select(Employee), Employee, {"department": "Engineering"})
        result = await paginate(db, query, PaginationParams(page=1, page_size=1), model=Employee)
        assert result.meta.total == 2
        assert result.meta.total_pages == 2
        assert len(result.data) == 1

    async def test_paginate_empty_result(self, db: AsyncSession):
        params = PaginationParams(page=1, page_size=10, sort=None)
        result = await paginate(db, select(Employee), params, model=Employee)
        assert result.data == []
        assert result.meta.total_pages == 0


# ═════════════════════════════════════════════════════════════════════
# EXCEPTIONS / AUDIT / LOGGING
# ═════════════════════════════════════════════════════════════════════


class TestExceptions:

    def test_status_codes(self):
        assert NotFoundException("Employee", "x").status_code == 404
        assert BadRequestException("nope").status_code == 400
        assert ConflictError("email", "a@b.c").status_code == 409
        assert ValidationException({"f": ["bad"]}).status_code == 422

    def test_conflict_lists_field(self):
        exc = ConflictError("email", "a@example.com")
        assert exc.errors == {"email": ["'a@example.com' is already in use."]}

    async def test_validation_problem_body(self, client):
        resp = await client.post("/api/employees", json={"first_name": "Solo"})
        assert resp.status_code == 422
        body = resp.json()
        assert body["type"].endswith("/validation-error")
        assert body["message"] == "Request validation failed."
        assert {"last_name", "email"} <= set(body["errors"])


async def test_create_audit_entry(db: AsyncSession):
    entry = await create_audit_entry(
        db, action="create", entity_type="notes", entity_id="n-1",
        actor="tester", new_values={"title": "Hi"},
    )
    stored = (await db.execute(select(AuditTrail))).scalar_one()
    assert stored.id == entry.id
    assert stored.new_values == {"title": "Hi"}
    assert "notes/n-1" in repr(stored)


def test_configure_logging_sets_level():
    configure_logging("debug")
    assert logging.getLogger().level == logging.DEBUG
    configure_logging("warning")
    assert logging.getLogger().level == logging.WARNING

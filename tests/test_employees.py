"""Employee module test suite — CRUD, search, pagination, conflicts, and
cascading delete.

Tests exercise the service layer and the HTTP API (via router).
Uses the shared conftest.py pattern with in-memory SQLite.
"""

from __future__ import annotations

import pytest
from sqlalchemy import select

from peoplehub.common.audit import AuditTrail
from peoplehub.common.exceptions import ConflictError, NotFoundException
from peoplehub.common.pagination import PaginationParams
from peoplehub.employees.models import Employee
from peoplehub.employees.schemas import EmployeeCreate, EmployeeUpdate
from peoplehub.employees.service import EmployeeService
from tests.conftest import _create_employee, _make_bonus, _make_employee, _make_note


def _page(page: int = 1, page_size: int = 50, sort: str | None = None) -> PaginationParams:
    return PaginationParams(page=page, page_size=page_size, sort=sort)


# ═════════════════════════════════════════════════════════════════════
# Service layer
# ═════════════════════════════════════════════════════════════════════


class TestEmployeeService:

    async def test_create_and_get(self, db):
        created = await EmployeeService.create_employee(
            db, EmployeeCreate(**_make_employee(id="emp-7")),
        )
        assert created.id == "emp-7"
        assert created.full_name == "Dana Whitfield"

        fetched = await EmployeeService.get_employee(db, "emp-7")
        assert fetched.email == "dana.whitfield@example.com"

    async def test_generated_id_when_none_given(self, db):
        created = await EmployeeService.create_employee(db, EmployeeCreate(**_make_employee()))
        assert len(created.id) == 36

    async def test_get_unknown_raises(self, db):
        with pytest.raises(NotFoundException):
            await EmployeeService.get_employee(db, "nobody")

    async def test_duplicate_id_conflicts(self, db):
        await EmployeeService.create_employee(db, EmployeeCreate(**_make_employee(id="emp-1")))
        with pytest.raises(ConflictError):
            await EmployeeService.create_employee(
                db, EmployeeCreate(**_make_employee(id="emp-1", email="x@example.com")),
            )

    async def test_update_records_audit(self, db):
        await EmployeeService.create_employee(db, EmployeeCreate(**_make_employee(id="emp-1")))
        updated = await EmployeeService.update_employee(
            db, "emp-1", EmployeeUpdate(job_title="Payroll Lead"), actor="tester",
        )
        assert updated.job_title == "Payroll Lead"

        entry = (await db.execute(
            select(AuditTrail).where(AuditTrail.action == "update")
        )).scalar_one()
        assert entry.actor == "tester"
        assert entry.old_values == {"job_title": "Payroll Specialist"}
        assert entry.new_values == {"job_title": "Payroll Lead"}

    async def test_empty_update_is_noop(self, db):
        await EmployeeService.create_employee(db, EmployeeCreate(**_make_employee(id="emp-1")))
        await EmployeeService.update_employee(db, "emp-1", EmployeeUpdate())
        audits = (await db.execute(
            select(AuditTrail).where(AuditTrail.action == "update")
        )).scalars().all()
        assert audits == []

    async def test_list_sorted_by_name(self, db):
        for first, last, email in [
            ("Zoe", "Adams", "zoe@example.com"),
            ("Amir", "Baker", "amir@example.com"),
            ("Ana", "Adams", "ana@example.com"),
        ]:
            await EmployeeService.create_employee(
                db, EmployeeCreate(**_make_employee(first_name=first, last_name=last, email=email)),
            )
        result = await EmployeeService.list_employees(db, _page())
        assert [e.full_name for e in result.data] == ["Ana Adams", "Zoe Adams", "Amir Baker"]


# ═════════════════════════════════════════════════════════════════════
# HTTP API
# ═════════════════════════════════════════════════════════════════════


class TestEmployeeAPI:

    async def test_create_returns_201(self, client):
        resp = await client.post("/api/employees", json=_make_employee(id="emp-1"))
        assert resp.status_code == 201
        body = resp.json()
        assert body["data"]["full_name"] == "Dana Whitfield"
        assert body["data"]["hire_date"] == "2021-04-12"
        assert body["message"] == "Employee created successfully."

    async def test_get_unknown_is_problem_detail(self, client):
        resp = await client.get("/api/employees/emp-404")
        assert resp.status_code == 404
        assert resp.headers["content-type"].startswith("application/problem+json")
        body = resp.json()
        assert body["title"] == "Employee Not Found"
        assert body["message"] == "Employee with id 'emp-404' does not exist."
        assert body["instance"] == "/api/employees/emp-404"

    async def test_duplicate_email_conflicts(self, client):
        await _create_employee(client, id="emp-1")
        resp = await client.post("/api/employees", json=_make_employee(id="emp-2"))
        assert resp.status_code == 409
        assert "email" in resp.json()["errors"]

    async def test_invalid_email_rejected(self, client):
        resp = await client.post("/api/employees", json=_make_employee(email="not-an-email"))
        assert resp.status_code == 422
        assert "email" in resp.json()["errors"]

    async def test_invalid_hire_date_rejected(self, client):
        resp = await client.post("/api/employees", json=_make_employee(hire_date="2021-02-30"))
        assert resp.status_code == 422
        assert resp.json()["errors"]["hire_date"] == ["Please enter a valid date (YYYY-MM-DD)"]

    async def test_patch_job_info(self, client):
        await _create_employee(client, id="emp-1")
        resp = await client.patch(
            "/api/employees/emp-1",
            json={"department": "Legal", "location": "Remote", "employee_id": "emp-1"},
        )
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert (data["department"], data["location"]) == ("Legal", "Remote")
        assert data["job_title"] == "Payroll Specialist"

    async def test_patch_profile_section(self, client):
        await _create_employee(client, id="emp-1")
        resp = await client.patch(
            "/api/employees/emp-1",
            json={"profile_data": {"contact": {"mobile_phone": "312-555-0111"}}},
        )
        assert resp.status_code == 200
        profile = resp.json()["data"]["profile_data"]
        assert profile["contact"] == {"mobile_phone": "312-555-0111"}

    async def test_unknown_profile_section_rejected(self, client):
        await _create_employee(client, id="emp-1")
        resp = await client.patch(
            "/api/employees/emp-1", json={"profile_data": {"payroll": {}}},
        )
        assert resp.status_code == 422

    async def test_pagination_meta(self, client):
        for i in range(3):
            await _create_employee(client, email=f"person{i}@example.com", last_name=f"Lee{i}")
        resp = await client.get("/api/employees", params={"page": 1, "page_size": 2})
        body = resp.json()
        assert len(body["data"]) == 2
        assert body["meta"] == {
            "page": 1, "page_size": 2, "total": 3,
            "total_pages": 2, "has_next": True, "has_prev": False,
        }

    async def test_page_size_capped(self, client):
        resp = await client.get("/api/employees", params={"page_size": 500})
        assert resp.status_code == 422

    async def test_search_and_filter(self, client):
        await _create_employee(client, email="a@example.com", last_name="Whitfield")
        await _create_employee(
            client, email="b@example.com", first_name="Omar", last_name="Haddad",
            department="Engineering",
        )

        found = (await client.get("/api/employees", params={"search": "haDD"})).json()
        assert [e["last_name"] for e in found["data"]] == ["Haddad"]

        filtered = (await client.get("/api/employees", params={"department": "Finance"})).json()
        assert [e["last_name"] for e in filtered["data"]] == ["Whitfield"]

    async def test_sort_descending(self, client):
        await _create_employee(client, email="a@example.com", hire_date="2019-01-01")
        await _create_employee(client, email="b@example.com", hire_date="2023-01-01")
        resp = await client.get("/api/employees", params={"sort": "-hire_date"})
        emails = [e["email"] for e in resp.json()["data"]]
        assert emails == ["b@example.com", "a@example.com"]

    async def test_delete_removes_records(self, client, db):
        await _create_employee(client, id="emp-1")
        bonus = (await client.post("/api/employees/emp-1/bonuses", json=_make_bonus())).json()
        await client.post("/api/employees/emp-1/notes", json=_make_note())

        resp = await client.delete("/api/employees/emp-1")
        assert resp.status_code == 204

        assert (await client.get("/api/employees/emp-1")).status_code == 404
        assert (await client.get(f"/api/bonuses/{bonus['data']['id']}")).status_code == 404
        assert (await db.execute(select(Employee))).scalars().all() == []

    async def test_health(self, client):
        resp = await client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"

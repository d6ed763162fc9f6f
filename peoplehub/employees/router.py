"""Employee router — list, detail, create, update, delete.

Routes (mounted under ``/api/employees``):
    ""                 — List (paginated), create
    /{employee_id}     — Get, patch, delete

Per-employee record collections live in :mod:`peoplehub.records.router`.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from peoplehub.common.pagination import PaginationParams
from peoplehub.database import get_db
from peoplehub.employees.schemas import (
    EmployeeCreate,
    EmployeeDetail,
    EmployeeListItem,
    EmployeeUpdate,
)
from peoplehub.employees.service import EmployeeService

router = APIRouter(prefix="", tags=["employees"])


# ── GET /employees: List employees ─────────────────────────────────

@router.get("")
async def list_employees(
    db: AsyncSession = Depends(get_db),
    pagination: PaginationParams = Depends(),
    search: Optional[str] = Query(None, description="Search by name, email, or job title"),
    department: Optional[str] = Query(None, description="Filter by department"),
    location: Optional[str] = Query(None, description="Filter by location"),
):
    """List employees with pagination, search, and filtering."""
    result = await EmployeeService.list_employees(
        db,
        pagination,
        search=search,
        department=department,
        location=location,
    )
    return {
        "data": [
            EmployeeListItem.model_validate(emp).model_dump(mode="json")
            for emp in result.data
        ],
        "meta": result.meta.model_dump(),
    }


# ── POST /employees: Create employee ───────────────────────────────

@router.post("", status_code=201)
async def create_employee(
    body: EmployeeCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new employee record."""
    employee = await EmployeeService.create_employee(db, body)
    return {
        "data": EmployeeDetail.model_validate(employee).model_dump(mode="json"),
        "message": "Employee created successfully.",
    }


# ── GET /employees/{id}: Employee detail ───────────────────────────

@router.get("/{employee_id}")
async def get_employee(
    employee_id: str,
    db: AsyncSession = Depends(get_db),
):
    """Get a single employee; 404 when the id is unknown."""
    employee = await EmployeeService.get_employee(db, employee_id)
    return {"data": EmployeeDetail.model_validate(employee).model_dump(mode="json")}


# ── PATCH /employees/{id}: Update employee ─────────────────────────

@router.patch("/{employee_id}")
async def update_employee(
    employee_id: str,
    body: EmployeeUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Partially update an employee (job info, contact details, profile)."""
    employee = await EmployeeService.update_employee(db, employee_id, body)
    return {
        "data": EmployeeDetail.model_validate(employee).model_dump(mode="json"),
        "message": "Employee updated successfully.",
    }


# ── DELETE /employees/{id}: Delete employee ────────────────────────

@router.delete("/{employee_id}", status_code=204)
async def delete_employee(
    employee_id: str,
    db: AsyncSession = Depends(get_db),
):
    """Delete an employee and all of their records."""
    await EmployeeService.delete_employee(db, employee_id)
    return Response(status_code=204)

"""Demo data: one fully populated employee (``emp-1``).

Loaded at startup when ``SEED_DEMO_DATA`` is on. Everything goes through the
services, so the sample rows pass the same validation as API input.
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from peoplehub.employees.models import Employee
from peoplehub.employees.schemas import EmployeeCreate
from peoplehub.employees.service import EmployeeService
from peoplehub.records.registry import get_kind
from peoplehub.records.service import RecordService

logger = logging.getLogger(__name__)

DEMO_EMPLOYEE_ID = "emp-1"

DEMO_EMPLOYEE = {
    "id": DEMO_EMPLOYEE_ID,
    "first_name": "Muhammad Hamza",
    "last_name": "Anis",
    "email": "hamza.anis@example.com",
    "phone": "801-724-6600 x 123",
    "job_title": "HR Administrator",
    "department": "Operations",
    "location": "Chicago, IL",
    "hire_date": "2022-10-11",
    "profile_data": {
        "personal": {
            "preferred_name": "Hamza",
            "gender": "Male",
            "date_of_birth": "1995-03-15",
            "marital_status": "Single",
        },
        "address": {
            "street": "123 Main Street",
            "city": "Chicago",
            "state": "IL",
            "zip_code": "60601",
            "country": "United States",
        },
        "contact": {
            "work_phone": "801-724-6600",
            "mobile_phone": "801-724-6600",
            "personal_email": "hamza.personal@example.com",
        },
        "social": {"linkedin": "https://linkedin.com/in/hamza-anis"},
        "visa": {"type": "US Citizen", "status": "Active", "sponsorship_required": False},
    },
}

DEMO_RECORDS: dict[str, list[dict]] = {
    "education": [
        {
            "institution": "University of Illinois",
            "degree": "Bachelor of Science",
            "field_of_study": "Business Administration",
            "start_date": "2013-08-20",
            "end_date": "2017-05-15",
        },
    ],
    "employment-history": [
        {
            "effective_date": "2022-10-11",
            "status": "Full Time",
            "location": "Chicago, IL",
            "division": "North America",
            "department": "Operations",
            "job_title": "HR Administrator",
            "reports_to": "Jennifer Caldwell",
        },
    ],
    "compensation": [
        {
            "effective_date": "2022-10-11",
            "pay_rate": "$72,000.00",
            "pay_type": "Salary",
            "overtime": "Exempt",
            "change_reason": "New Hire",
        },
        {
            "effective_date": "2023-10-11",
            "pay_rate": "$78,500.00",
            "pay_type": "Salary",
            "overtime": "Exempt",
            "change_reason": "Annual Review",
        },
    ],
    "bonuses": [
        {
            "type": "Signing Bonus",
            "amount": "$5,000.00",
            "frequency": "One-time",
            "eligibility_date": "2022-10-11",
        },
        {
            "type": "Performance Bonus",
            "amount": "$3,500.00",
            "frequency": "Annual",
            "eligibility_date": "2023-12-15",
        },
    ],
    "time-off": [
        {
            "type": "Vacation",
            "start_date": "2024-07-01",
            "end_date": "2024-07-05",
            "days": 5,
            "status": "Approved",
        },
    ],
    "benefits": [
        {"type": "Medical", "plan": "PPO Gold", "status": "Enrolled", "enrollment_date": "2022-11-01"},
        {"type": "401(k)", "plan": "Traditional", "status": "Enrolled", "enrollment_date": "2022-11-01"},
    ],
    "training": [
        {"name": "Workplace Harassment Prevention", "category": "Compliance",
         "status": "Completed", "due_date": "2022-12-31", "completed_date": "2022-11-20",
         "credits": 2},
    ],
    "assets": [
        {"category": "Laptop", "description": "MacBook Pro 14\"", "serial_number": "C02XK1JHMD6T",
         "date_assigned": "2022-10-11"},
    ],
    "notes": [
        {"title": "Welcome", "content": "Completed orientation week.", "created_by": "HR Team"},
    ],
    "emergency-contacts": [
        {"first_name": "Ayesha", "last_name": "Anis", "relationship": "Sister",
         "phone": "312-555-0142"},
    ],
    "onboarding": [
        {"task": "Sign offer letter", "status": "Completed", "due_date": "2022-10-04",
         "completed_date": "2022-10-03"},
        {"task": "Set up payroll", "status": "Completed", "due_date": "2022-10-14",
         "completed_date": "2022-10-12"},
    ],
}


async def seed_demo_data(db: AsyncSession) -> bool:
    """Insert the demo employee and records unless ``emp-1`` already exists.

    Returns ``True`` when rows were inserted.
    """
    if await db.get(Employee, DEMO_EMPLOYEE_ID) is not None:
        logger.debug("Demo employee already present; skipping seed")
        return False

    await EmployeeService.create_employee(
        db, EmployeeCreate.model_validate(DEMO_EMPLOYEE), actor="seed",
    )
    for slug, rows in DEMO_RECORDS.items():
        kind = get_kind(slug)
        for row in rows:
            await RecordService.create_record(
                db, kind, DEMO_EMPLOYEE_ID, kind.create_schema.model_validate(row),
                actor="seed",
            )

    logger.info(
        "Seeded demo employee %s with %d records",
        DEMO_EMPLOYEE_ID, sum(len(rows) for rows in DEMO_RECORDS.values()),
    )
    return True

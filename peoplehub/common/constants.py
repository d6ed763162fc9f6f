"""Enums and constants for PeopleHub — select options offered by the forms."""

from __future__ import annotations

import enum

DATE_FORMAT = "%Y-%m-%d"
DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 100


# ── Job ─────────────────────────────────────────────────────────────

class EmploymentStatus(str, enum.Enum):
    full_time = "Full Time"
    part_time = "Part Time"
    contract = "Contract"
    intern = "Intern"
    terminated = "Terminated"
    on_leave = "On Leave"


class Division(str, enum.Enum):
    north_america = "North America"
    europe = "Europe"
    asia_pacific = "Asia Pacific"
    latin_america = "Latin America"
    corporate = "Corporate"


class Department(str, enum.Enum):
    engineering = "Engineering"
    product = "Product"
    design = "Design"
    marketing = "Marketing"
    sales = "Sales"
    human_resources = "Human Resources"
    finance = "Finance"
    operations = "Operations"
    customer_success = "Customer Success"
    legal = "Legal"


# Employment-history entries predate the last two departments
HISTORY_DEPARTMENTS = tuple(Department)[:8]


class WorkLocation(str, enum.Enum):
    san_francisco = "San Francisco, CA"
    new_york = "New York, NY"
    seattle = "Seattle, WA"
    austin = "Austin, TX"
    chicago = "Chicago, IL"
    remote = "Remote"
    hybrid = "Hybrid"


# ── Compensation ────────────────────────────────────────────────────

class PayType(str, enum.Enum):
    salary = "Salary"
    hourly = "Hourly"
    commission = "Commission"
    contract = "Contract"


class OvertimeStatus(str, enum.Enum):
    exempt = "Exempt"
    non_exempt = "Non-Exempt"


class ChangeReason(str, enum.Enum):
    new_hire = "New Hire"
    promotion = "Promotion"
    annual_review = "Annual Review"
    merit_increase = "Merit Increase"
    market_adjustment = "Market Adjustment"
    role_change = "Role Change"
    other = "Other"


# ── Bonuses ─────────────────────────────────────────────────────────

class BonusType(str, enum.Enum):
    performance = "Performance Bonus"
    signing = "Signing Bonus"
    retention = "Retention Bonus"
    holiday = "Holiday Bonus"
    project_completion = "Project Completion"
    sales_commission = "Sales Commission"
    referral = "Referral Bonus"
    other = "Other"


class BonusFrequency(str, enum.Enum):
    one_time = "One-time"
    annual = "Annual"
    quarterly = "Quarterly"
    monthly = "Monthly"
    as_needed = "As needed"


# ── Notifications (dashboard client) ────────────────────────────────

class NotificationType(str, enum.Enum):
    success = "success"
    error = "error"
    info = "info"


NOTIFICATION_TTL_SECONDS = 5.0

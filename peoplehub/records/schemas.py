"""Record Pydantic v2 schemas — request/response validation.

Each collection gets three models:

* ``<Kind>Update`` — every field optional; PATCH bodies.
* ``<Kind>Create`` — ``Update`` with the required fields tightened; POST bodies.
* ``<Kind>Out``    — ``Update`` plus ``id`` / ``employee_id``; responses.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from peoplehub.common.formatters import format_currency
from peoplehub.common.types import (
    IsoDate,
    Money,
    OptionalText,
    RequiredDate,
    RequiredMoney,
    RequiredText,
)


class RecordUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # Optional; when sent it must match the owning employee
    employee_id: Optional[str] = None


class RecordCreate(RecordUpdate):
    pass


class RecordOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    employee_id: str


def _display(amount) -> Optional[str]:
    return format_currency(str(amount)) if amount is not None else None


# ═════════════════════════════════════════════════════════════════════
# Education
# ═════════════════════════════════════════════════════════════════════


class EducationUpdate(RecordUpdate):
    institution: OptionalText = None
    degree: OptionalText = None
    field_of_study: OptionalText = None
    start_date: IsoDate = None
    end_date: IsoDate = None
    description: OptionalText = None


class EducationCreate(EducationUpdate, RecordCreate):
    pass


class EducationOut(EducationUpdate, RecordOut):
    model_config = ConfigDict(from_attributes=True, extra="ignore")


# ═════════════════════════════════════════════════════════════════════
# Employment history
# ═════════════════════════════════════════════════════════════════════


class EmploymentHistoryUpdate(RecordUpdate):
    effective_date: IsoDate = None
    status: OptionalText = None
    location: OptionalText = None
    division: OptionalText = None
    department: OptionalText = None
    job_title: OptionalText = None
    reports_to: OptionalText = None
    comment: OptionalText = None


class EmploymentHistoryCreate(EmploymentHistoryUpdate, RecordCreate):
    effective_date: RequiredDate
    status: RequiredText
    department: RequiredText
    job_title: RequiredText


class EmploymentHistoryOut(EmploymentHistoryUpdate, RecordOut):
    model_config = ConfigDict(from_attributes=True, extra="ignore")


# ═════════════════════════════════════════════════════════════════════
# Compensation
# ═════════════════════════════════════════════════════════════════════


class CompensationUpdate(RecordUpdate):
    effective_date: IsoDate = None
    pay_rate: Money = None
    pay_type: OptionalText = None
    overtime: OptionalText = None
    change_reason: OptionalText = None
    comment: OptionalText = None


class CompensationCreate(CompensationUpdate, RecordCreate):
    effective_date: RequiredDate
    pay_rate: RequiredMoney
    pay_type: RequiredText
    change_reason: RequiredText


class CompensationOut(CompensationUpdate, RecordOut):
    model_config = ConfigDict(from_attributes=True, extra="ignore")

    @computed_field
    @property
    def pay_rate_display(self) -> Optional[str]:
        return _display(self.pay_rate)


# ═════════════════════════════════════════════════════════════════════
# Bonuses
# ═════════════════════════════════════════════════════════════════════


class BonusUpdate(RecordUpdate):
    type: OptionalText = None
    amount: Money = None
    frequency: OptionalText = None
    eligibility_date: IsoDate = None
    description: OptionalText = None


class BonusCreate(BonusUpdate, RecordCreate):
    type: RequiredText
    amount: RequiredMoney
    frequency: RequiredText


class BonusOut(BonusUpdate, RecordOut):
    model_config = ConfigDict(from_attributes=True, extra="ignore")

    @computed_field
    @property
    def amount_display(self) -> Optional[str]:
        return _display(self.amount)


# ═════════════════════════════════════════════════════════════════════
# Time off
# ═════════════════════════════════════════════════════════════════════


class TimeOffUpdate(RecordUpdate):
    type: OptionalText = None
    start_date: IsoDate = None
    end_date: IsoDate = None
    days: Optional[Decimal] = Field(None, ge=0)
    status: OptionalText = None
    comment: OptionalText = None


class TimeOffCreate(TimeOffUpdate, RecordCreate):
    pass


class TimeOffOut(TimeOffUpdate, RecordOut):
    model_config = ConfigDict(from_attributes=True, extra="ignore")


# ═════════════════════════════════════════════════════════════════════
# Documents
# ═════════════════════════════════════════════════════════════════════


class DocumentUpdate(RecordUpdate):
    category: OptionalText = None
    name: OptionalText = None
    file_name: OptionalText = None
    upload_date: IsoDate = None


class DocumentCreate(DocumentUpdate, RecordCreate):
    pass


class DocumentOut(DocumentUpdate, RecordOut):
    model_config = ConfigDict(from_attributes=True, extra="ignore")


# ═════════════════════════════════════════════════════════════════════
# Benefits & dependents
# ═════════════════════════════════════════════════════════════════════


class BenefitUpdate(RecordUpdate):
    type: OptionalText = None
    plan: OptionalText = None
    status: OptionalText = None
    enrollment_date: IsoDate = None


class BenefitCreate(BenefitUpdate, RecordCreate):
    pass


class BenefitOut(BenefitUpdate, RecordOut):
    model_config = ConfigDict(from_attributes=True, extra="ignore")


class DependentUpdate(RecordUpdate):
    first_name: OptionalText = None
    last_name: OptionalText = None
    relationship: OptionalText = None
    date_of_birth: IsoDate = None
    ssn: OptionalText = None
    gender: OptionalText = None
    is_student: Optional[bool] = None


class DependentCreate(DependentUpdate, RecordCreate):
    first_name: RequiredText
    last_name: RequiredText
    relationship: RequiredText
    date_of_birth: RequiredDate
    is_student: bool = False


class DependentOut(DependentUpdate, RecordOut):
    model_config = ConfigDict(from_attributes=True, extra="ignore")


# ═════════════════════════════════════════════════════════════════════
# Training & assets
# ═════════════════════════════════════════════════════════════════════


class TrainingUpdate(RecordUpdate):
    name: OptionalText = None
    category: OptionalText = None
    status: OptionalText = None
    due_date: IsoDate = None
    completed_date: IsoDate = None
    credits: Optional[Decimal] = Field(None, ge=0)


class TrainingCreate(TrainingUpdate, RecordCreate):
    pass


class TrainingOut(TrainingUpdate, RecordOut):
    model_config = ConfigDict(from_attributes=True, extra="ignore")


class AssetUpdate(RecordUpdate):
    category: OptionalText = None
    description: OptionalText = None
    serial_number: OptionalText = None
    date_assigned: IsoDate = None


class AssetCreate(AssetUpdate, RecordCreate):
    pass


class AssetOut(AssetUpdate, RecordOut):
    model_config = ConfigDict(from_attributes=True, extra="ignore")


# ═════════════════════════════════════════════════════════════════════
# Notes & emergency contacts
# ═════════════════════════════════════════════════════════════════════


class NoteUpdate(RecordUpdate):
    title: OptionalText = Field(None, max_length=200)
    content: OptionalText = None
    created_by: OptionalText = None


class NoteCreate(NoteUpdate, RecordCreate):
    pass


class NoteOut(NoteUpdate, RecordOut):
    model_config = ConfigDict(from_attributes=True, extra="ignore")

    created_at: Optional[datetime] = None


class EmergencyContactUpdate(RecordUpdate):
    first_name: OptionalText = None
    last_name: OptionalText = None
    relationship: OptionalText = None
    phone: OptionalText = None
    email: OptionalText = None
    address: OptionalText = None


class EmergencyContactCreate(EmergencyContactUpdate, RecordCreate):
    pass


class EmergencyContactOut(EmergencyContactUpdate, RecordOut):
    model_config = ConfigDict(from_attributes=True, extra="ignore")


# ═════════════════════════════════════════════════════════════════════
# Onboarding / offboarding
# ═════════════════════════════════════════════════════════════════════


class ChecklistTaskUpdate(RecordUpdate):
    task: OptionalText = None
    description: OptionalText = None
    due_date: IsoDate = None
    status: OptionalText = None
    completed_date: IsoDate = None


class ChecklistTaskCreate(ChecklistTaskUpdate, RecordCreate):
    pass


class ChecklistTaskOut(ChecklistTaskUpdate, RecordOut):
    model_config = ConfigDict(from_attributes=True, extra="ignore")

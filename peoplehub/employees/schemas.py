"""Employee Pydantic v2 schemas — request/response validation."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from peoplehub.common.types import IsoDate, OptionalText, RequiredText


class ProfileData(BaseModel):
    """Free-form profile sections shown on the Personal tab."""

    model_config = ConfigDict(extra="forbid")

    personal: Optional[dict[str, Any]] = None
    address: Optional[dict[str, Any]] = None
    contact: Optional[dict[str, Any]] = None
    social: Optional[dict[str, Any]] = None
    visa: Optional[dict[str, Any]] = None


# ═════════════════════════════════════════════════════════════════════
# Requests
# ═════════════════════════════════════════════════════════════════════


class EmployeeCreate(BaseModel):
    """POST /employees body. ``id`` may be supplied (e.g. ``emp-1``)."""

    id: Optional[str] = Field(None, min_length=1, max_length=36)
    first_name: RequiredText = Field(..., max_length=100)
    last_name: RequiredText = Field(..., max_length=100)
    email: EmailStr
    phone: OptionalText = None
    job_title: OptionalText = None
    department: OptionalText = None
    location: OptionalText = None
    hire_date: IsoDate = None
    profile_data: Optional[ProfileData] = None


class EmployeeUpdate(BaseModel):
    """PATCH /employees/{id} body — only the fields sent are changed."""

    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: OptionalText = None
    job_title: OptionalText = None
    department: OptionalText = None
    location: OptionalText = None
    hire_date: IsoDate = None
    profile_data: Optional[ProfileData] = None


# ═════════════════════════════════════════════════════════════════════
# Responses
# ═════════════════════════════════════════════════════════════════════


class EmployeeListItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    first_name: str
    last_name: str
    full_name: str
    email: str
    job_title: Optional[str] = None
    department: Optional[str] = None
    location: Optional[str] = None


class EmployeeDetail(EmployeeListItem):
    """Full employee representation."""

    phone: Optional[str] = None
    hire_date: IsoDate = None
    profile_data: Optional[ProfileData] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

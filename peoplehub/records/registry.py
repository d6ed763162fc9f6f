"""Registry of per-employee record collections.

Each :class:`RecordKind` ties a URL slug (``bonuses``, ``time-off``, ...) to
its ORM model and its create/update/read schemas. The router and the service
are generic over this table; adding a collection means adding one entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Type

from pydantic import BaseModel

from peoplehub.database import Base
from peoplehub.records import models, schemas


@dataclass(frozen=True)
class RecordKind:
    slug: str
    label: str
    model: Type[Base]
    create_schema: Type[schemas.RecordCreate]
    update_schema: Type[schemas.RecordUpdate]
    out_schema: Type[BaseModel]
    order_by: str = "id"
    descending: bool = False

    @property
    def required_fields(self) -> frozenset[str]:
        """Fields that must be present on create and may not be cleared later."""
        return frozenset(
            name
            for name, field in self.create_schema.model_fields.items()
            if field.is_required()
        )


_KINDS = (
    RecordKind(
        "education", "Education", models.Education,
        schemas.EducationCreate, schemas.EducationUpdate, schemas.EducationOut,
        order_by="start_date", descending=True,
    ),
    RecordKind(
        "employment-history", "Employment History", models.EmploymentHistory,
        schemas.EmploymentHistoryCreate, schemas.EmploymentHistoryUpdate,
        schemas.EmploymentHistoryOut,
        order_by="effective_date", descending=True,
    ),
    RecordKind(
        "compensation", "Compensation", models.Compensation,
        schemas.CompensationCreate, schemas.CompensationUpdate, schemas.CompensationOut,
        order_by="effective_date", descending=True,
    ),
    RecordKind(
        "bonuses", "Bonuses", models.Bonus,
        schemas.BonusCreate, schemas.BonusUpdate, schemas.BonusOut,
        order_by="eligibility_date", descending=True,
    ),
    RecordKind(
        "time-off", "Time Off", models.TimeOff,
        schemas.TimeOffCreate, schemas.TimeOffUpdate, schemas.TimeOffOut,
        order_by="start_date", descending=True,
    ),
    RecordKind(
        "documents", "Documents", models.Document,
        schemas.DocumentCreate, schemas.DocumentUpdate, schemas.DocumentOut,
        order_by="upload_date", descending=True,
    ),
    RecordKind(
        "benefits", "Benefits", models.Benefit,
        schemas.BenefitCreate, schemas.BenefitUpdate, schemas.BenefitOut,
        order_by="enrollment_date", descending=True,
    ),
    RecordKind(
        "dependents", "Dependents", models.Dependent,
        schemas.DependentCreate, schemas.DependentUpdate, schemas.DependentOut,
        order_by="date_of_birth",
    ),
    RecordKind(
        "training", "Training", models.Training,
        schemas.TrainingCreate, schemas.TrainingUpdate, schemas.TrainingOut,
        order_by="due_date",
    ),
    RecordKind(
        "assets", "Assets", models.Asset,
        schemas.AssetCreate, schemas.AssetUpdate, schemas.AssetOut,
        order_by="date_assigned", descending=True,
    ),
    RecordKind(
        "notes", "Notes", models.Note,
        schemas.NoteCreate, schemas.NoteUpdate, schemas.NoteOut,
        order_by="created_at", descending=True,
    ),
    RecordKind(
        "emergency-contacts", "Emergency Contacts", models.EmergencyContact,
        schemas.EmergencyContactCreate, schemas.EmergencyContactUpdate,
        schemas.EmergencyContactOut,
        order_by="last_name",
    ),
    RecordKind(
        "onboarding", "Onboarding", models.OnboardingTask,
        schemas.ChecklistTaskCreate, schemas.ChecklistTaskUpdate, schemas.ChecklistTaskOut,
        order_by="due_date",
    ),
    RecordKind(
        "offboarding", "Offboarding", models.OffboardingTask,
        schemas.ChecklistTaskCreate, schemas.ChecklistTaskUpdate, schemas.ChecklistTaskOut,
        order_by="due_date",
    ),
)

RECORD_KINDS: dict[str, RecordKind] = {kind.slug: kind for kind in _KINDS}


def get_kind(slug: str) -> RecordKind:
    """Look up a collection by slug; ``KeyError`` for unknown slugs."""
    return RECORD_KINDS[slug]

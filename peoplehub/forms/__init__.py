"""Forms module — validated create/edit forms for employee records."""

from peoplehub.forms.base import FormField, RecordForm
from peoplehub.forms.records import (
    BonusForm,
    CompensationForm,
    EmploymentHistoryForm,
    JobInfoForm,
)

FORMS_BY_KIND = {
    form.record_kind: form
    for form in (BonusForm, CompensationForm, EmploymentHistoryForm)
}

__all__ = [
    "FORMS_BY_KIND",
    "BonusForm",
    "CompensationForm",
    "EmploymentHistoryForm",
    "FormField",
    "JobInfoForm",
    "RecordForm",
]

"""Concrete record forms: bonus, compensation, employment history, job info."""

from peoplehub.common.constants import (
    HISTORY_DEPARTMENTS,
    BonusFrequency,
    BonusType,
    ChangeReason,
    Department,
    Division,
    EmploymentStatus,
    OvertimeStatus,
    PayType,
    WorkLocation,
)
from peoplehub.forms.base import (
    CURRENCY,
    DATE,
    SELECT,
    TEXTAREA,
    FormField,
    RecordForm,
    choices_of,
)


class BonusForm(RecordForm):
    record_kind = "bonuses"
    title = "Bonus"
    fields = (
        FormField("type", "Bonus Type", SELECT,
                  required_message="Bonus type is required",
                  choices=choices_of(BonusType)),
        FormField("amount", "Amount", CURRENCY,
                  required_message="Bonus amount is required",
                  invalid_message="Please enter a valid bonus amount"),
        FormField("frequency", "Frequency", SELECT,
                  required_message="Frequency is required",
                  choices=choices_of(BonusFrequency)),
        FormField("eligibility_date", "Eligibility Date", DATE),
        FormField("description", "Description", TEXTAREA),
    )


class CompensationForm(RecordForm):
    record_kind = "compensation"
    title = "Compensation"
    fields = (
        FormField("effective_date", "Effective Date", DATE,
                  required_message="Effective date is required"),
        FormField("pay_rate", "Pay Rate", CURRENCY,
                  required_message="Pay rate is required",
                  invalid_message="Please enter a valid salary amount"),
        FormField("pay_type", "Pay Type", SELECT,
                  required_message="Pay type is required",
                  choices=choices_of(PayType)),
        FormField("overtime", "Overtime", SELECT, choices=choices_of(OvertimeStatus)),
        FormField("change_reason", "Change Reason", SELECT,
                  required_message="Change reason is required",
                  choices=choices_of(ChangeReason)),
        FormField("comment", "Comment", TEXTAREA),
    )


class EmploymentHistoryForm(RecordForm):
    record_kind = "employment-history"
    title = "Employment Status"
    fields = (
        FormField("effective_date", "Effective Date", DATE,
                  required_message="Effective date is required"),
        FormField("status", "Employment Status", SELECT,
                  required_message="Employment status is required",
                  choices=choices_of(EmploymentStatus)),
        FormField("location", "Location", SELECT, choices=choices_of(WorkLocation)),
        FormField("division", "Division", SELECT, choices=choices_of(Division)),
        FormField("department", "Department", SELECT,
                  required_message="Department is required",
                  choices=tuple(d.value for d in HISTORY_DEPARTMENTS)),
        FormField("job_title", "Job Title",
                  required_message="Job title is required"),
        FormField("reports_to", "Reports To"),
        FormField("comment", "Comment", TEXTAREA),
    )


class JobInfoForm(RecordForm):
    """Edits the job fields on the employee record itself."""

    record_kind = None
    title = "Job Information"
    fields = (
        FormField("job_title", "Job Title", required_message="Job title is required"),
        FormField("department", "Department", SELECT,
                  required_message="Department is required",
                  choices=choices_of(Department)),
        FormField("location", "Location", SELECT, choices=choices_of(WorkLocation)),
        FormField("hire_date", "Hire Date", DATE),
    )

"""Form base class for the record-editing dialogs.

A form holds raw string values keyed by field name. It formats input as it is
typed (:meth:`RecordForm.set`), validates locally without touching the network
and hands a payload to a caller-supplied callback on submit.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ClassVar, Mapping, Optional, Type

from peoplehub.common.formatters import (
    DATE_ERROR,
    format_currency,
    is_valid_currency,
    is_valid_iso_date,
)

TEXT = "text"
TEXTAREA = "textarea"
DATE = "date"
CURRENCY = "currency"
SELECT = "select"


@dataclass(frozen=True)
class FormField:
    name: str
    label: str
    kind: str = TEXT
    required_message: Optional[str] = None
    invalid_message: Optional[str] = None
    choices: tuple[str, ...] = ()

    @property
    def required(self) -> bool:
        return self.required_message is not None


def choices_of(enum_cls: Type[Enum]) -> tuple[str, ...]:
    return tuple(member.value for member in enum_cls)


class RecordForm:
    """Create/edit form for one entity kind.

    Subclasses declare ``fields`` and ``record_kind`` (the collection slug, or
    ``None`` for forms that edit the employee itself).
    """

    fields: ClassVar[tuple[FormField, ...]] = ()
    record_kind: ClassVar[Optional[str]] = None
    title: ClassVar[str] = ""

    def __init__(
        self,
        employee_id: str,
        initial_data: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.employee_id = employee_id
        self.initial_data = dict(initial_data) if initial_data else None
        self.values: dict[str, str] = {}
        self.errors: dict[str, str] = {}
        self.reset()

    # ── Introspection ───────────────────────────────────────────────

    @property
    def is_editing(self) -> bool:
        return self.initial_data is not None

    @property
    def record_id(self) -> Optional[str]:
        return self.initial_data.get("id") if self.initial_data else None

    @property
    def heading(self) -> str:
        return f"{'Edit' if self.is_editing else 'Add'} {self.title}"

    def field(self, name: str) -> FormField:
        for f in self.fields:
            if f.name == name:
                return f
        raise KeyError(name)

    # ── Editing ─────────────────────────────────────────────────────

    def set(self, name: str, raw: str) -> str:
        """Store *raw* for *name* after change-time formatting; returns it."""
        f = self.field(name)
        value = format_currency(raw) if f.kind == CURRENCY else raw
        self.values[name] = value
        self.errors.pop(name, None)
        return value

    def reset(self) -> None:
        """Back to ``initial_data`` (edit mode) or blank (create mode)."""
        source = self.initial_data or {}
        self.values = {f.name: _to_text(f, source.get(f.name)) for f in self.fields}
        self.errors = {}

    cancel = reset

    # ── Validation / submit ─────────────────────────────────────────

    def validate(self) -> dict[str, str]:
        """Recompute and return ``{field: message}`` for every invalid field."""
        errors: dict[str, str] = {}
        for f in self.fields:
            value = self.values.get(f.name, "").strip()
            if not value:
                if f.required:
                    errors[f.name] = f.required_message
                continue
            if f.kind == DATE and not is_valid_iso_date(value):
                errors[f.name] = f.invalid_message or DATE_ERROR
            elif f.kind == CURRENCY and not is_valid_currency(value):
                errors[f.name] = f.invalid_message or "Please enter a valid amount"
        self.errors = errors
        return errors

    @property
    def is_valid(self) -> bool:
        return not self.validate()

    def payload(self) -> dict[str, Any]:
        """Trimmed values with the owning employee merged in."""
        data: dict[str, Any] = {f.name: self.values.get(f.name, "").strip() for f in self.fields}
        data["employee_id"] = self.employee_id
        return data

    def submit(self, on_submit: Callable[[dict[str, Any]], Any]) -> bool:
        """Call *on_submit* with :meth:`payload` if the form is valid.

        Returns ``False`` (callback not called, :attr:`errors` populated) when
        validation fails.
        """
        if self.validate():
            return False
        on_submit(self.payload())
        return True


def _to_text(f: FormField, value: Any) -> str:
    if value is None:
        return ""
    if f.kind == CURRENCY:
        return format_currency(str(value))
    return str(value)

"""Dashboard shell — composes tabs, record sections and the editing flow.

Record lists are cached per (employee, collection). Any successful create,
update or delete drops the cached list so the next read refetches it; nothing
is merged locally. API failures become error notifications and leave the cache
as it was.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from peoplehub.client.api import ApiClient, ApiError, NotFoundError
from peoplehub.client.state import DashboardState
from peoplehub.forms.base import RecordForm
from peoplehub.layout.customization import EditSession, TabCustomizer
from peoplehub.layout.tabs import EnabledTabSet, TabDescriptor, TabPartition

logger = logging.getLogger(__name__)

# Record collections rendered by each tab, in display order
TAB_SECTIONS: dict[str, tuple[str, ...]] = {
    "personal": ("education",),
    "job": ("employment-history", "compensation", "bonuses"),
    "timeoff": ("time-off",),
    "documents": ("documents",),
    "benefits": ("benefits", "dependents"),
    "training": ("training",),
    "assets": ("assets",),
    "more": ("notes", "emergency-contacts", "onboarding", "offboarding"),
}

# Tabs that also show the employee record itself
EMPLOYEE_TABS = frozenset({"personal", "job"})


@dataclass
class TabView:
    tab: TabDescriptor
    employee: Optional[dict[str, Any]]
    sections: dict[str, list[dict[str, Any]]] = field(default_factory=dict)


class RecordCache:
    """Last fetched list per (employee_id, collection)."""

    def __init__(self) -> None:
        self._lists: dict[tuple[str, str], list[dict[str, Any]]] = {}

    def get(self, employee_id: str, kind: str) -> Optional[list[dict[str, Any]]]:
        return self._lists.get((employee_id, kind))

    def put(self, employee_id: str, kind: str, records: list[dict[str, Any]]) -> None:
        self._lists[(employee_id, kind)] = records

    def invalidate(self, employee_id: str, kind: str) -> None:
        self._lists.pop((employee_id, kind), None)

    def clear(self) -> None:
        self._lists.clear()


class Dashboard:
    """One employee's dashboard, backed by *api* and *state*."""

    def __init__(self, api: ApiClient, state: DashboardState) -> None:
        self.api = api
        self.state = state
        self.customizer = TabCustomizer(state.apply_enabled_tabs, state.registry)
        self.cache = RecordCache()
        self.employee: Optional[dict[str, Any]] = None
        self.not_found = False

    @property
    def employee_id(self) -> Optional[str]:
        return self.employee["id"] if self.employee else None

    # ═════════════════════════════════════════════════════════════════
    # Employee
    # ═════════════════════════════════════════════════════════════════

    async def load_employee(self, employee_id: str) -> Optional[dict[str, Any]]:
        """Fetch and select an employee.

        A 404 switches to the not-found state. Other failures keep the last
        cached copy of the same employee, if there is one.
        """
        try:
            employee = await self.api.get_employee(employee_id)
        except NotFoundError:
            logger.info("Employee %s not found", employee_id)
            self.employee = None
            self.not_found = True
            return None
        except ApiError as exc:
            self.state.notifications.error(f"Could not load employee: {exc.message}")
            cached = self.state.current_employee
            if cached and cached.get("id") == employee_id:
                self.employee = cached
                self.not_found = False
            return self.employee

        if employee_id != self.employee_id:
            self.cache.clear()
        self.employee = employee
        self.not_found = False
        self.state.set_current_employee(employee)
        return employee

    # ═════════════════════════════════════════════════════════════════
    # Tabs
    # ═════════════════════════════════════════════════════════════════

    @property
    def tabs(self) -> TabPartition:
        return self.state.tabs

    @property
    def active_tab(self) -> str:
        return self.state.active_tab

    def switch_tab(self, tab_id: str) -> bool:
        return self.state.select_tab(tab_id)

    def customize(self) -> EditSession:
        """Start a "Customize Layout" session on the current tab set."""
        return self.customizer.open(self.state.enabled_tabs)

    def save_layout(self, session: EditSession) -> EnabledTabSet:
        committed = self.customizer.commit(session)
        self.state.notifications.success("Layout saved.")
        return committed

    # ═════════════════════════════════════════════════════════════════
    # Records
    # ═════════════════════════════════════════════════════════════════

    async def records(self, kind: str) -> list[dict[str, Any]]:
        """Records of *kind* for the loaded employee (cached)."""
        employee_id = self.employee_id
        if employee_id is None:
            return []
        cached = self.cache.get(employee_id, kind)
        if cached is not None:
            return cached
        try:
            records = await self.api.fetch(kind, employee_id)
        except NotFoundError:
            return []
        except ApiError as exc:
            self.state.notifications.error(f"Could not load {kind}: {exc.message}")
            return []
        self.cache.put(employee_id, kind, records)
        return records

    async def render_tab(self, tab_id: Optional[str] = None) -> TabView:
        """Data for *tab_id* (default: the active tab)."""
        tab_id = tab_id or self.state.active_tab
        view = TabView(
            tab=self.state.registry.get(tab_id),
            employee=self.employee if tab_id in EMPLOYEE_TABS else None,
        )
        for kind in TAB_SECTIONS.get(tab_id, ()):
            view.sections[kind] = await self.records(kind)
        return view

    async def create_record(self, kind: str, payload: dict[str, Any]) -> Optional[dict[str, Any]]:
        return await self._mutate(kind, "create", None, payload)

    async def update_record(
        self, kind: str, record_id: str, payload: dict[str, Any],
    ) -> Optional[dict[str, Any]]:
        return await self._mutate(kind, "update", record_id, payload)

    async def delete_record(self, kind: str, record_id: str) -> bool:
        return await self._mutate(kind, "delete", record_id, None) is not None

    async def _mutate(
        self,
        kind: str,
        action: str,
        record_id: Optional[str],
        payload: Optional[dict[str, Any]],
    ) -> Any:
        employee_id = self.employee_id
        if employee_id is None:
            self.state.notifications.error("No employee loaded.")
            return None
        try:
            if action == "create":
                result = await self.api.create(kind, employee_id, payload)
            elif action == "update":
                result = await self.api.update(kind, record_id, payload)
            else:
                await self.api.delete(kind, record_id)
                result = True
        except ApiError as exc:
            self.state.notifications.error(f"Could not {action} {kind} entry: {exc.message}")
            return None

        self.cache.invalidate(employee_id, kind)
        self.state.notifications.success(f"Entry {action}d.")
        return result

    # ═════════════════════════════════════════════════════════════════
    # Forms
    # ═════════════════════════════════════════════════════════════════

    async def save_form(self, form: RecordForm) -> Optional[dict[str, Any]]:
        """Validate *form* and persist it.

        Returns the saved record, or ``None`` if validation or the request
        failed (``form.errors`` / a notification explain which).
        """
        submitted: list[dict[str, Any]] = []
        if not form.submit(submitted.append):
            return None
        payload = submitted[0]

        if form.record_kind is None:
            return await self._save_employee(payload)
        if form.is_editing:
            return await self.update_record(form.record_kind, form.record_id, payload)
        return await self.create_record(form.record_kind, payload)

    async def _save_employee(self, payload: dict[str, Any]) -> Optional[dict[str, Any]]:
        employee_id = self.employee_id
        if employee_id is None:
            self.state.notifications.error("No employee loaded.")
            return None
        try:
            employee = await self.api.update_employee(employee_id, payload)
        except ApiError as exc:
            self.state.notifications.error(f"Could not update employee: {exc.message}")
            return None
        self.employee = employee
        self.state.set_current_employee(employee)
        self.state.notifications.success("Employee updated.")
        return employee

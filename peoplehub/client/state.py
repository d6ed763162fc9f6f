"""Dashboard application state.

One :class:`DashboardState` is built at startup from a :class:`ClientStore`
and handed to whoever needs it. Every mutation that must survive a restart
goes through a method here. The store is written first; the in-memory
fields change only once the write succeeded.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Optional

from peoplehub.client.notifications import NotificationCenter
from peoplehub.client.store import ClientStore
from peoplehub.layout.tabs import TAB_REGISTRY, EnabledTabSet, TabPartition, TabRegistry

logger = logging.getLogger(__name__)


class DashboardState:
    def __init__(
        self,
        store: ClientStore,
        registry: TabRegistry = TAB_REGISTRY,
        notifications: Optional[NotificationCenter] = None,
    ) -> None:
        self.store = store
        self.registry = registry
        self.notifications = notifications or NotificationCenter()

        data = store.load()
        stored_tabs = data.get("enabled_tabs")
        if isinstance(stored_tabs, list):
            self.enabled_tabs = registry.coerce_enabled([str(t) for t in stored_tabs])
        else:
            self.enabled_tabs = registry.default_enabled()
        stored_active = data.get("active_tab")
        self.active_tab: str = registry.fallback_active(
            self.enabled_tabs, stored_active if isinstance(stored_active, str) else None,
        )

        employee = data.get("current_employee")
        self.current_employee: Optional[dict[str, Any]] = employee if isinstance(employee, dict) else None
        self.sidebar_collapsed: bool = bool(data.get("sidebar_collapsed", False))

    # ── Tabs ────────────────────────────────────────────────────────

    @property
    def tabs(self) -> TabPartition:
        return self.registry.partition(self.enabled_tabs)

    def apply_enabled_tabs(self, enabled: EnabledTabSet) -> None:
        """Install a committed tab set, persist it and keep the active tab valid."""
        for tab_id in enabled.tab_ids:
            self.registry.require(tab_id)
        active = self.registry.fallback_active(enabled, self.active_tab)
        self._persist(enabled_tabs=enabled, active_tab=active)
        if active != self.active_tab:
            logger.debug("Active tab %s disabled; switched to %s", self.active_tab, active)
        self.enabled_tabs = enabled
        self.active_tab = active

    def select_tab(self, tab_id: str) -> bool:
        """Make *tab_id* active; refused for tabs that are not enabled."""
        self.registry.require(tab_id)
        if tab_id not in self.enabled_tabs:
            return False
        if tab_id != self.active_tab:
            self._persist(active_tab=tab_id)
            self.active_tab = tab_id
        return True

    # ── Employee ────────────────────────────────────────────────────

    def set_current_employee(self, employee: Optional[dict[str, Any]]) -> None:
        employee = copy.deepcopy(employee) if employee is not None else None
        self._persist(current_employee=employee)
        self.current_employee = employee

    def update_employee_field(self, path: str, value: Any) -> bool:
        """Set a (possibly dotted) field on the cached employee.

        ``"profile_data.contact.mobile_phone"`` walks nested dicts, creating
        missing levels. Returns ``False`` when no employee is loaded.
        """
        if self.current_employee is None:
            return False
        employee = copy.deepcopy(self.current_employee)
        *parents, leaf = path.split(".")
        node = employee
        for key in parents:
            child = node.get(key)
            if not isinstance(child, dict):
                child = {}
                node[key] = child
            node = child
        node[leaf] = value
        self._persist(current_employee=employee)
        self.current_employee = employee
        return True

    # ── Sidebar ─────────────────────────────────────────────────────

    def toggle_sidebar(self) -> bool:
        collapsed = not self.sidebar_collapsed
        self._persist(sidebar_collapsed=collapsed)
        self.sidebar_collapsed = collapsed
        return collapsed

    # ── Persistence ─────────────────────────────────────────────────

    def _persist(self, **changes: Any) -> None:
        """Write the current state with *changes* applied on top."""
        enabled: EnabledTabSet = changes.get("enabled_tabs", self.enabled_tabs)
        self.store.save(
            {
                "enabled_tabs": list(enabled.tab_ids),
                "active_tab": changes.get("active_tab", self.active_tab),
                "current_employee": changes.get("current_employee", self.current_employee),
                "sidebar_collapsed": changes.get("sidebar_collapsed", self.sidebar_collapsed),
            }
        )

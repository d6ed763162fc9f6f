"""Tab registry and the enabled-tab set.

The registry is the static, ordered list of dashboard sections. The user's
:class:`EnabledTabSet` is always a non-empty, duplicate-free subset of it.
"""

from __future__ import annotations

from typing import Iterable, NamedTuple, Optional, Sequence

from pydantic import BaseModel, ConfigDict, field_validator


class UnknownTabError(ValueError):
    """Raised for a tab id that is not in the registry."""

    def __init__(self, tab_id: str) -> None:
        self.tab_id = tab_id
        super().__init__(f"Unknown tab id '{tab_id}'")


class TabDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    label: str


class EnabledTabSet(BaseModel):
    """Ordered ids of the tabs the user chose to show. Never empty."""

    model_config = ConfigDict(frozen=True)

    tab_ids: tuple[str, ...]

    @field_validator("tab_ids")
    @classmethod
    def _non_empty_unique(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("You must have at least one tab enabled.")
        if len(set(value)) != len(value):
            raise ValueError("Tab ids must be unique.")
        return value

    def __contains__(self, tab_id: object) -> bool:
        return tab_id in self.tab_ids

    def __len__(self) -> int:
        return len(self.tab_ids)


class TabPartition(NamedTuple):
    main: list[TabDescriptor]
    overflow: list[TabDescriptor]


class TabRegistry:
    """Static ordered collection of :class:`TabDescriptor`."""

    def __init__(self, tabs: Iterable[TabDescriptor]) -> None:
        self._tabs: tuple[TabDescriptor, ...] = tuple(tabs)
        self._by_id = {tab.id: tab for tab in self._tabs}
        if len(self._by_id) != len(self._tabs):
            raise ValueError("Duplicate tab id in registry")

    def __iter__(self):
        return iter(self._tabs)

    def __len__(self) -> int:
        return len(self._tabs)

    def __contains__(self, tab_id: object) -> bool:
        return tab_id in self._by_id

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(tab.id for tab in self._tabs)

    def get(self, tab_id: str) -> TabDescriptor:
        try:
            return self._by_id[tab_id]
        except KeyError:
            raise UnknownTabError(tab_id) from None

    def require(self, tab_id: str) -> str:
        """Return *tab_id* unchanged, or raise :class:`UnknownTabError`."""
        self.get(tab_id)
        return tab_id

    def default_enabled(self) -> EnabledTabSet:
        """Every registry tab, in registry order."""
        return EnabledTabSet(tab_ids=self.ids)

    def coerce_enabled(self, tab_ids: Sequence[str]) -> EnabledTabSet:
        """Build an enabled set from untrusted ids (e.g. a stored file).

        Unknown and repeated ids are dropped; an empty result falls back to
        :meth:`default_enabled`.
        """
        kept: list[str] = []
        for tab_id in tab_ids:
            if tab_id in self._by_id and tab_id not in kept:
                kept.append(tab_id)
        if not kept:
            return self.default_enabled()
        return EnabledTabSet(tab_ids=tuple(kept))

    def partition(self, enabled: EnabledTabSet) -> TabPartition:
        """Split the registry into the main strip and the "More" overflow.

        Main tabs are the enabled ones; overflow is everything else. Both keep
        registry order.
        """
        main = [tab for tab in self._tabs if tab.id in enabled]
        overflow = [tab for tab in self._tabs if tab.id not in enabled]
        return TabPartition(main, overflow)

    def fallback_active(
        self,
        enabled: EnabledTabSet,
        active: Optional[str],
    ) -> str:
        """Keep *active* if still enabled, else the first enabled tab in
        registry order."""
        if active is not None and active in enabled:
            return active
        return next(tab.id for tab in self._tabs if tab.id in enabled)


# ═════════════════════════════════════════════════════════════════════
# The dashboard's tabs
# ═════════════════════════════════════════════════════════════════════

TAB_REGISTRY = TabRegistry(
    [
        TabDescriptor(id="personal", label="Personal"),
        TabDescriptor(id="job", label="Job"),
        TabDescriptor(id="timeoff", label="Time Off"),
        TabDescriptor(id="documents", label="Documents"),
        TabDescriptor(id="benefits", label="Benefits"),
        TabDescriptor(id="training", label="Training"),
        TabDescriptor(id="assets", label="Assets"),
        TabDescriptor(id="more", label="More"),
    ]
)


def partition(
    enabled: EnabledTabSet,
    registry: TabRegistry = TAB_REGISTRY,
) -> TabPartition:
    return registry.partition(enabled)

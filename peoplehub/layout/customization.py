"""Tab-customization engine.

A user edits a *draft* copy of their enabled tabs inside an
:class:`EditSession`; only :meth:`TabCustomizer.commit` replaces the stored
set. The draft can shrink to one tab but never to zero.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from peoplehub.layout.tabs import TAB_REGISTRY, EnabledTabSet, TabDescriptor, TabRegistry

logger = logging.getLogger(__name__)

MIN_ENABLED_MESSAGE = "You must have at least one tab enabled."


class SessionClosedError(RuntimeError):
    """The edit session was already committed or discarded."""


class EditSession:
    """An uncommitted edit of the enabled-tab set."""

    def __init__(self, snapshot: EnabledTabSet, registry: TabRegistry) -> None:
        self.original = snapshot
        self.draft: list[str] = list(snapshot.tab_ids)
        self.registry = registry
        self.closed = False
        self.last_error: Optional[str] = None

    @property
    def current_tabs(self) -> list[TabDescriptor]:
        """Draft tabs, in registry order."""
        return [tab for tab in self.registry if tab.id in self.draft]

    @property
    def available_tabs(self) -> list[TabDescriptor]:
        """Registry tabs not in the draft, in registry order."""
        return [tab for tab in self.registry if tab.id not in self.draft]

    @property
    def is_dirty(self) -> bool:
        return tuple(self.draft) != self.original.tab_ids

    def _check_open(self) -> None:
        if self.closed:
            raise SessionClosedError("Edit session is closed")


class TabCustomizer:
    """Opens, edits and commits :class:`EditSession` drafts.

    *on_commit* receives every committed set; the dashboard state uses it to
    persist the choice and fix up the active tab.
    """

    def __init__(
        self,
        on_commit: Callable[[EnabledTabSet], None],
        registry: TabRegistry = TAB_REGISTRY,
    ) -> None:
        self.registry = registry
        self._on_commit = on_commit

    def open(self, current_enabled: EnabledTabSet) -> EditSession:
        return EditSession(current_enabled, self.registry)

    def add_to_draft(self, session: EditSession, tab_id: str) -> None:
        """Append *tab_id* to the draft; no-op when it is already there."""
        session._check_open()
        self.registry.require(tab_id)
        session.last_error = None
        if tab_id not in session.draft:
            session.draft.append(tab_id)

    def remove_from_draft(self, session: EditSession, tab_id: str) -> bool:
        """Drop *tab_id* from the draft.

        Refused (returns ``False``, draft untouched) if it is the last tab or
        not in the draft.
        """
        session._check_open()
        if tab_id not in session.draft:
            return False
        if len(session.draft) <= 1:
            session.last_error = MIN_ENABLED_MESSAGE
            return False
        session.last_error = None
        session.draft.remove(tab_id)
        return True

    def commit(self, session: EditSession) -> EnabledTabSet:
        """Replace the stored enabled set with the draft."""
        session._check_open()
        committed = EnabledTabSet(tab_ids=tuple(session.draft))
        self._on_commit(committed)
        session.closed = True
        logger.info("Committed tab layout: %s", ", ".join(committed.tab_ids))
        return committed

    def discard(self, session: EditSession) -> None:
        session._check_open()
        session.draft = list(session.original.tab_ids)
        session.last_error = None
        session.closed = True

"""Transient success/error/info notifications that expire on their own."""

from __future__ import annotations

import itertools
import time
from dataclasses import dataclass
from typing import Callable

from peoplehub.common.constants import NOTIFICATION_TTL_SECONDS, NotificationType


@dataclass(frozen=True)
class Notification:
    id: int
    type: NotificationType
    message: str
    created_at: float


class NotificationCenter:
    """Holds notifications until dismissed or *ttl* seconds have passed."""

    def __init__(
        self,
        ttl: float = NOTIFICATION_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl = ttl
        self._clock = clock
        self._ids = itertools.count(1)
        self._items: list[Notification] = []

    def notify(self, type: NotificationType, message: str) -> Notification:
        item = Notification(next(self._ids), NotificationType(type), message, self._clock())
        self._items.append(item)
        return item

    def success(self, message: str) -> Notification:
        return self.notify(NotificationType.success, message)

    def error(self, message: str) -> Notification:
        return self.notify(NotificationType.error, message)

    def info(self, message: str) -> Notification:
        return self.notify(NotificationType.info, message)

    def dismiss(self, notification_id: int) -> bool:
        before = len(self._items)
        self._items = [n for n in self._items if n.id != notification_id]
        return len(self._items) != before

    def clear(self) -> None:
        self._items = []

    @property
    def active(self) -> list[Notification]:
        """Unexpired notifications, oldest first."""
        cutoff = self._clock() - self.ttl
        self._items = [n for n in self._items if n.created_at > cutoff]
        return list(self._items)

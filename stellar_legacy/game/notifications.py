"""Player-facing notification feed."""

import logging
import time
import uuid
from typing import Callable, List, Optional

from ..core.constants import MAX_NOTIFICATIONS, NOTIFICATION_TIMEOUT_MS
from ..core.enums import NotificationType
from ..entities.notification import Notification

Clock = Callable[[], float]


def wall_clock_ms() -> float:
    return time.time() * 1000


def new_notification_id() -> str:
    return f"notification-{uuid.uuid4().hex[:12]}"


class NotificationCenter:
    """Ordered feed of active notifications with a bounded lifetime.

    Expired entries are dropped whenever the feed is read, so a renderer
    never sees a stale message even if nobody called ``expire``. At most
    ``max_notifications`` stay active; the oldest goes first.
    """

    def __init__(self, timeout_ms: float = NOTIFICATION_TIMEOUT_MS,
                 max_notifications: int = MAX_NOTIFICATIONS,
                 clock: Clock = wall_clock_ms,
                 id_factory: Callable[[], str] = new_notification_id):
        self.timeout_ms = timeout_ms
        self.max_notifications = max_notifications
        self.clock = clock
        self.id_factory = id_factory
        self._notifications: List[Notification] = []

    def push(self, message: str, notification_type: NotificationType = NotificationType.INFO) -> Notification:
        """Record a new notification and return it."""
        notification = Notification(
            id=self.id_factory(),
            message=message,
            type=notification_type,
            timestamp=self.clock(),
        )
        self._notifications.append(notification)
        overflow = len(self._notifications) - self.max_notifications
        if overflow > 0:
            del self._notifications[:overflow]
        logging.debug(f"Notification [{notification_type.value}]: {message}")
        return notification

    def dismiss(self, notification_id: str) -> bool:
        """Remove one notification. Returns False if it was already gone."""
        for index, notification in enumerate(self._notifications):
            if notification.id == notification_id:
                del self._notifications[index]
                return True
        return False

    def expire(self, now: Optional[float] = None) -> List[Notification]:
        """Drop every notification older than the timeout; return the dropped ones."""
        now = self.clock() if now is None else now
        expired = [n for n in self._notifications if n.is_expired(now, self.timeout_ms)]
        if expired:
            self._notifications = [n for n in self._notifications
                                   if not n.is_expired(now, self.timeout_ms)]
        return expired

    def next_expiry(self) -> Optional[float]:
        """Timestamp at which the oldest active notification expires."""
        if not self._notifications:
            return None
        return min(n.timestamp for n in self._notifications) + self.timeout_ms

    @property
    def active(self) -> List[Notification]:
        self.expire()
        return list(self._notifications)

    def clear(self) -> None:
        self._notifications = []

    def __len__(self) -> int:
        return len(self.active)


# Message templates
def resource_message(action: str, amount: float, resource: str, cost: Optional[float] = None) -> str:
    """'Bought 10 minerals for 150 credits' style messages."""
    verbs = {"bought": "Bought", "sold": "Sold"}
    cost_text = f" for {cost:g} credits" if cost else ""
    return f"{verbs[action]} {amount:g} {resource}{cost_text}"


def crew_message(action: str, crew_name: str, details: Optional[str] = None) -> str:
    verbs = {"recruited": "Recruited", "trained": "Trained", "promoted": "Promoted"}
    detail_text = f": {details}" if details else ""
    return f"{verbs[action]} {crew_name}{detail_text}"


def system_message(action: str, system_name: str, result: Optional[str] = None) -> str:
    verbs = {"explored": "Explored", "colonized": "Established colony in"}
    result_text = f". {result}" if result else ""
    return f"{verbs[action]} {system_name}{result_text}"

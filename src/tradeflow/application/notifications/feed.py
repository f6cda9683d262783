"""Bounded notification feed"""

from collections import deque

from tradeflow.domain.models import Notification


class NotificationFeed:
    """Newest-first list of notifications with a fixed capacity

    Pushing beyond capacity silently evicts the oldest entry.
    """

    def __init__(self, limit: int = 10):
        if limit < 1:
            raise ValueError("limit must be at least 1")
        self.limit = limit
        self._items: deque[Notification] = deque(maxlen=limit)

    def push(self, notification: Notification) -> None:
        self._items.appendleft(notification)

    def items(self) -> list[Notification]:
        return list(self._items)

    def get(self, notification_id: str) -> Notification | None:
        for notification in self._items:
            if notification.id == notification_id:
                return notification
        return None

    def mark_read(self, notification_id: str) -> bool:
        """Mark one notification read. Returns False if it is not retained."""
        notification = self.get(notification_id)
        if notification is None:
            return False
        notification.mark_read()
        return True

    def mark_all_read(self) -> None:
        for notification in self._items:
            notification.mark_read()

    @property
    def unread_count(self) -> int:
        return sum(1 for n in self._items if not n.read)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(list(self._items))

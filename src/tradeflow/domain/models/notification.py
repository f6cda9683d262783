"""Notification domain model"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class NotificationCategory(Enum):
    """Kinds of notification shown to the user"""

    PRICE_ALERT = "price_alert"
    PORTFOLIO = "portfolio"
    SYSTEM = "system"


@dataclass
class Notification:
    """User-facing notification

    Only ``read`` is ever mutated after creation.
    """

    id: str
    category: NotificationCategory
    title: str
    message: str
    created_at: datetime = field(default_factory=datetime.now)
    read: bool = False

    def mark_read(self) -> None:
        self.read = True

    def __repr__(self) -> str:
        return (
            f"Notification(id={self.id}, category={self.category.value}, "
            f"read={self.read})"
        )

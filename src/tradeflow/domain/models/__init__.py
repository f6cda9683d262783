"""Domain models"""

from .event import Event, EventType
from .instrument import Instrument
from .notification import Notification, NotificationCategory
from .position import Position
from .snapshot import PortfolioSnapshot

__all__ = [
    "Instrument",
    "Position",
    "Notification",
    "NotificationCategory",
    "PortfolioSnapshot",
    "Event",
    "EventType",
]

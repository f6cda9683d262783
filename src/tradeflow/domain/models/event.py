"""Event domain model"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class EventType(Enum):
    """Event types published by a dashboard session

    Engine Events:
        - TICK: Prices advanced by one step
        - NOTIFICATION_CREATED: A notification was added to the feed

    User Action Events:
        - STOCK_FOLLOWED: A symbol was added to the followed set
        - STOCK_UNFOLLOWED: A symbol was removed from the followed set
        - SHARES_ADDED: Held quantity of a symbol increased
        - SIGNED_OUT: The identity provider ended the session

    Failure Events:
        - PERSISTENCE_FAILED: The subscription store rejected a change
    """

    TICK = "tick"
    NOTIFICATION_CREATED = "notification_created"

    STOCK_FOLLOWED = "stock_followed"
    STOCK_UNFOLLOWED = "stock_unfollowed"
    SHARES_ADDED = "shares_added"
    SIGNED_OUT = "signed_out"

    PERSISTENCE_FAILED = "persistence_failed"


@dataclass
class Event:
    """Domain event

    Attributes:
        type: Type of event
        data: Event-specific data payload
        timestamp: When the event was created
    """

    type: EventType
    data: dict[str, Any] | None = None
    timestamp: datetime | None = None

    def __post_init__(self) -> None:
        if self.timestamp is None:
            self.timestamp = datetime.now()

    def __repr__(self) -> str:
        ts = self.timestamp.isoformat() if self.timestamp else "none"
        return f"Event(type={self.type.value}, timestamp={ts})"

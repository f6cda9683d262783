"""Session events"""

from .event_bus import EventBus, create_event

__all__ = ["EventBus", "create_event"]

"""Notification feed"""

from .feed import NotificationFeed

__all__ = ["NotificationFeed"]

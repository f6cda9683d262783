"""Subscription persistence"""

from .models import SubscriptionTable
from .repository import SqlSubscriptionStore, SubscriptionDatabase

__all__ = ["SqlSubscriptionStore", "SubscriptionDatabase", "SubscriptionTable"]

"""Domain repositories"""

from .base import SubscriptionStore
from .identity import IdentityProvider, UserIdentity

__all__ = ["SubscriptionStore", "IdentityProvider", "UserIdentity"]

"""Application services"""

from .scheduler import TickScheduler
from .session import ActionResult, DashboardSession

__all__ = ["ActionResult", "DashboardSession", "TickScheduler"]

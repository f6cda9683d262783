"""Subscription persistence models (SQLModel tables)"""

from datetime import datetime

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class SubscriptionTable(SQLModel, table=True):
    """Followed symbol per user"""

    __tablename__ = "subscriptions"
    __table_args__ = (
        UniqueConstraint("user_id", "stock_ticker", name="uq_user_ticker"),
    )

    id: int | None = Field(default=None, primary_key=True)
    user_id: str = Field(index=True)
    stock_ticker: str
    created_at: str = Field(default_factory=lambda: datetime.now().isoformat())

"""SQLite-backed subscription store"""

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import col, delete, select

from tradeflow.infrastructure.database.base import BaseDatabase
from tradeflow.infrastructure.database.subscriptions.models import (
    SubscriptionTable,
)
from tradeflow.shared.exceptions import PersistenceError


class SubscriptionDatabase(BaseDatabase):
    """SQLite database holding user subscriptions"""

    def _create_schema(self) -> None:
        SubscriptionTable.metadata.create_all(self.engine)


class SqlSubscriptionStore:
    """Subscription store on top of SubscriptionDatabase

    Every SQLAlchemy failure surfaces as PersistenceError.

    Note:
        The SQLite calls run synchronously on the event loop. Each one is a
        single-row statement against a local file, so it stays well inside a
        tick interval. The engine is not moved to worker threads because an
        in-memory database is bound to the connection of its creating thread.
    """

    def __init__(self, db: SubscriptionDatabase):
        self.db = db

    async def list_symbols(self, user_id: str) -> list[str]:
        try:
            with self.db.get_session() as session:
                rows = session.exec(
                    select(SubscriptionTable.stock_ticker)
                    .where(SubscriptionTable.user_id == user_id)
                    .order_by(col(SubscriptionTable.id))
                ).all()
                return list(rows)
        except SQLAlchemyError as e:
            raise PersistenceError("load", user_id, e) from e

    async def insert(self, user_id: str, symbol: str) -> None:
        try:
            with self.db.get_session() as session:
                session.add(SubscriptionTable(user_id=user_id, stock_ticker=symbol))
                session.commit()
        except SQLAlchemyError as e:
            raise PersistenceError("insert", symbol, e) from e
        logger.debug(f"Stored subscription {user_id}/{symbol}")

    async def delete(self, user_id: str, symbol: str) -> None:
        try:
            with self.db.get_session() as session:
                session.exec(
                    delete(SubscriptionTable).where(
                        col(SubscriptionTable.user_id) == user_id,
                        col(SubscriptionTable.stock_ticker) == symbol,
                    )
                )
                session.commit()
        except SQLAlchemyError as e:
            raise PersistenceError("delete", symbol, e) from e
        logger.debug(f"Removed subscription {user_id}/{symbol}")

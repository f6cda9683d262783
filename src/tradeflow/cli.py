import argparse
import asyncio
import random
import sys

from dotenv import load_dotenv
from loguru import logger
from rich.console import Console
from rich.live import Live

from tradeflow.application.events import EventBus
from tradeflow.application.services import DashboardSession, TickScheduler
from tradeflow.core.config import Config
from tradeflow.domain.models import EventType
from tradeflow.domain.repositories import UserIdentity
from tradeflow.infrastructure.database.subscriptions import (
    SqlSubscriptionStore,
    SubscriptionDatabase,
)
from tradeflow.infrastructure.identity import StaticIdentityProvider
from tradeflow.presentation.console import render_dashboard
from tradeflow.shared.exceptions import ConfigurationError, EngineError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tradeflow", description="Live simulated trading dashboard"
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=None,
        help="Stop after this many ticks (default: run until interrupted)",
    )
    parser.add_argument(
        "--follow",
        action="append",
        default=[],
        metavar="SYMBOL",
        help="Follow a symbol before the first tick (repeatable)",
    )
    parser.add_argument(
        "--search", default="", help="Only show positions matching this text"
    )
    return parser


async def run_dashboard(config: Config, args: argparse.Namespace) -> int:
    user = UserIdentity(user_id=config.user_id, email=config.user_email)
    database = SubscriptionDatabase(config.db_path)
    store = SqlSubscriptionStore(database)
    bus = EventBus()
    console = Console()

    session = await DashboardSession.open(
        user,
        store,
        config=config.engine_config,
        rng=random.Random(config.seed),
        identity=StaticIdentityProvider(user),
        event_bus=bus,
    )

    for symbol in args.follow:
        try:
            await session.follow(symbol.upper())
        except EngineError as e:
            console.print(f"[yellow]{e}[/yellow]")

    scheduler = TickScheduler(
        session.tick,
        interval=config.engine_config.tick_interval_seconds,
        max_ticks=args.ticks,
    )

    with Live(
        render_dashboard(session, args.search), console=console, auto_refresh=False
    ) as live:

        def redraw(event) -> None:
            live.update(render_dashboard(session, args.search), refresh=True)

        bus.subscribe(EventType.TICK, redraw)
        bus.subscribe(EventType.NOTIFICATION_CREATED, redraw)

        await bus.start()
        await scheduler.start()
        try:
            await scheduler.wait()
        finally:
            await scheduler.stop()
            try:
                await session.sign_out()
            finally:
                await bus.stop()
                database.close()

    return 0


def main() -> int:
    """CLI entry point for the dashboard

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    load_dotenv()
    logger.remove()
    logger.add(sys.stderr, level="WARNING")
    logger.add(
        "logs/tradeflow_{time}.log",
        rotation="1 day",
        retention="30 days",
        compression="gz",
        level="INFO",
    )
    logger.info("=" * 60)
    logger.info("TRADEFLOW LIVE DASHBOARD")
    logger.info("=" * 60)

    args = build_parser().parse_args()

    try:
        config = Config.from_env()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    try:
        return asyncio.run(run_dashboard(config, args))
    except KeyboardInterrupt:
        logger.warning("Dashboard stopped manually.")
        return 0
    except Exception as e:
        logger.critical(f"Unhandled exception in dashboard: {e}")
        return 1
    finally:
        logger.info("Dashboard shutdown complete.")


if __name__ == "__main__":
    sys.exit(main())

"""Rich renderables for a dashboard session"""

from datetime import datetime

from rich.console import Group
from rich.panel import Panel
from rich.table import Table

from tradeflow.application.services import DashboardSession
from tradeflow.domain.models import NotificationCategory, PortfolioSnapshot
from tradeflow.shared.formatting import (
    format_currency,
    format_relative_time,
    format_signed_percent,
)

_CATEGORY_STYLE = {
    NotificationCategory.PRICE_ALERT: "yellow",
    NotificationCategory.PORTFOLIO: "cyan",
    NotificationCategory.SYSTEM: "magenta",
}


def _trend_style(value: float) -> str:
    return "green" if value >= 0 else "red"


def render_summary(snapshot: PortfolioSnapshot) -> Panel:
    style = "green" if snapshot.is_gaining else "red"
    pnl_sign = "+" if snapshot.is_gaining else ""
    text = (
        f"[bold]Portfolio Value[/bold] {format_currency(snapshot.total_value)}   "
        f"[bold]Total P&L[/bold] [{style}]{pnl_sign}"
        f"{format_currency(snapshot.total_pnl)}[/{style}]   "
        f"[bold]Return[/bold] [{style}]"
        f"{format_signed_percent(snapshot.total_return_percent)}[/{style}]   "
        f"[bold]Stocks[/bold] {snapshot.position_count}"
    )
    return Panel(text, title="[bold]TradeFlow[/bold]", border_style="cyan")


def render_positions(session: DashboardSession, query: str = "") -> Table:
    positions = session.search(query)
    title = "Your Stocks"
    if query:
        title = f"{title} (showing {len(positions)} of {len(session.followed)})"

    table = Table(title=title)
    table.add_column("Ticker", style="bold")
    table.add_column("Name")
    table.add_column("Price", justify="right")
    table.add_column("Change", justify="right")
    table.add_column("High", justify="right")
    table.add_column("Low", justify="right")
    table.add_column("Volume", justify="right")
    table.add_column("Shares", justify="right")
    table.add_column("Value", justify="right")
    table.add_column("P&L", justify="right")

    for position in positions:
        instrument = session.catalog.lookup(position.symbol)
        color = instrument.color if instrument else "white"
        style = _trend_style(position.change_percent)
        table.add_row(
            f"[{color}]{position.symbol}[/{color}]",
            instrument.name if instrument else "",
            format_currency(position.price),
            f"[{style}]{format_signed_percent(position.change_percent)}[/{style}]",
            format_currency(position.high),
            format_currency(position.low),
            f"{position.volume:,}",
            str(position.shares),
            format_currency(position.market_value),
            f"[{style}]{format_currency(position.pnl)}[/{style}]",
        )
    return table


def render_notifications(
    session: DashboardSession, now: datetime | None = None
) -> Table:
    table = Table(title=f"Notifications ({session.unread_count} unread)")
    table.add_column("", width=1)
    table.add_column("Title")
    table.add_column("Message")
    table.add_column("When", justify="right")

    for notification in session.notifications:
        style = _CATEGORY_STYLE[notification.category]
        table.add_row(
            "" if notification.read else "[bold green]●[/bold green]",
            f"[{style}]{notification.title}[/{style}]",
            notification.message,
            format_relative_time(notification.created_at, now),
        )
    return table


def render_dashboard(session: DashboardSession, query: str = "") -> Group:
    """Full dashboard: totals, positions and notifications"""
    return Group(
        render_summary(session.snapshot()),
        render_positions(session, query),
        render_notifications(session),
    )

"""Display formatting helpers"""

from datetime import datetime


def format_currency(value: float) -> str:
    """Format a USD amount, e.g. 1234.5 -> "$1,234.50", -1 -> "-$1.00" """
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_signed_percent(value: float) -> str:
    return f"{'+' if value >= 0 else ''}{value:.2f}%"


def format_relative_time(moment: datetime, now: datetime | None = None) -> str:
    """Human friendly age of a timestamp

    Under a minute is "Just now", then minutes, then hours; a day or older
    falls back to the calendar date.
    """
    now = now or datetime.now()
    minutes = int((now - moment).total_seconds() // 60)
    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes}m ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours}h ago"
    return moment.date().isoformat()

"""Display formatting shared by response models."""

from datetime import date, datetime


def format_views(views: int) -> str:
    """Compact view count: 999, 1.2K, 3.4M."""
    if views >= 1_000_000:
        return f"{views / 1_000_000:.1f}M"
    if views >= 1_000:
        return f"{views / 1_000:.1f}K"
    return str(views)


def format_date(value: date) -> str:
    """Short US date, e.g. "Jan 2, 2024"."""
    return f"{value:%b} {value.day}, {value:%Y}"


def format_datetime(value: datetime) -> str:
    """Short US date and 12-hour time, e.g. "Jan 2, 2024, 03:04 PM"."""
    return f"{format_date(value)}, {value:%I:%M %p}"

"""Common helpers shared across models."""

from datetime import date

DEFAULT_DATE_FORMAT = "%Y/%m/%d"


def today_local() -> date:
    return date.today()


def format_observed_date(
    day: date | None = None, date_format: str = DEFAULT_DATE_FORMAT
) -> str:
    """Format a calendar date the way the widget displays it (ja-JP shape)."""
    if day is None:
        day = today_local()
    return day.strftime(date_format)

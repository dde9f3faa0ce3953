"""
Rich markup helpers shared by the pages.

Color scheme
------------
- green     : Succeeded
- red       : Failed
- yellow    : Running
- dim       : Pending
- magenta   : Unknown
"""

from datetime import datetime, timedelta

from rich.text import Text

from ci_common.models import (
    STATUS_FAILED,
    STATUS_PENDING,
    STATUS_RUNNING,
    STATUS_SUCCEEDED,
    STATUS_UNKNOWN,
)

STATUS_STYLES: dict[str, str] = {
    STATUS_SUCCEEDED: "bold green",
    STATUS_FAILED: "bold red",
    STATUS_RUNNING: "bold yellow",
    STATUS_PENDING: "dim",
    STATUS_UNKNOWN: "magenta",
}


def status_text(status: str) -> Text:
    return Text(status, style=STATUS_STYLES.get(status, ""))


def format_time(value: datetime | None) -> str:
    if value is None or value.year == 1:
        return "-"
    return value.strftime("%Y-%m-%d %H:%M:%S")


def format_duration(value: timedelta | None) -> str:
    """Render a duration as e.g. "1h02m03s", "4m05s" or "7s"."""
    if value is None:
        return "-"
    total = max(int(value.total_seconds()), 0)
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    if hours:
        return f"{hours}h{minutes:02d}m{seconds:02d}s"
    if minutes:
        return f"{minutes}m{seconds:02d}s"
    return f"{seconds}s"


def short_id(value: str | None, length: int = 12) -> str:
    if not value:
        return "-"
    return value[:length]

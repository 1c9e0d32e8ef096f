# chequetrack/utils/date_converter.py

from datetime import date, datetime, timedelta, timezone
from typing import Optional, Union

from chequetrack.constants import DATE_FORMAT


def now() -> datetime:
    """Current UTC time, timezone-aware."""
    return datetime.now(timezone.utc)


def today() -> date:
    return now().date()


def to_iso_timestamp(value: datetime) -> str:
    """ISO-8601 with a trailing 'Z' for UTC, matching what the spreadsheet endpoint stores."""
    if value.tzinfo is not None and value.utcoffset() == timedelta(0):
        return value.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"
    return value.isoformat()


def parse_timestamp(value: Union[str, datetime]) -> datetime:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value:
        raise ValueError(f"invalid timestamp {value!r}")
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def parse_date(value: Union[str, date]) -> date:
    """Accepts 'YYYY-MM-DD' and full timestamps (only the calendar part is kept)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value:
        raise ValueError(f"invalid date {value!r}")
    head = value.strip().split("T")[0].split(" ")[0]
    return datetime.strptime(head, DATE_FORMAT).date()


def try_parse_date(value: Optional[str]) -> Optional[date]:
    try:
        return parse_date(value) if value else None
    except ValueError:
        return None


def to_display_str(value: Optional[datetime]) -> str:
    """Local, human readable stamp used inside cheque notes."""
    if value is None:
        return "-"
    return value.astimezone().strftime("%Y-%m-%d %H:%M:%S")

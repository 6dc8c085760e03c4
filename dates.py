# dates.py
# Calendar helpers. "Today" is the archive's day (Europe/Amsterdam), not the host's.
from __future__ import annotations
from typing import Union
import datetime as dt
from zoneinfo import ZoneInfo
from dateutil import parser as dtparser

ARCHIVE_TZ = ZoneInfo("Europe/Amsterdam")

DateLike = Union[dt.date, dt.datetime]

def now() -> dt.datetime:
    return dt.datetime.now(ARCHIVE_TZ)

def today() -> dt.date:
    return now().date()

def to_day(value: DateLike) -> dt.date:
    """Truncates a date or datetime to calendar-day precision."""
    if isinstance(value, dt.datetime):
        if value.tzinfo is not None:
            value = value.astimezone(ARCHIVE_TZ)
        return value.date()
    return value

def parse_date(value: Union[str, DateLike]) -> DateLike:
    """Parses an ISO 8601 string. Date-only strings stay dates; anything with a time part stays a datetime."""
    if isinstance(value, (dt.date, dt.datetime)):
        return value
    text = str(value).strip()
    parsed = dtparser.isoparse(text)
    if "T" in text or " " in text:
        return parsed
    return parsed.date()

def iso_day(value: DateLike) -> str:
    return to_day(value).isoformat()

def day_fmt(value: DateLike) -> str:
    return to_day(value).strftime("%Y-%m-%d")

def date_time_fmt(value: dt.datetime) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S")

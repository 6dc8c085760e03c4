"""Tests for the date helpers."""

from __future__ import annotations

import datetime as dt

import dates


def test_parse_date_only() -> None:
    assert dates.parse_date("1992-07-30") == dt.date(1992, 7, 30)
    assert type(dates.parse_date("1992-07-30")) is dt.date


def test_parse_date_with_time() -> None:
    assert dates.parse_date("1992-07-30T10:15:00") == dt.datetime(1992, 7, 30, 10, 15)


def test_parse_date_passes_dates_through() -> None:
    d = dt.date(2000, 1, 1)
    assert dates.parse_date(d) is d


def test_to_day_uses_archive_timezone() -> None:
    late_utc = dt.datetime(2020, 6, 15, 23, 30, tzinfo=dt.timezone.utc)
    assert dates.to_day(late_utc) == dt.date(2020, 6, 16)


def test_formats() -> None:
    moment = dt.datetime(2020, 6, 15, 8, 5, 3)
    assert dates.iso_day(dt.date(2020, 6, 15)) == "2020-06-15"
    assert dates.iso_day(moment) == "2020-06-15"
    assert dates.day_fmt(moment) == "2020-06-15"
    assert dates.date_time_fmt(moment) == "2020-06-15 08:05:03"


def test_today_is_in_archive_timezone() -> None:
    assert dates.now().tzinfo is dates.ARCHIVE_TZ
    assert isinstance(dates.today(), dt.date)

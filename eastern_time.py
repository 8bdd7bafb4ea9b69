"""US Eastern Time helpers for the signup sheet.

The sheet stores race times in UTC and derives Eastern time with a formula
that subtracts one of two fixed offset cells. Which cell applies depends on
whether the race falls inside Eastern daylight saving time, computed here
with the post-2007 US rule:

    DST starts 2:00 AM local on the second Sunday of March  (07:00 UTC)
    DST ends   2:00 AM local on the first Sunday of November (06:00 UTC)
"""
from datetime import datetime, timedelta, timezone

SUNDAY = 6  # datetime.weekday()

DST_START_HOUR_UTC = 7   # 2am EST
DST_END_HOUR_UTC = 6     # 2am EDT


def _first_sunday(year, month):
    first = datetime(year, month, 1, tzinfo=timezone.utc)
    return first + timedelta(days=(SUNDAY - first.weekday()) % 7)


def dst_bounds(year):
    """Return (start, end) of Eastern DST for a year as aware UTC datetimes."""
    second_sunday_march = _first_sunday(year, 3) + timedelta(days=7)
    first_sunday_november = _first_sunday(year, 11)
    start = second_sunday_march.replace(hour=DST_START_HOUR_UTC)
    end = first_sunday_november.replace(hour=DST_END_HOUR_UTC)
    return start, end


def _as_utc(instant):
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def is_eastern_dst(instant):
    """True if a UTC instant falls in [DST start, DST end) for its UTC year."""
    instant = _as_utc(instant)
    start, end = dst_bounds(instant.year)
    return start <= instant < end


def from_epoch(seconds):
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def format_sheet_datetime(instant):
    """Format as MM/DD/YYYY HH:MM:SS in UTC, the form Sheets parses as a datetime."""
    return _as_utc(instant).strftime("%m/%d/%Y %H:%M:%S")

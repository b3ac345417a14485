# Copyright (c) 2026 orbitglobe contributors. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Civil time to Julian date conversions.

All instants are UTC seconds since 1970-01-01T00:00:00Z. Aware datetimes are
accepted at the edges; naive datetimes are rejected.

No external dependencies — only stdlib datetime.
"""
from datetime import datetime, timezone

from orbitglobe.domain.constants import AstroConstants


def julian_date(unix_seconds: float) -> float:
    """Julian date of a UTC instant."""
    c = AstroConstants
    return c.JD_UNIX_EPOCH + unix_seconds / c.SECONDS_PER_DAY


def unix_seconds_from_julian_date(jd: float) -> float:
    """Inverse of julian_date."""
    c = AstroConstants
    return (jd - c.JD_UNIX_EPOCH) * c.SECONDS_PER_DAY


def julian_century(unix_seconds: float) -> float:
    """
    Julian centuries elapsed since J2000.0.

    This is the polynomial argument of every solar series in
    orbitglobe.domain.solar.
    """
    c = AstroConstants
    return (julian_date(unix_seconds) - c.JD_J2000) / c.DAYS_PER_JULIAN_CENTURY


def unix_seconds_from_datetime(dt: datetime) -> float:
    """
    Convert an aware datetime to UTC seconds.

    Raises:
        ValueError: If dt carries no timezone.
    """
    if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
        raise ValueError(f"Datetime must be timezone-aware, got {dt!r}")
    return dt.timestamp()


def datetime_from_unix_seconds(unix_seconds: float) -> datetime:
    return datetime.fromtimestamp(unix_seconds, tz=timezone.utc)


def julian_date_from_datetime(dt: datetime) -> float:
    return julian_date(unix_seconds_from_datetime(dt))


def datetime_from_julian_date(jd: float) -> datetime:
    return datetime_from_unix_seconds(unix_seconds_from_julian_date(jd))


def utc_decimal_hours(unix_seconds: float) -> float:
    """
    UTC wall-clock time of day in decimal hours.

    Only whole seconds contribute.
    """
    c = AstroConstants
    utc = datetime_from_unix_seconds(unix_seconds)
    return (
        utc.hour
        + utc.minute / c.MINUTES_PER_HOUR
        + utc.second / c.SECONDS_PER_HOUR
    )

# Copyright (c) 2026 orbitglobe contributors. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Decimal degrees to and from degrees/minutes/seconds.

Formatting runs on whole arc-seconds: the value is scaled by 3600 and
truncated toward zero, degrees come from a truncating division, and the
absolute remainder is split into minutes and seconds. Nothing is rounded,
so 10.99999 deg prints as 10°59'59".

Format strings are printf-style, applied with the % operator, with slots in
the order degrees, minutes, [seconds], cardinal letter.

No external dependencies — only stdlib dataclasses.
"""
from dataclasses import dataclass

DMS_FORMAT = "%d°%02d'%02d\" %s"
DM_FORMAT = "%d°%02d' %s"
DMS_PAIR_FORMAT = DMS_FORMAT + "  " + DMS_FORMAT
DM_PAIR_FORMAT = DM_FORMAT + "  " + DM_FORMAT

_NEGATIVE_DIRECTIONS = frozenset({"S", "W"})


@dataclass(frozen=True)
class DegMinSec:
    """Unsigned degrees/minutes/seconds with a cardinal letter."""
    degrees: int
    minutes: int
    seconds: int
    direction: str


def _cardinal(is_latitude: bool, negative: bool) -> str:
    if is_latitude:
        return "S" if negative else "N"
    return "W" if negative else "E"


def split_deg_min_sec(value: float, is_latitude: bool) -> DegMinSec:
    """
    Split a decimal coordinate into whole degrees, minutes and seconds.

    The hemisphere follows the sign of the degree component. Values between
    -1 and 0 have a zero degree component, so the sign of the original
    value decides for them (-0.3 is south, not north).

    Args:
        value: Coordinate in decimal degrees.
        is_latitude: Choose N/S when True, E/W otherwise.

    Returns:
        DegMinSec with non-negative fields.
    """
    total_seconds = int(value * 3600)
    whole_degrees, remainder = divmod(abs(total_seconds), 3600)
    degrees = whole_degrees if total_seconds >= 0 else -whole_degrees
    minutes, seconds = divmod(remainder, 60)

    if degrees == 0:
        negative = value < 0
    else:
        negative = degrees < 0

    return DegMinSec(
        degrees=abs(degrees),
        minutes=minutes,
        seconds=seconds,
        direction=_cardinal(is_latitude, negative),
    )


def decimal_to_deg_min_sec(
    value: float,
    is_latitude: bool,
    fmt: str = DMS_FORMAT,
) -> str:
    """
    Format one coordinate as degrees, minutes, seconds and direction.

    >>> decimal_to_deg_min_sec(37.7749, True)
    '37°46\\'29" N'
    """
    dms = split_deg_min_sec(value, is_latitude)
    return fmt % (dms.degrees, dms.minutes, dms.seconds, dms.direction)


def decimal_to_deg_min(
    value: float,
    is_latitude: bool,
    fmt: str = DM_FORMAT,
) -> str:
    """Format one coordinate as degrees, minutes and direction (seconds truncated)."""
    dms = split_deg_min_sec(value, is_latitude)
    return fmt % (dms.degrees, dms.minutes, dms.direction)


def format_coordinates_deg_min_sec(
    lat_deg: float,
    lon_deg: float,
    fmt: str = DMS_PAIR_FORMAT,
) -> str:
    """Format a latitude/longitude pair; fmt has eight slots, latitude first."""
    lat = split_deg_min_sec(lat_deg, is_latitude=True)
    lon = split_deg_min_sec(lon_deg, is_latitude=False)
    return fmt % (
        lat.degrees, lat.minutes, lat.seconds, lat.direction,
        lon.degrees, lon.minutes, lon.seconds, lon.direction,
    )


def format_coordinates_deg_min(
    lat_deg: float,
    lon_deg: float,
    fmt: str = DM_PAIR_FORMAT,
) -> str:
    """Format a latitude/longitude pair without seconds; fmt has six slots."""
    lat = split_deg_min_sec(lat_deg, is_latitude=True)
    lon = split_deg_min_sec(lon_deg, is_latitude=False)
    return fmt % (
        lat.degrees, lat.minutes, lat.direction,
        lon.degrees, lon.minutes, lon.direction,
    )


def deg_min_sec_to_decimal(
    degrees: float,
    minutes: float,
    seconds: float,
    direction: str,
) -> float:
    """
    Convert degrees/minutes/seconds and a direction to decimal degrees.

    "S" and "W" give a negative result; any other direction, including
    an unrecognized one, is treated as positive.
    """
    sign = -1.0 if direction in _NEGATIVE_DIRECTIONS else 1.0
    return (degrees + (minutes + seconds / 60.0) / 60.0) * sign

# Copyright (c) 2026 orbitglobe contributors. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for the globe geometry core.

Usage:
    orbitglobe subsolar                              # Sun now
    orbitglobe subsolar --at 2025-01-01T00:00:00Z
    orbitglobe format 37.7749 -122.4194              # DMS strings
    orbitglobe format 37.7749 -122.4194 --no-seconds
    orbitglobe orbit iss 23.5 -41.2 --heading -1     # orbit ring transform
    orbitglobe satellites
    orbitglobe --version
"""
import argparse
import logging
import sys
import time
from datetime import datetime

import numpy as np

from orbitglobe.domain.coordinate_format import (
    decimal_to_deg_min,
    decimal_to_deg_min_sec,
    format_coordinates_deg_min,
    format_coordinates_deg_min_sec,
)
from orbitglobe.domain.orbit_track import compute_orbit_track
from orbitglobe.domain.satellites import SATELLITES
from orbitglobe.domain.solar import equation_of_time, subsolar_point, sun_position
from orbitglobe.domain.time_conversion import (
    datetime_from_unix_seconds,
    julian_date,
    unix_seconds_from_datetime,
)

logger = logging.getLogger("orbitglobe")


def _get_version() -> str:
    from orbitglobe.version import __version__
    return __version__


def _configure_logging(verbose: bool) -> None:
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _parse_instant(text: str | None) -> float:
    """UTC seconds for an ISO 8601 string, or now."""
    if text is None:
        return time.time()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        raise ValueError(f"Invalid ISO 8601 time: {text}") from None
    return unix_seconds_from_datetime(dt)


def _run_subsolar(args) -> None:
    unix_seconds = _parse_instant(args.at)
    point = subsolar_point(unix_seconds)
    sun = sun_position(unix_seconds, args.distance)
    logger.debug("Julian date %.6f", julian_date(unix_seconds))

    print(f"Time (UTC):       {datetime_from_unix_seconds(unix_seconds).isoformat()}")
    print(f"Equation of time: {equation_of_time(unix_seconds):+.2f} min")
    print(f"Subsolar point:   {point.lat_deg:.4f}, {point.lon_deg:.4f}")
    print(f"                  {decimal_to_deg_min_sec(point.lat_deg, True)}  "
          f"{decimal_to_deg_min_sec(point.lon_deg, False)}")
    print(f"Sun position:     ({sun.x:.3f}, {sun.y:.3f}, {sun.z:.3f})")


def _run_format(args) -> None:
    if args.no_seconds:
        print(format_coordinates_deg_min(args.lat, args.lon))
        print(decimal_to_deg_min(args.lat, True))
        print(decimal_to_deg_min(args.lon, False))
    else:
        print(format_coordinates_deg_min_sec(args.lat, args.lon))
        print(decimal_to_deg_min_sec(args.lat, True))
        print(decimal_to_deg_min_sec(args.lon, False))


def _run_orbit(args) -> None:
    placement = compute_orbit_track(args.satellite, args.lat, args.lon, args.heading)
    if placement is None:
        print(f"Error: Unknown satellite: {args.satellite}", file=sys.stderr)
        sys.exit(1)

    print(f"Satellite:   {placement.satellite_id}")
    print(f"Ring radius: {placement.ring_radius}")
    print(f"Inclination: {np.degrees(placement.inclination_rad):.4f} deg (corrected)")
    print("Transform:")
    with np.printoptions(precision=6, suppress=True):
        print(placement.transform)


def _run_satellites() -> None:
    for d in SATELLITES.values():
        print(
            f"{d.satellite_id:<4} {d.name:<10} NORAD {d.norad_id:<6} "
            f"inc {d.inclination_deg:5.1f} deg  {d.speed_kmh:,.0f} km/h"
        )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="orbitglobe",
        description="Subsolar point, coordinate formatting and orbit-ring geometry",
    )
    parser.add_argument(
        '--version', action='version',
        version=f"orbitglobe {_get_version()}",
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true', default=False,
        help="Log debug output to stderr",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- subsolar ---
    subsolar_parser = subparsers.add_parser(
        "subsolar",
        help="Subsolar point and Sun position for an instant",
    )
    subsolar_parser.add_argument(
        '--at',
        help="UTC instant in ISO 8601, e.g. 2025-01-01T00:00:00Z (default: now)"
    )
    subsolar_parser.add_argument(
        '--distance', type=float, default=50.0,
        help="Sun distance from the globe centre in globe units (default: 50)"
    )

    # --- format ---
    format_parser = subparsers.add_parser(
        "format",
        help="Format decimal coordinates as degrees/minutes/seconds",
    )
    format_parser.add_argument("lat", type=float, help="Latitude (decimal degrees)")
    format_parser.add_argument("lon", type=float, help="Longitude (decimal degrees)")
    format_parser.add_argument(
        '--no-seconds', action='store_true', default=False,
        help="Degrees and minutes only"
    )

    # --- orbit ---
    orbit_parser = subparsers.add_parser(
        "orbit",
        help="Orbit ring transform for a satellite position",
    )
    orbit_parser.add_argument("satellite", help="Satellite id (see 'satellites')")
    orbit_parser.add_argument("lat", type=float, help="Latitude (decimal degrees)")
    orbit_parser.add_argument("lon", type=float, help="Longitude (decimal degrees)")
    orbit_parser.add_argument(
        '--heading', type=int, choices=[1, -1], default=1,
        help="+1 northbound, -1 southbound (default: 1)"
    )

    # --- satellites ---
    subparsers.add_parser("satellites", help="List tracked satellites")

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        if args.command == "subsolar":
            _run_subsolar(args)
        elif args.command == "format":
            _run_format(args)
        elif args.command == "orbit":
            _run_orbit(args)
        elif args.command == "satellites":
            _run_satellites()
        else:
            parser.print_help()
            sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()

# main.py
import argparse
import logging
import sys
from datetime import datetime
from typing import List, Optional

import numpy as np
import requests

from catalog import BodyCatalog, build_static_catalog
from config import AU_KM, config, ConfigurationError
from physics_utils import PhysicsError, vector_magnitude
from sim_clock import FixedClock, SystemClock, as_utc
from solar_api import fetch_catalog
from solarsystem import OrbitalMechanics


def parse_instant(text: str) -> datetime:
    """argparse type for ISO-8601 instants; naive values are read as UTC."""
    try:
        return as_utc(datetime.fromisoformat(text))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid ISO-8601 date/time: {text!r}") from e


def positive_float(text: str) -> float:
    """argparse type for strictly positive, finite floats."""
    try:
        value = float(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from e
    if not (0 < value < float("inf")):
        raise argparse.ArgumentTypeError(f"must be a positive number, got {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print Kepler positions of solar-system bodies.")
    parser.add_argument("--date", type=parse_instant, default=None,
                        help="Instant to evaluate (ISO-8601, UTC if no offset). Defaults to now.")
    parser.add_argument("--scale", type=positive_float, default=None,
                        help=f"Display units per km (default {config.World.DISTANCE_SCALE}).")
    parser.add_argument("--live", action="store_true",
                        help="Fetch bodies from the external data service instead of the built-in table.")
    parser.add_argument("--orbit", metavar="NAME", default=None,
                        help="Print the orbit path of NAME instead of the position table.")
    parser.add_argument("--segments", type=int, default=None,
                        help=f"Orbit path segments (default {config.Orbits.ORBIT_SEGMENTS}).")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    return parser


def format_position_table(catalog: BodyCatalog, mechanics: OrbitalMechanics, instant: datetime,
                          distance_scale: Optional[float]) -> List[str]:
    """Fixed-width rows: name, mean anomaly, heliocentric distance in AU, and x/y/z in display units."""
    positions = mechanics.positions_at(catalog, instant, distance_scale)
    scale = config.World.DISTANCE_SCALE if distance_scale is None else distance_scale
    lines = [f"{'Body':<10} {'M (deg)':>9} {'r (AU)':>8} {'x':>14} {'y':>14} {'z':>14}"]
    for body in catalog:
        position = positions[body.name]
        r_au = vector_magnitude(position) / scale / AU_KM
        mean_anomaly = mechanics.mean_anomaly_at(body, instant)
        lines.append(f"{body.name:<10} {mean_anomaly:>9.3f} {r_au:>8.4f} "
                     f"{position[0]:>14.6f} {position[1]:>14.6f} {position[2]:>14.6f}")
    return lines


def format_orbit_path(path: np.ndarray) -> List[str]:
    return [f"{i:>4} {x:>14.6f} {y:>14.6f} {z:>14.6f}" for i, (x, y, z) in enumerate(path)]


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        catalog = fetch_catalog() if args.live else build_static_catalog()
        clock = FixedClock(args.date) if args.date is not None else SystemClock()
        mechanics = OrbitalMechanics(clock=clock)
        instant = clock.now()

        if args.orbit is not None:
            body = catalog.get(args.orbit)
            if body is None:
                logging.error(f"Unknown body '{args.orbit}'. Known bodies: {', '.join(catalog.names())}")
                return 2
            lines = format_orbit_path(mechanics.orbit_path(body, args.segments, args.scale))
        else:
            logging.info(f"Evaluating {len(catalog)} bodies at {instant.isoformat()}")
            lines = format_position_table(catalog, mechanics, instant, args.scale)
    except requests.RequestException as e_fetch:
        logging.critical(f"Could not fetch body data: {e_fetch}")
        return 1
    except (ConfigurationError, PhysicsError, ValueError) as e_setup:
        logging.critical(f"Could not compute positions: {e_setup}", exc_info=True)
        return 1

    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())

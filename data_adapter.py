# data_adapter.py
"""Maps records of the public solar-system data service onto `CelestialBody`.

The external schema (le-systeme-solaire.net) describes bodies by mean radius,
semi-major axis, sidereal orbit and a mantissa/exponent mass pair; inclination
is unreliable there and is taken from `config.SolarSystem.INCLINATION_DEG`.

Fallbacks are deliberate and never raised to the caller:
    - missing or invalid sidereal orbit -> orbital period 0 (body is drawn at the origin)
    - missing eccentricity -> 0 (circular orbit)
    - unknown body name -> default inclination
    - missing physical fields -> None
"""
import logging
import math
from typing import Any, Iterable, List, Mapping, Optional

from config import config
from solarsystem import CelestialBody


def _as_float(value: Any) -> Optional[float]:
    """Returns `value` as a finite float, or None if it is missing or not numeric."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def record_name(record: Mapping[str, Any]) -> str:
    """English name of the record, falling back to its native name and then its id."""
    for key in ('englishName', 'name', 'id'):
        value = record.get(key)
        if value:
            return str(value)
    return ''


def is_sun_record(record: Mapping[str, Any]) -> bool:
    return record_name(record) == config.SolarSystem.SUN_NAME


def lookup_inclination(name: str) -> float:
    """Orbital inclination in degrees for `name`; unknown names get the configured default."""
    return config.SolarSystem.INCLINATION_DEG.get(name, config.SolarSystem.DEFAULT_INCLINATION_DEG)


def mass_from_record(record: Mapping[str, Any]) -> Optional[float]:
    """Mass in kg from the {massValue, massExponent} pair, or None if incomplete."""
    mass = record.get('mass')
    if not isinstance(mass, Mapping):
        return None
    value = _as_float(mass.get('massValue'))
    exponent = _as_float(mass.get('massExponent'))
    if value is None or exponent is None:
        return None
    return value * 10.0 ** exponent


def _orbital_period(record: Mapping[str, Any], name: str) -> float:
    period = _as_float(record.get('sideralOrbit'))
    if period is None or period < 0:
        logging.info(f"No usable sidereal orbit for '{name}' ({record.get('sideralOrbit')!r}); using orbital period 0.")
        return 0.0
    return period


def adapt_record(record: Mapping[str, Any]) -> CelestialBody:
    """
    Converts one external body record into a `CelestialBody`.

    Args:
        record: A body as returned by the external service.

    Returns:
        CelestialBody: The normalized body. The Sun is always stationary, circular and
        at zero distance, whatever the record says.
    """
    name = record_name(record)
    known = config.SolarSystem.BODY_DATA.get(name, {})

    mean_radius = _as_float(record.get('meanRadius'))
    diameter_km = 2.0 * mean_radius if mean_radius is not None else 0.0

    if is_sun_record(record):
        distance_km = 0.0
        period_days = 0.0
        eccentricity = 0.0
        stationary = True
    else:
        distance_km = _as_float(record.get('semimajorAxis')) or 0.0
        period_days = _orbital_period(record, name)
        eccentricity = _as_float(record.get('eccentricity')) or 0.0
        stationary = period_days <= 0

    body = CelestialBody(
        name=name,
        diameter_km=diameter_km,
        distance_from_sun_km=distance_km,
        orbital_period_days=period_days,
        eccentricity=eccentricity,
        inclination_deg=lookup_inclination(name),
        color=known.get('color', config.SolarSystem.DEFAULT_COLOR),
        show_orbit=not stationary,
        gravity=_as_float(record.get('gravity')),
        avg_temp_k=_as_float(record.get('avgTemp')),
        mass_kg=mass_from_record(record),
        density=_as_float(record.get('density')),
        axial_tilt_deg=_as_float(record.get('axialTilt')),
        perihelion_km=_as_float(record.get('perihelion')),
        aphelion_km=_as_float(record.get('aphelion')),
        is_stationary=stationary,
    )
    if config.Debug.DATA_ADAPTER:
        logging.debug(f"Adapted record '{name}': {body}")
    return body


def adapt_records(records: Iterable[Mapping[str, Any]]) -> List[CelestialBody]:
    """Adapts a sequence of external records, preserving order."""
    return [adapt_record(record) for record in records]

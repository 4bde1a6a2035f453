# catalog.py
import logging
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional

from config import config
from data_adapter import adapt_records, lookup_inclination
from solarsystem import CelestialBody


class BodyCatalog:
    """Read-only, ordered table of celestial bodies indexed by name.

    Built once at startup, either from the static table in
    `config.SolarSystem.BODY_DATA` or from adapted external records.
    """

    def __init__(self, bodies: Iterable[CelestialBody]):
        self._bodies = tuple(bodies)
        self._by_name: Dict[str, CelestialBody] = {}
        for body in self._bodies:
            if body.name in self._by_name:
                raise ValueError(f"Duplicate celestial body name in catalog: '{body.name}'")
            self._by_name[body.name] = body

    def __iter__(self) -> Iterator[CelestialBody]:
        return iter(self._bodies)

    def __len__(self) -> int:
        return len(self._bodies)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __getitem__(self, name: str) -> CelestialBody:
        return self._by_name[name]

    def get(self, name: str) -> Optional[CelestialBody]:
        return self._by_name.get(name)

    def names(self) -> List[str]:
        return [body.name for body in self._bodies]

    def orbiting(self) -> List[CelestialBody]:
        """Bodies that move, i.e. everything except stationary ones like the Sun."""
        return [body for body in self._bodies if not body.is_stationary]


def build_static_catalog() -> BodyCatalog:
    """Builds the catalog from the built-in table, Sun first."""
    bodies = []
    for name, data in config.SolarSystem.BODY_DATA.items():
        bodies.append(CelestialBody(
            name=name,
            diameter_km=float(data['diameter_km']),
            distance_from_sun_km=float(data['distance_from_sun_km']),
            orbital_period_days=float(data['orbital_period_days']),
            eccentricity=float(data.get('eccentricity', 0.0)),
            inclination_deg=lookup_inclination(name),
            color=data.get('color', config.SolarSystem.DEFAULT_COLOR),
            show_orbit=bool(data.get('show_orbit', True)),
            is_stationary=(name == config.SolarSystem.SUN_NAME),
        ))
    logging.debug(f"Built static catalog with {len(bodies)} bodies.")
    return BodyCatalog(bodies)


def build_catalog_from_records(records: Iterable[Mapping[str, Any]]) -> BodyCatalog:
    """Builds the catalog from records of the external data service."""
    bodies = adapt_records(records)
    logging.info(f"Built catalog from {len(bodies)} external records.")
    return BodyCatalog(bodies)

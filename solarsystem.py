# solarsystem.py
import numpy as np
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable, Optional, Tuple
from config import config # Import the global config instance
from physics_utils import PhysicsError, safe_divide, tilt_orbital_plane, wrap_degrees
from sim_clock import SystemClock, days_since_epoch

@dataclass(frozen=True)
class CelestialBody:
    name: str
    diameter_km: float
    distance_from_sun_km: float  # Semi-major axis
    orbital_period_days: float  # Sidereal period; 0 for a body that does not orbit
    eccentricity: float = 0.0
    inclination_deg: float = 0.0

    # Rendering hints, not used by the engine
    color: str = config.SolarSystem.DEFAULT_COLOR
    show_orbit: bool = True

    # Pass-through display data
    gravity: Optional[float] = None  # m/s^2
    avg_temp_k: Optional[float] = None
    mass_kg: Optional[float] = None
    density: Optional[float] = None  # g/cm^3
    axial_tilt_deg: Optional[float] = None
    perihelion_km: Optional[float] = None
    aphelion_km: Optional[float] = None

    # Anchored at the origin. A zero period always anchors; the flag can only add stationarity.
    is_stationary: Optional[bool] = field(default=None)

    def __post_init__(self):
        object.__setattr__(self, 'is_stationary', bool(self.is_stationary) or self.orbital_period_days <= 0)

    def display_radius(self, size_scale: Optional[float] = None) -> float:
        """Radius of the rendered sphere in display units."""
        scale = config.World.SIZE_SCALE if size_scale is None else size_scale
        return 0.5 * self.diameter_km * scale

class OrbitalMechanics:
    """Two-body Kepler propagation of catalog bodies.

    All queries are pure functions of (body, mean anomaly or instant, scale).
    The only impure input is the clock used when `current_position` is called
    without an explicit instant.

    Preconditions (not checked at query time): 0 <= eccentricity < 1. The
    sqrt((1+e)/(1-e)) term grows without bound as e approaches 1, so
    near-parabolic orbits lose precision.
    """

    def __init__(self, clock=None, kepler_iterations: Optional[int] = None, kepler_tolerance: Optional[float] = None):
        self.clock = clock if clock is not None else SystemClock()
        self.kepler_iterations = config.Orbits.KEPLER_ITERATIONS if kepler_iterations is None else kepler_iterations
        self.kepler_tolerance = config.Orbits.KEPLER_TOLERANCE if kepler_tolerance is None else kepler_tolerance
        if self.kepler_iterations < 1:
            raise PhysicsError(f"Kepler iteration count must be at least 1, got {self.kepler_iterations}.")

    def solve_kepler_equation(self, M_rad, e: float, iterations: Optional[int] = None, tolerance: Optional[float] = None):
        """
        Solves Kepler's Equation M = E - e * sin(E) for eccentric anomaly E by fixed-point iteration.

        Iterates E = M + e * sin(E) from E0 = M. The error shrinks by roughly a factor
        of e per step, so a fixed count is enough for planetary eccentricities.

        Args:
            M_rad: Mean anomaly in radians (scalar or np.ndarray).
            e: Eccentricity (0 <= e < 1).
            iterations: Iteration count; defaults to this instance's setting.
            tolerance: If given, stop once successive iterates differ by less than this.

        Returns:
            Eccentric anomaly E in radians, same shape as M_rad.
        """
        iterations = self.kepler_iterations if iterations is None else iterations
        tolerance = self.kepler_tolerance if tolerance is None else tolerance
        if iterations < 1:
            raise PhysicsError(f"Kepler iteration count must be at least 1, got {iterations}.")

        E_rad = M_rad
        for _ in range(iterations):
            E_next = M_rad + e * np.sin(E_rad)
            if tolerance is not None and np.max(np.abs(E_next - E_rad)) < tolerance:
                return E_next
            E_rad = E_next

        if tolerance is not None and config.Debug.KEPLER_SOLVER:
            logging.warning(f"Kepler's equation solver did not reach tolerance {tolerance} after {iterations} iterations for e={e}.")
        return E_rad

    def true_anomaly_and_radius(self, mean_anomaly_deg, e: float, semi_major_axis: float) -> Tuple:
        """
        Converts a mean anomaly into the true anomaly and the distance from the focus.

        Args:
            mean_anomaly_deg: Mean anomaly in degrees (scalar or np.ndarray).
            e: Eccentricity (0 <= e < 1).
            semi_major_axis: Semi-major axis; the radius is returned in the same unit.

        Returns:
            (v, r): true anomaly in radians and orbital radius.
        """
        M_rad = np.radians(mean_anomaly_deg)
        E_rad = self.solve_kepler_equation(M_rad, e)
        nu_rad = 2.0 * np.arctan(np.sqrt((1.0 + e) / (1.0 - e)) * np.tan(E_rad / 2.0))
        r = semi_major_axis * (1.0 - e**2) / (1.0 + e * np.cos(nu_rad))
        return nu_rad, r

    def _positions(self, body: CelestialBody, mean_anomaly_deg, distance_scale: Optional[float]) -> np.ndarray:
        scale = config.World.DISTANCE_SCALE if distance_scale is None else distance_scale
        nu_rad, r = self.true_anomaly_and_radius(mean_anomaly_deg, body.eccentricity, body.distance_from_sun_km)
        r_scaled = r * scale
        # Orbital plane is x/z; inclination lifts z_plane into y
        x = r_scaled * np.cos(nu_rad)
        z_plane = r_scaled * np.sin(nu_rad)
        return tilt_orbital_plane(x, z_plane, np.radians(body.inclination_deg))

    def position_at_mean_anomaly(self, body: CelestialBody, mean_anomaly_deg: float, distance_scale: Optional[float] = None) -> np.ndarray:
        """
        Position of `body` at a given mean anomaly, in display units.

        Args:
            body: The celestial body.
            mean_anomaly_deg: Mean anomaly in degrees.
            distance_scale: Display units per km. Defaults to config.World.DISTANCE_SCALE.

        Returns:
            np.ndarray of shape (3,): [x, y, z]. Stationary bodies are at the origin.
        """
        if body.is_stationary:
            return np.zeros(3, dtype=np.float64)
        return self._positions(body, float(mean_anomaly_deg), distance_scale)

    def mean_anomaly_at(self, body: CelestialBody, instant: datetime) -> float:
        """Mean anomaly in degrees [0, 360) at `instant`, assuming a uniform mean motion since J2000.0."""
        if body.is_stationary:
            return 0.0
        mean_motion_deg_per_day = safe_divide(360.0, body.orbital_period_days)
        return wrap_degrees(mean_motion_deg_per_day * days_since_epoch(instant))

    def current_position(self, body: CelestialBody, instant: Optional[datetime] = None, distance_scale: Optional[float] = None) -> np.ndarray:
        """Position of `body` at `instant`, or at the clock's current time when omitted."""
        if instant is None:
            instant = self.clock.now()
        return self.position_at_mean_anomaly(body, self.mean_anomaly_at(body, instant), distance_scale)

    def positions_at(self, bodies: Iterable[CelestialBody], instant: Optional[datetime] = None, distance_scale: Optional[float] = None) -> Dict[str, np.ndarray]:
        """Current positions of several bodies, all evaluated at the same instant."""
        if instant is None:
            instant = self.clock.now()
        positions = {body.name: self.current_position(body, instant, distance_scale) for body in bodies}
        if config.Debug.ORBITAL_MECHANICS:
            for name, position in positions.items():
                logging.debug(f"{name} at {instant.isoformat()}: {position.tolist()}")
        return positions

    def orbit_path(self, body: CelestialBody, segments: Optional[int] = None, distance_scale: Optional[float] = None) -> np.ndarray:
        """
        Closed polyline through one full revolution of `body`.

        Samples mean anomalies (i / segments) * 360 for i = 0..segments, so the first
        point (M = 0) and the last point (M = 360) coincide up to rounding. The shape
        does not depend on the current time.

        Args:
            body: The celestial body.
            segments: Number of segments. Defaults to config.Orbits.ORBIT_SEGMENTS.
            distance_scale: Display units per km. Defaults to config.World.DISTANCE_SCALE.

        Returns:
            np.ndarray of shape (segments + 1, 3).

        Raises:
            PhysicsError: If segments is less than 1.
        """
        segments = config.Orbits.ORBIT_SEGMENTS if segments is None else segments
        if segments < 1:
            raise PhysicsError(f"Orbit path needs at least one segment, got {segments}.")
        if body.is_stationary:
            return np.zeros((segments + 1, 3), dtype=np.float64)

        mean_anomalies_deg = np.arange(segments + 1, dtype=np.float64) / segments * 360.0
        return self._positions(body, mean_anomalies_deg, distance_scale)

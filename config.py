# config.py
import logging
from datetime import datetime, timezone

# Configure basic logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(module)s - %(message)s')

# Fundamental constants (used across different config sections)
AU_KM = 149597870.7  # Astronomical Unit in kilometers

class ConfigurationError(Exception):
    """Custom exception for orrery configuration errors.

    Raised by `SimulationConfig.validate()` and other configuration-dependent
    components when settings are invalid, inconsistent, or missing.

    Attributes:
        message (str): A human-readable explanation of the configuration error.
                       This is the first argument passed to the exception constructor.
    """
    pass

class SimulationConfig:
    """Centralized, hierarchical configuration for the orrery engine.

    Parameters live in nested static classes (`SimulationConfig.World`,
    `SimulationConfig.Orbits`, `SimulationConfig.SolarSystem`, ...). An instance
    named `config` is created at the end of this module and shared via
    `from config import config`.

    The constructor calls `validate()`, so a broken body table or a
    non-positive scale is reported at import time rather than as odd
    positions on screen.

    Example Usage:
        >>> from config import config
        >>> print(f"Orbit segments: {config.Orbits.ORBIT_SEGMENTS}")
        >>> print(f"Distance scale: {config.World.DISTANCE_SCALE}")
    """

    # --- World Configuration ---
    class World:
        """Display-unit scaling, kept separate from the physical units.

        Attributes:
            DISTANCE_SCALE (float): Display units per kilometer applied to orbital
                                    radii. Callers may override it per query.
            SIZE_SCALE (float): Display units per kilometer applied to body radii.
        """
        DISTANCE_SCALE = 1e-7
        SIZE_SCALE = 3e-4

    # --- Orbit Configuration ---
    class Orbits:
        """Numerical knobs of the Kepler solver and the orbit path generator.

        Attributes:
            ORBIT_SEGMENTS (int): Number of segments in a generated orbit polyline.
            KEPLER_ITERATIONS (int): Fixed-point iterations used to solve Kepler's
                                     equation. Ten is plenty for planetary
                                     eccentricities (< 0.25).
            KEPLER_TOLERANCE (Optional[float]): If set, the solver stops as soon as
                                                successive iterates differ by less than
                                                this many radians.
        """
        ORBIT_SEGMENTS = 128
        KEPLER_ITERATIONS = 10
        KEPLER_TOLERANCE = None

    # --- Time Configuration ---
    class Time:
        """Reference epoch for mean anomaly calculations.

        Attributes:
            REFERENCE_EPOCH_JD (float): Julian Date of the J2000.0 epoch.
            REFERENCE_EPOCH_UTC (datetime): The same instant as an aware UTC datetime.
            SECONDS_PER_DAY (float): Seconds in one day.
        """
        REFERENCE_EPOCH_JD = 2451545.0
        REFERENCE_EPOCH_UTC = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        SECONDS_PER_DAY = 86400.0

    # --- Solar System Configuration ---
    class SolarSystem:
        """Static body table and name-keyed reference data.

        Attributes:
            SUN_NAME (str): Name of the stationary central body.
            DEFAULT_COLOR (str): Hex color for bodies not found in `BODY_DATA`.
            DEFAULT_INCLINATION_DEG (float): Inclination used for names missing
                                             from `INCLINATION_DEG`.
            BODY_DATA (Dict[str, Dict]): Built-in catalog keyed by body name. Distances
                                         are semi-major axes in km, periods are sidereal
                                         periods in Earth days.
            INCLINATION_DEG (Dict[str, float]): Orbital inclination in degrees relative
                                                to the ecliptic, keyed by body name. The
                                                external data source does not reliably
                                                provide it.
        """
        SUN_NAME = 'Sun'
        DEFAULT_COLOR = '#AAAAAA'
        DEFAULT_INCLINATION_DEG = 0.0

        INCLINATION_DEG = {
            'Sun': 0.0,
            'Mercury': 7.005,
            'Venus': 3.39458,
            'Earth': 0.00005,
            'Mars': 1.850,
            'Jupiter': 1.303,
            'Saturn': 2.485,
            'Uranus': 0.772,
            'Neptune': 1.770,
            'Pluto': 17.16,
        }

        BODY_DATA = {
            'Sun': {
                'diameter_km': 1392700.0, 'distance_from_sun_km': 0.0, 'orbital_period_days': 0.0,
                'eccentricity': 0.0, 'color': '#FDB813', 'show_orbit': False,
            },
            'Mercury': {
                'diameter_km': 4879.0, 'distance_from_sun_km': 57.9e6, 'orbital_period_days': 88.0,
                'eccentricity': 0.205630, 'color': '#A0522D', 'show_orbit': True,
            },
            'Venus': {
                'diameter_km': 12104.0, 'distance_from_sun_km': 108.2e6, 'orbital_period_days': 225.0,
                'eccentricity': 0.006772, 'color': '#DEB887', 'show_orbit': True,
            },
            'Earth': {
                'diameter_km': 12742.0, 'distance_from_sun_km': 149.6e6, 'orbital_period_days': 365.0,
                'eccentricity': 0.0167, 'color': '#4B6EAF', 'show_orbit': True,
            },
            'Mars': {
                'diameter_km': 6779.0, 'distance_from_sun_km': 227.9e6, 'orbital_period_days': 687.0,
                'eccentricity': 0.0934, 'color': '#CD5C5C', 'show_orbit': True,
            },
            'Jupiter': {
                'diameter_km': 139820.0, 'distance_from_sun_km': 778.5e6, 'orbital_period_days': 4333.0,
                'eccentricity': 0.0489, 'color': '#DAA06D', 'show_orbit': True,
            },
            'Saturn': {
                'diameter_km': 116460.0, 'distance_from_sun_km': 1434.0e6, 'orbital_period_days': 10759.0,
                'eccentricity': 0.0565, 'color': '#F4C542', 'show_orbit': True,
            },
            'Uranus': {
                'diameter_km': 50724.0, 'distance_from_sun_km': 2871.0e6, 'orbital_period_days': 30687.0,
                'eccentricity': 0.0457, 'color': '#B2E2E2', 'show_orbit': True,
            },
            'Neptune': {
                'diameter_km': 49244.0, 'distance_from_sun_km': 4495.0e6, 'orbital_period_days': 60190.0,
                'eccentricity': 0.0113, 'color': '#5B5DDF', 'show_orbit': True,
            },
        }

    # --- External Data Source Configuration ---
    class Api:
        """Endpoint of the public solar-system data service.

        Attributes:
            BODIES_URL (str): REST endpoint listing all bodies.
            TIMEOUT_SECONDS (float): Request timeout.
        """
        BODIES_URL = 'https://api.le-systeme-solaire.net/rest/bodies/'
        TIMEOUT_SECONDS = 10.0

    # --- Debug Configuration ---
    class Debug:
        """Toggles for verbose logging.

        Attributes:
            ORBITAL_MECHANICS (bool): Debug logging from the position engine.
            KEPLER_SOLVER (bool): Warn when a tolerance-driven Kepler solve does not converge.
            DATA_ADAPTER (bool): Debug logging of each adapted external record.
        """
        ORBITAL_MECHANICS = False
        KEPLER_SOLVER = True
        DATA_ADAPTER = False

    def __init__(self):
        """Initializes the `SimulationConfig` instance and validates it.

        Raises:
            ConfigurationError: If `self.validate()` detects any issues with the
                                configuration values.
        """
        self.validate()

    def validate(self):
        """Performs validation of all configuration settings.

        -   **World**: Scales must be positive.
        -   **Orbits**: Segment and iteration counts must be positive integers;
            the tolerance must be `None` or positive.
        -   **Time**: The epoch must be a timezone-aware datetime.
        -   **SolarSystem**: Exactly one stationary body (the Sun, period 0);
            every other body needs a positive period and distance,
            0 <= eccentricity < 1, and a non-negative diameter. Inclinations
            must lie in [0, 180].
        -   **Api**: The timeout must be positive.

        Raises:
            ConfigurationError: If any configuration setting is found to be invalid.
        """
        # World validation
        if self.World.DISTANCE_SCALE <= 0:
            raise ConfigurationError("World.DISTANCE_SCALE must be positive.")
        if self.World.SIZE_SCALE <= 0:
            raise ConfigurationError("World.SIZE_SCALE must be positive.")

        # Orbits validation
        if not isinstance(self.Orbits.ORBIT_SEGMENTS, int) or self.Orbits.ORBIT_SEGMENTS < 1:
            raise ConfigurationError("Orbits.ORBIT_SEGMENTS must be a positive integer.")
        if not isinstance(self.Orbits.KEPLER_ITERATIONS, int) or self.Orbits.KEPLER_ITERATIONS < 1:
            raise ConfigurationError("Orbits.KEPLER_ITERATIONS must be a positive integer.")
        if self.Orbits.KEPLER_TOLERANCE is not None and self.Orbits.KEPLER_TOLERANCE <= 0:
            raise ConfigurationError("Orbits.KEPLER_TOLERANCE must be None or positive.")

        # Time validation
        if self.Time.REFERENCE_EPOCH_UTC.tzinfo is None:
            raise ConfigurationError("Time.REFERENCE_EPOCH_UTC must be timezone-aware.")

        # Solar System Data Validation
        sun_name = self.SolarSystem.SUN_NAME
        if sun_name not in self.SolarSystem.BODY_DATA:
            raise ConfigurationError(f"Central body '{sun_name}' missing from SolarSystem.BODY_DATA.")

        for name, data in self.SolarSystem.BODY_DATA.items():
            period = data.get('orbital_period_days', 0.0)
            if data.get('diameter_km', -1.0) < 0:
                raise ConfigurationError(f"Diameter of celestial body '{name}' cannot be negative.")
            if not (0.0 <= data.get('eccentricity', 0.0) < 1.0):
                raise ConfigurationError(f"Eccentricity of celestial body '{name}' ({data.get('eccentricity', 0.0)}) must be >= 0 and < 1.")
            if name == sun_name:
                if period != 0.0 or data.get('distance_from_sun_km', 0.0) != 0.0:
                    raise ConfigurationError(f"'{name}' must have zero orbital period and zero distance.")
                continue
            if period <= 0:
                raise ConfigurationError(f"Orbital period of '{name}' ({period}) must be positive; only '{sun_name}' is stationary.")
            if data.get('distance_from_sun_km', 0.0) <= 0:
                raise ConfigurationError(f"Semi-major axis of celestial body '{name}' must be positive.")

        for name, inclination in self.SolarSystem.INCLINATION_DEG.items():
            if not (0.0 <= inclination <= 180.0):
                raise ConfigurationError(f"Inclination of '{name}' ({inclination}) must be between 0 and 180 degrees inclusive.")
        if not (0.0 <= self.SolarSystem.DEFAULT_INCLINATION_DEG <= 180.0):
            raise ConfigurationError("SolarSystem.DEFAULT_INCLINATION_DEG must be between 0 and 180 degrees inclusive.")

        # Api validation
        if self.Api.TIMEOUT_SECONDS <= 0:
            raise ConfigurationError("Api.TIMEOUT_SECONDS must be positive.")

        logging.debug("Configuration validated successfully.")


# --- Instantiate the configuration ---
# e.g., from config import config
try:
    config = SimulationConfig()
except ConfigurationError as e:
    logging.error(f"FATAL CONFIGURATION ERROR: {e}", exc_info=True)
    raise

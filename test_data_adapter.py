import unittest

from config import config
from data_adapter import adapt_record, adapt_records, lookup_inclination, mass_from_record, record_name

EARTH_RECORD = {
    "id": "terre", "name": "La Terre", "englishName": "Earth", "isPlanet": True,
    "semimajorAxis": 149598023, "perihelion": 147095000, "aphelion": 152100000,
    "eccentricity": 0.0167, "inclination": 0.0, "mass": {"massValue": 5.97237, "massExponent": 24},
    "density": 5.5136, "gravity": 9.8, "meanRadius": 6371.0084, "sideralOrbit": 365.256,
    "axialTilt": 23.4392811, "avgTemp": 288,
}

SUN_RECORD = {
    "id": "soleil", "name": "Le Soleil", "englishName": "Sun", "isPlanet": False,
    "semimajorAxis": 0, "eccentricity": 0.3, "meanRadius": 695508.0, "sideralOrbit": 225000000.0,
    "mass": {"massValue": 1.989, "massExponent": 30}, "gravity": 274.0,
}


class TestAdaptRecord(unittest.TestCase):

    def test_diameter_is_twice_mean_radius(self):
        body = adapt_record({"englishName": "Earth", "meanRadius": 6371, "sideralOrbit": 365})
        self.assertEqual(body.diameter_km, 12742)

    def test_full_earth_record(self):
        body = adapt_record(EARTH_RECORD)
        self.assertEqual(body.name, "Earth")
        self.assertEqual(body.distance_from_sun_km, 149598023)
        self.assertAlmostEqual(body.orbital_period_days, 365.256)
        self.assertAlmostEqual(body.eccentricity, 0.0167)
        self.assertEqual(body.inclination_deg, config.SolarSystem.INCLINATION_DEG["Earth"])
        self.assertAlmostEqual(body.mass_kg, 5.97237e24, delta=1e18)
        self.assertEqual(body.gravity, 9.8)
        self.assertEqual(body.avg_temp_k, 288)
        self.assertEqual(body.perihelion_km, 147095000)
        self.assertEqual(body.aphelion_km, 152100000)
        self.assertAlmostEqual(body.axial_tilt_deg, 23.4392811)
        self.assertEqual(body.color, config.SolarSystem.BODY_DATA["Earth"]["color"])
        self.assertTrue(body.show_orbit)
        self.assertFalse(body.is_stationary)

    def test_sun_is_anchored_regardless_of_record(self):
        body = adapt_record(SUN_RECORD)
        self.assertTrue(body.is_stationary)
        self.assertEqual(body.orbital_period_days, 0.0)
        self.assertEqual(body.eccentricity, 0.0)
        self.assertEqual(body.distance_from_sun_km, 0.0)
        self.assertFalse(body.show_orbit)
        self.assertEqual(body.diameter_km, 2 * 695508.0)
        self.assertEqual(body.gravity, 274.0)

    def test_missing_period_defaults_to_zero(self):
        with self.assertLogs(level="INFO"):
            body = adapt_record({"englishName": "Mars", "meanRadius": 3389.5, "semimajorAxis": 227939200})
        self.assertEqual(body.orbital_period_days, 0.0)
        self.assertTrue(body.is_stationary)

    def test_invalid_period_defaults_to_zero(self):
        for bad in ["n/a", None, float("nan"), -5.0, True]:
            body = adapt_record({"englishName": "Mars", "sideralOrbit": bad})
            self.assertEqual(body.orbital_period_days, 0.0, msg=repr(bad))

    def test_numeric_strings_are_accepted(self):
        body = adapt_record({"englishName": "Mars", "sideralOrbit": "686.98", "meanRadius": "3389.5"})
        self.assertAlmostEqual(body.orbital_period_days, 686.98)
        self.assertAlmostEqual(body.diameter_km, 6779.0)

    def test_missing_eccentricity_is_circular(self):
        body = adapt_record({"englishName": "Venus", "sideralOrbit": 224.7})
        self.assertEqual(body.eccentricity, 0.0)

    def test_missing_optional_fields_stay_absent(self):
        body = adapt_record({"englishName": "Venus", "sideralOrbit": 224.7})
        for attr in ("gravity", "avg_temp_k", "mass_kg", "density", "axial_tilt_deg", "perihelion_km", "aphelion_km"):
            self.assertIsNone(getattr(body, attr), msg=attr)
        self.assertEqual(body.diameter_km, 0.0)

    def test_unknown_body_defaults(self):
        body = adapt_record({"englishName": "Vulcan", "sideralOrbit": 40.0, "semimajorAxis": 3e7})
        self.assertEqual(body.inclination_deg, 0.0)
        self.assertEqual(body.color, config.SolarSystem.DEFAULT_COLOR)

    def test_adapt_records_preserves_order(self):
        bodies = adapt_records([SUN_RECORD, EARTH_RECORD])
        self.assertEqual([b.name for b in bodies], ["Sun", "Earth"])


class TestHelpers(unittest.TestCase):

    def test_lookup_inclination(self):
        self.assertEqual(lookup_inclination("Mercury"), 7.005)
        self.assertEqual(lookup_inclination("Planet Nine"), config.SolarSystem.DEFAULT_INCLINATION_DEG)

    def test_mass_from_record(self):
        self.assertAlmostEqual(mass_from_record({"mass": {"massValue": 6.4171, "massExponent": 23}}), 6.4171e23, delta=1e17)
        self.assertIsNone(mass_from_record({"mass": {"massValue": 6.4171}}))
        self.assertIsNone(mass_from_record({"mass": None}))
        self.assertIsNone(mass_from_record({}))

    def test_record_name_fallbacks(self):
        self.assertEqual(record_name({"englishName": "Mars", "name": "Mars", "id": "mars"}), "Mars")
        self.assertEqual(record_name({"englishName": "", "name": "Pluton", "id": "pluton"}), "Pluton")
        self.assertEqual(record_name({"id": "ceres"}), "ceres")


if __name__ == '__main__':
    unittest.main()

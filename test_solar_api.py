import unittest
from unittest import mock

import requests

from config import config
from solar_api import fetch_catalog, fetch_solar_system_records

PAYLOAD = {
    "bodies": [
        {"englishName": "Sun", "isPlanet": False, "meanRadius": 695508.0},
        {"englishName": "Earth", "isPlanet": True, "meanRadius": 6371.0, "semimajorAxis": 149598023,
         "sideralOrbit": 365.256, "eccentricity": 0.0167},
        {"englishName": "Moon", "isPlanet": False, "meanRadius": 1737.0, "sideralOrbit": 27.3217},
        {"englishName": "Ceres", "isPlanet": False, "meanRadius": 470.0, "sideralOrbit": 1680.5},
    ]
}


def make_session(payload=None, error=None):
    response = mock.Mock()
    response.json.return_value = payload
    response.raise_for_status.side_effect = error
    session = mock.Mock()
    session.get.return_value = response
    return session


class TestFetchRecords(unittest.TestCase):

    def test_keeps_planets_and_sun(self):
        session = make_session(PAYLOAD)
        records = fetch_solar_system_records(session=session)
        self.assertEqual([r["englishName"] for r in records], ["Sun", "Earth"])
        session.get.assert_called_once_with(config.Api.BODIES_URL, timeout=config.Api.TIMEOUT_SECONDS)

    def test_url_and_timeout_overrides(self):
        session = make_session({"bodies": []})
        fetch_solar_system_records(session=session, url="http://example.invalid/bodies", timeout=2)
        session.get.assert_called_once_with("http://example.invalid/bodies", timeout=2)

    def test_http_error_is_logged_and_reraised(self):
        session = make_session(error=requests.HTTPError("503 Server Error"))
        with self.assertLogs(level="ERROR"):
            with self.assertRaises(requests.HTTPError):
                fetch_solar_system_records(session=session)

    def test_malformed_payload(self):
        with self.assertRaises(ValueError):
            fetch_solar_system_records(session=make_session({"results": []}))
        with self.assertRaises(ValueError):
            fetch_solar_system_records(session=make_session([1, 2, 3]))

    def test_non_object_body_entries_are_rejected(self):
        payload = {"bodies": PAYLOAD["bodies"] + ["junk", 42]}
        with self.assertRaises(ValueError):
            fetch_solar_system_records(session=make_session(payload))

    def test_defaults_to_requests_module(self):
        with mock.patch("solar_api.requests.get") as get:
            get.return_value = make_session(PAYLOAD).get.return_value
            records = fetch_solar_system_records()
        self.assertEqual(len(records), 2)
        get.assert_called_once()


class TestFetchCatalog(unittest.TestCase):

    def test_adapts_fetched_records(self):
        catalog = fetch_catalog(session=make_session(PAYLOAD))
        self.assertEqual(catalog.names(), ["Sun", "Earth"])
        self.assertTrue(catalog["Sun"].is_stationary)
        self.assertEqual(catalog["Earth"].diameter_km, 12742.0)


if __name__ == '__main__':
    unittest.main()

# solar_api.py
import logging
from typing import Any, Dict, List, Optional

import requests

from catalog import BodyCatalog, build_catalog_from_records
from config import config


def fetch_solar_system_records(session=None, url: Optional[str] = None, timeout: Optional[float] = None) -> List[Dict[str, Any]]:
    """
    Fetches body records from the public solar-system service, keeping planets and the Sun.

    Args:
        session: Object with a requests-compatible `get` (e.g. requests.Session). Defaults to `requests`.
        url: Endpoint override. Defaults to config.Api.BODIES_URL.
        timeout: Request timeout in seconds. Defaults to config.Api.TIMEOUT_SECONDS.

    Returns:
        List of raw records, in the order the service returned them.

    Raises:
        requests.RequestException: On network or HTTP errors (logged, then re-raised).
        ValueError: If the response is not a JSON object with a 'bodies' list of objects.
    """
    client = session if session is not None else requests
    url = config.Api.BODIES_URL if url is None else url
    timeout = config.Api.TIMEOUT_SECONDS if timeout is None else timeout

    try:
        response = client.get(url, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except requests.RequestException as e:
        logging.error(f"Error fetching solar system data from {url}: {e}", exc_info=True)
        raise

    bodies = payload.get('bodies') if isinstance(payload, dict) else None
    if not isinstance(bodies, list):
        raise ValueError(f"Unexpected response from {url}: no 'bodies' list.")

    malformed = [body for body in bodies if not isinstance(body, dict)]
    if malformed:
        raise ValueError(f"Unexpected response from {url}: {len(malformed)} body entries are not objects.")

    selected = [
        body for body in bodies
        if body.get('isPlanet') or body.get('englishName') == config.SolarSystem.SUN_NAME
    ]
    logging.info(f"Fetched {len(bodies)} bodies from {url}, kept {len(selected)} (planets and the Sun).")
    return selected


def fetch_catalog(session=None, url: Optional[str] = None, timeout: Optional[float] = None) -> BodyCatalog:
    """Fetches records and adapts them into a `BodyCatalog`."""
    return build_catalog_from_records(fetch_solar_system_records(session=session, url=url, timeout=timeout))

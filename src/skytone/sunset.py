"""Sunrise/sunset service client — one GET against api.sunrise-sunset.org."""

import logging

import httpx

from skytone import config
from skytone.models import SunsetResult

logger = logging.getLogger(__name__)


class SunsetServiceError(Exception):
    """Sunset API call failure (transport, HTTP status, or response body)."""


def _endpoint(base_url: str) -> httpx.URL:
    try:
        url = httpx.URL(base_url.rstrip("/") + "/json")
    except httpx.InvalidURL as e:
        raise SunsetServiceError(f"Invalid service URL {base_url!r}: {e}") from e
    if url.scheme not in ("http", "https"):
        raise SunsetServiceError(
            f"Invalid service URL {base_url!r}: expected an http:// or https:// address"
        )
    return url


def parse_sunset_response(data: object) -> SunsetResult:
    """Turn a decoded JSON body into a SunsetResult.

    Raises:
        SunsetServiceError: When the body has no results object or reports a
            status other than "OK".
    """
    if not isinstance(data, dict) or not isinstance(data.get("results"), dict):
        raise SunsetServiceError("Malformed response: missing results")
    status = str(data.get("status", "OK"))
    if status != "OK":
        raise SunsetServiceError(f"Service returned status {status}")
    results = data["results"]
    return SunsetResult(
        sunrise=results.get("sunrise"),
        sunset=results.get("sunset"),
        civil_twilight_begin=results.get("civil_twilight_begin"),
        civil_twilight_end=results.get("civil_twilight_end"),
        status=status,
    )


def fetch_sunset_times(
    latitude: float,
    longitude: float,
    base_url: str | None = None,
    client: httpx.Client | None = None,
) -> SunsetResult:
    """Fetch today's sunrise, sunset and civil twilight times in UTC.

    A single attempt with httpx's default timeout; no retry.

    Args:
        latitude: Decimal degrees.
        longitude: Decimal degrees.
        base_url: Service root. Defaults to SUNSET_API_BASE_URL.
        client: Optional httpx.Client to send the request through.

    Returns:
        SunsetResult with "YYYY-MM-DDThh:mm:ss+00:00" timestamps.

    Raises:
        SunsetServiceError: On transport error, non-2xx status, or a body
            that is not the expected JSON, or when the service URL is not a
            valid http(s) address.
    """
    url = _endpoint(base_url or config.SUNSET_API_BASE_URL)
    params = {"lat": latitude, "lng": longitude, "formatted": 0}
    logger.debug("GET %s lat=%s lng=%s", url, latitude, longitude)
    try:
        if client is not None:
            resp = client.get(url, params=params)
        else:
            resp = httpx.get(url, params=params)
        resp.raise_for_status()
        data = resp.json()
    except httpx.InvalidURL as e:
        raise SunsetServiceError(f"Invalid service URL {url}: {e}") from e
    except httpx.HTTPError as e:
        raise SunsetServiceError(str(e)) from e
    except ValueError as e:
        raise SunsetServiceError(f"Malformed response: {e}") from e
    return parse_sunset_response(data)

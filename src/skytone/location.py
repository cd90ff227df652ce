"""Location permission gate and location sources.

The browser implementations talk to the Permissions and Geolocation APIs
through streamlit_js_eval. A component call returns None on the script run
that creates it; the browser's answer arrives with the rerun that the
component triggers. Until then the gate and source call st.stop(), which
suspends the pipeline without blocking the page.
"""

import logging
from typing import Any, Protocol

import streamlit as st
from streamlit_js_eval import streamlit_js_eval

from skytone import config
from skytone.models import Coordinates, PermissionStatus

logger = logging.getLogger(__name__)

# W3C GeolocationPositionError codes
_PERMISSION_DENIED = 1
_TIMEOUT = 3

# Resolves to "granted" / "denied". When the state is still "prompt", asking
# for a position is what makes the browser show its permission dialog. A
# TIMEOUT after the user allowed access still counts as granted.
_PERMISSION_JS = """
(navigator.permissions
    ? navigator.permissions.query({name: 'geolocation'}).then(s => s.state)
    : Promise.resolve('prompt')
).then(state => state !== 'prompt' ? state : new Promise(resolve =>
    navigator.geolocation.getCurrentPosition(
        () => resolve('granted'),
        e => resolve(e.code === 1 ? 'denied' : 'granted'),
        {maximumAge: Infinity, timeout: %d}
    )
))
"""

# maximumAge: Infinity returns any cached fix immediately.
_LAST_KNOWN_JS = """
new Promise(resolve => {
    if (!navigator.geolocation) {
        resolve({error: {code: 2, message: 'Geolocation is not supported'}});
        return;
    }
    navigator.geolocation.getCurrentPosition(
        p => resolve({coords: {latitude: p.coords.latitude, longitude: p.coords.longitude}}),
        e => resolve({error: {code: e.code, message: e.message}}),
        {maximumAge: Infinity, timeout: %d}
    );
})
"""


class LocationError(Exception):
    """Platform failure while reading the device location."""


class PermissionGate(Protocol):
    def ensure(self) -> PermissionStatus: ...


class LocationSource(Protocol):
    def last_known(self) -> Coordinates | None: ...


def parse_permission_payload(payload: Any) -> PermissionStatus | None:
    """Map a browser permission state to a PermissionStatus. None = still pending."""
    if payload is None:
        return None
    if str(payload).lower() == "granted":
        return PermissionStatus.GRANTED
    return PermissionStatus.DENIED


def parse_location_payload(payload: dict[str, Any]) -> Coordinates | None:
    """Map a geolocation payload to Coordinates.

    Returns None when the browser has no fix to give (TIMEOUT).

    Raises:
        LocationError: On any other geolocation error or an unreadable payload.
    """
    error = payload.get("error")
    if error:
        code = error.get("code")
        message = error.get("message") or "unknown error"
        if code == _TIMEOUT:
            return None
        if code == _PERMISSION_DENIED:
            raise LocationError(f"permission denied ({message})")
        raise LocationError(message)
    try:
        coords = payload["coords"]
        return Coordinates(
            latitude=float(coords["latitude"]),
            longitude=float(coords["longitude"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise LocationError(f"Malformed location payload: {e}") from e


class BrowserPermissionGate:
    """Permission gate backed by the browser Permissions API."""

    def __init__(self, key: str, timeout_ms: int = config.LOCATION_TIMEOUT_MS) -> None:
        self.key = key
        self.timeout_ms = timeout_ms

    def ensure(self) -> PermissionStatus:
        payload = streamlit_js_eval(
            js_expressions=_PERMISSION_JS % self.timeout_ms, key=self.key
        )
        status = parse_permission_payload(payload)
        if status is None:
            logger.debug("Waiting for permission answer (%s)", self.key)
            st.stop()
        logger.info("Location permission: %s", status.value)
        return status


class BrowserLocationSource:
    """Last-known position from the browser Geolocation API."""

    def __init__(self, key: str, timeout_ms: int = config.LOCATION_TIMEOUT_MS) -> None:
        self.key = key
        self.timeout_ms = timeout_ms

    def last_known(self) -> Coordinates | None:
        payload = streamlit_js_eval(
            js_expressions=_LAST_KNOWN_JS % self.timeout_ms, key=self.key
        )
        if payload is None:
            logger.debug("Waiting for location fix (%s)", self.key)
            st.stop()
        if not isinstance(payload, dict):
            raise LocationError(f"Malformed location payload: {payload!r}")
        return parse_location_payload(payload)


class AlwaysGranted:
    """Gate for contexts with no interactive permission step."""

    def ensure(self) -> PermissionStatus:
        return PermissionStatus.GRANTED


class StaticLocationSource:
    """Location source that always reports the same fix."""

    def __init__(self, coordinates: Coordinates | None) -> None:
        self.coordinates = coordinates

    def last_known(self) -> Coordinates | None:
        return self.coordinates

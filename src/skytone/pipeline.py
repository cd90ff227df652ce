"""Refresh pipeline — permission → location → sunset fetch → local times → DisplayState.

Each stage either hands its value to the next one or ends the refresh with
replacement display text. Nothing raised by a stage escapes the pipeline.
"""

import logging
from collections.abc import Callable, Iterator
from dataclasses import replace
from datetime import tzinfo

from skytone.location import LocationError, LocationSource, PermissionGate
from skytone.models import DisplayState, PermissionStatus, SunsetResult
from skytone.sunset import SunsetServiceError, fetch_sunset_times
from skytone.timefmt import to_local_time

logger = logging.getLogger(__name__)

PERMISSION_DENIED_TEXT = "Location permissions denied."
PERMISSION_NOTICE = "Location permissions are required for this app to work."
LOCATION_UNAVAILABLE_TEXT = "Unable to fetch location."

SunsetFetcher = Callable[[float, float], SunsetResult]
ZoneResolver = Callable[[float, float], tzinfo | None]


def format_location(latitude: float, longitude: float) -> str:
    return f"Lat: {latitude}, Lng: {longitude}"


def format_sunset(result: SunsetResult, tz: tzinfo | None = None) -> str:
    """Three labelled local times, one per line.

    civil_twilight_begin is shown as "Sunset Starts" and sunset as
    "Sunset Ends". The labels are kept exactly as the app has always shown them.
    """
    sunset_start = to_local_time(result.civil_twilight_begin, tz)
    sunset_end = to_local_time(result.sunset, tz)
    twilight_end = to_local_time(result.civil_twilight_end, tz)
    return (
        f"Sunset Starts: {sunset_start}\n"
        f"Sunset Ends: {sunset_end}\n"
        f"Twilight Ends: {twilight_end}"
    )


def refresh(
    state: DisplayState,
    gate: PermissionGate,
    source: LocationSource,
    fetch: SunsetFetcher = fetch_sunset_times,
    notify: Callable[[str], None] | None = None,
    tz: tzinfo | None = None,
    resolve_zone: ZoneResolver | None = None,
) -> Iterator[DisplayState]:
    """Run one refresh and yield each new DisplayState as it is produced.

    Args:
        state: DisplayState before the refresh.
        gate: Permission gate; consulted first.
        source: Location source; read once.
        fetch: Sunset service call taking (latitude, longitude).
        notify: Shows a one-time notice to the user (permission denial).
        tz: Zone for the displayed times.
        resolve_zone: Looks up the zone at the fix when tz is not given.
            With neither, or when it finds none, the host's local zone is used.

    Yields:
        The location update, then the sunset update when the fetch runs.
    """
    if gate.ensure() is PermissionStatus.DENIED:
        logger.warning("Location permission denied")
        if notify is not None:
            notify(PERMISSION_NOTICE)
        yield replace(state, location_text=PERMISSION_DENIED_TEXT)
        return

    try:
        coords = source.last_known()
    except LocationError as e:
        logger.warning("Location lookup failed: %s", e)
        yield replace(state, location_text=f"Failed to fetch location: {e}")
        return

    if coords is None:
        logger.info("No last-known location")
        yield replace(state, location_text=LOCATION_UNAVAILABLE_TEXT)
        return

    state = replace(
        state, location_text=format_location(coords.latitude, coords.longitude)
    )
    yield state

    try:
        result = fetch(coords.latitude, coords.longitude)
    except SunsetServiceError as e:
        logger.warning("Sunset fetch failed: %s", e)
        yield replace(state, sunset_text=f"Failed to fetch sunset data: {e}")
        return

    if tz is None and resolve_zone is not None:
        tz = resolve_zone(coords.latitude, coords.longitude)
        logger.debug("Zone at fix: %s", tz)
    yield replace(state, sunset_text=format_sunset(result, tz))


def run_refresh(
    state: DisplayState,
    gate: PermissionGate,
    source: LocationSource,
    fetch: SunsetFetcher = fetch_sunset_times,
    notify: Callable[[str], None] | None = None,
    tz: tzinfo | None = None,
    resolve_zone: ZoneResolver | None = None,
) -> DisplayState:
    """Run one refresh to completion and return the final DisplayState."""
    for state in refresh(state, gate, source, fetch, notify, tz, resolve_zone):
        pass
    return state

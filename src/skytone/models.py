"""Data model definitions — explicit boundaries between location, fetch, and render layers."""

from dataclasses import dataclass
from enum import Enum

FETCHING_LOCATION = "Fetching location..."
FETCHING_SUNSET = "Fetching sunset data..."


class PermissionStatus(Enum):
    """Outcome of the location permission gate."""

    GRANTED = "granted"
    DENIED = "denied"


@dataclass(frozen=True)
class Coordinates:
    """A single location fix. Input to the sunset service."""

    latitude: float  # Decimal degrees
    longitude: float  # Decimal degrees


@dataclass(frozen=True)
class SunsetResult:
    """One sunrise/sunset API response. Timestamps are "YYYY-MM-DDThh:mm:ss+00:00" UTC strings."""

    sunrise: str | None
    sunset: str | None
    civil_twilight_begin: str | None
    civil_twilight_end: str | None
    status: str = "OK"


@dataclass(frozen=True)
class DisplayState:
    """The sole input to the renderer. Replaced whole on every update."""

    location_text: str = FETCHING_LOCATION
    sunset_text: str = FETCHING_SUNSET

"""UTC timestamp → local "hh:mm AM/PM" conversion."""

from datetime import datetime, tzinfo

from pytz import timezone, utc
from timezonefinder import TimezoneFinder

UTC_LAYOUT = "%Y-%m-%dT%H:%M:%S+00:00"
LOCAL_LAYOUT = "%I:%M %p"

INVALID_TIME = "Invalid time"
CONVERSION_ERROR = "Error converting time"

_tf = TimezoneFinder()


def zone_at(latitude: float, longitude: float) -> tzinfo | None:
    """Return the time zone in force at a location, or None if none is on record."""
    tz_str = _tf.timezone_at(lat=latitude, lng=longitude)
    if tz_str is None:
        return None
    return timezone(tz_str)


def to_local_time(utc_time: str | None, tz: tzinfo | None = None) -> str:
    """Convert a sunrise-sunset.org timestamp to a local clock time.

    Never raises: failures come back as one of two sentinel strings.

    Args:
        utc_time: Timestamp in "YYYY-MM-DDThh:mm:ss+00:00" format.
        tz: Target zone. None uses the host's local time zone.

    Returns:
        "hh:mm AM/PM", "Invalid time" when there is no timestamp to parse,
        or "Error converting time" when parsing or conversion fails.
    """
    if utc_time is None or not str(utc_time).strip():
        return INVALID_TIME
    try:
        dt = utc.localize(datetime.strptime(utc_time, UTC_LAYOUT))
        local_dt = dt.astimezone(tz) if tz is not None else dt.astimezone()
        return local_dt.strftime(LOCAL_LAYOUT)
    except (ValueError, TypeError, OverflowError, OSError):
        return CONVERSION_ERROR

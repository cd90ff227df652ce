"""CLI entry point for a one-off sunset report.

Edit the latitude/longitude variables at the top, then run:
    uv run python src/skytone/report.py
"""

from dotenv import load_dotenv

load_dotenv()

from skytone.location import AlwaysGranted, StaticLocationSource  # noqa: E402
from skytone.log import setup_logging  # noqa: E402
from skytone.models import Coordinates, DisplayState  # noqa: E402
from skytone.pipeline import run_refresh  # noqa: E402
from skytone.timefmt import zone_at  # noqa: E402

latitude = 50.8092356
longitude = 4.9370557

setup_logging()
state = run_refresh(
    DisplayState(),
    AlwaysGranted(),
    StaticLocationSource(Coordinates(latitude=latitude, longitude=longitude)),
    resolve_zone=zone_at,
)
print(state.location_text)
print(state.sunset_text)

"""Settings read from the environment (load_dotenv() runs at the app entry point)."""

import os

SUNSET_API_BASE_URL: str = os.environ.get(
    "SUNSET_API_BASE_URL", "https://api.sunrise-sunset.org"
)

# How long the browser may spend acquiring a fix when it has none cached.
LOCATION_TIMEOUT_MS: int = int(os.environ.get("LOCATION_TIMEOUT_MS", "10000"))

LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()

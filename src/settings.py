import os
from pathlib import Path


def env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


def resolve_log_path() -> Path | None:
    raw_path = os.getenv("WEATHER_LOG_PATH", "logs/weather_browser.log")
    if not raw_path:
        return None
    path = Path(raw_path)
    return path if path.is_absolute() else Path.cwd() / path


# =====================
# Configuration
# =====================
OPEN_METEO_URL = os.getenv("OPEN_METEO_URL", "https://api.open-meteo.com/v1/forecast")
FORECAST_TIMEZONE = os.getenv("FORECAST_TIMEZONE", "GMT")
FORECAST_DAYS = int(os.getenv("FORECAST_DAYS", "1"))
HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))

GEOLOCATION_ENABLED = env_flag("GEOLOCATION_ENABLED", "1")
GEOLOCATION_URL = os.getenv("GEOLOCATION_URL", "https://ipapi.co/{ip}/json/")

LOG_PATH = resolve_log_path()

from dataclasses import dataclass

import pandas as pd
import requests

from src.settings import FORECAST_DAYS, FORECAST_TIMEZONE, HTTP_TIMEOUT_SECONDS, OPEN_METEO_URL

HOURLY_FIELDS = ["temperature_2m", "precipitation"]


class WeatherError(Exception):
    pass


class NetworkError(WeatherError):
    pass


class ParseError(WeatherError):
    pass


@dataclass(frozen=True)
class ForecastRow:
    time: str
    temperature: float | None
    precipitation: float | None


def parse_forecast(payload: dict | None) -> list[ForecastRow]:
    """
    Parse an Open-Meteo forecast payload into hourly rows.

    Raises ParseError when the hourly block is missing or its columns don't line up.
    """
    if not payload or not isinstance(payload, dict):
        raise ParseError("Forecast response was empty")

    hourly_raw = payload.get("hourly")
    if not isinstance(hourly_raw, dict):
        raise ParseError("Forecast response has no hourly data")

    missing = [key for key in ["time", *HOURLY_FIELDS] if key not in hourly_raw]
    if missing:
        raise ParseError(f"Forecast response is missing: {', '.join(missing)}")

    try:
        hourly_df = pd.DataFrame({key: hourly_raw[key] for key in ["time", *HOURLY_FIELDS]})
    except ValueError as exc:
        raise ParseError(f"Forecast columns have mismatched lengths: {exc}") from exc

    hourly_df.rename(
        columns={"temperature_2m": "temperature"},
        inplace=True,
    )
    try:
        for column in ("temperature", "precipitation"):
            hourly_df[column] = pd.to_numeric(hourly_df[column], errors="raise")
    except (TypeError, ValueError) as exc:
        raise ParseError("Forecast values are not numeric") from exc

    return [
        ForecastRow(
            time=str(row.time),
            temperature=None if pd.isna(row.temperature) else float(row.temperature),
            precipitation=None if pd.isna(row.precipitation) else float(row.precipitation),
        )
        for row in hourly_df.itertuples(index=False)
    ]


def weather_search(lat: float, lng: float) -> list[ForecastRow]:
    """Fetch today's hourly temperature and precipitation from Open-Meteo (no key required)."""
    params = {
        "latitude": lat,
        "longitude": lng,
        "hourly": ",".join(HOURLY_FIELDS),
        "timezone": FORECAST_TIMEZONE,
        "forecast_days": FORECAST_DAYS,
    }
    try:
        resp = requests.get(OPEN_METEO_URL, params=params, timeout=HTTP_TIMEOUT_SECONDS)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise NetworkError(f"Forecast request failed: {exc}") from exc

    try:
        data = resp.json()
    except ValueError as exc:
        raise ParseError("Forecast response was not valid JSON") from exc

    return parse_forecast(data)

from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
MAX_FORECAST_DAYS = 15


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class WeatherTool:
    """
    Daily forecast lookup on Open-Meteo (no API key). Any network or shape
    problem yields None so itineraries are never blocked on the weather.
    """

    def __init__(self, timeout: int = 10, session: Optional[requests.Session] = None) -> None:
        self.timeout = timeout
        self.session = session or requests.Session()

    def get_daily_forecast(self, city: str, days: int = 7) -> Optional[Dict[str, List[float]]]:
        try:
            geo = self.session.get(
                GEOCODING_URL,
                params={"name": city, "count": 1, "language": "fr", "format": "json"},
                timeout=self.timeout,
            )
            geo.raise_for_status()
            results = geo.json().get("results") or []
            if not results:
                return None
            place = results[0]

            forecast = self.session.get(
                FORECAST_URL,
                params={
                    "latitude": place["latitude"],
                    "longitude": place["longitude"],
                    "daily": "temperature_2m_max,temperature_2m_min,precipitation_sum",
                    "forecast_days": min(days, MAX_FORECAST_DAYS),
                    "timezone": "auto",
                },
                timeout=self.timeout,
            )
            forecast.raise_for_status()
            return forecast.json().get("daily") or None
        except (requests.RequestException, ValueError, KeyError, TypeError, AttributeError) as exc:
            logger.warning("Failed to fetch weather for %s: %s", city, exc)
            return None

    def describe_today(self, city: str) -> Optional[str]:
        daily = self.get_daily_forecast(city, days=1)
        if not daily:
            return None
        try:
            tmin = daily["temperature_2m_min"][0]
            tmax = daily["temperature_2m_max"][0]
            rain = daily["precipitation_sum"][0]
        except (KeyError, IndexError, TypeError):
            return None
        try:
            low, high, wet = _round_half_up(tmin), _round_half_up(tmax), _round_half_up(rain)
        except (TypeError, ValueError):
            logger.warning("Unusable forecast values for %s: %r", city, daily)
            return None
        return f"{low}°C – {high}°C, précipitations: {wet} mm"

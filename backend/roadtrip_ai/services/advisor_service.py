import logging
import time
from typing import Any, Dict, Optional

from roadtrip_ai.cache.keys import derive_key
from roadtrip_ai.cache.store import TTLCache
from roadtrip_ai.core.config import settings
from roadtrip_ai.core.defaults import (
    DEFAULT_TRIP_DAYS,
    ERROR_TYPE,
    OFF_TOPIC_MESSAGE,
    TO_DEFINE,
    UNKNOWN_PLACE,
)
from roadtrip_ai.core.errors import GenerationFailure, ValidationRejection
from roadtrip_ai.llm.advisor import LLMAdvisor, MockAdvisorBackend
from roadtrip_ai.llm.backends.ollama_backend import OllamaAdvisorBackend
from roadtrip_ai.llm.client import AdvisorBackend, AdvisorContext
from roadtrip_ai.llm.itinerary import ensure_shape, fallback_itinerary, parse_strict_json
from roadtrip_ai.llm.tools.weather_tool import WeatherTool
from roadtrip_ai.models.domain import AdvisorRequest
from roadtrip_ai.query.admissibility import is_roadtrip_related
from roadtrip_ai.query.duration import extract_duration, validate_days

logger = logging.getLogger(__name__)


def error_payload(message: str) -> Dict[str, Any]:
    return {"type": ERROR_TYPE, "message": message}


def _default_backend() -> AdvisorBackend:
    if settings.llm_provider.lower() == "ollama":
        return OllamaAdvisorBackend()
    return MockAdvisorBackend()


class AdvisorService:
    def __init__(
        self,
        cache: Optional[TTLCache] = None,
        backend: Optional[AdvisorBackend] = None,
        weather_tool: Optional[WeatherTool] = None,
        advisor: Optional[LLMAdvisor] = None,
    ):
        self.cache = cache if cache is not None else TTLCache(settings.cache_ttl_seconds)
        self.advisor = advisor or LLMAdvisor(backend=backend or _default_backend())
        self.weather_tool = weather_tool
        if self.weather_tool is None and settings.weather_enabled:
            self.weather_tool = WeatherTool()

    def _resolve_duration(self, request: AdvisorRequest) -> int:
        if request.duration:
            result = validate_days(request.duration)
        else:
            result = extract_duration(request.query)
        if result.error:
            raise ValidationRejection(result.error)
        return result.days or DEFAULT_TRIP_DAYS

    def _validate(self, request: AdvisorRequest) -> int:
        if not is_roadtrip_related(request.query):
            raise ValidationRejection(OFF_TOPIC_MESSAGE)
        return self._resolve_duration(request)

    def _add_weather(self, itinerary: Dict[str, Any]) -> None:
        days = itinerary.get("itineraire") or []
        for day in days[: settings.weather_days]:
            place = day.get("lieu")
            if not place or place == UNKNOWN_PLACE:
                place = itinerary.get("destination")
            try:
                description = self.weather_tool.describe_today(place) if place else None
            except Exception as exc:  # noqa: BLE001
                logger.warning("Weather lookup failed for %s: %s", place, exc)
                description = None
            day["meteo"] = description or TO_DEFINE

    def generate_roadtrip_advisor(self, request: AdvisorRequest) -> Dict[str, Any]:
        started = time.monotonic()
        try:
            request.duration = self._validate(request)
        except ValidationRejection as exc:
            logger.info("Query rejected: %s", exc)
            return error_payload(str(exc))

        cache_key = derive_key(request)
        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.info("Itinerary served from cache (%s)", cache_key[:20])
            return cached

        context = AdvisorContext(request=request, duration_days=request.duration)
        try:
            logger.info("Generating itinerary for %r (%d days)", request.query[:80], request.duration)
            raw = self.advisor.complete(context)
            itinerary = ensure_shape(parse_strict_json(raw))
        except GenerationFailure as exc:
            logger.error("Generation failed, serving fallback itinerary: %s", exc)
            return fallback_itinerary(request.location, request.duration)

        if request.include_weather and self.weather_tool and itinerary["itineraire"]:
            self._add_weather(itinerary)

        self.cache.set(cache_key, itinerary)
        logger.info(
            "Itinerary ready: %s (%.0f ms)",
            itinerary["destination"],
            (time.monotonic() - started) * 1000,
        )
        return itinerary

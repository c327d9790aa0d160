import json

from roadtrip_ai.cache.store import TTLCache
from roadtrip_ai.core.defaults import MAX_DAYS_MESSAGE, OFF_TOPIC_MESSAGE, TO_DEFINE
from roadtrip_ai.core.errors import GenerationFailure
from roadtrip_ai.llm.advisor import LLMAdvisor, MockAdvisorBackend
from roadtrip_ai.models.domain import AdvisorRequest
from roadtrip_ai.services.advisor_service import AdvisorService


class StubWeather:
    def __init__(self, description="18°C – 25°C, précipitations: 0 mm"):
        self.description = description
        self.cities = []

    def describe_today(self, city):
        self.cities.append(city)
        return self.description


class CountingBackend(MockAdvisorBackend):
    def __init__(self):
        self.calls = 0

    def complete(self, context):
        self.calls += 1
        return super().complete(context)


class FailingBackend:
    def complete(self, context):
        raise GenerationFailure("model offline")


def make_service(backend=None, weather=None):
    return AdvisorService(
        cache=TTLCache(ttl_seconds=60),
        backend=backend or MockAdvisorBackend(),
        weather_tool=weather or StubWeather(),
    )


def test_itinerary_for_admissible_query():
    weather = StubWeather()
    service = make_service(weather=weather)

    itinerary = service.generate_roadtrip_advisor(
        AdvisorRequest(query="Roadtrip de 10 jours en Islande")
    )

    assert itinerary["type"] == "roadtrip_itinerary"
    assert itinerary["destination"] == "Islande"
    assert itinerary["duree_recommandee"] == "10 jours"
    assert len(itinerary["itineraire"]) == 10
    assert itinerary["budget_estime"]["total"] == "1\u202f900€"
    assert all("meteo" in day for day in itinerary["itineraire"][:5])
    assert all("meteo" not in day for day in itinerary["itineraire"][5:])
    assert weather.cities[0] == "Islande"


def test_duration_defaults_to_a_week():
    itinerary = make_service().generate_roadtrip_advisor(AdvisorRequest(query="Roadtrip en Italie"))
    assert len(itinerary["itineraire"]) == 7


def test_weather_can_be_skipped():
    weather = StubWeather()
    service = make_service(weather=weather)
    itinerary = service.generate_roadtrip_advisor(
        AdvisorRequest(query="Roadtrip en Italie", include_weather=False)
    )
    assert weather.cities == []
    assert "meteo" not in itinerary["itineraire"][0]


def test_missing_weather_becomes_placeholder():
    service = make_service(weather=StubWeather(description=None))
    itinerary = service.generate_roadtrip_advisor(AdvisorRequest(query="Roadtrip en Italie", duration=2))
    assert itinerary["itineraire"][0]["meteo"] == TO_DEFINE


def test_repeated_request_is_served_from_cache():
    backend = CountingBackend()
    service = make_service(backend=backend)

    first = service.generate_roadtrip_advisor(
        AdvisorRequest(query="Roadtrip en Grèce", interests=["plage", "histoire"])
    )
    second = service.generate_roadtrip_advisor(
        AdvisorRequest(query="Roadtrip en Grèce", interests=["histoire", "plage"])
    )

    assert backend.calls == 1
    assert first == second


def test_off_topic_query_is_rejected():
    result = make_service().generate_roadtrip_advisor(AdvisorRequest(query="Quelle heure est-il ?"))
    assert result == {"type": "error", "message": OFF_TOPIC_MESSAGE}


def test_too_long_trip_is_rejected():
    service = make_service()
    from_text = service.generate_roadtrip_advisor(AdvisorRequest(query="Roadtrip de 3 semaines en Italie"))
    explicit = service.generate_roadtrip_advisor(AdvisorRequest(query="Roadtrip en Italie", duration=20))
    assert from_text == {"type": "error", "message": MAX_DAYS_MESSAGE}
    assert explicit == {"type": "error", "message": MAX_DAYS_MESSAGE}


def test_generation_failure_serves_fallback():
    service = AdvisorService(
        cache=TTLCache(ttl_seconds=60),
        weather_tool=StubWeather(),
        advisor=LLMAdvisor(backend=FailingBackend(), retries=0, sleep=lambda _: None),
    )
    result = service.generate_roadtrip_advisor(
        AdvisorRequest(query="Roadtrip en Italie", location="Toscane", duration=5)
    )
    assert result["destination"] == "Toscane"
    assert result["duree_recommandee"] == "5 jours"
    assert result["itineraire"] == []
    assert len(service.cache) == 0


def test_non_json_answer_serves_fallback():
    class ChattyBackend:
        def complete(self, context):
            return "Je n'ai pas compris."

    service = make_service(backend=ChattyBackend())
    result = service.generate_roadtrip_advisor(AdvisorRequest(query="Roadtrip en Italie"))
    assert result["type"] == "roadtrip_itinerary"
    assert result["itineraire"] == []


def test_advisor_retries_then_succeeds():
    class FlakyBackend:
        def __init__(self):
            self.calls = 0

        def complete(self, context):
            self.calls += 1
            if self.calls < 3:
                raise RuntimeError("timeout")
            return json.dumps({"destination": "Corse"})

    sleeps = []
    backend = FlakyBackend()
    advisor = LLMAdvisor(backend=backend, retries=2, retry_delay=0.5, sleep=sleeps.append)

    from roadtrip_ai.llm.client import AdvisorContext

    raw = advisor.complete(AdvisorContext(request=AdvisorRequest(query="Roadtrip"), duration_days=3))
    assert json.loads(raw) == {"destination": "Corse"}
    assert sleeps == [0.5, 1.0]


def test_negative_duration_falls_back_to_default():
    itinerary = make_service().generate_roadtrip_advisor(
        AdvisorRequest(query="Roadtrip en Italie", duration=-3)
    )
    assert itinerary["duree_recommandee"] == "7 jours"
    assert len(itinerary["itineraire"]) == 7


def test_broken_weather_lookup_keeps_itinerary():
    class BrokenWeather:
        def describe_today(self, city):
            raise AttributeError("'list' object has no attribute 'get'")

    service = make_service(weather=BrokenWeather())
    itinerary = service.generate_roadtrip_advisor(AdvisorRequest(query="Roadtrip en Italie", duration=2))

    assert itinerary["type"] == "roadtrip_itinerary"
    assert [day["meteo"] for day in itinerary["itineraire"]] == [TO_DEFINE, TO_DEFINE]

import asyncio

import pytest
import requests

from roadtrip_ai.chat.http_gateway import HttpAssistantGateway
from roadtrip_ai.core.errors import GenerationFailure, PersistenceFailure
from roadtrip_ai.models.domain import Role


class FakeResponse:
    def __init__(self, payload=None, status=200, text=""):
        self.payload = payload
        self.status = status
        self.text = text

    def raise_for_status(self):
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status} error")

    def json(self):
        if self.payload is None:
            raise ValueError("no json")
        return self.payload


class FakeHttpSession:
    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse({})
        self.error = error
        self.calls = []

    def post(self, url, json=None, timeout=None):
        self.calls.append(("POST", url, json))
        if self.error:
            raise self.error
        return self.response

    def get(self, url, timeout=None):
        self.calls.append(("GET", url, None))
        if self.error:
            raise self.error
        return self.response


def test_persist_posts_message():
    session = FakeHttpSession()
    gateway = HttpAssistantGateway(base_url="http://api/", session=session)

    asyncio.run(gateway.persist_message(Role.user, "Salut", "c1"))

    assert session.calls == [
        ("POST", "http://api/ai/messages", {"role": "user", "content": "Salut", "conversationId": "c1"})
    ]


def test_persist_failure_is_wrapped():
    gateway = HttpAssistantGateway(
        base_url="http://api", session=FakeHttpSession(error=requests.ConnectionError("refused"))
    )
    with pytest.raises(PersistenceFailure):
        asyncio.run(gateway.persist_message(Role.assistant, "Oui", "c1"))


def test_generate_returns_json_or_text():
    json_gateway = HttpAssistantGateway(
        base_url="http://api", session=FakeHttpSession(FakeResponse({"type": "roadtrip_itinerary"}))
    )
    text_gateway = HttpAssistantGateway(
        base_url="http://api", session=FakeHttpSession(FakeResponse(text="bonjour"))
    )

    assert asyncio.run(json_gateway.generate("Roadtrip", True, "c1")) == {"type": "roadtrip_itinerary"}
    assert asyncio.run(text_gateway.generate("Roadtrip", True, "c1")) == "bonjour"
    assert json_gateway.session.calls[0][2] == {
        "prompt": "Roadtrip",
        "includeWeather": True,
        "conversationId": "c1",
    }


def test_generate_http_error_is_wrapped():
    gateway = HttpAssistantGateway(base_url="http://api", session=FakeHttpSession(FakeResponse(status=502)))
    with pytest.raises(GenerationFailure):
        asyncio.run(gateway.generate("Roadtrip", False, "c1"))


def test_load_conversation():
    session = FakeHttpSession(FakeResponse([{"role": "user", "content": "Salut"}]))
    gateway = HttpAssistantGateway(base_url="http://api", session=session)

    assert asyncio.run(gateway.load_conversation("c1")) == [{"role": "user", "content": "Salut"}]
    assert session.calls[0][:2] == ("GET", "http://api/ai/conversations/c1")


def test_timeout_defaults_to_settings():
    from roadtrip_ai.core.config import settings

    assert HttpAssistantGateway(session=FakeHttpSession()).timeout == settings.backend_timeout_seconds
    assert HttpAssistantGateway(timeout=5, session=FakeHttpSession()).timeout == 5

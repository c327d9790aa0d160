from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

import requests

from roadtrip_ai.core.config import settings
from roadtrip_ai.core.errors import GenerationFailure, PersistenceFailure
from roadtrip_ai.models.domain import Role

logger = logging.getLogger(__name__)


class HttpAssistantGateway:
    """
    AssistantGateway backed by the roadtrip API. Requests are blocking, so
    each call runs in a worker thread to keep the event loop responsive.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = (base_url or settings.backend_url).rstrip("/")
        self.timeout = timeout or settings.backend_timeout_seconds
        self.session = session or requests.Session()

    def _post_message(self, role: Role, content: str, conversation_id: str) -> None:
        try:
            resp = self.session.post(
                f"{self.base_url}/ai/messages",
                json={"role": Role(role).value, "content": content, "conversationId": conversation_id},
                timeout=self.timeout,
            )
            resp.raise_for_status()
        except requests.RequestException as exc:
            logger.error("Saving %s message failed: %s", Role(role).value, exc)
            raise PersistenceFailure(f"Impossible de sauvegarder le message: {exc}") from exc

    def _post_ask(self, query: str, include_weather: bool, conversation_id: str) -> Any:
        try:
            resp = self.session.post(
                f"{self.base_url}/ai/ask",
                json={
                    "prompt": query,
                    "includeWeather": include_weather,
                    "conversationId": conversation_id,
                },
                timeout=self.timeout,
            )
            resp.raise_for_status()
        except requests.RequestException as exc:
            logger.error("Assistant call failed: %s", exc)
            raise GenerationFailure(str(exc)) from exc

        try:
            return resp.json()
        except ValueError:
            return resp.text

    def _get_conversation(self, conversation_id: str) -> Any:
        try:
            resp = self.session.get(
                f"{self.base_url}/ai/conversations/{conversation_id}",
                timeout=self.timeout,
            )
            resp.raise_for_status()
            return resp.json()
        except (requests.RequestException, ValueError) as exc:
            logger.error("Loading conversation %s failed: %s", conversation_id, exc)
            raise PersistenceFailure(f"Impossible de charger la conversation: {exc}") from exc

    async def persist_message(self, role: Role, content: str, conversation_id: str) -> None:
        await asyncio.to_thread(self._post_message, role, content, conversation_id)

    async def generate(self, query: str, include_weather: bool, conversation_id: str) -> Any:
        return await asyncio.to_thread(self._post_ask, query, include_weather, conversation_id)

    async def load_conversation(self, conversation_id: str) -> Any:
        return await asyncio.to_thread(self._get_conversation, conversation_id)

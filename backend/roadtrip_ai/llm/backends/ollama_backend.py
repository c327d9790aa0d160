from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests

from roadtrip_ai.core.config import settings
from roadtrip_ai.core.errors import GenerationFailure
from roadtrip_ai.llm.client import AdvisorBackend, AdvisorContext

logger = logging.getLogger(__name__)


@dataclass
class OllamaAdvisorBackend(AdvisorBackend):
    """
    Advisor backend using Ollama's chat API.
    Returns the model text as-is; JSON extraction happens in the service.
    """

    host: Optional[str] = None
    model: Optional[str] = None
    timeout: Optional[float] = None

    def complete(self, context: AdvisorContext) -> str:
        payload = {
            "model": self.model or settings.ollama_model,
            "messages": context.messages(),
            "stream": False,
            "format": "json",
            "options": {"temperature": 0.7},
        }
        host = self.host or settings.ollama_host
        try:
            resp = requests.post(
                f"{host}/api/chat",
                json=payload,
                timeout=self.timeout or settings.llm_timeout_seconds,
            )
            resp.raise_for_status()
        except requests.RequestException as exc:
            logger.error("Ollama request failed: %s", exc)
            raise GenerationFailure(f"Ollama request failed: {exc}") from exc

        content = resp.json().get("message", {}).get("content", "")
        if not content.strip():
            logger.error("Empty completion from model %s", payload["model"])
            raise GenerationFailure("LLM returned an empty answer")
        return content.strip()

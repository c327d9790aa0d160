from dataclasses import dataclass
from typing import List, Protocol

from roadtrip_ai.llm.prompts import ADVISOR_SYSTEM_PROMPT
from roadtrip_ai.models.domain import AdvisorRequest


class AdvisorBackend(Protocol):
    def complete(self, context: "AdvisorContext") -> str:
        ...


@dataclass
class AdvisorContext:
    request: AdvisorRequest
    duration_days: int

    def messages(self) -> List[dict]:
        return [
            {"role": "system", "content": ADVISOR_SYSTEM_PROMPT},
            {"role": "user", "content": self.request.query},
        ]


class LLMClient:
    """
    Pluggable LLM client abstraction. The default backend is a deterministic
    mock; a real model is plugged in by implementing AdvisorBackend.complete,
    which returns the raw model text (expected to contain a JSON object).
    """

    def __init__(self, backend: AdvisorBackend):
        self.backend = backend

    def complete(self, context: AdvisorContext) -> str:
        return self.backend.complete(context)

import json
import logging
import time
from typing import Callable, List, Optional

from roadtrip_ai.core.config import settings
from roadtrip_ai.core.errors import GenerationFailure
from roadtrip_ai.llm.client import AdvisorBackend, AdvisorContext, LLMClient
from roadtrip_ai.query import vocabulary
from roadtrip_ai.query.text import normalize

logger = logging.getLogger(__name__)

DEFAULT_DESTINATION = "France"

DAILY_BUDGET = {
    "transport": 45.0,
    "hebergement": 80.0,
    "nourriture": 40.0,
    "activites": 25.0,
}

DAY_TEMPLATES = [
    {
        "description": "Arrivée et découverte du centre historique.",
        "activites": ["Balade dans la vieille ville", "Dîner local"],
        "distance": "0 km",
        "temps_conduite": "0h",
        "hebergement": "Hôtel centre-ville",
    },
    {
        "description": "Route panoramique vers l'arrière-pays.",
        "activites": ["Point de vue", "Marché de producteurs"],
        "distance": "120 km",
        "temps_conduite": "2h",
        "hebergement": "Chambre d'hôtes",
    },
    {
        "description": "Journée nature et randonnée.",
        "activites": ["Randonnée", "Pique-nique"],
        "distance": "60 km",
        "temps_conduite": "1h",
        "hebergement": "Gîte",
    },
]


class MockAdvisorBackend(AdvisorBackend):
    """
    A deterministic advisor that simulates LLM output. It guesses the
    destination from the request, spreads a fixed daily budget over the
    requested number of days and cycles through a few day templates.
    """

    def complete(self, context: AdvisorContext) -> str:
        destination = self._destination(context)
        days = max(context.duration_days, 1)
        itinerary = [
            {
                "jour": i + 1,
                "lieu": destination if i == 0 else f"{destination} - étape {i + 1}",
                **DAY_TEMPLATES[i % len(DAY_TEMPLATES)],
            }
            for i in range(days)
        ]
        budget = {name: f"{round(per_day * days)}€" for name, per_day in DAILY_BUDGET.items()}
        payload = {
            "type": "roadtrip_itinerary",
            "destination": destination,
            "duree_recommandee": f"{days} jours",
            "budget_estime": budget,
            "saison_ideale": "Printemps-Été",
            "points_interet": [destination],
            "itineraire": itinerary,
            "conseils": ["Réservez vos hébergements à l'avance"],
        }
        logger.info("Mock itinerary for %s (%d days)", destination, days)
        return json.dumps(payload, ensure_ascii=False)

    @staticmethod
    def _destination(context: AdvisorContext) -> str:
        if context.request.location:
            return context.request.location
        match = vocabulary.PLACE_PATTERN.search(normalize(context.request.query))
        if match:
            return match.group(0).split(None, 1)[1].title()
        return DEFAULT_DESTINATION


class LLMAdvisor:
    def __init__(
        self,
        backend: AdvisorBackend,
        retries: Optional[int] = None,
        retry_delay: Optional[float] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.client = LLMClient(backend=backend)
        self.retries = settings.llm_retries if retries is None else retries
        self.retry_delay = (
            settings.llm_retry_delay_seconds if retry_delay is None else retry_delay
        )
        self.sleep = sleep

    def complete(self, context: AdvisorContext) -> str:
        errors: List[Exception] = []
        for attempt in range(1, self.retries + 2):
            try:
                content = self.client.complete(context)
                logger.info("Advisor answered on attempt %d", attempt)
                return content
            except Exception as exc:  # noqa: BLE001
                errors.append(exc)
                logger.warning("Advisor attempt %d failed: %s", attempt, exc)
                if attempt <= self.retries:
                    self.sleep(self.retry_delay * attempt)
        raise GenerationFailure(str(errors[-1])) from errors[-1]

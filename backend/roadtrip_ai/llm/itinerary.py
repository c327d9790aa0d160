import json
import math
from typing import Any, Dict, Optional

from roadtrip_ai.core.defaults import (
    BUDGET_ALIASES,
    BUDGET_FIELDS,
    DEFAULT_TRIP_DAYS,
    ITINERARY_TYPE,
    TO_DEFINE,
    UNKNOWN_DESTINATION,
    UNKNOWN_DURATION,
    UNKNOWN_PLACE,
    UNKNOWN_SEASON,
)
from roadtrip_ai.core.errors import GenerationFailure
from roadtrip_ai.formatting.response_formatter import budget_total


def parse_strict_json(raw: Any) -> Any:
    """Extract the outermost JSON object from model output."""
    if not isinstance(raw, str):
        return raw
    start = raw.find("{")
    end = raw.rfind("}")
    if start == -1 or end == -1 or end <= start:
        raise GenerationFailure("Réponse IA non JSON")
    try:
        return json.loads(raw[start : end + 1])
    except json.JSONDecodeError as exc:
        raise GenerationFailure("Réponse IA non JSON") from exc


def _text(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def _string_list(value: Any) -> list:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value]


def _first_present(budget: dict, names) -> Optional[Any]:
    for name in names:
        if budget.get(name):
            return budget[name]
    return None


def _normalize_budget(raw: Any) -> Dict[str, Any]:
    budget = raw if isinstance(raw, dict) else {}
    lines = {name: _first_present(budget, BUDGET_ALIASES[name]) for name in BUDGET_FIELDS}

    total = budget_total({"total": budget.get("total"), "montant": budget.get("montant"), **lines})

    normalized = {"total": total or TO_DEFINE}
    normalized.update({name: line or TO_DEFINE for name, line in lines.items()})
    return normalized


def _normalize_day(day: Any, index: int) -> Dict[str, Any]:
    if not isinstance(day, dict):
        day = {}
    number = day.get("jour")
    if isinstance(number, bool) or not isinstance(number, (int, float)) or not math.isfinite(number):
        number = index + 1
    normalized = {
        "jour": number,
        "lieu": _text(day.get("lieu"), UNKNOWN_PLACE),
        "description": _text(day.get("description"), ""),
        "activites": _string_list(day.get("activites")),
        "distance": day.get("distance") or TO_DEFINE,
        "temps_conduite": day.get("temps_conduite") or TO_DEFINE,
    }
    if day.get("etapes_recommandees"):
        normalized["etapes_recommandees"] = _string_list(day["etapes_recommandees"])
    if day.get("hebergement"):
        normalized["hebergement"] = day["hebergement"]
    return normalized


def ensure_shape(data: Any) -> Dict[str, Any]:
    """Coerce model output into a complete itinerary, filling placeholders."""
    if not isinstance(data, dict):
        data = {}
    days = data.get("itineraire")
    shaped = {
        "type": ITINERARY_TYPE,
        "destination": _text(data.get("destination"), UNKNOWN_DESTINATION),
        "duree_recommandee": _text(data.get("duree_recommandee"), UNKNOWN_DURATION),
        "budget_estime": _normalize_budget(data.get("budget_estime")),
        "saison_ideale": _text(data.get("saison_ideale"), UNKNOWN_SEASON),
        "points_interet": _string_list(data.get("points_interet")),
        "itineraire": [_normalize_day(day, i) for i, day in enumerate(days)]
        if isinstance(days, list)
        else [],
        "conseils": _string_list(data.get("conseils")),
    }
    if isinstance(data.get("appel_action"), str) and data["appel_action"].strip():
        shaped["appel_action"] = data["appel_action"].strip()
    return shaped


def fallback_itinerary(location: Optional[str], duration: Optional[int]) -> Dict[str, Any]:
    return ensure_shape(
        {
            "destination": location or UNKNOWN_DESTINATION,
            "duree_recommandee": f"{duration or DEFAULT_TRIP_DAYS} jours",
        }
    )

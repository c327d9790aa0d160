"""Render assistant results as the chat text shown to the user.

The itinerary layout mirrors what the model is asked to produce
(see ``roadtrip_ai.llm.prompts``): French field names, French labels.
"""
import json
import math
from typing import Any, List, Optional

from roadtrip_ai.core.config import settings
from roadtrip_ai.core.defaults import (
    BUDGET_FIELDS,
    ERROR_TYPE,
    ITINERARY_TYPE,
    TO_DEFINE,
    UNKNOWN_DESTINATION,
    UNKNOWN_DURATION,
    UNKNOWN_PLACE,
    UNKNOWN_SEASON,
)
from roadtrip_ai.formatting.amounts import format_currency, parse_amount

EMPTY_RESPONSE = "❌ Aucune réponse reçue. Veuillez réessayer."
INVALID_FORMAT = "❌ Format de réponse invalide. Veuillez réessayer."
DEFAULT_ERROR_REASON = "Une erreur s'est produite."
SECTION_RULE = "───"
DAY_SEPARATOR = "🔸🔸🔸"

BUDGET_LABELS = {
    "transport": "🚌 Transport",
    "hebergement": "🏨 Hébergement",
    "nourriture": "🍽️ Nourriture",
    "activites": "🎯 Activités",
}


def budget_total(budget: dict, locale: Optional[str] = None) -> Optional[str]:
    """Stated total, or the sum of the breakdown lines when none is given."""
    total = budget.get("total") or budget.get("montant")
    if total:
        return str(total)
    lines = [budget.get(name) for name in BUDGET_FIELDS]
    summed = sum(parse_amount(line) for line in lines if line)
    if summed > 0:
        return format_currency(summed, locale or settings.display_locale)
    return None


def _day_number(day: dict, index: int) -> Any:
    number = day.get("jour")
    if isinstance(number, bool) or not isinstance(number, (int, float)):
        return index + 1
    if not math.isfinite(number):
        return index + 1
    return int(number) if float(number).is_integer() else number


def _bullets(items: List[Any], indent: str) -> str:
    return "".join(f"{indent}• {item}\n" for item in items)


def _format_day(day: Any, index: int) -> str:
    if not isinstance(day, dict):
        day = {}
    text = f"📍 **Jour {_day_number(day, index)} :** {day.get('lieu') or UNKNOWN_PLACE}\n"

    if day.get("description"):
        text += f"   📝 {day['description']}\n"
    if day.get("distance"):
        text += f"   📏 Distance : {day['distance']}\n"
    if day.get("temps_conduite"):
        text += f"   🚗 Temps de conduite : {day['temps_conduite']}\n"
    if day.get("meteo"):
        text += f"   ⛅ Météo : {day['meteo']}\n"

    stops = day.get("etapes_recommandees")
    if isinstance(stops, list) and stops:
        text += "   🎯 Étapes recommandées :\n" + _bullets(stops, "     ")

    activities = day.get("activites")
    if isinstance(activities, list) and activities:
        text += "   🎨 Activités proposées :\n" + _bullets(activities, "     ")

    if day.get("hebergement"):
        text += f"   🏨 Hébergement suggéré : {day['hebergement']}\n"
    return text


def format_itinerary(response: dict, locale: Optional[str] = None) -> str:
    budget = response.get("budget_estime")
    if not isinstance(budget, dict):
        budget = {}
    total = budget_total(budget, locale)

    destination = str(response.get("destination") or UNKNOWN_DESTINATION)
    message = f"\n✨ **ROADTRIP : {destination.upper()}**\n"
    message += f"🗓️ Durée recommandée : **{response.get('duree_recommandee') or UNKNOWN_DURATION}**\n"
    message += f"📅 Saison idéale : **{response.get('saison_ideale') or UNKNOWN_SEASON}**\n"
    message += f"💰 Budget estimé : **{total or TO_DEFINE}**\n\n"

    if any(budget.get(name) for name in BUDGET_FIELDS):
        message += "📊 **Répartition du budget :**\n"
        for name in BUDGET_FIELDS:
            if budget.get(name):
                message += f"   {BUDGET_LABELS[name]} : {budget[name]}\n"
        message += "\n"

    points = response.get("points_interet")
    if isinstance(points, list) and points:
        joined = " • ".join(str(point) for point in points)
        message += f"📌 **Points d’intérêt** : {joined}\n\n"

    days = response.get("itineraire")
    if isinstance(days, list) and days:
        message += f"🗺️ **ITINÉRAIRE DÉTAILLÉ**\n{SECTION_RULE}\n\n"
        for index, day in enumerate(days):
            message += _format_day(day, index) + "\n"
            if index < len(days) - 1:
                message += f"{DAY_SEPARATOR}\n\n"

    tips = response.get("conseils")
    if isinstance(tips, list) and tips:
        message += f"💡 **CONSEILS PRATIQUES**\n{SECTION_RULE}\n"
        message += "".join(f"🔸 {tip}\n" for tip in tips)
        message += "\n"

    if response.get("appel_action"):
        message += f"👉 {response['appel_action']}\n"

    return message


def _format_generic(response: Any) -> str:
    message = f"🤖 **RÉPONSE DE L'ASSISTANT**\n{SECTION_RULE}\n"
    if isinstance(response, dict):
        for key in ("content", "message", "reponse"):
            if response.get(key):
                return message + str(response[key])
    dump = json.dumps(response, indent=2, ensure_ascii=False, default=str)
    return message + f"```json\n{dump}\n```"


def format_response(response: Any, locale: Optional[str] = None) -> str:
    if response is None or (isinstance(response, (str, int, float)) and not response):
        return EMPTY_RESPONSE

    if isinstance(response, str):
        try:
            response = json.loads(response)
        except ValueError:
            return response
        if isinstance(response, str):
            return response

    if not isinstance(response, (dict, list)):
        return INVALID_FORMAT

    if isinstance(response, dict):
        kind = response.get("type")
        if kind == ERROR_TYPE:
            reason = response.get("message") or DEFAULT_ERROR_REASON
            return f"❌ **Erreur** : {reason}\n\nVeuillez reformuler votre demande."
        if kind == ITINERARY_TYPE:
            return format_itinerary(response, locale)

    return _format_generic(response)

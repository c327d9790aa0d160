"""Business defaults consulted once, at normalization time.

Anything shown to the user when the model left a field empty comes from
here, so call sites never invent their own placeholder text.
"""

# Product policy: itineraries are capped at this many days. Kept as a
# constant rather than a setting until product decides to make it tunable.
MAX_TRIP_DAYS = 15
DEFAULT_TRIP_DAYS = 7

MAX_DAYS_MESSAGE = "⛔ Les itinéraires sont limités à 15 jours maximum."
MONTHS_REJECTED_MESSAGE = (
    MAX_DAYS_MESSAGE
    + " Indiquez un nombre de jours ou de semaines (ex: 10 jours, 2 semaines)."
)
OFF_TOPIC_MESSAGE = "Requête non liée à un roadtrip."
ASK_FAILED_MESSAGE = "Impossible de générer l’itinéraire pour le moment."

CACHE_NAMESPACE = "roadtrip"

ITINERARY_TYPE = "roadtrip_itinerary"
ERROR_TYPE = "error"

TO_DEFINE = "À définir"
UNKNOWN_DESTINATION = "Destination inconnue"
UNKNOWN_DURATION = "X jours"
UNKNOWN_SEASON = "Inconnue"
UNKNOWN_PLACE = "Lieu non défini"

BUDGET_FIELDS = ("transport", "hebergement", "nourriture", "activites")

# Alternative keys models tend to use for the same budget line.
BUDGET_ALIASES = {
    "transport": ("transport", "transports"),
    "hebergement": ("hebergement", "logement"),
    "nourriture": ("nourriture", "repas"),
    "activites": ("activites",),
}

CURRENCY_SUFFIX = "€"

# Thousands separator per display locale (matches Intl.NumberFormat output).
THOUSANDS_SEPARATORS = {
    "fr-FR": "\u202f",
    "en-US": ",",
    "en-GB": ",",
    "de-DE": ".",
}

WELCOME_MESSAGE = (
    "Bonjour ! Je suis votre assistant ROADTRIP! \n"
    "Posez-moi vos questions sur vos prochains voyages !"
)
NEW_SESSION_MESSAGE = (
    "✨ Nouvelle session démarrée !\n"
    "Je suis prêt à vous aider à planifier votre roadtrip !"
)

"""Keyword lists and patterns behind the query heuristics.

These are data, not logic: bump ``VOCABULARY_VERSION`` whenever a list
changes so cached answers and test fixtures can be traced to a revision.
All entries are written in normalized form (no accents, lowercase).
"""
import re

VOCABULARY_VERSION = "2024.1"

INTENT_KEYWORDS = (
    "roadtrip",
    "road trip",
    "voyage",
    "voyager",
    "partir",
    "aller",
    "itineraire",
    "itinerary",
    "visiter",
    "trip",
    "travel",
)

TIME_HINTS = (
    "jour",
    "jours",
    "semaine",
    "semaines",
    "week",
    "weeks",
    "day",
    "days",
    "mois",
)

PLACE_HINTS = (
    "pays",
    "ville",
    "region",
    "destination",
)

DURATION_KEYWORD = "pendant"

DAY_UNITS = ("j", "jour", "jours", "d", "day", "days")
WEEK_UNITS = ("semaine", "semaines", "week", "weeks", "w")
MONTH_UNITS = ("mois", "month", "months")

# "8 jours", "2 semaines", "7j", "10d": no months, used as an admissibility hint.
DURATION_HINT_PATTERN = re.compile(
    r"\b(\d{1,3})\s*(j|jours?|d|day|days|semaines?|weeks?)\b", re.ASCII
)

# Same shape plus month units, used to extract the requested length.
DURATION_PATTERN = re.compile(
    r"\b(\d{1,3})\s*(j|jours?|d|day|days|semaines?|weeks?|w|mois|month|months)\b",
    re.ASCII,
)

# Preposition followed by a location-looking token ("en italie", "au japon").
PLACE_PATTERN = re.compile(r"\b(au|aux|en|a|à)\s+[a-zà-ü\-]+", re.IGNORECASE)

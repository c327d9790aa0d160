import logging

from roadtrip_ai.query import vocabulary
from roadtrip_ai.query.text import normalize

logger = logging.getLogger(__name__)


def _has_intent(text: str) -> bool:
    return any(keyword in text for keyword in vocabulary.INTENT_KEYWORDS)


def _has_time_hint(text: str) -> bool:
    return (
        any(hint in text for hint in vocabulary.TIME_HINTS)
        or vocabulary.DURATION_HINT_PATTERN.search(text) is not None
        or vocabulary.DURATION_KEYWORD in text
    )


def _has_place_hint(text: str) -> bool:
    return vocabulary.PLACE_PATTERN.search(text) is not None or any(
        hint in text for hint in vocabulary.PLACE_HINTS
    )


def is_roadtrip_related(raw) -> bool:
    """
    Decide whether free text is a roadtrip planning request.

    Needs a travel intent plus either a time signal or a place signal;
    either half alone is not enough. Anything that is not a non-empty
    string is simply rejected.
    """
    if not raw or not isinstance(raw, str):
        return False

    text = normalize(raw)
    related = _has_intent(text) and (_has_time_hint(text) or _has_place_hint(text))
    if not related:
        logger.debug("Query rejected as off-topic: %s", raw[:80])
    return related

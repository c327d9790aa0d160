from roadtrip_ai.core.defaults import (
    MAX_DAYS_MESSAGE,
    MAX_TRIP_DAYS,
    MONTHS_REJECTED_MESSAGE,
)
from roadtrip_ai.models.domain import ValidationResult
from roadtrip_ai.query import vocabulary
from roadtrip_ai.query.text import normalize


def validate_days(days: int) -> ValidationResult:
    """Apply the itinerary length ceiling to an already-known day count.

    Zero or negative counts mean "no duration", like "0 jours" in text.
    """
    if days <= 0:
        return ValidationResult()
    if days > MAX_TRIP_DAYS:
        return ValidationResult(days=None, error=MAX_DAYS_MESSAGE)
    return ValidationResult(days=days, error=None)


def extract_duration(raw) -> ValidationResult:
    """
    Read the first "<number> <unit>" duration out of free text.

    Months are always refused, weeks are converted to days, and anything
    above the ceiling is refused. No duration (or a zero one) is not an
    error: both fields come back empty.
    """
    if not raw or not isinstance(raw, str):
        return ValidationResult()

    match = vocabulary.DURATION_PATTERN.search(normalize(raw))
    if not match:
        return ValidationResult()

    count = int(match.group(1))
    if count <= 0:
        return ValidationResult()

    unit = match.group(2)
    if unit in vocabulary.MONTH_UNITS:
        return ValidationResult(days=None, error=MONTHS_REJECTED_MESSAGE)

    days = count * 7 if unit in vocabulary.WEEK_UNITS else count
    return validate_days(days)

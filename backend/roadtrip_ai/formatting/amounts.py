import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from roadtrip_ai.core.defaults import CURRENCY_SUFFIX, THOUSANDS_SEPARATORS

_NON_NUMERIC = re.compile(r"[^0-9.,\-]")
_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


def parse_amount(value: Any) -> float:
    """
    Turn a budget figure such as ``"1 200€"`` or ``"1,5k"`` into a number.

    Only meant for summing budget lines: anything unreadable counts as 0.
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)

    text = re.sub(r"\s", "", str(value).lower())
    if not text:
        return 0.0

    digits = _NON_NUMERIC.sub("", text).replace(",", ".", 1)
    match = _LEADING_NUMBER.match(digits)
    if not match:
        return 0.0
    number = float(match.group(0))
    return number * 1000 if "k" in text else number


def format_currency(amount: float, locale: str = "fr-FR") -> str:
    rounded = int(Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    separator = THOUSANDS_SEPARATORS.get(locale, THOUSANDS_SEPARATORS["fr-FR"])
    grouped = f"{rounded:,}".replace(",", separator)
    return f"{grouped}{CURRENCY_SUFFIX}"

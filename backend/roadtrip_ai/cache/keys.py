import hashlib
import json
from collections.abc import Mapping
from typing import Any, Dict, List

from roadtrip_ai.core.defaults import CACHE_NAMESPACE

# Serialized in exactly this order; the key depends on it.
KEY_FIELDS = ("query", "location", "duration", "budget", "travelStyle", "interests")

_ATTRIBUTE_NAMES = {"travelStyle": "travel_style"}


def _read(request: Any, name: str) -> Any:
    if isinstance(request, Mapping):
        if name in request:
            return request[name]
        return request.get(_ATTRIBUTE_NAMES.get(name, name))
    return getattr(request, _ATTRIBUTE_NAMES.get(name, name), None)


def _canonical_value(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _canonical_interests(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    try:
        return sorted(str(item) for item in value)
    except TypeError:
        return [str(value)]


def canonical_payload(request: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {}
    for name in KEY_FIELDS:
        if name == "interests":
            payload[name] = _canonical_interests(_read(request, name))
            continue
        value = _read(request, name)
        if value is not None:
            payload[name] = _canonical_value(value)
    return payload


def derive_key(request: Any) -> str:
    """
    Fingerprint a generation request so repeated questions reuse one answer.

    Interests are order-independent; missing fields are left out of the
    canonical JSON rather than failing. SHA-256 because a collision would
    hand a paid answer to the wrong request.
    """
    serialized = json.dumps(
        canonical_payload(request),
        ensure_ascii=False,
        separators=(",", ":"),
        default=str,
    )
    digest = hashlib.sha256(serialized.encode("utf-8")).hexdigest()
    return f"{CACHE_NAMESPACE}_{digest}"

from roadtrip_ai.cache.keys import canonical_payload, derive_key
from roadtrip_ai.cache.store import TTLCache
from roadtrip_ai.models.domain import AdvisorRequest


def test_key_is_namespaced_sha256():
    key = derive_key(AdvisorRequest(query="Roadtrip en Italie"))
    assert key == "roadtrip_fbe9262008c630899173e25654c89f0b86e79773bfba10d4eadfa3f5c1044fe0"


def test_interest_order_does_not_matter():
    first = derive_key({"query": "Roadtrip", "interests": ["vin", "plage", "musées"]})
    second = derive_key({"query": "Roadtrip", "interests": ["musées", "vin", "plage"]})
    assert first == second


def test_any_field_change_changes_key():
    base = {"query": "Roadtrip en Italie", "duration": 7, "budget": "1500"}
    assert derive_key(base) != derive_key({**base, "duration": 8})
    assert derive_key(base) != derive_key({**base, "travelStyle": "slow"})


def test_mapping_and_request_objects_agree():
    request = AdvisorRequest(query="Roadtrip", duration=5, travel_style="aventure")
    assert derive_key(request) == derive_key(
        {"query": "Roadtrip", "duration": 5.0, "travelStyle": "aventure"}
    )


def test_missing_fields_are_omitted():
    payload = canonical_payload({"query": "Roadtrip"})
    assert list(payload) == ["query", "interests"]
    assert payload["interests"] == []


def test_ttl_cache_expires_entries():
    now = [100.0]
    cache = TTLCache(ttl_seconds=10, clock=lambda: now[0])
    cache.set("k", {"v": 1})
    assert cache.get("k") == {"v": 1}
    now[0] = 110.0
    assert cache.get("k") is None
    assert len(cache) == 0


def test_ttl_cache_sweeps_expired_entries_on_write():
    now = [0.0]
    cache = TTLCache(ttl_seconds=1, clock=lambda: now[0])
    for i in range(1000):
        cache.set(f"k{i}", i)
        now[0] += 10
    assert len(cache) <= 1
    assert cache.get("k999") is None
    assert len(cache) == 0

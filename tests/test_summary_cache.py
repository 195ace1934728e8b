"""
Tests for the content-addressed summary cache
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta

from event_hub.events import to_public_event
from event_hub.schema import EventStatus
from event_hub.summary import SummaryCache, compute_content_hash

from tests.helpers import make_event


def _public(**updates):
    return to_public_event(make_event("evt-1", 10, location="Lisbon").model_copy(update=updates))


def test_hash_is_deterministic():
    assert compute_content_hash(_public()) == compute_content_hash(_public())
    assert len(compute_content_hash(_public())) == 64


def test_hash_ignores_status_and_upcoming_flag():
    assert compute_content_hash(_public()) == compute_content_hash(_public(status=EventStatus.CANCELLED))


def test_hash_changes_with_summary_fields():
    base = _public()
    original = compute_content_hash(base)

    assert compute_content_hash(_public(title="Other")) != original
    assert compute_content_hash(_public(location="Porto")) != original
    assert compute_content_hash(_public(start_at=base.start_at + timedelta(hours=1))) != original
    assert compute_content_hash(_public(end_at=base.end_at + timedelta(hours=1))) != original


def test_get_returns_text_only_for_matching_hash():
    cache = SummaryCache()
    cache.set("evt-1", "hash-a", "Summary text")

    assert cache.get("evt-1", "hash-a") == "Summary text"
    assert cache.get("evt-1", "hash-b") is None
    assert cache.get("evt-2", "hash-a") is None


def test_set_overwrites_previous_entry():
    cache = SummaryCache()
    cache.set("evt-1", "hash-a", "old")
    cache.set("evt-1", "hash-b", "new")

    assert cache.get("evt-1", "hash-a") is None
    assert cache.get("evt-1", "hash-b") == "new"
    assert len(cache) == 1


def test_invalidate_is_idempotent():
    cache = SummaryCache()
    cache.set("evt-1", "hash-a", "text")

    cache.invalidate("evt-1")
    cache.invalidate("evt-1")
    cache.invalidate("never-cached")

    assert "evt-1" not in cache
    assert cache.get("evt-1", "hash-a") is None


def test_membership_and_size_under_concurrent_writes():
    cache = SummaryCache()

    def write(index: int) -> bool:
        event_id = f"evt-{index}"
        cache.set(event_id, "hash", f"summary {index}")
        return event_id in cache

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(write, range(200)))

    assert all(results)
    assert len(cache) == 200

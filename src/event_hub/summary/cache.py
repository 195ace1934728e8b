"""
@file_name: cache.py
@author: NetMind.AI
@date: 2026-01-04
@description: Content-addressed summary cache

Maps event id -> (content hash, summary text). The hash covers the fields a
summary is derived from (title, location, startAt, endAt), so a stale entry is
detected on read by recomputing the hash.

Two invalidation paths are kept on purpose:
- EventService calls invalidate() after every update, including notes/status-only
  edits that leave the hash unchanged
- get() compares hashes, which covers any write that skipped invalidate()

No expiry, no size bound, no persistence.
"""

import hashlib
import threading
from dataclasses import dataclass
from typing import Dict, Optional

from loguru import logger

from event_hub.schema.event_schema import PublicEvent
from event_hub.utils.timezone import format_for_api


HASH_FIELD_SEPARATOR = "|"


def compute_content_hash(event: PublicEvent) -> str:
    """
    SHA-256 over title|location|startAt|endAt

    Deterministic across processes (no salt); instants use the API string form.
    """
    data = HASH_FIELD_SEPARATOR.join([
        event.title,
        event.location,
        format_for_api(event.start_at),
        format_for_api(event.end_at),
    ])
    return hashlib.sha256(data.encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class CacheEntry:
    content_hash: str
    summary: str


class SummaryCache:
    """
    Usage:
        cache = SummaryCache()
        content_hash = cache.hash(public_event)
        text = cache.get(event_id, content_hash)   # None on miss
        cache.set(event_id, content_hash, text)
        cache.invalidate(event_id)
    """

    def __init__(self):
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    @staticmethod
    def hash(event: PublicEvent) -> str:
        return compute_content_hash(event)

    def get(self, event_id: str, current_hash: str) -> Optional[str]:
        """Cached text only when an entry exists and its hash matches"""
        with self._lock:
            entry = self._entries.get(event_id)
        if entry is None:
            return None
        if entry.content_hash != current_hash:
            logger.debug(f"Summary cache stale for {event_id}")
            return None
        return entry.summary

    def set(self, event_id: str, content_hash: str, summary: str) -> None:
        with self._lock:
            self._entries[event_id] = CacheEntry(content_hash=content_hash, summary=summary)

    def invalidate(self, event_id: str) -> None:
        """Remove the entry if present; no-op otherwise"""
        with self._lock:
            removed = self._entries.pop(event_id, None)
        if removed is not None:
            logger.debug(f"Summary cache invalidated for {event_id}")

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, event_id: str) -> bool:
        with self._lock:
            return event_id in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

"""
In-process TTL memo for match responses.

Entries are keyed by namespace plus a hash of the request body and carry an
absolute expiry. Writes sweep expired entries and evict the oldest ones once
``max_entries`` is reached, so request bodies carrying whole candidate lists
cannot grow the table without bound.
"""
from __future__ import annotations

import hashlib
import json
import logging
import time
from typing import Any, NamedTuple

from .config import DEFAULT_CACHE_CONFIG, CacheConfig

logger = logging.getLogger(__name__)


class _Entry(NamedTuple):
    namespace: str
    expires_at: float
    value: Any


_entries: dict[str, _Entry] = {}
_hits: int = 0
_misses: int = 0
_evictions: int = 0


def make_key(namespace: str, payload: dict) -> str:
    serialized = json.dumps(payload, sort_keys=True, default=str)
    digest = hashlib.sha256(f"{namespace}:{serialized}".encode()).hexdigest()
    return digest[:16]


def _sweep(now: float) -> int:
    expired = [key for key, entry in _entries.items() if entry.expires_at <= now]
    for key in expired:
        del _entries[key]
    return len(expired)


def cache_get(namespace: str, payload: dict, config: CacheConfig = DEFAULT_CACHE_CONFIG) -> Any | None:
    global _hits, _misses
    if not config.enabled:
        return None
    key = make_key(namespace, payload)
    entry = _entries.get(key)
    if entry is not None and entry.expires_at > time.time():
        _hits += 1
        return entry.value
    if entry is not None:
        del _entries[key]
    _misses += 1
    return None


def cache_set(namespace: str, payload: dict, value: Any, config: CacheConfig = DEFAULT_CACHE_CONFIG) -> None:
    global _evictions
    if not config.enabled or config.max_entries <= 0:
        return
    now = time.time()
    key = make_key(namespace, payload)
    _entries.pop(key, None)
    swept = _sweep(now)

    # dicts keep insertion order, so the first keys are the oldest writes
    overflow = len(_entries) - config.max_entries + 1
    for old_key in list(_entries)[: max(0, overflow)]:
        del _entries[old_key]
        _evictions += 1

    _entries[key] = _Entry(namespace, now + config.ttl_seconds, value)
    if swept:
        logger.debug("Swept %d expired match cache entries", swept)


def get_cache_stats() -> dict:
    total = _hits + _misses
    by_namespace: dict[str, int] = {}
    for entry in _entries.values():
        by_namespace[entry.namespace] = by_namespace.get(entry.namespace, 0) + 1
    return {
        "size": len(_entries),
        "by_namespace": by_namespace,
        "hits": _hits,
        "misses": _misses,
        "evictions": _evictions,
        "hit_rate": round(_hits / total * 100, 1) if total > 0 else 0.0,
    }


def clear_cache() -> None:
    global _hits, _misses, _evictions
    _entries.clear()
    _hits = 0
    _misses = 0
    _evictions = 0

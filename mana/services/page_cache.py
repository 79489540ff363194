# mana/services/page_cache.py
"""In-process cache of page context data, keyed by (page, locale).

Holds what home and contact render from the database. Settings updates drop
the affected pages so the next request rebuilds them. Builders return
``(context, cacheable)``; a context built from fallback data is served once
and not stored.
"""
import logging
from time import time
from flask import current_app

log = logging.getLogger(__name__)

_cache: dict[tuple[str, str], tuple[float, dict]] = {}


def get_or_build(page: str, locale: str, builder) -> dict:
    ttl = current_app.config.get("PAGE_CACHE_SECONDS", 300)
    key = (page, locale)
    hit = _cache.get(key)
    now = time()
    if hit and now < hit[0]:
        return hit[1]
    ctx, cacheable = builder()
    if ttl > 0 and cacheable:
        _cache[key] = (now + ttl, ctx)
    return ctx


def invalidate(*pages: str) -> int:
    stale = [k for k in _cache if not pages or k[0] in pages]
    for k in stale:
        _cache.pop(k, None)
    log.info("page cache invalidated: %s (%d entries)", ", ".join(pages) or "all", len(stale))
    return len(stale)


def cached_pages() -> set[str]:
    return {k[0] for k in _cache}

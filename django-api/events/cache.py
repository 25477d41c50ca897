"""Catalog cache keys.

Keys embed a catalog version and the current date. Bumping the version
invalidates every catalog entry at once; the date keeps the derived event
status from outliving the day it was computed on. The version is seeded from
the wall clock so a version evicted from the cache never comes back lower.
"""

import time
from datetime import date

from django.conf import settings
from django.core.cache import cache

VERSION_KEY = "events:version"


def catalog_version() -> int:
    return cache.get_or_set(VERSION_KEY, time.time_ns, timeout=None)


def bump_catalog_version() -> None:
    try:
        cache.incr(VERSION_KEY)
    except ValueError:
        cache.set(VERSION_KEY, time.time_ns(), timeout=None)


def list_key(today: date, query_string: str) -> str:
    return f"events:v{catalog_version()}:list:{today.isoformat()}:{query_string}"


def detail_key(today: date, event_id: str) -> str:
    return f"events:v{catalog_version()}:{event_id}:{today.isoformat()}"


def timeout() -> int:
    return settings.CATALOG_CACHE_TIMEOUT

"""Client-side visitor tracking: identity, storage snapshots and reporting."""

from brighten.tracking.collector import collect_snapshot
from brighten.tracking.identity import VISITOR_ID_KEY, VISITOR_ID_TTL, resolve_visitor_id
from brighten.tracking.reporter import REPORT_INTERVAL_SECONDS, StorageReporter
from brighten.tracking.stores import (
    CookieStore,
    DisabledStore,
    KeyValueStore,
    MemoryStore,
    StorageAccessError,
    parse_cookie_string,
)

__all__ = [
    "collect_snapshot",
    "VISITOR_ID_KEY",
    "VISITOR_ID_TTL",
    "resolve_visitor_id",
    "REPORT_INTERVAL_SECONDS",
    "StorageReporter",
    "CookieStore",
    "DisabledStore",
    "KeyValueStore",
    "MemoryStore",
    "StorageAccessError",
    "parse_cookie_string",
]

"""Anonymous visitor identity.

The visitor id is a uuid4 persisted under ``visitor_id`` for a year. When
the store is unusable the resolver still answers, with a fresh id per call.
"""

import uuid
from datetime import timedelta

import structlog

from brighten.tracking.stores import KeyValueStore, StorageAccessError

logger = structlog.get_logger()

VISITOR_ID_KEY = "visitor_id"
VISITOR_ID_TTL = timedelta(days=365)


def generate_visitor_id() -> str:
    return str(uuid.uuid4())


def read_visitor_id(store: KeyValueStore) -> str | None:
    """The persisted visitor id, or None when absent or unreadable."""
    try:
        return store.get(VISITOR_ID_KEY) or None
    except StorageAccessError as e:
        logger.warning("Visitor id store unreadable", error=str(e))
        return None


def persist_visitor_id(store: KeyValueStore, visitor_id: str) -> bool:
    """Store a visitor id. Returns False if the store rejected it."""
    try:
        store.set(VISITOR_ID_KEY, visitor_id, ttl=VISITOR_ID_TTL)
    except StorageAccessError as e:
        logger.warning("Could not persist visitor id", error=str(e))
        return False
    return True


def resolve_visitor_id(store: KeyValueStore) -> str:
    """Return the stable visitor id, minting and persisting one if needed.

    Repeated calls against a working store return the same id.
    """
    visitor_id = read_visitor_id(store)
    if visitor_id:
        return visitor_id

    visitor_id = generate_visitor_id()
    if persist_visitor_id(store, visitor_id):
        logger.debug("Visitor id created", visitor_id=visitor_id)
    return visitor_id

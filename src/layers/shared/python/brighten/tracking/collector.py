"""Raw storage snapshot collection."""

import structlog

from brighten.models.visitor import RawStorageData
from brighten.tracking.stores import KeyValueStore

logger = structlog.get_logger()


def read_store(store: KeyValueStore | None, name: str) -> dict[str, str]:
    """Copy every key/value of a store verbatim.

    An absent store, or one that fails while being read, yields ``{}``.
    """
    if store is None:
        return {}
    try:
        return {key: value for key, value in store.items()}
    except Exception as e:
        logger.warning("Storage read failed", store=name, error=str(e))
        return {}


def collect_snapshot(
    cookies: KeyValueStore | None = None,
    local_storage: KeyValueStore | None = None,
    session_storage: KeyValueStore | None = None,
) -> RawStorageData:
    """Snapshot all three stores; one failing store never blocks the others."""
    return RawStorageData(
        cookies=read_store(cookies, "cookies"),
        local_storage=read_store(local_storage, "localStorage"),
        session_storage=read_store(session_storage, "sessionStorage"),
    )

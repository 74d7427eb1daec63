"""Periodic storage reporter.

Posts a raw storage snapshot to the storage endpoint once on start and then
every ``REPORT_INTERVAL_SECONDS``. Sends are fire-and-forget: the timer never
waits for a response, and a failed send is logged and dropped.
"""

import asyncio
import os

import httpx
import structlog

from brighten.models.base import utc_now
from brighten.tracking.collector import collect_snapshot
from brighten.tracking.identity import (
    VISITOR_ID_KEY,
    persist_visitor_id,
    read_visitor_id,
    resolve_visitor_id,
)
from brighten.tracking.stores import KeyValueStore

logger = structlog.get_logger()

REPORT_INTERVAL_SECONDS = 30.0
DEFAULT_ENDPOINT = "https://dev.brightensolution.com/api/storage-data"
REQUEST_TIMEOUT_SECONDS = 10.0


def default_endpoint() -> str:
    return os.environ.get("BRIGHTEN_REPORT_ENDPOINT", DEFAULT_ENDPOINT)


class StorageReporter:
    """Report storage snapshots on a fixed interval."""

    def __init__(
        self,
        cookies: KeyValueStore | None = None,
        local_storage: KeyValueStore | None = None,
        session_storage: KeyValueStore | None = None,
        endpoint: str | None = None,
        interval: float = REPORT_INTERVAL_SECONDS,
        identity_store: KeyValueStore | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize the reporter.

        Args:
            cookies: Cookie store (snapshotted, and the default identity store).
            local_storage: Local storage to snapshot.
            session_storage: Session storage to snapshot.
            endpoint: Report URL. Defaults to BRIGHTEN_REPORT_ENDPOINT.
            interval: Seconds between reports.
            identity_store: Where the visitor id lives. Defaults to ``cookies``.
            client: HTTP client to use. One is created (and closed) if omitted.
        """
        self.cookies = cookies
        self.local_storage = local_storage
        self.session_storage = session_storage
        self.identity_store = identity_store or cookies
        self.endpoint = endpoint or default_endpoint()
        self.interval = interval

        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=REQUEST_TIMEOUT_SECONDS)
        self._timer: asyncio.Task | None = None
        self._in_flight: set[asyncio.Task] = set()
        self._session_id: str | None = None

    @property
    def running(self) -> bool:
        return self._timer is not None and not self._timer.done()

    async def __aenter__(self) -> "StorageReporter":
        await self.start()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.stop()

    async def start(self) -> None:
        """Send a report now and schedule the periodic ones."""
        if self.running:
            logger.warning("Storage reporter already running")
            return

        # Held for the session so a store that cannot persist still sends one id
        if self.identity_store is not None:
            self._session_id = resolve_visitor_id(self.identity_store)

        self.report_now()
        self._timer = asyncio.create_task(self._tick())
        logger.debug("Storage reporter started", endpoint=self.endpoint, interval=self.interval)

    async def stop(self) -> None:
        """Cancel the timer and let in-flight sends finish."""
        if self._timer is not None:
            self._timer.cancel()
            try:
                await self._timer
            except asyncio.CancelledError:
                pass
            self._timer = None

        if self._in_flight:
            await asyncio.gather(*self._in_flight, return_exceptions=True)

        if self._owns_client:
            await self._client.aclose()

        logger.debug("Storage reporter stopped")

    async def _tick(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            self.report_now()

    def build_payload(self) -> dict:
        """The report body: ``{timestamp, storageData}``."""
        snapshot = collect_snapshot(self.cookies, self.local_storage, self.session_storage)
        return {
            "timestamp": utc_now().isoformat(),
            "storageData": snapshot.model_dump(by_alias=True),
        }

    def report_now(self) -> asyncio.Task:
        """Snapshot and send without waiting for the response."""
        payload = self.build_payload()
        visitor_id = read_visitor_id(self.identity_store) if self.identity_store else None
        visitor_id = visitor_id or self._session_id

        task = asyncio.create_task(self._send(payload, visitor_id))
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)
        return task

    async def _send(self, payload: dict, visitor_id: str | None) -> None:
        headers = {"Connection": "keep-alive"}
        if visitor_id:
            headers["Cookie"] = f"{VISITOR_ID_KEY}={visitor_id}"

        try:
            response = await self._client.post(self.endpoint, json=payload, headers=headers)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPError as e:
            logger.warning("Storage report failed", endpoint=self.endpoint, error=str(e))
            return
        except ValueError as e:
            logger.warning("Storage report returned invalid JSON", error=str(e))
            return

        if not isinstance(body, dict):
            logger.warning("Storage report returned unexpected body", body_type=type(body).__name__)
            return

        if not body.get("success"):
            logger.warning("Storage report rejected", message=body.get("message"))
            return

        returned_id = body.get("visitorId")
        if returned_id and not visitor_id and self.identity_store is not None:
            if read_visitor_id(self.identity_store) is None:
                persist_visitor_id(self.identity_store, returned_id)

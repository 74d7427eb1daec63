"""Tests for the periodic storage reporter."""

import asyncio
import json

import httpx

from brighten.tracking.identity import VISITOR_ID_KEY
from brighten.tracking.reporter import REPORT_INTERVAL_SECONDS, StorageReporter
from brighten.tracking.stores import CookieStore, DisabledStore, MemoryStore

ENDPOINT = "https://site.test/api/storage-data"


def _recording_client(requests: list, responder=None) -> httpx.AsyncClient:
    """AsyncClient whose transport records every request."""

    def handle(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if responder:
            return responder(request)
        return httpx.Response(200, json={"success": True, "visitorId": "server-id"})

    return httpx.AsyncClient(transport=httpx.MockTransport(handle))


def test_default_interval_is_thirty_seconds():
    assert REPORT_INTERVAL_SECONDS == 30


def test_start_sends_immediately():
    requests: list[httpx.Request] = []

    async def run():
        cookies = CookieStore.from_header(f"{VISITOR_ID_KEY}=abc")
        async with _recording_client(requests) as client:
            reporter = StorageReporter(
                cookies=cookies,
                local_storage=MemoryStore({"theme": "dark"}),
                endpoint=ENDPOINT,
                client=client,
            )
            await reporter.start()
            await reporter.stop()

    asyncio.run(run())

    assert len(requests) == 1
    request = requests[0]
    assert request.method == "POST"
    assert str(request.url) == ENDPOINT
    assert request.headers["cookie"] == "visitor_id=abc"
    assert request.headers["connection"] == "keep-alive"

    body = json.loads(request.content)
    assert body["storageData"] == {
        "cookies": {"visitor_id": "abc"},
        "localStorage": {"theme": "dark"},
        "sessionStorage": {},
    }
    assert body["timestamp"].endswith("+00:00")


def test_reports_repeat_until_stopped():
    requests: list[httpx.Request] = []

    async def run():
        async with _recording_client(requests) as client:
            reporter = StorageReporter(
                cookies=CookieStore(),
                endpoint=ENDPOINT,
                interval=0.01,
                client=client,
            )
            await reporter.start()
            await asyncio.sleep(0.1)
            await reporter.stop()
            sent = len(requests)
            await asyncio.sleep(0.05)
            return sent

    sent_at_stop = asyncio.run(run())

    assert sent_at_stop >= 3
    assert len(requests) == sent_at_stop


def test_each_tick_reads_visitor_id_fresh():
    requests: list[httpx.Request] = []
    cookies = CookieStore()

    async def run():
        async with _recording_client(requests) as client:
            reporter = StorageReporter(cookies=cookies, endpoint=ENDPOINT, client=client)
            await reporter.report_now()
            cookies.set(VISITOR_ID_KEY, "later-id")
            await reporter.report_now()

    asyncio.run(run())

    assert requests[1].headers["cookie"] == "visitor_id=later-id"


def test_server_minted_id_is_persisted():
    requests: list[httpx.Request] = []
    cookies = CookieStore()

    async def run():
        async with _recording_client(requests) as client:
            reporter = StorageReporter(cookies=cookies, endpoint=ENDPOINT, client=client)
            await reporter.report_now()

    asyncio.run(run())

    assert "cookie" not in requests[0].headers
    assert cookies.get(VISITOR_ID_KEY) == "server-id"


def test_failures_are_dropped():
    requests: list[httpx.Request] = []
    cookies = CookieStore()

    def fail(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"success": False, "message": "boom"})

    async def run():
        async with _recording_client(requests, fail) as client:
            reporter = StorageReporter(cookies=cookies, endpoint=ENDPOINT, client=client)
            await reporter.report_now()
            await reporter.report_now()

    asyncio.run(run())

    assert len(requests) == 2
    assert cookies.get(VISITOR_ID_KEY) is None


def test_transport_errors_are_dropped():
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async def run():
        client = httpx.AsyncClient(transport=httpx.MockTransport(refuse))
        reporter = StorageReporter(cookies=CookieStore(), endpoint=ENDPOINT, client=client)
        await reporter.start()
        await reporter.stop()
        await client.aclose()
        return reporter.running

    assert asyncio.run(run()) is False


def test_blocked_storage_still_reports():
    requests: list[httpx.Request] = []

    async def run():
        async with _recording_client(requests) as client:
            reporter = StorageReporter(
                cookies=DisabledStore(),
                local_storage=DisabledStore(),
                endpoint=ENDPOINT,
                client=client,
            )
            await reporter.report_now()

    asyncio.run(run())

    body = json.loads(requests[0].content)
    assert body["storageData"]["cookies"] == {}
    assert body["storageData"]["localStorage"] == {}


def test_blocked_identity_sends_one_id_per_session():
    requests: list[httpx.Request] = []

    async def run():
        async with _recording_client(requests) as client:
            reporter = StorageReporter(
                cookies=DisabledStore(),
                endpoint=ENDPOINT,
                interval=0.01,
                client=client,
            )
            await reporter.start()
            await asyncio.sleep(0.05)
            await reporter.stop()

    asyncio.run(run())

    cookie_headers = {request.headers.get("cookie") for request in requests}
    assert len(requests) >= 2
    assert len(cookie_headers) == 1
    (header,) = cookie_headers
    assert header.startswith("visitor_id=")
    assert len(header) > len("visitor_id=")


def test_start_persists_a_visitor_id():
    requests: list[httpx.Request] = []
    cookies = CookieStore()

    async def run():
        async with _recording_client(requests) as client:
            reporter = StorageReporter(cookies=cookies, endpoint=ENDPOINT, client=client)
            await reporter.start()
            await reporter.stop()

    asyncio.run(run())

    visitor_id = cookies.get(VISITOR_ID_KEY)
    assert visitor_id and visitor_id != "server-id"
    assert requests[0].headers["cookie"] == f"visitor_id={visitor_id}"


def test_non_object_response_is_dropped():
    requests: list[httpx.Request] = []
    cookies = CookieStore()

    def listing(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[])

    async def run():
        async with _recording_client(requests, listing) as client:
            reporter = StorageReporter(cookies=cookies, endpoint=ENDPOINT, client=client)
            task = reporter.report_now()
            await task
            return task.exception()

    assert asyncio.run(run()) is None
    assert len(requests) == 1
    assert cookies.get(VISITOR_ID_KEY) is None

"""Shared fixtures: an in-memory Supabase stand-in and a stubbed static site."""

import json
from urllib.parse import unquote

import httpx
import pytest
from fastapi.testclient import TestClient

from troddr.core.http_client import get_http_client
from troddr.core.supabase_connection import SupabaseClient, get_supabase
from troddr.main import app

BOT_UA = "Mozilla/5.0 (compatible; Twitterbot/1.0)"
HUMAN_UA = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
)


class FakeSupabase:
    """
    Answers PostgREST-style requests from plain dicts.

    tables: {"places": [row, ...]}
    rpcs:   {"get_shared_itinerary": callable(params) -> payload}
    """

    def __init__(self):
        self.tables = {}
        self.rpcs = {}
        self.calls = []
        self.fail = False

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if self.fail:
            return httpx.Response(503, json={"message": "unavailable"})

        if path.startswith("/rest/v1/rpc/"):
            name = path.rsplit("/", 1)[-1]
            params = json.loads(request.content or b"{}")
            self.calls.append(("rpc", name, params))
            fn = self.rpcs.get(name)
            return httpx.Response(200, json=fn(params) if fn else None)

        table = path.rsplit("/", 1)[-1]
        filters = {
            key: unquote(value[3:])
            for key, value in request.url.params.items()
            if value.startswith("eq.")
        }
        self.calls.append(("select", table, filters))
        rows = [
            row for row in self.tables.get(table, [])
            if all(row.get(col) == val for col, val in filters.items())
        ]
        return httpx.Response(200, json=rows)

    def client(self) -> SupabaseClient:
        return SupabaseClient(
            "https://example.supabase.co",
            "anon-key",
            transport=httpx.MockTransport(self.handler),
        )


class FakeStaticSite:
    """Serves listings.html / guides.html / itinerary.html and /listings/<slug>."""

    def __init__(self):
        self.pages = {
            "/listings.html": "<html><head><title>Listing</title></head><body>listing page</body></html>",
            "/guides.html": "<html><head><title>Guide</title></head><body>guide page</body></html>",
            "/itinerary.html": "<html><head><title>Trip</title></head><body>itinerary page</body></html>",
        }
        self.requested = []
        self.down = False

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requested.append(str(request.url))
        if self.down:
            raise httpx.ConnectError("static origin unreachable", request=request)
        page = self.pages.get(request.url.path)
        if page is None:
            return httpx.Response(404, text="not found")
        return httpx.Response(200, text=page, headers={"content-type": "text/html; charset=utf-8"})


@pytest.fixture
def supabase():
    return FakeSupabase()


@pytest.fixture
def static_site():
    return FakeStaticSite()


@pytest.fixture
def client(supabase, static_site):
    """TestClient with Supabase and the static origin stubbed out."""

    async def override_supabase():
        sb = supabase.client()
        try:
            yield sb
        finally:
            await sb.close()

    async def override_http_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(static_site.handler)) as c:
            yield c

    app.dependency_overrides[get_supabase] = override_supabase
    app.dependency_overrides[get_http_client] = override_http_client
    yield TestClient(app)
    app.dependency_overrides.clear()

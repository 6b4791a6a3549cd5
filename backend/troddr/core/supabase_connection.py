import httpx
import logging
from typing import Any, AsyncIterator, Optional
from urllib.parse import quote

from troddr.core.config import settings
from troddr.core.logger import logs


class SupabaseError(Exception):
    """Raised when a Supabase REST or RPC call cannot be completed."""


class SupabaseClient:
    """
    Thin async client for the Supabase REST API (PostgREST).
    Uses the public anon key, so it only ever reads.
    """

    def __init__(
        self,
        base_url: str,
        anon_key: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=f"{self.base_url}/rest/v1",
            headers={
                "apikey": anon_key,
                "Authorization": f"Bearer {anon_key}",
            },
            timeout=timeout,
            transport=transport,
        )

    async def select(self, table: str, column: str, value: str) -> list[dict]:
        """Rows of `table` where `column` equals `value`."""
        # Build the query by hand: PostgREST wants `col=eq.value` verbatim
        url = f"/{table}?{column}=eq.{quote(value, safe='')}&select=*"
        data = await self._request("GET", url)
        if not isinstance(data, list):
            raise SupabaseError(f"Unexpected payload from {table}: {type(data).__name__}")
        return data

    async def rpc(self, function: str, params: dict) -> Any:
        """Calls a Postgres function exposed through /rpc."""
        return await self._request("POST", f"/rpc/{function}", json=params)

    async def _request(self, method: str, url: str, **kwargs) -> Any:
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise SupabaseError(
                f"{method} {url} returned {e.response.status_code}"
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise SupabaseError(f"{method} {url} failed: {str(e)}") from e

    async def close(self):
        await self._client.aclose()


# Dependency for FastAPI
async def get_supabase() -> AsyncIterator[SupabaseClient]:
    client = SupabaseClient(
        settings.SUPABASE_URL,
        settings.SUPABASE_ANON_KEY,
        timeout=settings.HTTP_TIMEOUT,
    )
    if not settings.SUPABASE_ANON_KEY:
        logs.log(logging.WARNING, "SUPABASE_ANON_KEY is not set - lookups will likely fail")
    try:
        yield client
    finally:
        await client.close()

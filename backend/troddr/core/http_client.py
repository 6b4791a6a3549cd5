import httpx
from typing import AsyncIterator

from troddr.core.config import settings

# Dependency for FastAPI: plain HTTP client for the static site origin
async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT, follow_redirects=True) as client:
        yield client

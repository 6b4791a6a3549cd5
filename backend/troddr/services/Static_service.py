import httpx
import logging
from typing import Optional
from urllib.parse import urlencode

from fastapi.responses import HTMLResponse, RedirectResponse, Response

from troddr.core.config import Settings, settings as default_settings
from troddr.core.logger import logs

class StaticPageService:
    """
    Serves the static pages (listings.html, guides.html, itinerary.html)
    to human visitors who hit an OG route.
    """
    def __init__(self, client: httpx.AsyncClient, settings: Settings = default_settings):
        self.client = client
        self.settings = settings

    def origin(self) -> str:
        # Fixed by config, never taken from the Host header
        return (self.settings.STATIC_ORIGIN or self.settings.SITE_BASE_URL).rstrip("/")

    def page_url(self, page: str, params: Optional[dict] = None) -> str:
        query = urlencode({k: v for k, v in (params or {}).items() if v})
        url = f"{self.origin()}/{page.lstrip('/')}"
        return f"{url}?{query}" if query else url

    async def fetch(self, url: str) -> httpx.Response:
        return await self.client.get(url)

    async def serve(self, page: str, params: Optional[dict] = None) -> Response:
        """The page's HTML, or a 302 to it when it can't be fetched."""
        url = self.page_url(page, params)
        try:
            response = await self.fetch(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logs.log(logging.WARNING, f"Static page fetch failed, redirecting: {url} ({str(e)})")
            return RedirectResponse(url, status_code=302)

        return HTMLResponse(response.text, status_code=200)

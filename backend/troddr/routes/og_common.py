import httpx
from fastapi import Depends, Request
from fastapi.responses import HTMLResponse, Response
from pydantic import BaseModel

from troddr.core.config import settings
from troddr.core.bot_detection import is_bot
from troddr.core.http_client import get_http_client
from troddr.core.og_template import render_og_page
from troddr.models.og_model import OGPage
from troddr.services.Static_service import StaticPageService

# --- Dependency Injection ---
def get_static_service(client: httpx.AsyncClient = Depends(get_http_client)) -> StaticPageService:
    return StaticPageService(client)

def wants_preview(request: Request) -> bool:
    """Bots and ?debug=1 get the preview path; everyone else the static page."""
    return is_bot(request.headers.get("user-agent", "")) or is_debug(request)

def is_debug(request: Request) -> bool:
    return request.query_params.get("debug") == "1"

def og_html_response(page: OGPage) -> HTMLResponse:
    return HTMLResponse(
        render_og_page(page, settings),
        status_code=200,
        headers={"Cache-Control": settings.OG_CACHE_CONTROL},
    )

def debug_response(payload: BaseModel) -> Response:
    return Response(
        payload.model_dump_json(exclude_none=True, indent=2),
        media_type="application/json",
    )

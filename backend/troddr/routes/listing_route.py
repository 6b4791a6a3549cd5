import httpx
import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from troddr.core.bot_detection import is_bot
from troddr.core.config import settings
from troddr.core.logger import logs
from troddr.core.og_template import inject_meta_tags, render_meta_tags
from troddr.core.supabase_connection import SupabaseClient, get_supabase
from troddr.repos.listings_repo import ListingsRepository
from troddr.routes.og_common import (
    debug_response, get_static_service, is_debug, og_html_response, wants_preview,
)
from troddr.services.Listing_service import ListingService
from troddr.services.Static_service import StaticPageService

router = APIRouter()

# --- Dependency Injection ---
def get_listings_repo(client: SupabaseClient = Depends(get_supabase)) -> ListingsRepository:
    return ListingsRepository(client)

def get_listing_service(repo: ListingsRepository = Depends(get_listings_repo)) -> ListingService:
    return ListingService(repo)

@router.get("/api/og/{slug}")
async def listing_og_endpoint(
    slug: str,
    request: Request,
    service: ListingService = Depends(get_listing_service),
    static: StaticPageService = Depends(get_static_service),
) -> Response:
    if not wants_preview(request):
        return await static.serve("listings.html", {"slug": slug})

    try:
        listing = await service.get_listing(slug)
        if is_debug(request):
            return debug_response(service.debug_info(slug, listing))
        return og_html_response(service.build_page(slug, listing))
    except Exception as e:
        logs.log(logging.ERROR, f"Error in listing_og_endpoint: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

@router.get("/api/listing-og/{slug}")
async def listing_inject_endpoint(
    slug: str,
    request: Request,
    service: ListingService = Depends(get_listing_service),
    static: StaticPageService = Depends(get_static_service),
) -> Response:
    """
    Proxies the origin's /listings/{slug} page and, for bots, swaps its
    <title> for the listing's OG tags.
    """
    url = static.page_url(f"listings/{slug}")
    try:
        origin = await static.fetch(url)
    except httpx.HTTPError as e:
        logs.log(logging.WARNING, f"Origin fetch failed for {url}: {str(e)}")
        return RedirectResponse(url, status_code=302)

    if not origin.is_success or not is_bot(request.headers.get("user-agent", "")):
        return Response(
            origin.content,
            status_code=origin.status_code,
            media_type=origin.headers.get("content-type"),
        )

    listing = await service.get_listing(slug)
    fragment = render_meta_tags(service.build_page(slug, listing), settings)
    return HTMLResponse(inject_meta_tags(origin.text, fragment), status_code=origin.status_code)

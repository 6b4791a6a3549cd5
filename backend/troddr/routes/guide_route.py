import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response

from troddr.core.logger import logs
from troddr.core.supabase_connection import SupabaseClient, get_supabase
from troddr.repos.guides_repo import GuidesRepository
from troddr.routes.og_common import (
    debug_response, get_static_service, is_debug, og_html_response, wants_preview,
)
from troddr.services.Guide_service import GuideService
from troddr.services.Static_service import StaticPageService

router = APIRouter()

def get_guides_repo(client: SupabaseClient = Depends(get_supabase)) -> GuidesRepository:
    return GuidesRepository(client)

def get_guide_service(repo: GuidesRepository = Depends(get_guides_repo)) -> GuideService:
    return GuideService(repo)

@router.get("/api/og/guides/{slug}")
async def guide_og_endpoint(
    slug: str,
    request: Request,
    service: GuideService = Depends(get_guide_service),
    static: StaticPageService = Depends(get_static_service),
) -> Response:
    if not wants_preview(request):
        return await static.serve("guides.html", {"slug": slug})

    try:
        guide = await service.get_guide(slug)
        if is_debug(request):
            return debug_response(service.debug_info(slug, guide))
        return og_html_response(service.build_page(slug, guide))
    except Exception as e:
        logs.log(logging.ERROR, f"Error in guide_og_endpoint: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

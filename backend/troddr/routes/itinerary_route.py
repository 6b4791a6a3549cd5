import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import Response

from troddr.core.logger import logs
from troddr.core.supabase_connection import SupabaseClient, get_supabase
from troddr.repos.itineraries_repo import ItinerariesRepository
from troddr.routes.og_common import (
    debug_response, get_static_service, is_debug, og_html_response, wants_preview,
)
from troddr.services.Itinerary_service import ItineraryService
from troddr.services.Static_service import StaticPageService

router = APIRouter()

def get_itineraries_repo(client: SupabaseClient = Depends(get_supabase)) -> ItinerariesRepository:
    return ItinerariesRepository(client)

def get_itinerary_service(repo: ItinerariesRepository = Depends(get_itineraries_repo)) -> ItineraryService:
    return ItineraryService(repo)

# Handles /itinerary and /itinerary?tripId=xxx
@router.get("/api/og/itinerary")
async def itinerary_query_og_endpoint(
    request: Request,
    trip_id: Optional[str] = Query(None, alias="tripId"),
    destination: Optional[str] = None,
    service: ItineraryService = Depends(get_itinerary_service),
    static: StaticPageService = Depends(get_static_service),
) -> Response:
    if not wants_preview(request):
        return await static.serve(
            "itinerary.html", {"tripId": trip_id, "destination": destination}
        )

    try:
        itinerary = await service.get_itinerary(trip_id)
        if is_debug(request):
            return debug_response(service.debug_info(itinerary, trip_id, by_query=True))
        page = service.build_page(
            itinerary,
            canonical=service.query_canonical(trip_id),
            destination_hint=destination,
            use_items_count=False,
        )
        return og_html_response(page)
    except Exception as e:
        logs.log(logging.ERROR, f"Error in itinerary_query_og_endpoint: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

@router.get("/api/og/itinerary/{token}")
async def itinerary_og_endpoint(
    token: str,
    request: Request,
    service: ItineraryService = Depends(get_itinerary_service),
    static: StaticPageService = Depends(get_static_service),
) -> Response:
    if not wants_preview(request):
        return await static.serve("itinerary.html", {"tripId": token})

    try:
        itinerary = await service.get_itinerary(token)
        if is_debug(request):
            return debug_response(service.debug_info(itinerary, token))
        return og_html_response(service.build_page(itinerary, canonical=service.token_canonical(token)))
    except Exception as e:
        logs.log(logging.ERROR, f"Error in itinerary_og_endpoint: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

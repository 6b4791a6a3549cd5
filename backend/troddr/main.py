from fastapi import FastAPI

from troddr.middleware import BotRewriteMiddleware
from troddr.routes.contact_route import router as contact_router
from troddr.routes.guide_route import router as guide_router
from troddr.routes.itinerary_route import router as itinerary_router
from troddr.routes.listing_route import router as listing_router

app = FastAPI(title="TRODDR Link Previews")
app.add_middleware(BotRewriteMiddleware)
# Itinerary and guide routes first: /api/og/{slug} would otherwise swallow /api/og/itinerary
app.include_router(itinerary_router)
app.include_router(guide_router)
app.include_router(listing_router)
app.include_router(contact_router)

# --- Root Endpoint ---
@app.get("/")
async def root():
    return {
        "message": "TRODDR link preview service",
        "status": "running",
        "endpoints": {
            "health": "/health",
            "listing": "/api/og/{slug}",
            "guide": "/api/og/guides/{slug}",
            "itinerary": "/api/og/itinerary/{token}",
            "contact": "/api/contact",
            "docs": "/docs"
        },
        "version": "1.0.0"
    }

# --- Health Check ---
@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "TRODDR Link Previews"}

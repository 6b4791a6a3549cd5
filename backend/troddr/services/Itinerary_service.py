import logging
from datetime import datetime
from typing import Optional
from urllib.parse import quote, urlencode

from troddr.core.config import Settings, settings as default_settings
from troddr.core.logger import logs
from troddr.core.og_template import first_image, first_image_of, make_absolute
from troddr.models.itinerary_model import Itinerary, ItineraryDebug
from troddr.models.og_model import OGPage
from troddr.repos.itineraries_repo import ItinerariesRepository, token_variants

DEFAULT_TITLE = "My Jamaica Trip"
DEFAULT_DESTINATION = "Jamaica"

class ItineraryService:
    def __init__(self, repo: ItinerariesRepository, settings: Settings = default_settings):
        self.repo = repo
        self.settings = settings

    async def get_itinerary(self, token: Optional[str]) -> Optional[Itinerary]:
        if not token:
            return None
        itinerary = await self.repo.fetch_by_token(token)
        if itinerary is None:
            logs.log(logging.INFO, f"No shared itinerary for token '{token}' ({len(token_variants(token))} formats tried)")
        return itinerary

    def token_canonical(self, token: str) -> str:
        return f"{self.settings.SITE_BASE_URL.rstrip('/')}/itinerary/{quote(token, safe='')}"

    def query_canonical(self, trip_id: Optional[str]) -> str:
        base_url = f"{self.settings.SITE_BASE_URL.rstrip('/')}/itinerary"
        return f"{base_url}?{urlencode({'tripId': trip_id})}" if trip_id else base_url

    def image_for(self, itinerary: Optional[Itinerary]) -> Optional[str]:
        if itinerary is None:
            return None
        # Prefer the first stop that has a picture
        for item in itinerary.items or []:
            if isinstance(item, dict) and item.get("image"):
                image = first_image(item["image"])
                if image:
                    return make_absolute(image, self.settings.SITE_BASE_URL)
        image = first_image_of(itinerary.cover_image, itinerary.image, itinerary.image_url, itinerary.thumbnail)
        return make_absolute(image, self.settings.SITE_BASE_URL)

    def build_page(
        self,
        itinerary: Optional[Itinerary],
        canonical: str,
        destination_hint: Optional[str] = None,
        use_items_count: bool = True,
    ) -> OGPage:
        site = self.settings.SITE_NAME
        title = (itinerary and itinerary.title) or DEFAULT_TITLE
        destination = (itinerary and itinerary.destination) or destination_hint or DEFAULT_DESTINATION

        stops = len(itinerary.items or []) if itinerary else 0
        if not stops and use_items_count and itinerary:
            stops = itinerary.items_count or 0

        if stops:
            dates = date_range(itinerary)
            description = (
                f"I'm going to {destination}{f' {dates}' if dates else ''} with {stops} stops! "
                f"Check out my trip plans on {site}!"
            )
        else:
            description = f"Check out this {destination} itinerary on {site}!"

        image = self.image_for(itinerary) or self.settings.default_image_url
        logs.log(logging.INFO, "Itinerary OG meta", {"title": title, "image": image, "found": itinerary is not None})
        return OGPage(
            title=f"{title} | {site} Itinerary",
            description=description,
            image=image,
            canonical=canonical,
            heading=title,
            subheading=destination,
        )

    def debug_info(
        self, itinerary: Optional[Itinerary], token: Optional[str], by_query: bool = False
    ) -> ItineraryDebug:
        fields = dict(
            tokenFormatsTried=token_variants(token),
            found=itinerary is not None,
            title=itinerary.title if itinerary else None,
            destination=itinerary.destination if itinerary else None,
            itemsCount=len(itinerary.items or []) if itinerary else 0,
            start_date=itinerary.start_date if itinerary else None,
            end_date=itinerary.end_date if itinerary else None,
            allFields=list(itinerary.model_dump(exclude_unset=True).keys()) if itinerary else [],
        )
        if by_query:
            return ItineraryDebug(tripId=token, **fields)
        return ItineraryDebug(token=token, **fields)


def format_short_date(value: Optional[str]) -> str:
    """'2025-03-07' -> 'Mar 7'; anything unparseable -> ''."""
    if not value:
        return ""
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return ""
    return f"{parsed:%b} {parsed.day}"


def date_range(itinerary: Optional[Itinerary]) -> str:
    if not itinerary:
        return ""
    start = format_short_date(itinerary.start_date)
    end = format_short_date(itinerary.end_date)
    if not start or not end:
        return ""
    return f"({start}–{end})"

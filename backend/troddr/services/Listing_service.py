import logging
from typing import Optional
from urllib.parse import quote

from troddr.core.config import Settings, settings as default_settings
from troddr.core.logger import logs
from troddr.core.og_template import first_image, humanize_slug, make_absolute, truncate
from troddr.models.listing_model import Listing, ListingDebug
from troddr.models.og_model import OGPage
from troddr.repos.listings_repo import ListingsRepository

class ListingService:
    def __init__(self, repo: ListingsRepository, settings: Settings = default_settings):
        self.repo = repo
        self.settings = settings

    async def get_listing(self, slug: str) -> Optional[Listing]:
        listing = await self.repo.fetch_by_slug(slug)
        if listing is None:
            logs.log(logging.INFO, f"No listing found for slug '{slug}', using defaults")
        return listing

    def image_for(self, listing: Optional[Listing]) -> Optional[str]:
        if listing is None:
            return None
        return make_absolute(first_image(listing.image), self.settings.SITE_BASE_URL)

    def build_page(self, slug: str, listing: Optional[Listing]) -> OGPage:
        base_url = self.settings.SITE_BASE_URL.rstrip("/")
        name = (listing and listing.name) or humanize_slug(slug)
        location = ", ".join(
            part for part in (listing and listing.town, listing and listing.parish) if part
        )
        where = f" in {location}" if location else ""

        if listing and listing.description:
            description = truncate(listing.description, self.settings.DESCRIPTION_MAX_LENGTH)
        else:
            description = f"Check out {name}{where} on {self.settings.SITE_NAME}!"

        image = self.image_for(listing) or self.settings.default_image_url
        page = OGPage(
            title=f"{name}{where} — {self.settings.SITE_NAME}",
            description=description,
            image=image,
            canonical=f"{base_url}/listings/{quote(slug, safe='')}",
            heading=name,
            subheading=location or None,
        )
        logs.log(logging.INFO, "OG meta", {"slug": slug, "name": name, "image": image, "found": listing is not None})
        return page

    def debug_info(self, slug: str, listing: Optional[Listing]) -> ListingDebug:
        image_field = listing.image if listing else None
        return ListingDebug(
            slug=slug,
            found=listing is not None,
            name=listing.name if listing else None,
            town=listing.town if listing else None,
            parish=listing.parish if listing else None,
            imageField=image_field,
            imageFieldType=_js_type(image_field),
            extractedImage=self.image_for(listing),
            allFields=list(listing.model_dump(exclude_unset=True).keys()) if listing else [],
        )


def _js_type(value) -> str:
    """typeof-style label for the debug payload."""
    if value is None:
        return "undefined"
    if isinstance(value, str):
        return "string"
    return "object"

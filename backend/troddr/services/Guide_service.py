import logging
from typing import Optional
from urllib.parse import quote

from troddr.core.config import Settings, settings as default_settings
from troddr.core.logger import logs
from troddr.core.og_template import first_image_of, humanize_slug, make_absolute, truncate
from troddr.models.guide_model import Guide, GuideDebug
from troddr.models.og_model import OGPage
from troddr.repos.guides_repo import GuidesRepository

class GuideService:
    def __init__(self, repo: GuidesRepository, settings: Settings = default_settings):
        self.repo = repo
        self.settings = settings

    async def get_guide(self, slug: str) -> Optional[Guide]:
        return await self.repo.fetch_by_slug(slug)

    def image_for(self, guide: Optional[Guide]) -> Optional[str]:
        if guide is None:
            return None
        image = first_image_of(guide.image_url, guide.image, guide.cover_image, guide.thumbnail)
        return make_absolute(image, self.settings.SITE_BASE_URL)

    def build_page(self, slug: str, guide: Optional[Guide]) -> OGPage:
        base_url = self.settings.SITE_BASE_URL.rstrip("/")
        site = self.settings.SITE_NAME
        title = (guide and guide.title) or humanize_slug(slug)
        location = (guide and (guide.location or guide.destination)) or ""

        if guide and guide.description:
            description = truncate(guide.description, self.settings.DESCRIPTION_MAX_LENGTH)
        else:
            description = f"Explore {title} on {site} — your guide to the best places in Jamaica!"

        image = self.image_for(guide) or self.settings.default_image_url
        logs.log(logging.INFO, "Guide OG meta", {"slug": slug, "title": title, "image": image, "found": guide is not None})
        return OGPage(
            title=f"{title}{f' — {location}' if location else ''} | {site} Guide",
            description=description,
            image=image,
            canonical=f"{base_url}/guides/{quote(slug, safe='')}",
            heading=title,
            subheading=location or None,
        )

    def debug_info(self, slug: str, guide: Optional[Guide]) -> GuideDebug:
        return GuideDebug(
            slug=slug,
            found=guide is not None,
            title=guide.title if guide else None,
            description=guide.description if guide else None,
            imageField=(guide.image_url or guide.image) if guide else None,
            extractedImage=self.image_for(guide),
            allFields=list(guide.model_dump(exclude_unset=True).keys()) if guide else [],
        )

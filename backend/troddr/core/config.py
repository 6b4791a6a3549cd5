from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Supabase (read-only anon access)
    SUPABASE_URL: str = "https://rprpwudhplodaqmmwqkf.supabase.co"
    SUPABASE_ANON_KEY: str = ""

    # Public site
    SITE_BASE_URL: str = "https://troddr.com"
    SITE_NAME: str = "TRODDR"
    DEFAULT_OG_IMAGE: str = "/images/og-default.jpg"
    FAVICON_PATH: str = "/images/troddr_logo.png"

    # Where listings.html / guides.html / itinerary.html are hosted.
    # Falls back to the origin of the incoming request when unset.
    STATIC_ORIGIN: Optional[str] = None

    OG_CACHE_CONTROL: str = "public, s-maxage=3600, stale-while-revalidate=86400"
    HTTP_TIMEOUT: float = 10.0
    DESCRIPTION_MAX_LENGTH: int = 200

    LOGGER: int = 20

    model_config = SettingsConfigDict(
        # Look for .env in the current folder OR the parent folder
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def default_image_url(self) -> str:
        return f"{self.SITE_BASE_URL.rstrip('/')}{self.DEFAULT_OG_IMAGE}"

settings = Settings()

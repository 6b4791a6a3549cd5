import logging
from typing import Optional
from pydantic import ValidationError

from troddr.core.supabase_connection import SupabaseClient, SupabaseError
from troddr.core.logger import logs
from troddr.models.guide_model import Guide

class GuidesRepository:
    def __init__(self, client: SupabaseClient):
        self.client = client
        self.table = "guides"

    async def fetch_by_slug(self, slug: str) -> Optional[Guide]:
        if not slug:
            return None
        try:
            rows = await self.client.select(self.table, "slug", slug)
            return Guide.model_validate(rows[0]) if rows else None
        except (SupabaseError, ValidationError) as e:
            logs.log(logging.ERROR, f"Failed to fetch guide '{slug}': {str(e)}")
            return None

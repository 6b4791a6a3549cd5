import logging
from typing import Optional
from pydantic import ValidationError

from troddr.core.supabase_connection import SupabaseClient, SupabaseError
from troddr.core.logger import logs
from troddr.models.listing_model import Listing

class ListingsRepository:
    def __init__(self, client: SupabaseClient):
        self.client = client
        self.table = "places"

    async def fetch_by_slug(self, slug: str) -> Optional[Listing]:
        """
        Looks a listing up by `slug`, then by `specials_slug`, then through
        the `get_place_public` RPC. Misses and failures both return None.
        """
        if not slug:
            return None
        try:
            for column in ("slug", "specials_slug"):
                rows = await self.client.select(self.table, column, slug)
                if rows:
                    return Listing.model_validate(rows[0])

            data = await self.client.rpc("get_place_public", {"_slug": slug})
            if isinstance(data, list):
                data = data[0] if data else None
            if isinstance(data, dict) and data:
                return Listing.model_validate(data)
            return None
        except (SupabaseError, ValidationError) as e:
            logs.log(logging.ERROR, f"Failed to fetch listing '{slug}': {str(e)}")
            return None

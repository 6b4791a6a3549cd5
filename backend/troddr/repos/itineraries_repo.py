import logging
import re
from typing import Any, Optional
from pydantic import ValidationError

from troddr.core.supabase_connection import SupabaseClient, SupabaseError
from troddr.core.logger import logs
from troddr.models.itinerary_model import Itinerary

_HEX32 = re.compile(r"^[0-9a-fA-F]{32}$")


def token_variants(token: Optional[str]) -> list[str]:
    """
    Share tokens get pasted both with and without UUID dashes, so try the
    token as given, then undashed, then re-dashed (8-4-4-4-12).
    """
    if not token:
        return []
    variants = [token]
    if "-" in token:
        variants.append(token.replace("-", ""))
    if _HEX32.match(token):
        variants.append(
            f"{token[:8]}-{token[8:12]}-{token[12:16]}-{token[16:20]}-{token[20:]}"
        )
    return variants


def _is_shared_itinerary(data: Any) -> bool:
    return (
        isinstance(data, dict)
        and not data.get("error")
        and bool(data.get("title") or data.get("items"))
    )


class ItinerariesRepository:
    def __init__(self, client: SupabaseClient):
        self.client = client
        self.rpc_name = "get_shared_itinerary"

    async def fetch_by_token(self, token: Optional[str]) -> Optional[Itinerary]:
        for variant in token_variants(token):
            try:
                data = await self.client.rpc(self.rpc_name, {"_token": variant})
                if _is_shared_itinerary(data):
                    return Itinerary.model_validate(data)
            except (SupabaseError, ValidationError) as e:
                logs.log(logging.ERROR, f"Itinerary lookup failed for token '{variant}': {str(e)}")
        return None

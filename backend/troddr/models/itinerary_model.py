from pydantic import BaseModel, ConfigDict
from typing import Any, List, Optional

# Array, JSON-encoded array or single URL; anything else is ignored on read
ImageField = Optional[Any]

class Itinerary(BaseModel):
    """Payload of the `get_shared_itinerary` RPC."""
    # Numeric values in text columns are kept as strings rather than rejected
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    title: Optional[str] = None
    destination: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    items: Optional[List[Any]] = None
    items_count: Optional[int] = None
    cover_image: ImageField = None
    image: ImageField = None
    image_url: ImageField = None
    thumbnail: ImageField = None

class ItineraryDebug(BaseModel):
    token: Optional[str] = None
    tripId: Optional[str] = None
    tokenFormatsTried: List[str] = []
    found: bool
    title: Optional[str] = None
    destination: Optional[str] = None
    itemsCount: int = 0
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    allFields: List[str] = []

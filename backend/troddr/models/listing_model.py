from pydantic import BaseModel, ConfigDict
from typing import Any, List, Optional

class Listing(BaseModel):
    """A row of the `places` table. Unknown columns are kept."""
    # Numeric values in text columns are kept as strings rather than rejected
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    name: Optional[str] = None
    slug: Optional[str] = None
    specials_slug: Optional[str] = None
    town: Optional[str] = None
    parish: Optional[str] = None
    description: Optional[str] = None
    # Array column, JSON-encoded array or a single URL depending on the row
    image: Optional[Any] = None

class ListingDebug(BaseModel):
    slug: str
    found: bool
    name: Optional[str] = None
    town: Optional[str] = None
    parish: Optional[str] = None
    imageField: Optional[Any] = None
    imageFieldType: str
    extractedImage: Optional[str] = None
    allFields: List[str] = []

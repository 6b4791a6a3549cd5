from pydantic import BaseModel, ConfigDict
from typing import Any, List, Optional

# Array, JSON-encoded array or single URL; anything else is ignored on read
ImageField = Optional[Any]

class Guide(BaseModel):
    # Numeric values in text columns are kept as strings rather than rejected
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    title: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    destination: Optional[str] = None
    image_url: ImageField = None
    image: ImageField = None
    cover_image: ImageField = None
    thumbnail: ImageField = None

class GuideDebug(BaseModel):
    slug: str
    found: bool
    title: Optional[str] = None
    description: Optional[str] = None
    imageField: ImageField = None
    extractedImage: Optional[str] = None
    allFields: List[str] = []

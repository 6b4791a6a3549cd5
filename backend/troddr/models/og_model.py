from pydantic import BaseModel
from typing import Optional

class OGPage(BaseModel):
    """Everything the preview template needs for one page."""
    title: str
    description: str
    image: str
    canonical: str
    heading: str
    subheading: Optional[str] = None

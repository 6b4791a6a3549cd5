"""
HTML helpers for link previews: escaping, image-field parsing and the
Open Graph / Twitter-card page template.
"""
import html
import json
import re
from typing import Any, Optional

from troddr.core.config import Settings
from troddr.models.og_model import OGPage

_WORD_START = re.compile(r"\b\w")
_TITLE_TAG = re.compile(r"<title>.*?</title>", re.IGNORECASE | re.DOTALL)
_HEAD_TAG = re.compile(r"<head>", re.IGNORECASE)


def escape_html(value: Any) -> str:
    if value is None or value == "":
        return ""
    return html.escape(str(value), quote=True)


def humanize_slug(slug: str) -> str:
    """'blue-mountain-coffee' -> 'Blue Mountain Coffee'"""
    return _WORD_START.sub(lambda m: m.group(0).upper(), slug.replace("-", " "))


def make_absolute(url: Optional[str], base: str) -> Optional[str]:
    if not url:
        return None
    if url.startswith("http"):
        return url
    return f"{base.rstrip('/')}{'' if url.startswith('/') else '/'}{url}"


def first_image(field: Any) -> Optional[str]:
    """
    Image columns come back in three shapes: a real array, a JSON-encoded
    array stored as text, or a single URL string.
    """
    if not field:
        return None

    if isinstance(field, list):
        return field[0] if isinstance(field[0], str) and field[0] else None

    if isinstance(field, str):
        trimmed = field.strip()
        if trimmed.startswith("["):
            try:
                parsed = json.loads(trimmed)
            except ValueError:
                parsed = None
            if isinstance(parsed, list):
                return first_image(parsed)
        return trimmed or None

    return None


def first_image_of(*fields: Any) -> Optional[str]:
    for field in fields:
        image = first_image(field)
        if image:
            return image
    return None


def truncate(text: str, limit: int) -> str:
    return text[:limit]


def render_meta_tags(page: OGPage, settings: Settings) -> str:
    """<title>, description, OG/Twitter tags and canonical link."""
    title = escape_html(page.title)
    description = escape_html(page.description)
    image = escape_html(page.image)
    canonical = escape_html(page.canonical)
    site_name = escape_html(settings.SITE_NAME)

    return f"""
  <title>{title}</title>
  <meta name="description" content="{description}" />

  <meta property="og:type" content="website" />
  <meta property="og:url" content="{canonical}" />
  <meta property="og:title" content="{title}" />
  <meta property="og:description" content="{description}" />
  <meta property="og:image" content="{image}" />
  <meta property="og:image:width" content="1200" />
  <meta property="og:image:height" content="630" />
  <meta property="og:site_name" content="{site_name}" />

  <meta name="twitter:card" content="summary_large_image" />
  <meta name="twitter:url" content="{canonical}" />
  <meta name="twitter:title" content="{title}" />
  <meta name="twitter:description" content="{description}" />
  <meta name="twitter:image" content="{image}" />

  <link rel="canonical" href="{canonical}" />
"""


def render_og_page(page: OGPage, settings: Settings) -> str:
    subheading = f"<p>{escape_html(page.subheading)}</p>" if page.subheading else ""

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />{render_meta_tags(page, settings)}  <link rel="icon" type="image/png" href="{escape_html(settings.FAVICON_PATH)}" />
</head>
<body>
  <h1>{escape_html(page.heading)}</h1>
  {subheading}
  <p>{escape_html(page.description)}</p>
  <p><a href="{escape_html(page.canonical)}">View on {escape_html(settings.SITE_NAME)}</a></p>
</body>
</html>"""


def inject_meta_tags(document: str, fragment: str) -> str:
    """Swap the page's own <title> for the generated head fragment."""
    document = _TITLE_TAG.sub("", document, count=1)
    return _HEAD_TAG.sub(lambda m: f"{m.group(0)}{fragment}", document, count=1)

import logging
import re
from urllib.parse import quote

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from troddr.core.bot_detection import is_bot
from troddr.core.logger import logs

# Public page path -> OG handler path, for crawler requests only
REWRITES = [
    (re.compile(r"^/listings/([^/]+)/?$"), "/api/og/{}"),
    (re.compile(r"^/guides/([^/]+)/?$"), "/api/og/guides/{}"),
    (re.compile(r"^/itinerary/([^/]+)/?$"), "/api/og/itinerary/{}"),
]


def rewrite_path(path: str, user_agent: str) -> str | None:
    if not is_bot(user_agent):
        return None
    for pattern, target in REWRITES:
        match = pattern.match(path)
        if match:
            return target.format(match.group(1))
    return None


class BotRewriteMiddleware(BaseHTTPMiddleware):
    """
    Internally rewrites bot requests for content pages to the OG handlers.
    Humans pass through to the static site untouched.
    """

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        target = rewrite_path(path, request.headers.get("user-agent", ""))
        if target:
            logs.log(logging.DEBUG, f"Rewriting bot request {path} -> {target}")
            request.scope["path"] = target
            request.scope["raw_path"] = quote(target).encode("ascii")
        return await call_next(request)

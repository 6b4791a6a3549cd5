import re
from typing import Optional

# Link-preview crawlers that need server-rendered OG tags
BOT_PATTERNS = [
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        "facebookexternalhit",
        "Facebot",
        "Twitterbot",
        "WhatsApp",
        "LinkedInBot",
        "Slackbot",
        "TelegramBot",
        "Discordbot",
        "Pinterest",
        "Applebot",
        "iMessage",
        "Googlebot",
        "bingbot",
    )
]


def is_bot(user_agent: Optional[str]) -> bool:
    if not user_agent:
        return False
    return any(pattern.search(user_agent) for pattern in BOT_PATTERNS)

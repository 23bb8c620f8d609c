"""Bot extensions loaded at startup."""

EXTENSIONS = (
    "request_bot.exts.requests.requests",
    "request_bot.exts.tools.sync",
)

"""Building blocks for Telegram clients: message views, file ids, patterns, filters and progress."""

__version__ = "0.1.0"

__all__ = [
    "types",
    "errors",
    "mime",
    "fileid",
    "patterns",
    "message",
    "participant",
    "progress",
    "filters",
    "streams",
]
"""Search functionality for memoria."""

from .service import (
    ImageDocument,
    build_search_query,
    escape_like,
    humanize_time,
    search,
)

__all__ = [
    "search",
    "build_search_query",
    "ImageDocument",
    "escape_like",
    "humanize_time",
]

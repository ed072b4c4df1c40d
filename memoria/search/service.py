#!/usr/bin/env python3
"""
Image search service for memoria.

Looks up stored images by a free-text query over name and filename, narrowed
by field tags. Tags naming a column of the images table filter that column;
any other tag is matched against the image's metadata document.

Usage:
    from memoria.search import search

    # Name or filename contains "rowi"
    results = search("rowi")

    # Stored in folder cmx_20 and tagged hobby: mangap, second page
    results = search("rowi", limit=5, page=1,
                     field_tags={"folder": "cmx_20", "hobby": "mangap"})
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple, Union

from memoria.core.constants import DEFAULT_LIMIT, IMAGE_COLUMNS
from memoria.db import fetch_all

HUMAN_TIME_FORMAT = "%d %B %Y %H:%M:%S"


@dataclass
class ImageDocument:
    """A single stored image returned by search."""

    id: str
    name: str
    link: str
    filename: str
    folder: Optional[str] = None
    created_at_human: Optional[str] = None
    updated_at_human: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "ImageDocument":
        """Build a document from an images table row."""
        return cls(
            id=str(row["id"]),
            name=row["name"],
            link=row["link"],
            filename=row["filename"],
            folder=row.get("folder"),
            created_at_human=humanize_time(row.get("created_at")),
            updated_at_human=humanize_time(row.get("updated_at")),
            metadata=row.get("metadata") or {},
        )


def humanize_time(value: Optional[datetime]) -> Optional[str]:
    """Render a timestamp for display, e.g. '05 March 2021 14:02:11'."""
    if value is None:
        return None
    return value.strftime(HUMAN_TIME_FORMAT)


def escape_like(text: str) -> str:
    """Escape LIKE/ILIKE wildcards so user text matches literally."""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def build_search_query(
    query: str,
    limit: int = DEFAULT_LIMIT,
    page: int = 0,
    _id: Optional[Union[str, int]] = None,
    field_tags: Optional[Dict[str, str]] = None,
) -> Tuple[str, tuple]:
    """Build the SQL statement and parameters for a search.

    Column names are only ever taken from IMAGE_COLUMNS; metadata keys and
    every user value travel as parameters.

    Returns:
        Tuple of (sql, params)
    """
    pattern = f"%{escape_like(query)}%"
    where_clauses = ["(name ILIKE %s OR filename ILIKE %s)"]
    params: list = [pattern, pattern]

    if _id is not None:
        where_clauses.append("id = %s")
        params.append(str(_id))

    for key, value in sorted((field_tags or {}).items()):
        if key in IMAGE_COLUMNS:
            where_clauses.append(f"{key} = %s")
        else:
            where_clauses.append("metadata ->> %s = %s")
            params.append(key)
        params.append(value)

    params.append(limit)
    params.append(max(0, page) * limit)

    sql = f"""
        SELECT
            id,
            name,
            link,
            folder,
            filename,
            metadata,
            created_at,
            updated_at
        FROM images
        WHERE {" AND ".join(where_clauses)}
        ORDER BY updated_at DESC NULLS LAST, id
        LIMIT %s OFFSET %s
    """

    return sql, tuple(params)


def search(
    query: str,
    limit: int = DEFAULT_LIMIT,
    page: int = 0,
    _id: Optional[Union[str, int]] = None,
    field_tags: Optional[Dict[str, str]] = None,
) -> List[ImageDocument]:
    """
    Search stored images.

    Args:
        query: Text that must appear in the image name or filename
        limit: Maximum number of images to return
        page: Zero-based page; skips page * limit matches
        _id: Restrict to a single image ID (optional)
        field_tags: Column or metadata filters, all of which must match

    Returns:
        List of ImageDocument objects, most recently updated first

    Raises:
        psycopg2.Error: When the database cannot be reached or queried
    """
    sql, params = build_search_query(query, limit, page, _id, field_tags)
    rows = fetch_all(sql, params)
    return [ImageDocument.from_row(row) for row in rows]

#!/usr/bin/env python3
"""
Database connection and helper functions for memoria.

PostgreSQL connection uses peer authentication (current Unix user) unless a
host, user and password are configured.

Usage:
    from memoria.db import get_connection, execute, fetch_one, fetch_all

    rows = fetch_all("SELECT * FROM images WHERE folder = %s", (folder,))
    image = fetch_one("SELECT * FROM images WHERE id = %s", (image_id,))
"""

from contextlib import contextmanager
from datetime import datetime
from typing import Any, Dict, List, Optional

import psycopg2
from psycopg2.extras import Json, RealDictCursor

from memoria.config import config

SCHEMA = """
CREATE TABLE IF NOT EXISTS images (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    link TEXT NOT NULL,
    folder TEXT,
    filename TEXT NOT NULL,
    metadata JSONB NOT NULL DEFAULT '{}'::jsonb,
    created_at TIMESTAMPTZ DEFAULT now(),
    updated_at TIMESTAMPTZ DEFAULT now()
);

CREATE INDEX IF NOT EXISTS images_folder_idx ON images (folder);
CREATE INDEX IF NOT EXISTS images_metadata_idx ON images USING GIN (metadata);
"""


def get_connection_string() -> str:
    """Build connection string from config."""
    parts = [f"dbname={config.db_name}"]
    if config.db_host:
        parts.append(f"host={config.db_host}")
    if config.db_port:
        parts.append(f"port={config.db_port}")
    if config.db_user:
        parts.append(f"user={config.db_user}")
    if config.db_password:
        parts.append(f"password={config.db_password}")
    return " ".join(parts)


@contextmanager
def get_connection():
    """
    Get a database connection using context manager.

    Usage:
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT 1")
            conn.commit()
    """
    conn = None
    try:
        conn = psycopg2.connect(get_connection_string())
        yield conn
    finally:
        if conn:
            conn.close()


def execute(query: str, params: Optional[tuple] = None) -> None:
    """Execute a query without returning results."""
    with get_connection() as conn:
        with conn.cursor() as cur:
            cur.execute(query, params)
        conn.commit()


def fetch_one(query: str, params: Optional[tuple] = None) -> Optional[Dict[str, Any]]:
    """Execute query and return first row as dict, or None."""
    with get_connection() as conn:
        with conn.cursor(cursor_factory=RealDictCursor) as cur:
            cur.execute(query, params)
            row = cur.fetchone()
            return dict(row) if row else None


def fetch_all(query: str, params: Optional[tuple] = None) -> List[Dict[str, Any]]:
    """Execute query and return all rows as list of dicts."""
    with get_connection() as conn:
        with conn.cursor(cursor_factory=RealDictCursor) as cur:
            cur.execute(query, params)
            return [dict(row) for row in cur.fetchall()]


def init_schema() -> None:
    """Create the images table and its indexes if missing."""
    execute(SCHEMA)


# --- Image operations ---


def insert_image(
    image_id: str,
    name: str,
    link: str,
    filename: str,
    folder: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
    created_at: Optional[datetime] = None,
) -> None:
    """Insert or replace an image record."""
    query = """
        INSERT INTO images (id, name, link, folder, filename, metadata, created_at, updated_at)
        VALUES (%s, %s, %s, %s, %s, %s, COALESCE(%s, now()), now())
        ON CONFLICT (id) DO UPDATE SET
            name = EXCLUDED.name,
            link = EXCLUDED.link,
            folder = EXCLUDED.folder,
            filename = EXCLUDED.filename,
            metadata = EXCLUDED.metadata,
            updated_at = now()
    """
    execute(
        query,
        (image_id, name, link, folder, filename, Json(metadata or {}), created_at),
    )


def delete_image(image_id: str) -> None:
    """Delete an image record by ID."""
    execute("DELETE FROM images WHERE id = %s", (image_id,))

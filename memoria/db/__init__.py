"""Database operations for memoria."""

from .connection import (
    SCHEMA,
    delete_image,
    execute,
    fetch_all,
    fetch_one,
    get_connection,
    get_connection_string,
    init_schema,
    insert_image,
)

__all__ = [
    # Connection
    "get_connection",
    "get_connection_string",
    "fetch_all",
    "fetch_one",
    "execute",
    # Schema
    "SCHEMA",
    "init_schema",
    # Image operations
    "insert_image",
    "delete_image",
]

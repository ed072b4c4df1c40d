"""Chat bot functionality for memoria."""

from .commands import (
    SearchCommand,
    SearchQuery,
    build_commands,
    dispatch,
    parse_search_query,
)
from .context import InboundMessage
from .logs import setup_logging, user_log

__all__ = [
    # Context
    "InboundMessage",
    # Commands
    "SearchCommand",
    "SearchQuery",
    "parse_search_query",
    "build_commands",
    "dispatch",
    # Logging
    "user_log",
    "setup_logging",
]

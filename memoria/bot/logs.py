"""Logging of user requests for memoria bot commands."""

import json
import logging
import sys
from typing import Any, Dict, Optional

logger = logging.getLogger("memoria.bot")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging to stderr."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def format_user_log(
    message: Any, text: str, cmd: str, context: Optional[Dict[str, Any]] = None
) -> str:
    """Build the log line for a user request.

    Example:
        [!hm_search] alice@#images: no image found with such query {"query": "rowi"}
    """
    author = getattr(message, "author", "") or "unknown"
    channel = getattr(message, "channel", "") or "unknown"
    line = f"[{cmd}] {author}@{channel}: {text}"
    if context:
        line += " " + json.dumps(context, default=str, sort_keys=True)
    return line


def user_log(
    message: Any,
    text: str,
    cmd: str,
    level: str = "info",
    context: Optional[Dict[str, Any]] = None,
) -> None:
    """Log what happened to a user request, with its structured context."""
    logger.log(LEVELS.get(level, logging.INFO), format_user_log(message, text, cmd, context))

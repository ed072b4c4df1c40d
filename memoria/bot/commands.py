"""Chat command handling for the memoria bot.

The only command is `!hm_search`:

    !hm_search "<query>" [--field value ...] [--page N] [--limit N] [--id X]

The handler sends one card per matching image to the channel the command
came from. Failures are reported back to the user and logged, never raised.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

from memoria.core.constants import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    NO_QUERY_MESSAGE,
    NO_RESULT_MESSAGE,
    RESERVED_OPTIONS,
    SEARCH_COMMAND,
    SEARCH_DESCRIPTION,
    SEARCH_FAILED_MESSAGE,
)
from memoria.core.formatting import build_card
from memoria.core.text import option_to_str, parse_flags, split_command, to_int
from memoria.search import search

from .context import InboundMessage, SearchFn, UserLogFn
from .logs import user_log

logger = logging.getLogger("memoria.bot")

CommandHandler = Callable[[InboundMessage, str], Awaitable[None]]


@dataclass
class SearchQuery:
    """Parsed `!hm_search` request."""

    query: str
    page: int = 0
    limit: int = DEFAULT_LIMIT
    id: Optional[Union[str, int]] = None
    field_tags: Dict[str, str] = field(default_factory=dict)

    def snapshot(self) -> Dict[str, Any]:
        """Request parameters as logged alongside failures."""
        return {
            "fields": dict(self.field_tags),
            "page": self.page,
            "limit": self.limit,
            "query": self.query,
            "_id": self.id,
        }


def parse_page(value: Any) -> int:
    """Convert the 1-based `--page` option to a 0-based page, never negative."""
    number = to_int(value)
    if number is None:
        return 0
    return max(0, number - 1)


def parse_limit(value: Any) -> int:
    """Read `--limit`, defaulting to DEFAULT_LIMIT and kept within [1, MAX_LIMIT]."""
    number = to_int(value)
    if not number:
        return DEFAULT_LIMIT
    return max(1, min(number, MAX_LIMIT))


def parse_id(args: Dict[str, Any]) -> Optional[str]:
    """Read the image ID from `--id` or `--_id`. Bare flags carry no ID."""
    for key in ("id", "_id"):
        value = args.get(key)
        if value is not None and not isinstance(value, bool) and value != "":
            return str(value)
    return None


def collect_field_tags(args: Dict[str, Any]) -> Dict[str, str]:
    """Every option not consumed by the command itself, as string filters."""
    return {
        key: option_to_str(value) for key, value in args.items() if key not in RESERVED_OPTIONS
    }


def parse_search_query(args: Dict[str, Any]) -> SearchQuery:
    """Build a SearchQuery from parsed flags.

    Args:
        args: Output of parse_flags, with at least one positional token

    Returns:
        SearchQuery with clamped page and limit
    """
    return SearchQuery(
        query=" ".join(args["_"]),
        page=parse_page(args.get("page")),
        limit=parse_limit(args.get("limit")),
        id=parse_id(args),
        field_tags=collect_field_tags(args),
    )


async def search_in_thread(
    *,
    query: str,
    limit: int,
    page: int,
    _id: Optional[Union[str, int]],
    field_tags: Dict[str, str],
) -> List[Any]:
    """Run the blocking database search without stalling the event loop."""
    return await asyncio.to_thread(search, query, limit, page, _id, field_tags)


class SearchCommand:
    """Handler for `!hm_search`.

    Args:
        search_fn: Async search collaborator
        log_fn: Logging collaborator for user requests
    """

    def __init__(self, search_fn: SearchFn = search_in_thread, log_fn: UserLogFn = user_log):
        self.search_fn = search_fn
        self.log_fn = log_fn

    async def __call__(self, message: InboundMessage, cmd: str) -> None:
        _, rest = split_command(message.content)

        if not rest and not message.attachments:
            await self._reply(message, SEARCH_DESCRIPTION)
            self.log_fn(message, "asked search help", cmd)
            return

        args = parse_flags(rest)

        if not args["_"]:
            await self._reply(message, NO_QUERY_MESSAGE)
            self.log_fn(message, "bad arguments: empty query", cmd, "error", {"args": args})
            return

        request = parse_search_query(args)

        try:
            results = await self.search_fn(
                query=request.query,
                limit=request.limit,
                page=request.page,
                _id=request.id,
                field_tags=request.field_tags,
            )
        except Exception as e:
            reason = str(e) or "unknown"
            text = SEARCH_FAILED_MESSAGE.format(reason=reason)
            await self._reply(message, text)
            self.log_fn(message, text, cmd, "error", {**request.snapshot(), "error": reason})
            return

        if not results:
            await self._reply(message, NO_RESULT_MESSAGE)
            self.log_fn(message, NO_RESULT_MESSAGE, cmd, "error", request.snapshot())
            return

        await self._send_cards(message, cmd, results)

    async def _reply(self, message: InboundMessage, text: str) -> None:
        """Send a text reply; delivery failures are logged, not raised."""
        try:
            await message.send(text)
        except Exception:
            logger.exception(f"Failed to deliver reply to {message.channel}")

    async def _send_card(self, message: InboundMessage, doc: Any) -> None:
        await message.send(embed=build_card(doc))

    async def _send_cards(self, message: InboundMessage, cmd: str, results: List[Any]) -> None:
        """Send one card per result concurrently; each failure stays isolated."""
        outcomes = await asyncio.gather(
            *(self._send_card(message, doc) for doc in results),
            return_exceptions=True,
        )

        failed = 0
        for doc, outcome in zip(results, outcomes):
            if isinstance(outcome, BaseException):
                failed += 1
                self.log_fn(
                    message,
                    f"failed to send image {doc.id}",
                    cmd,
                    "error",
                    {"_id": doc.id, "error": str(outcome) or type(outcome).__name__},
                )

        self.log_fn(message, f"sent {len(results) - failed} of {len(results)} images", cmd)


def build_commands(
    prefix: str,
    search_fn: SearchFn = search_in_thread,
    log_fn: UserLogFn = user_log,
) -> Dict[str, CommandHandler]:
    """Map command labels (e.g. '!hm_search') to their handlers."""
    return {
        f"{prefix}{SEARCH_COMMAND}".lower(): SearchCommand(search_fn, log_fn),
    }


async def dispatch(commands: Dict[str, CommandHandler], message: InboundMessage) -> bool:
    """Run the handler named by the message's first token.

    Returns:
        True if a command handled the message, False if none matched
    """
    cmd, _ = split_command(message.content)
    handler = commands.get(cmd.lower())
    if handler is None:
        return False

    await handler(message, cmd)
    return True

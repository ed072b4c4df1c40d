"""Inbound message model and collaborator interfaces for bot commands."""

from dataclasses import dataclass
from typing import Any, Awaitable, Dict, List, Optional, Protocol, Union


class SendFn(Protocol):
    """Delivers text or a card to the channel a message came from."""

    def __call__(self, content: Optional[str] = None, *, embed: Any = None) -> Awaitable[Any]:
        ...


class SearchFn(Protocol):
    """Looks up images; may raise with a human-readable message."""

    def __call__(
        self,
        *,
        query: str,
        limit: int,
        page: int,
        _id: Optional[Union[str, int]],
        field_tags: Dict[str, str],
    ) -> Awaitable[List[Any]]:
        ...


class UserLogFn(Protocol):
    """Records what happened to a user request."""

    def __call__(
        self,
        message: "InboundMessage",
        text: str,
        cmd: str,
        level: str = "info",
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        ...


@dataclass
class InboundMessage:
    """A chat message addressed to the bot, detached from the chat SDK."""

    content: str
    send: SendFn
    attachments: int = 0
    channel: str = ""
    author: str = ""

"""Discord client for the memoria bot.

Usage:
    from memoria.bot.client import run_bot

    run_bot()  # token from config / MEMORIA_DISCORD_TOKEN
"""

import logging
from typing import Dict, Optional

import discord

from memoria.config import config

from .commands import CommandHandler, build_commands, dispatch
from .context import InboundMessage

logger = logging.getLogger("memoria.discord")


def to_inbound(message: discord.Message) -> InboundMessage:
    """Adapt a discord.py message to the SDK-free InboundMessage."""
    return InboundMessage(
        content=message.content,
        send=message.channel.send,
        attachments=len(message.attachments),
        channel=str(message.channel),
        author=str(message.author),
    )


class MemoriaClient(discord.Client):
    """Routes prefixed chat messages to memoria commands."""

    def __init__(
        self,
        prefix: Optional[str] = None,
        commands: Optional[Dict[str, CommandHandler]] = None,
        **options,
    ):
        intents = discord.Intents.default()
        intents.message_content = True
        super().__init__(intents=intents, **options)
        self.prefix = prefix or config.command_prefix
        self.commands = commands if commands is not None else build_commands(self.prefix)

    async def on_ready(self) -> None:
        logger.info(f"Logged in as {self.user}, listening for {', '.join(self.commands)}")

    async def on_message(self, message: discord.Message) -> None:
        if message.author.bot:
            return
        if not message.content.lower().startswith(self.prefix.lower()):
            return
        await dispatch(self.commands, to_inbound(message))


def run_bot(token: Optional[str] = None) -> None:
    """Connect to Discord and serve commands until interrupted."""
    token = token or config.discord_token
    if not token:
        raise RuntimeError("Discord token not configured (set MEMORIA_DISCORD_TOKEN)")

    client = MemoriaClient()
    # Logging is configured by the caller
    client.run(token, log_handler=None)

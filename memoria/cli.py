#!/usr/bin/env python3
"""
Command-line interface for memoria.

Usage:
    memoria search 'rowi --folder cmx_20 --hobby mangap'
    memoria bot
    memoria init-db
    memoria config

Available commands:
    search      - Run !hm_search locally and print the cards
    bot         - Start the Discord bot
    init-db     - Create the images table
    config      - Show current configuration
"""

import argparse
import asyncio
import shlex
import sys

from memoria import __version__


def cmd_search(args):
    """Run the search command locally, printing cards to the terminal."""
    from memoria.bot.commands import SearchCommand
    from memoria.bot.context import InboundMessage
    from memoria.bot.logs import user_log
    from memoria.core.constants import SEARCH_COMMAND
    from memoria.core.formatting import format_card_text
    from memoria.config import config

    async def print_reply(content=None, *, embed=None):
        if embed is not None:
            print(format_card_text(embed))
        else:
            print(content)
        print()

    errors = []

    def log_and_track(message, text, cmd, level="info", context=None):
        if level == "error":
            errors.append(text)
        user_log(message, text, cmd, level, context)

    cmd = f"{config.command_prefix}{SEARCH_COMMAND}"
    message = InboundMessage(
        content=f"{cmd} {shlex.join(args.text)}",
        send=print_reply,
        channel="terminal",
        author="cli",
    )
    asyncio.run(SearchCommand(log_fn=log_and_track)(message, cmd))
    return 1 if errors else 0


def cmd_bot(args):
    """Start the Discord bot."""
    from memoria.bot.client import run_bot
    from memoria.config import config

    print("Starting memoria bot...", file=sys.stderr)
    print(f"Config source: {config.config_source}", file=sys.stderr)
    print(f"Command prefix: {config.command_prefix}", file=sys.stderr)

    try:
        run_bot(args.token)
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def cmd_init_db(args):
    """Create the images table."""
    import psycopg2

    from memoria.config import config
    from memoria.db import init_schema

    try:
        init_schema()
    except psycopg2.Error as e:
        print(f"Error: Failed to initialise database {config.db_name}: {e}", file=sys.stderr)
        return 1

    print(f"Schema ready in database {config.db_name}")
    return 0


def cmd_config(args):
    """Show current configuration."""
    from memoria.config import config

    print("memoria Configuration")
    print("=" * 50)
    print(f"Config source: {config.config_source}")
    print()

    print("[Discord]")
    print(f"  token: {'***' if config.discord_token else '(not set)'}")
    print(f"  prefix: {config.command_prefix}")
    print()

    print("[Database]")
    print(f"  name: {config.db_name}")
    print(f"  host: {config.db_host or '(Unix socket)'}")
    print(f"  port: {config.db_port}")
    print(f"  user: {config.db_user or '(current user)'}")
    print()

    print("[Logging]")
    print(f"  level: {config.log_level}")

    return 0


def main(argv=None):
    """Main CLI entry point."""
    from memoria.bot.logs import setup_logging
    from memoria.config import config

    parser = argparse.ArgumentParser(
        prog="memoria",
        description="Search the Howezt Memoria image library from chat",
    )
    parser.add_argument("--version", action="version", version=f"memoria {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- search ---
    p_search = subparsers.add_parser("search", help="Run !hm_search locally")
    p_search.add_argument(
        "text", nargs=argparse.REMAINDER, help="Command text, e.g. rowi --folder cmx_20"
    )
    p_search.set_defaults(func=cmd_search)

    # --- bot ---
    p_bot = subparsers.add_parser("bot", help="Start the Discord bot")
    p_bot.add_argument("--token", default=None, help="Discord bot token (overrides config)")
    p_bot.set_defaults(func=cmd_bot)

    # --- init-db ---
    p_init = subparsers.add_parser("init-db", help="Create the images table")
    p_init.set_defaults(func=cmd_init_db)

    # --- config ---
    p_config = subparsers.add_parser("config", help="Show current configuration")
    p_config.set_defaults(func=cmd_config)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    setup_logging(config.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())

"""
memoria - Search the Howezt Memoria image library from Discord.

This library provides:
- The `!hm_search` chat command: query parsing, search and result cards
- A PostgreSQL-backed image store searched by name, filename and tags
- A Discord client that routes `!hm_*` messages to their commands

Usage:
    from memoria.config import config
    from memoria.search import search
    from memoria.bot import SearchCommand, InboundMessage

CLI:
    memoria search 'rowi --folder cmx_20'
    memoria bot
    memoria init-db
"""

__version__ = "1.0.0"

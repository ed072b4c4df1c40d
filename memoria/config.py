#!/usr/bin/env python3
"""
Configuration management for memoria.

Loads configuration from (in order of priority):
1. Environment variables (MEMORIA_*)
2. Config file (~/.config/memoria/config.toml or ./config.toml)
3. Default values

Usage:
    from memoria.config import config

    print(config.command_prefix)
    print(config.db_name)

Environment variables:
    MEMORIA_DISCORD_TOKEN   - Bot token for the Discord gateway
    MEMORIA_PREFIX          - Prefix shared by all bot commands
    MEMORIA_DB_NAME         - PostgreSQL database name
    MEMORIA_DB_HOST         - Database host
    MEMORIA_DB_PORT         - Database port
    MEMORIA_DB_USER         - Database user
    MEMORIA_DB_PASSWORD     - Database password
    MEMORIA_LOG_LEVEL       - Logging level name (INFO, DEBUG, ...)
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # type: ignore


@dataclass
class Config:
    """Configuration container.

    Values are loaded from config.toml file. Environment variables can override.
    """

    # Discord
    discord_token: str = ""
    command_prefix: str = "!hm_"

    # Database
    db_name: str = "memoria"
    db_host: str = ""  # Empty for Unix socket
    db_port: str = "5432"
    db_user: str = ""  # Empty for current user
    db_password: str = ""  # Empty for peer auth

    # Logging
    log_level: str = "INFO"

    # Metadata
    config_source: str = "defaults"


def get_package_root() -> Path:
    """Get the root directory of the memoria checkout."""
    return Path(__file__).parent.parent.resolve()


def find_config_file() -> Optional[Path]:
    """Find config file in standard locations."""
    package_root = get_package_root()

    locations = [
        Path("config.local.toml"),  # Local override (gitignored)
        Path("config.toml"),
        package_root / "config.local.toml",
        package_root / "config.toml",
        Path.home() / ".config" / "memoria" / "config.toml",
    ]

    for path in locations:
        if path.exists():
            return path
    return None


def load_config() -> Config:
    """Load configuration from file and environment."""
    config = Config()

    config_file = find_config_file()
    if config_file:
        try:
            with open(config_file, "rb") as f:
                data = tomllib.load(f)

            if "discord" in data:
                discord = data["discord"]
                config.discord_token = discord.get("token", config.discord_token)
                config.command_prefix = discord.get("prefix", config.command_prefix)

            if "database" in data:
                db = data["database"]
                config.db_name = db.get("name", config.db_name)
                config.db_host = db.get("host", config.db_host)
                config.db_port = str(db.get("port", config.db_port))
                config.db_user = db.get("user", config.db_user)
                config.db_password = db.get("password", config.db_password)

            if "logging" in data:
                config.log_level = data["logging"].get("level", config.log_level)

            config.config_source = str(config_file)

        except Exception as e:
            print(f"Warning: Failed to load config from {config_file}: {e}", file=sys.stderr)

    # Environment variables override file config
    env_mappings = {
        "MEMORIA_DISCORD_TOKEN": "discord_token",
        "MEMORIA_PREFIX": "command_prefix",
        "MEMORIA_DB_NAME": "db_name",
        "MEMORIA_DB_HOST": "db_host",
        "MEMORIA_DB_PORT": "db_port",
        "MEMORIA_DB_USER": "db_user",
        "MEMORIA_DB_PASSWORD": "db_password",
        "MEMORIA_LOG_LEVEL": "log_level",
    }

    for env_var, attr in env_mappings.items():
        value = os.environ.get(env_var)
        if value is not None:
            setattr(config, attr, value)
            if config.config_source == "defaults":
                config.config_source = "environment"

    return config


# Global config instance - loaded once at import
config = load_config()

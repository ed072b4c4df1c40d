"""Text processing utilities for memoria commands."""

import re
import shlex
from typing import Any, Dict, List, Optional, Tuple, Union

from .constants import SMALL_WORDS

OptionValue = Union[str, bool]

NUMBER_PATTERN = re.compile(r"^-?(\d+\.?\d*|\.\d+)$")


def split_command(text: str) -> Tuple[str, str]:
    """Split a chat message into its command token and the remaining text.

    Args:
        text: Raw message content, e.g. '!hm_search rowi --page 2'

    Returns:
        Tuple of (command, rest). Both are empty strings for blank input.
    """
    if not text or not text.strip():
        return "", ""

    parts = text.strip().split(maxsplit=1)
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].strip()


def tokenize(text: str) -> List[str]:
    """Split text shell-style: whitespace separates, quotes group.

    Unbalanced quotes are not an error for chat input, the text is then
    split on whitespace only.
    """
    if not text:
        return []
    try:
        return shlex.split(text)
    except ValueError:
        return text.split()


def _is_option(token: str) -> bool:
    return token.startswith("-") and len(token) > 1 and not NUMBER_PATTERN.match(token)


def parse_flags(text: str) -> Dict[str, Any]:
    """Parse command text into positional tokens and `--key value` options.

    Supported forms:
        --key value     key = value
        --key=value     key = value
        --flag          flag = True (when no value follows)
        --no-flag       flag = False
        -k value        k = value
        --              everything after is positional

    Positional tokens are collected in order under the "_" key. When an
    option repeats, the last value wins.

    Args:
        text: Command text without the leading command token

    Returns:
        Dict with "_" (list of positional strings) plus one entry per option
    """
    args: Dict[str, Any] = {"_": []}
    tokens = tokenize(text)

    i = 0
    while i < len(tokens):
        token = tokens[i]
        i += 1

        if token == "--":
            args["_"].extend(tokens[i:])
            break

        if not _is_option(token):
            args["_"].append(token)
            continue

        key = token.lstrip("-")
        if not key:
            args["_"].append(token)
            continue

        if "=" in key:
            key, value = key.split("=", 1)
            args[key] = value
            continue

        if key.startswith("no-") and len(key) > 3:
            args[key[3:]] = False
            continue

        if i < len(tokens) and not _is_option(tokens[i]) and tokens[i] != "--":
            args[key] = tokens[i]
            i += 1
        else:
            args[key] = True

    return args


def to_int(value: Any) -> Optional[int]:
    """Interpret an option value as an integer, or None if it isn't numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(value)
    try:
        return int(float(str(value)))
    except (ValueError, OverflowError):
        return None


def option_to_str(value: OptionValue) -> str:
    """Render an option value the way a user typed it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def title_case(text: Any) -> str:
    """Title-case an identifier or phrase.

    camelCase, snake_case, kebab-case and dotted words are split into
    separate words first, so "artistName" and "artist_name" both become
    "Artist Name". Small words stay lowercase unless they open the title.
    """
    if text is None:
        return ""

    spaced = re.sub(r"([a-z0-9])([A-Z])", r"\1 \2", str(text))
    spaced = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1 \2", spaced)
    words = [w for w in re.split(r"[\s_.\-]+", spaced) if w]

    titled = []
    for index, word in enumerate(words):
        lower = word.lower()
        if index > 0 and lower in SMALL_WORDS:
            titled.append(lower)
        else:
            titled.append(lower[0].upper() + lower[1:])
    return " ".join(titled)


def truncate_text(text: str, max_length: int, suffix: str = "...") -> str:
    """Truncate text to max length, keeping the suffix within the limit."""
    if not text or len(text) <= max_length:
        return text
    return text[: max_length - len(suffix)] + suffix

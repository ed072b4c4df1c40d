"""Core utilities shared across memoria modules."""

from .constants import (
    CARD_COLOR,
    CARD_FOOTER,
    DEFAULT_LIMIT,
    MAX_LIMIT,
    RESERVED_OPTIONS,
    SEARCH_DESCRIPTION,
)
from .formatting import build_card, field_value, format_card_text
from .text import (
    option_to_str,
    parse_flags,
    split_command,
    title_case,
    to_int,
    tokenize,
    truncate_text,
)

__all__ = [
    # Constants
    "CARD_COLOR",
    "CARD_FOOTER",
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "RESERVED_OPTIONS",
    "SEARCH_DESCRIPTION",
    # Formatting
    "build_card",
    "field_value",
    "format_card_text",
    # Text
    "split_command",
    "tokenize",
    "parse_flags",
    "to_int",
    "option_to_str",
    "title_case",
    "truncate_text",
]

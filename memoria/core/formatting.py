"""Card formatting for search results."""

from typing import Any, List

import discord

from .constants import (
    CARD_COLOR,
    CARD_FOOTER,
    EMBED_MAX_FIELDS,
    EMBED_MAX_TOTAL,
    FIELD_NAME_MAX,
    FIELD_VALUE_MAX,
    MISSING_VALUE,
    ROOT_FOLDER_LABEL,
    TITLE_MAX,
    UNNAMED_FIELD,
)
from .text import title_case, truncate_text


def field_value(value: Any, default: str = MISSING_VALUE) -> str:
    """Render a value for an embed field.

    Empty values fall back to the default, lists are comma-joined and the
    result is cut to the Discord field length limit.
    """
    if not value:
        return default
    if isinstance(value, (list, tuple)):
        value = ", ".join(str(v) for v in value)
    return truncate_text(str(value), FIELD_VALUE_MAX)


def build_card(doc: Any) -> discord.Embed:
    """Build the result card for one image.

    Args:
        doc: ImageDocument (or any object with the same attributes)

    Returns:
        Embed with the image, its core fields, one field per metadata key,
        a timestamp and the library footer
    """
    embed = discord.Embed(
        colour=CARD_COLOR,
        title=truncate_text(title_case(doc.name), TITLE_MAX),
        url=doc.link,
        timestamp=discord.utils.utcnow(),
    )
    embed.set_thumbnail(url=doc.link)
    embed.set_image(url=doc.link)
    embed.set_footer(text=CARD_FOOTER, icon_url=doc.link)

    core_fields = [
        ("ID", field_value(doc.id)),
        ("Name", field_value(doc.name)),
        ("Folder", field_value(doc.folder, ROOT_FOLDER_LABEL)),
        ("Filename", field_value(doc.filename)),
        ("Created At", field_value(doc.created_at_human)),
        ("Updated At", field_value(doc.updated_at_human)),
    ]
    for name, value in core_fields:
        embed.add_field(name=name, value=value, inline=False)

    # Metadata fields stop at whichever Discord limit is reached first
    metadata = doc.metadata or {}
    for key, raw in metadata.items():
        if len(embed.fields) >= EMBED_MAX_FIELDS:
            break
        name = truncate_text(title_case(key) or UNNAMED_FIELD, FIELD_NAME_MAX)
        value = field_value(raw)
        if len(embed) + len(name) + len(value) > EMBED_MAX_TOTAL:
            break
        embed.add_field(name=name, value=value, inline=False)

    return embed


def format_card_text(embed: discord.Embed) -> str:
    """Render a card as plain text for terminal output."""
    lines: List[str] = [f"{embed.title} <{embed.url}>"]
    for embed_field in embed.fields:
        lines.append(f"  {embed_field.name}: {embed_field.value}")
    if embed.footer and embed.footer.text:
        lines.append(f"  -- {embed.footer.text}")
    return "\n".join(lines)

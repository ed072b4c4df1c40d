"""Shared constants for memoria."""

SEARCH_COMMAND = "search"

# Help text sent for a bare `!hm_search`
SEARCH_DESCRIPTION = """!hm_search searches for images on database.

This command requires a query search, and optional fields to narrow your search explicitly. Only maximum of 5 images will be sent to you at one time, but you can search next set of images by giving `--page` key.

The syntax looks like this:

> !hm_search "query to search" [--OptionalFields] [--OptionalOptions]

Usage example:

Simple search:
```
!hm_search rowi
```
This will search in the database for the name or filename contains "rowi"

Search with Fields:
```
!hm_search rowi --folder cmx_20 --hobby mangap
```
This will search in the database for the name or filename `rowi`, that is stored in folder `cmx_20` and has the tag `hobby: mangap`

Search next set of images:
```
!hm_search rowi --page 2
```
This will return next set of images"""

# User-facing replies
NO_QUERY_MESSAGE = (
    "No query search detected from your message request. "
    "Please type only `!hm_search` in the text box for query info"
)
NO_RESULT_MESSAGE = "no image found with such query"
SEARCH_FAILED_MESSAGE = "something failed when searching images. reason: {reason}"

# Result paging
DEFAULT_LIMIT = 5
MAX_LIMIT = 5

# Options consumed by the search command itself, never forwarded as field tags.
# "_" holds positional tokens and "$0" is the program-name placeholder.
RESERVED_OPTIONS = frozenset({"_", "$0", "page", "limit", "id", "_id"})

# Card layout
CARD_COLOR = 0x0099FF
CARD_FOOTER = "Howezt Memoria"
ROOT_FOLDER_LABEL = "[root]"
MISSING_VALUE = "null"

# Discord rejects titles, field names and field values longer than these
TITLE_MAX = 256
FIELD_NAME_MAX = 256
FIELD_VALUE_MAX = 1024

# Discord rejects embeds whose text adds up to more than this
EMBED_MAX_TOTAL = 6000

# Field name shown for metadata keys that title-case to nothing
UNNAMED_FIELD = "(unnamed)"

# Discord rejects embeds with more fields than this
EMBED_MAX_FIELDS = 25

# Columns of the images table that field tags may filter directly.
# Any other tag is matched against the metadata document.
IMAGE_COLUMNS = frozenset({"name", "link", "folder", "filename"})

# Words kept lowercase by title casing unless they open the title
SMALL_WORDS = frozenset(
    {
        "a",
        "an",
        "and",
        "as",
        "at",
        "but",
        "by",
        "for",
        "if",
        "in",
        "nor",
        "of",
        "on",
        "or",
        "so",
        "the",
        "to",
        "up",
        "via",
        "vs",
        "yet",
    }
)

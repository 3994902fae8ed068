"""Constants used throughout the event-to-blocks conversion."""

from typing import FrozenSet

# Markup tag names (compared case-insensitively)
BLOCK_TAG = "block"
SHADOW_TAG = "shadow"
FIELD_TAG = "field"
VALUE_TAG = "value"
STATEMENT_TAG = "statement"
NEXT_TAG = "next"

# Tags that link a block input to a nested block
INPUT_TAGS: FrozenSet[str] = frozenset({VALUE_TAG, STATEMENT_TAG})

# Attribute names on block and slot elements
ID_ATTR = "id"
TYPE_ATTR = "type"
NAME_ATTR = "name"

# Attribute names on a block creation event
EVENT_BLOCK_ID = "blockId"
EVENT_XML = "xml"
OUTER_HTML = "outerHTML"

# Number of distinct markup payloads kept by the parse cache
PARSE_CACHE_SIZE = 200

# BeautifulSoup tree builder; lower-cases tag and attribute names like the editor's serializer
MARKUP_PARSER = "html.parser"

"""Adapter between block creation events and the runtime block representation.

An event is anything shaped like the editor's create event: a structured
object with a string ``blockId`` and an object ``xml`` whose ``outerHTML``
holds the markup of the created blocks. Mappings and attribute-style objects
are both accepted.
"""

from collections.abc import Mapping
from typing import Any, List, Optional

from bs4.element import Tag

from .block_record import BlockRecord
from .constants import EVENT_BLOCK_ID, EVENT_XML, OUTER_HTML
from .flattener import flatten
from .markup_parser import parse_dom

_MISSING = object()

# Values that never count as a structured event or xml payload
PRIMITIVE_TYPES = (str, bytes, bytearray, int, float, complex, bool)


def _lookup(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name, _MISSING)
    return getattr(obj, name, _MISSING)


def _is_structured(value: Any) -> bool:
    return value is not _MISSING and value is not None and not isinstance(value, PRIMITIVE_TYPES)


def is_create_event(event: Any) -> bool:
    """Check the event shape: a structured object with a string blockId and an object xml."""
    if not _is_structured(event):
        return False
    if not isinstance(_lookup(event, EVENT_BLOCK_ID), str):
        return False
    return _is_structured(_lookup(event, EVENT_XML))


def event_block_id(event: Any) -> Optional[str]:
    block_id = _lookup(event, EVENT_BLOCK_ID)
    return block_id if isinstance(block_id, str) else None


def event_markup(event: Any) -> str:
    """Return the outer markup carried by an event's xml payload.

    A missing or non-string payload yields an empty document.
    """
    xml = _lookup(event, EVENT_XML)
    if isinstance(xml, Tag):
        return str(xml)
    markup = _lookup(xml, OUTER_HTML)
    return markup if isinstance(markup, str) else ""


def adapt_create_event(event: Any) -> Optional[List[BlockRecord]]:
    """Return the blocks introduced by a create event, or None if it is not one.

    Raises:
        MalformedMarkupError: If the event's markup is malformed.
    """
    if not is_create_event(event):
        return None
    return flatten(parse_dom(event_markup(event)))

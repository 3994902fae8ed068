"""Reading markup and event batches from disk and writing converted blocks."""

import json
import os
from typing import Any, Dict, List, Optional

from .block_record import BlockRecord
from .diagnostics import DiagnosticContext
from .event_adapter import event_block_id, event_markup, is_create_event
from .flattener import flatten, flatten_each
from .markup_parser import parse_dom
from .utils import load_json_file, read_text_file, write_json_file


def convert_markup(
    markup: str,
    diag_ctx: Optional[DiagnosticContext] = None,
    skip_malformed: bool = False,
) -> List[BlockRecord]:
    """Convert a markup document into block records.

    With skip_malformed, malformed top-level blocks are dropped and reported on
    diag_ctx instead of failing the whole document.
    """
    nodes = parse_dom(markup)
    if skip_malformed:
        return flatten_each(nodes, diag_ctx)
    return flatten(nodes)


def convert_events(
    events: List[Any],
    diag_ctx: Optional[DiagnosticContext] = None,
    skip_malformed: bool = False,
) -> List[Dict[str, Any]]:
    """Convert a batch of editor events.

    Returns one entry per block creation event, holding the event's blockId
    and its block records as runtime mappings. Other events are skipped.
    """
    ctx = diag_ctx if diag_ctx is not None else DiagnosticContext()
    results: List[Dict[str, Any]] = []
    for index, event in enumerate(events):
        ctx.set_event(index)
        if not is_create_event(event):
            ctx.info("Skipped event (not a block creation event)")
            continue
        records = convert_markup(event_markup(event), ctx, skip_malformed)
        if not records:
            ctx.warning("Block creation event produced no blocks")
        results.append({
            "blockId": event_block_id(event),
            "blocks": [record.to_dict() for record in records],
        })
    ctx.set_event(None)
    return results


def load_events_file(path: str) -> List[Any]:
    """Load events from a JSON file holding a list of events or {"events": [...]}."""
    if not os.path.exists(path):
        raise FileNotFoundError(path)
    data = load_json_file(path, None)
    if isinstance(data, dict) and "events" in data:
        data = data["events"]
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of events")
    return data


def load_markup_file(path: str) -> str:
    return read_text_file(path)


def blocks_payload(records: List[BlockRecord]) -> List[Dict[str, Any]]:
    return [record.to_dict() for record in records]


def write_blocks_file(path: str, payload: Any, indent: Optional[int] = 4) -> None:
    write_json_file(path, payload, indent=indent)


def dumps_blocks(payload: Any, indent: Optional[int] = 4) -> str:
    return json.dumps(payload, indent=indent)

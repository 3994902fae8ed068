#!/usr/bin/env python3
"""
Block Event Converter

Converts block creation events from the visual block editor into the flat,
id-indexed block records used by the runtime.

Usage:
    python convert.py blocks.xml                      # raw block markup
    python convert.py events.json --events            # batch of editor events
    python convert.py blocks.xml --format outline     # readable stack outline
    python convert.py events.json --events --skip-malformed --output out.json
"""

import argparse
import sys
from typing import Any, List, Optional

from blockadapter.blocks_to_text import render_outline
from blockadapter.block_record import BlockRecord
from blockadapter.diagnostics import DiagnosticCollector, DiagnosticContext
from blockadapter.errors import MalformedMarkupError
from blockadapter.project_io import (
    blocks_payload,
    convert_events,
    convert_markup,
    dumps_blocks,
    load_events_file,
    load_markup_file,
    write_blocks_file,
)


def error(msg: str) -> None:
    """Print an error message and exit."""
    print(f"Error: {msg}", file=sys.stderr)
    sys.exit(1)


def warn(msg: str) -> None:
    """Print a warning message."""
    print(f"Warning: {msg}", file=sys.stderr)


def info(msg: str) -> None:
    """Print an info message."""
    print(msg)


def emit(text: str, output: Optional[str]) -> None:
    if output is None:
        sys.stdout.write(text if text.endswith("\n") else text + "\n")
        return
    with open(output, "w", encoding="utf-8") as handle:
        handle.write(text)


def convert_markup_file(args: argparse.Namespace, diag_ctx: DiagnosticContext) -> None:
    try:
        markup = load_markup_file(args.input)
    except OSError as exc:
        error(f"Cannot read {args.input}: {exc}")
    records: List[BlockRecord] = convert_markup(markup, diag_ctx, args.skip_malformed)

    if args.format == "outline":
        emit(render_outline(records), args.output)
    elif args.output:
        write_blocks_file(args.output, blocks_payload(records), indent=args.indent)
    else:
        emit(dumps_blocks(blocks_payload(records), indent=args.indent), None)


def convert_events_file(args: argparse.Namespace, diag_ctx: DiagnosticContext) -> None:
    try:
        events: List[Any] = load_events_file(args.input)
    except (OSError, ValueError) as exc:
        error(f"Cannot load events from {args.input}: {exc}")
    results = convert_events(events, diag_ctx, args.skip_malformed)

    if args.format == "outline":
        sections = []
        for entry in results:
            records = [BlockRecord.from_dict(block) for block in entry["blocks"]]
            sections.append(f"# {entry['blockId']}\n{render_outline(records)}")
        emit("\n".join(sections), args.output)
    elif args.output:
        write_blocks_file(args.output, results, indent=args.indent)
    else:
        emit(dumps_blocks(results, indent=args.indent), None)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert block editor create events into flat block records.")
    parser.add_argument("input", help="Path to a block markup file, or an events JSON file with --events")
    parser.add_argument("--events", action="store_true", help="Treat the input as a JSON list of editor events")
    parser.add_argument("--output", "-o", default=None, help="Write the result to this file instead of stdout")
    parser.add_argument("--format", choices=["json", "outline"], default="json", help="Output format")
    parser.add_argument("--indent", type=int, default=4, help="JSON indentation")
    parser.add_argument(
        "--skip-malformed",
        action="store_true",
        help="Drop malformed top-level blocks instead of failing the conversion",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Also report skipped events")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    diag_ctx = DiagnosticContext(source=args.input)
    collector = DiagnosticCollector()

    try:
        if args.events:
            convert_events_file(args, diag_ctx)
        else:
            convert_markup_file(args, diag_ctx)
    except MalformedMarkupError as exc:
        error(f"{args.input}: {exc}")

    collector.add_context_diagnostics(diag_ctx)
    for diag in collector.reportable(include_info=args.verbose):
        print(diag, file=sys.stderr)
    if collector.has_errors() or collector.has_warnings():
        warn(collector.summary())
    if args.output:
        info(f"Successfully converted {args.input} to {args.output}")


if __name__ == "__main__":
    main()

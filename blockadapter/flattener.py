"""Flattening block markup trees into id-indexed block records.

Each top-level ``<block>`` element is walked recursively. Nested ``<value>``,
``<statement>`` and ``<next>`` slots are resolved to the block they hold (a
real ``<block>`` wins over its ``<shadow>`` placeholder) and linked by id;
``<field>`` children become field values. All records of one conversion land
in a single mapping, where a later record with the same id replaces an
earlier one.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from .block_record import BlockRecord, FieldValue, InputLink
from .constants import (
    BLOCK_TAG,
    FIELD_TAG,
    ID_ATTR,
    INPUT_TAGS,
    NAME_ATTR,
    NEXT_TAG,
    SHADOW_TAG,
    TYPE_ATTR,
)
from .diagnostics import DiagnosticContext
from .errors import MalformedMarkupError, describe_element
from .markup_node import MarkupNode


def find_child_blocks(slot: MarkupNode) -> Tuple[Optional[MarkupNode], Optional[MarkupNode]]:
    """Return the first nested <block> and the first nested <shadow> of a slot element."""
    block_node: Optional[MarkupNode] = None
    shadow_node: Optional[MarkupNode] = None
    for child in slot.element_children():
        if block_node is None and child.has_tag(BLOCK_TAG):
            block_node = child
        elif shadow_node is None and child.has_tag(SHADOW_TAG):
            shadow_node = child
    return block_node, shadow_node


def effective_child_block(slot: MarkupNode) -> Optional[MarkupNode]:
    """Return the block plugged into a slot, falling back to its shadow."""
    block_node, shadow_node = find_child_blocks(slot)
    return block_node if block_node is not None else shadow_node


def require_attribute(node: MarkupNode, attribute: str, block_id: Optional[str]) -> str:
    value = node.get(attribute)
    if value is None:
        tag = (node.tag_name or "").lower()
        where = f" in block '{block_id}'" if block_id is not None else ""
        raise MalformedMarkupError(
            f"<{tag}>{where} is missing its '{attribute}' attribute",
            construct=tag,
            block_id=block_id,
        )
    return value


class BlockTreeFlattener:
    """Collects the block records of one conversion.

    A flattener owns its output mapping, so every conversion should use a
    fresh instance.
    """

    def __init__(self) -> None:
        self.blocks: Dict[str, BlockRecord] = {}

    def add_roots(self, root_nodes: Iterable[MarkupNode]) -> None:
        """Visit every top-level <block> element among the root nodes."""
        for node in root_nodes:
            if node.has_tag(BLOCK_TAG):
                self.visit(node, 0)

    def visit(self, node: MarkupNode, depth: int) -> BlockRecord:
        """Convert a block element and everything nested in it."""
        block_id = require_attribute(node, ID_ATTR, None)
        record = BlockRecord(
            id=block_id,
            opcode=require_attribute(node, TYPE_ATTR, block_id),
            top_level=depth == 0,
        )
        # Registered before descending so a nested block reusing this id replaces it
        self.blocks[block_id] = record

        for child in node.element_children():
            if child.has_tag(FIELD_TAG):
                field_value = self._read_field(child, record)
                record.fields[field_value.name] = field_value
            elif any(child.has_tag(tag) for tag in INPUT_TAGS):
                name = require_attribute(child, NAME_ATTR, record.id)
                target = self._visit_slot(child, record, depth, name)
                record.inputs[name] = InputLink(name=name, block=target.id)
            elif child.has_tag(NEXT_TAG):
                target = self._visit_slot(child, record, depth)
                record.next = target.id

        return record

    def _visit_slot(
        self,
        slot: MarkupNode,
        record: BlockRecord,
        depth: int,
        name: Optional[str] = None,
    ) -> BlockRecord:
        target = effective_child_block(slot)
        if target is None:
            tag = slot.tag_name.lower()
            raise MalformedMarkupError(
                f"{describe_element(tag, name)} in block '{record.id}' has no nested <block> or <shadow>",
                construct=tag,
                name=name,
                block_id=record.id,
            )
        return self.visit(target, depth + 1)

    def _read_field(self, field_node: MarkupNode, record: BlockRecord) -> FieldValue:
        name = require_attribute(field_node, NAME_ATTR, record.id)
        if not field_node.children or field_node.children[0].is_element:
            raise MalformedMarkupError(
                f"{describe_element(FIELD_TAG, name)} in block '{record.id}' has no text value",
                construct=FIELD_TAG,
                name=name,
                block_id=record.id,
            )
        return FieldValue(name=name, value=field_node.children[0].text_content())

    def records(self) -> List[BlockRecord]:
        return list(self.blocks.values())


def flatten(root_nodes: Iterable[MarkupNode]) -> List[BlockRecord]:
    """Flatten all top-level blocks among root_nodes into a list of block records.

    Raises:
        MalformedMarkupError: If any block is malformed. Nothing is returned
            for the other blocks in that case.
    """
    flattener = BlockTreeFlattener()
    flattener.add_roots(root_nodes)
    return flattener.records()


def flatten_each(
    root_nodes: Iterable[MarkupNode],
    diag_ctx: Optional[DiagnosticContext] = None,
) -> List[BlockRecord]:
    """Flatten top-level blocks one at a time, dropping the ones that are malformed.

    Each dropped block is reported as an error on diag_ctx when one is given.
    Records from the remaining blocks are merged in visiting order.
    """
    blocks: Dict[str, BlockRecord] = {}
    for node in root_nodes:
        if not node.has_tag(BLOCK_TAG):
            continue
        flattener = BlockTreeFlattener()
        try:
            flattener.visit(node, 0)
        except MalformedMarkupError as exc:
            if diag_ctx is not None:
                diag_ctx.error(f"Dropped top-level block ({exc})", block_id=node.get(ID_ATTR))
            continue
        blocks.update(flattener.blocks)
    return list(blocks.values())

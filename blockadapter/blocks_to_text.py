from typing import Dict, Iterable, List, Optional, Set

from .block_record import BlockRecord

INDENT = "    "


def format_fields(record: BlockRecord) -> str:
    return " ".join(f"[{field.name}: {field.value}]" for field in record.fields.values())


def generate_block_code(
    block_id: str,
    blocks: Dict[str, BlockRecord],
    indent_level: int = 0,
    visited: Optional[Set[str]] = None,
) -> str:
    """Render one block and the stacks plugged into its inputs."""
    indent = INDENT * indent_level
    if block_id not in blocks:
        return f"{indent}<missing block {block_id}>\n"

    visited = visited if visited is not None else set()
    if block_id in visited:
        return f"{indent}<cycle at {block_id}>\n"
    visited.add(block_id)

    block = blocks[block_id]
    fields = format_fields(block)
    result = f"{indent}{block.opcode}" + (f" {fields}" if fields else "") + "\n"

    for input_name, link in block.inputs.items():
        result += f"{indent}{INDENT}{input_name}:\n"
        result += generate_stack_code(link.block, blocks, indent_level + 2, visited)

    return result


def generate_stack_code(
    start_id: Optional[str],
    blocks: Dict[str, BlockRecord],
    indent_level: int = 0,
    visited: Optional[Set[str]] = None,
) -> str:
    """Render a block and every block chained after it through next."""
    visited = visited if visited is not None else set()
    result = ""
    current = start_id
    while current:
        result += generate_block_code(current, blocks, indent_level, visited)
        block = blocks.get(current)
        if block is None or block.next in visited:
            if block is not None and block.next:
                result += f"{INDENT * indent_level}<cycle at {block.next}>\n"
            break
        current = block.next
    return result


def render_outline(records: Iterable[BlockRecord]) -> str:
    """Render converted blocks as an indented outline, one paragraph per top-level stack."""
    blocks = {record.id: record for record in records}
    top_level = [bid for bid, blk in blocks.items() if blk.top_level]

    visited: Set[str] = set()
    stacks: List[str] = []
    for start_id in top_level:
        stacks.append(generate_stack_code(start_id, blocks, 0, visited))

    return "\n".join(stacks)

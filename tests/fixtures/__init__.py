"""Sample block markup and editor events for tests."""

from typing import Any, Dict

GREEN_FLAG = '<block id="a" type="event_whengreenflag"></block>'

FIELD_BLOCK = '<block id="a" type="x"><field name="VAR">42</field></block>'

CHAINED = '<block id="a" type="x"><next><block id="b" type="y"></block></next></block>'

SHADOW_ONLY = (
    '<block id="move" type="motion_movesteps">'
    '<value name="STEPS">'
    '<shadow id="steps" type="math_number"><field name="NUM">10</field></shadow>'
    '</value>'
    '</block>'
)

BLOCK_OVER_SHADOW = (
    '<block id="say" type="looks_say">'
    '<value name="MESSAGE">'
    '<shadow id="msg_shadow" type="text"><field name="TEXT">Hello!</field></shadow>'
    '<block id="answer" type="sensing_answer"></block>'
    '</value>'
    '</block>'
)

FOREVER_SCRIPT = (
    '<block id="hat" type="event_whenflagclicked">'
    '<next>'
    '<block id="loop" type="control_forever">'
    '<statement name="SUBSTACK">'
    '<block id="turn" type="motion_turnright">'
    '<value name="DEGREES">'
    '<shadow id="deg" type="math_number"><field name="NUM">15</field></shadow>'
    '</value>'
    '<next><block id="wait" type="control_wait">'
    '<value name="DURATION">'
    '<shadow id="secs" type="math_positive_number"><field name="NUM">1</field></shadow>'
    '</value>'
    '</block></next>'
    '</block>'
    '</statement>'
    '</block>'
    '</next>'
    '</block>'
)

MALFORMED_FIELD = '<block id="bad" type="x"><field name="X"></field></block>'

MALFORMED_VALUE = '<block id="bad" type="x"><value name="NUM"></value></block>'


def create_event(markup: str, block_id: str = "a") -> Dict[str, Any]:
    """Build a create event shaped like the editor's, with the markup as outerHTML."""
    return {"type": "create", "blockId": block_id, "xml": {"outerHTML": markup}}


def chain_markup(length: int) -> str:
    """Build one stack of length blocks, each nested in the previous block's <next>."""
    opening = "".join(
        f'<block id="b{i}" type="motion_movesteps"><field name="STEPS">{i}</field><next>'
        for i in range(length - 1)
    )
    closing = "</next></block>" * (length - 1)
    last = f'<block id="b{length - 1}" type="control_stop"></block>'
    return opening + last + closing

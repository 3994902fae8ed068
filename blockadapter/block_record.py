"""Block records produced by flattening block markup."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class InputLink:
    """An input slot on a block and the id of the block plugged into it."""
    name: str
    block: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "block": self.block}


@dataclass
class FieldValue:
    """A field on a block and its text value."""
    name: str
    value: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "value": self.value}


@dataclass
class BlockRecord:
    """A single block in the flat, id-indexed representation used by the runtime."""
    id: str
    opcode: str
    inputs: Dict[str, InputLink] = field(default_factory=dict)
    fields: Dict[str, FieldValue] = field(default_factory=dict)
    next: Optional[str] = None
    top_level: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Return the runtime-facing mapping for this block."""
        return {
            "id": self.id,
            "opcode": self.opcode,
            "inputs": {name: link.to_dict() for name, link in self.inputs.items()},
            "fields": {name: value.to_dict() for name, value in self.fields.items()},
            "next": self.next,
            "topLevel": self.top_level,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BlockRecord":
        inputs = data.get("inputs", {})
        fields = data.get("fields", {})
        return cls(
            id=data["id"],
            opcode=data["opcode"],
            inputs={name: InputLink(entry["name"], entry["block"]) for name, entry in inputs.items()},
            fields={name: FieldValue(entry["name"], entry["value"]) for name, entry in fields.items()},
            next=data.get("next"),
            top_level=bool(data.get("topLevel", False)),
        )

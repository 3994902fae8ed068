"""Errors raised while flattening block markup."""

from typing import Optional


class MalformedMarkupError(ValueError):
    """Raised when block markup is missing a nested element, text or attribute it needs."""

    def __init__(
        self,
        message: str,
        construct: str,
        name: Optional[str] = None,
        block_id: Optional[str] = None,
    ) -> None:
        self.construct = construct
        self.name = name
        self.block_id = block_id
        super().__init__(f"Malformed markup: {message}")


def describe_element(tag: str, name: Optional[str] = None) -> str:
    """Format an element the way it appears in markup, e.g. <value name="X">."""
    if name is None:
        return f"<{tag}>"
    return f'<{tag} name="{name}">'
